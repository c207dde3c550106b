"""Markdown templates for the generated activation section.

Templates use str.format() with named placeholders. Every rendered
document starts at the marker header so the merger can find it.
"""

from __future__ import annotations

# ── Section header ────────────────────────────────────────────────

HEADER = """\
{marker}

**INSTRUCCIÓN PARA COPILOT:** Cuando detectes cualquiera de estas palabras clave en el prompt del usuario, activa automáticamente las instrucciones correspondientes:

---
"""

# ── One block per instruction document ────────────────────────────

ENTRY = """\
### {display_title}

**Palabras clave:** {keywords}  
**→ ACTIVAR:** [{file_name}]({activation_path})  
**Acción:** {action}

"""

# ── Activation rules ──────────────────────────────────────────────

FOOTER = """
---

### 🤖 Para Copilot: Reglas de Activación Automática

1. **Detecta las palabras clave** en el prompt del usuario (sin importar mayúsculas/minúsculas)
2. **Activa automáticamente** las instrucciones del archivo correspondiente
3. **Sigue las instrucciones específicas** del archivo referenciado
4. **No requieras** que el usuario mencione explícitamente las instrucciones
5. **Ejecuta la tarea** según el flujo definido en las instrucciones específicas
"""

# ── Fallback when no categories exist ─────────────────────────────

DEFAULT_INSTRUCTIONS_TEMPLATE = """\
{marker}

**INSTRUCCIÓN PARA PROJEX SNIPPETS:** Cuando detectes cualquiera de estas palabras clave en el prompt del usuario, activa automáticamente las instrucciones correspondientes:

---

### 🤖 Para Copilot: Reglas de Activación Automática

1. **Detecta las palabras clave** en el prompt del usuario (sin importar mayúsculas/minúsculas)
2. **Activa automáticamente** las instrucciones del archivo correspondiente
3. **Sigue las instrucciones específicas** del archivo referenciado
4. **No requieras** que el usuario mencione explícitamente las instrucciones
5. **Ejecuta la tarea** según el flujo definido en las instrucciones específicas"""


def format_keywords(keywords: list[str]) -> str:
    """Quote and backtick each keyword, joined by pipes."""
    return " | ".join(f'`"{k}"`' for k in keywords)
