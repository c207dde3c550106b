"""Canonical category definitions — single source of truth.

Keys are alias words joined by spaces ("doc vtex" for the ``doc-vtex``
alias). Lookups try the full key first, then the base alias.
"""

from __future__ import annotations

DEFAULT_EMOJI = "🔹"

# Top-level content folders that are not aliases
NON_ALIAS_FOLDERS = {
    "node_modules",
    "templates",
    "pull-request",
    "documentation",
    "backlog",
    "unit-testing",
}

CATEGORIES: dict[str, dict] = {
    "pr": {
        "emoji": "📋",
        "description": "Pull Request y Control de Versiones",
        "keywords": ["pr", "pull request", "crear pr", "generar pr"],
        "action": "Automatiza la generación del contenido de Pull Request basándose en el template y el historial de cambios",
    },
    "commit": {
        "emoji": "📋",
        "description": "Conventional Commits",
        "keywords": ["commit", "conventional commit", "formato commit", "mensaje commit"],
        "action": "Aplica las reglas de Conventional Commits 1.0.0 para estructurar mensajes de commit consistentes",
    },
    "doc": {
        "emoji": "📚",
        "description": "Documentación General",
        "keywords": ["doc", "documentación", "generar docs", "crear documentación"],
        "action": "Genera documentación detallada en la carpeta docs con diagramas Mermaid y actualiza README.md",
    },
    "doc vtex": {
        "description": "Documentación VTEX IO",
        "keywords": ["doc vtex", "vtex documentation", "documentación vtex", "vtex io"],
        "action": "Especializada en documentación para proyectos VTEX IO, incluyendo componentes, props y APIs",
    },
    "vtex": {
        "emoji": "🏪",
        "description": "Documentación VTEX IO",
        "action": "Especializada en documentación para proyectos VTEX IO, incluyendo componentes, props y APIs",
    },
    "qa": {
        "emoji": "🧪",
        "description": "QA y Testing",
        "keywords": ["qa", "qa-hu", "resumen qa", "testing guide", "qa guide"],
        "action": "Genera resumen estructurado para QA con casos de prueba, puntos críticos y regresiones a verificar",
    },
    "coverage": {
        "emoji": "🧪",
        "description": "Cobertura de Tests",
        "keywords": ["coverage", "test-coverage", "cobertura", "sonar quality gate", "cobertura tests"],
        "action": "Mejora sistemáticamente la cobertura de tests hasta alcanzar el 87% requerido por SonarQube",
    },
}


def alias_words(alias: str) -> str:
    """``doc-vtex`` -> ``doc vtex``."""
    return alias.replace("-", " ")


def base_alias(alias: str) -> str:
    return alias.split("-")[0]


def default_title(alias: str) -> str:
    """Capitalize the alias and turn separators into spaces."""
    words = alias_words(alias)
    return words[:1].upper() + words[1:]


def _lookup(alias: str, key: str, fall_back_to_base: bool = True):
    entry = CATEGORIES.get(alias_words(alias), {})
    if key in entry:
        return entry[key]
    if fall_back_to_base:
        return CATEGORIES.get(base_alias(alias), {}).get(key)
    return None


def emoji_for(alias: str) -> str:
    return CATEGORIES.get(base_alias(alias), {}).get("emoji", DEFAULT_EMOJI)


def description_for(alias: str) -> str:
    return _lookup(alias, "description") or default_title(alias)


def keywords_for(alias: str) -> list[str]:
    # Two-level aliases never inherit the base alias's keywords
    keywords = _lookup(alias, "keywords", fall_back_to_base=False)
    return list(keywords) if keywords else [alias_words(alias)]


def action_for(alias: str) -> str:
    return _lookup(alias, "action") or f"Ejecuta instrucciones específicas para {alias_words(alias)}"
