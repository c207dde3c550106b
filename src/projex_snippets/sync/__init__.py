"""Instruction sync — copies bundled content into the workspace .github folder.

The main document keeps user-written text above the activation section:

    # My team notes            <- user content, preserved
    ## 🎯 Sistema de Activación por Palabras Clave
    ...                        <- generated, replaced on every sync

Category and prompt files are plain copies, written only when their
content differs. Nothing in the destination is ever deleted.
"""

# Marker header that starts the generated section of the main document
MARKER = "## 🎯 Sistema de Activación por Palabras Clave"
