"""Projex Snippets — instruction and prompt sync for Copilot workspaces.

Copies the bundled instruction categories and prompt files into a
workspace's .github folder and keeps the generated keyword-activation
section of copilot-instructions.md current, without touching anything
the user wrote above it.
"""

__version__ = "0.4.0"
