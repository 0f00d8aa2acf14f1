"""
FolioFlow - Resume PDF to Portfolio Website

Turns an uploaded PDF resume into an editable, themeable single-page portfolio.

Architecture:
- Intake Context: Layout-aware PDF text and link extraction, upload validation
- Structuring Context: Reconciliation of language-model output into a canonical resume
- Editing Context: Session store with undo/redo history
- Rendering Context: Themed HTML rendering and standalone export
- API: Stateless proxy to the language-model provider
"""

__version__ = "0.1.0"
