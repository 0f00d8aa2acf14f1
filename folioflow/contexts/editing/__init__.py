"""
Editing Context

Responsibilities:
- Holds the live canonical resume for one session
- Applies field, list-item, contact and photo edits through command methods
- Keeps bounded undo/redo history, coalescing bursts of text edits
- Notifies subscribers after every change

Owns: Session state and history
Never: Persists anything, or talks to the language model
"""

from folioflow.contexts.editing.store import TEXT_FIELDS, PortfolioStore

__all__ = [
    "PortfolioStore",
    "TEXT_FIELDS",
]
