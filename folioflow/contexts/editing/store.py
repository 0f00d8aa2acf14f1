"""
Portfolio Edit Store

Holds the one live CanonicalResume for a session and its undo/redo history.

Every mutation goes through a command method, which records a deep snapshot of the
pre-change state on the undo stack (bounded, oldest evicted first) and clears the
redo stack. Typing into a text field is coalesced: edit_text() calls closer together
than the debounce quiet period produce a single history entry.

Example:
    >>> store = PortfolioStore()
    >>> store.update("full_name", "Ada Lovelace")
    >>> store.undo()
    True
    >>> store.data.full_name
    ''
"""

import time
from collections import deque
from dataclasses import fields
from typing import Any, Callable, Deque, Dict, List, Optional, Union

from folioflow.contexts.editing.logger import _log_debug, _log_info, log_history_change
from folioflow.contexts.intake.validation import encode_profile_photo
from folioflow.contexts.structuring.resume_data_structure import (
    CONTACT_CHANNELS,
    ITEM_TYPES,
    CanonicalResume,
    _build,
)
from folioflow.exceptions import ValidationError
from folioflow.utils.settings import config_section

Listener = Callable[[CanonicalResume], None]

# Scalar fields settable through update() / edit_text()
TEXT_FIELDS = ("full_name", "title", "location", "bio")


class PortfolioStore:
    """
    Session store for the canonical resume with bounded undo/redo.

    Attributes:
        data: The live resume (read it, mutate it only through commands)
        capacity: Maximum undo depth
        debounce_seconds: Quiet period that ends a coalesced text-edit burst
    """

    def __init__(
        self,
        resume: Optional[CanonicalResume] = None,
        capacity: Optional[int] = None,
        debounce_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
        notifier: Optional[Callable[[str], None]] = None,
    ):
        """
        Args:
            resume: Initial data (defaults to an empty resume); copied, not shared
            capacity: Undo depth (defaults to history.capacity, 50)
            debounce_seconds: Text-edit quiet period (defaults to history.debounce_seconds)
            clock: Monotonic time source, injectable for tests
            notifier: Optional callback for user-facing notices ("Nothing to undo")
        """
        history = config_section("history")
        self.capacity = capacity if capacity is not None else history["capacity"]
        self.debounce_seconds = (
            debounce_seconds if debounce_seconds is not None else history["debounce_seconds"]
        )

        self.data = resume.copy() if resume is not None else CanonicalResume()
        self.past: Deque[CanonicalResume] = deque(maxlen=self.capacity)
        self.future: Deque[CanonicalResume] = deque(maxlen=self.capacity)

        self._clock = clock
        self._notifier = notifier
        self._listeners: List[Listener] = []
        self._restoring = False
        self._last_text_edit: Optional[float] = None

    # ========================================================================
    # History
    # ========================================================================

    @property
    def can_undo(self) -> bool:
        return bool(self.past)

    @property
    def can_redo(self) -> bool:
        return bool(self.future)

    def commit(self) -> None:
        """
        Record the current state as an undo point and clear the redo stack.

        No-op while a restore (undo/redo) is notifying listeners, so a listener
        reacting to the restored data cannot record the restore itself.
        """
        if self._restoring:
            return
        self.past.append(self.data.copy())
        self.future.clear()

    def flush(self) -> None:
        """End the current text-edit burst; the next edit_text() starts a new entry."""
        self._last_text_edit = None

    def undo(self) -> bool:
        """
        Restore the most recent snapshot.

        Returns:
            False (with a notice) when there is nothing to undo
        """
        self.flush()
        if not self.past:
            self._notice("Nothing to undo")
            return False

        self.future.append(self.data.copy())
        self.data = self.past.pop()
        log_history_change("Undo", len(self.past), len(self.future))
        self._notify_restored()
        return True

    def redo(self) -> bool:
        """
        Reapply the most recently undone snapshot.

        Returns:
            False (with a notice) when there is nothing to redo
        """
        self.flush()
        if not self.future:
            self._notice("Nothing to redo")
            return False

        self.past.append(self.data.copy())
        self.data = self.future.pop()
        log_history_change("Redo", len(self.past), len(self.future))
        self._notify_restored()
        return True

    # ========================================================================
    # Subscribers
    # ========================================================================

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Call listener(data) after every change.

        Returns:
            A function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.data)

    def _notify_restored(self) -> None:
        self._restoring = True
        try:
            self._notify()
        finally:
            self._restoring = False

    def _notice(self, message: str) -> None:
        _log_info(message)
        if self._notifier is not None:
            self._notifier(message)

    # ========================================================================
    # Commands
    # ========================================================================

    def update(self, field: str, value: Any) -> None:
        """Set a header field (full_name, title, location, bio) or the skills list."""
        if field == "skills":
            self.update_skills(value)
            return
        self._check_text_field(field)
        self.flush()
        self.commit()
        setattr(self.data, field, value)
        self._notify()

    def edit_text(self, field: str, value: str) -> None:
        """
        Set a header field as part of a typing burst.

        The first edit of a burst records the pre-burst state; edits that follow
        within debounce_seconds of the previous one join that same history entry.
        """
        self._check_text_field(field)
        now = self._clock()
        if self._last_text_edit is None or now - self._last_text_edit >= self.debounce_seconds:
            self.commit()
        self._last_text_edit = now
        setattr(self.data, field, value)
        self._notify()

    def update_skills(self, skills: Union[str, List[str]]) -> None:
        """Replace skills from a list or a comma-separated string; blanks are dropped."""
        if isinstance(skills, str):
            skills = skills.split(",")
        cleaned = [skill.strip() for skill in skills if isinstance(skill, str) and skill.strip()]
        self.flush()
        self.commit()
        self.data.skills = cleaned
        self._notify()

    def update_contact(self, channel: str, value: str) -> None:
        if channel not in CONTACT_CHANNELS:
            raise ValidationError(f"Unknown contact channel: {channel}", field=channel)
        self.flush()
        self.commit()
        setattr(self.data.contact, channel, value)
        self._notify()

    def add_item(self, list_name: str, item: Union[Dict[str, Any], Any, None] = None):
        """
        Append an item to a typed list.

        Args:
            list_name: One of experiences, education, projects, certifications, languages, awards
            item: A record, a dict of its fields, or None for a blank record

        Returns:
            The appended record (with its id)
        """
        item_type = self._item_type(list_name)
        if item is None:
            item = item_type()
        elif isinstance(item, dict):
            item = _build(item_type, item)
        elif not isinstance(item, item_type):
            raise ValidationError(
                f"Expected {item_type.__name__} for {list_name}, got {type(item).__name__}",
                field=list_name,
            )

        self.flush()
        self.commit()
        getattr(self.data, list_name).append(item)
        _log_debug(f"Added {item_type.__name__} {item.id} to {list_name}")
        self._notify()
        return item

    def update_item(self, list_name: str, item_id: int, field: str, value: Any) -> bool:
        """
        Set one field of the item with this id.

        Returns:
            False when no item has this id (nothing is recorded)
        """
        item_type = self._item_type(list_name)
        if field == "id" or field not in {f.name for f in fields(item_type)}:
            raise ValidationError(f"{item_type.__name__} has no editable field {field!r}", field=field)

        item = self._find_item(list_name, item_id)
        if item is None:
            _log_debug(f"No item {item_id} in {list_name}; update ignored")
            return False

        self.flush()
        self.commit()
        setattr(item, field, value)
        self._notify()
        return True

    def remove_item(self, list_name: str, item_id: int) -> bool:
        """
        Remove the item with this id.

        Returns:
            False when no item has this id (nothing is recorded)
        """
        self._item_type(list_name)
        if self._find_item(list_name, item_id) is None:
            _log_debug(f"No item {item_id} in {list_name}; remove ignored")
            return False

        self.flush()
        self.commit()
        items = getattr(self.data, list_name)
        setattr(self.data, list_name, [item for item in items if item.id != item_id])
        self._notify()
        return True

    def replace(self, resume: CanonicalResume) -> None:
        """Swap in a whole new resume (e.g. after a fresh upload is reconciled)."""
        if not isinstance(resume, CanonicalResume):
            raise ValidationError("replace() expects a CanonicalResume")
        self.flush()
        self.commit()
        self.data = resume.copy()
        _log_info(f"Loaded resume for {resume.full_name or 'Unknown'}")
        self._notify()

    def set_profile_photo(self, data: bytes, mime_type: Optional[str]) -> str:
        """
        Validate and store a profile photo as a data URL.

        Raises:
            ValidationError: Not an image, or larger than the configured limit

        Returns:
            The stored data URL
        """
        data_url = encode_profile_photo(data, mime_type)
        self.flush()
        self.commit()
        self.data.profile_photo = data_url
        self._notify()
        return data_url

    def clear_profile_photo(self) -> None:
        self.flush()
        self.commit()
        self.data.profile_photo = ""
        self._notify()

    # ========================================================================
    # Helpers
    # ========================================================================

    @staticmethod
    def _check_text_field(field: str) -> None:
        if field not in TEXT_FIELDS:
            raise ValidationError(f"Unknown text field: {field}", field=field)

    @staticmethod
    def _item_type(list_name: str):
        if list_name not in ITEM_TYPES:
            raise ValidationError(f"Unknown item list: {list_name}", field=list_name)
        return ITEM_TYPES[list_name]

    def _find_item(self, list_name: str, item_id: int):
        for item in getattr(self.data, list_name):
            if item.id == item_id:
                return item
        return None
