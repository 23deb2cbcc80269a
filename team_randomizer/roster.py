"""Roster management for Team Randomizer."""

import itertools
import logging
from typing import Callable, Iterable, Iterator, List, NamedTuple, Optional, Tuple

from .validators import is_acceptable_name, name_key, normalize_name

logger = logging.getLogger(__name__)

Listener = Callable[[Tuple[str, ...]], None]


class ActiveEdit(NamedTuple):
    """The member currently being renamed and the draft name typed so far."""

    member_id: int
    draft: str


class RosterStore:
    """Ordered, case-insensitively unique collection of member names.

    Invalid mutations are ignored rather than raised: adding an empty or
    duplicate name, removing an unknown name and renaming to an empty or
    taken name all leave the roster untouched. Every successful mutation
    bumps ``revision`` and notifies the subscribed listeners with the new
    snapshot.
    """

    def __init__(self, max_name_length: Optional[int] = None):
        """Initialize an empty roster.

        Args:
            max_name_length: Longest accepted member name, or None for no limit
        """
        self.max_name_length = max_name_length
        self.revision = 0
        # (member_id, name); member_id survives renames
        self._entries: List[Tuple[int, str]] = []
        self._ids = itertools.count(1)
        self._active_edit: Optional[ActiveEdit] = None
        self._listeners: List[Listener] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return self._find(normalize_name(name)) is not None

    @property
    def names(self) -> List[str]:
        """Member names in insertion order."""
        return [name for _, name in self._entries]

    def snapshot(self) -> Tuple[str, ...]:
        """Return an immutable copy of the roster."""
        return tuple(self.names)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback invoked with the snapshot after every change.

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def hydrate(self, names: Iterable[str]) -> None:
        """Replace the roster with a previously saved snapshot.

        Names go through the same rules as ``add`` so duplicates and blanks in
        the snapshot are dropped. Listeners are not notified.
        """
        self._entries = []
        self._active_edit = None
        for name in names:
            self._append(name)
        self.revision += 1

    def add(self, name: str) -> bool:
        """Append a member unless the name is blank, too long or taken.

        Returns:
            True if the roster changed
        """
        if not self._append(name):
            return False
        self._commit()
        return True

    def remove(self, name: str) -> bool:
        """Remove the member matching ``name`` case-insensitively.

        Removing the member under edit cancels the edit.

        Returns:
            True if a member was removed
        """
        index = self._find(normalize_name(name))
        if index is None:
            logger.debug("No member named %r to remove", name)
            return False

        member_id, _ = self._entries.pop(index)
        if self._active_edit is not None and self._active_edit.member_id == member_id:
            self._active_edit = None
        self._commit()
        return True

    def rename(self, existing_index: int, new_name: str) -> bool:
        """Rename the member at ``existing_index`` in place.

        A blank, too long or already taken name cancels the rename. Any
        pending edit of that member ends either way.

        Returns:
            True if the roster changed
        """
        if not 0 <= existing_index < len(self._entries):
            logger.debug("Rename index %d out of range", existing_index)
            return False

        member_id, current = self._entries[existing_index]
        if self._active_edit is not None and self._active_edit.member_id == member_id:
            self._active_edit = None

        trimmed = normalize_name(new_name)
        if not is_acceptable_name(trimmed, self.max_name_length):
            logger.debug("Rejected rename of %r to %r", current, new_name)
            return False

        key = name_key(trimmed)
        for index, (_, other) in enumerate(self._entries):
            if index != existing_index and name_key(other) == key:
                logger.debug("Rejected rename of %r: %r is taken", current, trimmed)
                return False

        if trimmed == current:
            return False

        self._entries[existing_index] = (member_id, trimmed)
        self._commit()
        return True

    def search(self, query: str) -> Iterator[str]:
        """Lazily yield the names containing ``query``, ignoring case."""
        return (name for _, name in self.search_indexed(query))

    def search_indexed(self, query: str) -> Iterator[Tuple[int, str]]:
        """Lazily yield ``(roster_index, name)`` for names containing ``query``."""
        needle = name_key(query)
        names = self.names
        return ((index, name) for index, name in enumerate(names) if needle in name_key(name))

    def clear(self) -> None:
        """Remove every member and cancel any pending edit."""
        self._entries = []
        self._active_edit = None
        self._commit()

    @property
    def active_edit(self) -> Optional[ActiveEdit]:
        return self._active_edit

    @property
    def editing_index(self) -> Optional[int]:
        """Current roster index of the member under edit, if any."""
        if self._active_edit is None:
            return None
        return self._index_of(self._active_edit.member_id)

    def start_edit(self, index: int) -> bool:
        """Begin renaming the member at ``index``.

        Only one member can be edited at a time.

        Returns:
            True if the edit started
        """
        if self._active_edit is not None:
            logger.debug("Edit already in progress; cannot edit index %d", index)
            return False
        if not 0 <= index < len(self._entries):
            return False

        member_id, name = self._entries[index]
        self._active_edit = ActiveEdit(member_id, name)
        return True

    def update_draft(self, value: str) -> None:
        if self._active_edit is not None:
            self._active_edit = self._active_edit._replace(draft=value)

    def save_edit(self) -> bool:
        """Apply the draft of the pending edit and leave editing mode.

        Returns:
            True if the roster changed
        """
        edit = self._active_edit
        if edit is None:
            return False

        index = self._index_of(edit.member_id)
        self._active_edit = None
        if index is None:
            return False
        return self.rename(index, edit.draft)

    def cancel_edit(self) -> None:
        self._active_edit = None

    def _append(self, name: str) -> bool:
        trimmed = normalize_name(name)
        if not is_acceptable_name(trimmed, self.max_name_length):
            logger.debug("Skipping unacceptable member name %r", name)
            return False
        if self._find(trimmed) is not None:
            logger.debug("Skipping duplicate member name %r", trimmed)
            return False

        self._entries.append((next(self._ids), trimmed))
        return True

    def _find(self, name: str) -> Optional[int]:
        key = name_key(name)
        for index, (_, existing) in enumerate(self._entries):
            if name_key(existing) == key:
                return index
        return None

    def _index_of(self, member_id: int) -> Optional[int]:
        for index, (entry_id, _) in enumerate(self._entries):
            if entry_id == member_id:
                return index
        return None

    def _commit(self) -> None:
        self.revision += 1
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
