"""Undo/redo history of buffer snapshots and the edits between them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Insert:
    text: str


@dataclass(frozen=True)
class Delete:
    text: str


@dataclass(frozen=True)
class Replace:
    old_text: str
    new_text: str


EditKind = Union[Insert, Delete, Replace]


@dataclass(frozen=True)
class Transaction:
    """One edit together with the cursor before and after it."""

    cursor_before: Any
    cursor_after: Any
    edit: EditKind

    @classmethod
    def insert(cls, text: str, cursor_before: Any, cursor_after: Any) -> Transaction:
        return cls(cursor_before, cursor_after, Insert(text))

    @classmethod
    def delete(cls, text: str, cursor_before: Any, cursor_after: Any) -> Transaction:
        return cls(cursor_before, cursor_after, Delete(text))

    @classmethod
    def replace(
        cls, old_text: str, new_text: str, cursor_before: Any, cursor_after: Any
    ) -> Transaction:
        return cls(cursor_before, cursor_after, Replace(old_text, new_text))


class History:
    """Keeps the current buffer plus undo and redo stacks of snapshots."""

    def __init__(self, buffer: Any) -> None:
        self._undo: list[tuple[Any, Transaction]] = []
        self._redo: list[tuple[Any, Transaction]] = []
        self._current = buffer

    def __copy__(self) -> History:
        clone = History(self._current)
        clone._undo = list(self._undo)
        clone._redo = list(self._redo)
        return clone

    @property
    def current(self) -> Any:
        return self._current

    def update_current(self, new_buffer: Any) -> None:
        """Replace the current buffer without recording an undo step."""
        self._current = new_buffer

    def push(self, new_buffer: Any, transaction: Transaction) -> None:
        """Record a new state; clears anything that could be redone."""
        self._undo.append((self._current, transaction))
        self._current = new_buffer
        self._redo.clear()

    def undo(self) -> Transaction | None:
        if not self._undo:
            return None
        previous, transaction = self._undo.pop()
        self._redo.append((self._current, transaction))
        self._current = previous
        return transaction

    def redo(self) -> Transaction | None:
        if not self._redo:
            return None
        following, transaction = self._redo.pop()
        self._undo.append((self._current, transaction))
        self._current = following
        return transaction

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)