"""Summaries: values aggregated over the items of a sum tree."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace


@dataclass(frozen=True)
class Summary:
    """Base for summaries made of numeric fields that combine by addition.

    Calling a summary class with no arguments gives its identity value.
    """

    def add_summary(self, other: Summary) -> Summary:
        """Combine two summaries field by field."""
        if type(other) is not type(self):
            raise TypeError(
                f"cannot combine {type(self).__name__} with {type(other).__name__}"
            )
        return replace(
            self,
            **{f.name: getattr(self, f.name) + getattr(other, f.name) for f in fields(self)},
        )

    def __add__(self, other: Summary) -> Summary:
        if not isinstance(other, Summary):
            return NotImplemented
        return self.add_summary(other)


@dataclass(frozen=True)
class Count(Summary):
    """Tracks a single total count or length."""

    value: int = 0

    def add_summary(self, other: Count) -> Count:
        if not isinstance(other, Count):
            raise TypeError(f"cannot combine Count with {type(other).__name__}")
        return Count(self.value + other.value)


@dataclass(frozen=True)
class TextSummary(Summary):
    """Tracks byte length and number of newlines."""

    len: int = 0
    lines: int = 0

    def add_summary(self, other: TextSummary) -> TextSummary:
        if not isinstance(other, TextSummary):
            raise TypeError(f"cannot combine TextSummary with {type(other).__name__}")
        return TextSummary(self.len + other.len, self.lines + other.lines)