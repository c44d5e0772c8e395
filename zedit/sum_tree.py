"""A persistent tree of items whose nodes cache aggregated summaries."""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Generic, Iterable, Iterator, Protocol, TypeVar, Union, runtime_checkable

from zedit.summary import Summary

MAX_CHILDREN = 8


@runtime_checkable
class Item(Protocol):
    """Anything that can report its own summary."""

    def summary(self) -> Summary:
        """Return the summary describing this item."""


T = TypeVar("T", bound=Item)


@dataclass(frozen=True)
class Leaf(Generic[T]):
    """A leaf node holding items."""

    items: tuple
    summary: Summary


@dataclass(frozen=True)
class Internal:
    """An internal node holding child nodes."""

    children: tuple
    summary: Summary


Node = Union[Leaf, Internal]


class SumTree(Generic[T]):
    """Ordered items with the total summary available at the root."""

    def __init__(self, summary_type: type[Summary]) -> None:
        self._summary_type = summary_type
        self._root: Node | None = None

    @classmethod
    def from_items(cls, items: Iterable[T], summary_type: type[Summary]) -> SumTree[T]:
        """Build a balanced tree bottom-up from the given items."""
        tree = cls(summary_type)
        nodes: list[Node] = [Leaf((item,), item.summary()) for item in items]
        if not nodes:
            return tree
        while len(nodes) > 1:
            groups = (nodes[i : i + MAX_CHILDREN] for i in range(0, len(nodes), MAX_CHILDREN))
            nodes = [group[0] if len(group) == 1 else tree._internal(group) for group in groups]
        tree._root = nodes[0]
        return tree

    def _internal(self, children: list[Node]) -> Internal:
        total = reduce(
            lambda acc, child: acc.add_summary(child.summary), children, self._summary_type()
        )
        return Internal(tuple(children), total)

    def summary(self) -> Summary:
        """Total summary of the whole tree."""
        if self._root is None:
            return self._summary_type()
        return self._root.summary

    def is_empty(self) -> bool:
        return self._root is None

    def push(self, item: T) -> None:
        """Append one item; prefer from_items for bulk building."""
        new_leaf = Leaf((item,), item.summary())
        old_root = self._root
        if old_root is None:
            self._root = new_leaf
            return
        if isinstance(old_root, Internal) and len(old_root.children) < MAX_CHILDREN:
            self._root = self._internal([*old_root.children, new_leaf])
            return
        self._root = Internal(
            (old_root, new_leaf), old_root.summary.add_summary(new_leaf.summary)
        )

    def __iter__(self) -> Iterator[T]:
        stack: list[Node] = [] if self._root is None else [self._root]
        while stack:
            node = stack.pop()
            if isinstance(node, Leaf):
                yield from node.items
            else:
                stack.extend(reversed(node.children))


class Cursor(Generic[T]):
    """A position within a sum tree, starting at its beginning."""

    def __init__(self, tree: SumTree[T]) -> None:
        self._tree = tree
        self._stack: list[tuple[Node, int]] = []
        self._position = 0

    @property
    def position(self) -> int:
        return self._position