"""An intrusive-style singly linked list node."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

__all__ = ["Node"]


@dataclass(eq=False)
class Node:
    """A list node carrying *value* and a link to the *next* node."""

    value: Any = None
    next: Optional[Node] = field(default=None, repr=False)

    def append(self, node: Node) -> None:
        """Link *node* after the last node reachable from this one."""
        last = self
        while last.next is not None:
            last = last.next
        last.next = node

    def set_next(self, node: Optional[Node]) -> None:
        """Make *node* (or nothing) directly follow this node."""
        self.next = node

    def __iter__(self) -> Iterator[Node]:
        node: Optional[Node] = self
        while node is not None:
            yield node
            node = node.next