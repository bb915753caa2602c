from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, List, Optional, Tuple, TypeVar

if TYPE_CHECKING:
    from .model import NodeExporter

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="Node")


class Node(ABC):
    """Base of the composite tree.

    A node has at most one parent. Assigning ``parent`` is the only way the
    topology changes: the node leaves its old parent's children, then joins
    the new parent's children, so both sides of the edge always agree.
    """

    # roots refuse any parent
    _is_root = False

    def __init__(self, parent: Optional[Node] = None) -> None:
        self._parent: Optional[Node] = None
        self.parent = parent

    @property
    def parent(self) -> Optional[Node]:
        return self._parent

    @parent.setter
    def parent(self, value: Optional[Node]) -> None:
        if value is self._parent:
            # already attached here; keep position
            return
        if value is not None and self._is_root:
            raise ValueError(f"{self!r} is a root node and cannot have a parent")
        if value is not None and value._is_within(self):
            raise ValueError(f"Cannot attach {self!r} under its own descendant {value!r}")
        if self._parent is not None:
            self._parent._remove_child(self)
        self._parent = value
        if value is not None:
            value._add_child(self)
        logger.debug("reparented %r -> %r", self, value)

    def _is_within(self, other: Node) -> bool:
        """True if this node is ``other`` or lies somewhere below it."""
        node: Optional[Node] = self
        while node is not None:
            if node is other:
                return True
            node = node._parent
        return False

    @property
    @abstractmethod
    def children(self) -> Tuple[Node, ...]:
        ...

    @abstractmethod
    def export(self, exporter: NodeExporter) -> None:
        ...

    @abstractmethod
    def _add_child(self, child: Node) -> None:
        ...

    @abstractmethod
    def _remove_child(self, child: Node) -> None:
        ...


class TypedNode(Node, Generic[T]):
    """Node holding an ordered, duplicate-free list of children of type T."""

    def __init__(self, parent: Optional[Node] = None) -> None:
        self._children: List[T] = []
        super().__init__(parent)

    @property
    def children(self) -> Tuple[T, ...]:
        return tuple(self._children)

    def _index_of(self, child: Node) -> int:
        # identity, not equality
        for i, c in enumerate(self._children):
            if c is child:
                return i
        return -1

    def _add_child(self, child: T) -> None:  # type: ignore[override]
        if self._index_of(child) >= 0:
            return
        self._children.append(child)

    def _remove_child(self, child: T) -> None:  # type: ignore[override]
        idx = self._index_of(child)
        if idx < 0:
            return
        del self._children[idx]
