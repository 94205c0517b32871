# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Container iterators - shallow and depth-first traversal of a form tree.

Both iterators are re-iterable: every iter() call starts a fresh walk over
the container's current children. Child lists are read while walking, so
structural changes to a subtree during its own traversal give an
unspecified order; callers must not mutate what they are walking.

Example:
    >>> for element in RecursiveContainerIterator(form):
    ...     print(element.name)
"""

from __future__ import annotations

from typing import Any, Iterator, TYPE_CHECKING

if TYPE_CHECKING:
    from .container import Container
    from .element import Element


def has_children(node: Any) -> bool:
    """True if node offers the Container capability.

    The check asks the node through as_container() rather than testing
    its class, so any container kind qualifies.
    """
    return node.as_container() is not None


class ContainerIterator:
    """Iterates over the direct children of a container, in order."""

    __slots__ = ('container',)

    def __init__(self, container: Container) -> None:
        self.container = container

    def __repr__(self) -> str:
        return f"ContainerIterator({self.container!r})"

    def __iter__(self) -> Iterator[Element]:
        elements = self.container._elements
        position = 0
        while position < len(elements):
            yield elements[position]
            position += 1


class RecursiveContainerIterator(ContainerIterator):
    """Depth-first, pre-order iteration over a container's whole subtree.

    Each element is yielded before its own children, and a nested
    container's subtree is exhausted before the next sibling. The starting
    container itself is not yielded.

    The walk keeps an explicit stack of (children, position) frames
    instead of recursing, so tree depth is not bound by the interpreter's
    recursion limit.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"RecursiveContainerIterator({self.container!r})"

    def __iter__(self) -> Iterator[Element]:
        stack: list[list[Any]] = [[self.container._elements, 0]]
        while stack:
            frame = stack[-1]
            elements, position = frame
            if position >= len(elements):
                stack.pop()
                continue
            frame[1] = position + 1
            element = elements[position]
            yield element

            container = element.as_container()
            if container is not None:
                stack.append([container._elements, 0])
