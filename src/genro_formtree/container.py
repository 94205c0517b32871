# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Container - A form element owning an ordered list of child elements.

This module provides the Container class, the composite node of a form
tree. A container keeps its children in insertion order and maintains the
back-reference of every child, so that an element always belongs to at
most one container and its ``container`` property points at it.

Key Features:
    - **Structural mutation**: add_element, remove_child, insert_before
    - **Ownership transfer**: adding an element detaches it from its
      previous container
    - **Lookup**: get_element_by_id, get_elements_by_name over the whole
      subtree, in depth-first pre-order
    - **Freeze propagation**: toggle_frozen and persistent_freeze reach
      every descendant
    - **Factory shortcuts**: add_<type>() for every registered element type

Example:
    Basic usage::

        form = Form('login')
        fieldset = form.add_fieldset('account')
        user = fieldset.add_text('username', size=20)
        fieldset.add_element(InputHidden('token'))

        form.get_element_by_id('username')  # user
        form.toggle_frozen(True)            # freezes the whole tree
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, TYPE_CHECKING

from .element import Element
from .exceptions import NotFoundError
from .factory import create_element, is_element_registered
from .iterators import ContainerIterator, RecursiveContainerIterator

if TYPE_CHECKING:
    from .registry import IdentifierRegistry

logger = logging.getLogger(__name__)


class Container(Element):
    """An element containing other elements.

    Children may be containers themselves. Iterating a container yields its
    direct children; get_recursive_iterator() walks the whole subtree.

    Attributes:
        container: The Container owning this one, or None for a root.

    Example:
        >>> box = Container('box')
        >>> first = box.add_text('first')
        >>> last = box.add_text('last')
        >>> box.insert_before(box.add_text('middle'), last)
        >>> [el.name for el in box]
        ['first', 'middle', 'last']
    """

    __slots__ = ('_elements',)

    def __init__(
        self,
        name: str | None = None,
        attributes: dict[str, Any] | None = None,
        registry: IdentifierRegistry | None = None,
        **attr: Any
    ) -> None:
        """Initialize an empty Container.

        Args:
            name: The container's name.
            attributes: Optional dictionary of attributes.
            registry: IdentifierRegistry shared with the children created
                through add_element(type_name, ...).
            **attr: Additional attributes as keyword arguments.
        """
        self._elements: list[Element] = []
        super().__init__(name, attributes, registry=registry, **attr)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        """Return string representation showing child names."""
        names = [element.name for element in self._elements]
        return f"{type(self).__name__}({self.name!r}, {names})"

    def __len__(self) -> int:
        """Return the number of direct children."""
        return len(self._elements)

    def __iter__(self) -> Iterator[Element]:
        """Iterate over direct children in order."""
        return iter(ContainerIterator(self))

    def __contains__(self, element: object) -> bool:
        """True if element is a direct child of this container."""
        return any(child is element for child in self._elements)

    def __getattr__(self, name: str) -> Any:
        """Resolve add_<type>() shortcuts for registered element types.

        Args:
            name: Attribute name (e.g., 'add_text', 'add_fieldset').

        Returns:
            Callable creating and appending an element of that type.

        Raises:
            AttributeError: If name is not a shortcut for a known type.
        """
        if name.startswith('add_'):
            type_name = name[4:]
            if is_element_registered(type_name):
                return self._make_add_method(type_name)

        raise AttributeError(
            f"'{type(self).__name__}' object has no attribute '{name}'"
        )

    def _make_add_method(self, type_name: str) -> Callable[..., Element]:
        def add_method(
            name: str | None = None,
            attributes: dict[str, Any] | None = None,
            **attr: Any
        ) -> Element:
            return self.add_element(type_name, name, attributes, **attr)

        return add_method

    def count(self) -> int:
        """Return the number of direct children."""
        return len(self._elements)

    def as_container(self) -> Container:
        return self

    # ==================== Mutation ====================

    def add_element(
        self,
        element: Element | str,
        name: str | None = None,
        attributes: dict[str, Any] | None = None,
        **attr: Any
    ) -> Element:
        """Append an element to the container.

        An element already in this container is moved to the end; an
        element owned by another container is removed from it first.

        Args:
            element: Element instance, or a registered type name to create
                the element from (using this container's registry).
            name: Name of the created element (type name form only).
            attributes: Attributes of the created element (type name form
                only).
            **attr: Attributes as keyword arguments (type name form only).

        Returns:
            The added element.

        Raises:
            InvalidArgumentError: If the type name is unknown, or if element
                is this container or one of its ancestors.

        Example:
            >>> fieldset.add_element(InputText('email'))
            >>> fieldset.add_element('text', 'phone', size=12)
        """
        if isinstance(element, str):
            element = create_element(
                element, name, attributes, registry=self.registry, **attr
            )

        if element.container is self:
            self.remove_child(element)
        element._set_container(self)
        self._elements.append(element)
        logger.debug("Added %r to %r", element, self)
        return element

    def remove_child(self, element: Element) -> Element:
        """Remove a direct child from the container.

        The removed element (with its own subtree) becomes unattached and
        can be added elsewhere.

        Args:
            element: The element to remove.

        Returns:
            The removed element.

        Raises:
            NotFoundError: If element is not a child of this container.
        """
        if element.container is not self:
            raise NotFoundError(
                f"Element with name '{element.name}' was not found"
            )

        index = self._index_of(element)
        if index is None:
            raise NotFoundError(
                f"Element with name '{element.name}' was not found"
            )
        del self._elements[index]
        element._set_container(None)
        logger.debug("Removed %r from %r", element, self)
        return element

    def insert_before(
        self, element: Element, reference: Element | None = None
    ) -> Element:
        """Insert an element before a reference child.

        Without a reference the element is appended, like add_element().

        Args:
            element: The element to insert.
            reference: Direct child to insert before.

        Returns:
            The inserted element.

        Raises:
            NotFoundError: If reference is not a child of this container.
            InvalidArgumentError: If element is this container or one of
                its ancestors.
        """
        if reference is None:
            return self.add_element(element)

        index = self._index_of(reference)
        if index is None:
            raise NotFoundError(
                f"Reference element with name '{reference.name}' was not found"
            )

        if element.container is self:
            old_index = self._index_of(element)
            self.remove_child(element)
            if old_index is not None and old_index < index:
                index -= 1
        element._set_container(self)
        self._elements.insert(index, element)
        logger.debug("Inserted %r at position %d of %r", element, index, self)
        return element

    def _index_of(self, element: Element) -> int | None:
        """Position of element among direct children (by identity), or None."""
        for index, child in enumerate(self._elements):
            if child is element:
                return index
        return None

    # ==================== Access ====================

    def get_elements(self) -> list[Element]:
        """Return a list of the direct children in order.

        The list is a copy: changing it does not change the container.
        """
        return list(self._elements)

    def get_iterator(self) -> ContainerIterator:
        """Return a re-iterable over the direct children."""
        return ContainerIterator(self)

    def get_recursive_iterator(self) -> RecursiveContainerIterator:
        """Return a re-iterable over all descendants, depth-first pre-order."""
        return RecursiveContainerIterator(self)

    def get_element_by_id(self, id: str) -> Element | None:
        """Return the first descendant with the given id, or None."""
        id = str(id)
        for element in self.get_recursive_iterator():
            if element.get_id() == id:
                return element
        return None

    def get_elements_by_name(self, name: str) -> list[Element]:
        """Return all descendants with the given name, in traversal order."""
        name = str(name)
        return [
            element for element in self.get_recursive_iterator()
            if element.get_name() == name
        ]

    # ==================== Freeze ====================

    def toggle_frozen(self, freeze: bool | None = None) -> bool:
        """Get or set the frozen state of the container and its children.

        Setting a state applies it to every child first, then to the
        container itself.
        """
        if freeze is not None:
            for child in self:
                child.toggle_frozen(freeze)
        return super().toggle_frozen(freeze)

    def persistent_freeze(self, persistent: bool | None = None) -> bool:
        """Get or set the persistent freeze flag of the container and children."""
        if persistent is not None:
            for child in self:
                child.persistent_freeze(persistent)
        return super().persistent_freeze(persistent)


class Fieldset(Container):
    """A container grouping related elements."""

    __slots__ = ()

    element_type = 'fieldset'
