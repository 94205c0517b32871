# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Element classes - the nodes of a form tree."""

from __future__ import annotations

import logging
import weakref
from typing import Any, ClassVar, TYPE_CHECKING

from .exceptions import InvalidArgumentError
from .factory import register_element
from .iterators import RecursiveContainerIterator
from .registry import IdentifierRegistry

if TYPE_CHECKING:
    from .container import Container

logger = logging.getLogger(__name__)


class Element:
    """A node in a form tree.

    Each element has:
    - name: The element's name ('' if not given), not required to be unique
    - id: The element's id, generated from the name when not given
    - attributes: Dictionary of markup attributes ('name' and 'id' included)
    - container: Weak back-reference to the owning Container, or None
    - registry: The IdentifierRegistry the element claims its id in

    Subclasses setting ``element_type`` are registered with the factory
    and can be created by containers from that type name.

    Example:
        >>> el = InputText('login', {'size': 20})
        >>> el.name, el.id
        ('login', 'login')
        >>> el.toggle_frozen(True)
        True
    """

    __slots__ = (
        'attributes', 'registry', '_container', '_frozen', '_persistent',
        '_generated_id', '__weakref__',
    )

    element_type: ClassVar[str | None] = None

    # Attributes whose changes go through _on_attribute_change()
    watched_attributes: ClassVar[tuple[str, ...]] = ('id', 'name')

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Register subclasses declaring their own element_type."""
        super().__init_subclass__(**kwargs)
        element_type = cls.__dict__.get('element_type')
        if element_type:
            register_element(element_type, cls)

    def __init__(
        self,
        name: str | None = None,
        attributes: dict[str, Any] | None = None,
        registry: IdentifierRegistry | None = None,
        **attr: Any
    ) -> None:
        """Initialize an Element.

        Args:
            name: The element's name. Falls back to attributes['name'].
            attributes: Optional dictionary of attributes. An 'id' entry
                is claimed as an explicit id.
            registry: IdentifierRegistry for id generation. A private
                registry is created when None; either way the element
                adopts the registry of the container it is added to.
            **attr: Additional attributes as keyword arguments.
        """
        self.attributes: dict[str, Any] = {}
        self.registry = registry if registry is not None else IdentifierRegistry()
        self._container: weakref.ref[Container] | None = None
        self._frozen = False
        self._persistent = False
        self._generated_id = False

        final_attr: dict[str, Any] = {}
        if attributes:
            final_attr.update(attributes)
        final_attr.update(attr)
        final_attr = {key.lower(): value for key, value in final_attr.items()}

        attr_name = final_attr.pop('name', None)
        attr_id = final_attr.pop('id', None)
        for key, value in final_attr.items():
            if key not in self.watched_attributes and value is not None:
                self.attributes[key] = value

        self.set_name(name if name is not None else attr_name)
        self.set_id(attr_id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, id={self.id!r})"

    # ==================== Identity ====================

    def get_name(self) -> str:
        """Return the element's name."""
        return self.attributes['name']

    def set_name(self, name: Any) -> None:
        """Set the element's name, coerced to string (None becomes '')."""
        self.attributes['name'] = '' if name is None else str(name)

    def get_id(self) -> str | None:
        """Return the element's id."""
        return self.attributes.get('id')

    def set_id(self, id: Any = None) -> None:
        """Set the element's id.

        Args:
            id: Explicit id, claimed in the registry as is. If None, a
                unique id is generated from the element's name.
        """
        self._generated_id = id is None
        if id is None:
            id = self.registry.generate(self.get_name())
        else:
            self.registry.register(str(id))
        self.attributes['id'] = str(id)

    @property
    def name(self) -> str:
        return self.get_name()

    @name.setter
    def name(self, value: Any) -> None:
        self.set_attribute('name', value)

    @property
    def id(self) -> str | None:
        return self.get_id()

    @id.setter
    def id(self, value: Any) -> None:
        self.set_attribute('id', value)

    # ==================== Attributes ====================

    def get_attribute(self, name: str, default: Any = None) -> Any:
        """Get an attribute value by (case-insensitive) name."""
        return self.attributes.get(name.lower(), default)

    def set_attribute(self, name: str, value: Any = None) -> None:
        """Set an attribute; a None value removes it.

        Watched attributes are routed through _on_attribute_change().

        Raises:
            InvalidArgumentError: If a watched attribute rejects the change.
        """
        name = name.lower()
        if name in self.watched_attributes:
            self._on_attribute_change(name, value)
        elif value is None:
            self.attributes.pop(name, None)
        else:
            self.attributes[name] = value

    def remove_attribute(self, name: str) -> None:
        """Remove an attribute (mandatory ones raise InvalidArgumentError)."""
        self.set_attribute(name, None)

    def merge_attributes(self, attributes: dict[str, Any]) -> None:
        """Set several attributes at once.

        Every watched attribute is checked before anything is applied, so a
        rejected change leaves the element untouched.
        """
        items = {key.lower(): value for key, value in attributes.items()}
        for key, value in items.items():
            if key in self.watched_attributes:
                self._check_attribute_change(key, value)
        for key, value in items.items():
            self.set_attribute(key, value)

    def _check_attribute_change(self, name: str, value: Any = None) -> None:
        """Reject an invalid change of a watched attribute.

        Raises:
            InvalidArgumentError: If value is None ('name' and 'id' are
                mandatory).
        """
        if value is None:
            raise InvalidArgumentError(
                f"Required attribute '{name}' can not be removed"
            )

    def _on_attribute_change(self, name: str, value: Any = None) -> None:
        """Handle a change of a watched attribute.

        Setting 'name' or 'id' goes through set_name() and set_id().

        Raises:
            InvalidArgumentError: If _check_attribute_change() rejects it.
        """
        self._check_attribute_change(name, value)
        if name == 'name':
            self.set_name(value)
        elif name == 'id':
            self.set_id(value)

    # ==================== Tree ====================

    @property
    def container(self) -> Container | None:
        """The Container owning this element, or None."""
        if self._container is None:
            return None
        return self._container()

    def _set_container(self, container: Container | None) -> None:
        """Update the back-reference to the owning container.

        Only Container calls this, keeping both sides of the relation in
        sync. Attaching to a new container detaches the element from the
        previous one and moves its subtree into the container's registry.

        Raises:
            InvalidArgumentError: If container is this element or one of
                its descendants.
        """
        if container is None:
            self._container = None
            return

        check: Element | None = container
        while check is not None:
            if check is self:
                raise InvalidArgumentError(
                    "Cannot set an element or its child as its own container"
                )
            check = check.container

        previous = self.container
        if previous is not None and previous is not container:
            previous.remove_child(self)
        if self.registry is not container.registry:
            self._adopt_registry(container.registry)
        self._container = weakref.ref(container)

    def _adopt_registry(self, registry: IdentifierRegistry) -> None:
        """Claim the ids of this element and its descendants in registry.

        Explicit ids are registered as they are. Generated ids already
        taken in registry are generated again from the element's name.
        """
        nodes: list[Element] = [self]
        container = self.as_container()
        if container is not None:
            nodes.extend(RecursiveContainerIterator(container))

        for node in nodes:
            if node.registry is registry:
                continue
            node.registry = registry
            if node._generated_id and node.get_id() in registry:
                node.set_id()
            else:
                registry.register(node.get_id())
        logger.debug("%r joined registry %r", self, registry)

    @property
    def root(self) -> Element:
        """The top-most ancestor of this element (self if unattached)."""
        node = self
        while node.container is not None:
            node = node.container
        return node

    def as_container(self) -> Container | None:
        """Return self as a Container, or None for leaf elements."""
        return None

    # ==================== Freeze ====================

    def toggle_frozen(self, freeze: bool | None = None) -> bool:
        """Get or set the frozen state.

        Args:
            freeze: New state. If None, the state is only returned.

        Returns:
            The frozen state after the call.
        """
        if freeze is not None:
            self._frozen = bool(freeze)
        return self._frozen

    def persistent_freeze(self, persistent: bool | None = None) -> bool:
        """Get or set whether a frozen value is kept in submitted output.

        Args:
            persistent: New state. If None, the state is only returned.

        Returns:
            The persistent freeze state after the call.
        """
        if persistent is not None:
            self._persistent = bool(persistent)
        return self._persistent


class Input(Element):
    """Base class for <input> elements.

    The 'type' attribute is fixed by the class and can not be changed.
    """

    __slots__ = ()

    input_type: ClassVar[str] = 'text'
    watched_attributes: ClassVar[tuple[str, ...]] = ('id', 'name', 'type')

    def __init__(
        self,
        name: str | None = None,
        attributes: dict[str, Any] | None = None,
        registry: IdentifierRegistry | None = None,
        **attr: Any
    ) -> None:
        super().__init__(name, attributes, registry=registry, **attr)
        self.attributes['type'] = self.input_type

    def _check_attribute_change(self, name: str, value: Any = None) -> None:
        if name == 'type':
            raise InvalidArgumentError("Attribute 'type' is read-only")
        super()._check_attribute_change(name, value)


class InputText(Input):
    """Single line text input."""

    __slots__ = ()

    element_type = 'text'
    input_type = 'text'


class InputHidden(Input):
    """Hidden input. Hidden inputs can not be frozen."""

    __slots__ = ()

    element_type = 'hidden'
    input_type = 'hidden'

    def toggle_frozen(self, freeze: bool | None = None) -> bool:
        return False


class Textarea(Element):
    __slots__ = ()

    element_type = 'textarea'
