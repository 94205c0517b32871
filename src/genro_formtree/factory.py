# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Element factory - maps type names to element classes.

Element subclasses declaring an ``element_type`` are registered here
automatically (see Element.__init_subclass__). Containers use the factory
to build children from a type name:

    >>> form.add_element('text', 'login')
    >>> form.add_fieldset('address')   # same as add_element('fieldset', ...)
"""

from __future__ import annotations

import logging
from typing import Any, TYPE_CHECKING

from .exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from .element import Element
    from .registry import IdentifierRegistry

logger = logging.getLogger(__name__)

_element_types: dict[str, type[Element]] = {}


def register_element(type_name: str, element_class: type[Element]) -> None:
    """Register an element class under a type name.

    A later registration for the same name replaces the earlier one.

    Args:
        type_name: Case-insensitive type name (e.g. 'text', 'fieldset').
        element_class: Element subclass to instantiate for this type.
    """
    _element_types[type_name.lower()] = element_class
    logger.debug("Registered element type '%s' -> %s", type_name, element_class.__name__)


def is_element_registered(type_name: str) -> bool:
    """True if type_name has a registered element class."""
    return type_name.lower() in _element_types


def registered_types() -> list[str]:
    """Return all registered type names in registration order."""
    return list(_element_types.keys())


def create_element(
    type_name: str,
    name: str | None = None,
    attributes: dict[str, Any] | None = None,
    registry: IdentifierRegistry | None = None,
    **attr: Any
) -> Element:
    """Create an element of a registered type.

    Args:
        type_name: Registered type name.
        name: Element name.
        attributes: Dict of attributes (merged with **attr).
        registry: IdentifierRegistry the element claims its id in.
        **attr: Attributes as keyword arguments.

    Returns:
        The new, unattached element.

    Raises:
        InvalidArgumentError: If type_name is not registered.
    """
    element_class = _element_types.get(type_name.lower())
    if element_class is None:
        raise InvalidArgumentError(f"Element type '{type_name}' is not known")
    return element_class(name, attributes, registry=registry, **attr)
