# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-FormTree - Composite container engine for form element trees.

A lightweight, zero-dependency library providing the tree of form
elements for the Genro ecosystem: containers owning ordered children,
exclusive ownership with transfer, depth-first lookup and freeze
propagation.
"""

__version__ = "0.1.0"

from .container import Container, Fieldset
from .element import Element, Input, InputHidden, InputText, Textarea
from .exceptions import (
    FormTreeError,
    InvalidArgumentError,
    NotFoundError,
)
from .factory import (
    create_element,
    is_element_registered,
    register_element,
    registered_types,
)
from .form import Form
from .iterators import (
    ContainerIterator,
    RecursiveContainerIterator,
    has_children,
)
from .registry import IdentifierRegistry

__all__ = [
    # Core classes
    "Element",
    "Container",
    "Form",
    # Element types
    "Fieldset",
    "Input",
    "InputText",
    "InputHidden",
    "Textarea",
    # Traversal
    "ContainerIterator",
    "RecursiveContainerIterator",
    "has_children",
    # Identifiers
    "IdentifierRegistry",
    # Factory
    "create_element",
    "is_element_registered",
    "register_element",
    "registered_types",
    # Exceptions
    "FormTreeError",
    "InvalidArgumentError",
    "NotFoundError",
]
