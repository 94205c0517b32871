# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Form - Root container of a form tree."""

from __future__ import annotations

from typing import Any

from .container import Container
from .exceptions import InvalidArgumentError
from .registry import IdentifierRegistry


class Form(Container):
    """Root of a form tree, owning the tree's IdentifierRegistry.

    The form's name is its id. Elements created through the form's
    containers (add_element('text', ...), add_text(), ...) claim their ids
    in the form's registry, so two forms never collide with each other's
    generated ids.

    Example:
        >>> form = Form('signup')
        >>> form.add_text('email').id
        'email'
        >>> form.add_text('email').id
        'email-0'
    """

    __slots__ = ()

    def __init__(
        self,
        id: str | None = None,
        attributes: dict[str, Any] | None = None,
        registry: IdentifierRegistry | None = None,
        force_append_index: bool = False,
        **attr: Any
    ) -> None:
        """Initialize a Form.

        Args:
            id: The form's id, also used as its name. Generated if None.
            attributes: Optional dictionary of attributes.
            registry: IdentifierRegistry to use instead of a new one.
            force_append_index: Passed to the new registry when registry
                is None (see IdentifierRegistry).
            **attr: Additional attributes as keyword arguments.
        """
        if registry is None:
            registry = IdentifierRegistry(force_append_index=force_append_index)

        final_attr: dict[str, Any] = {}
        if attributes:
            final_attr.update(attributes)
        final_attr.update(attr)
        final_attr['id'] = id
        super().__init__(id, final_attr, registry=registry)
        if id is None:
            self.set_name(self.get_id())

    def _set_container(self, container: Container | None) -> None:
        if container is not None:
            raise InvalidArgumentError("Form cannot be added to container")
        super()._set_container(None)

    def dispose(self) -> None:
        """Release the ids claimed in this form's registry.

        Elements keep their current ids; ids generated afterwards may
        repeat them.
        """
        self.registry.dispose()
