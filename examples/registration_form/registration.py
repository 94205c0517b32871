# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Registration form - Example of a custom container type.

A didactic example showing how a Container subclass registers itself
as an element type and how the tree is edited and walked.
"""

from __future__ import annotations

from genro_formtree import Container, Form


class Address(Container):
    """A container pre-filled with the usual address fields.

    Declaring element_type makes form.add_address() available.
    """

    element_type = 'address'

    def __init__(self, name=None, attributes=None, registry=None, **attr):
        super().__init__(name, attributes, registry=registry, **attr)
        self.add_text(f"{self.name}[street]")
        self.add_text(f"{self.name}[city]")
        self.add_text(f"{self.name}[zip]", size=5)


def build_form() -> Form:
    """Build a registration form with two addresses."""
    form = Form('registration')
    account = form.add_fieldset('account')
    account.add_text('username')
    account.add_element('hidden', 'token')

    form.add_address('home')
    work = form.add_address('work')

    # Move the account fieldset to the end, then back before 'work'
    form.add_element(account)
    form.insert_before(account, work)
    return form


def print_tree(form: Form) -> None:
    """Print every element with its depth-first position."""
    for element in form.get_recursive_iterator():
        depth = 0
        node = element.container
        while node is not form:
            depth += 1
            node = node.container
        print(f"{'  ' * depth}{element.name} (#{element.id})")


if __name__ == '__main__':
    form = build_form()
    print_tree(form)
    form.toggle_frozen(True)
    print('frozen:', form.get_element_by_id('work-city').toggle_frozen())
