# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""IdentifierRegistry - Tracks claimed element ids within a form session.

Ids are stored as a trie of '-'-separated tokens. This lets the registry
number ids generated for array-style names ('phone[]', 'address[city]')
and disambiguate repeated names ('foo', 'foo-0', 'foo-1', ...).

A registry is an explicit context object: a Form owns one and passes it to
the elements created through its containers, so separate forms living in
the same process never see each other's ids.

Example:
    >>> registry = IdentifierRegistry()
    >>> registry.generate('foo')
    'foo'
    >>> registry.generate('foo')
    'foo-0'
    >>> registry.generate('phone[]')
    'phone-0'
    >>> registry.register('bar')
    >>> 'bar' in registry
    True
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

_NUMERIC = re.compile(r'^[+-]?\d+(\.\d+)?$')

# Token used for elements without a name
AUTO_TOKEN = 'qfauto'


class IdentifierRegistry:
    """Registry of ids claimed by the elements of one form tree.

    Attributes:
        force_append_index: If True, generated ids always end with a
            numeric index ('foo-0' for the first 'foo'). If False (default),
            an index is only appended when the plain id is taken.
    """

    __slots__ = ('_claimed', '_ids', 'force_append_index')

    def __init__(self, force_append_index: bool = False) -> None:
        self._claimed: dict[str, dict] = {}
        self._ids: set[str] = set()
        self.force_append_index = force_append_index

    def __repr__(self) -> str:
        return f"IdentifierRegistry({sorted(self._ids)})"

    def __contains__(self, id: str) -> bool:
        """True if id has been registered or generated."""
        return str(id) in self._ids

    def register(self, id: str) -> None:
        """Claim an explicit id.

        Duplicates are accepted: registering an id twice is a no-op.

        Args:
            id: The id to claim.
        """
        id = str(id)
        level = self._claimed
        for token in id.split('-'):
            level = level.setdefault(token, {})
        self._ids.add(id)
        logger.debug("Registered id '%s'", id)

    def generate(self, name: str) -> str:
        """Generate and claim a unique id for an element name.

        Args:
            name: Element name. Array-style names ('a[b][]') are split into
                tokens on brackets and on '-', the separator of explicit
                ids; empty brackets get the next free index.

        Returns:
            The generated id, already registered.
        """
        stop = not self.force_append_index
        if name:
            tokens = [
                part
                for token in name.replace(']', '').split('[')
                for part in token.split('-')
            ]
        else:
            tokens = [AUTO_TOKEN, ''] if stop else [AUTO_TOKEN]

        level = self._claimed
        parts: list[str] = []
        while tokens:
            token = tokens.pop(0)
            # ids must not start with a digit
            if not parts and _NUMERIC.match(token):
                token = f"qf{token}"
            if token == '':
                token = self._next_index(level)
            parts.append(token)

            if token not in level:
                level[token] = {}
            elif not tokens and stop:
                # Name already taken: disambiguate with an index
                tokens.append('')

            if not tokens and not stop:
                tokens.append('')
                stop = True
            level = level[token]

        generated = '-'.join(parts)
        self._ids.add(generated)
        logger.debug("Generated id '%s' for name '%s'", generated, name)
        return generated

    def dispose(self) -> None:
        """Release every claimed id.

        The registry stays usable; ids generated afterwards start over.
        """
        self._claimed.clear()
        self._ids.clear()
        logger.debug("Registry disposed")

    @staticmethod
    def _next_index(level: dict[str, dict]) -> str:
        n = 0
        while str(n) in level:
            n += 1
        return str(n)
