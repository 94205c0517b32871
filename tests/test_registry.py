# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for IdentifierRegistry."""

from genro_formtree import IdentifierRegistry


class TestGenerate:
    """Tests for id generation."""

    def test_plain_name(self):
        """Test first id for a name is the name itself."""
        registry = IdentifierRegistry()
        assert registry.generate('foo') == 'foo'

    def test_duplicate_names_get_index(self):
        """Test repeated names are disambiguated with an index."""
        registry = IdentifierRegistry()
        assert registry.generate('foo') == 'foo'
        assert registry.generate('foo') == 'foo-0'
        assert registry.generate('foo') == 'foo-1'

    def test_empty_name(self):
        """Test unnamed elements get qfauto ids."""
        registry = IdentifierRegistry()
        assert registry.generate('') == 'qfauto-0'
        assert registry.generate('') == 'qfauto-1'

    def test_array_name(self):
        """Test array-style names are split on brackets."""
        registry = IdentifierRegistry()
        assert registry.generate('address[city]') == 'address-city'
        assert registry.generate('address[zip]') == 'address-zip'

    def test_empty_brackets_are_numbered(self):
        """Test '[]' gets the next free index."""
        registry = IdentifierRegistry()
        assert registry.generate('phone[]') == 'phone-0'
        assert registry.generate('phone[]') == 'phone-1'

    def test_numeric_first_token_prefixed(self):
        """Test ids do not start with a digit."""
        registry = IdentifierRegistry()
        assert registry.generate('1') == 'qf1'
        assert registry.generate('2[a]') == 'qf2-a'

    def test_force_append_index(self):
        """Test force_append_index always appends an index."""
        registry = IdentifierRegistry(force_append_index=True)
        assert registry.generate('foo') == 'foo-0'
        assert registry.generate('foo') == 'foo-1'
        assert registry.generate('') == 'qfauto-0'

    def test_generated_ids_are_claimed(self):
        """Test generated ids are registered."""
        registry = IdentifierRegistry()
        registry.generate('foo')
        assert 'foo' in registry

    def test_hyphenated_name(self):
        """Test hyphens in names split tokens like explicit ids do."""
        registry = IdentifierRegistry()
        assert registry.generate('first-name') == 'first-name'
        assert 'first-name' in registry
        assert registry.generate('first-name') == 'first-name-0'

    def test_bracket_and_hyphen_names_do_not_collide(self):
        """Test 'a[b]' and 'a-b' get distinct ids."""
        registry = IdentifierRegistry()
        assert registry.generate('a[b]') == 'a-b'
        assert registry.generate('a-b') == 'a-b-0'


class TestRegister:
    """Tests for explicit id registration."""

    def test_register(self):
        """Test registered id is claimed."""
        registry = IdentifierRegistry()
        registry.register('login')
        assert 'login' in registry
        assert 'other' not in registry

    def test_register_avoids_collision(self):
        """Test generation skips explicitly claimed ids."""
        registry = IdentifierRegistry()
        registry.register('foo')
        registry.register('foo-0')
        assert registry.generate('foo') == 'foo-1'

    def test_register_duplicate_is_accepted(self):
        """Test explicit duplicates do not raise."""
        registry = IdentifierRegistry()
        registry.register('foo')
        registry.register('foo')
        assert 'foo' in registry

    def test_register_hyphenated_avoids_collision(self):
        """Test generating a name equal to a hyphenated explicit id."""
        registry = IdentifierRegistry()
        registry.register('first-name')
        assert registry.generate('first-name') == 'first-name-0'

    def test_contains_matches_whole_ids(self):
        """Test prefixes of claimed ids are not claimed themselves."""
        registry = IdentifierRegistry()
        registry.register('foo-0')
        assert 'foo-0' in registry
        assert 'foo' not in registry


class TestLifecycle:
    """Tests for registry isolation and disposal."""

    def test_registries_are_independent(self):
        """Test ids claimed in one registry do not affect another."""
        first = IdentifierRegistry()
        second = IdentifierRegistry()
        assert first.generate('foo') == 'foo'
        assert second.generate('foo') == 'foo'

    def test_dispose(self):
        """Test dispose releases all ids."""
        registry = IdentifierRegistry()
        registry.generate('foo')
        registry.register('bar')
        registry.dispose()
        assert 'foo' not in registry
        assert 'bar' not in registry
        assert registry.generate('foo') == 'foo'
