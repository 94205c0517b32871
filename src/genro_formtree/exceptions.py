# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""FormTree exceptions."""

from __future__ import annotations


class FormTreeError(Exception):
    """Base exception for FormTree errors."""

    pass


class InvalidArgumentError(FormTreeError, ValueError):
    """Raised when an operation receives an argument it cannot accept.

    Typical causes: clearing a mandatory attribute ('name', 'id'),
    changing a read-only attribute, or creating an ownership cycle.
    """

    pass


class NotFoundError(FormTreeError, LookupError):
    """Raised when an element is not a direct child of the target container."""

    pass
