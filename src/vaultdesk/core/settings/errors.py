"""Errors raised while decoding settings documents."""

from __future__ import annotations


class SettingsFormatError(ValueError):
    """The document does not have the shape of a settings document.

    Raised for structural problems only (root is not a mapping, ``directories``
    is not a list, ...). Bad individual values never raise.
    """
