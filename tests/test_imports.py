"""Tests for datestr package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations

import logging


def test_import_datestr() -> None:
    """Import datestr package succeeds."""
    import datestr

    assert hasattr(datestr, "__version__")
    assert datestr.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import datestr.core submodule succeeds."""
    from datestr import core

    assert hasattr(core, "__all__")


def test_import_format_module() -> None:
    """Import datestr.format submodule succeeds."""
    from datestr import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_arithmetic_module() -> None:
    """Import datestr.arithmetic submodule succeeds."""
    from datestr import arithmetic

    assert hasattr(arithmetic, "__all__")


def test_import_convert_module() -> None:
    """Import datestr.convert submodule succeeds."""
    from datestr import convert

    assert hasattr(convert, "__all__")


def test_import_internal_module() -> None:
    """Import datestr._internal submodule succeeds."""
    from datestr import _internal

    assert hasattr(_internal, "__all__")


def test_public_names_resolve() -> None:
    """Every name in datestr.__all__ is an attribute of the package."""
    import datestr

    for name in datestr.__all__:
        assert hasattr(datestr, name), name


def test_library_logger_has_null_handler() -> None:
    """Importing datestr does not configure log output."""
    import datestr  # noqa: F401

    handlers = logging.getLogger("datestr").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
