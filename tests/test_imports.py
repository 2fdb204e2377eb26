"""Tests for naivedate package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_naivedate() -> None:
    """Import naivedate package succeeds."""
    import naivedate

    assert hasattr(naivedate, "__version__")
    assert naivedate.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import naivedate.core submodule succeeds."""
    from naivedate import core

    assert hasattr(core, "__all__")


def test_import_codec_module() -> None:
    """Import naivedate.codec submodule succeeds."""
    from naivedate import codec

    assert hasattr(codec, "__all__")


def test_import_arithmetic_module() -> None:
    """Import naivedate.arithmetic submodule succeeds."""
    from naivedate import arithmetic

    assert hasattr(arithmetic, "__all__")


def test_import_completion_module() -> None:
    """Import naivedate.completion submodule succeeds."""
    from naivedate import completion

    assert hasattr(completion, "__all__")


def test_import_internal_module() -> None:
    """Import naivedate._internal submodule succeeds."""
    from naivedate import _internal

    assert hasattr(_internal, "__all__")


def test_public_names_resolve() -> None:
    """Every name in naivedate.__all__ exists."""
    import naivedate

    for name in naivedate.__all__:
        assert hasattr(naivedate, name), name


def test_import_errors() -> None:
    """Import naivedate.errors succeeds with all exception classes."""
    from naivedate.errors import (
        ArgumentError,
        CalendarError,
        FormatError,
        InvertedRangeError,
        MalformedDateError,
        NaiveDateError,
        OutOfRangeError,
        ParseError,
        RangeError,
        UnknownTokenError,
        UnsupportedPrefixError,
    )

    # Verify inheritance hierarchy
    assert issubclass(MalformedDateError, ParseError)
    assert issubclass(UnsupportedPrefixError, ParseError)
    assert issubclass(InvertedRangeError, RangeError)
    assert issubclass(OutOfRangeError, RangeError)
    assert issubclass(UnknownTokenError, FormatError)
    for cls in (ParseError, ArgumentError, CalendarError, RangeError, FormatError):
        assert issubclass(cls, NaiveDateError)
    assert issubclass(NaiveDateError, Exception)


def test_import_constants() -> None:
    """Import naivedate._internal.constants succeeds."""
    from naivedate._internal.constants import (
        DAYS_BEFORE_MONTH,
        DAYS_IN_MONTH,
        MAX_YEAR,
        MIN_YEAR,
        MONTH_NAMES,
        WEEKDAY_NAMES,
    )

    assert (MIN_YEAR, MAX_YEAR) == (1900, 2100)
    assert sum(DAYS_IN_MONTH) == 365
    assert DAYS_BEFORE_MONTH[12] == 334
    assert MONTH_NAMES[1] == "January"
    assert WEEKDAY_NAMES[0] == "Monday"
