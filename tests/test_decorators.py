"""Tests for the internal decorators."""

from __future__ import annotations

import logging
import warnings

import pytest

from naivedate._internal.decorators import deprecated, failsafe
from naivedate.errors import CalendarError, InvertedRangeError, NaiveDateError


# ============================================================================
# Test @deprecated Decorator
# ============================================================================


class TestDeprecatedDecorator:
    """Tests for the @deprecated parameterized decorator."""

    def test_emits_warning(self) -> None:
        """Test that @deprecated emits a DeprecationWarning."""

        @deprecated("Use complete() instead")
        def get(prefix: str) -> str:
            return prefix

        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            result = get("2024")

            assert result == "2024"
            assert len(w) == 1
            assert issubclass(w[0].category, DeprecationWarning)
            assert "get is deprecated" in str(w[0].message)
            assert "Use complete() instead" in str(w[0].message)

    def test_preserves_metadata(self) -> None:
        """Test that @deprecated keeps the name and docstring."""

        @deprecated("Old API")
        def legacy() -> None:
            """Legacy docstring."""

        assert legacy.__name__ == "legacy"
        assert legacy.__doc__ == "Legacy docstring."

    def test_marker_attributes(self) -> None:
        """Test that @deprecated adds marker attributes for introspection."""

        @deprecated("Test message")
        def marked() -> None:
            pass

        assert marked._deprecated is True
        assert marked._deprecation_message == "Test message"


# ============================================================================
# Test @failsafe Decorator
# ============================================================================


class TestFailsafeDecorator:
    """Tests for the @failsafe decorator."""

    def test_passes_through_results(self) -> None:
        """Test a successful call is returned unchanged."""

        @failsafe(None)
        def double(n: int) -> int:
            return n * 2

        assert double(4) == 8

    @pytest.mark.parametrize(
        "error",
        [NaiveDateError("base"), CalendarError("bad day"), InvertedRangeError("backwards")],
    )
    def test_returns_default_on_library_error(self, error: NaiveDateError) -> None:
        """Test every NaiveDateError subclass is turned into the default."""

        @failsafe(False)
        def boom() -> bool:
            raise error

        assert boom() is False

    def test_other_errors_propagate(self) -> None:
        """Test non-library errors are not swallowed."""

        @failsafe(None)
        def boom() -> None:
            raise ZeroDivisionError("division by zero")

        with pytest.raises(ZeroDivisionError):
            boom()

    def test_logs_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test the swallowed error is logged with the call's arguments."""

        @failsafe(None)
        def weekday(s: str) -> str:
            raise CalendarError("day must be between 1 and 29 for 2024-02, got 30")

        with caplog.at_level(logging.DEBUG, logger="naivedate._internal.decorators"):
            assert weekday("2024-02-30") is None

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.levelno == logging.DEBUG
        assert "weekday('2024-02-30',)" in record.getMessage()
        assert "got 30" in record.getMessage()
