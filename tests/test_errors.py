"""Tests for urlform.errors module."""

import pytest
from urlform.errors import (
    UrlFormError,
    PreconditionError,
    EncodingUnavailableError,
)


class TestErrorHierarchy:
    """Tests for error class hierarchy."""

    def test_urlform_error_is_exception(self):
        """Test UrlFormError inherits from Exception."""
        assert issubclass(UrlFormError, Exception)

    def test_precondition_error_is_value_error(self):
        """Test PreconditionError can be caught as ValueError."""
        assert issubclass(PreconditionError, UrlFormError)
        assert issubclass(PreconditionError, ValueError)

    def test_encoding_unavailable_is_lookup_error(self):
        """Test EncodingUnavailableError can be caught as LookupError."""
        assert issubclass(EncodingUnavailableError, UrlFormError)
        assert issubclass(EncodingUnavailableError, LookupError)


class TestErrorCatching:
    """Tests for catching errors at different hierarchy levels."""

    def test_catch_all_as_urlform_error(self):
        """Test all custom errors can be caught as UrlFormError."""
        for error in (PreconditionError("pre"), EncodingUnavailableError("utf")):
            with pytest.raises(UrlFormError):
                raise error
