"""Tests for urlform.utils module."""

from unittest.mock import patch

import pytest
from urlform.errors import EncodingUnavailableError, PreconditionError
from urlform.utils import check_not_none, ensure_utf8


class TestCheckNotNone:
    """Tests for check_not_none function."""

    def test_returns_value(self):
        """Test non-None values pass through unchanged."""
        value = {"a": "1"}
        assert check_not_none(value, "msg") is value

    def test_falsy_values_pass(self):
        """Test empty but non-None values are accepted."""
        assert check_not_none("", "msg") == ""
        assert check_not_none({}, "msg") == {}

    def test_none_raises_with_message(self):
        """Test None raises PreconditionError with the given message."""
        with pytest.raises(PreconditionError, match="Cannot encode null string"):
            check_not_none(None, "Cannot encode null string")


class TestEnsureUtf8:
    """Tests for ensure_utf8 function."""

    def test_utf8_available(self):
        """Test the UTF-8 codec is found."""
        assert ensure_utf8().name == "utf-8"

    def test_missing_codec_raises(self):
        """Test a missing codec raises EncodingUnavailableError."""
        with patch("urlform.utils.codecs.lookup", side_effect=LookupError("utf-8")):
            with pytest.raises(EncodingUnavailableError, match="Cannot find specified encoding: utf-8"):
                ensure_utf8()
