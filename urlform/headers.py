"""Header helpers for multipart/form-data parts."""

from __future__ import annotations

import mimetypes
import re
from typing import Final

DEFAULT_CONTENT_TYPE: Final[str] = "application/octet-stream"

# HTML5 form submission escaping for quoted header parameters: the double
# quote and all C0 control characters except ESC become %XX.
_PARAM_REPLACEMENTS: Final[dict[str, str]] = {'"': "%22"}
_PARAM_REPLACEMENTS.update(
    {chr(cc): f"%{cc:02X}" for cc in range(0x00, 0x1F + 1) if cc != 0x1B}
)
_PARAM_PATTERN: Final[re.Pattern[str]] = re.compile(
    "|".join(re.escape(needle) for needle in _PARAM_REPLACEMENTS)
)


def guess_content_type(filename: str, default: str = DEFAULT_CONTENT_TYPE) -> str:
    """
    Guess the Content-Type of a file from its extension.

    Falls back to `default` when `mimetypes` does not recognise the name.
    """
    if filename:
        return mimetypes.guess_type(filename)[0] or default
    return default


def _escape_param(value: str) -> str:
    return _PARAM_PATTERN.sub(lambda match: _PARAM_REPLACEMENTS[match.group(0)], value)


def format_header_param(name: str, value: str) -> str:
    """
    Format a quoted header parameter such as ``name="field"``.
    CR, LF and double quotes in `value` are percent-escaped so a field name
    or filename cannot terminate the header line.
    """
    return f'{name}="{_escape_param(value)}"'


def content_disposition(name: str, filename: str | None = None) -> str:
    """Build the Content-Disposition line for a form field or file part."""
    parts = ["form-data", format_header_param("name", name)]
    if filename is not None:
        parts.append(format_header_param("filename", filename))
    return "Content-Disposition: " + "; ".join(parts)
