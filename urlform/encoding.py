"""
URL and form-urlencoding helpers.

`form_url_encode` follows the application/x-www-form-urlencoded byte set:
ASCII alphanumerics and ``*-._`` pass through, space becomes ``+`` and
everything else is percent-encoded as UTF-8. `percent_encode` post-processes
that output into RFC 3986 percent-encoding.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final
from urllib.parse import quote_plus, unquote, unquote_plus

from urlform.utils import UTF_8, check_not_none, ensure_utf8

EMPTY_STRING: Final[str] = ""
PAIR_SEPARATOR: Final[str] = "="
PARAM_SEPARATOR: Final[str] = "&"
QUERY_STRING_SEPARATOR: Final[str] = "?"

# Characters kept literally besides ASCII alphanumerics and "_.-".
FORM_SAFE: Final[str] = "*"

ENCODING_RULES: Final[tuple[tuple[str, str], ...]] = (
    ("*", "%2A"),
    ("+", "%20"),
    ("%7E", "~"),
)

ensure_utf8()


def form_url_encode(string: str) -> str:
    """Translate a string into application/x-www-form-urlencoded format."""
    check_not_none(string, "Cannot encode null string")
    encoded = quote_plus(string, safe=FORM_SAFE, encoding=UTF_8, errors="replace")
    # quote_plus treats "~" as unreserved; the form byte set escapes it.
    return encoded.replace("~", "%7E")


def form_url_decode(string: str) -> str:
    """
    Decode an application/x-www-form-urlencoded string.

    Malformed UTF-8 sequences decode to U+FFFD instead of raising.
    """
    check_not_none(string, "Cannot decode null string")
    return unquote_plus(string, encoding=UTF_8, errors="replace")


def percent_encode(string: str) -> str:
    """
    Percent-encode a string per RFC 3986.

    Space becomes ``%20``, ``*`` becomes ``%2A`` and ``~`` is left alone.
    """
    encoded = form_url_encode(string)
    for pattern, replacement in ENCODING_RULES:
        encoded = encoded.replace(pattern, replacement)
    return encoded


def percent_decode(string: str) -> str:
    """Decode an RFC 3986 percent-encoded string; ``+`` stays a literal plus."""
    check_not_none(string, "Cannot decode null string")
    return unquote(string, encoding=UTF_8, errors="replace")


def form_url_encode_map(mapping: Mapping[str, str | None]) -> str:
    """
    Turn a mapping into a form-urlencoded string.

    Pairs are emitted in the mapping's iteration order. A None value
    produces the bare key without a ``=``.
    """
    check_not_none(mapping, "Cannot url-encode a null object")
    if not mapping:
        return EMPTY_STRING
    pairs: list[str] = []
    for key, value in mapping.items():
        if value is None:
            pairs.append(form_url_encode(key))
        else:
            pairs.append(form_url_encode(key) + PAIR_SEPARATOR + form_url_encode(value))
    return PARAM_SEPARATOR.join(pairs)


def append_parameters_to_query_string(url: str, params: Mapping[str, str | None]) -> str:
    """Append `params` to the query string of `url`."""
    check_not_none(url, "Cannot append to null URL")
    query_string = form_url_encode_map(params)
    if query_string == EMPTY_STRING:
        return url
    separator = PARAM_SEPARATOR if QUERY_STRING_SEPARATOR in url else QUERY_STRING_SEPARATOR
    return f"{url}{separator}{query_string}"


encode = form_url_encode
decode = form_url_decode
encode_map = form_url_encode_map
append_query = append_parameters_to_query_string
