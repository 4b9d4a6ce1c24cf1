from __future__ import annotations

import codecs
from typing import TypeVar

from urlform.errors import EncodingUnavailableError, PreconditionError

T = TypeVar("T")

UTF_8 = "utf-8"


def check_not_none(obj: T | None, message: str) -> T:
    """Return `obj` unchanged, or raise PreconditionError if it is None."""
    if obj is None:
        raise PreconditionError(message)
    return obj


def ensure_utf8() -> codecs.CodecInfo:
    try:
        return codecs.lookup(UTF_8)
    except LookupError as exc:
        raise EncodingUnavailableError(
            f"Cannot find specified encoding: {UTF_8}"
        ) from exc
