from __future__ import annotations

import io
import logging
import os
import re
import uuid
from collections.abc import Iterable, Mapping
from typing import Final, Union

from urlform.errors import PreconditionError
from urlform.headers import DEFAULT_CONTENT_TYPE, content_disposition, guess_content_type
from urlform.utils import UTF_8, check_not_none

log = logging.getLogger(__name__)

CRLF: Final[str] = "\r\n"
CHUNK_SIZE: Final[int] = 1024
TEXT_CONTENT_TYPE: Final[str] = "text/plain; charset=UTF-8"
BINARY_TRANSFER_ENCODING: Final[str] = "Content-Transfer-Encoding: binary"

# RFC 2046 section 5.1.1: 1-70 bchars, not ending in a space.
_STRICT_BOUNDARY_RE: Final[re.Pattern[str]] = re.compile(
    r"[0-9A-Za-z'()+_,\-./:=? ]{0,69}[0-9A-Za-z'()+_,\-./:=?]"
)
_CONTROL_CHARS_RE: Final[re.Pattern[str]] = re.compile(r"[\x00-\x1f\x7f]")

FilePath = Union[str, os.PathLike]
TextFields = Union[Mapping[str, str], Iterable[tuple[str, str]]]
FileFields = Union[Mapping[str, FilePath], Iterable[tuple[str, FilePath]]]


def choose_boundary() -> str:
    return uuid.uuid4().hex


def validate_boundary(boundary: str, strict: bool = False) -> str:
    """
    Check a caller-supplied boundary token.

    Any non-empty string without control characters is accepted. With
    `strict` the token must also be 1-70 RFC 2046 bchars.
    """
    check_not_none(boundary, "Cannot encode form data without a boundary")
    if not boundary or _CONTROL_CHARS_RE.search(boundary):
        raise PreconditionError(f"Invalid multipart boundary: {boundary!r}")
    if strict and not _STRICT_BOUNDARY_RE.fullmatch(boundary):
        raise PreconditionError(f"Boundary is not RFC 2046 compliant: {boundary!r}")
    return boundary


def _iter_pairs(fields, kind: str):
    check_not_none(fields, f"Cannot encode null {kind} fields")
    items = fields.items() if isinstance(fields, Mapping) else fields
    for name, value in items:
        check_not_none(name, f"Cannot encode {kind} field with null name")
        check_not_none(value, f"Cannot encode {kind} field {name!r} with null value")
        yield name, value


def _write_line(body: io.BytesIO, line: str = "") -> None:
    body.write((line + CRLF).encode(UTF_8))


def _encode_field(body: io.BytesIO, boundary: str, name: str, value: str) -> None:
    _write_line(body, f"--{boundary}")
    _write_line(body, content_disposition(name))
    _write_line(body, f"Content-Type: {TEXT_CONTENT_TYPE}")
    _write_line(body)
    _write_line(body, value)


def _encode_file(
    body: io.BytesIO,
    boundary: str,
    name: str,
    path: FilePath,
    content_type: str,
    chunk_size: int,
) -> int:
    filename = os.fspath(path)
    _write_line(body, f"--{boundary}")
    _write_line(body, content_disposition(name, filename))
    _write_line(body, f"Content-Type: {content_type}")
    _write_line(body, BINARY_TRANSFER_ENCODING)
    _write_line(body)
    size = 0
    with open(filename, "rb") as f:
        while chunk := f.read(chunk_size):
            body.write(chunk)
            size += len(chunk)
    # The CRLF after the file bytes ends the binary section.
    _write_line(body)
    return size


def encode_form_data(
    fields: TextFields,
    files: FileFields,
    boundary: str,
    default_content_type: str = DEFAULT_CONTENT_TYPE,
    chunk_size: int = CHUNK_SIZE,
) -> bytes:
    """
    Encode text fields and files as a multipart/form-data body.

    Text parts are written first, then one part per file, each in iteration
    order. The filename sent is the path exactly as given. File contents are
    copied in `chunk_size` byte reads. An unreadable path raises `OSError`
    and no body is returned.

    `default_content_type` is used when the file's type cannot be guessed
    from its name; pass an empty string to leave the header value blank.
    """
    validate_boundary(boundary)
    if chunk_size < 1:
        raise PreconditionError(f"Chunk size must be positive, got {chunk_size}")
    with io.BytesIO() as body:
        for name, value in _iter_pairs(fields, "text"):
            _encode_field(body, boundary, name, value)
            log.debug("Encoded text part %r (%d chars)", name, len(value))
        for name, path in _iter_pairs(files, "file"):
            content_type = guess_content_type(os.fspath(path), default_content_type)
            size = _encode_file(body, boundary, name, path, content_type, chunk_size)
            log.debug("Encoded file part %r from %s (%s, %d bytes)", name, path, content_type, size)
        _write_line(body, f"--{boundary}--")
        payload = body.getvalue()
    log.debug("Encoded multipart/form-data body of %d bytes", len(payload))
    return payload


def build_multipart(
    fields: TextFields | None,
    files: FileFields | None,
    boundary: str | None = None,
) -> tuple[str, bytes]:
    """
    Build a multipart/form-data body and its Content-Type header value.
    A random boundary is chosen when none is given.
    """
    if boundary is None:
        boundary = choose_boundary()
    body = encode_form_data(fields or {}, files or {}, boundary)
    content_type = f"multipart/form-data; boundary={boundary}"
    return content_type, body
