import logging
from logging import NullHandler

from urlform.encoding import (
    append_parameters_to_query_string,
    append_query,
    decode,
    encode,
    encode_map,
    form_url_decode,
    form_url_encode,
    form_url_encode_map,
    percent_decode,
    percent_encode,
)
from urlform.errors import EncodingUnavailableError, PreconditionError, UrlFormError
from urlform.headers import guess_content_type
from urlform.multipart import build_multipart, choose_boundary, encode_form_data

__version__ = "0.1.0"

# Set default logging handler to avoid "No handler found" warnings.
logging.getLogger(__name__).addHandler(NullHandler())


def add_stderr_logger(level: int = logging.DEBUG) -> logging.StreamHandler:
    """Attach a stderr handler to the urlform logger for quick debugging."""
    logger = logging.getLogger(__name__)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.debug("Added a stderr logging handler to logger: %s", __name__)
    return handler


__all__ = [
    "form_url_encode",
    "form_url_decode",
    "percent_encode",
    "percent_decode",
    "form_url_encode_map",
    "append_parameters_to_query_string",
    "encode",
    "decode",
    "encode_map",
    "append_query",
    "encode_form_data",
    "build_multipart",
    "choose_boundary",
    "guess_content_type",
    "add_stderr_logger",
    "UrlFormError",
    "PreconditionError",
    "EncodingUnavailableError",
]
