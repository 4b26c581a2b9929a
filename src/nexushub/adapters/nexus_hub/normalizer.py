"""Response normalizer: JSON decoding, allow-listed key normalization and status handling."""

import json
import logging
from typing import Any, Union

import httpx

from nexushub.domain.errors import DecodeError, UnexpectedResponseError
from nexushub.domain.models import FieldKey, NotFound

logger = logging.getLogger(__name__)


def normalize_keys(tree: Any) -> Any:
    """Replace allow-listed mapping keys with FieldKey members at every depth.

    Unknown keys stay plain strings. Sequence order and mapping insertion
    order are preserved; scalars pass through unchanged.
    """
    if isinstance(tree, dict):
        return {_normalize_key(key): normalize_keys(value) for key, value in tree.items()}
    if isinstance(tree, list):
        return [normalize_keys(element) for element in tree]
    return tree


def _normalize_key(key: Any) -> Any:
    if isinstance(key, str):
        return FieldKey.lookup(key) or key
    return key


def decode_body(response: httpx.Response) -> Any:
    """Decode a response body as JSON.

    Raises:
        DecodeError: If the body is not valid JSON.
    """
    try:
        return json.loads(response.content)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(response.status_code, response.text, _url_of(response)) from e


def normalize_response(response: httpx.Response) -> Union[Any, NotFound]:
    """Turn a raw HTTP response into normalized data or a NotFound value.

    Args:
        response: Response returned by the transport.

    Returns:
        The normalized body for 200 responses, NotFound for 404 responses
        carrying a ``reason`` string.

    Raises:
        DecodeError: If a 200/404 body is not valid JSON.
        UnexpectedResponseError: For any other status, or a 404 without a reason.
    """
    status = response.status_code

    if status == httpx.codes.OK:
        return normalize_keys(decode_body(response))

    if status == httpx.codes.NOT_FOUND:
        body = normalize_keys(decode_body(response))
        reason = body.get("reason") if isinstance(body, dict) else None
        if isinstance(reason, str):
            logger.debug("Not found at %s: %s", _url_of(response), reason)
            return NotFound(reason)

    logger.warning("Unexpected %s response from %s", status, _url_of(response))
    raise UnexpectedResponseError(status, response.text, _url_of(response))


def _url_of(response: httpx.Response) -> str | None:
    # Responses built by hand in tests may carry no request
    try:
        return str(response.request.url)
    except RuntimeError:
        return None
