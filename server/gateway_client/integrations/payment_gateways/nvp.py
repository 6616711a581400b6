"""
Name-Value-Pair (NVP) Response Decoding

The legacy NVP protocol returns ``key=value`` pairs joined by ``&`` with
keys written as dotted paths (``order.amount``). Keys and values are
form-encoded; every value is kept as a string.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union
from urllib.parse import unquote_plus, urlencode

from gateway_client.core.logging import get_logger

from .base import (
    ERROR_RESULT,
    GatewayReportedError,
    MalformedResponse,
    ResponseFamily,
    ResponseSyntaxError,
)

logger = get_logger(__name__)

PAIR_SEPARATOR = "&"
KEY_VALUE_SEPARATOR = "="


def _unquote(text: str, family: Optional[ResponseFamily]) -> str:
    try:
        return unquote_plus(text, errors="strict")
    except UnicodeDecodeError as e:
        raise ResponseSyntaxError(
            f"NVP text {text!r} does not percent-decode to UTF-8: {e}", family=family
        ) from e


def parse_nvp(body: Union[str, bytes], family: Optional[ResponseFamily] = None) -> Mapping[str, str]:
    """
    Split an NVP body into an ordered, read-only mapping.

    Pairs are split on ``&`` and then on the first ``=``; literal ``&`` and
    ``=`` inside keys or values arrive percent-encoded, so splitting before
    decoding never cuts a value. Empty segments (``a=1&&b=2`` or a trailing
    ``&``) carry no pair and are skipped.

    Duplicate keys: the last occurrence wins. The key keeps the position of
    its first occurrence.

    Raises:
        ResponseSyntaxError: If the body is empty or is not UTF-8 text,
            raw or after percent-decoding
        MalformedResponse: If any pair has no ``=``; no partial map is returned
    """
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ResponseSyntaxError(f"Response body is not UTF-8 text: {e}", family=family) from e

    if not body or not body.strip():
        raise ResponseSyntaxError("Response body is empty, expected NVP text", family=family)

    decoded: Dict[str, str] = {}
    for position, pair in enumerate(body.strip().split(PAIR_SEPARATOR)):
        if not pair:
            continue
        raw_key, separator, raw_value = pair.partition(KEY_VALUE_SEPARATOR)
        key = _unquote(raw_key, family)
        if not separator:
            raise MalformedResponse(
                f"NVP pair {position} has no '{KEY_VALUE_SEPARATOR}': {key!r}",
                path=key,
                family=family,
            )
        decoded[key] = _unquote(raw_value, family)

    return MappingProxyType(decoded)


def encode_nvp(values: Mapping[str, str]) -> str:
    """Form-encode a mapping back into NVP text, preserving its order."""
    return urlencode(list(values.items()))


def extract_nvp_error(values: Mapping[str, str], family: Optional[ResponseFamily] = None) -> None:
    """
    Raise the gateway's error if the mapping signals ``result=ERROR``.

    Raises:
        GatewayReportedError: If the response signals an error
    """
    if values.get("result") != ERROR_RESULT:
        return

    exc = GatewayReportedError(
        error_code=values.get("error.cause"),
        explanation=values.get("error.explanation"),
        field=values.get("error.field"),
        validation_type=values.get("error.validationType"),
        family=family,
    )
    logger.warning(
        "gateway.response.error_signal",
        family=family.value if family else "nvp",
        error_code=exc.error_code,
        field=exc.field,
        validation_type=exc.validation_type,
    )
    raise exc


def decode_nvp_response(
    body: Union[str, bytes], family: Optional[ResponseFamily] = None
) -> Mapping[str, str]:
    """
    Decode an NVP response body, raising the gateway error if one is signalled.

    Returns:
        Ordered mapping of dotted keys to string values
    """
    values = parse_nvp(body, family)
    extract_nvp_error(values, family)
    return values

