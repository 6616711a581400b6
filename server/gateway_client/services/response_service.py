from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Union

from gateway_client.core.config import get_settings
from gateway_client.core.logging import get_logger
from gateway_client.integrations.payment_gateways import json_decoders
from gateway_client.integrations.payment_gateways.base import (
    GatewayReportedError,
    GatewayResponseError,
    ResponseFamily,
    ResponseFormat,
)
from gateway_client.integrations.payment_gateways.nvp import decode_nvp_response

logger = get_logger(__name__)

Decoder = Callable[[Union[str, bytes]], Any]

JSON_DECODERS: Mapping[ResponseFamily, Decoder] = MappingProxyType(
    {
        ResponseFamily.TRANSACTION: json_decoders.decode_transaction_response,
        ResponseFamily.OPERATION: json_decoders.decode_operation_response,
        ResponseFamily.BROWSER_PAYMENT: json_decoders.decode_browser_payment_response,
        ResponseFamily.BROWSER_PAYMENT_REDIRECT: json_decoders.decode_browser_payment_redirect_url,
        ResponseFamily.SECURE_ENROLLMENT: json_decoders.decode_secure_enrollment_response,
        ResponseFamily.HOSTED_SESSION: json_decoders.decode_hosted_session_response,
        ResponseFamily.TOKEN: json_decoders.decode_token_response,
        ResponseFamily.WEBHOOK: json_decoders.decode_webhook_notification,
    }
)


def _decode(
    body: Union[str, bytes],
    family: ResponseFamily,
    response_format: ResponseFormat,
    provider: Optional[str],
) -> Any:
    if response_format is ResponseFormat.NVP:
        return decode_nvp_response(body, family)
    if family is ResponseFamily.WALLET:
        if provider is None:
            provider = get_settings().wallet_provider
        return json_decoders.decode_wallet_response(body, provider)
    return JSON_DECODERS[family](body)


def decode_response(
    body: Union[str, bytes],
    family: ResponseFamily,
    *,
    response_format: ResponseFormat = ResponseFormat.JSON,
    provider: Optional[str] = None,
    status_code: Optional[int] = None,
) -> Any:
    """
    Decode a gateway response body for the family the caller expects.

    The family is never inferred from the payload. NVP bodies always decode
    to the generic string mapping. ``status_code`` is informational only;
    error detection relies on the payload's own ``result``.

    Raises:
        GatewayReportedError: If the gateway signalled ``result=ERROR``
        MalformedResponse: If the payload does not match the family's shape
        ResponseSyntaxError: If the body is not valid JSON or NVP text
    """
    family = ResponseFamily(family)
    response_format = ResponseFormat(response_format)
    try:
        result = _decode(body, family, response_format, provider)
    except GatewayReportedError:
        raise
    except GatewayResponseError as e:
        logger.error(
            "gateway.response.malformed",
            family=family.value,
            format=response_format.value,
            status_code=status_code,
            error_type=type(e).__name__,
            path=getattr(e, "path", None),
            error=e.error_message,
        )
        raise

    logger.debug(
        "gateway.response.decoded",
        family=family.value,
        format=response_format.value,
        status_code=status_code,
    )
    return result
