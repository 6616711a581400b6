"""
Payment gateway response decoding

Turns raw gateway response bodies into typed results or structured errors.
"""

from .base import (
    ApiException,
    GatewayReportedError,
    GatewayResponseError,
    MalformedResponse,
    ResponseFamily,
    ResponseFormat,
    ResponseSyntaxError,
)
from .json_decoders import (
    decode_browser_payment_redirect_url,
    decode_browser_payment_response,
    decode_hosted_session_response,
    decode_operation_response,
    decode_secure_enrollment_response,
    decode_token_response,
    decode_transaction_response,
    decode_wallet_response,
    decode_webhook_notification,
    extract_json_error,
)
from .nvp import decode_nvp_response, encode_nvp, extract_nvp_error, parse_nvp

__all__ = [
    "ApiException",
    "GatewayReportedError",
    "GatewayResponseError",
    "MalformedResponse",
    "ResponseFamily",
    "ResponseFormat",
    "ResponseSyntaxError",
    "decode_browser_payment_redirect_url",
    "decode_browser_payment_response",
    "decode_hosted_session_response",
    "decode_operation_response",
    "decode_secure_enrollment_response",
    "decode_token_response",
    "decode_transaction_response",
    "decode_wallet_response",
    "decode_webhook_notification",
    "extract_json_error",
    "decode_nvp_response",
    "encode_nvp",
    "extract_nvp_error",
    "parse_nvp",
]
