"""
JSON Response Decoders

One decoding routine per response family. Each routine parses the raw body,
checks the top-level ``result`` for an error signal and then walks the fixed
path its family uses. The nesting differs between families and is kept that
way on purpose: transaction retrievals nest under ``transaction[0]`` while
direct operations and browser payments report at the top level.
"""

import json
from decimal import Decimal
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from gateway_client.core.logging import get_logger
from gateway_client.schemas.gateway import (
    BrowserPaymentResponse,
    HostedSession,
    SecureIdEnrollmentResponse,
    TokenResponse,
    TransactionResponse,
    WalletResponse,
    WebhookNotification,
)

from .base import (
    ERROR_RESULT,
    GatewayReportedError,
    MalformedResponse,
    ResponseFamily,
    ResponseSyntaxError,
)

logger = get_logger(__name__)

Path = Tuple[Union[str, int], ...]

_MISSING = object()

RESULT_PATH: Path = ("result",)
RESPONSE_PATH: Path = ("response",)
ORDER_PATH: Path = ("order",)
TRANSACTION_RESPONSE_PATH: Path = ("transaction", 0, "response")
TRANSACTION_ORDER_PATH: Path = ("transaction", 0, "order")
REDIRECT_URL_PATH: Path = ("browserPayment", "redirectUrl")
INTERACTION_STATUS_PATH: Path = ("browserPayment", "interaction", "status")
SECURE_REDIRECT_PATH: Path = ("3DSecure", "authenticationRedirect", "customized")


def dotted(path: Sequence[Union[str, int]]) -> str:
    """Render a lookup path the way it reads in gateway documentation."""
    rendered = ""
    for step in path:
        if isinstance(step, int):
            rendered += f"[{step}]"
        else:
            rendered += f".{step}" if rendered else step
    return rendered or "$"


def load_json_body(body: Union[str, bytes], family: Optional[ResponseFamily] = None) -> Dict[str, Any]:
    """
    Parse a JSON body into its top-level object.

    Floats are parsed as ``Decimal`` so amounts keep the precision the
    gateway sent.

    Raises:
        ResponseSyntaxError: If the body is not valid JSON
        MalformedResponse: If the top-level value is not an object
    """
    try:
        payload = json.loads(body, parse_float=Decimal)
    except ValueError as e:
        raise ResponseSyntaxError(f"Response body is not valid JSON: {e}", family=family) from e

    if not isinstance(payload, dict):
        raise MalformedResponse(
            f"Expected a JSON object at the top level, got {type(payload).__name__}",
            path="$",
            family=family,
        )
    return payload


def _detail(error: Dict[str, Any], key: str) -> Optional[str]:
    value = error.get(key)
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (str, int, Decimal)):
        return str(value)
    return None


def extract_json_error(payload: Dict[str, Any], family: Optional[ResponseFamily] = None) -> None:
    """
    Raise the gateway's error if the payload signals ``result=ERROR``.

    Details are read from the nested ``error`` object. Any detail the
    gateway left out stays ``None``.

    Raises:
        GatewayReportedError: If the response signals an error
    """
    if payload.get("result") != ERROR_RESULT:
        return

    error = payload.get("error")
    if not isinstance(error, dict):
        error = {}

    exc = GatewayReportedError(
        error_code=_detail(error, "cause"),
        explanation=_detail(error, "explanation"),
        field=_detail(error, "field"),
        validation_type=_detail(error, "validationType"),
        family=family,
    )
    logger.warning(
        "gateway.response.error_signal",
        family=family.value if family else None,
        error_code=exc.error_code,
        field=exc.field,
        validation_type=exc.validation_type,
    )
    raise exc


def parse_json_response(body: Union[str, bytes], family: ResponseFamily) -> Dict[str, Any]:
    """Parse a body and apply the error pre-check before any field extraction."""
    payload = load_json_body(body, family)
    extract_json_error(payload, family)
    return payload


def _walk(payload: Dict[str, Any], path: Path, family: ResponseFamily) -> Any:
    node: Any = payload
    for depth, step in enumerate(path):
        if isinstance(step, int):
            if not isinstance(node, list):
                raise MalformedResponse(
                    f"Expected an array at '{dotted(path[:depth])}'",
                    path=dotted(path[:depth]),
                    family=family,
                )
            if step >= len(node):
                return _MISSING
            node = node[step]
        else:
            if not isinstance(node, dict):
                raise MalformedResponse(
                    f"Expected an object at '{dotted(path[:depth])}'",
                    path=dotted(path[:depth]),
                    family=family,
                )
            node = node.get(step, _MISSING)
            if node is None or node is _MISSING:
                return _MISSING
    return node


def _as_text(value: Any, path: Path, family: ResponseFamily) -> str:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (str, int, Decimal)):
        raise MalformedResponse(
            f"Expected a scalar value at '{dotted(path)}', got {type(value).__name__}",
            path=dotted(path),
            family=family,
        )
    return value if isinstance(value, str) else str(value)


def required_text(payload: Dict[str, Any], path: Path, family: ResponseFamily) -> str:
    value = _walk(payload, path, family)
    if value is _MISSING:
        raise MalformedResponse(
            f"Missing required field '{dotted(path)}'",
            path=dotted(path),
            family=family,
        )
    return _as_text(value, path, family)


def optional_text(payload: Dict[str, Any], path: Path, family: ResponseFamily) -> Optional[str]:
    value = _walk(payload, path, family)
    if value is _MISSING:
        return None
    return _as_text(value, path, family)


def optional_int(payload: Dict[str, Any], path: Path, family: ResponseFamily) -> Optional[int]:
    value = _walk(payload, path, family)
    if value is _MISSING:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedResponse(
            f"Expected an integer at '{dotted(path)}', got {type(value).__name__}",
            path=dotted(path),
            family=family,
        )
    return value


def _transaction_fields(
    payload: Dict[str, Any],
    order_path: Path,
    response_path: Path,
    family: ResponseFamily,
) -> Dict[str, Any]:
    return {
        "api_result": required_text(payload, RESULT_PATH, family),
        "gateway_code": required_text(payload, response_path + ("gatewayCode",), family),
        "order_id": required_text(payload, order_path + ("id",), family),
        "order_amount": required_text(payload, order_path + ("amount",), family),
        "order_currency": required_text(payload, order_path + ("currency",), family),
        "order_description": optional_text(payload, order_path + ("description",), family),
    }


def decode_transaction_response(body: Union[str, bytes]) -> TransactionResponse:
    """
    Decode an order retrieval (hosted checkout receipt) response.

    The gateway result and order are read from the first entry of the
    ``transaction`` array; ``result`` is read at the top level.
    """
    family = ResponseFamily.TRANSACTION
    payload = parse_json_response(body, family)
    return TransactionResponse(
        **_transaction_fields(payload, TRANSACTION_ORDER_PATH, TRANSACTION_RESPONSE_PATH, family)
    )


def decode_operation_response(body: Union[str, bytes]) -> TransactionResponse:
    """Decode a direct operation response (AUTHORIZE, PAY, CAPTURE, wallet payments)."""
    family = ResponseFamily.OPERATION
    payload = parse_json_response(body, family)
    return TransactionResponse(**_transaction_fields(payload, ORDER_PATH, RESPONSE_PATH, family))


def decode_browser_payment_response(body: Union[str, bytes]) -> BrowserPaymentResponse:
    """Decode a browser payment response; the redirect URL is kept when present."""
    family = ResponseFamily.BROWSER_PAYMENT
    payload = parse_json_response(body, family)
    return BrowserPaymentResponse(
        **_transaction_fields(payload, ORDER_PATH, RESPONSE_PATH, family),
        interaction_status=required_text(payload, INTERACTION_STATUS_PATH, family),
        redirect_url=optional_text(payload, REDIRECT_URL_PATH, family),
    )


def decode_browser_payment_redirect_url(body: Union[str, bytes]) -> str:
    """
    Return only ``browserPayment.redirectUrl`` from a browser payment response.

    Unlike the full decode, the redirect URL is required here.
    """
    family = ResponseFamily.BROWSER_PAYMENT_REDIRECT
    payload = parse_json_response(body, family)
    return required_text(payload, REDIRECT_URL_PATH, family)


def decode_secure_enrollment_response(body: Union[str, bytes]) -> SecureIdEnrollmentResponse:
    """
    Decode a 3-D Secure enrollment check.

    ``acsUrl`` and ``paReq`` only appear when the card is enrolled and the
    payer has to be redirected to the issuer.
    """
    family = ResponseFamily.SECURE_ENROLLMENT
    payload = parse_json_response(body, family)
    return SecureIdEnrollmentResponse(
        status=required_text(payload, ("3DSecure", "summaryStatus"), family),
        acs_url=optional_text(payload, SECURE_REDIRECT_PATH + ("acsUrl",), family),
        pa_req=optional_text(payload, SECURE_REDIRECT_PATH + ("paReq",), family),
        secure_id=optional_text(payload, ("3DSecureId",), family),
        gateway_code=optional_text(payload, ("response", "3DSecure", "gatewayCode"), family),
    )


def decode_hosted_session_response(body: Union[str, bytes]) -> HostedSession:
    """
    Decode a session creation, update or retrieval response.

    ``successIndicator`` sits beside ``session`` and is only returned when a
    checkout session is created.
    """
    family = ResponseFamily.HOSTED_SESSION
    payload = parse_json_response(body, family)
    return HostedSession(
        id=required_text(payload, ("session", "id"), family),
        version=required_text(payload, ("session", "version"), family),
        update_status=required_text(payload, ("session", "updateStatus"), family),
        aes256_key=optional_text(payload, ("session", "aes256Key"), family),
        success_indicator=optional_text(payload, ("successIndicator",), family),
        authentication_limit=optional_int(payload, ("session", "authenticationLimit"), family),
    )


def decode_wallet_response(body: Union[str, bytes], provider: str) -> WalletResponse:
    """
    Decode a wallet (e.g. Masterpass) session update response.

    Args:
        body: Raw response body
        provider: Key of the provider object under ``wallet``, e.g. "masterpass"

    Raises:
        ValueError: If no provider key is given
        MalformedResponse: If ``wallet.<provider>`` is absent or not an object
    """
    if not provider:
        raise ValueError("A wallet provider key is required")

    family = ResponseFamily.WALLET
    payload = parse_json_response(body, family)
    provider_path: Path = ("wallet", provider)
    wallet = _walk(payload, provider_path, family)
    if wallet is _MISSING:
        raise MalformedResponse(
            f"Missing wallet provider object '{dotted(provider_path)}'",
            path=dotted(provider_path),
            family=family,
        )
    if not isinstance(wallet, dict):
        raise MalformedResponse(
            f"Expected an object at '{dotted(provider_path)}'",
            path=dotted(provider_path),
            family=family,
        )

    return WalletResponse(
        provider=provider,
        order_amount=required_text(payload, ORDER_PATH + ("amount",), family),
        order_currency=required_text(payload, ORDER_PATH + ("currency",), family),
        wallet_provider=optional_text(payload, ORDER_PATH + ("walletProvider",), family),
        allowed_card_types=optional_text(payload, provider_path + ("allowedCardTypes",), family),
        merchant_checkout_id=optional_text(payload, provider_path + ("merchantCheckoutId",), family),
        origin_url=optional_text(payload, provider_path + ("originUrl",), family),
        request_token=optional_text(payload, provider_path + ("requestToken",), family),
    )


def decode_token_response(body: Union[str, bytes]) -> TokenResponse:
    family = ResponseFamily.TOKEN
    payload = parse_json_response(body, family)
    return TokenResponse(
        token=required_text(payload, ("token",), family),
        status=optional_text(payload, ("status",), family),
        repository_id=optional_text(payload, ("repositoryId",), family),
    )


def decode_webhook_notification(body: Union[str, bytes]) -> WebhookNotification:
    family = ResponseFamily.WEBHOOK
    payload = parse_json_response(body, family)
    return WebhookNotification(
        order_id=required_text(payload, ORDER_PATH + ("id",), family),
        transaction_id=required_text(payload, ("transaction", "id"), family),
        order_status=required_text(payload, ORDER_PATH + ("status",), family),
        amount=required_text(payload, ORDER_PATH + ("amount",), family),
        timestamp=optional_text(payload, ("timeOfRecord",), family),
    )
