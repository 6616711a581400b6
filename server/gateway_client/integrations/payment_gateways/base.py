"""
Payment Gateway Response Base Types

Defines the closed set of response families the gateway returns and the
errors raised while decoding its responses.
"""

from enum import Enum
from typing import Optional


class ResponseFamily(str, Enum):
    """Response shapes, selected by the operation the caller invoked."""
    TRANSACTION = "transaction"  # transaction[0].order / transaction[0].response
    OPERATION = "operation"  # top-level order / response (AUTHORIZE, PAY, wallet payments)
    BROWSER_PAYMENT = "browser_payment"
    BROWSER_PAYMENT_REDIRECT = "browser_payment_redirect"
    SECURE_ENROLLMENT = "secure_enrollment"
    HOSTED_SESSION = "hosted_session"
    WALLET = "wallet"
    TOKEN = "token"
    WEBHOOK = "webhook"


class ResponseFormat(str, Enum):
    """Response body encodings."""
    JSON = "json"
    NVP = "nvp"


ERROR_RESULT = "ERROR"


class GatewayResponseError(Exception):
    """Base class for every failure raised while decoding a gateway response."""

    def __init__(self, message: str, family: Optional[ResponseFamily] = None):
        super().__init__(message)
        self.error_message = message
        self.family = family


class GatewayReportedError(GatewayResponseError):
    """The gateway signalled ``result=ERROR``; details are passed through verbatim."""

    def __init__(
        self,
        error_code: Optional[str] = None,
        explanation: Optional[str] = None,
        field: Optional[str] = None,
        validation_type: Optional[str] = None,
        family: Optional[ResponseFamily] = None,
    ):
        message = explanation or error_code or "Gateway reported an error"
        super().__init__(message, family=family)
        self.error_code = error_code
        self.explanation = explanation
        self.field = field
        self.validation_type = validation_type


# Name used by merchant integrations for the structured gateway error.
ApiException = GatewayReportedError


class MalformedResponse(GatewayResponseError):
    """The payload does not have the shape expected for the requested family."""

    def __init__(self, message: str, path: Optional[str] = None, family: Optional[ResponseFamily] = None):
        super().__init__(message, family=family)
        self.path = path


class ResponseSyntaxError(GatewayResponseError):
    """The body is not valid JSON or NVP text at all."""
