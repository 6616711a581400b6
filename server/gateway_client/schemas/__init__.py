from gateway_client.schemas.gateway import (
    BrowserPaymentResponse,
    HostedSession,
    SecureIdEnrollmentResponse,
    TokenResponse,
    TransactionResponse,
    WalletResponse,
    WebhookNotification,
)

__all__ = [
    "BrowserPaymentResponse",
    "HostedSession",
    "SecureIdEnrollmentResponse",
    "TokenResponse",
    "TransactionResponse",
    "WalletResponse",
    "WebhookNotification",
]
