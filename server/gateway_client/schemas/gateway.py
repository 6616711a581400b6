"""
Typed results for each gateway response family.

Amounts are kept as the text the gateway sent ("100.00" stays "100.00").
Fields the gateway may omit are ``None`` when absent, never ``""``.
"""

from typing import Optional

from gateway_client.schemas.common import GatewayModel


class TransactionResponse(GatewayModel):
    api_result: str
    gateway_code: str
    order_id: str
    order_amount: str
    order_currency: str
    order_description: Optional[str] = None


class BrowserPaymentResponse(TransactionResponse):
    interaction_status: str
    redirect_url: Optional[str] = None


class SecureIdEnrollmentResponse(GatewayModel):
    status: str
    acs_url: Optional[str] = None
    pa_req: Optional[str] = None
    secure_id: Optional[str] = None
    gateway_code: Optional[str] = None


class HostedSession(GatewayModel):
    id: str
    version: str
    update_status: str
    aes256_key: Optional[str] = None
    success_indicator: Optional[str] = None
    authentication_limit: Optional[int] = None


class WalletResponse(GatewayModel):
    provider: str
    order_amount: str
    order_currency: str
    wallet_provider: Optional[str] = None
    allowed_card_types: Optional[str] = None
    merchant_checkout_id: Optional[str] = None
    origin_url: Optional[str] = None
    request_token: Optional[str] = None


class TokenResponse(GatewayModel):
    token: str
    status: Optional[str] = None
    repository_id: Optional[str] = None


class WebhookNotification(GatewayModel):
    order_id: str
    transaction_id: str
    order_status: str
    amount: str
    timestamp: Optional[str] = None
