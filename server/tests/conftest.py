"""
Shared test configuration and fixtures for the gateway client test suite.

Payloads are trimmed copies of real gateway responses.
"""

import json

import pytest

from gateway_client.core.config import clear_settings_cache


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Make every test read settings from its own environment."""
    for name in ("GATEWAY_LOG_LEVEL", "GATEWAY_LOG_FORMAT", "GATEWAY_WALLET_PROVIDER", "GATEWAY_ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def retrieve_order_body():
    return json.dumps({
        "amount": "100.00",
        "currency": "USD",
        "description": "Ordered goods",
        "id": "order-W9JzSaC1Ky",
        "merchant": "TESTSIMPLIFYDEV1",
        "result": "SUCCESS",
        "status": "CAPTURED",
        "transaction": [
            {
                "order": {
                    "amount": "100.00",
                    "currency": "USD",
                    "description": "Ordered goods",
                    "id": "order-W9JzSaC1Ky",
                },
                "response": {
                    "acquirerCode": "00",
                    "cardSecurityCode": {"acquirerCode": "M", "gatewayCode": "MATCH"},
                    "gatewayCode": "APPROVED",
                },
                "result": "SUCCESS",
                "transaction": {
                    "acquirer": {"batch": 1, "id": "SYSTEST_ACQ1", "merchantId": "646515314"},
                    "amount": 100,
                    "authorizationCode": "027465",
                    "currency": "USD",
                    "id": "1",
                    "type": "PAYMENT",
                },
                "version": "45",
            }
        ],
    })


@pytest.fixture
def authorize_body():
    return json.dumps({
        "authorizationResponse": {"stan": "1336"},
        "gatewayEntryPoint": "WEB_SERVICES_API",
        "merchant": "TESTMERCHANTID",
        "order": {
            "amount": "100",
            "creationTime": "2019-03-12T04:05:06.789Z",
            "currency": "AUD",
            "id": "7655c56a-bccb-4974-aae2-721240fbaa94",
            "status": "AUTHORIZED",
            "totalAuthorizedAmount": 100,
            "totalCapturedAmount": 0,
            "totalRefundedAmount": 0,
        },
        "response": {
            "acquirerCode": "00",
            "acquirerMessage": "Approved",
            "gatewayCode": "APPROVED",
        },
        "result": "SUCCESS",
        "transaction": {
            "amount": 100,
            "currency": "AUD",
            "id": "1",
            "type": "AUTHORIZATION",
        },
        "version": "45",
    })


@pytest.fixture
def masterpass_payment_body():
    return (
        '{"order":{"amount":"5000.00","currency":"USD","id":"order-78oSgRzCqs","status":"CAPTURED",'
        '"totalAuthorizedAmount":5000,"totalCapturedAmount":5000,"totalRefundedAmount":0,'
        '"walletIndicator":"101","walletProvider":"MASTERPASS_ONLINE"},'
        '"response":{"acquirerCode":"00","acquirerMessage":"Approved","gatewayCode":"APPROVED"},'
        '"result":"SUCCESS"}'
    )


@pytest.fixture
def browser_payment_body():
    return (
        '{"browserPayment":{"interaction":{"status":"COMPLETED"},"operation":"PAY"},'
        '"order":{"amount":"50.00","currency":"USD","id":"order-E5AaY8Hsuo","status":"CAPTURED"},'
        '"response":{"acquirerCode":"Success","gatewayCode":"APPROVED"},"result":"SUCCESS"}'
    )


@pytest.fixture
def initiated_browser_payment_body():
    return (
        '{"browserPayment":{"interaction":{"status":"INITIATED"},"operation":"PAY",'
        '"redirectUrl":"https://test-gateway.com/bpui/pp/out/BP-4652f0dd79cade57ba6726992464c994",'
        '"returnUrl":"http://localhost:5000/browserPaymentReceipt?transactionId=oZRL5sU3Fm&orderId=Qcgkl4EGnR"},'
        '"gatewayEntryPoint":"WEB_SERVICES_API","merchant":"TESTSIMPLIFYDEV1",'
        '"order":{"amount":50.00,"creationTime":"2018-01-29T16:08:39.296Z","currency":"USD",'
        '"id":"Qcgkl4EGnR","status":"INITIATED","totalAuthorizedAmount":0},'
        '"response":{"gatewayCode":"SUBMITTED"},"result":"SUCCESS",'
        '"sourceOfFunds":{"type":"UNION_PAY"},"version":"45"}'
    )


@pytest.fixture
def secure_enrollment_body():
    return (
        '{"3DSecure":{"authenticationRedirect":{"customized":{"acsUrl":"https://www.issuer.com/acsUrl",'
        '"paReq":"PAREQ_VALUE"}},"summaryStatus":"CARD_ENROLLED"},"3DSecureId":"wqUyNrvOO6",'
        '"merchant":"TESTAB2894354","response":{"3DSecure":{"gatewayCode":"CARD_ENROLLED"}}}'
    )


@pytest.fixture
def created_session_body():
    return (
        '{"merchant":"TESTAB2894354","result":"SUCCESS","session":{"id":"SESSION0002799480514F69145320L2",'
        '"updateStatus":"SUCCESS","version":"6f8b683701"},"successIndicator":"0a292205c57e4dc8"}'
    )


@pytest.fixture
def updated_session_body():
    return json.dumps({
        "merchant": "TESTAB2894354",
        "result": "SUCCESS",
        "session": {
            "aes256Key": "DXbdcjSznnTId2lQWjs3Y4KVZuC4OPPn5bRkjCcm2sM=",
            "authenticationLimit": 25,
            "id": "SESSION0002411702239G42317712I7",
            "updateStatus": "NO_UPDATE",
            "version": "4e9556a901",
        },
    })


@pytest.fixture
def wallet_body():
    return (
        '{"merchant":"TESTCSTESTMID","order":{"amount":"50.00","currency":"USD",'
        '"walletProvider":"MASTERPASS_ONLINE"},"session":{"id":"SESSION0002798226376L35023121J8",'
        '"updateStatus":"SUCCESS","version":"831cb86303"},"version":"45",'
        '"wallet":{"masterpass":{"allowedCardTypes":"visa,master","merchantCheckoutId":"MERCHANT_CHECKOUT_ID",'
        '"originUrl":"http://localhost:5000/masterpassResponse","requestToken":"REQUEST_TOKEN"}}}'
    )


@pytest.fixture
def json_error_body():
    return json.dumps({
        "error": {
            "cause": "INVALID_REQUEST",
            "explanation": "Value 'PAY' is invalid. Pay request not permitted for this merchant.",
            "field": "apiOperation",
            "validationType": "INVALID",
        },
        "result": "ERROR",
    })


@pytest.fixture
def nvp_error_body():
    return (
        "error.cause=INVALID_REQUEST"
        "&error.explanation=Value+%27PAY%27+is+invalid.+Pay+request+not+permitted+for+this+merchant."
        "&error.field=apiOperation&error.validationType=INVALID&result=ERROR"
    )
