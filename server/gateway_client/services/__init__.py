from gateway_client.services import response_service

__all__ = ["response_service"]
