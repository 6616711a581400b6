from pydantic import BaseModel, ConfigDict


class GatewayModel(BaseModel):
    """Immutable holder for values decoded from a gateway response."""

    model_config = ConfigDict(frozen=True, extra="forbid")
