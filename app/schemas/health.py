from pydantic import BaseModel


class HealthCheckResponse(BaseModel):
    """Health check payload."""

    version: str
    status: str
    timestamp: str
    database: str
