from typing import Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error envelope returned by every failing endpoint."""
    error: str
    detail: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = "operational"
    service: str
    version: str
