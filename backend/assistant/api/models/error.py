from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response model."""

    timestamp: datetime
    status: int = Field(..., description="HTTP status, or the upstream status for AI service errors")
    error: str
    message: str
    path: str
    details: Optional[List[str]] = None
