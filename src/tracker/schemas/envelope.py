"""JSON envelope shared by every endpoint: ``{success, message, data}``."""

from pydantic import BaseModel


class ApiResponse[DataT](BaseModel):
    success: bool = True
    message: str | None = None
    data: DataT | None = None


class MessageResponse(BaseModel):
    """Envelope for endpoints that only report an outcome."""

    success: bool = True
    message: str
