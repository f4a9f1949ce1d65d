"""Error Schemas — REST error envelope, for OpenAPI docs."""

from pydantic import BaseModel


class ErrorData(BaseModel):
    status: int


class ErrorEnvelope(BaseModel):
    """{code, message, data: {status}} returned on every failure."""
    code: str
    message: str
    data: ErrorData
