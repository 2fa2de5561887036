#timelogger/schemas/response.py
from pydantic import BaseModel, Field
from typing import List

class ErrorItem(BaseModel):
    """
    ErrorItem — one failed rule: the field (or rule) name and the message.
    """
    name: str = Field(..., examples=["Name"], description="Field or rule name, PascalCase")
    error: str = Field(..., examples=["Tasks must have a name."], description="Human readable message")

class ErrorResponse(BaseModel):
    """
    ErrorResponse — error payload shared by validation, not-found and database errors.
    """
    code: str = Field(..., examples=["VAL-400"], description="VAL-400, ID-404 or SQL-500")
    cause: str = Field(..., examples=["Validation failed"], description="Short cause")
    errors: List[ErrorItem] = Field(default_factory=list, description="Every failed rule")

class HealthStatus(BaseModel):
    ok: bool = True
