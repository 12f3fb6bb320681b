from typing import Any
from pydantic import BaseModel

from ..utils.strings import CaseStyle


class ConvertRequest(BaseModel):
    # Left untyped so non-string values reach the converter and fail there.
    text: Any = None


class StyledConvertRequest(ConvertRequest):
    style: CaseStyle


class ConvertResponse(BaseModel):
    input: str
    style: CaseStyle
    result: str


class ConversionErrorResponse(BaseModel):
    detail: str
    error: str
