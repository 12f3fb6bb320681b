import logging
from typing import Any

from fastapi import APIRouter

from ..errors import CaseConversionError
from ..schemas.case import ConversionErrorResponse, ConvertRequest, ConvertResponse, StyledConvertRequest
from ..utils.strings import CaseStyle, convert

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/case",
    tags=["case"],
    responses={400: {"model": ConversionErrorResponse}, 422: {"model": ConversionErrorResponse}},
)


def _convert(text: Any, style: CaseStyle) -> ConvertResponse:
    try:
        result = convert(text, style)
    except CaseConversionError as error:
        logger.info("rejected %s conversion: %s", style.value, error.kind)
        raise
    return ConvertResponse(input=text, style=style, result=result)


@router.post("/camel", response_model=ConvertResponse)
async def camel_case(body: ConvertRequest) -> ConvertResponse:
    return _convert(body.text, CaseStyle.CAMEL)


@router.post("/dot", response_model=ConvertResponse)
async def dot_case(body: ConvertRequest) -> ConvertResponse:
    return _convert(body.text, CaseStyle.DOT)


@router.post("/convert", response_model=ConvertResponse)
async def convert_case(body: StyledConvertRequest) -> ConvertResponse:
    return _convert(body.text, body.style)
