from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .config import get_settings
from .errors import CaseConversionError, InvalidInputType
from .logging_config import setup_logging
from .routers.case import router as case_router

setup_logging()

app = FastAPI(title="Casekit Service", version="0.1.0")


@app.exception_handler(CaseConversionError)
async def conversion_error_handler(request: Request, exc: CaseConversionError) -> JSONResponse:
    status_code = 400 if isinstance(exc, InvalidInputType) else 422
    return JSONResponse(status_code=status_code, content={"detail": exc.message, "error": exc.kind})


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "service": get_settings().app_name}


app.include_router(case_router)
