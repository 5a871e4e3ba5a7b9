"""
Pharma Ledger: FastAPI application.

This is the entry point for the application.
All routers and error handlers are registered here.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pharma_ledger.config import get_settings
from pharma_ledger.logger import configure_logging, get_logger
from pharma_ledger.api.health import router as health_router
from pharma_ledger.api.accounts import router as accounts_router
from pharma_ledger.api.journal import router as journal_router
from pharma_ledger.api.periods import router as periods_router
from pharma_ledger.api.reports import router as reports_router

settings = get_settings()
configure_logging()
logger = get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="General ledger and financial reporting for a pharmaceutical ERP",
)


# --- Error handlers ---
# Every error leaves the API as {"error": "..."} plus optional
# diagnostic fields, whatever raised it.

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"error": "Validation failed", "details": details},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        "unhandled error",
        method=request.method,
        path=request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500, content={"error": "Internal server error"}
    )


# Register routers
app.include_router(health_router)
app.include_router(accounts_router)
app.include_router(journal_router)
app.include_router(periods_router)
app.include_router(reports_router)
