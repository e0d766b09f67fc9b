from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from app.utils.log import logger


async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        {"status_code": exc.status_code, "message": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}")

    return JSONResponse(
        {"status_code": 500, "message": "Gremlins."},
        status_code=500,
    )


def register_error_handlers(app: FastAPI) -> None:
    # ignore type check as function is expecting Exception type but we're giving it the more specific HTTPException
    app.add_exception_handler(HTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
