import logging

from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError

from shared.core.exceptions import AppError
from shared.helpers.json_response_helper import failure_result
from shared.utils.app_status_code import AppStatusCode

logger = logging.getLogger(__name__)


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.http_status >= 500:
            logger.error("%s %s failed: %s", request.method,
                         request.url.path, exc.message)
        wrapped = failure_result(
            exc.message,
            exc.status_code,
            data=exc.details or None,
        )
        return JSONResponse(content=jsonable_encoder(wrapped), status_code=exc.http_status)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        # error_response() already packs a JsonOutResult into detail
        if isinstance(exc.detail, dict) and "status_code" in exc.detail:
            wrapped = exc.detail
        else:
            wrapped = failure_result(str(exc.detail))
        return JSONResponse(content=wrapped, status_code=exc.status_code or 400, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = jsonable_encoder(exc.errors())
        message = "; ".join(
            f"{'.'.join(str(loc) for loc in err.get('loc', []))}: {err.get('msg')}"
            for err in errors
        )
        wrapped = failure_result(
            message or "Invalid request",
            AppStatusCode.INVALID_INPUT,
            data={"errors": errors},
        )
        return JSONResponse(content=wrapped, status_code=422)

    # Catch all unhandled exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s",
                         request.method, request.url.path)

        wrapped = failure_result(
            "Internal server error",
            AppStatusCode.OPERATION_FAILED,
        )
        return JSONResponse(content=wrapped, status_code=500)
