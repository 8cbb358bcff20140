from fastapi import HTTPException
from typing import Any

from shared.utils.app_status_code import AppStatusCode
from shared.core.schemas import JsonOutResult


def failure_result(message: str, status_code: str = AppStatusCode.OPERATION_FAILED, data: Any = None) -> dict:
    return JsonOutResult(
        data=data,
        status="Failure",
        status_code=status_code,
        message=message
    ).model_dump()


def error_response(message: str, status_code: str = AppStatusCode.OPERATION_FAILED, http_status: int = 400):
    raise HTTPException(
        status_code=http_status,
        detail=failure_result(message, status_code)
    )
