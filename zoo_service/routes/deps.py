from fastapi import Request
from fastapi.responses import JSONResponse

from zoo_service.models.result import Result
from zoo_service.services.operations import ZooOperations

STATUS_BY_KIND = {
    "ValidationError": 422,
    "NotFoundError": 404,
    "ConflictError": 409,
    "AuthorizationError": 403,
    "StorageError": 503,
}


def get_operations(request: Request) -> ZooOperations:
    return ZooOperations(request.app.state.context)


def get_caller(request: Request) -> str:
    """Principal forwarded by the authenticating gateway, or the anonymous one."""
    settings = request.app.state.settings
    return request.headers.get(settings.caller_header) or settings.anonymous_caller


def respond(result: Result, success_status: int = 200) -> JSONResponse:
    status_code = success_status if result.is_ok else STATUS_BY_KIND.get(result.kind, 500)
    return JSONResponse(status_code=status_code, content=result.to_response())
