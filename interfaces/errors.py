import logging

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from domain.exceptions import TaskError
from interfaces.responses import send_response

logger = logging.getLogger(__name__)

HTTP_MESSAGES = {
    404: "Not found",
    405: "Method not allowed",
}


async def task_error_handler(request: Request, exc: TaskError):
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return send_response(exc.status_code, False, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = HTTP_MESSAGES.get(exc.status_code, str(exc.detail))
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {message}")
    response = send_response(exc.status_code, False, message)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(TaskError, task_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
