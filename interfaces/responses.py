from typing import Any

from fastapi.responses import JSONResponse

from schemas.task import APIResponse


def send_response(status_code: int, success: bool, message: str, data: Any = None) -> JSONResponse:
    """Wraps a handler outcome in the {success, message, data} envelope.

    ``data`` is left out of the body entirely when there is no payload.
    """
    envelope = APIResponse[Any](success=success, message=message, data=data)
    content = envelope.model_dump(mode="json", exclude={"data"} if data is None else None)
    return JSONResponse(status_code=status_code, content=content)
