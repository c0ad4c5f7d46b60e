"""Response Envelope — uniform serialization for every handler outcome.

Invariants:
    - Every JSON error body is exactly {"error": "<message>"}
    - Internal failures always carry INTERNAL_SERVER_MESSAGE, never the cause
"""

from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse

from chirpy.core.errors import INTERNAL_SERVER_MESSAGE


def error_body(message: str) -> dict:
    return {"error": message}


def error_response(
    status_code: int, message: str, headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build a JSON error response in the standard envelope."""
    return JSONResponse(
        status_code=status_code, content=error_body(message), headers=headers,
    )


def internal_error_response() -> JSONResponse:
    return error_response(500, INTERNAL_SERVER_MESSAGE)


def text_response(body: str, status_code: int = 200) -> PlainTextResponse:
    return PlainTextResponse(body, status_code=status_code)


def html_response(body: str, status_code: int = 200) -> HTMLResponse:
    return HTMLResponse(body, status_code=status_code)
