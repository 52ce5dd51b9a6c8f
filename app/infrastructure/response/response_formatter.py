from typing import Any, Dict, Optional, Union, List

from fastapi import Response
from fastapi.responses import JSONResponse


def error_body(msg: str) -> Dict[str, str]:
    """
    Body shared by every failure response: a single ``error`` string
    """
    return {"error": msg}


def json_response(
    data: Optional[Union[Dict[str, Any], List[Any]]] = None,
    status_code: int = 200,
) -> JSONResponse:
    return JSONResponse(content=data, status_code=status_code)


def error_response(msg: str, status_code: int = 500) -> JSONResponse:
    """
    Create an error response

    Args:
        msg: message placed in the ``error`` field
        status_code: HTTP status, 500 by default
    """
    return JSONResponse(content=error_body(msg), status_code=status_code)


def not_found_response(entity: str = "Cheese") -> JSONResponse:
    return error_response(msg=f"{entity} not found", status_code=404)


def no_content_response() -> Response:
    return Response(status_code=204)
