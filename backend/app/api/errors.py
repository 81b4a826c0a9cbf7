import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from condgraph.graph.errors import (
    GraphError,
    NodeNotFoundError,
)

logger = logging.getLogger("condgraph.api")


class ApiError(Exception):
    """
    Error carrying the HTTP status the route wants reported.
    """

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def _api_error(_: Request, exc: ApiError):
        return _error(exc.status_code, exc.message)

    @app.exception_handler(NodeNotFoundError)
    async def _not_found(_: Request, exc: NodeNotFoundError):
        return _error(404, str(exc))

    @app.exception_handler(GraphError)
    async def _graph_error(_: Request, exc: GraphError):
        return _error(400, str(exc))

    @app.exception_handler(RequestValidationError)
    async def _invalid_body(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = errors[0] if errors else {}
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = first.get("msg", "invalid request")
        if location:
            message = f"{location}: {message}"
        logger.info("rejected %s %s: %s", request.method, request.url.path, message)
        return _error(400, message)
