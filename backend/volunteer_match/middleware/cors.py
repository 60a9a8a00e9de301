"""
Permissive CORS

Every response carries a wildcard origin plus the allowed methods and
headers. OPTIONS requests are answered here with 204 and an empty body;
they never reach routing.
"""

from typing import Callable

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware


class PermissiveCORSMiddleware(BaseHTTPMiddleware):
    def __init__(
        self,
        app: FastAPI,
        allow_origin: str = "*",
        allow_headers: str = "Content-Type, Authorization",
        allow_methods: str = "GET, POST, PUT, PATCH, DELETE, OPTIONS",
    ):
        super().__init__(app)
        self.headers = {
            "Access-Control-Allow-Origin": allow_origin,
            "Access-Control-Allow-Headers": allow_headers,
            "Access-Control-Allow-Methods": allow_methods,
        }

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=204)
        else:
            response = await call_next(request)

        response.headers.update(self.headers)
        return response
