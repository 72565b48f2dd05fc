"""
Cross‑origin headers.

Browsers calling the API from another origin need the
``Access-Control-*`` headers on every response, not only on responses to
requests that carry an ``Origin`` header.  ``install_cors`` registers an
HTTP middleware that attaches a fixed set of headers taken from
``Settings`` and answers preflight ``OPTIONS`` requests itself.
"""

from typing import Dict

from fastapi import FastAPI, Request, Response, status

from .config import Settings


def cors_headers(settings: Settings) -> Dict[str, str]:
    """Return the CORS headers configured in ``settings``."""
    return {
        "Access-Control-Allow-Origin": settings.cors_allow_origin,
        "Access-Control-Allow-Methods": settings.cors_allow_methods,
        "Access-Control-Allow-Headers": settings.cors_allow_headers,
        "Access-Control-Max-Age": str(settings.cors_max_age),
    }


def install_cors(app: FastAPI, settings: Settings) -> None:
    """Attach the CORS headers to every response produced by ``app``."""
    headers = cors_headers(settings)

    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=status.HTTP_200_OK)
        else:
            response = await call_next(request)
        response.headers.update(headers)
        return response
