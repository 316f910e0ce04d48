import time

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import RequestResponseEndpoint

from intelliforms.api.errors import handle_unexpected_error, register_error_handlers
from intelliforms.api.routes.forms import router as forms_router
from intelliforms.api.routes.uploads import router as uploads_router
from intelliforms.logging.logger import Log
from intelliforms.services import Services


def create_app(services: Services) -> FastAPI:
    """Build the HTTP application around already-constructed services."""
    app = FastAPI(
        title="IntelliForms API",
        description="Turns uploaded documents into dynamic form descriptions.",
    )
    app.state.services = services

    @app.middleware("http")
    async def log_requests(request: Request, call_next: RequestResponseEndpoint) -> Response:
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            # Answered here so the envelope still passes through CORSMiddleware.
            response = await handle_unexpected_error(request, exc)
        Log.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 1),
        )
        return response

    # Added last so it wraps every other middleware, error responses included.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=services.settings.cors_origins_list,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(uploads_router)
    app.include_router(forms_router)

    @app.get("/health", tags=["Health"])
    def health() -> dict[str, object]:
        return {"success": True, "status": "ok"}

    return app
