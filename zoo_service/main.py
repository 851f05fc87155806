from contextlib import asynccontextmanager
from typing import Optional

import fastapi
import fastapi_swagger_dark as fsd
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi

from zoo_service.core.configs import Settings, settings as default_settings
from zoo_service.core.context import ServiceContext
from zoo_service.routes import animal_router, zoo_router
from zoo_service.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def create_app(
    app_settings: Optional[Settings] = None,
    context: Optional[ServiceContext] = None,
) -> FastAPI:
    """
    Build the HTTP adapter around a service context.

    The context is opened when the application starts and closed when it
    shuts down; pass one in to control storage and the injected id factory
    and clock.
    """
    app_settings = app_settings or default_settings
    setup_logging(app_settings.log_level)

    service_context = context or ServiceContext(app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        service_context.open()
        try:
            yield
        finally:
            service_context.close()

    app = FastAPI(
        title=app_settings.app_name,
        description=app_settings.description,
        version=app_settings.version,
        docs_url=None,
        redoc_url=app_settings.redoc_url,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.context = service_context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    router = fastapi.APIRouter()
    fsd.install(router)
    app.include_router(router)

    for routers in [
        zoo_router,
        animal_router,
    ]:
        app.include_router(routers)

    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema
        openapi_schema = get_openapi(
            title=app_settings.app_name,
            version=app_settings.version,
            description=app_settings.description,
            routes=app.routes,
        )
        components = openapi_schema.setdefault("components", {})
        security_schemes = components.setdefault("securitySchemes", {})
        security_schemes["CallerId"] = {
            "type": "apiKey",
            "in": "header",
            "name": app_settings.caller_header,
        }
        # Swagger then shows Authorize and forwards the caller header
        openapi_schema["security"] = [{"CallerId": []}]
        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi

    @app.get("/")
    async def root(request: Request):
        """Root endpoint"""
        return {
            "message": f"Welcome to {app_settings.app_name}",
            "version": app_settings.version,
            "docs": app_settings.docs_url,
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy" if service_context.is_open else "starting",
            "service": app_settings.app_name,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("zoo_service.main:app", host="0.0.0.0", port=8000, reload=True)
