"""FastAPI application factory and setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from strawberry.fastapi import GraphQLRouter

from bookshelf.api.graphql import get_graphql_context, schema
from bookshelf.api.http.app_data import ApplicationDependencies
from bookshelf.api.http.middleware.request_logging import log_requests
from bookshelf.api.http.middleware.security_headers import SecurityHeadersMiddleware
from bookshelf.api.http.routers.health import router as health_router
from bookshelf.api.utils.app_startup import configure_logging
from bookshelf.core.services.database.db_manage import DbManageService
from bookshelf.core.services.database.db_session import DbSessionService
from bookshelf.runtime.config.config_data import ConfigData
from bookshelf.runtime.context import get_config


def create_app(config: ConfigData | None = None) -> FastAPI:
    """Build the application; ``config`` defaults to the active context config."""
    main_config = config or get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Starting up application in {} environment", main_config.app.environment
        )
        database_service = DbSessionService(main_config)
        if main_config.database.create_tables:
            await DbManageService(database_service).create_all()
        app.state.app_dependencies = ApplicationDependencies(
            database_service=database_service
        )
        try:
            yield
        finally:
            logger.info("Shutting down application")
            await database_service.dispose()

    is_production = main_config.app.environment == "production"
    app = FastAPI(
        title="Bookshelf GraphQL API",
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None,
    )

    app.add_middleware(SecurityHeadersMiddleware)

    if is_production and "*" in main_config.app.cors.origins:
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=main_config.app.cors.origins,
        allow_credentials=main_config.app.cors.allow_credentials,
        allow_methods=main_config.app.cors.allow_methods,
        allow_headers=main_config.app.cors.allow_headers,
    )
    app.middleware("http")(log_requests)

    app.include_router(health_router)
    graphql_router = GraphQLRouter(
        schema,
        context_getter=get_graphql_context,
        graphql_ide="graphiql" if main_config.graphql.graphiql else None,
    )
    app.include_router(graphql_router, prefix=main_config.graphql.path)

    return app


configure_logging()

app = create_app()

__all__ = ["app", "create_app"]
