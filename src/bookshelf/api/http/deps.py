"""FastAPI dependency implementations."""

from fastapi import Request

from bookshelf.api.http.app_data import ApplicationDependencies
from bookshelf.core.services.database.db_session import DbSessionService


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service
