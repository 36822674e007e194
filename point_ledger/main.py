import logging

from fastapi import FastAPI

from point_ledger import __version__
from point_ledger.core.config import Settings
from point_ledger.core.container import ApplicationContainer, get_container
from point_ledger.interfaces.http import create_api_router
from point_ledger.interfaces.http.errors import register_exception_handlers


def create_app(settings: Settings | None = None) -> FastAPI:
    container = get_container() if settings is None else ApplicationContainer(settings=settings)
    settings = container.settings

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(
        title=settings.project_name,
        description="Per-user point ledger",
        version=__version__,
        debug=settings.debug,
    )

    # Each app owns one container, and with it one lock manager and one set of stores.
    app.state.container = container

    register_exception_handlers(app)
    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok", "environment": settings.environment}

    return app


app = create_app()
