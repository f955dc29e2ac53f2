import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from reporting.config import get_settings
from reporting.infrastructure.database import engine, initialize_database
from reporting.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Inicializa la base de datos al arrancar y libera los recursos al cerrar."""

    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Crea y configura la aplicación principal de FastAPI."""

    logging.basicConfig(level=get_settings().log_level.upper())

    app = FastAPI(title="Report templates", lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
