"""FastAPI application factory."""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from peal_mentors.config import DEFAULT_DATABASE_URL, AppConfig, load_config
from peal_mentors.matching.engine import ProfileNotFoundError
from peal_mentors.models import init_db, make_session_factory

from .mentors import router as mentors_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db(app.state.session_factory.kw["bind"])
    yield


def _load_app_config() -> AppConfig:
    config_path = os.environ.get("PEAL_MENTORS_CONFIG")
    if not config_path:
        return AppConfig(database_url=os.environ.get("DATABASE_URL", DEFAULT_DATABASE_URL))
    return load_config(config_path)


def create_app(config: AppConfig | None = None) -> FastAPI:
    app = FastAPI(title="PEAL Mentor Matching", lifespan=lifespan)
    app.state.config = config or _load_app_config()
    app.state.session_factory = make_session_factory(app.state.config.database_url)

    @app.exception_handler(ProfileNotFoundError)
    async def profile_not_found(request: Request, exc: ProfileNotFoundError):
        return JSONResponse({"error": "User not found"}, status_code=404)

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    app.include_router(mentors_router)

    return app


app = create_app()
