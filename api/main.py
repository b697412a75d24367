from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ads import router as ads_router
from articles import router as articles_router
from auth import bootstrap
from auth import router as auth_router
from core import db, errors, settings
from core.log_config import configure_logging
from core.sessions import MemorySessionStore, SessionStore

load_dotenv()


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        # A failing bootstrap aborts startup.
        await bootstrap.ensure_env_admin()
        yield
    finally:
        await db.close_pool()


def _add_cors(app: FastAPI) -> None:
    origin = settings.allowed_origin()
    if origin:
        # Cross-origin admin panel: the session cookie must be allowed through.
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[origin],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
        )


def create_app(session_store: SessionStore | None = None) -> FastAPI:
    app = FastAPI(title="revista-api", lifespan=lifespan)
    if session_store is None:
        session_store = MemorySessionStore(settings.session_ttl_seconds())
    app.state.sessions = session_store

    _add_cors(app)
    errors.install_exception_handlers(app)

    app.include_router(articles_router.router, tags=["noticias"])
    app.include_router(ads_router.public_router, tags=["ads"])
    app.include_router(ads_router.admin_router, tags=["ads"])
    app.include_router(auth_router.router, tags=["auth"])

    @app.get("/api/health")
    def health() -> dict:
        return {"ok": True}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.port())
