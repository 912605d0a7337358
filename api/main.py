from contextlib import asynccontextmanager
import logging

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import config, db
from core.errors import register_error_handlers
from core.observability import setup_logging
from deliveries import router as deliveries_router
from events import router as events_router
from members import router as members_router
from repo import router as repo_router

load_dotenv(override=False)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(config.log_level())
    # One pool per process, handed to routes through `db.get_db`.
    database = db.Database(
        config.database_url(),
        min_size=config.pool_min_size(),
        max_size=config.pool_max_size(),
        tls=db.ssl_context(verify=config.database_ssl_verify()) if config.database_ssl() else False,
    )
    await database.connect()
    app.state.db = database
    logger.info("API rodando na porta %s", config.port())
    try:
        yield
    finally:
        await database.close()


app = FastAPI(title="clan-api", lifespan=lifespan)

_origins = config.cors_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    # Browsers refuse credentials together with a wildcard origin.
    allow_credentials=_origins != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(members_router.router, tags=["members"])
app.include_router(events_router.router, tags=["events"])
app.include_router(deliveries_router.router, tags=["deliveries"])
app.include_router(repo_router.router, tags=["repo"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


def run() -> None:
    uvicorn.run(app, host=config.host(), port=config.port())


if __name__ == "__main__":
    run()
