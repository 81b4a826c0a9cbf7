from fastapi import FastAPI
from contextlib import asynccontextmanager
import logging

from backend.app.config import AppConfig
from backend.app.api.errors import register_exception_handlers
from backend.app.api.routes_node import router as node_router
from backend.app.api.routes_graph import router as graph_router
from backend.app.dependencies import get_graph_store


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifecycle hooks.

    Builds the graph store once at startup so the first request does not
    pay for it.
    """
    get_graph_store()

    yield

    logging.getLogger("condgraph.startup").info(
        "[shutdown] dropping %s nodes", get_graph_store().node_count()
    )


def create_app(config: AppConfig) -> FastAPI:
    app = FastAPI(
        title=config.app_name,
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    app.include_router(
        node_router,
        prefix=f"{config.api_prefix}/node",
        tags=["node"],
    )

    app.include_router(
        graph_router,
        prefix=config.api_prefix,
        tags=["graph"],
    )

    return app


config = AppConfig()
app = create_app(config)
