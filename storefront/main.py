import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool

from storefront.core.config import Settings, get_settings
from storefront.core.exceptions import StorefrontException, storefront_exception_handler
from storefront.db.schema import SchemaProvisioner
from storefront.db.session import build_engine, check_connection
from storefront.models import CartItem, WishlistItem

logger = logging.getLogger(__name__)


def _startup(settings: Settings):
    engine = build_engine(settings)
    try:
        check_connection(
            engine,
            retries=settings.DB_CONNECT_RETRIES,
            delay=settings.DB_CONNECT_RETRY_DELAY,
        )
        provisioner = SchemaProvisioner(engine)
        provisioner.provision([CartItem, WishlistItem])
    except Exception:
        engine.dispose()
        raise
    return engine, provisioner


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = getattr(app.state, "settings", None) or get_settings()
    app.state.settings = settings
    logging.basicConfig(level=settings.LOG_LEVEL)

    # Startup: the server does not accept requests if the database is unreachable
    engine, provisioner = await run_in_threadpool(_startup, settings)
    app.state.engine = engine
    app.state.provisioner = provisioner
    logger.info("Server running on port %s", settings.PORT)

    yield

    # Shutdown
    engine.dispose()
    logger.info("Database connections closed")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    app = FastAPI(
        title="Storefront API",
        version="1.0.0",
        lifespan=lifespan,
        description="Products, cart and wishlist API",
    )
    if settings is not None:
        app.state.settings = settings

    app.add_exception_handler(StorefrontException, storefront_exception_handler)

    @app.get("/", response_class=PlainTextResponse)
    def read_root():
        return "Hello World!"

    from storefront.routers import collection, products

    app.include_router(products.router, tags=["products"])
    app.include_router(collection.cart_router, tags=["cart"])
    app.include_router(collection.wishlist_router, tags=["wishlist"])

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("storefront.main:app", host=settings.HOST, port=settings.PORT)
