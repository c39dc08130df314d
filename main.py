import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import contacts_api
from app.middleware.middlewareLogger import LoggerMiddleware
from config import config
from database.connection import MongoConnectionPool

# Logger setup
logger = logging.getLogger("contact_log")
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Connection is opened lazily by the first store operation
    app.state.pool = MongoConnectionPool(config.MONGODB_URI, config.MONGO_DB)
    if not config.MONGODB_URI:
        logger.warning("MONGODB_URI is not set; every contact operation will fail until it is configured")

    yield

    await app.state.pool.close()
    logger.info("Shutdown complete.")


def init_application() -> FastAPI:
    app = FastAPI(
        title="Contact Log",
        description="Contact Management",
        lifespan=lifespan
    )

    # Routers
    app.include_router(contacts_api.router, tags=["Contact Manage"])

    # Middleware
    app.add_middleware(LoggerMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.ALLOWED_HOSTS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    return app


app = init_application()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
