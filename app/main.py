# app/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api import api_router
from app.data.database import Base, init_db
from app.data.seed import seed
from app.utils.errors import ApiError, InternalServerError
from app.utils.logging import get_logger
from app.utils.settings import SEED_DATA

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Initializing database")
    try:
        init_db()
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise
    logger.info(f"Tables ready: {list(Base.metadata.tables.keys())}")

    if SEED_DATA:
        seed()

    yield


async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(status_code=int(exc.status_code), content=exc.to_dict())


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    err = InternalServerError()
    return JSONResponse(status_code=int(err.status_code), content=err.to_dict())


def create_app() -> FastAPI:
    app = FastAPI(
        title="Shopfront",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(api_router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
