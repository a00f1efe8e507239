import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from .core.config import settings
from .core.logging_setup import setup_logging
from .db.session import init_db
from .api import health, tasks

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    init_db()
    log.info("%s ready on %s", settings.APP_NAME, settings.API_PREFIX)
    yield


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
app.include_router(health.router, prefix=settings.API_PREFIX)
app.include_router(tasks.router,  prefix=settings.API_PREFIX)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and query strings are client errors: 400, not 422."""
    log.warning("Validation failed for %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def run():
    import uvicorn

    uvicorn.run("tasklist.main:app", host=settings.HOST, port=settings.PORT)
