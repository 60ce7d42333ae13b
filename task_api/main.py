import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from task_api.core.database import engine, Base
from task_api.core.logging import setup_logging
from task_api.middleware.access_log import AccessLogMiddleware
from task_api.routers import health, tasks

setup_logging()
logger = logging.getLogger(__name__)

# Init DB
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Task API",
    version="1.0.0"
)
app.add_middleware(AccessLogMiddleware)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # 400 plutôt que le 422 par défaut de FastAPI
    logger.info(f"Invalid request on {request.method} {request.url.path}: {len(exc.errors())} error(s)")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


# Routes
app.include_router(health.router, prefix="/health")
app.include_router(tasks.router)
