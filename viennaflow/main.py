import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from viennaflow.api.health import router as health_router
from viennaflow.api.lines import router as lines_router
from viennaflow.api.steige import router as steige_router
from viennaflow.api.stops import router as stops_router
from viennaflow.config import settings
from viennaflow.database import dispose_engine, init_engine
from viennaflow.errors import ViennaFlowError

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("viennaflow")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Fail fast: no engine without a database URL
    database_url = settings.require_database_url()
    init_engine(database_url, echo=settings.DB_ECHO)
    logger.info("Database engine initialized")
    try:
        yield
    finally:
        await dispose_engine()
        logger.info("Database engine disposed")


app = FastAPI(title="ViennaFlow API", version="0.1.0", lifespan=lifespan)


@app.exception_handler(ViennaFlowError)
async def viennaflow_error_handler(request: Request, exc: ViennaFlowError):
    if exc.status_code >= 500:
        logger.error("Error in %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error("Unexpected error in %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": str(exc) or exc.__class__.__name__})


app.include_router(health_router, prefix="/api")
app.include_router(stops_router, prefix="/api")
app.include_router(steige_router, prefix="/api")
app.include_router(lines_router, prefix="/api")


@app.get("/api")
def api_root():
    return {"message": "ViennaFlow API"}
