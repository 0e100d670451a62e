import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from ductsizer import __version__
from ductsizer.app.middleware.error_handler import (
    duct_calculation_exception_handler,
    traceback_exception_handler,
)
from ductsizer.app.routes import duct
from ductsizer.config import get_settings, setup_logging
from ductsizer.services.error_types import DuctCalculationError

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Duct Pressure-Drop API",
    version=__version__,
    description="Section-by-section duct static pressure calculations"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=True,
)

app.add_exception_handler(DuctCalculationError, duct_calculation_exception_handler)
app.add_exception_handler(Exception, traceback_exception_handler)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"REQUEST: {request.method} {request.url}")
    response = await call_next(request)
    logger.info(f"RESPONSE: {response.status_code}")
    return response


app.include_router(duct.router)


@app.get("/health")
async def health():
    return {"status": "healthy", "version": __version__}
