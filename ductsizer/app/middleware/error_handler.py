from fastapi import Request
from fastapi.responses import JSONResponse
import traceback
import logging
from typing import Dict, Any

from ductsizer.config import DEBUG
from ductsizer.services.error_types import (
    DuctCalculationError,
    InputValidationError,
    ReferenceDataError,
    log_error_with_context,
)


def create_error_response(error_type: str, message: str, details: Dict[str, Any] = None) -> Dict[str, Any]:
    """Create structured error response"""
    error = {
        "type": error_type,
        "message": message
    }
    if details:
        error["details"] = details
    return {"error": error}


async def duct_calculation_exception_handler(request: Request, exc: DuctCalculationError):
    """Map calculator errors onto structured JSON responses"""
    log_error_with_context(exc, {"path": request.url.path, "method": request.method})
    
    if isinstance(exc, InputValidationError):
        status_code = 422
    elif isinstance(exc, ReferenceDataError):
        status_code = 500
    else:
        status_code = 400
    
    content = create_error_response(type(exc).__name__, exc.message, exc.details)
    return JSONResponse(status_code=status_code, content=content)


async def traceback_exception_handler(request: Request, exc: Exception):
    tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    logging.error(tb)
    
    if DEBUG:
        content = create_error_response("InternalServerError", tb)
    else:
        content = create_error_response("InternalServerError", "Internal server error")
    
    return JSONResponse(status_code=500, content=content)
