"""
Error Types for the Duct Pressure-Drop Calculator

The calculation core does not raise for structurally valid input:
constrained cases degrade to defaults or warning strings. These
exceptions cover the edges, where payloads are parsed or reference
tables are injected.
"""

import logging
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)


class DuctCalculationError(Exception):
    """Base exception for all duct calculation errors."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        
    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ReferenceDataError(DuctCalculationError):
    """
    Injected reference tables are missing an entry a section requires.
    
    Examples:
    - Custom material table without the section's material
    - Custom liner table without the section's liner
    """
    pass


class InputValidationError(DuctCalculationError):
    """
    A system or section payload could not be parsed.
    
    Examples:
    - Negative CFM or length
    - Unknown duct shape or material
    - Missing 'system' or 'sections' key in an input file
    """
    pass


def log_error_with_context(error: DuctCalculationError, context: Dict[str, Any]):
    """
    Log error with additional context information.
    
    Args:
        error: Error to log
        context: Additional context (system id, source file, etc.)
    """
    log_data = {
        'error_type': type(error).__name__,
        'error_message': error.message,
        'details': error.details,
        'context': context
    }
    
    if isinstance(error, ReferenceDataError):
        logger.error(f"Reference data error: {error.message}", extra=log_data)
    else:
        logger.warning(f"Rejected input: {error.message}", extra=log_data)
