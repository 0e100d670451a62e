"""
Load duct systems from JSON payloads and files
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from pydantic import ValidationError

from ductsizer.models.schemas import DuctSection, DuctSystem
from ductsizer.services.error_types import InputValidationError

logger = logging.getLogger(__name__)


def parse_system_payload(payload: Dict[str, Any]) -> Tuple[DuctSystem, List[DuctSection]]:
    """
    Build a system and its sections from a decoded JSON object.
    
    Expected shape: {"system": {...}, "sections": [{...}, ...]}
    Both snake_case and camelCase field names are accepted.
    
    Raises:
        InputValidationError: payload is missing keys or fails validation
    """
    if not isinstance(payload, dict) or "system" not in payload:
        raise InputValidationError("Input must be an object with a 'system' key")
    
    raw_sections = payload.get("sections", [])
    if not isinstance(raw_sections, list):
        raise InputValidationError("'sections' must be a list")
    
    try:
        system = DuctSystem.model_validate(payload["system"])
        sections = [DuctSection.model_validate(raw) for raw in raw_sections]
    except ValidationError as e:
        raise InputValidationError(
            f"Invalid duct system input: {e.error_count()} validation error(s)",
            {"errors": [
                {"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()
            ]},
        ) from e
    
    logger.debug(f"Parsed system '{system.name}' with {len(sections)} sections")
    return system, sections


def load_system_file(path: Union[str, Path]) -> Tuple[DuctSystem, List[DuctSection]]:
    """Read and parse a JSON system file"""
    path = Path(path)
    try:
        with open(path, "r") as f:
            payload = json.load(f)
    except json.JSONDecodeError as e:
        raise InputValidationError(f"{path.name} is not valid JSON: {e.msg}", {"line": e.lineno}) from e
    
    return parse_system_payload(payload)
