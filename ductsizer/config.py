import logging
import sys
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List

from ductsizer.environment import get_env_bool, get_env_float, get_env_list

DEBUG = get_env_bool("DEBUG", False)


@dataclass(frozen=True)
class CalculatorSettings:
    """Defaults applied when a duct system omits a design parameter"""
    default_safety_factor: float = 0.15
    default_altitude_ft: float = 0.0
    default_temperature_f: float = 70.0
    default_system_cfm: float = 1000.0
    fan_efficiency: float = 0.65
    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:3000"])


@lru_cache(maxsize=1)
def get_settings() -> CalculatorSettings:
    """Read calculator settings from the environment (cached)"""
    return CalculatorSettings(
        default_safety_factor=get_env_float("DUCT_DEFAULT_SAFETY_FACTOR", 0.15),
        default_altitude_ft=get_env_float("DUCT_DEFAULT_ALTITUDE_FT", 0.0),
        default_temperature_f=get_env_float("DUCT_DEFAULT_TEMPERATURE_F", 70.0),
        default_system_cfm=get_env_float("DUCT_DEFAULT_SYSTEM_CFM", 1000.0),
        fan_efficiency=get_env_float("DUCT_FAN_EFFICIENCY", 0.65),
        cors_origins=get_env_list("DUCT_CORS_ORIGINS", ["http://localhost:3000"]),
    )


# Logging configuration
def setup_logging(stream=None):
    """Configure application logging (stdout unless another stream is given)"""
    log_level = logging.DEBUG if DEBUG else logging.INFO
    
    # Configure root logger
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(stream or sys.stdout),
        ]
    )
    
    logger = logging.getLogger('ductsizer')
    logger.setLevel(log_level)
    
    # Suppress noisy third-party loggers
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)
    logging.getLogger('httpx').setLevel(logging.WARNING)
    
    return logger
