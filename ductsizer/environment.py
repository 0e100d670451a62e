"""Environment configuration management for ductsizer.

This module handles loading environment variables from .env files
with proper priority handling for local development vs deployment.

File Priority (highest to lowest):
1. .env.local (local overrides, gitignored)
2. .env (base configuration, committed)
3. Environment variables set by the host
"""

import os
import logging
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def load_environment(env_dir: Optional[Union[str, Path]] = None) -> None:
    """Load environment variables from .env files.
    
    Args:
        env_dir: Directory containing .env files. Defaults to current directory.
    """
    if env_dir is None:
        env_dir = Path.cwd()
    else:
        env_dir = Path(env_dir)
    
    # Load files in reverse priority order (last loaded wins)
    env_files = [
        env_dir / ".env",
        env_dir / ".env.local",
    ]
    
    loaded_files = []
    for env_file in env_files:
        if env_file.exists():
            load_dotenv(env_file, override=True)
            loaded_files.append(env_file.name)
            logger.debug(f"Loaded environment from {env_file}")
    
    if loaded_files:
        logger.info(f"Environment loaded from: {', '.join(loaded_files)}")
    else:
        logger.debug("No .env files found")


def get_env_bool(key: str, default: bool = False) -> bool:
    """Get boolean environment variable.
    
    Args:
        key: Environment variable name
        default: Default value if not set or invalid
        
    Returns:
        Boolean value
    """
    value = os.getenv(key, "").lower()
    if value in ("true", "1", "yes", "on"):
        return True
    elif value in ("false", "0", "no", "off"):
        return False
    else:
        return default



def get_env_float(key: str, default: float = 0.0) -> float:
    """Get float environment variable, falling back to default when unparseable."""
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Invalid number for {key}: '{value}', using {default}")
        return default


def get_env_list(key: str, default: Optional[list] = None) -> list:
    """Get comma-separated list environment variable."""
    value = os.getenv(key, "")
    items = [item.strip() for item in value.split(",") if item.strip()]
    if not items:
        return list(default or [])
    return items


# Load environment on import
load_environment()
