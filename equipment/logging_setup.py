"""Logging setup for applications embedding the checkers."""

from __future__ import annotations

import logging
from typing import Optional

from .config import EquipmentConfig, get_config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(config: Optional[EquipmentConfig] = None) -> None:
    """Configure the root logger from the equipment configuration; unknown levels fall back to INFO."""
    config = config or get_config()
    level = getattr(logging, config.log_level.upper(), None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger(__name__).debug(f"logging configured at {config.log_level}")
