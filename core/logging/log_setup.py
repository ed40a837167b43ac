"""
core/logging/log_setup.py
=========================

Root logger configuration for applications embedding the people feature.
Library modules only ever call ``logging.getLogger(__name__)``; the level
and format come from the ``[Logging]`` config section.
"""

from __future__ import annotations

import logging
from typing import Optional

from core.config.config_service import config_service

_HANDLER_NAME = "peopledb"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a stream handler to the root logger.

    Calling it again only updates level and format, it never stacks
    handlers.
    """
    cfg = config_service.logging
    level_name = (level or cfg.level).upper()
    numeric = logging.getLevelName(level_name)
    if not isinstance(numeric, int):
        raise ValueError(f"unknown log level {level_name!r}")

    root = logging.getLogger()
    handler = next((h for h in root.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        root.addHandler(handler)
    handler.setFormatter(logging.Formatter(cfg.format))
    root.setLevel(numeric)
    return root
