# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes the settings loaded once in main,
- wires the JSON store into a TaskService,
- applies presentation settings (colors).
"""

from __future__ import annotations

import logging

from colorama import just_fix_windows_console

from ..config import Settings, get_settings
from ..core import colors
from ..tasks.task_service import TaskService
from ..tasks.task_store import JsonTaskStore

logger = logging.getLogger(__name__)


def configure_colors(settings: Settings) -> None:
    just_fix_windows_console()
    if settings.color is not None:
        colors.set_enabled(settings.color)


def create_service(*, settings: Settings | None = None) -> TaskService:
    """
    Build the TaskService for the given settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = JsonTaskStore(settings.db_path)
    logger.debug("Using task file %s", store.path)
    return TaskService(store)
