"""Application folder resolution.

Samla keeps everything it owns under one base directory inside the user's
configuration folder::

    <user config dir>/Samla/
        Data/samla.db
        Images/

``resolve_app_paths`` describes that layout as an :class:`~samla.models.AppPaths`
record (the same shape the backend reports to the UI), and ``ensure_app_dirs``
creates the folders on first start.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

from samla.core.config import Settings
from samla.core.logging_config import get_logger
from samla.models import AppPaths

logger = get_logger(__name__)

APP_DIR_NAME = "Samla"
DATA_DIR_NAME = "Data"
IMAGES_DIR_NAME = "Images"
DB_FILE_NAME = "samla.db"


def user_config_dir() -> Path:
    """Return the platform's per-user configuration directory."""
    if sys.platform.startswith("win"):
        appdata = os.getenv("APPDATA")
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg and Path(xdg).is_absolute():
        return Path(xdg)
    return Path.home() / ".config"


def resolve_app_paths(settings: Optional[Settings] = None) -> AppPaths:
    """Build the application folder layout.

    ``SAMLA_BASE_DIR`` replaces the base directory when set; the data folder,
    images folder and database path are always derived from it.
    """
    if settings is not None and settings.base_dir:
        base = Path(settings.base_dir).expanduser()
    else:
        base = user_config_dir() / APP_DIR_NAME
    data_dir = base / DATA_DIR_NAME
    return AppPaths(
        base_dir=str(base),
        data_dir=str(data_dir),
        images_dir=str(base / IMAGES_DIR_NAME),
        db_path=str(data_dir / DB_FILE_NAME),
    )


def ensure_app_dirs(paths: AppPaths) -> None:
    """Create the base, data and images folders if they are missing."""
    for directory in (paths.base_dir, paths.data_dir, paths.images_dir):
        Path(directory).mkdir(parents=True, exist_ok=True)
    logger.debug("Application folders ready under %s", paths.base_dir)
