from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .database.bootstrap import apply_schema, list_tables
from .preferences.controller import register as register_preferences

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def _load_settings(overrides: Optional[dict[str, Any]]) -> tuple[str, dict[str, Any]]:
    settings_module = get_settings_module()
    module = importlib.import_module(settings_module)
    settings = {k: getattr(module, k) for k in dir(module) if k.isupper()}
    settings.update(overrides or {})
    return settings_module, settings


def create_app(overrides: Optional[dict[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    settings_module, settings = _load_settings(overrides)

    logging.basicConfig(
        level=str(settings.get("LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = Flask(__name__)
    app.secret_key = settings["SECRET_KEY"]
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = int(settings.get("MAX_UPLOAD_MB", 10)) * 1024 * 1024
    app.json.ensure_ascii = False

    storage = str(settings.get("STORAGE_BACKEND", "mysql")).lower()
    db_config = dict(settings.get("DB_CONFIG") or {})

    if storage == "mysql" and settings.get("AUTO_INIT_DB"):
        apply_schema(db_config, schema_path=SCHEMA_PATH)
        logger.info("[timeclock] schema ready (tables=%d)", len(list_tables(db_config)))

    container = build_container(
        storage=storage,
        db_config=db_config,
        data_dir=settings.get("DATA_DIR"),
        clock=settings.get("CLOCK"),
        ids=settings.get("ID_PROVIDER"),
    )
    app.extensions["timeclock"] = container

    target = container.conn.describe() if container.conn else settings.get("DATA_DIR")
    logger.info("[timeclock] settings=%s storage=%s target=%s", settings_module, storage, target)

    register_attendance(app, container)
    register_preferences(app, container)

    return app
