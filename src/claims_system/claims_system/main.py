from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .claims.controller import register as register_claims
from .common.formatting import format_currency, status_color
from .container import build_container
from .users.controller import register as register_users


def create_app(settings_module: Optional[str] = None, **overrides) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = settings_module or get_settings_module()
    app.config.from_object(importlib.import_module(settings_module))
    app.config.update(overrides)
    app.secret_key = app.config["SECRET_KEY"]

    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    app.logger.setLevel(level)

    if app.config.get("DEBUG"):
        print(
            "[claims-system] settings=", settings_module,
            " uploads=", app.config["UPLOAD_FOLDER"],
            " seed_demo=", bool(app.config.get("AUTO_SEED_DEMO", True)),
        )

    app.jinja_env.filters["currency"] = format_currency
    app.jinja_env.filters["status_color"] = status_color

    container = build_container(app_config=app.config)
    app.extensions["claims_container"] = container

    register_users(app, container)
    register_claims(app, container)

    return app


if __name__ == "__main__":
    create_app().run()
