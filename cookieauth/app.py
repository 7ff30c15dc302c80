# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import importlib
from typing import Any, Protocol, cast

from flask import Flask

from cookieauth.container import Container
from cookieauth.shared.config import AppConfig, load_config
from cookieauth.shared.logging import logger, setup_logging
from cookieauth.shared.middleware.error_handler import configure_error_handling
from cookieauth.shared.middleware.request_logger import configure_request_logging
from cookieauth.shared.middleware.security_headers import configure_security_headers


class _CORSCallable(Protocol):
    def __call__(self, app: Flask, **kwargs: Any) -> Any: ...


_flask_cors = importlib.import_module("flask_cors")
CORS = cast(_CORSCallable, _flask_cors.CORS)


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(config.log_level, config.log_file)

    container = Container(config)

    app = Flask(__name__)
    app.extensions["cookieauth.container"] = container

    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_security_headers(app, enable_hsts=config.security.enable_hsts)

    cors_kwargs: dict[str, object] = {"origins": config.security.allowed_origins}
    if any(o != "*" for o in config.security.allowed_origins):
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.session_controller.as_blueprint())
    app.register_blueprint(container.protected_controller.as_blueprint())

    logger.info(
        f"Flask app initialized origins={config.security.allowed_origins} "
        f"cookie={config.token.cookie_name!r} alg={config.token.algorithm}"
    )
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    logger.info(f"Server starting on {config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=config.debug_logging)


if __name__ == "__main__":
    main()
