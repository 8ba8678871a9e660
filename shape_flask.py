"""Flask application setup for the Shape Icon Editor.

This module serves as the central configuration hub for the icon editor's
HTTP surface. It provides:

    - The Flask application instance shared across route modules
    - Application-wide logging configuration
    - The shared IconService used by the routes
    - Request parsing helpers that turn JSON bodies into Shape lists

Architecture:
    - shape_flask.py: App instance, logging and helpers (this module)
    - shape_editor.py: Main entry point that registers routes
    - shape_routes.py: Export, import, demo, palette and preview routes
    - shape_cli.py: Command-line exports without a server

Example:
    Import the Flask app and the service::

        from shape_flask import app, service

        @app.route('/api/demo-count')
        def demo_count():
            return jsonify(count=len(service.list_demos()))

Attributes:
    app (Flask): The Flask application instance.
    service (IconService): Shared export service with its preview cache.
    MAX_EXPORT_SIZE (int): Largest PNG/SVG edge accepted over HTTP (2048).
"""

import logging

from flask import Flask, request

from shape_lib.api import IconService
from shape_lib.config import CANVAS_SIZE
from shape_lib.errors import DocumentParseError, ExportError
from shape_lib.export import shapes_from_data

# Module logger
logger = logging.getLogger(__name__)


def configure_logging(level: str = 'INFO', log_file: str | None = None) -> None:
    """Configure application-wide logging.

    Sets up logging with a consistent format across all modules. Call this at
    application startup before serving requests.

    Args:
        level: Log level string ('DEBUG', 'INFO', 'WARNING', 'ERROR').
        log_file: Optional path to log file. If None, logs to stderr only.

    Example:
        Configure at startup::

            from shape_flask import configure_logging
            configure_logging(level='DEBUG', log_file='shape_editor.log')
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)-8s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Set third-party loggers to WARNING to reduce noise
    logging.getLogger('werkzeug').setLevel(logging.WARNING)
    logging.getLogger('PIL').setLevel(logging.WARNING)

    logger.info("Logging configured: level=%s, file=%s", level, log_file or 'stderr')


# Flask application
app = Flask(__name__)

# Shared export service (owns the thumbnail cache)
service = IconService()

MAX_EXPORT_SIZE = 2048


def request_shapes() -> list:
    """Read the request body as a shape document.

    Returns:
        list: Shapes built from the body's ``shapes`` array.

    Raises:
        DocumentParseError: If the body is not JSON.
        DocumentSchemaError: If the JSON is not a shape document.
    """
    data = request.get_json(silent=True)
    if data is None:
        raise DocumentParseError('Request body must be a JSON document')
    return shapes_from_data(data)


def request_size(default: int = CANVAS_SIZE) -> int:
    """Read and validate the ``size`` query parameter.

    Raises:
        ExportError: If the size is not an integer in 1..MAX_EXPORT_SIZE.
    """
    raw = request.args.get('size')
    if raw is None:
        return default
    try:
        size = int(raw)
    except ValueError:
        raise ExportError(f"size must be an integer, got {raw!r}") from None
    if not 1 <= size <= MAX_EXPORT_SIZE:
        raise ExportError(f"size must be 1-{MAX_EXPORT_SIZE}, got {size}")
    return size
