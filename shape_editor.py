#!/usr/bin/env python3
"""Shape Icon Editor - HTTP export server for layered shape icons."""

import os

from shape_flask import app, configure_logging

# Register routes on the shared app
import shape_routes  # noqa: F401


def main() -> None:
    configure_logging(level=os.environ.get('SHAPE_LOG_LEVEL', 'INFO'),
                      log_file=os.environ.get('SHAPE_LOG_FILE'))
    port = int(os.environ.get('SHAPE_PORT', '5000'))
    app.run(host='0.0.0.0', port=port, debug=False)


if __name__ == '__main__':
    main()
