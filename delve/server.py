"""
project: Delve
module: server.py
License: MIT

Entry point for the preview web server.
"""

import logging
import sys

from delve import create_app


def start_server(host="127.0.0.1", port=5000, debug: bool = False):  # pragma: no cover (runtime only)
    """Configure logging and serve the preview app until interrupted."""
    _configure_logging()
    app = create_app()
    try:
        print(f"[INFO] Starting dungeon preview server on {host}:{port}")
        app.run(host=host, port=port, debug=debug)
    except KeyboardInterrupt:
        print("\n[INFO] Server stopped by user (Ctrl+C)")
        sys.exit(0)


def _configure_logging(level=logging.INFO):
    """Send Flask/werkzeug logging to the console.

    Safe to call repeatedly; existing root handlers are replaced.
    """
    root = logging.getLogger()
    root.setLevel(level)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))

    # Avoid duplicate handlers if reconfigured
    for h in list(root.handlers):
        root.removeHandler(h)

    root.addHandler(console)
    return root
