"""
Web harness - serves the client bundle and the JSON API.
"""

from .app import create_app
from .harness import log, serve_static, setup_dev

__all__ = ["create_app", "log", "serve_static", "setup_dev"]
