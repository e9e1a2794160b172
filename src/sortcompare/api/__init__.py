"""REST layer: `from sortcompare.api import create_app`.

`sortcompare.api.app:app` is built on first access (for uvicorn).
"""

from .app import create_app

__all__ = ["create_app"]
