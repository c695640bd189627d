"""FastAPI REST API for interactive cabinet layout.

Each session holds one cabinet and its committed parts. A browser renderer
forwards part selection and pointer events and draws what comes back.

Usage:
    uvicorn cabinet_composer.web:app --reload
"""

from cabinet_composer.web.app import app, create_app

__all__ = ["app", "create_app"]
