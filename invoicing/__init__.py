# invoicing/__init__.py
"""
Invoicing data model, configuration and API shell.

The process entrypoint lives in the root `app.py`:
    uvicorn app:app --reload
"""

from .main import create_app

__all__ = ["create_app"]
