# app.py
"""
Thin process entrypoint: settings are read once here and passed down.

Usage example:
    uvicorn app:app --reload
    python app.py
"""

from invoicing.config import load_settings
from invoicing.logging_config import configure_logging
from invoicing.main import create_app

settings = load_settings()
configure_logging(settings)

app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.port)
