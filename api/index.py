"""
Trossachs Storefront - API entry point

Serverless/ASGI entry: exposes ``app`` built from environment settings.
Run locally with ``uvicorn api.index:app --port 5000``.
"""
from storefront.app import create_app

app = create_app()
