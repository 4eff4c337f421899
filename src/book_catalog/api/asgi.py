"""ASGI entrypoint for the book catalog API."""

from book_catalog.api.app import create_app
from book_catalog.containers import build_container

app = create_app(build_container())
