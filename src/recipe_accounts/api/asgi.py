"""ASGI entrypoint for the recipe accounts API."""

from recipe_accounts.api.app import create_app
from recipe_accounts.containers import build_container

app = create_app(build_container())
