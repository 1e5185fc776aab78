"""ASGI entrypoint for the food waste tracker API."""

from food_waste_tracker.api.app import create_app
from food_waste_tracker.containers import build_container

app = create_app(build_container())
