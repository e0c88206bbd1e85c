"""HTTP surface for candlefeed."""

from candlefeed.web.app import create_app

__all__ = ["create_app"]
