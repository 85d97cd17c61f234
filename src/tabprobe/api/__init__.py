"""HTTP boundary - upload endpoint in front of the analysis engine."""

from tabprobe.api.main import create_app

__all__ = ["create_app"]
