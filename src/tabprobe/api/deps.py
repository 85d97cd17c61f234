"""FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends, Request

from tabprobe.core.config import Settings


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    settings: Settings = request.app.state.settings
    return settings


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
