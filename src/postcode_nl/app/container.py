from __future__ import annotations

from dataclasses import dataclass

from postcode_nl.app.settings import Settings, get_settings
from postcode_nl.client import PostcodeClient


@dataclass(frozen=True)
class Container:
    settings: Settings
    client: PostcodeClient


def build_container(settings: Settings | None = None) -> Container:
    settings = settings or get_settings()
    return Container(settings=settings, client=PostcodeClient.from_settings(settings))
