"""Data models for component scaffolding.

Platforms and actions are closed string enums; a ``ComponentRequest`` is the
validated (platform, action, name) triple that the dispatcher and the
interactive prompt both produce.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class Platform(str, Enum):
    """Target framework for generated code."""

    NEXT = "next"
    EXPO = "expo"
    REACT_NATIVE = "react-native"


class Action(str, Enum):
    """Operation requested on a component directory."""

    ADD = "add"
    REMOVE = "remove"


# Files written by ``add`` for each platform, in write order.
PLATFORM_FILES: dict[Platform, tuple[str, ...]] = {
    Platform.NEXT: ("page.tsx", "layout.tsx"),
    Platform.EXPO: ("index.tsx", "styles.js"),
    Platform.REACT_NATIVE: ("index.jsx", "styles.js"),
}

# How error messages refer to the unit being scaffolded.
PLATFORM_LABELS: dict[Platform, str] = {
    Platform.NEXT: "Component/page",
    Platform.EXPO: "Component",
    Platform.REACT_NATIVE: "Component",
}


class ComponentRequest(BaseModel):
    """A validated request to add or remove one component."""

    platform: Platform
    action: Action
    name: str = Field(..., description="Component/page name, used verbatim as the directory name")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Name cannot be empty")
        return value
