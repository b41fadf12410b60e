"""Pydantic models for the analyze endpoint."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from playspace_reason.domain.activity import RefinedActivity
from playspace_reason.domain.detection import ReasonedElement
from playspace_reason.domain.enums import UserMode
from playspace_reason.domain.environment import EnvironmentElement
from playspace_reason.domain.formatted import FormattedActivity


def coerce_user_mode(value: Any) -> UserMode:
    """Unknown or missing audiences fall back to parent."""
    try:
        return UserMode(value)
    except (ValueError, TypeError):
        return UserMode.PARENT


class AnalyzeRequest(BaseModel):
    """Detector output for one photo plus who the text is for."""

    detections: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Raw detector payloads; any format a registered adapter accepts",
    )
    age: int = Field(..., gt=0, description="Child age in years")
    user_mode: UserMode = Field(default=UserMode.PARENT)

    @field_validator("user_mode", mode="before")
    @classmethod
    def _default_mode(cls, v: Any) -> UserMode:
        return coerce_user_mode(v)


class AnalyzeResponse(BaseModel):
    age: int
    labels: list[str] = Field(default_factory=list, description="Validated raw labels")
    labels_display: list[str] = Field(default_factory=list, description="Arabic names, same order")
    scene_summary: Optional[str] = None
    image_description: str
    reasoned_elements: list[ReasonedElement] = Field(default_factory=list)
    elements: list[EnvironmentElement] = Field(default_factory=list)
    activities: list[RefinedActivity] = Field(default_factory=list)
    activities_text: list[FormattedActivity] = Field(default_factory=list)
    user_mode: UserMode
