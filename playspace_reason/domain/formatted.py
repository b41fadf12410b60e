"""FormattedActivity — the localized text for one refined activity."""

from __future__ import annotations

from pydantic import BaseModel, Field

from playspace_reason.domain.enums import TherapeuticFocus, UserMode


class ActivityText(BaseModel):
    """The prose sections of one activity card."""

    activity_name: str
    therapeutic_goal: str
    specific_skill: str
    implementation_steps: list[str] = Field(..., min_length=4)
    age_adaptations: str
    success_indicators: str
    safety_warnings: str

    model_config = {"frozen": True}


class FormattedActivity(BaseModel):
    """Text plus the identifiers it was produced from.

    safe_alternative is True when the steps were written around the
    object (navigate, reach over, touch) instead of moving it.
    """

    object_label: str
    object_label_display: str
    therapeutic_focus: TherapeuticFocus
    therapeutic_focus_display: str
    user_mode: UserMode
    safe_alternative: bool = False
    text: ActivityText

    model_config = {"frozen": True}
