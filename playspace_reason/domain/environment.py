"""EnvironmentElement — the central entity of the pipeline.

One element per surviving validated label.  It carries physical
attributes (where the object sits, how high, how stable, how much room
around it), affordances (which therapeutic focuses it can support) and,
once the safety classifier has run, its SafetyMetadata.

Elements are immutable.  Attaching safety metadata returns a new
element via ``with_safety``; nothing is patched in place.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from playspace_reason.domain.enums import (
    ForbiddenAction,
    Height,
    ObjectSafetyClass,
    Position,
    SafeActionHint,
    SensoryChannel,
    Space,
    Stability,
    Texture,
    TherapeuticFocus,
)


class SafetyMetadata(BaseModel):
    """Physical-safety classification of a single element.

    use_safe_alternatives_only is the one gate the rest of the pipeline
    checks before describing any action on the element.
    """

    classes: list[ObjectSafetyClass] = Field(..., min_length=1)
    forbidden_actions: list[ForbiddenAction] = Field(default_factory=list)
    safe_action_hints: list[SafeActionHint] = Field(default_factory=list)
    use_safe_alternatives_only: bool = False

    model_config = {"frozen": True}

    def has_class(self, safety_class: ObjectSafetyClass) -> bool:
        return safety_class in self.classes

    def forbids(self, action: ForbiddenAction) -> bool:
        return action in self.forbidden_actions


class EnvironmentElement(BaseModel):
    """A physical object inferred from one detected label."""

    object_label: str = Field(..., min_length=1, description="Raw detector label")
    position: Position
    height: Height
    stability: Stability
    space: Space
    texture: Texture = Texture.UNKNOWN
    motor: list[TherapeuticFocus] = Field(
        ...,
        min_length=1,
        description="Therapeutic focuses this object affords",
    )
    sensory: list[SensoryChannel] = Field(default_factory=list)
    risks: list[str] = Field(default_factory=list)
    safety: Optional[SafetyMetadata] = Field(
        default=None,
        description="Attached once by the safety classifier",
    )

    model_config = {"frozen": True}

    def with_safety(self, safety: SafetyMetadata) -> EnvironmentElement:
        """Return a copy of this element carrying *safety*."""
        return self.model_copy(update={"safety": safety})

    @property
    def requires_safe_alternatives(self) -> bool:
        return self.safety is not None and self.safety.use_safe_alternatives_only
