"""Detection-side models — what the detector claims and how it is read.

A RawDetection is a *claim with uncertainty*: a class label from an
external vision model plus its probability.  A ReasonedElement is the
real-world interpretation of one such label.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class RawDetection(BaseModel):
    """One ``{className, probability}`` pair from the object detector.

    Request-scoped and immutable.  Accepts the detector's camelCase
    ``className`` on input as well as the snake_case field name.
    """

    class_name: str = Field(
        ...,
        alias="className",
        min_length=1,
        max_length=256,
        description="Detector class label, possibly a comma-separated synonym list",
    )
    probability: float = Field(
        ...,
        ge=0.0,
        le=1.0,
        description="Detector confidence for this label",
    )

    model_config = {"frozen": True, "populate_by_name": True}


class ReasonedElement(BaseModel):
    """Real-world interpretation of one surviving raw label.

    confidence_after_processing blends detector probability with a static
    relevance weight.  It is used internally for filtering and ordering
    and is never shown to end users.
    """

    raw_label: str = Field(..., description="Raw detector label this element came from")
    element_name_ar: str = Field(..., min_length=1, description="Display name (Arabic)")
    functional_category: str = Field(..., description="Functional category (Arabic)")
    contextual_interpretation: str = Field(..., description="Short contextual note (Arabic)")
    confidence_after_processing: float = Field(..., ge=0.0, le=1.0)

    model_config = {"frozen": True}
