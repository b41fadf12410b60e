"""ClassifierAdapter — image-classifier output.

Expected raw format:
{
    "className": "studio couch, day bed",
    "probability": 0.82
}
"""

from __future__ import annotations

from typing import Any

from playspace_reason.adapters.base import DetectionAdapter, clamp_probability
from playspace_reason.domain.detection import RawDetection


class ClassifierAdapter(DetectionAdapter):
    """Maps ``{className, probability}`` pairs to RawDetections."""

    @property
    def source_name(self) -> str:
        return "image_classifier"

    def can_handle(self, raw: dict[str, Any]) -> bool:
        return "className" in raw and "probability" in raw

    def adapt(self, raw: dict[str, Any]) -> RawDetection:
        label = raw.get("className")
        if not isinstance(label, str) or not label.strip():
            raise ValueError("classifier payload has an empty 'className'")
        return RawDetection(
            class_name=label.strip(),
            probability=clamp_probability(raw.get("probability")),
        )
