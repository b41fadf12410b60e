"""ObjectDetectionAdapter — bounding-box detector output.

Expected raw format:
{
    "class": "chair",
    "score": 0.71,
    "bbox": [12, 40, 120, 200]
}

The bounding box is ignored; only the label and score are kept.
"""

from __future__ import annotations

from typing import Any

from playspace_reason.adapters.base import DetectionAdapter, clamp_probability
from playspace_reason.domain.detection import RawDetection


class ObjectDetectionAdapter(DetectionAdapter):
    """Maps ``{class, score}`` detections to RawDetections."""

    @property
    def source_name(self) -> str:
        return "object_detector"

    def can_handle(self, raw: dict[str, Any]) -> bool:
        return "class" in raw and "score" in raw

    def adapt(self, raw: dict[str, Any]) -> RawDetection:
        label = raw.get("class")
        if not isinstance(label, str) or not label.strip():
            raise ValueError("object detection payload has an empty 'class'")
        return RawDetection(
            class_name=label.strip(),
            probability=clamp_probability(raw.get("score")),
        )
