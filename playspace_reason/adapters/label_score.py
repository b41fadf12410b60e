"""LabelScoreAdapter — generic ``{label, confidence}`` or ``{label, score}``."""

from __future__ import annotations

from typing import Any

from playspace_reason.adapters.base import DetectionAdapter, clamp_probability
from playspace_reason.domain.detection import RawDetection

_SCORE_KEYS = ("confidence", "score")


class LabelScoreAdapter(DetectionAdapter):

    @property
    def source_name(self) -> str:
        return "label_score"

    def can_handle(self, raw: dict[str, Any]) -> bool:
        return "label" in raw and any(k in raw for k in _SCORE_KEYS)

    def adapt(self, raw: dict[str, Any]) -> RawDetection:
        label = raw.get("label")
        if not isinstance(label, str) or not label.strip():
            raise ValueError("label/score payload has an empty 'label'")
        key = next(k for k in _SCORE_KEYS if k in raw)
        return RawDetection(class_name=label.strip(), probability=clamp_probability(raw[key]))
