"""Abstract base for detection adapters.

Detection adapters normalise raw payloads from different object
detectors into the canonical RawDetection model.

Rules:
    1. Adapters must NOT mutate the incoming payload dict.
    2. adapt() must return a valid RawDetection or raise ValueError.
    3. No filtering or reasoning lives inside an adapter, only field mapping.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any

from playspace_reason.domain.detection import RawDetection


def clamp_probability(value: Any) -> float:
    """Coerce a detector score to a float in [0, 1]."""
    try:
        score = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"score is not a number: {value!r}") from exc
    if math.isnan(score):
        raise ValueError("score is NaN")
    return min(max(score, 0.0), 1.0)


class DetectionAdapter(ABC):
    """Base class for converting raw detector payloads into RawDetections."""

    @abstractmethod
    def can_handle(self, raw: dict[str, Any]) -> bool:
        """Return True if this adapter knows how to translate *raw*.

        Must be a fast, non-destructive check (key presence).
        """
        ...

    @abstractmethod
    def adapt(self, raw: dict[str, Any]) -> RawDetection:
        """Translate a raw payload dict into a validated RawDetection.

        Raises:
            ValueError: If the payload cannot be normalised.
        """
        ...

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Name of the detector output format this adapter handles."""
        ...
