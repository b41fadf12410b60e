"""Object detector collaborator and its process-wide handle.

The vision model itself is external.  ``ObjectDetector`` is the seam:
anything that turns image bytes into RawDetections.  ``DetectorHandle``
builds the detector once, on first use, and shares it between requests;
each ``classify`` call is independent and stateless.

Every failure raised while building or calling the detector surfaces
as one opaque ``DetectionFailedError``.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import Callable, Iterable, Optional

from playspace_reason.domain.detection import RawDetection

logger = logging.getLogger(__name__)


class DetectionFailedError(Exception):
    """The upstream detector could not produce detections."""


class ObjectDetector(ABC):

    @abstractmethod
    def classify(self, image: bytes) -> list[RawDetection]:
        """Return the detections found in *image*."""
        ...


class StaticDetector(ObjectDetector):
    """Returns the same detections for every image."""

    def __init__(self, detections: Iterable[RawDetection] = ()) -> None:
        self._detections = list(detections)

    def classify(self, image: bytes) -> list[RawDetection]:
        return list(self._detections)


DetectorFactory = Callable[[], ObjectDetector]


class DetectorHandle:
    """Lazily-built, shared detector.

    The lock only guards construction; once built, the detector is
    read-only and callers classify concurrently without coordination.
    """

    def __init__(self, factory: DetectorFactory) -> None:
        self._factory = factory
        self._detector: Optional[ObjectDetector] = None
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._detector is not None

    def get(self) -> ObjectDetector:
        if self._detector is None:
            with self._lock:
                if self._detector is None:
                    try:
                        self._detector = self._factory()
                    except Exception as exc:
                        logger.error("Detector construction failed: %s", exc)
                        raise DetectionFailedError("detector unavailable") from exc
                    logger.info("Detector loaded: %s", type(self._detector).__name__)
        return self._detector

    def classify(self, image: bytes) -> list[RawDetection]:
        detector = self.get()
        try:
            return detector.classify(image)
        except DetectionFailedError:
            raise
        except Exception as exc:
            logger.error("Detector classify failed: %s", exc)
            raise DetectionFailedError("detection failed") from exc
