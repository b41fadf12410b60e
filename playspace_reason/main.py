"""playspace-reason — activity suggestions from a photo of a child's space.

This is the application entry point.  It wires the AdapterRegistry,
the shared DetectorHandle, the ActivityFormatter and the HTTP routes
together.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from playspace_reason.adapters.classifier import ClassifierAdapter
from playspace_reason.adapters.detector import DetectorHandle
from playspace_reason.adapters.label_score import LabelScoreAdapter
from playspace_reason.adapters.object_detection import ObjectDetectionAdapter
from playspace_reason.adapters.registry import AdapterRegistry
from playspace_reason.api.analyze import create_analyze_router
from playspace_reason.config import settings
from playspace_reason.explain.formatter import ActivityFormatter
from playspace_reason.explain.llm import gemini_llm_factory

# ── Logging ──────────────────────────────────────────────────────────────────

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)

# ── Adapter Registry ────────────────────────────────────────────────────────

registry = AdapterRegistry()
registry.register(ClassifierAdapter())
registry.register(ObjectDetectionAdapter())
registry.register(LabelScoreAdapter())

# ── Detector ─────────────────────────────────────────────────────────────────

# Without PLAYSPACE_DETECTOR_FACTORY the image route answers 503.
detector = DetectorHandle(settings.detector_factory) if settings.detector_factory else None

# ── Formatter ────────────────────────────────────────────────────────────────

formatter = ActivityFormatter(gemini_llm_factory if settings.llm_polish else None)


# ── App ──────────────────────────────────────────────────────────────────────

app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    description="Safety-checked occupational-therapy activities from household objects",
    version="0.1.0",
)

# ── Routes ───────────────────────────────────────────────────────────────────

app.include_router(create_analyze_router(
    registry,
    detector=detector,
    formatter=formatter,
))


# ── Health ───────────────────────────────────────────────────────────────────

@app.get("/health")
async def health() -> dict:
    return {
        "status": "ok",
        "detector_loaded": detector is not None and detector.loaded,
        "llm_polish": settings.llm_polish,
        "adapters": registry.stats,
        "total_adapted": registry.total_accepted,
        "total_rejected": registry.total_rejected,
    }
