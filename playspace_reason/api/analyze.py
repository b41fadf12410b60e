"""REST endpoints for environment analysis.

Paths:
    POST /api/analyze         JSON body with detector output
    POST /api/analyze/image   raw image bytes, classified by the shared detector

Both wire together:
1. AdapterRegistry or DetectorHandle (RawDetections)
2. run_pipeline() (LangGraph pipeline of the core stages)
3. infer_scene_from_objects() + describe_image() (summaries)
4. ActivityFormatter (Arabic activity cards)

Validation and adapter failures answer 422.  Anything else is logged
and answered with a single opaque "analysis failed".
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from fastapi import APIRouter, HTTPException, Query, Request
from starlette.concurrency import run_in_threadpool

from playspace_reason.adapters.detector import DetectionFailedError, DetectorHandle
from playspace_reason.adapters.registry import (
    AdaptationError,
    AdapterRegistry,
    NoAdapterFoundError,
)
from playspace_reason.config import Settings
from playspace_reason.domain.detection import RawDetection
from playspace_reason.domain.enums import UserMode
from playspace_reason.explain.description import describe_image, display_name
from playspace_reason.explain.formatter import ActivityFormatter
from playspace_reason.explain.scene import infer_scene_from_objects
from playspace_reason.graph.runner import run_pipeline
from playspace_reason.models.analysis import (
    AnalyzeRequest,
    AnalyzeResponse,
    coerce_user_mode,
)

logger = logging.getLogger(__name__)

ANALYSIS_FAILED = "analysis failed"

RngFactory = Callable[[], Optional[random.Random]]


def build_analysis(
    detections: list[RawDetection],
    age: int,
    mode: UserMode,
    formatter: ActivityFormatter,
    *,
    config: Optional[Settings] = None,
    rng: Optional[random.Random] = None,
) -> AnalyzeResponse:
    """Run the pipeline and render its output for *mode*."""
    state = run_pipeline(detections, age, rng=rng, config=config)

    labels = state["labels"]
    names = {r.raw_label: r.element_name_ar for r in state["validated_reasoned"]}
    labels_display = [display_name(label, names) for label in labels]

    return AnalyzeResponse(
        age=age,
        labels=labels,
        labels_display=labels_display,
        scene_summary=infer_scene_from_objects(labels),
        image_description=describe_image(labels_display),
        reasoned_elements=state["validated_reasoned"],
        elements=state["elements"],
        activities=state["activities"],
        activities_text=formatter.format_all(state["activities"], age, mode, names),
        user_mode=mode,
    )


def create_analyze_router(
    registry: AdapterRegistry,
    detector: Optional[DetectorHandle] = None,
    formatter: Optional[ActivityFormatter] = None,
    config: Optional[Settings] = None,
    rng_factory: Optional[RngFactory] = None,
) -> APIRouter:
    """Factory that wires the analyze endpoints to adapters, detector and formatter."""

    router = APIRouter(prefix="/api", tags=["analysis"])
    text_formatter = formatter or ActivityFormatter()

    def _run(detections: list[RawDetection], age: int, mode: UserMode) -> AnalyzeResponse:
        rng = rng_factory() if rng_factory is not None else None
        try:
            return build_analysis(detections, age, mode, text_formatter, config=config, rng=rng)
        except Exception as exc:
            logger.exception("Analysis failed: %s", exc)
            raise HTTPException(status_code=500, detail=ANALYSIS_FAILED) from exc

    @router.post("/analyze", response_model=AnalyzeResponse)
    def analyze(request: AnalyzeRequest) -> AnalyzeResponse:
        """Analyze detector output that the caller already has."""
        try:
            detections = registry.adapt_many(request.detections)
        except (NoAdapterFoundError, AdaptationError) as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

        logger.info(
            "Analyze request: detections=%d age=%d mode=%s",
            len(detections), request.age, request.user_mode.value,
        )
        return _run(detections, request.age, request.user_mode)

    @router.post("/analyze/image", response_model=AnalyzeResponse)
    async def analyze_image(
        request: Request,
        age: int = Query(..., gt=0),
        user_mode: str = Query(UserMode.PARENT.value),
    ) -> AnalyzeResponse:
        """Classify an uploaded image with the shared detector, then analyze."""
        if detector is None:
            raise HTTPException(status_code=503, detail="no detector configured")

        image = await request.body()
        if not image:
            raise HTTPException(status_code=422, detail="image body is empty")

        try:
            detections = await run_in_threadpool(detector.classify, image)
        except DetectionFailedError as exc:
            logger.error("Detection failed: %s", exc)
            raise HTTPException(status_code=500, detail=ANALYSIS_FAILED) from exc

        return await run_in_threadpool(_run, detections, age, coerce_user_mode(user_mode))

    return router
