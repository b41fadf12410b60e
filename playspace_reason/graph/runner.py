"""Graph runner — clean interface for invoking the pipeline graph.

Usage:
    from playspace_reason.graph.runner import run_pipeline

    result = run_pipeline(detections, age=5)
    result["activities"]  # list[RefinedActivity]

The runner seeds the initial state from settings (or explicit
overrides), invokes LangGraph and returns the final PipelineState with
every stage output present.  No side effects.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Optional

from playspace_reason.config import Settings, settings as default_settings
from playspace_reason.core.detection_filter import DetectionFilterConfig
from playspace_reason.core.element_validator import ValidatorConfig
from playspace_reason.core.semantic_reasoner import ReasonerConfig
from playspace_reason.domain.detection import RawDetection
from playspace_reason.graph.builder import build_pipeline_graph
from playspace_reason.graph.state import PipelineState

logger = logging.getLogger(__name__)

_OUTPUT_KEYS: tuple[str, ...] = (
    "filtered",
    "reasoned_elements",
    "labels",
    "validated_reasoned",
    "elements",
    "candidates",
    "safe_candidates",
    "activities",
)


def initial_state(
    detections: list[RawDetection],
    age: int,
    cfg: Settings,
) -> PipelineState:
    """Seed a PipelineState from settings."""
    return {
        "detections": list(detections),
        "age": age,
        "filter_config": DetectionFilterConfig(
            confidence_threshold=cfg.detection_confidence_threshold,
            min_count=cfg.detection_min_count,
            max_count=cfg.detection_max_count,
        ),
        "reasoner_config": ReasonerConfig(min_confidence=cfg.reasoning_min_confidence),
        "validator_config": ValidatorConfig(
            min_confidence=cfg.validation_min_confidence,
            max_labels=cfg.validation_max_labels,
            young_child_age=cfg.young_child_age,
        ),
        "max_elements": cfg.max_environment_elements,
        "activity_count": cfg.target_activity_count,
    }


def run_pipeline(
    detections: list[RawDetection],
    age: int,
    *,
    rng: Optional[random.Random] = None,
    config: Optional[Settings] = None,
) -> dict[str, Any]:
    """Run every stage over *detections* for a child of *age*.

    Args:
        detections: Raw detector output; may be empty.
        age: Child age in years.
        rng: Random source for the builder shuffle.  Defaults to
             ``Random(shuffle_seed)`` when a seed is configured.
        config: Settings override (for testing).

    Returns:
        Final PipelineState dict; every stage output key is present.
    """
    cfg = config or default_settings
    if rng is None and cfg.shuffle_seed is not None:
        rng = random.Random(cfg.shuffle_seed)

    compiled_graph = build_pipeline_graph(rng)
    logger.info("Running pipeline: detections=%d age=%d", len(detections), age)

    final_state = compiled_graph.invoke(initial_state(detections, age, cfg))
    for key in _OUTPUT_KEYS:
        final_state.setdefault(key, [])

    logger.info(
        "Pipeline complete: filtered=%d reasoned=%d labels=%d elements=%d "
        "candidates=%d activities=%d",
        len(final_state["filtered"]),
        len(final_state["reasoned_elements"]),
        len(final_state["labels"]),
        len(final_state["elements"]),
        len(final_state["candidates"]),
        len(final_state["activities"]),
    )
    return final_state
