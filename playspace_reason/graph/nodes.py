"""LangGraph nodes — thin wrappers that run one pipeline stage each.

Each node:
    - Receives the full PipelineState
    - Calls exactly one pure stage function from ``playspace_reason.core``
    - Returns a partial dict update with that stage's output

Every node accepts missing or empty inputs and returns empty outputs, so
an image with no usable detections flows through to zero activities.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from playspace_reason.core.activity_builder import (
    DEFAULT_ACTIVITY_COUNT,
    build_activities_from_environment,
)
from playspace_reason.core.detection_filter import filter_detections
from playspace_reason.core.element_validator import validate_detected_elements
from playspace_reason.core.environment_analyzer import (
    MAX_ENVIRONMENT_ELEMENTS,
    analyze_environment,
)
from playspace_reason.core.refiner import refine_activities
from playspace_reason.core.safety import enrich_elements_with_safety
from playspace_reason.core.safety_validator import validate_and_replace_activities
from playspace_reason.core.semantic_reasoner import reason_over_detections
from playspace_reason.graph.state import PipelineState

logger = logging.getLogger(__name__)

Node = Callable[[PipelineState], dict]


# ── 1. filter_detections ────────────────────────────────────────────────────

def filter_node(state: PipelineState) -> dict:
    filtered = filter_detections(state.get("detections", []), state.get("filter_config"))
    logger.debug("Detection filter kept %d detections", len(filtered))
    return {"filtered": filtered}


# ── 2. reason_over_detections ───────────────────────────────────────────────

def reason_node(state: PipelineState) -> dict:
    reasoned = reason_over_detections(state.get("filtered", []), state.get("reasoner_config"))
    return {"reasoned_elements": reasoned}


# ── 3. validate_detected_elements ───────────────────────────────────────────

def validate_elements_node(state: PipelineState) -> dict:
    """Validate the filtered labels against their reasoned interpretations."""
    labels = [d.class_name for d in state.get("filtered", [])]
    result = validate_detected_elements(
        labels,
        state.get("reasoned_elements", []),
        state.get("age", 0),
        state.get("validator_config"),
    )
    return {"labels": result.labels, "validated_reasoned": result.reasoned_elements}


# ── 4 + 5. analyze_environment, enrich_elements_with_safety ─────────────────

def analyze_environment_node(state: PipelineState) -> dict:
    elements = analyze_environment(
        state.get("labels", []),
        state.get("max_elements", MAX_ENVIRONMENT_ELEMENTS),
    )
    return {"elements": elements}


def classify_safety_node(state: PipelineState) -> dict:
    return {"elements": enrich_elements_with_safety(state.get("elements", []))}


# ── 6. build_activities_from_environment ────────────────────────────────────

def make_build_activities(rng: Optional[random.Random] = None) -> Node:
    """Create the builder node bound to a random source.

    Args:
        rng: Source for the diversity shuffle.  ``None`` gives a fresh,
             unseeded ``random.Random`` per call.
    """

    def build_activities(state: PipelineState) -> dict:
        candidates = build_activities_from_environment(
            state.get("elements", []),
            state.get("age", 0),
            state.get("activity_count", DEFAULT_ACTIVITY_COUNT),
            rng=rng,
        )
        return {"candidates": candidates}

    return build_activities


# ── 7. validate_and_replace_activities ──────────────────────────────────────

def validate_safety_node(state: PipelineState) -> dict:
    safe = validate_and_replace_activities(
        state.get("candidates", []),
        state.get("elements", []),
        state.get("age", 0),
    )
    return {"safe_candidates": safe}


# ── 8. refine_activities ────────────────────────────────────────────────────

def refine_node(state: PipelineState) -> dict:
    refined = refine_activities(
        state.get("safe_candidates", []),
        state.get("elements", []),
        state.get("age", 0),
    )
    return {"activities": refined}
