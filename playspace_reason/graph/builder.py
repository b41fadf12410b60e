"""Graph builder — constructs the LangGraph pipeline topology.

Topology (linear, one node per stage):

    START → filter_detections → reason_over_detections
          → validate_detected_elements → analyze_environment
          → classify_safety → build_activities → validate_safety
          → refine_activities → END

The graph is compiled once per random source and can be invoked many
times.
"""

from __future__ import annotations

import random
from typing import Any, Optional

from langgraph.graph import END, START, StateGraph

from playspace_reason.graph.nodes import (
    analyze_environment_node,
    classify_safety_node,
    filter_node,
    make_build_activities,
    reason_node,
    refine_node,
    validate_elements_node,
    validate_safety_node,
)
from playspace_reason.graph.state import PipelineState

STAGES: tuple[str, ...] = (
    "filter_detections",
    "reason_over_detections",
    "validate_detected_elements",
    "analyze_environment",
    "classify_safety",
    "build_activities",
    "validate_safety",
    "refine_activities",
)


def build_pipeline_graph(rng: Optional[random.Random] = None) -> Any:
    """Construct and compile the pipeline graph.

    Args:
        rng: Random source for the activity builder's shuffle.  Pass
             ``random.Random(seed)`` for reproducible output.

    Returns:
        A compiled LangGraph application.
    """
    graph = StateGraph(PipelineState)

    # ── Register nodes ───────────────────────────────────────────────────
    graph.add_node("filter_detections", filter_node)
    graph.add_node("reason_over_detections", reason_node)
    graph.add_node("validate_detected_elements", validate_elements_node)
    graph.add_node("analyze_environment", analyze_environment_node)
    graph.add_node("classify_safety", classify_safety_node)
    graph.add_node("build_activities", make_build_activities(rng))
    graph.add_node("validate_safety", validate_safety_node)
    graph.add_node("refine_activities", refine_node)

    # ── Edges ────────────────────────────────────────────────────────────
    graph.add_edge(START, STAGES[0])
    for current, following in zip(STAGES, STAGES[1:]):
        graph.add_edge(current, following)
    graph.add_edge(STAGES[-1], END)

    return graph.compile()
