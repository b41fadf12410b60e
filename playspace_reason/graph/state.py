"""PipelineState — the sole state object the pipeline nodes read and write.

Every node receives the full state and returns a partial update.  Nodes
never reach outside the state: tunables travel in it, and the only
randomness (the activity builder's shuffle) is bound into its node when
the graph is built.
"""

from __future__ import annotations

from typing import TypedDict

from playspace_reason.core.detection_filter import DetectionFilterConfig
from playspace_reason.core.element_validator import ValidatorConfig
from playspace_reason.core.semantic_reasoner import ReasonerConfig
from playspace_reason.domain.activity import ActivityCandidate, RefinedActivity
from playspace_reason.domain.detection import RawDetection, ReasonedElement
from playspace_reason.domain.environment import EnvironmentElement


class PipelineState(TypedDict, total=False):
    """LangGraph state for one analysis request.

    Inputs:
        detections: Raw detector output, in any order.
        age: Child age in years.
        filter_config / reasoner_config / validator_config: Stage tunables.
        max_elements: Cap on environment elements.
        activity_count: Builder target before clamping.

    Stage outputs, in pipeline order:
        filtered: Detections that survived the detection filter.
        reasoned_elements: Interpretations of the filtered detections.
        labels: Validated labels, at most ``validator_config.max_labels``.
        validated_reasoned: Reasoned elements for ``labels``, same order.
        elements: Environment elements with safety metadata attached.
        candidates: Builder output.
        safe_candidates: Candidates after the safety validator.
        activities: Refined activities, the pipeline's final product.
    """

    detections: list[RawDetection]
    age: int
    filter_config: DetectionFilterConfig
    reasoner_config: ReasonerConfig
    validator_config: ValidatorConfig
    max_elements: int
    activity_count: int

    filtered: list[RawDetection]
    reasoned_elements: list[ReasonedElement]
    labels: list[str]
    validated_reasoned: list[ReasonedElement]
    elements: list[EnvironmentElement]
    candidates: list[ActivityCandidate]
    safe_candidates: list[ActivityCandidate]
    activities: list[RefinedActivity]
