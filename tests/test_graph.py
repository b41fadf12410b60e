"""Tests for the LangGraph pipeline: topology, runner and end-to-end scenarios."""

from __future__ import annotations

import logging
import random

import pytest

from playspace_reason.config import Settings
from playspace_reason.domain.detection import RawDetection
from playspace_reason.domain.enums import TherapeuticFocus as F
from playspace_reason.graph.builder import STAGES, build_pipeline_graph
from playspace_reason.graph.nodes import (
    analyze_environment_node,
    classify_safety_node,
    filter_node,
    make_build_activities,
    validate_elements_node,
)
from playspace_reason.graph.runner import initial_state, run_pipeline

SMALL_OBJECTS = ["remote control", "cellular telephone", "plate", "plant", "vase"]
DEFAULT_TRIAD = {F.FINE_MOTOR, F.GROSS_MOTOR, F.BILATERAL_COORDINATION}


# ── Helpers ──────────────────────────────────────────────────────────────────

def _det(label: str, probability: float) -> RawDetection:
    return RawDetection(className=label, probability=probability)


def _run(detections: list[RawDetection], age: int, seed: int = 0) -> dict:
    return run_pipeline(detections, age, rng=random.Random(seed), config=Settings())


# ── Graph construction ───────────────────────────────────────────────────────

class TestGraphConstruction:

    def test_graph_compiles(self) -> None:
        assert build_pipeline_graph() is not None

    def test_graph_has_every_stage(self) -> None:
        nodes = set(build_pipeline_graph().get_graph().nodes)
        assert set(STAGES) <= nodes

    def test_initial_state_from_settings(self) -> None:
        cfg = Settings(detection_min_count=1, validation_max_labels=2, target_activity_count=4)
        state = initial_state([], 5, cfg)
        assert state["filter_config"].min_count == 1
        assert state["validator_config"].max_labels == 2
        assert state["activity_count"] == 4


# ── Individual nodes ─────────────────────────────────────────────────────────

class TestNodes:

    def test_nodes_accept_empty_state(self) -> None:
        assert filter_node({}) == {"filtered": []}
        assert validate_elements_node({}) == {"labels": [], "validated_reasoned": []}
        assert analyze_environment_node({}) == {"elements": []}
        assert classify_safety_node({}) == {"elements": []}
        assert make_build_activities()({}) == {"candidates": []}

    def test_validate_uses_filtered_labels(self) -> None:
        state = {"filtered": [_det("sofa", 0.9)], "reasoned_elements": [], "age": 5}
        assert validate_elements_node(state)["labels"] == []


# ── Runner ───────────────────────────────────────────────────────────────────

class TestRunner:

    def test_empty_input_gives_every_key(self) -> None:
        result = _run([], 5)
        for key in (
            "filtered", "reasoned_elements", "labels", "validated_reasoned",
            "elements", "candidates", "safe_candidates", "activities",
        ):
            assert result[key] == []

    def test_logs_start_and_finish(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="playspace_reason.graph.runner"):
            _run([_det("ball", 0.9)], 5)
        assert "Running pipeline" in caplog.text
        assert "Pipeline complete" in caplog.text

    def test_same_seed_same_activities(self) -> None:
        detections = [_det(l, 0.9) for l in ("ball", "book", "chair", "pillow")]
        a = _run(detections, 6, seed=11)["activities"]
        b = _run(detections, 6, seed=11)["activities"]
        assert [x.key for x in a] == [x.key for x in b]

    def test_configured_shuffle_seed(self) -> None:
        detections = [_det(l, 0.9) for l in ("ball", "book", "chair", "pillow")]
        cfg = Settings(shuffle_seed=5)
        a = run_pipeline(detections, 6, config=cfg)["activities"]
        b = run_pipeline(detections, 6, config=cfg)["activities"]
        assert [x.key for x in a] == [x.key for x in b]


# ── End-to-end scenarios ─────────────────────────────────────────────────────

class TestScenarios:

    def test_single_sofa(self) -> None:
        result = _run([_det("sofa", 0.9)], 5)

        assert result["labels"] == ["sofa"]
        (sofa,) = result["elements"]
        assert sofa.requires_safe_alternatives
        activities = result["activities"]
        assert activities
        assert {a.therapeutic_focus for a in activities} <= {F.SENSORY_REGULATION, F.GROSS_MOTOR}
        assert not any(a.unsafe_fallback for a in activities)

    def test_person_never_reaches_labels(self) -> None:
        result = _run([_det("person", 0.95), _det("ball", 0.8)], 5)
        assert [d.class_name for d in result["filtered"]] == ["ball"]
        assert result["labels"] == ["ball"]
        assert all("person" not in a.object_label for a in result["activities"])

    def test_low_confidence_scene_is_backfilled(self) -> None:
        result = _run([_det("ball", 0.1), _det("book", 0.08), _det("chair", 0.05)], 6)
        assert result["labels"] == ["ball", "book", "chair"]
        assert len(result["activities"]) >= 3

    def test_stairs_for_a_toddler(self) -> None:
        result = _run([_det("stairs", 0.7)], 2)

        activities = result["activities"]
        assert len(activities) == 2
        safe = [a for a in activities if not a.unsafe_fallback]
        flagged = [a for a in activities if a.unsafe_fallback]
        assert [a.therapeutic_focus for a in safe] == [F.SENSORY_REGULATION]
        assert len(flagged) == 1
        assert flagged[0].element.requires_safe_alternatives

    def test_confident_sofa_survives_a_crowded_tie(self) -> None:
        detections = [_det(l, 0.6) for l in ("drawer", "basket", "box", "bowl", "plate")]
        result = _run(detections + [_det("sofa", 0.5)], 5)
        assert "sofa" in result["labels"]
        assert len(result["labels"]) == 5

    @pytest.mark.parametrize("seed", range(5))
    def test_small_objects_with_default_affordances(self, seed: int) -> None:
        result = _run([_det(l, 0.8) for l in SMALL_OBJECTS], 6, seed=seed)

        assert set(result["labels"]) == set(SMALL_OBJECTS)
        activities = result["activities"]
        assert len(activities) == 5
        assert len({a.key for a in activities}) == 5
        assert {a.therapeutic_focus for a in activities} <= DEFAULT_TRIAD

    @pytest.mark.parametrize("age", [2, 3, 5, 8])
    def test_activity_count_bounds(self, age: int) -> None:
        detections = [_det(l, 0.9) for l in ("ball", "book", "sofa", "table", "pillow", "lamp")]
        result = _run(detections, age)
        assert len(result["labels"]) <= 5
        assert 1 <= len(result["activities"]) <= 5
        assert len({a.key for a in result["activities"]}) == len(result["activities"])
