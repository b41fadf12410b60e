"""Tests for the detection filter: person/generic removal, threshold, backfill, cap."""

from __future__ import annotations

from playspace_reason.core.detection_filter import (
    DetectionFilterConfig,
    filter_detections,
    is_generic_label,
    is_person_label,
)
from playspace_reason.domain.detection import RawDetection


# ── Helpers ──────────────────────────────────────────────────────────────────

def _det(label: str, probability: float) -> RawDetection:
    return RawDetection(className=label, probability=probability)


def _labels(detections: list[RawDetection]) -> list[str]:
    return [d.class_name for d in detections]


# ── Person and body-part labels ──────────────────────────────────────────────

class TestPersonLabels:

    def test_person_is_dropped(self) -> None:
        result = filter_detections([_det("person", 0.95), _det("sofa", 0.8)])
        assert _labels(result) == ["sofa"]

    def test_substring_match_covers_every_synonym(self) -> None:
        assert is_person_label("studio couch, woman")

    def test_body_parts_match_whole_words(self) -> None:
        assert is_person_label("hand blower")
        assert is_person_label("face powder")

    def test_words_containing_body_parts_survive(self) -> None:
        assert not is_person_label("mantel")
        assert not is_person_label("handkerchief")


# ── Generic labels ───────────────────────────────────────────────────────────

class TestGenericLabels:

    def test_generic_first_word_dropped(self) -> None:
        assert is_generic_label("object, thing")
        assert is_generic_label("items on shelf")

    def test_empty_label_is_generic(self) -> None:
        assert is_generic_label(" , chair")

    def test_specific_label_kept(self) -> None:
        assert not is_generic_label("rocking chair")


# ── Threshold, backfill and cap ──────────────────────────────────────────────

class TestThresholdAndBackfill:

    def test_sorted_by_probability(self) -> None:
        result = filter_detections([
            _det("chair", 0.4), _det("sofa", 0.9), _det("table", 0.6),
        ])
        assert _labels(result) == ["sofa", "table", "chair"]

    def test_backfills_up_to_min_count(self) -> None:
        result = filter_detections([
            _det("ball", 0.9), _det("book", 0.1), _det("chair", 0.05), _det("lamp", 0.01),
        ])
        assert _labels(result) == ["ball", "book", "chair"]

    def test_no_backfill_when_enough_pass(self) -> None:
        result = filter_detections([
            _det("ball", 0.9), _det("book", 0.8), _det("chair", 0.7), _det("lamp", 0.01),
        ])
        assert "lamp" not in _labels(result)

    def test_cap_applies_after_backfill(self) -> None:
        cfg = DetectionFilterConfig(max_count=2)
        result = filter_detections([_det("a ball", 0.9), _det("a book", 0.8), _det("a cup", 0.7)], cfg)
        assert len(result) == 2

    def test_equal_probabilities_keep_input_order(self) -> None:
        result = filter_detections([_det("cup", 0.5), _det("bowl", 0.5), _det("plate", 0.5)])
        assert _labels(result) == ["cup", "bowl", "plate"]

    def test_empty_input(self) -> None:
        assert filter_detections([]) == []

    def test_only_people_gives_empty(self) -> None:
        assert filter_detections([_det("person", 0.9), _det("baby", 0.8)]) == []
