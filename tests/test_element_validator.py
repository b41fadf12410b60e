"""Tests for the element validator."""

from __future__ import annotations

from playspace_reason.core.element_validator import (
    ValidatorConfig,
    excluded_for_age,
    matches_allowlist,
    matches_blocklist,
    validate_detected_elements,
)
from playspace_reason.domain.detection import ReasonedElement


def _reasoned(label: str, confidence: float = 0.9) -> ReasonedElement:
    return ReasonedElement(
        raw_label=label,
        element_name_ar=f"عنصر {len(label)}",
        functional_category="أدوات استعمال يومي",
        contextual_interpretation="سياق",
        confidence_after_processing=confidence,
    )


def _validate(labels: list[str], age: int = 5, **kwargs):
    return validate_detected_elements(labels, [_reasoned(l) for l in labels], age, **kwargs)


class TestKeywordLists:

    def test_blocklist_overrides_allowlist(self) -> None:
        assert matches_allowlist("comic book")
        assert matches_blocklist("comic book")
        assert _validate(["comic book"]).labels == []

    def test_not_on_allowlist(self) -> None:
        assert not matches_allowlist("volcano")
        assert _validate(["volcano"]).labels == []

    def test_allowlist_matches_compact_form(self) -> None:
        assert matches_allowlist("high_chair")


class TestAgeExclusion:

    def test_scissors_excluded_for_toddlers(self) -> None:
        assert excluded_for_age("scissors", 2)
        assert _validate(["scissors"], age=2).labels == []

    def test_scissors_allowed_from_three(self) -> None:
        assert not excluded_for_age("scissors", 3)
        assert _validate(["scissors"], age=3).labels == ["scissors"]


class TestConfidenceGate:

    def test_label_without_interpretation_dropped(self) -> None:
        result = validate_detected_elements(["sofa"], [], 5)
        assert result.labels == []

    def test_low_confidence_dropped(self) -> None:
        result = validate_detected_elements(["sofa"], [_reasoned("sofa", 0.3)], 5)
        assert result.labels == []

    def test_threshold_is_configurable(self) -> None:
        cfg = ValidatorConfig(min_confidence=0.2)
        result = validate_detected_elements(["sofa"], [_reasoned("sofa", 0.3)], 5, cfg)
        assert result.labels == ["sofa"]


class TestOrderingAndCap:

    def test_compact_duplicates_collapse(self) -> None:
        result = _validate(["teddy bear", "teddy_bear"])
        assert result.labels == ["teddy bear"]

    def test_priority_order_and_cap(self) -> None:
        labels = ["wall", "door", "window", "ball", "book", "toy", "sofa"]
        result = _validate(labels)
        assert result.labels == ["ball", "book", "toy", "sofa", "wall"]

    def test_priority_ties_break_on_reasoned_confidence(self) -> None:
        labels = ["drawer", "basket", "box", "bowl", "plate", "sofa"]
        confidences = {"drawer": 0.66, "basket": 0.62, "box": 0.62, "bowl": 0.6, "plate": 0.6, "sofa": 0.7}
        reasoned = [_reasoned(l, confidences[l]) for l in labels]

        result = validate_detected_elements(labels, reasoned, 5)

        assert result.labels == ["sofa", "drawer", "basket", "box", "bowl"]

    def test_reasoned_elements_follow_labels(self) -> None:
        result = _validate(["wall", "ball"])
        assert [r.raw_label for r in result.reasoned_elements] == result.labels

    def test_display_names(self) -> None:
        result = _validate(["ball"])
        assert result.display_names() == {"ball": result.reasoned_elements[0].element_name_ar}

    def test_empty_input(self) -> None:
        result = _validate([])
        assert result.labels == []
        assert result.reasoned_elements == []
