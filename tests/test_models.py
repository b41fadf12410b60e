"""Tests for the domain and request models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from playspace_reason.core.environment_analyzer import analyze_environment
from playspace_reason.core.safety import classify_element_for_safety
from playspace_reason.domain.activity import ActivityCandidate
from playspace_reason.domain.detection import RawDetection
from playspace_reason.domain.enums import TherapeuticFocus as F, UserMode
from playspace_reason.domain.formatted import ActivityText
from playspace_reason.models import AnalyzeRequest


class TestRawDetection:

    def test_camel_case_alias(self) -> None:
        det = RawDetection.model_validate({"className": "sofa", "probability": 0.5})
        assert det.class_name == "sofa"

    def test_probability_bounds(self) -> None:
        with pytest.raises(ValidationError):
            RawDetection(className="sofa", probability=1.5)

    def test_empty_label(self) -> None:
        with pytest.raises(ValidationError):
            RawDetection(className="", probability=0.5)

    def test_frozen(self) -> None:
        det = RawDetection(className="sofa", probability=0.5)
        with pytest.raises(ValidationError):
            det.probability = 0.9


class TestEnvironmentElement:

    def test_with_safety_returns_copy(self) -> None:
        element = analyze_environment(["sofa"])[0]
        enriched = element.with_safety(classify_element_for_safety(element))
        assert element.safety is None
        assert enriched.requires_safe_alternatives
        assert enriched.object_label == element.object_label

    def test_motor_cannot_be_empty(self) -> None:
        element = analyze_environment(["sofa"])[0]
        data = element.model_dump()
        data["motor"] = []
        with pytest.raises(ValidationError):
            type(element).model_validate(data)


class TestActivityModels:

    def test_candidate_key(self) -> None:
        element = analyze_environment(["ball"])[0]
        candidate = ActivityCandidate(object_label="ball", therapeutic_focus=F.FINE_MOTOR, element=element)
        assert candidate.key == ("ball", F.FINE_MOTOR)
        assert candidate.with_focus(F.GROSS_MOTOR).key == ("ball", F.GROSS_MOTOR)
        assert not candidate.unsafe_fallback

    def test_activity_text_needs_four_steps(self) -> None:
        with pytest.raises(ValidationError):
            ActivityText(
                activity_name="ن",
                therapeutic_goal="ه",
                specific_skill="م",
                implementation_steps=["١", "٢", "٣"],
                age_adaptations="ت",
                success_indicators="ن",
                safety_warnings="س",
            )


class TestAnalyzeRequest:

    def test_age_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            AnalyzeRequest(detections=[], age=0)

    def test_default_mode_is_parent(self) -> None:
        assert AnalyzeRequest(age=5).user_mode == UserMode.PARENT

    def test_therapist_mode(self) -> None:
        assert AnalyzeRequest(age=5, user_mode="therapist").user_mode == UserMode.THERAPIST

    @pytest.mark.parametrize("mode", ["doctor", "", None, 3, ["parent"]])
    def test_unknown_mode_falls_back(self, mode) -> None:
        assert AnalyzeRequest(age=5, user_mode=mode).user_mode == UserMode.PARENT
