"""Tests for the analyze endpoints and the health route."""

from __future__ import annotations

import random
from typing import Optional
from unittest.mock import MagicMock

from fastapi import FastAPI
from fastapi.testclient import TestClient

from playspace_reason.adapters.classifier import ClassifierAdapter
from playspace_reason.adapters.detector import DetectorHandle, ObjectDetector, StaticDetector
from playspace_reason.adapters.label_score import LabelScoreAdapter
from playspace_reason.adapters.object_detection import ObjectDetectionAdapter
from playspace_reason.adapters.registry import AdapterRegistry
from playspace_reason.api.analyze import ANALYSIS_FAILED, create_analyze_router
from playspace_reason.config import Settings
from playspace_reason.domain.detection import RawDetection
from playspace_reason.explain.description import EMPTY_DESCRIPTION
from playspace_reason.explain.formatter import ActivityFormatter
from playspace_reason.explain.scene import LIVING_ROOM


# ── Helpers ──────────────────────────────────────────────────────────────────

def _client(
    detector: Optional[DetectorHandle] = None,
    formatter: Optional[ActivityFormatter] = None,
) -> TestClient:
    registry = AdapterRegistry()
    registry.register(ClassifierAdapter())
    registry.register(ObjectDetectionAdapter())
    registry.register(LabelScoreAdapter())

    app = FastAPI()
    app.include_router(create_analyze_router(
        registry,
        detector=detector,
        formatter=formatter,
        config=Settings(),
        rng_factory=lambda: random.Random(0),
    ))
    return TestClient(app)


def _static_handle(*labels: str) -> DetectorHandle:
    detections = [RawDetection(className=l, probability=0.9) for l in labels]
    return DetectorHandle(lambda: StaticDetector(detections))


class _BrokenDetector(ObjectDetector):

    def classify(self, image: bytes) -> list[RawDetection]:
        raise RuntimeError("inference crashed")


# ── POST /api/analyze ────────────────────────────────────────────────────────

class TestAnalyze:

    def test_sofa(self) -> None:
        resp = _client().post("/api/analyze", json={
            "detections": [{"className": "sofa", "probability": 0.9}],
            "age": 5,
        })
        assert resp.status_code == 200
        body = resp.json()
        assert body["labels"] == ["sofa"]
        assert body["labels_display"] == ["أريكة"]
        assert body["scene_summary"] == LIVING_ROOM
        assert body["user_mode"] == "parent"
        assert body["image_description"].startswith("تظهر في الصورة أريكة")
        assert len(body["activities_text"]) == len(body["activities"]) > 0
        assert all(card["safe_alternative"] for card in body["activities_text"])

    def test_mixed_detector_formats(self) -> None:
        resp = _client().post("/api/analyze", json={
            "detections": [
                {"className": "ball", "probability": 0.9},
                {"class": "book", "score": 0.8, "bbox": [0, 0, 10, 10]},
                {"label": "chair", "confidence": 0.7},
            ],
            "age": 6,
            "user_mode": "therapist",
        })
        assert resp.status_code == 200
        body = resp.json()
        assert set(body["labels"]) == {"ball", "book", "chair"}
        assert body["user_mode"] == "therapist"

    def test_unknown_mode_falls_back_to_parent(self) -> None:
        resp = _client().post("/api/analyze", json={"detections": [], "age": 5, "user_mode": "nurse"})
        assert resp.status_code == 200
        assert resp.json()["user_mode"] == "parent"

    def test_empty_detections(self) -> None:
        resp = _client().post("/api/analyze", json={"detections": [], "age": 5})
        assert resp.status_code == 200
        body = resp.json()
        assert body["labels"] == []
        assert body["activities"] == []
        assert body["scene_summary"] is None
        assert body["image_description"] == EMPTY_DESCRIPTION

    def test_invalid_age(self) -> None:
        resp = _client().post("/api/analyze", json={"detections": [], "age": 0})
        assert resp.status_code == 422

    def test_missing_age(self) -> None:
        resp = _client().post("/api/analyze", json={"detections": []})
        assert resp.status_code == 422

    def test_unknown_payload_shape(self) -> None:
        resp = _client().post("/api/analyze", json={"detections": [{"name": "sofa"}], "age": 5})
        assert resp.status_code == 422

    def test_bad_score(self) -> None:
        resp = _client().post("/api/analyze", json={
            "detections": [{"className": "sofa", "probability": "high"}],
            "age": 5,
        })
        assert resp.status_code == 422

    def test_internal_failure_is_opaque(self) -> None:
        formatter = MagicMock(spec=ActivityFormatter)
        formatter.format_all.side_effect = RuntimeError("template missing")

        resp = _client(formatter=formatter).post("/api/analyze", json={
            "detections": [{"className": "sofa", "probability": 0.9}],
            "age": 5,
        })

        assert resp.status_code == 500
        assert resp.json()["detail"] == ANALYSIS_FAILED


# ── POST /api/analyze/image ──────────────────────────────────────────────────

class TestAnalyzeImage:

    def test_image_is_classified(self) -> None:
        client = _client(detector=_static_handle("sofa", "person"))
        resp = client.post("/api/analyze/image?age=5", content=b"\x89PNG fake")
        assert resp.status_code == 200
        assert resp.json()["labels"] == ["sofa"]

    def test_mode_query(self) -> None:
        client = _client(detector=_static_handle("ball"))
        resp = client.post("/api/analyze/image?age=5&user_mode=therapist", content=b"img")
        assert resp.json()["user_mode"] == "therapist"

    def test_empty_body(self) -> None:
        client = _client(detector=_static_handle("sofa"))
        resp = client.post("/api/analyze/image?age=5", content=b"")
        assert resp.status_code == 422

    def test_invalid_age(self) -> None:
        client = _client(detector=_static_handle("sofa"))
        resp = client.post("/api/analyze/image?age=0", content=b"img")
        assert resp.status_code == 422

    def test_no_detector(self) -> None:
        resp = _client().post("/api/analyze/image?age=5", content=b"img")
        assert resp.status_code == 503

    def test_detector_failure_is_opaque(self) -> None:
        client = _client(detector=DetectorHandle(_BrokenDetector))
        resp = client.post("/api/analyze/image?age=5", content=b"img")
        assert resp.status_code == 500
        assert resp.json()["detail"] == ANALYSIS_FAILED


# ── Health ───────────────────────────────────────────────────────────────────

class TestHealth:

    def test_health(self) -> None:
        from playspace_reason.main import app

        resp = TestClient(app).get("/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "ok"
        assert [a["adapter_name"] for a in body["adapters"]] == [
            "image_classifier", "object_detector", "label_score",
        ]

    def test_health_without_detector(self) -> None:
        from playspace_reason.main import app

        assert TestClient(app).get("/health").json()["detector_loaded"] is False


# ── Shipped app wiring ───────────────────────────────────────────────────────

class TestAppWiring:

    def test_image_route_unavailable_without_factory(self) -> None:
        from playspace_reason.main import app

        resp = TestClient(app).post("/api/analyze/image?age=5", content=b"\x89PNG fake")
        assert resp.status_code == 503

    def test_detector_factory_from_dotted_path(self) -> None:
        cfg = Settings(detector_factory="playspace_reason.adapters.detector.StaticDetector")
        assert cfg.detector_factory is StaticDetector
        assert DetectorHandle(cfg.detector_factory).classify(b"img") == []

    def test_no_detector_factory_by_default(self) -> None:
        assert Settings().detector_factory is None

    def test_debug_setting_reaches_app(self) -> None:
        from playspace_reason.main import app, settings

        assert app.debug is settings.debug
