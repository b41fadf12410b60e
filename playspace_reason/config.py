"""Application configuration loaded from environment variables."""

from __future__ import annotations

from typing import Optional

from pydantic import ImportString
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "playspace-reason"
    debug: bool = False
    log_level: str = "INFO"

    # Detection filter
    detection_confidence_threshold: float = 0.25
    detection_min_count: int = 3
    detection_max_count: int = 50

    # Semantic reasoning
    reasoning_min_confidence: float = 0.35

    # Element validation
    validation_min_confidence: float = 0.4
    validation_max_labels: int = 5
    young_child_age: int = 3

    # Environment + activities
    max_environment_elements: int = 5
    target_activity_count: int = 5
    shuffle_seed: Optional[int] = None

    # Dotted path to a zero-argument callable returning an ObjectDetector
    detector_factory: Optional[ImportString] = None

    # Optional LLM polishing of formatted text
    llm_polish: bool = False
    gemini_model: str = "gemini-2.0-flash"
    gemini_temperature: float = 0.3
    gemini_max_output_tokens: int = 1024

    model_config = {"env_prefix": "PLAYSPACE_"}


settings = Settings()
