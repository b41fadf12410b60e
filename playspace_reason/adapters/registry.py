"""Adapter Registry — routes raw detector payloads to the adapter that understands them.

Adapters are tried in the order they were registered; the first whose
can_handle() accepts the payload translates it.  A payload that no
adapter recognises, or that the matching adapter cannot translate,
fails the request instead of being dropped.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Iterable, Optional

from playspace_reason.adapters.base import DetectionAdapter
from playspace_reason.domain.detection import RawDetection

logger = logging.getLogger(__name__)


class NoAdapterFoundError(Exception):
    """No registered adapter recognises the payload shape."""


class AdaptationError(Exception):
    """An adapter recognised the payload but could not read it."""

    def __init__(self, adapter_name: str, reason: str) -> None:
        super().__init__(f"{adapter_name} could not read detection: {reason}")
        self.adapter_name = adapter_name
        self.reason = reason


@dataclass
class AdapterCounters:
    adapter_name: str
    accepted_count: int = 0
    rejected_count: int = 0


@dataclass
class _Slot:
    adapter: DetectionAdapter
    counters: AdapterCounters


class AdapterRegistry:
    """Ordered set of detection adapters plus per-adapter counters.

    >>> registry = AdapterRegistry()
    >>> registry.register(ClassifierAdapter())
    >>> registry.adapt_many(payloads)
    """

    def __init__(self) -> None:
        self._slots: list[_Slot] = []

    def register(self, adapter: DetectionAdapter) -> None:
        name = adapter.source_name
        self._slots.append(_Slot(adapter, AdapterCounters(name)))
        logger.info("Detection adapter '%s' registered (position %d)", name, len(self._slots))

    def _match(self, raw: Any) -> Optional[_Slot]:
        if not isinstance(raw, dict):
            return None
        return next((s for s in self._slots if s.adapter.can_handle(raw)), None)

    def adapt(self, raw: dict[str, Any]) -> RawDetection:
        """Translate one payload.

        Raises NoAdapterFoundError for unrecognised shapes and
        AdaptationError when the chosen adapter rejects the values.
        """
        slot = self._match(raw)
        if slot is None:
            shape = sorted(raw) if isinstance(raw, dict) else type(raw).__name__
            raise NoAdapterFoundError(f"Unrecognised detection payload: {shape}")

        name = slot.adapter.source_name
        try:
            detection = slot.adapter.adapt(raw)
        except (ValueError, TypeError) as exc:
            slot.counters.rejected_count += 1
            logger.warning("%s rejected a detection: %s", name, exc)
            raise AdaptationError(name, str(exc)) from exc

        slot.counters.accepted_count += 1
        logger.debug("%s read '%s' at %.2f", name, detection.class_name, detection.probability)
        return detection

    def adapt_many(self, raws: Iterable[dict[str, Any]]) -> list[RawDetection]:
        """Translate a batch; any failing payload fails the batch."""
        return [self.adapt(raw) for raw in raws]

    # ── Introspection ───────────────────────────────────────────────────

    @property
    def adapter_names(self) -> list[str]:
        return [s.adapter.source_name for s in self._slots]

    @property
    def stats(self) -> list[dict]:
        return [asdict(s.counters) for s in self._slots]

    @property
    def total_accepted(self) -> int:
        return sum(s.counters.accepted_count for s in self._slots)

    @property
    def total_rejected(self) -> int:
        return sum(s.counters.rejected_count for s in self._slots)
