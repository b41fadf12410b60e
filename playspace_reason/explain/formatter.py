"""ActivityFormatter — Arabic text for refined activities.

The formatter consumes RefinedActivity items and the label→name map
from the semantic reasoner; it needs nothing from the detector or the
safety layer beyond what each activity already carries.

Usage:
    formatter = ActivityFormatter()                 # deterministic
    formatter = ActivityFormatter(llm_factory)      # LLM polishing
    cards = formatter.format_all(activities, age, UserMode.PARENT, names)

The LLM is used ONLY to rephrase an already complete card.  It cannot
change the object, the focus or the safe-alternative phrasing, and any
failure falls back to the deterministic text.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Mapping, Optional

from playspace_reason.domain.activity import RefinedActivity
from playspace_reason.domain.enums import UserMode
from playspace_reason.domain.formatted import ActivityText, FormattedActivity
from playspace_reason.explain.description import display_name
from playspace_reason.explain.templates import (
    FOCUS_DISPLAY,
    OPENINGS,
    SAFE_GENERIC_STEPS,
    SAFE_HINT_STEPS,
    SAFE_WARNING,
    SPECIFIC_SKILLS,
    TEMPLATES,
)

logger = logging.getLogger(__name__)

LLMFactory = Callable[[], Any]

MIN_STEPS = 4

# Verbs that move the object; never allowed in safe-alternative steps.
FORCE_VERBS: tuple[str, ...] = ("يرفع", "ارفع", "يسحب", "اسحب", "يدفع", "ادفع")

_POLISH_PROMPT = """أنت محرر نصوص عربية لأنشطة العلاج الوظيفي للأطفال.
أعد صياغة البطاقة التالية بلغة عربية واضحة وطبيعية.

قواعد صارمة:
- استخدم المعلومات الموجودة فقط؛ لا تضف أدوات أو أشياء جديدة
- لا تغيّر عدد الخطوات ولا ترتيبها
- لا تذكر رفع الأشياء أو سحبها أو دفعها إن لم تكن مذكورة
- أعد JSON فقط بالمفاتيح نفسها

{card}"""


def child_reference(age: int, mode: UserMode) -> str:
    if mode == UserMode.THERAPIST:
        return "الطفل"
    return "طفلك" if age < 11 else "ابنك أو ابنتك"


def _age_band(age: int) -> int:
    if age < 4:
        return 0
    if age < 7:
        return 1
    return 2


def needs_safe_phrasing(activity: RefinedActivity) -> bool:
    """Whether the steps must be written around the object, not with it."""
    return activity.unsafe_fallback or activity.element.requires_safe_alternatives


class ActivityFormatter:
    """Renders refined activities into Arabic activity cards.

    format_plain is deterministic: the same activity, age and mode
    always give the same text.  format adds optional LLM polishing.
    """

    def __init__(self, llm_factory: Optional[LLMFactory] = None) -> None:
        self._llm_factory = llm_factory

    def format(
        self,
        activity: RefinedActivity,
        age: int,
        mode: UserMode,
        names: Optional[Mapping[str, str]] = None,
    ) -> FormattedActivity:
        """Format one activity, polishing it with the LLM when configured.

        Falls back to the deterministic card on any LLM failure.
        """
        card = self.format_plain(activity, age, mode, names)
        if self._llm_factory is None:
            return card
        try:
            return self._polish_with_llm(card)
        except Exception as exc:
            logger.warning("LLM formatting failed, using fallback: %s", exc)
            return card

    def format_all(
        self,
        activities: list[RefinedActivity],
        age: int,
        mode: UserMode,
        names: Optional[Mapping[str, str]] = None,
    ) -> list[FormattedActivity]:
        return [self.format(a, age, mode, names) for a in activities]

    @staticmethod
    def format_plain(
        activity: RefinedActivity,
        age: int,
        mode: UserMode,
        names: Optional[Mapping[str, str]] = None,
    ) -> FormattedActivity:
        """Deterministic card built from the text tables."""
        focus = activity.therapeutic_focus
        template = TEMPLATES[focus][mode]
        obj = display_name(activity.object_label, names)
        child = child_reference(age, mode)
        safe = needs_safe_phrasing(activity)

        def fill(text: str) -> str:
            return text.format(obj=obj, child=child)

        if safe:
            steps = [fill(SAFE_HINT_STEPS[h]) for h in _safe_hints(activity)]
            for extra in SAFE_GENERIC_STEPS:
                if len(steps) >= MIN_STEPS:
                    break
                steps.append(fill(extra))
            safety = fill(SAFE_WARNING)
        else:
            steps = [fill(s) for s in template.steps]
            safety = fill(template.safety)

        steps[0] = OPENINGS[mode][activity.humanize_offset] + steps[0]
        skills = SPECIFIC_SKILLS[focus][mode]

        return FormattedActivity(
            object_label=activity.object_label,
            object_label_display=obj,
            therapeutic_focus=focus,
            therapeutic_focus_display=FOCUS_DISPLAY[focus][mode],
            user_mode=mode,
            safe_alternative=safe,
            text=ActivityText(
                activity_name=fill(template.name),
                therapeutic_goal=template.goal,
                specific_skill=skills[activity.specific_skill_seed % len(skills)],
                implementation_steps=steps,
                age_adaptations=template.adaptations[_age_band(age)],
                success_indicators=fill(template.success),
                safety_warnings=safety,
            ),
        )

    def _polish_with_llm(self, card: FormattedActivity) -> FormattedActivity:
        """Ask the LLM to rephrase the text sections of *card*."""
        prompt = _POLISH_PROMPT.format(
            card=json.dumps(card.text.model_dump(), ensure_ascii=False, indent=2),
        )
        llm = self._llm_factory()
        response = llm.invoke(prompt)
        raw = response.content if hasattr(response, "content") else str(response)
        polished = ActivityText.model_validate(json.loads(_strip_fences(raw)))
        if len(polished.implementation_steps) != len(card.text.implementation_steps):
            raise ValueError("LLM changed the number of steps")
        if card.safe_alternative and _mentions_force(polished.implementation_steps):
            raise ValueError("LLM introduced a force verb into safe-alternative steps")
        return card.model_copy(update={"text": polished})


def _safe_hints(activity: RefinedActivity):
    safety = activity.element.safety
    return list(safety.safe_action_hints) if safety is not None else []


def _mentions_force(steps: list[str]) -> bool:
    return any(verb in step for step in steps for verb in FORCE_VERBS)


def _strip_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else ""
        text = text.rsplit("```", 1)[0]
    return text.strip()
