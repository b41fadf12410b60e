"""Display names and the short image description.

Every label shown to a user passes through ``display_name``: Arabic
text is returned as is, English labels are translated, and anything
without a translation gets a descriptive Arabic placeholder.  Raw
English never reaches the output.
"""

from __future__ import annotations

import re
from typing import Mapping, Optional, Sequence

from playspace_reason.foundation.labels import first_match

FALLBACK_DISPLAY_NAME = "عنصر من البيئة"
EMPTY_DESCRIPTION = "لم يتم التعرف على عناصر محددة في الصورة."
DESCRIPTION_TAIL = "يمكن تصميم أنشطة تعليمية مخصّصة تعتمد على هذه العناصر."
MAX_DESCRIBED = 4

_ARABIC = re.compile(r"[؀-ۿݐ-ݿ]")
_LATIN = re.compile(r"[a-zA-Z]")

# Specific keys precede the shorter keys they contain.
DISPLAY_TRANSLATIONS: dict[str, str] = {
    "dining table": "طاولة طعام",
    "coffee table": "طاولة قهوة",
    "highchair": "كرسي أطفال",
    "bookcase": "خزانة كتب",
    "wardrobe": "خزانة ملابس",
    "filing": "خزانة ملفات",
    "cabinet": "خزانة",
    "notebook": "دفتر",
    "laptop": "حاسوب محمول",
    "computer": "حاسوب",
    "keyboard": "لوحة مفاتيح",
    "television": "تلفزيون",
    "tv": "تلفزيون",
    "monitor": "شاشة",
    "screen": "شاشة",
    "cellular": "هاتف خلوي",
    "telephone": "هاتف",
    "phone": "هاتف",
    "couch": "كنبة",
    "sofa": "كنبة",
    "stool": "كرسي صغير",
    "chair": "كرسي",
    "table": "طاولة",
    "desk": "مكتب",
    "ball": "كرة",
    "bicycle": "دراجة",
    "bike": "دراجة",
    "swing": "أرجوحة",
    "puzzle": "لغز",
    "lego": "ليغو",
    "block": "مكعب",
    "cube": "مكعب",
    "book": "كتاب",
    "board": "لوحة",
    "card": "بطاقة",
    "stairs": "درج",
    "step": "درجة",
    "bench": "مقعد",
    "ottoman": "مقعد قدمين",
    "teddy": "دمية دب",
    "doll": "دمية",
    "toy": "لعبة",
    "truck": "شاحنة",
    "train": "قطار",
    "plane": "طائرة",
    "cushion": "وسادة صغيرة",
    "pillow": "وسادة",
    "blanket": "بطانية",
    "quilt": "لحاف",
    "mattress": "فراش",
    "bed": "سرير",
    "lamp": "مصباح",
    "door": "باب",
    "window": "نافذة",
    "wall": "جدار",
    "floor": "أرضية",
    "carpet": "سجادة",
    "rug": "سجادة",
    "shelf": "رف",
    "drawer": "درج",
    "remote": "جهاز تحكم",
    "box": "صندوق",
    "basket": "سلة",
    "plant": "نبات",
    "vase": "مزهرية",
    "bathtub": "حوض استحمام",
    "sink": "حوض غسيل",
    "tub": "حوض",
    "scissors": "مقص",
    "backpack": "حقيبة ظهر",
    "bowl": "وعاء",
    "plate": "صحن",
    "cup": "كوب",
    "towel": "منشفة",
    "mirror": "مرآة",
    "car": "سيارة",
}


def display_name(name: str, names: Optional[Mapping[str, str]] = None) -> str:
    """Arabic display name for a raw label or an already-resolved name.

    *names* is the label→name map from the semantic reasoner; it wins
    over the built-in dictionary.
    """
    if names and name in names:
        name = names[name]
    trimmed = name.strip()
    if not trimmed or _ARABIC.search(trimmed) or not _LATIN.search(trimmed):
        return trimmed
    lookup = trimmed.replace("_", " ")
    return first_match(lookup, DISPLAY_TRANSLATIONS) or FALLBACK_DISPLAY_NAME


def describe_image(display_names: Sequence[str]) -> str:
    """Two-sentence Arabic summary naming up to four elements."""
    shown = [n for n in display_names if n][:MAX_DESCRIBED]
    if not shown:
        return EMPTY_DESCRIPTION
    listed = shown[0] + "".join(f" و{n}" for n in shown[1:])
    return f"تظهر في الصورة {listed}. {DESCRIPTION_TAIL}"
