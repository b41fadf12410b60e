"""Curated interpretation table for household objects.

Each entry maps a keyword to an Arabic display name, a functional
category and a short contextual note.  Keys are matched as substrings
against the compact form of a detector label; longer keys are tried
first so "bookcase" wins over "book" and "coffee table" over "table".
"""

from __future__ import annotations

from dataclasses import dataclass

from playspace_reason.foundation.labels import first_match


class Category:
    """Functional categories (Arabic display strings)."""

    SEATING = "أثاث جلوس"
    WORK_SURFACE = "سطح عمل"
    FLOOR_FURNISHING = "أرضية وفرش"
    LIGHTING = "إضاءة"
    OPENING = "فتحات ومرور"
    PLAY_MOTION = "لعب وحركة"
    DAILY_USE = "أدوات استعمال يومي"
    STORAGE = "تخزين وترتيب"
    REST = "عناصر راحة ونوم"
    HYGIENE = "عناصر النظافة"
    ELECTRONICS = "أجهزة وإلكترونيات"
    DECOR = "عناصر زينة وديكور"
    STRUCTURE = "عناصر إنشائية ثابتة"


@dataclass(frozen=True)
class Interpretation:
    key: str
    name_ar: str
    category: str
    context: str


_ENTRIES: tuple[Interpretation, ...] = (
    Interpretation("couch", "كنبة منزلية", Category.SEATING, "عنصر جلوس مستقر يوفر دعمًا وضعيًا وفرصة للتنظيم الحسي والراحة."),
    Interpretation("sofa", "أريكة", Category.SEATING, "أثاث جلوس رئيسي في الغرفة يدعم وضعية الجلوس والانتقالات واللعب الوظيفي."),
    Interpretation("chair", "كرسي", Category.SEATING, "دعم جلوس بارتفاع مناسب يسهّل المشاركة في أنشطة الطاولة والتوازن الجلوسي."),
    Interpretation("highchair", "كرسي أطفال", Category.SEATING, "جلوس آمن بارتفاع الطاولة مع دعم وضعية."),
    Interpretation("stool", "كرسي صغير أو مقعد", Category.SEATING, "جلوس منخفض أو وسيط يدعم الوصول إلى الأسطح والاستقرار."),
    Interpretation("bench", "مقعد", Category.SEATING, "عنصر جلوس مستقر للمساحة المتاحة والانتظار أو اللعب الهادئ."),
    Interpretation("ottoman", "مقعد قدمين", Category.SEATING, "عنصر منخفض للراحة أو كهدف حركي آمن."),
    Interpretation("table", "طاولة", Category.WORK_SURFACE, "سطح عمل ثابت يدعم الأنشطة الدقيقة والتنظيم البصري والوصول الآمن."),
    Interpretation("dining table", "طاولة طعام", Category.WORK_SURFACE, "سطح مشترك للوجبات والأنشطة العائلية والتنظيم."),
    Interpretation("coffee table", "طاولة قهوة", Category.WORK_SURFACE, "طاولة منخفضة مناسبة للوصول واللعب على الأرض."),
    Interpretation("desk", "مكتب", Category.WORK_SURFACE, "مساحة عمل منظمة مناسبة للتركيز والحركة الدقيقة والوظائف التنفيذية."),
    Interpretation("board", "لوحة", Category.WORK_SURFACE, "سطح ثابت للكتابة أو التنظيم البصري."),
    Interpretation("bed", "سرير", Category.REST, "عنصر راحة ونوم يمكن استغلاله بأمان لأنشطة تنظيم حسي وانتقالات مدروسة."),
    Interpretation("pillow", "وسادة", Category.REST, "عنصر لمسي ناعم يدعم التهدئة والوعي الحسي والتحكم في القوة."),
    Interpretation("blanket", "بطانية", Category.REST, "غطاء ناعم يوفر مدخلات لمسية قابلة للضبط والتنظيم الذاتي."),
    Interpretation("quilt", "لحاف", Category.REST, "فراش ناعم يعزز الإحساس بالأمان والاستكشاف اللمسي."),
    Interpretation("cushion", "وسادة صغيرة", Category.REST, "عنصر ناعم للدعم أو اللعب اللمسي الآمن."),
    Interpretation("mattress", "فراش", Category.REST, "سطح راحة يدعم الحركة الآمنة والتنظيم الحسي."),
    Interpretation("carpet", "سجادة أرضية", Category.FLOOR_FURNISHING, "سطح آمن على الأرض يدعم الحركة الكبيرة والتوازن واللعب الأرضي."),
    Interpretation("rug", "سجادة", Category.FLOOR_FURNISHING, "منطقة محددة على الأرض توفر ثباتًا ومرجعًا مكانيًا للأنشطة الحركية."),
    Interpretation("floor", "أرضية الغرفة", Category.STRUCTURE, "المساحة الأرضية المتاحة للمشي والتوازن والانتقالات."),
    Interpretation("stairs", "درج", Category.STRUCTURE, "عنصر صعود ونزول يتطلب تخطيطًا حركيًا وتوازنًا؛ يُستخدم بحذر وإشراف."),
    Interpretation("step", "درجة أو منصة", Category.STRUCTURE, "ارتفاع بسيط يمكن استخدامه للتوازن والانتقال مع مراعاة السلامة."),
    Interpretation("wall", "جدار", Category.STRUCTURE, "حدّ ثابت للغرفة يعطي مرجعًا مكانيًا وثباتًا."),
    Interpretation("door", "باب", Category.OPENING, "حدّ مكاني ومسار انتقال؛ يُراعى في تخطيط المسار والسلامة."),
    Interpretation("window", "نافذة", Category.OPENING, "فتحة إضاءة وتهوية؛ القرب منها يتطلب إشرافًا من حيث السلامة."),
    Interpretation("lamp", "مصباح", Category.LIGHTING, "مصدر إضاءة يمكن ضبطه لتهيئة البيئة البصرية."),
    Interpretation("ball", "كرة", Category.PLAY_MOTION, "أداة حركية قابلة للتدحرج تدعم التخطيط الحركي والتنسيق الثنائي."),
    Interpretation("bike", "دراجة", Category.PLAY_MOTION, "أداة حركية تُستخدم بحذر في المساحة المتاحة مع مراعاة السلامة."),
    Interpretation("bicycle", "دراجة", Category.PLAY_MOTION, "عنصر حركي يحتاج مساحة ومراقبة عند الاستخدام."),
    Interpretation("toy", "لعبة", Category.PLAY_MOTION, "أداة لعب مناسبة للأنشطة الدقيقة أو الحركية حسب نوعها."),
    Interpretation("doll", "دمية", Category.PLAY_MOTION, "عنصر لعب يدعم التخيل والحركة الدقيقة واللعب الوظيفي."),
    Interpretation("teddy", "دمية دب", Category.PLAY_MOTION, "لعبة ناعمة مناسبة للتهدئة واللمس الآمن."),
    Interpretation("block", "مكعب أو قطعة بناء", Category.PLAY_MOTION, "عنصر بناء يدعم التنسيق والتنظيم والوظائف التنفيذية."),
    Interpretation("cube", "مكعب", Category.PLAY_MOTION, "شكل ثابت يمكن استخدامه للترتيب والحركة الدقيقة."),
    Interpretation("lego", "قطع بناء", Category.PLAY_MOTION, "عناصر تركيب تدعم الحركة الدقيقة والتخطيط."),
    Interpretation("swing", "أرجوحة", Category.PLAY_MOTION, "عنصر حركي دهليزي؛ يُستخدم تحت إشراف ووفق التحمل."),
    Interpretation("puzzle", "لغز تركيب", Category.DAILY_USE, "نشاط تنفيذي وتخطيط بصري وتنسيق ثنائي."),
    Interpretation("book", "كتاب", Category.DAILY_USE, "مادة للقراءة والتنظيم البصري والأنشطة الدقيقة والتنفيذية."),
    Interpretation("notebook", "دفتر", Category.DAILY_USE, "سطح للكتابة والتنظيم والتسلسل."),
    Interpretation("card", "بطاقات", Category.DAILY_USE, "مواد للترتيب واللعب التنفيذي والذاكرة العاملة."),
    Interpretation("towel", "منشفة", Category.DAILY_USE, "قوام لمسي يمكن استخدامه للتهدئة أو التنظيف الوظيفي."),
    Interpretation("bowl", "وعاء", Category.DAILY_USE, "حاوية مناسبة للترتيب والنقل والحركة الدقيقة."),
    Interpretation("plate", "صحن", Category.DAILY_USE, "سطح حمل ثابت للأنشطة المنزلية أو اللعب التمثيلي."),
    Interpretation("cup", "كوب", Category.DAILY_USE, "أداة حمل تدعم القبضة والتناسق."),
    Interpretation("scissors", "مقص", Category.DAILY_USE, "أداة دقيقة؛ تُستخدم تحت إشراف في أنشطة القص."),
    Interpretation("bookcase", "خزانة كتب", Category.STORAGE, "تخزين منظم يدعم الترتيب والوصول والتنظيم البصري."),
    Interpretation("shelf", "رف", Category.STORAGE, "سطح تخزين يسهّل الترتيب والوصول والتنظيم."),
    Interpretation("wardrobe", "خزانة ملابس", Category.STORAGE, "تخزين مغلق يوفر مرجعًا مكانيًا وفرص ترتيب."),
    Interpretation("cabinet", "خزانة", Category.STORAGE, "وحدة تخزين ثابتة تدعم التنظيم والوصول الآمن."),
    Interpretation("drawer", "درج تخزين", Category.STORAGE, "مساحة مغلقة للترتيب والوصول المتسلسل."),
    Interpretation("box", "صندوق", Category.STORAGE, "حاوية للترتيب والنقل والأنشطة التنفيذية."),
    Interpretation("basket", "سلة", Category.STORAGE, "وعاء مفتوح للنقل والترتيب والتنسيق الثنائي."),
    Interpretation("backpack", "حقيبة ظهر", Category.STORAGE, "حاوية نقل تدعم الترتيب والتحميل الثنائي."),
    Interpretation("television", "تلفزيون", Category.ELECTRONICS, "جهاز عرض ثابت في الغرفة يُراعى في تهيئة البيئة."),
    Interpretation("tv", "تلفزيون", Category.ELECTRONICS, "شاشة ثابتة؛ يمكن ضبط البعد والوقت لتنظيم البصري."),
    Interpretation("monitor", "شاشة", Category.ELECTRONICS, "سطح عرض ثابت يدعم الأنشطة الموجهة عند الحاجة."),
    Interpretation("laptop", "حاسوب محمول", Category.ELECTRONICS, "جهاز عمل أو تعلم يمكن إبعاده عند التركيز على أنشطة حركية."),
    Interpretation("computer", "حاسوب", Category.ELECTRONICS, "جهاز ثابت في الغرفة؛ يُنظّم استخدامه حسب أهداف الجلسة."),
    Interpretation("phone", "هاتف", Category.ELECTRONICS, "جهاز اتصال؛ يمكن استبعاده لتقليل التشويش أثناء الأنشطة."),
    Interpretation("remote", "جهاز تحكم", Category.ELECTRONICS, "أداة صغيرة تدعم القبضة والضغط المتدرج."),
    Interpretation("keyboard", "لوحة مفاتيح", Category.ELECTRONICS, "سطح مفاتيح للضغط المنظم والحركة الدقيقة عند الحاجة."),
    Interpretation("refrigerator", "ثلاجة", Category.ELECTRONICS, "جهاز ثابت في المطبخ؛ مرجع مكاني دون استخدام في الأنشطة العلاجية."),
    Interpretation("oven", "فرن", Category.ELECTRONICS, "جهاز حراري ثابت؛ يُذكر من حيث السلامة فقط."),
    Interpretation("microwave", "ميكروويف", Category.ELECTRONICS, "جهاز مطبخ ثابت؛ لا يُستخدم في أنشطة الطفل المباشرة."),
    Interpretation("bathtub", "حوض استحمام", Category.HYGIENE, "مساحة مائية؛ تُستخدم تحت إشراف لتهدئة حسية عند الحاجة."),
    Interpretation("tub", "حوض", Category.HYGIENE, "وعاء كبير؛ الاستخدام يكون بإشراف وفق السياق."),
    Interpretation("sink", "حوض غسيل", Category.HYGIENE, "سطح غسل ثابت؛ يدعم الأنشطة اليومية والتسلسل."),
    Interpretation("toilet", "مرحاض", Category.HYGIENE, "عنصر حمام ثابت؛ يُراعى في التوجيه اليومي دون تفصيل علاجي."),
    Interpretation("plant", "نبات", Category.DECOR, "عنصر بصري طبيعي يخفف من جفاف البيئة."),
    Interpretation("vase", "مزهرية", Category.DECOR, "عنصر زينة ثابت؛ يُراعى عدم كسره في الأنشطة الحركية."),
    Interpretation("mirror", "مرآة", Category.DECOR, "انعكاس بصري يساعد في الوعي الجسدي عند استخدام آمن."),
)

# Longest key first so specific entries shadow their substrings.
INTERPRETATIONS: dict[str, Interpretation] = {
    e.key: e
    for e in sorted(_ENTRIES, key=lambda e: len(e.key.replace(" ", "")), reverse=True)
}


def lookup_interpretation(label: str) -> Interpretation | None:
    """Curated entry for a detector label, or None."""
    return first_match(label, INTERPRETATIONS)
