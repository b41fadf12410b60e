"""Arabic text tables for the activity formatter.

Placeholders: ``{obj}`` is the element's display name and ``{child}``
the audience-appropriate way to refer to the child.
"""

from __future__ import annotations

from dataclasses import dataclass

from playspace_reason.domain.enums import SafeActionHint, TherapeuticFocus, UserMode

F = TherapeuticFocus
P = UserMode.PARENT
T = UserMode.THERAPIST


@dataclass(frozen=True)
class FocusTemplate:
    name: str
    goal: str
    steps: tuple[str, ...]
    # under 4, under 7, 7 and older
    adaptations: tuple[str, str, str]
    success: str
    safety: str


FOCUS_DISPLAY: dict[TherapeuticFocus, dict[UserMode, str]] = {
    F.SENSORY_REGULATION: {P: "تهدئة الحواس والتنظيم الحسي", T: "التنظيم الحسي والتكامل الحسي"},
    F.MOTOR_PLANNING: {P: "التفكير قبل الحركة (تخطيط حركي)", T: "التخطيط الحركي والتسلسل الحركي"},
    F.EXECUTIVE_FUNCTION: {P: "التخطيط والترتيب والتنفيذ", T: "المهارات التنفيذية والوظائف المعرفية"},
    F.FINE_MOTOR: {P: "الحركة الدقيقة (يد وأصابع)", T: "الحركة الدقيقة والتنسيق اليدوي"},
    F.GROSS_MOTOR: {P: "حركة الجسم والتوازن", T: "الحركة الكلية والتكامل الحسي الحركي"},
    F.BILATERAL_COORDINATION: {P: "استخدام اليدين معاً", T: "التنسيق الثنائي وتكامل نصفي الجسم"},
}

SPECIFIC_SKILLS: dict[TherapeuticFocus, dict[UserMode, tuple[str, ...]]] = {
    F.SENSORY_REGULATION: {
        P: (
            "تنظيم الاستجابة الحسية والهدوء في المواقف اليومية",
            "معالجة متعددة الأنظمة مع تحكم في مستوى الإثارة",
            "استجابة هادئة للمؤثرات مع انتباه مستمر",
        ),
        T: (
            "معالجة متعددة الأنظمة، التنظيم الذاتي لمستوى الإثارة، تحمل تدريجي للمدخلات",
            "تكامل حسي وتعديل مستوى اليقظة مع تثبيت انتباه",
            "تنظيم الإثارة ومراقبة الاستجابة مع ضبط المدة",
        ),
    },
    F.MOTOR_PLANNING: {
        P: (
            "التسلسل الحركي: تخطيط ثم تنفيذ خطوة بخطوة دون تخطي",
            "الذاكرة الحركية والمرونة في تعديل الخطة عند الطلب",
            "تمثيل المسار ثم التنفيذ المتسلسل مع توقف للتحقق",
        ),
        T: (
            "التخطيط الحركي والتسلسل الحركي والذاكرة الحركية والمرونة في تعديل الخطة",
            "تمثيل حركي للمسار ثم تنفيذ مراقَب مع تحقق بعد كل خطوة",
            "برمجة حركية وتسلسل مع مرونة في تغيير الخطة",
        ),
    },
    F.EXECUTIVE_FUNCTION: {
        P: (
            "التخطيط والترتيب والتنفيذ دون تخطي مع كبح الاندفاع",
            "الذاكرة العاملة: استدعاء الترتيب بعد التنفيذ",
            "ترتيب عناصر ثم تنفيذ مراقَب والتحقق من كل خطوة",
        ),
        T: (
            "التخطيط والتنظيم والذاكرة العاملة وكبح الاندفاع والمرونة المعرفية",
            "تنفيذ مراقَب للتسلسل مع استدعاء من الذاكرة بعد الانتهاء",
            "صياغة الخطة ثم التنفيذ المتسلسل مع تحقق ومراقبة ذاتية",
        ),
    },
    F.FINE_MOTOR: {
        P: (
            "القبضة الوظيفية وتثبيت الجسم مع تحكم في القوة",
            "التنسيق البصري الحركي ووضع الهدف بدقة",
            "الحركة الدقيقة والتتبع بأصابع منفصلة مع ثبات",
        ),
        T: (
            "القبضة الوظيفية والتحكم الرأسي والدوراني والتنسيق البصري الحركي",
            "تثبيت بقبضة ثلاثية وتنفيذ بدقة مع تعديل القوة المتدرجة",
            "حركة دقيقة منفصلة الأصابع مع تتبع ووضع في الهدف",
        ),
    },
    F.GROSS_MOTOR: {
        P: (
            "التوازن الديناميكي والثبات الوضعي أثناء المشي والوقوف",
            "الوعي المكاني والجسمي مع خطوات مستقرة ورفع رجل",
            "الحركة الكلية والتكامل الحسي الحركي في المساحة المتاحة",
        ),
        T: (
            "التوازن الديناميكي والثابت والوعي الوضعي والحركة الكلية",
            "مشي متحكم ورفع رجل مع ثبات ووعي بالجسم والمكان",
            "تكامل حسي حركي ووضعية مناسبة مع تحكم في المسافة والخطوات",
        ),
    },
    F.BILATERAL_COORDINATION: {
        P: (
            "ثبات اليد غير المهيمنة وتنفيذ باليد المهيمنة مع التبديل",
            "التنسيق الثنائي أثناء تثبيت الجسم ونقل بيدين معاً",
            "تكامل نصفي الجسم: تثبيت ثم تنفيذ ثم نقل مشترك",
        ),
        T: (
            "ثبات يد وتنفيذ باليد الأخرى والتبديل والتنسيق المركّب",
            "تثبيت ثنائي مع تنفيذ دقيق وانتقال إلى نقل بيدين",
            "تكامل نصفي الجسم مع تخطيط حركي ثنائي وتعديل القوة",
        ),
    },
}

OPENINGS: dict[UserMode, tuple[str, str, str]] = {
    P: ("ابدأ بهدوء: ", "جرّبا هذا معاً: ", "خطوة أولى بسيطة: "),
    T: ("تهيئة: ", "بداية الجلسة: ", "إعداد المهمة: "),
}

TEMPLATES: dict[TherapeuticFocus, dict[UserMode, FocusTemplate]] = {
    F.SENSORY_REGULATION: {
        P: FocusTemplate(
            name="تهدئة الحواس مع {obj}",
            goal="مساعدة الطفل على تنظيم استجابته للمؤثرات الحسية والشعور بالهدوء",
            steps=(
                "اجعل {obj} أمام {child} على سطح مستوٍ وثابت",
                "يلمس {child} {obj} بيديه عشر ثوانٍ وينتبه للقوام والشعور به",
                "ينظر إلى {obj} ويسمّي لونين على الأقل يراهما",
                "يتنفس بعمق (أربع ثوانٍ شهيق، أربع زفير) وهو ينظر إلى {obj}",
                "أعد الخطوات ثلاث مرات مع راحة خمس عشرة ثانية بين كل مرة",
            ),
            adaptations=(
                "اختصر المدة إلى خمس ثوانٍ؛ استخدم كلمتين فقط: \"لمس\" و\"نظر\"",
                "عدّ تنازلياً (٣، ٢، ١) قبل الانتقال من خطوة إلى أخرى",
                "دعه يصف القوام والألوان بتفصيل أكثر؛ زد المدة إلى خمس عشرة ثانية",
            ),
            success="يلمس {obj} بهدوء؛ يسمّي لونين؛ تنفسه عميق وواضح؛ يظل هادئاً حتى نهاية النشاط",
            safety="تأكد أن {obj} لا أجزاء صغيرة فيه ولا حادة؛ إن كان صغير السن فلا يضعه في فمه",
        ),
        T: FocusTemplate(
            name="تدخل تنظيم حسي وتكامل حسي باستخدام {obj}",
            goal="تحسين معالجة المعلومات الحسية متعددة الأنظمة والتنظيم الذاتي لمستوى الإثارة",
            steps=(
                "تهيئة البيئة: {obj} على سطح ثابت؛ تقليل المنافسات الحسية؛ إضاءة مناسبة",
                "استكشاف لمسي: يلمس {child} {obj} عشر ثوانٍ؛ معالجة القوام والحرارة",
                "استكشاف بصري: يسمّي ثلاث خصائص بصرية لـ{obj} على الأقل",
                "تنفس منظم (أربع ثوانٍ شهيق، أربع حبس، أربع زفير) مع التثبيت البصري على {obj}",
                "إعادة الدورة ثلاث مرات مع مراقبة مستوى الإثارة وتعديل المدة",
            ),
            adaptations=(
                "خمس ثوانٍ لكل نظام؛ نظامان حسيان فقط (لمس، بصر)؛ توجيهات بسيطة",
                "ثماني ثوانٍ لكل نظام؛ ثلاثة أنظمة؛ عد تنازلي بصري عند الانتقال",
                "اثنتا عشرة إلى خمس عشرة ثانية لكل نظام؛ وصف تفصيلي للخصائص",
            ),
            success="مشاركة فعّالة في الاستكشاف؛ تسمية ثلاث خصائص بدقة؛ تنفس منظم؛ مستوى إثارة مستقر",
            safety="ضمان أن {obj} خالٍ من أجزاء قابلة للبلع أو حواف حادة؛ إيقاف النشاط عند فرط الإثارة",
        ),
    },
    F.MOTOR_PLANNING: {
        P: FocusTemplate(
            name="التفكير ثم التنفيذ مع {obj}",
            goal="تعويد الطفل على التفكير في الخطوات قبل الحركة وتنفيذها بالترتيب",
            steps=(
                "ضع {obj} عند نقطة البداية وعلّم على نقطة الوصول على بُعد مترين",
                "يقف {child} بجانب {obj} وينظر إلى نقطة الوصول خمس ثوانٍ",
                "يقول بصوت مسموع خطته: \"أحمل {obj}، أمشي خطوتين، ثم أضعه هناك\"",
                "ينفذ ما قاله خطوة بخطوة ويتوقف بعد كل خطوة",
                "كرر النشاط ثلاث مرات؛ في المرة الثالثة غيّر الخطة",
            ),
            adaptations=(
                "متر واحد وخطوة واحدة فقط؛ دلّه بيدك أو بإشارة واضحة",
                "خطوتان فقط؛ ذكّره بالخطة وهو ينفذ",
                "مسار أصعب (يدور حول شيء)؛ زد المسافة إلى ثلاثة أمتار",
            ),
            success="يذكر الخطة قبل أن يتحرك؛ ينفذ بالترتيب؛ يتوقف بعد كل خطوة؛ يغيّر الخطة عندما تطلب منه",
            safety="المسار خالٍ من العوائق؛ راقبه أثناء المشي حتى لا يعثر",
        ),
        T: FocusTemplate(
            name="تدخل تخطيط حركي وتسلسل حركي باستخدام {obj}",
            goal="تحسين التخطيط الحركي والتسلسل الحركي والذاكرة الحركية والمرونة في تعديل الخطة",
            steps=(
                "تهيئة البيئة: {obj} عند نقطة البداية؛ نقطة وصول على بُعد مترين؛ مسار خالٍ",
                "تمثيل المسار: يفحص {child} المسار بصرياً عشر ثوانٍ ويصفه بصوت مسموع",
                "صياغة الخطة: ثلاث خطوات متسلسلة تنتهي بوضع {obj} عند نقطة الوصول",
                "تنفيذ مراقَب مع توقف وتحقق بعد كل خطوة",
                "مرونة حركية: تعديل الخطة وتنفيذها؛ تكرار ثلاث مرات بتعديلات مختلفة",
            ),
            adaptations=(
                "متر واحد؛ خطوة حركية واحدة؛ توجيهات بصرية ولفظية؛ دعم يدوي عند الحاجة",
                "خطوتان حركيتان؛ تلميحات لفظية أثناء التنفيذ",
                "مسار متعرج حول عائق؛ ثلاثة أمتار؛ تقليل التلميحات",
            ),
            success="فحص المسار قبل التخطيط؛ خطة متسلسلة؛ تنفيذ مطابق؛ تعديل ناجح للخطة",
            safety="مساحة خالية من العوائق؛ سطح غير زلق؛ مراقبة وثيقة لمنع السقوط",
        ),
    },
    F.EXECUTIVE_FUNCTION: {
        P: FocusTemplate(
            name="ترتيب وخطة مع {obj}",
            goal="تعزيز قدرة الطفل على وضع خطة وترتيب وتنفيذها دون تخطي خطوات",
            steps=(
                "ضع {obj} وثلاثة أشياء أخرى على الطاولة دون ترتيب معين",
                "ينظر {child} إلى كل الأشياء عشر ثوانٍ دون أن يلمسها",
                "يحدد الترتيب بصوت مسموع: \"أولاً {obj}، ثم ...\"",
                "ينفذ الترتيب كما قال ويتحقق بعد كل شيء أنه في مكانه",
                "بعد الانتهاء يروي بالترتيب ماذا فعل من ذاكرته",
            ),
            adaptations=(
                "عنصران فقط؛ استخدم صوراً توضح الترتيب",
                "ثلاثة عناصر؛ ساعده بلفظ الترتيب وهو يخطط",
                "أربعة أو خمسة عناصر؛ أضف قاعدة (من الأصغر للأكبر)",
            ),
            success="يحدد الترتيب قبل أن يبدأ؛ ينفذ بنفس الترتيب؛ يتحقق بعد كل خطوة؛ يروي ما فعله",
            safety="كل العناصر آمنة ولا قطع صغيرة؛ راقبه حتى لا يسقط شيئاً",
        ),
        T: FocusTemplate(
            name="تدخل مهارات تنفيذية ووظائف معرفية باستخدام {obj}",
            goal="تحسين التخطيط والتنظيم والمرونة المعرفية والذاكرة العاملة وكبح الاندفاع",
            steps=(
                "تهيئة المهمة: {obj} مع ثلاثة عناصر أخرى بترتيب عشوائي على سطح عمل منظم",
                "مرحلة التمثيل: يفحص {child} العناصر خمس عشرة ثانية دون لمس",
                "صياغة الخطة: يحدد ترتيب العناصر بصوت مسموع بدءاً بـ{obj}",
                "تنفيذ مراقَب مع تحقق بعد كل عنصر ومراقبة كبح الاندفاع",
                "استدعاء من الذاكرة العاملة ومقارنة الوصف بالخطة",
            ),
            adaptations=(
                "عنصران؛ صور بصرية للترتيب؛ تلميحات لفظية أثناء التخطيط",
                "ثلاثة عناصر؛ تلميحات بصرية؛ إشارة إلى العناصر أثناء التخطيط",
                "أربعة أو خمسة عناصر؛ كتابة الخطة قبل التنفيذ؛ قواعد إضافية",
            ),
            success="خطة متسلسلة قبل البدء؛ كبح الاندفاع؛ تنفيذ مطابق؛ استدعاء دقيق",
            safety="جميع العناصر آمنة وبدون أجزاء قابلة للبلع؛ سطح ثابت وآمن",
        ),
    },
    F.FINE_MOTOR: {
        P: FocusTemplate(
            name="اليد والأصابع مع {obj}",
            goal="تقوية تحكم الطفل بأصابعه ويديه وحركاته الدقيقة",
            steps=(
                "ضع {obj} على سطح ثابت بارتفاع مريح لـ{child}",
                "يمسك {obj} بالإبهام والسبابة والوسطى",
                "يحرّكه ببطء إلى مستوى كتفه ويثبته خمس ثوانٍ",
                "يديره نصف دورة ببطء ثم يعيده كما كان",
                "يضعه داخل دائرة مرسومة على بُعد نحو ثلاثين سنتمتراً",
            ),
            adaptations=(
                "يستخدم كل الأصابع؛ ثلاث ثوانٍ فقط؛ دائرة أكبر (نحو ١٠ سم)",
                "قبضة بثلاث أصابع؛ دائرة متوسطة (نحو ٧ سم)",
                "قبضة أدق؛ دائرة أصغر (٥ سم)؛ مسافة أربعين سنتمتراً",
            ),
            success="يمسك بالقبضة المناسبة؛ يثبت {obj} خمس ثوانٍ؛ يديره بسلاسة؛ يضعه داخل الدائرة",
            safety="تأكد أن {obj} خفيف وغير حاد؛ أن يجلس وظهره مستقيم",
        ),
        T: FocusTemplate(
            name="تدخل حركة دقيقة وتنسيق يدوي باستخدام {obj}",
            goal="تحسين القبضة الوظيفية والتنسيق البصري الحركي والتحكم الحركي الدقيق",
            steps=(
                "تهيئة الوضعية: {obj} على سطح بمستوى الكوع؛ جلوس صحيح",
                "تطوير القبضة: قبضة ثلاثية على {obj} لخمس ثوانٍ مع مراقبة الجودة",
                "تحكم رأسي ثم دوراني بـ{obj} بحركات أصابع منفصلة",
                "تنسيق بصري حركي: وضع {obj} داخل هدف قطره ٥–٧ سم على بُعد ٣٠ سم",
                "تكرار ثلاث مرات مع تسجيل الدقة",
            ),
            adaptations=(
                "قبضة كاملة؛ ثلاث ثوانٍ؛ هدف ١٠ سم؛ مسافة ٢٠ سم",
                "قبضة ثلاثية؛ أربع ثوانٍ؛ هدف ٧ سم؛ مسافة ٢٥ سم",
                "قبضة دقيقة؛ ست ثوانٍ؛ هدف ٥ سم؛ مسافة ٣٥–٤٠ سم",
            ),
            success="قبضة وظيفية؛ ثبات بلا اهتزاز؛ دوران سلس؛ وضع في الهدف (٣/٣)",
            safety="وزن {obj} مناسب؛ خالٍ من الحواف الحادة؛ إيقاف عند ظهور التعب",
        ),
    },
    F.GROSS_MOTOR: {
        P: FocusTemplate(
            name="حركة الجسم والتوازن مع {obj}",
            goal="تقوية حركة الجسم الكبيرة وتحقيق التوازن أثناء المشي والوقوف",
            steps=(
                "اختر مكاناً فارغاً حول {obj} (نحو مترين في الاتجاهين)",
                "يقف {child} على بُعد خطوتين من {obj} وقدماه بعرض الكتفين",
                "يمشي ببطء نحو {obj} أربع خطوات وظهره مستقيم",
                "عند الوصول يرفع رجلاً واحدة ويبقى متوازناً خمس ثوانٍ",
                "يمشي للخلف أربع خطوات إلى حيث بدأ ونظره إلى {obj}",
            ),
            adaptations=(
                "خطوتان فقط؛ رفع الرجل ثلاث ثوانٍ؛ يمكنك مسك يده",
                "ثلاث خطوات؛ رفع الرجل أربع ثوانٍ؛ راقب توازنه",
                "ست خطوات؛ رفع الرجل سبع ثوانٍ؛ أضف خطوة جانبية",
            ),
            success="يمشي بخطوات مستقرة؛ يحافظ على التوازن؛ يرجع للخلف دون أن يفقد توازنه",
            safety="المكان خالٍ من العوائق؛ الأرض غير زلقة؛ راقبه من قرب",
        ),
        T: FocusTemplate(
            name="تدخل حركة كلية وتكامل حسي حركي باستخدام {obj}",
            goal="تحسين الحركة الكلية والتوازن الديناميكي والوعي المكاني والجسدي",
            steps=(
                "تهيئة البيئة: مساحة خالية حول {obj} بقطر ثلاثة أمتار؛ سطح غير زلق",
                "الوضع الابتدائي: {child} على بُعد خطوتين من {obj}؛ قدمان بعرض الكتفين",
                "مشي أمامي متحكم نحو {obj} (أربع خطوات) مع مراقبة الوضعية",
                "توازن ديناميكي: رفع الرجل غير المهيمنة خمس ثوانٍ بجانب {obj}",
                "مشي خلفي إلى نقطة البداية مع التثبيت البصري على {obj}",
            ),
            adaptations=(
                "خطوتان؛ رفع الرجل ثلاث ثوانٍ؛ دعم يدوي عند الحاجة",
                "ثلاث خطوات؛ رفع الرجل أربع ثوانٍ؛ دعم خفيف إن لزم",
                "ست خطوات؛ رفع الرجل سبع ثوانٍ؛ حركة جانبية؛ تقليل الدعم",
            ),
            success="خطوات متوازنة متساوية؛ وضعية مناسبة؛ توازن خمس ثوانٍ بلا اهتزاز كبير",
            safety="مساحة خالية بقطر ثلاثة أمتار؛ سطح مستقر؛ مراقبة وثيقة لمنع السقوط",
        ),
    },
    F.BILATERAL_COORDINATION: {
        P: FocusTemplate(
            name="اليدان معاً مع {obj}",
            goal="تعويد الطفل على استخدام يديه معاً بتنسيق (ثبات إحداهما وعمل الأخرى)",
            steps=(
                "ضع {obj} على سطح ثابت أمام {child}",
                "يده الأضعف تثبت {obj} ثلاث ثوانٍ",
                "يده الأقوى تنقر على {obj} خمس مرات",
                "يعكس الأدوار: يثبت باليد الأقوى وينقر بالأضعف خمس مرات",
                "يحمل {obj} بيديه معاً وينقله عشرين سنتمتراً",
            ),
            adaptations=(
                "حركة واحدة (نقر فقط)؛ ثلاث مرات؛ مسافة عشر سنتمترات",
                "حركتان مختلفتان؛ أربع مرات؛ خمس عشرة سنتمتراً",
                "حركات أكثر (دوران ونقر)؛ ست مرات؛ ثلاثون سنتمتراً",
            ),
            success="يثبت {obj} بيد واحدة؛ ينفذ باليد الأخرى بدقة؛ يبدل اليدين بنجاح",
            safety="تأكد أن {obj} خفيف؛ أن يجلس وظهره مستقيم؛ السطح ثابت",
        ),
        T: FocusTemplate(
            name="تدخل تنسيق ثنائي وتكامل بين نصفي الجسم باستخدام {obj}",
            goal="تحسين التنسيق الثنائي وتكامل نصفي الجسم والتخطيط الحركي الثنائي",
            steps=(
                "تهيئة الوضعية: {obj} على سطح ثابت أمام {child}؛ جلوس صحيح",
                "تثبيت باليد غير المهيمنة على {obj} خمس ثوانٍ",
                "تنفيذ باليد المهيمنة (نقر خمس مرات) مع الحفاظ على التثبيت",
                "تبديل الأدوار وتنفيذ الحركة نفسها باليد غير المهيمنة",
                "تنسيق مركّب: نقل {obj} بيدين معاً ثلاثين سنتمتراً",
            ),
            adaptations=(
                "حركة واحدة؛ ثلاث مرات؛ تثبيت ثلاث ثوانٍ؛ دعم يدوي",
                "حركتان؛ أربع تكرارات؛ تثبيت أربع ثوانٍ",
                "حركات مركّبة؛ ست تكرارات؛ تثبيت ست ثوانٍ",
            ),
            success="تثبيت بلا اهتزاز؛ تنفيذ دقيق؛ تبديل أدوار ناجح؛ نقل متناسق",
            safety="وزن {obj} مناسب؛ سطح ثابت؛ إيقاف عند ظهور التعب",
        ),
    },
}

# Steps that keep the object in place, one per safe-action hint.
SAFE_HINT_STEPS: dict[SafeActionHint, str] = {
    SafeActionHint.CRAWL_AROUND: "يزحف {child} حول {obj} ببطء دورة كاملة",
    SafeActionHint.NAVIGATE_BETWEEN: "يمشي {child} بين {obj} والأشياء المحيطة به دون أن يلمسها",
    SafeActionHint.REACH_OVER: "يمد {child} يده فوق {obj} ليلمس شيئاً خفيفاً وضعته على الجانب الآخر",
    SafeActionHint.USE_CUSHIONS_OR_FLOOR: "يجلس {child} على الأرض أو على وسادة بجانب {obj}",
    SafeActionHint.SUPPORTED_WEIGHT_BEARING: "يضع {child} كفيه على {obj} ويستند عليه قليلاً وأنت بجانبه",
}

SAFE_GENERIC_STEPS: tuple[str, ...] = (
    "يلمس {child} سطح {obj} بيديه ويصف ملمسه",
    "ينظر إلى {obj} ويسمّي لونه وشكله",
    "يتنفس بعمق ثلاث مرات وهو يجلس بهدوء بجانب {obj}",
    "كرر الخطوات مرتين مع راحة قصيرة",
)

SAFE_WARNING = "يبقى {obj} في مكانه طوال النشاط؛ النشاط حوله وبجانبه فقط؛ راقب {child} من قرب"
