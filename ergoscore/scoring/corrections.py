"""Correction Advisor.

Derives remediation suggestions from the raw observation (and, for REBA
and NIOSH, the computed result). Each method has a fixed, ordered rule
list; the output keeps that order because it is the order users read
remediation priority in. Rules are independent of the classification.
"""
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

import structlog

from ergoscore.models.enums import Locale, Method
from ergoscore.models.observation import OBSERVATION_MODELS, ObservationBase
from ergoscore.models.result import Correction, ScoreResult
from ergoscore.scoring.classification import resolve_locale

logger = structlog.get_logger(__name__)

# ── Correction text: key -> icon, {locale: (title, detail)} ───────────────────
CORRECTION_TEXT: Dict[str, Tuple[str, Dict[Locale, Tuple[str, str]]]] = {
    # REBA
    "monitor_height": ("🖥️", {
        Locale.EN: (
            "Monitor height",
            "Set the monitor so the line of sight to the middle of the screen is "
            "15-20° below horizontal. Recommended height: eye level ± 5 cm.",
        ),
        Locale.FA: (
            "ارتفاع مانیتور",
            "ارتفاع مانیتور را به گونه‌ای تنظیم کنید که خط دید به وسط صفحه با زاویه "
            "۱۵-۲۰ درجه به پایین باشد. ارتفاع توصیه‌شده: سطح چشم ± ۵ سانتی‌متر.",
        ),
    }),
    "chair_backrest": ("🪑", {
        Locale.EN: (
            "Chair backrest",
            "Use a chair with an adjustable backrest at 100-110° to the seat. "
            "If building one: backrest height 45-50 cm, width 45 cm.",
        ),
        Locale.FA: (
            "پشتی صندلی",
            "صندلی با پشتی قابل تنظیم با زاویه ۱۰۰-۱۱۰ درجه نسبت به نشیمن. "
            "اگر صندلی می‌سازید: ارتفاع پشتی ۴۵-۵۰ سانتی‌متر، پهنا ۴۵ سانتی‌متر.",
        ),
    }),
    "desk_height": ("📐", {
        Locale.EN: (
            "Desk height",
            "The work surface should be at seated elbow height. Measure elbow "
            "height from the floor and subtract 2-3 cm.",
        ),
        Locale.FA: (
            "ارتفاع میز",
            "ارتفاع سطح کار باید برابر ارتفاع آرنج (در حالت نشسته) باشد. "
            "اندازه‌گیری کنید: ارتفاع آرنج از زمین منهای ۲-۳ سانتی‌متر.",
        ),
    }),
    "footrest": ("🦶", {
        Locale.EN: (
            "Footrest",
            "Use a footrest adjustable from 0-15 cm with a 5-15° incline. "
            "Minimum size: 45×35 cm.",
        ),
        Locale.FA: (
            "تکیه‌گاه پا",
            "زیرپایی با ارتفاع قابل تنظیم ۰-۱۵ سانتی‌متر و زاویه ۵-۱۵ درجه توصیه "
            "می‌شود. ابعاد: حداقل ۴۵×۳۵ سانتی‌متر.",
        ),
    }),
    "break_schedule": ("⏱️", {
        Locale.EN: (
            "Break schedule",
            "Take a 5-minute active break every 30 minutes with neck, shoulder "
            "and back stretches.",
        ),
        Locale.FA: (
            "برنامه استراحت",
            "هر ۳۰ دقیقه ۵ دقیقه استراحت اکتیو با کشش‌های گردن، شانه و پشت.",
        ),
    }),
    "chair_specification": ("✏️", {
        Locale.EN: (
            "Corrective chair specification",
            "Chair with adjustable seat height 38-52 cm, seat depth 40-45 cm, "
            "ergonomic lumbar support and adjustable armrests.",
        ),
        Locale.FA: (
            "مشخصات صندلی اصلاحی",
            "صندلی با: ارتفاع نشیمن قابل تنظیم ۳۸-۵۲ سانتی‌متر، عمق نشیمن ۴۰-۴۵ "
            "سانتی‌متر، پشتی ارگونومیک کمری، دسته‌های قابل تنظیم.",
        ),
    }),
    # RULA
    "armrest": ("💪", {
        Locale.EN: (
            "Armrests",
            "Armrests should sit at elbow height, 20-25 cm above the seat, "
            "spaced to shoulder width.",
        ),
        Locale.FA: (
            "آرمچر (دسته صندلی)",
            "دسته صندلی باید در ارتفاع آرنج قرار گیرد. ارتفاع توصیه‌شده: ۲۰-۲۵ "
            "سانتی‌متر از نشیمن. تنظیم عرض: عرض شانه.",
        ),
    }),
    "keyboard_position": ("⌨️", {
        Locale.EN: (
            "Keyboard position",
            "Keyboard at elbow height, 10-15 cm from the body, tilted 0-15° "
            "negative (sloping away).",
        ),
        Locale.FA: (
            "موقعیت کیبورد",
            "کیبورد در ارتفاع آرنج، فاصله از بدن ۱۰-۱۵ سانتی‌متر. زاویه کیبورد: "
            "۰-۱۵ درجه منفی (شیب به عقب).",
        ),
    }),
    "document_holder": ("📄", {
        Locale.EN: (
            "Document holder",
            "Use a document holder beside the monitor to remove neck flexion.",
        ),
        Locale.FA: (
            "نگهدارنده اسناد",
            "از داکیومنت هولدر کنار مانیتور استفاده کنید تا خم شدن گردن حذف شود.",
        ),
    }),
    "ergonomic_mouse": ("🖱️", {
        Locale.EN: (
            "Ergonomic mouse",
            "Use a vertical mouse or a mouse with a wrist rest to reduce wrist "
            "deviation. Keep it beside the keyboard at the same level.",
        ),
        Locale.FA: (
            "موس ارگونومیک",
            "موس ورتیکال یا موس با کاور مچ برای کاهش انحراف مچ. فاصله موس از بدن: "
            "در کنار کیبورد در همان سطح.",
        ),
    }),
    # OWAS
    "standing_workstation": ("🏗️", {
        Locale.EN: (
            "Standing workstation design",
            "Standing work surface at elbow height ± 5 cm. Anti-fatigue mat or "
            "rubber flooring 15-20 mm thick.",
        ),
        Locale.FA: (
            "طراحی ایستگاه کاری ایستاده",
            "ارتفاع سطح کار برای کار ایستاده: ارتفاع آرنج ± ۵ سانتی‌متر. کف "
            "ضد‌خستگی یا کفپوش لاستیکی ضخامت ۱۵-۲۰ میلی‌متر.",
        ),
    }),
    "tool_layout": ("🔧", {
        Locale.EN: (
            "Tool layout",
            "Keep frequently used tools within 30 cm of the body and occasional "
            "ones within 30-60 cm.",
        ),
        Locale.FA: (
            "جانمایی ابزار",
            "ابزار پرکاربرد در محدوده ۳۰ سانتی‌متری از بدن. ابزار گهگاه در محدوده "
            "۳۰-۶۰ سانتی‌متر.",
        ),
    }),
    "sloped_surface": ("📐", {
        Locale.EN: (
            "Sloped work surface",
            "For precision work use a desk tilted 15-45° to reduce back flexion.",
        ),
        Locale.FA: (
            "صفحه شیب‌دار",
            "برای کارهای دقیق: میز با زاویه ۱۵-۴۵ درجه برای کاهش خمش پشت.",
        ),
    }),
    # NIOSH
    "reduce_load": ("⚖️", {
        Locale.EN: (
            "Reduce load weight",
            "Recommended weight: {rwl} kg. If the load is heavier, split it "
            "into two parts.",
        ),
        Locale.FA: (
            "کاهش وزن بار",
            "وزن توصیه‌شده: {rwl} کیلوگرم. اگر بار سنگین‌تر است، آن را به دو بخش "
            "تقسیم کنید.",
        ),
    }),
    "horizontal_distance": ("📏", {
        Locale.EN: (
            "Improve horizontal distance",
            "Hold the load closer to the body. Ideal distance: 25 cm from the "
            "body. Use lifting aids or a cart.",
        ),
        Locale.FA: (
            "بهبود فاصله افقی",
            "بار را نزدیک‌تر به بدن نگه دارید. فاصله ایده‌آل: ۲۵ سانتی‌متر از بدن. "
            "از ابزار کمکی یا چرخ استفاده کنید.",
        ),
    }),
    "lifting_height": ("⬆️", {
        Locale.EN: (
            "Lifting height",
            "Start the lift at hip height (75 cm). Bring the work surface to a "
            "suitable height.",
        ),
        Locale.FA: (
            "ارتفاع بلند کردن",
            "نقطه شروع بلند کردن باید در ارتفاع مفصل ران (۷۵ سانتی‌متر) باشد. سطح "
            "کار را به ارتفاع مناسب بیاورید.",
        ),
    }),
    "reduce_twisting": ("🔄", {
        Locale.EN: (
            "Reduce twisting",
            "Avoid twisting the trunk while lifting. Line up the load's origin "
            "and destination.",
        ),
        Locale.FA: (
            "کاهش چرخش",
            "از چرخش تنه هنگام بلند کردن خودداری کنید. محل قرارگیری بار و مقصد را "
            "در امتداد هم قرار دهید.",
        ),
    }),
}

Rule = Tuple[str, Callable[[Any, Any], bool]]


def _always(obs: Any, result: Any) -> bool:
    return True


# ── Ordered rules per method ──────────────────────────────────────────────────
CORRECTION_RULES: Dict[Method, Tuple[Rule, ...]] = {
    Method.REBA: (
        ("monitor_height", lambda obs, result: obs.neck >= 2),
        ("chair_backrest", lambda obs, result: obs.trunk >= 3),
        ("desk_height", lambda obs, result: obs.upper_arm >= 3),
        ("footrest", lambda obs, result: obs.legs >= 3),
        ("break_schedule", lambda obs, result: result.total > 7),
        ("chair_specification", _always),
    ),
    Method.RULA: (
        ("armrest", _always),
        ("keyboard_position", _always),
        ("document_holder", lambda obs, result: obs.neck > 2),
        ("ergonomic_mouse", _always),
    ),
    Method.OWAS: (
        ("standing_workstation", lambda obs, result: obs.back >= 3),
        ("tool_layout", lambda obs, result: obs.arms >= 2),
        ("sloped_surface", _always),
    ),
    Method.NIOSH: (
        ("reduce_load", _always),
        ("horizontal_distance", _always),
        ("lifting_height", _always),
        ("reduce_twisting", _always),
    ),
}


def _build(key: str, locale: Locale, result: Any) -> Correction:
    icon, texts = CORRECTION_TEXT[key]
    title, detail = texts[locale]
    if key == "reduce_load":
        detail = detail.format(rwl=result.rwl)
    return Correction(title=title, detail=detail, icon=icon)


def generate_corrections(
    method: Union[Method, str],
    result: Optional[ScoreResult],
    observation: Union[ObservationBase, Mapping[str, Any], None],
    locale: Union[Locale, str, None] = None,
) -> List[Correction]:
    """Build the ordered correction list for one assessment.

    Args:
        method: Assessment method the result belongs to.
        result: The method's score result; ``None`` yields no corrections.
        observation: The raw observation the result was computed from.
        locale: Language for titles and details.

    Returns:
        Corrections in the method's fixed priority order.
    """
    if result is None:
        return []
    method = Method.parse(method)
    model = OBSERVATION_MODELS[method]
    if isinstance(observation, model):
        obs = observation
    else:
        obs = model.model_validate(observation or {})
    lang = resolve_locale(locale)

    corrections = [
        _build(key, lang, result)
        for key, applies in CORRECTION_RULES[method]
        if applies(obs, result)
    ]
    logger.info(
        "corrections_generated",
        method=method.value,
        count=len(corrections),
    )
    return corrections
