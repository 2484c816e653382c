"""Risk classification shared by all four methods.

Two independent steps:

  1. Thresholding  headline number -> RiskBucket   (numeric, locale-free)
  2. Presentation  (method, bucket, locale) -> level/action text,
                   (method, bucket) -> colour

Headline numbers per method: REBA total, RULA total, OWAS category,
NIOSH lifting index. Range boundaries belong to the lower bucket
(REBA 3 is "low", 4 is "medium").
"""
from typing import Dict, Optional, Tuple, Union

from ergoscore.config import get_settings
from ergoscore.models.enums import Locale, Method, RiskBucket
from ergoscore.models.result import Classification

# ── Thresholds: (inclusive upper bound, bucket), last bucket catches the rest ─
_THRESHOLDS: Dict[Method, Tuple[Tuple[float, RiskBucket], ...]] = {
    Method.REBA: (
        (1, RiskBucket.NEGLIGIBLE),
        (3, RiskBucket.LOW),
        (7, RiskBucket.MEDIUM),
        (10, RiskBucket.HIGH),
    ),
    Method.RULA: (
        (2, RiskBucket.ACCEPTABLE),
        (4, RiskBucket.INVESTIGATE_FURTHER),
        (6, RiskBucket.INVESTIGATE_SOON),
    ),
    Method.OWAS: (
        (1, RiskBucket.LOW),
        (2, RiskBucket.MEDIUM),
        (3, RiskBucket.HIGH),
    ),
    Method.NIOSH: (
        (1.0, RiskBucket.SAFE),
        (2.0, RiskBucket.MODERATE),
    ),
}

_TOP_BUCKET: Dict[Method, RiskBucket] = {
    Method.REBA: RiskBucket.VERY_HIGH,
    Method.RULA: RiskBucket.INVESTIGATE_IMMEDIATELY,
    Method.OWAS: RiskBucket.CRITICAL,
    Method.NIOSH: RiskBucket.HIGH_RISK,
}

# ── Colours ───────────────────────────────────────────────────────────────────
_GREEN = "#16a34a"
_LIME = "#84cc16"
_AMBER = "#f59e0b"
_ORANGE = "#f97316"
_RED = "#dc2626"

COLORS: Dict[Tuple[Method, RiskBucket], str] = {
    (Method.REBA, RiskBucket.NEGLIGIBLE): _GREEN,
    (Method.REBA, RiskBucket.LOW): _LIME,
    (Method.REBA, RiskBucket.MEDIUM): _AMBER,
    (Method.REBA, RiskBucket.HIGH): _ORANGE,
    (Method.REBA, RiskBucket.VERY_HIGH): _RED,
    (Method.RULA, RiskBucket.ACCEPTABLE): _GREEN,
    (Method.RULA, RiskBucket.INVESTIGATE_FURTHER): _AMBER,
    (Method.RULA, RiskBucket.INVESTIGATE_SOON): _ORANGE,
    (Method.RULA, RiskBucket.INVESTIGATE_IMMEDIATELY): _RED,
    (Method.OWAS, RiskBucket.LOW): _GREEN,
    (Method.OWAS, RiskBucket.MEDIUM): _AMBER,
    (Method.OWAS, RiskBucket.HIGH): _ORANGE,
    (Method.OWAS, RiskBucket.CRITICAL): _RED,
    (Method.NIOSH, RiskBucket.SAFE): _GREEN,
    (Method.NIOSH, RiskBucket.MODERATE): _AMBER,
    (Method.NIOSH, RiskBucket.HIGH_RISK): _RED,
}

# ── Level / action text ───────────────────────────────────────────────────────
LEVEL_TEXT: Dict[Tuple[Method, RiskBucket, Locale], Tuple[str, str]] = {
    # REBA
    (Method.REBA, RiskBucket.NEGLIGIBLE, Locale.EN): ("Negligible", "No action necessary"),
    (Method.REBA, RiskBucket.NEGLIGIBLE, Locale.FA): ("بی‌خطر", "اقدام لازم نیست"),
    (Method.REBA, RiskBucket.LOW, Locale.EN): ("Low", "Change may be needed"),
    (Method.REBA, RiskBucket.LOW, Locale.FA): ("پایین", "تغییر ممکن است لازم باشد"),
    (Method.REBA, RiskBucket.MEDIUM, Locale.EN): ("Medium", "Change is necessary"),
    (Method.REBA, RiskBucket.MEDIUM, Locale.FA): ("متوسط", "تغییر لازم است"),
    (Method.REBA, RiskBucket.HIGH, Locale.EN): ("High", "Change as soon as possible"),
    (Method.REBA, RiskBucket.HIGH, Locale.FA): ("بالا", "تغییر هر چه زودتر"),
    (Method.REBA, RiskBucket.VERY_HIGH, Locale.EN): ("Very high", "Change immediately"),
    (Method.REBA, RiskBucket.VERY_HIGH, Locale.FA): ("بسیار بالا", "تغییر فوری ضروری"),
    # RULA
    (Method.RULA, RiskBucket.ACCEPTABLE, Locale.EN): ("Acceptable", "Posture is acceptable"),
    (Method.RULA, RiskBucket.ACCEPTABLE, Locale.FA): ("قابل قبول", "وضعیت قابل قبول"),
    (Method.RULA, RiskBucket.INVESTIGATE_FURTHER, Locale.EN): (
        "Investigate further", "Investigate and improve"),
    (Method.RULA, RiskBucket.INVESTIGATE_FURTHER, Locale.FA): ("بررسی لازم است", "بررسی و بهبود"),
    (Method.RULA, RiskBucket.INVESTIGATE_SOON, Locale.EN): (
        "Investigate soon", "Correct as soon as possible"),
    (Method.RULA, RiskBucket.INVESTIGATE_SOON, Locale.FA): ("بررسی سریع", "اصلاح هرچه زودتر"),
    (Method.RULA, RiskBucket.INVESTIGATE_IMMEDIATELY, Locale.EN): (
        "Investigate immediately", "Correct immediately"),
    (Method.RULA, RiskBucket.INVESTIGATE_IMMEDIATELY, Locale.FA): ("فوری", "اصلاح فوری"),
    # OWAS
    (Method.OWAS, RiskBucket.LOW, Locale.EN): ("Category 1 - Low", "No action required"),
    (Method.OWAS, RiskBucket.LOW, Locale.FA): ("سطح ۱ - کم‌خطر", "بدون نیاز به اقدام"),
    (Method.OWAS, RiskBucket.MEDIUM, Locale.EN): (
        "Category 2 - Medium", "Corrective action in the near future"),
    (Method.OWAS, RiskBucket.MEDIUM, Locale.FA): ("سطح ۲ - متوسط", "اقدام در آینده نزدیک"),
    (Method.OWAS, RiskBucket.HIGH, Locale.EN): (
        "Category 3 - High", "Corrective action as soon as possible"),
    (Method.OWAS, RiskBucket.HIGH, Locale.FA): ("سطح ۳ - بالا", "اقدام در اسرع وقت"),
    (Method.OWAS, RiskBucket.CRITICAL, Locale.EN): (
        "Category 4 - Critical", "Corrective action immediately"),
    (Method.OWAS, RiskBucket.CRITICAL, Locale.FA): ("سطح ۴ - بحرانی", "اقدام فوری"),
    # NIOSH
    (Method.NIOSH, RiskBucket.SAFE, Locale.EN): ("Safe", "Load is within the safe limit"),
    (Method.NIOSH, RiskBucket.SAFE, Locale.FA): ("ایمن", "بار بی‌خطر است"),
    (Method.NIOSH, RiskBucket.MODERATE, Locale.EN): (
        "Moderate risk", "Reduce the load or improve lifting conditions"),
    (Method.NIOSH, RiskBucket.MODERATE, Locale.FA): ("ریسک متوسط", "کاهش وزن یا بهبود شرایط"),
    (Method.NIOSH, RiskBucket.HIGH_RISK, Locale.EN): ("High risk", "Redesign the task"),
    (Method.NIOSH, RiskBucket.HIGH_RISK, Locale.FA): ("ریسک بالا", "طراحی مجدد وظیفه ضروری"),
}


def resolve_locale(locale: Union[Locale, str, None] = None) -> Locale:
    """Map a locale selector to a supported Locale, falling back to the configured default."""
    if isinstance(locale, Locale):
        return locale
    if locale:
        try:
            return Locale(str(locale).strip().lower())
        except ValueError:
            pass
    return Locale(get_settings().default_locale)


def bucket_for(method: Method, value: float) -> RiskBucket:
    """Threshold a headline number into its method's risk bucket."""
    for upper, bucket in _THRESHOLDS[method]:
        if value <= upper:
            return bucket
    return _TOP_BUCKET[method]


def level_text(
    method: Method,
    bucket: RiskBucket,
    locale: Union[Locale, str, None] = None,
) -> Tuple[str, str]:
    """Return the (level, action) pair for a bucket in the given locale."""
    return LEVEL_TEXT[(method, bucket, resolve_locale(locale))]


def classify(
    method: Method,
    value: float,
    locale: Optional[Union[Locale, str]] = None,
) -> Classification:
    """Classify a headline number into level, action and colour."""
    bucket = bucket_for(method, value)
    level, action = level_text(method, bucket, locale)
    return Classification(
        bucket=bucket,
        level=level,
        action=action,
        color=COLORS[(method, bucket)],
    )
