"""Method catalogue: metadata, input field descriptors and default observations.

Field descriptors carry the valid range of every ordinal input. The UI
renders them as sliders and ``ergoscore.scoring.estimates`` clamps
externally supplied values with them.
"""
from dataclasses import dataclass
from typing import Dict, List, Tuple, Union

from ergoscore.models.common import FieldSpecResponse, MethodResponse
from ergoscore.models.enums import Locale, Method
from ergoscore.models.observation import OBSERVATION_MODELS, NioshObservation, ObservationBase
from ergoscore.scoring.classification import resolve_locale


@dataclass(frozen=True)
class FieldSpec:
    """Range and display text for one ordinal input field."""

    name: str                                  # observation attribute name
    min: int
    max: int
    label: Dict[Locale, str]
    descriptions: Dict[Locale, Tuple[str, ...]]  # one per value, min..max
    help: Dict[Locale, str]

    def clamp(self, value: int) -> int:
        return max(self.min, min(self.max, value))

    def localized(self, locale: Locale) -> FieldSpecResponse:
        return FieldSpecResponse(
            name=self.name,
            label=self.label[locale],
            min=self.min,
            max=self.max,
            descriptions=list(self.descriptions[locale]),
            help=self.help[locale],
        )


@dataclass(frozen=True)
class MethodInfo:
    """Display metadata for an assessment method."""

    name: str
    full_name: str
    icon: str
    description: Dict[Locale, str]
    color: str


METHOD_METADATA: Dict[Method, MethodInfo] = {
    Method.REBA: MethodInfo(
        name="REBA",
        full_name="Rapid Entire Body Assessment",
        icon="🧍",
        description={
            Locale.EN: "Whole-body assessment, suited to varied tasks",
            Locale.FA: "ارزیابی کل بدن - مناسب برای کارهای متنوع",
        },
        color="#1f6feb",
    ),
    Method.RULA: MethodInfo(
        name="RULA",
        full_name="Rapid Upper Limb Assessment",
        icon="💪",
        description={
            Locale.EN: "Upper-limb assessment, suited to manual work",
            Locale.FA: "ارزیابی اندام فوقانی - مناسب برای کارهای دستی",
        },
        color="#388bfd",
    ),
    Method.OWAS: MethodInfo(
        name="OWAS",
        full_name="Ovako Working Posture Analysis",
        icon="🏗️",
        description={
            Locale.EN: "Working posture assessment, suited to industrial work",
            Locale.FA: "ارزیابی پوسچر کاری - مناسب برای کارهای صنعتی",
        },
        color="#3fb950",
    ),
    Method.NIOSH: MethodInfo(
        name="NIOSH",
        full_name="NIOSH Lifting Equation",
        icon="📦",
        description={
            Locale.EN: "NIOSH lifting equation, suited to manual handling",
            Locale.FA: "معادله بلند کردن NIOSH - مناسب برای جابجایی بار",
        },
        color="#e3b341",
    ),
}


def _field(name, lo, hi, label_en, label_fa, desc_en, desc_fa, help_en, help_fa) -> FieldSpec:
    return FieldSpec(
        name=name,
        min=lo,
        max=hi,
        label={Locale.EN: label_en, Locale.FA: label_fa},
        descriptions={Locale.EN: tuple(desc_en), Locale.FA: tuple(desc_fa)},
        help={Locale.EN: help_en, Locale.FA: help_fa},
    )


_ARM_EN = ("1 – 60-100°", "2 – below 60°", "3 – above 100°")
_ARM_FA = ("۱ – ۶۰-۱۰۰°", "۲ – کمتر از ۶۰°", "۳ – بیش از ۱۰۰°")

FIELD_SPECS: Dict[Method, Tuple[FieldSpec, ...]] = {
    Method.REBA: (
        _field("neck", 1, 3, "Neck", "گردن (Neck)",
               ["1 – under 20°", "2 – over 20° or deviated", "3 – extended backwards"],
               ["۱ – کمتر از ۲۰°", "۲ – بیش از ۲۰° یا انحراف", "۳ – خم شدن به عقب"],
               "Forward flexion of the neck",
               "زاویه خم شدن گردن رو به جلو را ارزیابی کنید"),
        _field("trunk", 1, 5, "Trunk", "تنه (Trunk)",
               ["1 – upright", "2 – 0-20°", "3 – 20-60°", "4 – over 60°", "5 – twisted or side-bent"],
               ["۱ – صاف", "۲ – ۰-۲۰°", "۳ – ۲۰-۶۰°", "۴ – بیش از ۶۰°", "۵ – چرخش یا انحراف"],
               "Flexion of the trunk",
               "زاویه خم شدن تنه را ارزیابی کنید"),
        _field("legs", 1, 4, "Legs", "پاها (Legs)",
               ["1 – seated", "2 – standing on both feet", "3 – weight on one foot",
                "4 – knees bent > 60°"],
               ["۱ – نشسته", "۲ – ایستاده دو پا", "۳ – وزن روی یک پا", "۴ – زانو خم > ۶۰°"],
               "Leg posture and weight distribution",
               "وضعیت پاها و توزیع وزن"),
        _field("upper_arm", 1, 6, "Upper arm", "بازو (Upper Arm)",
               ["1 – 20° forward/back", "2 – 20-45°", "3 – 45-90°", "4 – over 90°",
                "5 – shoulder raised", "6 – arm above head"],
               ["۱ – ۲۰° رو به جلو/عقب", "۲ – ۲۰-۴۵°", "۳ – ۴۵-۹۰°", "۴ – بیش از ۹۰°",
                "۵ – شانه بالا", "۶ – بازو به بالای سر"],
               "Angle of the upper arm to the trunk",
               "زاویه بازو نسبت به محور بدن"),
        _field("lower_arm", 1, 3, "Lower arm", "ساعد (Lower Arm)",
               _ARM_EN, _ARM_FA, "Elbow angle", "زاویه آرنج"),
        _field("wrist", 1, 3, "Wrist", "مچ (Wrist)",
               ["1 – straight", "2 – bent 0-15°", "3 – bent > 15°"],
               ["۱ – صاف", "۲ – خم ۰-۱۵°", "۳ – خم > ۱۵°"],
               "Wrist deviation", "انحراف مچ دست"),
        _field("load", 0, 3, "Load / force", "بار / نیرو",
               ["0 – under 5 kg", "1 – 5-10 kg", "2 – over 10 kg", "3 – shock or sudden force"],
               ["۰ – کمتر از ۵ کیلوگرم", "۱ – ۵-۱۰ کیلوگرم", "۲ – بیش از ۱۰ کیلوگرم",
                "۳ – شوک یا نیروی ناگهانی"],
               "Load weight or applied force", "وزن بار یا نیروی اعمالی"),
        _field("coupling", 0, 3, "Coupling", "نحوه گرفتن (Coupling)",
               ["0 – good", "1 – fair", "2 – poor", "3 – unacceptable"],
               ["۰ – خوب", "۱ – متوسط", "۲ – بد", "۳ – ناپذیرفتنی"],
               "Quality of grip on the tool or load", "کیفیت گرفتن ابزار یا بار"),
        _field("activity", 0, 3, "Activity score", "فعالیت (Activity Score)",
               ["0 – static posture", "1 – repetitive", "2 – rapid change", "3 – unstable"],
               ["۰ – پوسچر ثابت", "۱ – تکراری", "۲ – تغییر سریع", "۳ – ناپایدار"],
               "Nature of the work activity", "ماهیت فعالیت کاری"),
    ),
    Method.RULA: (
        _field("upper_arm", 1, 6, "Upper arm", "بازو (Upper Arm)",
               ["1 – 20° forward/back", "2 – 20-45°", "3 – 45-90°", "4 – over 90°",
                "5 – shoulder raised", "6 – supported"],
               ["۱ – ۲۰° رو به جلو/عقب", "۲ – ۲۰-۴۵°", "۳ – ۴۵-۹۰°", "۴ – بیش از ۹۰°",
                "۵ – شانه بالا", "۶ – تکیه‌گاه"],
               "Upper arm angle", "زاویه بازو"),
        _field("lower_arm", 1, 3, "Lower arm", "ساعد (Lower Arm)",
               _ARM_EN, _ARM_FA, "Elbow angle", "زاویه آرنج"),
        _field("wrist", 1, 4, "Wrist", "مچ (Wrist)",
               ["1 – straight", "2 – slight deviation", "3 – bent 15°+", "4 – bent and deviated"],
               ["۱ – صاف", "۲ – انحراف کمی", "۳ – خم ۱۵°+", "۴ – خم + انحراف"],
               "Wrist posture", "وضعیت مچ"),
        _field("wrist_twist", 1, 2, "Wrist twist", "چرخش مچ",
               ["1 – mid-range", "2 – near end of range"],
               ["۱ – در محدوده", "۲ – خارج از محدوده"],
               "Wrist rotation", "چرخش مچ دست"),
        _field("neck", 1, 6, "Neck", "گردن (Neck)",
               ["1 – 0-10°", "2 – 10-20°", "3 – over 20°", "4 – extended", "5 – side-bent",
                "6 – twisted"],
               ["۱ – ۰-۱۰°", "۲ – ۱۰-۲۰°", "۳ – بیش از ۲۰°", "۴ – خم به عقب", "۵ – انحراف",
                "۶ – چرخش"],
               "Neck posture", "وضعیت گردن"),
        _field("trunk", 1, 6, "Trunk", "تنه (Trunk)",
               ["1 – upright", "2 – 0-20°", "3 – 20-60°", "4 – over 60°", "5 – side-bent",
                "6 – twisted"],
               ["۱ – صاف", "۲ – ۰-۲۰°", "۳ – ۲۰-۶۰°", "۴ – بیش از ۶۰°", "۵ – انحراف", "۶ – چرخش"],
               "Trunk posture", "وضعیت تنه"),
        _field("legs", 1, 2, "Legs", "پاها (Legs)",
               ["1 – both feet supported", "2 – one foot or unstable"],
               ["۱ – دو پا روی زمین", "۲ – یک پا یا ناپایدار"],
               "Leg posture", "وضعیت پاها"),
        _field("muscle", 0, 1, "Muscle use", "استفاده از عضله",
               ["0 – intermittent", "1 – static over 1 minute"],
               ["۰ – حرکات متناوب", "۱ – ثابت بیش از ۱ دقیقه"],
               "Repetition and static holding", "تکرار و ایستایی"),
        _field("force", 0, 3, "Force / load", "نیرو / بار",
               ["0 – under 2 kg", "1 – 2-10 kg", "2 – over 10 kg", "3 – sudden shock"],
               ["۰ – کمتر از ۲ کیلوگرم", "۱ – ۲-۱۰ کیلوگرم", "۲ – بیش از ۱۰ کیلوگرم",
                "۳ – شوک ناگهانی"],
               "Applied force", "نیروی اعمالی"),
    ),
    Method.OWAS: (
        _field("back", 1, 4, "Back", "پشت (Back)",
               ["1 – straight", "2 – bent forward", "3 – twisted or side-bent",
                "4 – bent and twisted"],
               ["۱ – صاف", "۲ – خم رو به جلو", "۳ – چرخش یا انحراف", "۴ – خم + چرخش"],
               "Back posture", "وضعیت کمر و پشت"),
        _field("arms", 1, 3, "Arms", "بازوها (Arms)",
               ["1 – both below shoulder", "2 – one above shoulder", "3 – both above shoulder"],
               ["۱ – هر دو زیر شانه", "۲ – یکی بالای شانه", "۳ – هر دو بالای شانه"],
               "Arm position relative to the shoulders", "موقعیت بازوها نسبت به شانه"),
        _field("legs", 1, 7, "Legs", "پاها (Legs)",
               ["1 – sitting", "2 – standing, both legs straight", "3 – standing on one leg",
                "4 – standing, both knees bent", "5 – standing on one bent leg",
                "6 – kneeling", "7 – walking"],
               ["۱ – نشسته", "۲ – ایستاده دو پا صاف", "۳ – ایستاده یک پا", "۴ – ایستاده دو پا خم",
                "۵ – ایستاده یک پا خم", "۶ – زانو زدن", "۷ – راه رفتن"],
               "Leg posture", "وضعیت پاها"),
        _field("load", 1, 3, "Load", "بار (Load)",
               ["1 – under 10 kg", "2 – 10-20 kg", "3 – over 20 kg"],
               ["۱ – کمتر از ۱۰ کیلوگرم", "۲ – ۱۰-۲۰ کیلوگرم", "۳ – بیش از ۲۰ کیلوگرم"],
               "Load weight", "وزن بار"),
    ),
    # NIOSH inputs are continuous measurements with no slider range
    Method.NIOSH: (),
}


def field_specs(method: Method) -> Dict[str, FieldSpec]:
    """Field descriptors for a method, keyed by attribute name."""
    return {spec.name: spec for spec in FIELD_SPECS[method]}


def default_observation(method: Union[Method, str]) -> ObservationBase:
    """Starting observation for a fresh assessment form.

    Ranged methods start every field at its minimum; NIOSH starts from a
    10 kg lift at knuckle height with 75 cm of travel.
    """
    method = Method.parse(method)
    if method is Method.NIOSH:
        return NioshObservation(
            weight=10,
            h_dist=25,
            v_dist=75,
            v_origin=75,
            asymmetry=0,
            frequency=1,
            duration=1,
            coupling="good",
        )
    model = OBSERVATION_MODELS[method]
    return model(**{spec.name: spec.min for spec in FIELD_SPECS[method]})


def describe_method(method: Method, locale: Union[Locale, str, None] = None) -> MethodResponse:
    """Localised catalogue entry for one method."""
    lang = resolve_locale(locale)
    info = METHOD_METADATA[method]
    return MethodResponse(
        method=method.value,
        name=info.name,
        full_name=info.full_name,
        icon=info.icon,
        description=info.description[lang],
        color=info.color,
        fields=[spec.localized(lang) for spec in FIELD_SPECS[method]],
    )


def describe_methods(locale: Union[Locale, str, None] = None) -> List[MethodResponse]:
    """Localised catalogue entries for all methods."""
    return [describe_method(method, locale) for method in Method]
