"""Tests for the method catalogue and default observations."""
import pytest

from ergoscore.core.exceptions import UnknownMethodError
from ergoscore.models import (
    Method,
    NioshObservation,
    OwasObservation,
    RebaObservation,
    RulaObservation,
)
from ergoscore.models.enums import Locale
from ergoscore.scoring.catalogue import (
    FIELD_SPECS,
    default_observation,
    describe_method,
    describe_methods,
    field_specs,
)


class TestDefaultObservation:

    def test_reba_defaults_to_minimums(self):
        obs = default_observation("REBA")
        assert isinstance(obs, RebaObservation)
        assert obs.to_record() == {
            "neck": 1, "trunk": 1, "legs": 1,
            "upperArm": 1, "lowerArm": 1, "wrist": 1,
            "load": 0, "coupling": 0, "activity": 0,
        }

    def test_rula_defaults_to_minimums(self):
        obs = default_observation(Method.RULA)
        assert isinstance(obs, RulaObservation)
        assert obs.wrist_twist == 1
        assert obs.muscle == 0
        assert obs.force == 0

    def test_owas_load_starts_at_1(self):
        obs = default_observation("owas")
        assert isinstance(obs, OwasObservation)
        assert obs.to_record() == {"back": 1, "arms": 1, "legs": 1, "load": 1}

    def test_niosh_reference_lift(self):
        obs = default_observation("NIOSH")
        assert isinstance(obs, NioshObservation)
        assert obs.weight == 10
        assert obs.h_dist == 25
        assert obs.v_dist == 75
        assert obs.v_origin == 75
        assert obs.coupling == "good"

    def test_unknown_method(self):
        with pytest.raises(UnknownMethodError):
            default_observation("LUBA")


class TestFieldSpecs:

    @pytest.mark.parametrize("method", [Method.REBA, Method.RULA, Method.OWAS])
    def test_one_description_per_value(self, method):
        for spec in FIELD_SPECS[method]:
            for locale in Locale:
                assert len(spec.descriptions[locale]) == spec.max - spec.min + 1

    @pytest.mark.parametrize("method", [Method.REBA, Method.RULA, Method.OWAS])
    def test_names_are_observation_fields(self, method):
        model = type(default_observation(method))
        assert set(field_specs(method)) == set(model.model_fields)

    def test_clamp(self):
        wrist = field_specs(Method.REBA)["wrist"]
        assert wrist.clamp(0) == 1
        assert wrist.clamp(2) == 2
        assert wrist.clamp(7) == 3

    def test_niosh_has_no_ranged_fields(self):
        assert field_specs(Method.NIOSH) == {}


class TestDescribe:

    def test_all_methods_in_order(self):
        entries = describe_methods("en")
        assert [e.method for e in entries] == ["REBA", "RULA", "OWAS", "NIOSH"]

    def test_localised_labels(self):
        en = describe_method(Method.OWAS, "en")
        fa = describe_method(Method.OWAS, "fa")
        assert en.fields[0].label == "Back"
        assert fa.fields[0].label == "پشت (Back)"
        assert en.full_name == fa.full_name == "Ovako Working Posture Analysis"
