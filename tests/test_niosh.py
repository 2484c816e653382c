"""Tests for the NIOSH lifting equation."""
import math

import pytest

from ergoscore.models import NioshObservation, RiskBucket
from ergoscore.scoring.niosh import (
    FREQUENCY_MULTIPLIER,
    LOAD_CONSTANT,
    calculate_niosh,
    coupling_multiplier,
)
from ergoscore.scoring.utils import round_half_up


class TestNioshMultipliers:

    def test_reference_lift(self, reference_lift):
        """Ideal geometry leaves only DM and FM below 1."""
        result = calculate_niosh(reference_lift)
        assert result.hm == 1.0
        assert result.vm == 1.0
        assert result.dm == 0.88
        assert result.am == 1.0
        assert result.cm == 1.0
        assert result.fm == 0.78
        assert result.rwl == pytest.approx(15.79, abs=0.005)
        assert result.li == pytest.approx(round(10 / result.rwl, 2), abs=0.005)
        assert result.classification.bucket == RiskBucket.SAFE

    @pytest.mark.parametrize("h_dist,expected", [
        (10, 1.0),
        (25, 1.0),
        (50, 0.5),
        (63, 0.4),
    ])
    def test_horizontal_multiplier(self, h_dist, expected):
        assert calculate_niosh({"hDist": h_dist}).hm == expected

    @pytest.mark.parametrize("v_origin,expected", [
        (75, 1.0),
        (25, 0.85),
        (175, 0.7),
    ])
    def test_vertical_multiplier(self, v_origin, expected):
        assert calculate_niosh({"vOrigin": v_origin}).vm == expected

    def test_distance_multiplier_floors_travel_at_25(self):
        assert calculate_niosh({"vDist": 0}).dm == 1.0
        assert calculate_niosh({"vDist": 10}).dm == 1.0
        assert calculate_niosh({"vDist": 50}).dm == 0.91

    def test_asymmetric_multiplier(self):
        assert calculate_niosh({"asymmetry": 90}).am == 0.71

    @pytest.mark.parametrize("coupling,expected", [
        ("good", 1.0),
        ("fair", 0.95),
        ("poor", 0.9),
        ("slippery", 0.9),
        ("", 0.9),
    ])
    def test_coupling_multiplier(self, coupling, expected):
        assert coupling_multiplier(coupling) == expected
        assert calculate_niosh({"coupling": coupling}).cm == expected

    def test_frequency_and_duration_are_not_used(self, reference_lift):
        base = calculate_niosh(reference_lift)
        busy = calculate_niosh({**reference_lift, "frequency": 12, "duration": 8})
        assert busy == base

    def test_defaults(self):
        """No weight, no travel: RWL = LC × FM and LI = 0."""
        result = calculate_niosh()
        assert result.rwl == round(LOAD_CONSTANT * FREQUENCY_MULTIPLIER, 2)
        assert result.li == 0.0


class TestNioshLiftingIndex:

    @pytest.mark.parametrize("weight,bucket", [
        (5, RiskBucket.SAFE),
        (20, RiskBucket.MODERATE),
        (40, RiskBucket.HIGH_RISK),
    ])
    def test_classification(self, reference_lift, weight, bucket):
        result = calculate_niosh({**reference_lift, "weight": weight})
        assert result.classification.bucket == bucket

    def test_li_of_exactly_one_is_safe(self, reference_lift):
        rwl = calculate_niosh(reference_lift).rwl
        result = calculate_niosh({**reference_lift, "weight": rwl})
        assert result.li == 1.0
        assert result.classification.bucket == RiskBucket.SAFE

    def test_zero_rwl_reports_zero_li(self):
        """A fully asymmetric lift drives RWL to 0; LI is 0, not inf or NaN."""
        result = calculate_niosh(NioshObservation(weight=10, asymmetry=312.5))
        assert result.rwl == 0
        assert result.li == 0.0
        assert not math.isnan(result.li)

    def test_non_finite_inputs_report_zero(self):
        result = calculate_niosh(NioshObservation(weight=10, h_dist=float("nan")))
        assert result.rwl == 0.0
        assert result.li == 0.0

    def test_negative_weight_rejected(self):
        with pytest.raises(ValueError):
            NioshObservation(weight=-1)


class TestNioshRounding:
    """Reported values round half-up on the decimal form of the float."""

    def test_decimal_ties_round_up(self):
        assert round_half_up(1.005) == 1.01
        assert round_half_up(0.125) == 0.13

    def test_differs_from_binary_rounding_at_ties(self):
        assert round(1.005, 2) == 1.0
        assert round_half_up(1.005) != round(1.005, 2)

    def test_multipliers_use_half_up(self):
        """H = 40 gives HM = 0.625, reported as 0.63."""
        assert calculate_niosh({"hDist": 40}).hm == 0.63
