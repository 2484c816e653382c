"""Tests for the REBA calculator."""
import pytest

from ergoscore.models import RebaObservation, RiskBucket
from ergoscore.scoring.reba import RebaCalculator, calculate_reba


class TestRebaScoring:
    """Group A/B/C composition."""

    def test_neutral_posture(self, neutral_reba):
        """Lowest score in every field gives REBA 1 (negligible)."""
        result = calculate_reba(neutral_reba)
        assert result.score_a == 1
        assert result.score_b == 1
        assert result.score_c == 1
        assert result.total == 1
        assert result.classification.bucket == RiskBucket.NEGLIGIBLE

    def test_defaults_match_neutral_posture(self, neutral_reba):
        """Omitted fields default to 1 (0 for load, coupling, activity)."""
        assert calculate_reba() == calculate_reba(neutral_reba)
        assert calculate_reba({}) == calculate_reba(neutral_reba)

    def test_worked_example(self):
        """Mid-range posture walks through all three tables."""
        result = calculate_reba(RebaObservation(
            neck=2, trunk=3, legs=2,
            upper_arm=3, lower_arm=2, wrist=2,
            load=1, coupling=1, activity=1,
        ))
        # Table A[1][2][1] = 5, + load 1
        assert result.score_a == 6
        # Table B[2][1][1] = 4, + coupling 1
        assert result.score_b == 5
        # Table C[5][4]
        assert result.score_c == 8
        assert result.total == 9
        assert result.classification.bucket == RiskBucket.HIGH

    def test_missing_wrist_column_scores_zero(self):
        """Wrist 3 has no Table B column and contributes 0 before coupling."""
        result = calculate_reba({"wrist": 3})
        assert result.score_b == 0
        assert result.score_c == 1
        assert result.total == 1

    def test_worst_case_is_capped(self):
        """Group scores cap at 12 and the total at 15."""
        result = calculate_reba({
            "neck": 3, "trunk": 5, "legs": 4,
            "upperArm": 6, "lowerArm": 3, "wrist": 2,
            "load": 5, "coupling": 3, "activity": 3,
        })
        assert result.score_a == 12
        assert result.score_b == 11
        assert result.score_c == 12
        assert result.total == 15
        assert result.classification.bucket == RiskBucket.VERY_HIGH

    @pytest.mark.parametrize("field,out_of_range,edge", [
        ("neck", 10, 3),
        ("neck", -4, 1),
        ("trunk", 99, 5),
        ("legs", 0, 1),
        ("upperArm", 12, 6),
        ("lowerArm", 7, 3),
    ])
    def test_out_of_range_values_are_clamped(self, field, out_of_range, edge):
        """Values outside a table's range score like the nearest edge."""
        assert calculate_reba({field: out_of_range}) == calculate_reba({field: edge})

    def test_camel_case_and_snake_case_agree(self):
        """Mappings may use either field spelling."""
        assert calculate_reba({"upperArm": 4}) == calculate_reba({"upper_arm": 4})

    def test_locale_changes_text_only(self):
        """Locale selects label text; numbers and bucket stay the same."""
        en = calculate_reba({"trunk": 4}, locale="en")
        fa = calculate_reba({"trunk": 4}, locale="fa")
        assert en.total == fa.total
        assert en.classification.bucket == fa.classification.bucket
        assert en.classification.color == fa.classification.color
        assert en.classification.level != fa.classification.level

    def test_persian_labels(self, neutral_reba):
        result = calculate_reba(neutral_reba, locale="fa")
        assert result.classification.level == "بی‌خطر"
        assert result.classification.action == "اقدام لازم نیست"


class TestRebaBoundaries:
    """Range boundaries belong to the lower bucket."""

    def test_total_3_is_low(self, neutral_reba):
        result = calculate_reba({**neutral_reba, "activity": 2})
        assert result.total == 3
        assert result.classification.bucket == RiskBucket.LOW

    def test_total_4_is_medium(self, neutral_reba):
        result = calculate_reba({**neutral_reba, "activity": 3})
        assert result.total == 4
        assert result.classification.bucket == RiskBucket.MEDIUM


class TestRebaLookupMiss:
    """Malformed tables yield no result instead of raising."""

    def test_missing_table_a_row(self):
        calc = RebaCalculator(table_a=((),))
        assert calc.calculate(RebaObservation()) is None

    def test_missing_table_b_row(self):
        calc = RebaCalculator(table_b=((),))
        assert calc.calculate(RebaObservation()) is None

    def test_missing_table_c_row(self):
        calc = RebaCalculator(table_c=())
        assert calc.calculate(RebaObservation()) is None


class TestRebaRealInputs:
    """Real-valued scores are floored before the table lookups."""

    def test_fractions_floor(self):
        assert calculate_reba({"neck": 2.5, "trunk": 3.7}) == calculate_reba({"neck": 2, "trunk": 3})

    def test_negative_fraction_floors_then_clamps(self):
        assert calculate_reba({"wrist": -0.5}) == calculate_reba({"wrist": 1})

    def test_real_modifiers(self):
        result = calculate_reba({"activity": 2.99})
        assert result.total == 3
