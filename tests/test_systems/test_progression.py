"""Tests for attribute growth and decay update functions."""

import math

import pytest

from rpgcharacter.character import Attribute
from rpgcharacter.curves import exponential, linear, quadratic, root
from rpgcharacter.systems import (
    clamp_to_baseline,
    constant_decay,
    constant_growth,
    constant_linear_decay,
    constant_linear_growth,
    constant_logarithmic_growth,
    constant_quadratic_decay,
    constant_root_growth,
    decay,
    exponential_decay,
    exponential_growth,
    growth,
    linear_decay,
    linear_growth,
    logarithmic_growth,
    power_decay,
    power_growth,
    quadratic_decay,
    root_growth,
)


class TestClampToBaseline:
    """The baseline clamp used by every decay."""

    def test_from_above(self):
        """Starting above baseline, results cannot drop below it."""
        assert clamp_to_baseline(10.0, 0.5, 1.0) == 1.0
        assert clamp_to_baseline(10.0, 5.0, 1.0) == 5.0

    def test_from_below(self):
        """Starting below baseline, results cannot rise above it."""
        assert clamp_to_baseline(0.0, 3.0, 1.0) == 1.0
        assert clamp_to_baseline(0.0, 0.5, 1.0) == 0.5

    def test_nan_passes_through(self):
        """An undefined update stays undefined rather than snapping to baseline."""
        assert math.isnan(clamp_to_baseline(10.0, math.nan, 1.0))


class TestLinearDecay:
    """Closed-form linear decay."""

    def test_steps_toward_baseline(self, decaying_attribute):
        """Slope 1, step 1: 10 -> 9 -> 8."""
        update = linear_decay(slope=1)
        once = update(decaying_attribute, 1)
        twice = update(once, 1)

        assert once.progression == 9
        assert twice.progression == 8
        assert decaying_attribute.progression == 10

    def test_clamps_at_baseline(self, decaying_attribute):
        """Slope 10, step 3 would overshoot to -20; it stops at baseline 1."""
        result = linear_decay(slope=10)(decaying_attribute, 3)
        assert result.progression == 1

    def test_idempotent_at_baseline(self):
        """Decay at baseline leaves progression unchanged."""
        attribute = Attribute(progression=1.0, baseline=1.0)
        result = linear_decay(slope=5)(attribute, 2)
        assert result.progression == 1.0
        assert linear_decay(slope=5)(result, 2).progression == 1.0

    def test_rises_from_below(self):
        """Below baseline, decay moves progression up."""
        attribute = Attribute(progression=0.0, baseline=5.0)
        assert linear_decay(slope=2)(attribute, 1).progression == 2.0
        assert linear_decay(slope=2)(attribute, 10).progression == 5.0

    def test_step_sign_is_ignored(self, decaying_attribute):
        """A negative step still moves toward baseline."""
        assert linear_decay(slope=1)(decaying_attribute, -1).progression == 9

    def test_preserves_baseline_and_levels(self, decaying_attribute):
        """Only progression changes."""
        result = linear_decay(slope=1)(decaying_attribute, 1)
        assert result.baseline == decaying_attribute.baseline
        assert result.level_system is decaying_attribute.level_system


class TestLinearClosedForms:
    """Linear closed forms agree with the curve-pair construction."""

    @pytest.mark.parametrize(
        "progression,baseline,coefficient,step",
        [
            (10.0, 1.0, 1.0, 1.0),
            (10.0, 1.0, 2.0, -4.0),
            (2.0, 8.0, 0.5, 20.0),
            (2.0, 8.0, -2.0, 3.0),
            (25.0, 5.0, -0.75, -10.0),
        ],
    )
    def test_growth_matches_linear_pair(self, progression, baseline, coefficient, step):
        """linear_growth(c) equals growth(linear(c)), baseline or not."""
        attribute = Attribute(progression=progression, baseline=baseline)
        expected = growth(linear(coefficient))(attribute, step).progression
        assert linear_growth(coefficient)(attribute, step).progression == pytest.approx(expected)

    @pytest.mark.parametrize(
        "progression,baseline,slope,step",
        [
            (10.0, 1.0, 1.0, 1.0),
            (10.0, 1.0, 1.0, 20.0),
            (10.0, 1.0, -2.0, 3.0),
            (10.0, 1.0, 0.5, -4.0),
            (2.0, 8.0, 1.0, 3.0),
            (2.0, 8.0, 1.0, 10.0),
            (2.0, 8.0, -2.0, 1.0),
            (2.0, 8.0, -2.0, 5.0),
            (4.0, 4.0, 3.0, 2.0),
        ],
    )
    def test_decay_matches_linear_pair(self, progression, baseline, slope, step):
        """linear_decay(s) equals decay(linear(s)) above, below and across the baseline."""
        attribute = Attribute(progression=progression, baseline=baseline)
        expected = decay(linear(slope))(attribute, step).progression
        assert linear_decay(slope)(attribute, step).progression == pytest.approx(expected)

    def test_zero_slope_decay_is_a_no_op(self, decaying_attribute):
        """A flat slope leaves progression where it is."""
        assert linear_decay(slope=0)(decaying_attribute, 5).progression == 10.0


class TestQuadraticDecay:
    """Closed-form quadratic decay."""

    def test_scenario(self, decaying_attribute):
        """a=1, b=0: step 2 gives (sqrt(10) - 2)^2, then step 1 clamps to baseline."""
        update = quadratic_decay(a=1, b=0)

        first = update(decaying_attribute, 2)
        assert first.progression == pytest.approx((math.sqrt(10) - 2) ** 2)
        assert first.progression == pytest.approx(1.3509, abs=1e-4)

        second = update(first, 1)
        assert second.progression == pytest.approx(1.0)

    def test_matches_general_decay(self):
        """Closed form equals decay(quadratic(a, b)) within tolerance."""
        closed_form = quadratic_decay(a=0.5, b=2)
        general = decay(quadratic(0.5, 2))

        for progression in [0.5, 3.0, 4.0, 12.0, 40.0]:
            attribute = Attribute(progression=progression, baseline=4.0)
            for step in [0.25, 1.0, 3.0]:
                expected = general(attribute, step).progression
                assert closed_form(attribute, step).progression == pytest.approx(expected)

    def test_rises_from_below(self):
        """Below baseline, time moves forward until it reaches the baseline."""
        attribute = Attribute(progression=1.0, baseline=9.0)
        update = quadratic_decay(a=1)
        assert update(attribute, 1).progression == pytest.approx(4.0)
        assert update(attribute, 5).progression == 9.0

    def test_large_step_does_not_wrap_past_vertex(self, decaying_attribute):
        """Stepping past x=0 on a parabola still stops at baseline."""
        result = quadratic_decay(a=1)(decaying_attribute, 20)
        assert result.progression == 1.0

    def test_zero_a_is_linear(self, decaying_attribute):
        """a = 0 decays linearly with slope b."""
        assert quadratic_decay(a=0, b=2)(decaying_attribute, 1).progression == 8.0


class TestGeneralDecay:
    """Decay through arbitrary curve pairs."""

    def test_never_overshoots_and_converges(self):
        """Repeated exponential decay approaches baseline and then stays there."""
        update = exponential_decay(a=2.0)
        attribute = Attribute(progression=50.0, baseline=3.0)

        history = []
        for _ in range(10):
            attribute = update(attribute, 0.7)
            history.append(attribute.progression)

        assert all(value >= 3.0 for value in history)
        assert history == sorted(history, reverse=True)
        assert history[-1] == 3.0

    def test_decreasing_curve(self):
        """A curve that falls with time still decays toward baseline."""
        update = decay(exponential(a=10.0, base=0.5))
        attribute = Attribute(progression=8.0, baseline=2.0)

        result = update(attribute, 1.0)
        assert 2.0 < result.progression < 8.0
        assert update(attribute, 50.0).progression == 2.0

    def test_undefined_baseline_time_falls_back_to_values(self):
        """With baseline 0 the exponential inverse is undefined; direction comes from values."""
        update = exponential_decay(a=2.0)
        attribute = Attribute(progression=8.0, baseline=0.0)

        result = update(attribute, 1.0)
        assert result.progression == pytest.approx(8.0 / math.e)

    def test_undefined_progression_stays_nan(self):
        """Progression outside the curve's domain produces NaN, not an error."""
        attribute = Attribute(progression=-4.0, baseline=1.0)
        result = power_decay(a=1, p=2)(attribute, 1.0)
        assert result.is_defined is False

    def test_power_decay_matches_quadratic(self, decaying_attribute):
        """x^2 power decay matches a=1 quadratic decay."""
        expected = quadratic_decay(a=1)(decaying_attribute, 2).progression
        assert power_decay(a=1, p=2)(decaying_attribute, 2).progression == pytest.approx(expected)


class TestGrowth:
    """Growth is never clamped."""

    def test_quadratic_growth(self):
        """Progression 4 on x^2 is time 2; one step forward is 9."""
        attribute = Attribute(progression=4.0, baseline=0.0)
        assert growth(quadratic(1))(attribute, 1).progression == pytest.approx(9.0)

    def test_growth_ignores_baseline(self):
        """Growth crosses the baseline in either direction."""
        update = growth(quadratic(1))
        above = Attribute(progression=4.0, baseline=1.0)
        below = Attribute(progression=4.0, baseline=5.0)

        assert update(above, 3).progression == pytest.approx(25.0)
        assert update(below, -1).progression == pytest.approx(1.0)

    def test_linear_growth_unclamped(self):
        """Linear growth adds coefficient * step, whatever the baseline."""
        attribute = Attribute(progression=10.0, baseline=20.0)
        assert linear_growth(coefficient=2)(attribute, 10).progression == 30.0
        assert linear_growth(coefficient=2)(attribute, -10).progression == -10.0

    def test_logarithmic_growth(self):
        """Progression 1 on ln(x) is time e; one step forward is ln(e + 1)."""
        attribute = Attribute(progression=1.0)
        result = logarithmic_growth(a=1)(attribute, 1)
        assert result.progression == pytest.approx(math.log(math.e + 1))

    def test_root_growth(self):
        """Progression 3 on sqrt(x) is time 9; seven steps forward is 4."""
        attribute = Attribute(progression=3.0)
        assert root_growth(a=1, r=2)(attribute, 7).progression == pytest.approx(4.0)

    def test_exponential_growth(self):
        """Progression 4 on 2^x is time 2; one step forward is 8."""
        attribute = Attribute(progression=4.0)
        assert exponential_growth(a=1, base=2)(attribute, 1).progression == pytest.approx(8.0)

    def test_power_growth(self):
        """Progression 4 on x^2 is time 2; one step forward is 9."""
        attribute = Attribute(progression=4.0)
        assert power_growth(a=1, p=2)(attribute, 1).progression == pytest.approx(9.0)


class TestConstantVariants:
    """Constant-step variants equal the general form at the bound step."""

    @pytest.fixture
    def attributes(self):
        """Attributes above, below and at their baselines."""
        return [
            Attribute(progression=10.0, baseline=1.0),
            Attribute(progression=0.5, baseline=4.0),
            Attribute(progression=3.0, baseline=3.0),
        ]

    def test_growth(self, attributes):
        """constant_growth binds the step of a root growth."""
        pair = root(2.0, 2.0)
        for attribute in attributes:
            assert constant_growth(pair, 1.5)(attribute) == growth(pair)(attribute, 1.5)

    def test_decay(self, attributes):
        """constant_decay binds the step of an exponential decay."""
        pair = exponential(1.5)
        for attribute in attributes:
            assert constant_decay(pair, 0.4)(attribute) == decay(pair)(attribute, 0.4)

    def test_linear(self, attributes):
        """Constant linear growth and decay match their two-argument forms."""
        for attribute in attributes:
            assert constant_linear_growth(3, 2)(attribute) == linear_growth(3)(attribute, 2)
            assert constant_linear_decay(3, 2)(attribute) == linear_decay(3)(attribute, 2)

    def test_quadratic_decay(self, attributes, decaying_attribute):
        """Constant quadratic decay matches the closed form and the known scenario."""
        for attribute in attributes:
            assert constant_quadratic_decay(1, 0.5, 2)(attribute) == quadratic_decay(1, 0.5)(
                attribute, 2
            )
        assert constant_quadratic_decay(1, 0, 2)(decaying_attribute).progression == pytest.approx(
            1.3509, abs=1e-4
        )

    def test_logarithmic_and_root(self, attributes):
        """Constant convenience curves match their two-argument forms."""
        for attribute in attributes:
            assert constant_logarithmic_growth(1, math.e, 1)(attribute) == logarithmic_growth(1)(
                attribute, 1
            )
            assert constant_root_growth(1, 2, 7)(attribute) == root_growth(1, 2)(attribute, 7)
