"""
Tests for the inverse-transform sampler and parameter validators.
"""

import math
import random

import pytest

from helpers import ScriptedSource
from mmcsim.config import MAX_ZERO_DRAWS
from mmcsim.distributions import draw_open_unit, make_source, sample_exponential
from mmcsim.models import SimulationParameters
from mmcsim.validators import InvalidParameterError, validate_parameters


class TestSampleExponential:
    """Tests for sample_exponential."""

    def test_inverse_transform(self) -> None:
        r, value = sample_exponential(2.0, ScriptedSource([0.5]))
        assert r == 0.5
        assert value == pytest.approx(math.log(2.0) / 2.0)

    def test_draw_one_gives_zero(self) -> None:
        """ln(1) = 0, so the largest possible R maps to a zero sample."""
        _, value = sample_exponential(3.0, ScriptedSource([1.0]))
        assert value == 0.0

    def test_zero_draws_are_redrawn(self) -> None:
        src = ScriptedSource([0.0, 0.0, 0.25])
        r, value = sample_exponential(1.0, src)
        assert r == 0.25
        assert src.calls == 3
        assert math.isfinite(value)

    def test_endless_zeros_raise(self) -> None:
        with pytest.raises(RuntimeError, match="0.0"):
            draw_open_unit(ScriptedSource([0.0] * MAX_ZERO_DRAWS))

    @pytest.mark.parametrize("rate", [0.0, -1.0])
    def test_non_positive_rate(self, rate: float) -> None:
        with pytest.raises(InvalidParameterError) as exc:
            sample_exponential(rate, ScriptedSource([0.5]))
        assert exc.value.field == "rate"

    def test_sample_mean_close_to_inverse_rate(self) -> None:
        rng = random.Random(7)
        rate = 4.0
        samples = [sample_exponential(rate, rng)[1] for _ in range(20000)]
        assert sum(samples) / len(samples) == pytest.approx(1.0 / rate, rel=0.05)

    def test_seeded_source_is_reproducible(self) -> None:
        a, b = make_source(123), make_source(123)
        assert [sample_exponential(1.0, a) for _ in range(5)] == \
               [sample_exponential(1.0, b) for _ in range(5)]


class TestValidateParameters:
    """Tests for validate_parameters."""

    def test_valid(self, busy_params: SimulationParameters) -> None:
        validate_parameters(busy_params)

    @pytest.mark.parametrize("field,value", [
        ("arrival_rate", 0.0),
        ("arrival_rate", -2.0),
        ("service_rate", 0.0),
        ("num_servers", 0),
        ("num_servers", 2.0),
        ("num_servers", True),
        ("duration", 0.0),
        ("duration", float("nan")),
        ("duration", math.inf),
        ("arrival_rate", math.inf),
        ("service_rate", math.inf),
    ])
    def test_rejects_bad_field(self, field: str, value) -> None:
        kwargs = dict(arrival_rate=1.0, service_rate=1.0, num_servers=1, duration=10.0)
        kwargs[field] = value
        with pytest.raises(InvalidParameterError) as exc:
            validate_parameters(SimulationParameters(**kwargs))
        assert exc.value.field == field
        assert field in str(exc.value)

    def test_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            validate_parameters(SimulationParameters(1.0, 1.0, 1, -5.0))
