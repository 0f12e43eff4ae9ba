"""Tests for utility modules."""

import logging
import math

import numpy as np
import pytest

from kinecalc.core.errors import InvalidArgumentError
from kinecalc.utils.logging import configure_logging
from kinecalc.utils.units import convert
from kinecalc.utils.validation import (
    Severity,
    is_finite_real,
    require_number,
    require_sequence,
    validate_mass_table,
)


class TestUnits:
    def test_degree_to_radian(self):
        assert convert(180.0, "degree", "radian") == pytest.approx(math.pi)

    def test_mev_to_gev(self):
        assert convert(938.27, "MeV", "GeV") == pytest.approx(0.93827)


class TestNumberChecks:
    @pytest.mark.parametrize("value", [0, 1, -2.5, 1e300, np.float64(3.0), np.int64(2)])
    def test_finite_real(self, value):
        assert is_finite_real(value)

    @pytest.mark.parametrize(
        "value", [True, False, np.bool_(True), "1", None, math.nan, math.inf, 1j, [1]]
    )
    def test_not_finite_real(self, value):
        assert not is_finite_real(value)

    def test_require_number_returns_float(self):
        value = require_number("x", 3)
        assert value == 3.0
        assert isinstance(value, float)

    def test_require_number_message(self):
        with pytest.raises(InvalidArgumentError, match="'x'"):
            require_number("x", "three")

    def test_require_sequence(self):
        assert require_sequence("xs", (1, 2)) == [1.0, 2.0]

    def test_require_sequence_min_length(self):
        with pytest.raises(InvalidArgumentError, match="at least 2"):
            require_sequence("xs", [1], min_length=2)

    def test_require_sequence_bad_item(self):
        with pytest.raises(InvalidArgumentError, match=r"xs\[1\]"):
            require_sequence("xs", [1, None])


class TestValidation:
    def test_clean_table(self):
        result = validate_mass_table({"p": 938.27, "n": 939.57})
        assert result.is_valid
        assert not result.has_warnings

    def test_massless_is_info(self):
        result = validate_mass_table({"γ": 0.0})
        assert result.is_valid
        assert result.messages[0].severity == Severity.INFO

    def test_negative_is_warning(self):
        result = validate_mass_table({"x": -1.0})
        assert result.is_valid
        assert result.has_warnings

    def test_non_finite_is_error(self):
        result = validate_mass_table({"x": math.nan, "y": "heavy"})
        assert not result.is_valid
        assert {m.parameter for m in result.errors} == {"x", "y"}

    def test_non_string_key(self):
        result = validate_mass_table({1: 938.27})
        assert not result.is_valid


class TestLogging:
    def test_configure_is_idempotent(self):
        configure_logging("WARNING")
        handlers = list(logging.getLogger().handlers)
        configure_logging(logging.DEBUG)
        assert logging.getLogger().handlers == handlers
        assert logging.getLogger().level == logging.DEBUG
        configure_logging("WARNING")

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="LOUD"):
            configure_logging("LOUD")

