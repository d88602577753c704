import math

import pytest

from scenario_valuation.numeric import safe_divide
from scenario_valuation.numeric import to_number


class TestToNumber:
  """Tests for to_number."""

  @pytest.mark.parametrize('value,expected', [
      (12, 12.0),
      (12.5, 12.5),
      (-3, -3.0),
      ('12.5', 12.5),
      ('  7 ', 7.0),
      ('1e3', 1000.0),
      (True, 1.0),
      (False, 0.0),
  ])
  def test_numeric_values(self, value, expected):
    """Numbers, numeric strings and booleans coerce to floats."""
    assert to_number(value) == expected

  @pytest.mark.parametrize('value', [
      None,
      '',
      '   ',
      'abc',
      '12abc',
      '1_000',
      '0x1A',
      float('nan'),
      float('inf'),
      float('-inf'),
      'nan',
      'inf',
      [1],
      {'a': 1},
      object(),
  ])
  def test_invalid_values_become_zero(self, value):
    """Missing, non-numeric and non-finite values become 0."""
    result = to_number(value)
    assert result == 0.0
    assert math.isfinite(result)

  def test_returns_float(self):
    """Integers come back as floats."""
    assert isinstance(to_number(3), float)


class TestSafeDivide:
  """Tests for safe_divide."""

  def test_normal_division(self):
    assert safe_divide(12.0, 1.5) == pytest.approx(8.0)
    assert safe_divide(-3, 4) == -0.75

  @pytest.mark.parametrize('numerator', [0.0, 1.0, -5.0, 1e12])
  def test_zero_denominator(self, numerator):
    """Any finite numerator over zero is 0."""
    assert safe_divide(numerator, 0) == 0.0

  def test_negative_zero_denominator(self):
    assert safe_divide(10.0, -0.0) == 0.0

  def test_non_finite_denominator(self):
    """Non-finite denominators sanitize to 0 and short-circuit."""
    assert safe_divide(10.0, float('inf')) == 0.0
    assert safe_divide(10.0, float('nan')) == 0.0
    assert safe_divide(10.0, None) == 0.0

  def test_non_finite_numerator(self):
    assert safe_divide(float('nan'), 2.0) == 0.0

  def test_string_operands(self):
    assert safe_divide('9', '3') == 3.0
