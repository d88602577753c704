import pytest

from scenario_valuation.domain.types import ValuationInputs
from scenario_valuation.narrative.tone import assess_tones
from scenario_valuation.narrative.tone import classify_forward
from scenario_valuation.narrative.tone import classify_leverage
from scenario_valuation.narrative.tone import classify_valuation
from scenario_valuation.narrative.tone import compute_upside
from scenario_valuation.narrative.tone import ForwardTone
from scenario_valuation.narrative.tone import LeverageTone
from scenario_valuation.narrative.tone import ValuationTone
from scenario_valuation.run import run_valuation
from scenario_valuation.scenarios.config import ToneThresholds


class TestComputeUpside:
  """Tests for compute_upside."""

  def test_upside_and_downside(self):
    assert compute_upside(130.0, 100.0) == pytest.approx(0.3)
    assert compute_upside(80.0, 100.0) == pytest.approx(-0.2)

  def test_zero_price(self):
    assert compute_upside(130.0, 0.0) == 0.0


class TestClassifyValuation:
  """Tests for classify_valuation."""

  @pytest.mark.parametrize('upside,expected', [
      (0.3, ValuationTone.UNDERVALUED),
      (0.1500001, ValuationTone.UNDERVALUED),
      (0.15, ValuationTone.IN_LINE),
      (0.0, ValuationTone.IN_LINE),
      (-0.15, ValuationTone.IN_LINE),
      (-0.1500001, ValuationTone.RICH),
      (-0.5, ValuationTone.RICH),
  ])
  def test_brackets(self, upside, expected):
    """Bounds are strict on both sides."""
    assert classify_valuation(upside) is expected

  def test_custom_threshold(self):
    thresholds = ToneThresholds(upside=0.05)

    assert classify_valuation(0.1, thresholds) is ValuationTone.UNDERVALUED
    assert classify_valuation(-0.1, thresholds) is ValuationTone.RICH


class TestClassifyLeverage:
  """Tests for classify_leverage."""

  @pytest.mark.parametrize('ratio,expected', [
      (4.0, LeverageTone.ELEVATED),
      (3.0001, LeverageTone.ELEVATED),
      (3.0, LeverageTone.MANAGEABLE),
      (2.0, LeverageTone.MANAGEABLE),
      (1.5001, LeverageTone.MANAGEABLE),
      (1.5, LeverageTone.CONSERVATIVE),
      (0.0, LeverageTone.CONSERVATIVE),
      (-1.0, LeverageTone.CONSERVATIVE),
  ])
  def test_brackets(self, ratio, expected):
    assert classify_leverage(ratio) is expected


class TestClassifyForward:
  """Tests for classify_forward."""

  def test_strictly_greater_improves(self):
    assert classify_forward(0.5, 0.3) is ForwardTone.IMPROVING

  def test_equal_is_constrained(self):
    assert classify_forward(0.3, 0.3) is ForwardTone.CONSTRAINED

  def test_lower_is_constrained(self):
    assert classify_forward(0.1, 0.3) is ForwardTone.CONSTRAINED


class TestAssessTones:
  """Tests for assess_tones."""

  def test_reference_company(self, reference_inputs):
    tones = assess_tones(reference_inputs, run_valuation(reference_inputs))

    assert tones.valuation is ValuationTone.UNDERVALUED
    assert tones.leverage is LeverageTone.CONSERVATIVE
    assert tones.forward is ForwardTone.CONSTRAINED
    assert tones.current_upside == pytest.approx(0.3)
    assert tones.forward_upside == pytest.approx(0.3)

  def test_deleveraging_company(self, deleveraging_inputs):
    """Forward base 149 vs. current base 130 improves the outlook."""
    tones = assess_tones(deleveraging_inputs,
                         run_valuation(deleveraging_inputs))

    assert tones.forward is ForwardTone.IMPROVING
    assert tones.forward_upside == pytest.approx(0.49)

  def test_exact_in_line_boundary(self):
    """Base implied price of exactly 115 on a $100 stock is in line."""
    inputs = {
        'sharePrice': 100,
        'sharesOutstanding': 100,
        'netDebt': 0,
        'ebitda': 1150,
        'baseMultiple': 10,
    }
    tones = assess_tones(ValuationInputs.from_mapping(inputs),
                         run_valuation(inputs))

    assert tones.current_upside == 0.15
    assert tones.valuation is ValuationTone.IN_LINE

  def test_distressed_company(self, distressed_inputs):
    tones = assess_tones(distressed_inputs, run_valuation(distressed_inputs))

    assert tones.valuation is ValuationTone.RICH
    assert tones.leverage is LeverageTone.ELEVATED
