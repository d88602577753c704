import itertools

import pytest

from scenario_valuation.engine.multiples import compute_current_metrics
from scenario_valuation.engine.multiples import compute_enterprise_value
from scenario_valuation.engine.multiples import compute_ev_to_ebitda
from scenario_valuation.engine.multiples import compute_fcf_yield
from scenario_valuation.engine.multiples import compute_implied_share_price
from scenario_valuation.engine.multiples import compute_market_cap
from scenario_valuation.engine.multiples import compute_net_debt_to_ebitda
from scenario_valuation.engine.multiples import compute_scenario_prices


class TestRatios:
  """Tests for the current-period building blocks."""

  def test_market_cap_and_ev(self):
    market_cap = compute_market_cap(100.0, 100_000_000.0)

    assert market_cap == 10_000_000_000.0
    assert compute_enterprise_value(market_cap, 2e9) == 12_000_000_000.0

  def test_net_cash_reduces_ev(self):
    assert compute_enterprise_value(1_000.0, -300.0) == 700.0

  def test_zero_ebitda_ratios(self):
    """Zero EBITDA gives 0 instead of a division error."""
    assert compute_ev_to_ebitda(12e9, 0.0) == 0.0
    assert compute_net_debt_to_ebitda(2e9, 0.0) == 0.0

  def test_zero_market_cap_fcf_yield(self):
    assert compute_fcf_yield(8e8, 0.0) == 0.0


class TestComputeImpliedSharePrice:
  """Tests for compute_implied_share_price."""

  def test_base_case(self):
    """(10 x 1.5B - 2B) / 100M = 130."""
    price = compute_implied_share_price(10.0, 1.5e9, 2e9, 1e8)

    assert price == pytest.approx(130.0)

  def test_net_cash_adds_to_equity(self):
    """(10 x 100 + 50) / 10 = 105."""
    assert compute_implied_share_price(10.0, 100.0, -50.0, 10.0) == 105.0

  def test_negative_equity_floors_at_zero(self):
    """Net debt above implied EV yields exactly 0."""
    assert compute_implied_share_price(5.0, 100.0, 1_000.0, 10.0) == 0.0

  def test_zero_shares(self):
    assert compute_implied_share_price(10.0, 1.5e9, 2e9, 0.0) == 0.0

  @pytest.mark.parametrize(
      'multiple,ebitda,net_debt,shares',
      list(
          itertools.product([0.0, 4.0, 12.0], [-5e8, 0.0, 1.5e9],
                            [-1e9, 0.0, 2e9, 5e10], [0.0, 1.0, 1e8])))
  def test_never_negative(self, multiple, ebitda, net_debt, shares):
    price = compute_implied_share_price(multiple, ebitda, net_debt, shares)

    assert price >= 0.0
    if multiple * ebitda - net_debt < 0:
      assert price == 0.0


class TestComputeCurrentMetrics:
  """Tests for compute_current_metrics."""

  def test_reference_company(self, reference_inputs):
    """
    Manual calculation:
    Market cap = 100 x 100M = 10B
    EV = 10B + 2B = 12B; EV/EBITDA = 12B / 1.5B = 8.0x
    FCF yield = 0.8B / 10B = 8%; ND/EBITDA = 2B / 1.5B = 1.33x
    Bull = (12 x 1.5B - 2B) / 100M = 160
    Base = (10 x 1.5B - 2B) / 100M = 130
    Bear = (8 x 1.5B - 2B) / 100M = 100
    """
    metrics = compute_current_metrics(reference_inputs)

    assert metrics.market_cap == pytest.approx(10_000_000_000)
    assert metrics.enterprise_value == pytest.approx(12_000_000_000)
    assert metrics.ev_to_ebitda == pytest.approx(8.0)
    assert metrics.fcf_yield == pytest.approx(0.08)
    assert metrics.net_debt_to_ebitda == pytest.approx(4 / 3)
    assert metrics.implied_share_prices.bull == pytest.approx(160.0)
    assert metrics.implied_share_prices.base == pytest.approx(130.0)
    assert metrics.implied_share_prices.bear == pytest.approx(100.0)

  def test_distressed_company(self, distressed_inputs):
    metrics = compute_current_metrics(distressed_inputs)

    assert metrics.implied_share_prices.bull == 0.0
    assert metrics.implied_share_prices.base == 0.0
    assert metrics.implied_share_prices.bear == 0.0
    assert metrics.fcf_yield < 0
    assert metrics.net_debt_to_ebitda == pytest.approx(18.0)

  def test_unordered_multiples(self):
    """Scenario multiples are not required to be ordered."""
    prices = compute_scenario_prices(6.0, 10.0, 14.0, 100.0, 0.0, 10.0)

    assert prices.bull == 60.0
    assert prices.base == 100.0
    assert prices.bear == 140.0
