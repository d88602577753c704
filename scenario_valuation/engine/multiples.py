"""
Current-period EV/EBITDA valuation.

Pure functions over finite floats. Inputs are expected to have been
sanitized by ValuationInputs.from_mapping; every ratio still goes through
safe_divide so a zero denominator yields 0 instead of raising.

Key functions:
  compute_current_metrics: Market cap, EV, ratios and scenario prices
  compute_implied_share_price: Multiple x EBITDA equity bridge per share
"""

from scenario_valuation.domain.types import CurrentMetrics
from scenario_valuation.domain.types import ScenarioPrices
from scenario_valuation.domain.types import ValuationInputs
from scenario_valuation.numeric import safe_divide


def compute_market_cap(share_price: float, shares_outstanding: float) -> float:
  """Market capitalization: price x shares outstanding."""
  return share_price * shares_outstanding


def compute_enterprise_value(market_cap: float, net_debt: float) -> float:
  """Enterprise value: market cap plus net debt (net cash reduces it)."""
  return market_cap + net_debt


def compute_ev_to_ebitda(enterprise_value: float, ebitda: float) -> float:
  return safe_divide(enterprise_value, ebitda)


def compute_fcf_yield(free_cash_flow: float, market_cap: float) -> float:
  return safe_divide(free_cash_flow, market_cap)


def compute_net_debt_to_ebitda(net_debt: float, ebitda: float) -> float:
  return safe_divide(net_debt, ebitda)


def compute_implied_share_price(
    multiple: float,
    ebitda: float,
    net_debt: float,
    shares_outstanding: float,
) -> float:
  """
  Implied share price from an EV/EBITDA multiple.

  implied EV = multiple x EBITDA
  implied equity = implied EV - net debt
  price = implied equity / shares, floored at 0

  Args:
    multiple: EV/EBITDA multiple
    ebitda: EBITDA the multiple is applied to
    net_debt: Net debt bridged out of EV
    shares_outstanding: Share count

  Returns:
    Implied price per share, never negative; 0 when shares is 0
  """
  implied_equity_value = multiple * ebitda - net_debt
  return max(0.0, safe_divide(implied_equity_value, shares_outstanding))


def compute_scenario_prices(
    bull_multiple: float,
    base_multiple: float,
    bear_multiple: float,
    ebitda: float,
    net_debt: float,
    shares_outstanding: float,
) -> ScenarioPrices:
  """Apply each scenario multiple to the same EBITDA and net debt."""
  return ScenarioPrices(
      bull=compute_implied_share_price(bull_multiple, ebitda, net_debt,
                                       shares_outstanding),
      base=compute_implied_share_price(base_multiple, ebitda, net_debt,
                                       shares_outstanding),
      bear=compute_implied_share_price(bear_multiple, ebitda, net_debt,
                                       shares_outstanding),
  )


def compute_current_metrics(inputs: ValuationInputs) -> CurrentMetrics:
  """
  Compute current-period valuation metrics.

  Args:
    inputs: Sanitized valuation inputs

  Returns:
    CurrentMetrics with ratios and scenario prices on current EBITDA
  """
  market_cap = compute_market_cap(inputs.share_price,
                                  inputs.shares_outstanding)
  enterprise_value = compute_enterprise_value(market_cap, inputs.net_debt)

  return CurrentMetrics(
      market_cap=market_cap,
      enterprise_value=enterprise_value,
      ev_to_ebitda=compute_ev_to_ebitda(enterprise_value, inputs.ebitda),
      fcf_yield=compute_fcf_yield(inputs.free_cash_flow, market_cap),
      net_debt_to_ebitda=compute_net_debt_to_ebitda(inputs.net_debt,
                                                    inputs.ebitda),
      implied_share_prices=compute_scenario_prices(
          inputs.bull_multiple,
          inputs.base_multiple,
          inputs.bear_multiple,
          inputs.ebitda,
          inputs.net_debt,
          inputs.shares_outstanding,
      ),
  )
