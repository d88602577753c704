"""
Single-step forward projection.

Growth and paydown inputs are percentages (10 means 10%). The forward base
is derived from the current EBITDA and net debt directly; it is not
compounded from the current scenario prices.
"""

from scenario_valuation.domain.types import ForwardMetrics
from scenario_valuation.domain.types import ValuationInputs
from scenario_valuation.engine.multiples import compute_implied_share_price
from scenario_valuation.engine.multiples import compute_scenario_prices


def compute_forward_ebitda(current_ebitda: float,
                           ebitda_growth_pct: float = 0.0) -> float:
  """EBITDA after one period of growth; negative growth is a decline."""
  return current_ebitda * (1.0 + ebitda_growth_pct / 100.0)


def compute_forward_net_debt(current_net_debt: float,
                             debt_paydown_pct: float = 0.0) -> float:
  """
  Net debt after one period of paydown.

  A paydown above 100% leaves a net cash position (negative net debt),
  which is kept as is. A negative paydown increases debt.
  """
  return current_net_debt * (1.0 - debt_paydown_pct / 100.0)


def compute_forward_implied_share_price(
    multiple: float,
    forward_ebitda: float,
    forward_net_debt: float,
    shares_outstanding: float,
) -> float:
  """Implied share price on the forward base, floored at 0."""
  return compute_implied_share_price(multiple, forward_ebitda,
                                     forward_net_debt, shares_outstanding)


def compute_forward_metrics(inputs: ValuationInputs) -> ForwardMetrics:
  """
  Project EBITDA and net debt one step and re-derive scenario prices.

  Args:
    inputs: Sanitized valuation inputs

  Returns:
    ForwardMetrics with projected EBITDA, net debt and scenario prices
  """
  forward_ebitda = compute_forward_ebitda(inputs.ebitda,
                                          inputs.ebitda_growth_pct)
  forward_net_debt = compute_forward_net_debt(inputs.net_debt,
                                              inputs.debt_paydown_pct)

  return ForwardMetrics(
      forward_ebitda=forward_ebitda,
      forward_net_debt=forward_net_debt,
      implied_share_prices=compute_scenario_prices(
          inputs.bull_multiple,
          inputs.base_multiple,
          inputs.bear_multiple,
          forward_ebitda,
          forward_net_debt,
          inputs.shares_outstanding,
      ),
  )
