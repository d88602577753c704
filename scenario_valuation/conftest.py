import pytest

from scenario_valuation.domain.types import ValuationInputs


@pytest.fixture
def reference_inputs() -> ValuationInputs:
  """Reference company: $100 stock, 100M shares, 2B net debt, 1.5B EBITDA."""
  return ValuationInputs.example()


@pytest.fixture
def reference_mapping() -> dict:
  """Reference company as the input form supplies it (camelCase)."""
  return {
      'sharePrice': 100,
      'sharesOutstanding': 100_000_000,
      'netDebt': 2_000_000_000,
      'ebitda': 1_500_000_000,
      'freeCashFlow': 800_000_000,
      'bullMultiple': 12,
      'baseMultiple': 10,
      'bearMultiple': 8,
      'ebitdaGrowthPct': 0,
      'debtPaydownPct': 0,
  }


@pytest.fixture
def deleveraging_inputs(reference_mapping) -> ValuationInputs:
  """Reference company with 10% EBITDA growth and 20% debt paydown."""
  data = dict(reference_mapping, ebitdaGrowthPct=10, debtPaydownPct=20)
  return ValuationInputs.from_mapping(data)


@pytest.fixture
def distressed_inputs() -> ValuationInputs:
  """Net debt larger than any scenario EV: every implied price floors at 0."""
  return ValuationInputs(
      share_price=5.0,
      shares_outstanding=10_000_000.0,
      net_debt=900_000_000.0,
      ebitda=50_000_000.0,
      free_cash_flow=-20_000_000.0,
      bull_multiple=9.0,
      base_multiple=7.0,
      bear_multiple=5.0,
  )
