'''
Domain types for the scenario valuation engine.

These dataclasses provide typed, immutable interfaces between components.
Raw caller data is sanitized when ValuationInputs is built, whether through
from_mapping or directly, so the engine functions can rely on finite floats.
'''

from dataclasses import asdict
from dataclasses import dataclass
from dataclasses import fields
from dataclasses import MISSING
import logging
from typing import Any, Dict, Mapping

from scenario_valuation.numeric import to_number

logger = logging.getLogger(__name__)

# Field names used by the presentation layer, mapped to ours.
CAMEL_CASE_FIELDS: Dict[str, str] = {
    'sharePrice': 'share_price',
    'sharesOutstanding': 'shares_outstanding',
    'netDebt': 'net_debt',
    'ebitda': 'ebitda',
    'freeCashFlow': 'free_cash_flow',
    'bullMultiple': 'bull_multiple',
    'baseMultiple': 'base_multiple',
    'bearMultiple': 'bear_multiple',
    'ebitdaGrowthPct': 'ebitda_growth_pct',
    'debtPaydownPct': 'debt_paydown_pct',
}

_ZERO_TEXT = ('', '0', '0.0', '-0.0')


@dataclass(frozen=True)
class ValuationInputs:
  '''
  Operating and capital-structure assumptions for a single valuation date.

  Attributes:
    share_price: Current market price per share
    shares_outstanding: Shares outstanding
    net_debt: Net debt (negative means net cash)
    ebitda: Current EBITDA
    free_cash_flow: Current free cash flow
    bull_multiple: EV/EBITDA multiple for the bull scenario
    base_multiple: EV/EBITDA multiple for the base scenario
    bear_multiple: EV/EBITDA multiple for the bear scenario
    ebitda_growth_pct: One-step EBITDA growth in percent (10 means 10%)
    debt_paydown_pct: One-step net debt reduction in percent
  '''
  share_price: float
  shares_outstanding: float
  net_debt: float
  ebitda: float
  free_cash_flow: float
  bull_multiple: float
  base_multiple: float
  bear_multiple: float
  ebitda_growth_pct: float = 0.0
  debt_paydown_pct: float = 0.0

  def __post_init__(self):
    # Direct construction gets the same coercion as from_mapping.
    for f in fields(self):
      object.__setattr__(self, f.name, to_number(getattr(self, f.name)))

  @classmethod
  def from_mapping(cls, data: Mapping[str, Any]) -> 'ValuationInputs':
    '''
    Build sanitized inputs from a raw mapping.

    Accepts snake_case field names or the camelCase names used by the
    input form. Missing, empty, non-numeric and non-finite values all
    become 0.0; unknown keys are ignored. Never raises on bad values.

    Args:
      data: Mapping of field name to raw value

    Returns:
      ValuationInputs with every field a finite float
    '''
    normalized: Dict[str, Any] = {}
    for key, value in data.items():
      name = CAMEL_CASE_FIELDS.get(key, key)
      normalized[name] = value

    values = {}
    for f in fields(cls):
      raw = normalized.get(f.name)
      number = to_number(raw)
      if raw is None:
        if f.default is MISSING:
          logger.debug('%s not supplied, using 0', f.name)
      elif number == 0.0 and str(raw).strip() not in _ZERO_TEXT:
        logger.debug('Sanitized %s=%r to 0', f.name, raw)
      values[f.name] = number
    return cls(**values)

  @classmethod
  def example(cls) -> 'ValuationInputs':
    '''Reference company used as the input form's starting values.'''
    return cls(
        share_price=100.0,
        shares_outstanding=100_000_000.0,
        net_debt=2_000_000_000.0,
        ebitda=1_500_000_000.0,
        free_cash_flow=800_000_000.0,
        bull_multiple=12.0,
        base_multiple=10.0,
        bear_multiple=8.0,
        ebitda_growth_pct=0.0,
        debt_paydown_pct=0.0,
    )

  def to_dict(self) -> Dict[str, float]:
    '''Convert to dictionary.'''
    return asdict(self)


@dataclass(frozen=True)
class ScenarioPrices:
  '''
  Implied share price per scenario, each floored at zero.

  Attributes:
    bull: Implied price at the bull multiple
    base: Implied price at the base multiple
    bear: Implied price at the bear multiple
  '''
  bull: float
  base: float
  bear: float

  def to_dict(self) -> Dict[str, float]:
    '''Convert to dictionary.'''
    return asdict(self)


@dataclass(frozen=True)
class CurrentMetrics:
  '''
  Current-period valuation metrics.

  Attributes:
    market_cap: Share price x shares outstanding
    enterprise_value: Market cap + net debt
    ev_to_ebitda: Enterprise value / EBITDA (0 when EBITDA is 0)
    fcf_yield: Free cash flow / market cap, as a fraction
    net_debt_to_ebitda: Net debt / EBITDA
    implied_share_prices: Bull/base/bear prices on current EBITDA and net debt
  '''
  market_cap: float
  enterprise_value: float
  ev_to_ebitda: float
  fcf_yield: float
  net_debt_to_ebitda: float
  implied_share_prices: ScenarioPrices


@dataclass(frozen=True)
class ForwardMetrics:
  '''
  One-step forward metrics after growth and deleveraging assumptions.

  Attributes:
    forward_ebitda: EBITDA after applying the growth percentage
    forward_net_debt: Net debt after applying the paydown percentage
    implied_share_prices: Bull/base/bear prices on the forward base
  '''
  forward_ebitda: float
  forward_net_debt: float
  implied_share_prices: ScenarioPrices


@dataclass(frozen=True)
class SensitivityPoint:
  '''
  Single point of a multiple sensitivity sweep.

  Attributes:
    multiple: EV/EBITDA multiple, rounded to 4 decimal places
    implied_share_price: Implied price at that multiple, floored at zero
  '''
  multiple: float
  implied_share_price: float


@dataclass(frozen=True)
class ValuationResult:
  '''
  Complete valuation output for one set of inputs.

  Attributes:
    current: Current-period metrics
    forward: Forward (projected) metrics
  '''
  current: CurrentMetrics
  forward: ForwardMetrics

  def to_dict(self) -> Dict[str, float]:
    '''Flatten to a single row for DataFrame creation.'''
    current_prices = self.current.implied_share_prices
    forward_prices = self.forward.implied_share_prices
    return {
        'market_cap': self.current.market_cap,
        'enterprise_value': self.current.enterprise_value,
        'ev_to_ebitda': self.current.ev_to_ebitda,
        'fcf_yield': self.current.fcf_yield,
        'net_debt_to_ebitda': self.current.net_debt_to_ebitda,
        'implied_price_bull': current_prices.bull,
        'implied_price_base': current_prices.base,
        'implied_price_bear': current_prices.bear,
        'forward_ebitda': self.forward.forward_ebitda,
        'forward_net_debt': self.forward.forward_net_debt,
        'forward_implied_price_bull': forward_prices.bull,
        'forward_implied_price_base': forward_prices.base,
        'forward_implied_price_bear': forward_prices.bear,
    }
