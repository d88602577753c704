"""
Analyst summary rendering.

Pure string composition over already computed figures; the only decisions
made here are the ones carried in NarrativeTones.
"""

from typing import Any, Mapping, Optional, Union

from scenario_valuation.domain.types import ValuationInputs
from scenario_valuation.domain.types import ValuationResult
from scenario_valuation.formatting import format_currency
from scenario_valuation.formatting import format_multiple
from scenario_valuation.formatting import format_percent
from scenario_valuation.narrative.tone import assess_tones
from scenario_valuation.narrative.tone import NarrativeTones
from scenario_valuation.scenarios.config import ToneThresholds


def render_summary(
    inputs: ValuationInputs,
    result: ValuationResult,
    tones: NarrativeTones,
    subject: str = 'the stock',
) -> str:
  """
  Render the analyst summary paragraph.

  Args:
    inputs: Sanitized inputs (price and growth/paydown assumptions)
    result: Valuation result for the same inputs
    tones: Tones chosen by assess_tones
    subject: How the valued security is referred to in the first sentence

  Returns:
    Single paragraph of prose
  """
  current = result.current
  forward = result.forward
  prices = current.implied_share_prices
  forward_prices = forward.implied_share_prices

  sentences = [
      (f'At {format_currency(inputs.share_price)}, {subject} implies a '
       f'current equity value of {format_currency(current.market_cap, 0)} '
       f'and enterprise value of '
       f'{format_currency(current.enterprise_value, 0)}, or '
       f'{format_multiple(current.ev_to_ebitda)} EV/EBITDA.'),
      (f'The company screens at an implied '
       f'{format_percent(current.fcf_yield)} FCF yield with net leverage of '
       f'{format_multiple(current.net_debt_to_ebitda)}.'),
      (f'Current scenario valuation spans {format_currency(prices.bear)} '
       f'(bear) to {format_currency(prices.bull)} (bull), with a base-case '
       f'implied share price of {format_currency(prices.base)}, indicating '
       f'the stock {tones.valuation.value}.'),
      (f'On a forward basis, assuming {inputs.ebitda_growth_pct + 0.0:.1f}% '
       f'EBITDA growth and {inputs.debt_paydown_pct + 0.0:.1f}% debt paydown, '
       f'base-case implied value moves to '
       f'{format_currency(forward_prices.base)} '
       f'(bull {format_currency(forward_prices.bull)} / '
       f'bear {format_currency(forward_prices.bear)}).'),
      tones.forward.value,
      tones.leverage.value,
  ]
  return ' '.join(sentences)


def generate_analyst_summary(
    inputs: Union[ValuationInputs, Mapping[str, Any]],
    result: ValuationResult,
    thresholds: Optional[ToneThresholds] = None,
) -> str:
  """
  Build the analyst summary for a valuation.

  Args:
    inputs: ValuationInputs, or a raw mapping that is sanitized first
    result: Output of run_valuation for the same inputs
    thresholds: Tone thresholds (default: ToneThresholds())

  Returns:
    Summary paragraph
  """
  if not isinstance(inputs, ValuationInputs):
    inputs = ValuationInputs.from_mapping(inputs)
  tones = assess_tones(inputs, result, thresholds)
  return render_summary(inputs, result, tones)
