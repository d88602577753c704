"""
Tone classification for the analyst summary.

Each tone is decided independently from the computed metrics and returned
as an enum, so the branching logic can be checked without parsing prose.
The wording for each value lives on the enum itself.
"""

from dataclasses import dataclass
import enum
from typing import Optional

from scenario_valuation.domain.types import ValuationInputs
from scenario_valuation.domain.types import ValuationResult
from scenario_valuation.numeric import safe_divide
from scenario_valuation.scenarios.config import ToneThresholds


class ValuationTone(enum.Enum):
  UNDERVALUED = (
      'appears undervalued versus our base-case intrinsic value estimate')
  RICH = 'screens rich relative to our base-case valuation framework'
  IN_LINE = 'appears broadly in line with our base-case fair value estimate'


class LeverageTone(enum.Enum):
  ELEVATED = (
      'Balance sheet leverage remains elevated and should be monitored '
      'closely.')
  MANAGEABLE = (
      'Leverage is manageable but remains a relevant equity risk factor.')
  CONSERVATIVE = 'Balance sheet leverage appears conservative.'


class ForwardTone(enum.Enum):
  IMPROVING = (
      'Forward valuation improves as projected EBITDA expansion and debt '
      'reduction support equity accretion.')
  CONSTRAINED = (
      'Forward valuation remains constrained, suggesting limited re-rating '
      'without stronger operating delivery.')


@dataclass(frozen=True)
class NarrativeTones:
  '''
  Tones selected for one valuation.

  Attributes:
    valuation: Current base case vs. market price
    leverage: Net debt/EBITDA bracket
    forward: Forward base case vs. current base case
    current_upside: (current base price - price) / price
    forward_upside: (forward base price - price) / price
  '''
  valuation: ValuationTone
  leverage: LeverageTone
  forward: ForwardTone
  current_upside: float
  forward_upside: float


def compute_upside(implied_price: float, current_price: float) -> float:
  """Upside (positive) or downside (negative) of implied vs. current price."""
  return safe_divide(implied_price - current_price, current_price)


def classify_valuation(
    upside: float,
    thresholds: Optional[ToneThresholds] = None,
) -> ValuationTone:
  """
  Pick the valuation tone from base-case upside.

  Both bounds are strict: an upside of exactly +/-threshold is in line.
  """
  if thresholds is None:
    thresholds = ToneThresholds()
  if upside > thresholds.upside:
    return ValuationTone.UNDERVALUED
  if upside < -thresholds.upside:
    return ValuationTone.RICH
  return ValuationTone.IN_LINE


def classify_leverage(
    net_debt_to_ebitda: float,
    thresholds: Optional[ToneThresholds] = None,
) -> LeverageTone:
  """
  Pick the leverage tone from net debt/EBITDA.

  Brackets are (elevated, inf), (manageable, elevated], (-inf, manageable];
  a ratio of exactly 1.5 is conservative under the defaults.
  """
  if thresholds is None:
    thresholds = ToneThresholds()
  if net_debt_to_ebitda > thresholds.elevated_leverage:
    return LeverageTone.ELEVATED
  if net_debt_to_ebitda > thresholds.manageable_leverage:
    return LeverageTone.MANAGEABLE
  return LeverageTone.CONSERVATIVE


def classify_forward(forward_upside: float,
                     current_upside: float) -> ForwardTone:
  """Improving only when forward upside is strictly above current upside."""
  if forward_upside > current_upside:
    return ForwardTone.IMPROVING
  return ForwardTone.CONSTRAINED


def assess_tones(
    inputs: ValuationInputs,
    result: ValuationResult,
    thresholds: Optional[ToneThresholds] = None,
) -> NarrativeTones:
  """
  Compute all three tones for a valuation.

  Args:
    inputs: Sanitized inputs (share price is the reference point)
    result: Output of run_valuation for the same inputs
    thresholds: Tone thresholds (default: ToneThresholds())

  Returns:
    NarrativeTones with the selected tones and the upside figures
  """
  current_upside = compute_upside(result.current.implied_share_prices.base,
                                  inputs.share_price)
  forward_upside = compute_upside(result.forward.implied_share_prices.base,
                                  inputs.share_price)
  return NarrativeTones(
      valuation=classify_valuation(current_upside, thresholds),
      leverage=classify_leverage(result.current.net_debt_to_ebitda,
                                 thresholds),
      forward=classify_forward(forward_upside, current_upside),
      current_upside=current_upside,
      forward_upside=forward_upside,
  )
