"""
EV/EBITDA multiple sensitivity analysis.

Evaluates the implied share price across a range of multiples while
holding the forward operating base (forward EBITDA and forward net debt)
fixed. The series is fully materialized so charting code can index it
and knows its length up front.

CLI Usage:
  python -m scenario_valuation.analysis.sensitivity \\
      --forward-ebitda 1650000000 \\
      --forward-net-debt 1600000000 \\
      --shares-outstanding 100000000 \\
      --min-multiple 5 --max-multiple 15 --step 0.5
"""

import argparse
import logging
import math
from pathlib import Path
from typing import Any, List, Optional

import pandas as pd

from scenario_valuation.domain.types import SensitivityPoint
from scenario_valuation.domain.types import ValuationResult
from scenario_valuation.engine.forward import compute_forward_implied_share_price
from scenario_valuation.formatting import format_currency
from scenario_valuation.formatting import format_multiple
from scenario_valuation.numeric import to_number
from scenario_valuation.scenarios.config import SweepConfig

logger = logging.getLogger(__name__)

# Slack on the step count: 0.3 / 0.1 is 2.9999999999999996, not 3.
_STEP_EPSILON = 1e-9


def generate_multiple_sensitivity(
    forward_ebitda: Any,
    forward_net_debt: Any,
    shares_outstanding: Any,
    min_multiple: Any = 5.0,
    max_multiple: Any = 15.0,
    step: Any = 0.5,
) -> List[SensitivityPoint]:
  """
  Generate implied share price as a function of the EV/EBITDA multiple.

  Multiples are produced by integer step count (min + i * step) rather
  than repeated addition, so the upper endpoint is hit exactly.

  Args:
    forward_ebitda: Forward EBITDA the multiples are applied to
    forward_net_debt: Forward net debt bridged out of EV
    shares_outstanding: Share count
    min_multiple: First multiple (inclusive)
    max_multiple: Last multiple (inclusive)
    step: Spacing between multiples

  Returns:
    Points in ascending multiple order; empty if step <= 0,
    min_multiple > max_multiple, or the step count is not finite
  """
  low = to_number(min_multiple)
  high = to_number(max_multiple)
  increment = to_number(step)

  if increment <= 0 or low > high:
    logger.debug('Empty sweep: min=%s max=%s step=%s', low, high, increment)
    return []

  span = (high - low) / increment
  if not math.isfinite(span):
    logger.debug('Sweep too fine to enumerate: min=%s max=%s step=%s', low,
                 high, increment)
    return []

  ebitda = to_number(forward_ebitda)
  net_debt = to_number(forward_net_debt)
  shares = to_number(shares_outstanding)

  count = math.floor(span + _STEP_EPSILON)
  points = []
  for i in range(count + 1):
    multiple = round(low + i * increment, 4)
    points.append(
        SensitivityPoint(
            multiple=multiple,
            implied_share_price=compute_forward_implied_share_price(
                multiple, ebitda, net_debt, shares),
        ))
  return points


def sweep_from_result(
    result: ValuationResult,
    shares_outstanding: Any,
    sweep: Optional[SweepConfig] = None,
) -> List[SensitivityPoint]:
  """
  Run the sweep on the forward base of a valuation result.

  Args:
    result: Output of run_valuation
    shares_outstanding: Share count used for the valuation
    sweep: Multiple range (default: SweepConfig())

  Returns:
    Sensitivity series over the configured range
  """
  if sweep is None:
    sweep = SweepConfig()
  return generate_multiple_sensitivity(
      result.forward.forward_ebitda,
      result.forward.forward_net_debt,
      shares_outstanding,
      sweep.min_multiple,
      sweep.max_multiple,
      sweep.step,
  )


def sensitivity_frame(series: List[SensitivityPoint]) -> pd.DataFrame:
  """
  Convert a sensitivity series to a two-column DataFrame.

  Returns:
    DataFrame with 'multiple' and 'implied_share_price' columns
  """
  return pd.DataFrame(
      [(p.multiple, p.implied_share_price) for p in series],
      columns=['multiple', 'implied_share_price'],
  )


def main() -> None:
  """CLI entrypoint for multiple sensitivity analysis."""
  parser = argparse.ArgumentParser(
      description='EV/EBITDA Multiple Sensitivity',
      formatter_class=argparse.RawDescriptionHelpFormatter,
      epilog="""
Examples:
  python -m scenario_valuation.analysis.sensitivity \\
      --forward-ebitda 1.65e9 --forward-net-debt 1.6e9 \\
      --shares-outstanding 1e8

  python -m scenario_valuation.analysis.sensitivity \\
      --forward-ebitda 1.65e9 --forward-net-debt 1.6e9 \\
      --shares-outstanding 1e8 \\
      --min-multiple 8 --max-multiple 12 --step 0.25 \\
      --output sweep.csv
      """)

  parser.add_argument('--forward-ebitda',
                      type=float,
                      required=True,
                      help='Forward EBITDA')
  parser.add_argument('--forward-net-debt',
                      type=float,
                      required=True,
                      help='Forward net debt (negative for net cash)')
  parser.add_argument('--shares-outstanding',
                      type=float,
                      required=True,
                      help='Shares outstanding')
  parser.add_argument('--min-multiple',
                      type=float,
                      default=5.0,
                      help='First multiple (default: 5.0)')
  parser.add_argument('--max-multiple',
                      type=float,
                      default=15.0,
                      help='Last multiple (default: 15.0)')
  parser.add_argument('--step',
                      type=float,
                      default=0.5,
                      help='Multiple step (default: 0.5)')
  parser.add_argument('--output', type=Path, help='Output CSV path (optional)')
  parser.add_argument('--verbose',
                      '-v',
                      action='store_true',
                      help='Verbose output')

  args = parser.parse_args()

  logging.basicConfig(
      level=logging.DEBUG if args.verbose else logging.INFO,
      format='%(asctime)s [%(levelname)s] %(message)s',
      datefmt='%Y-%m-%d %H:%M:%S',
  )

  series = generate_multiple_sensitivity(
      args.forward_ebitda,
      args.forward_net_debt,
      args.shares_outstanding,
      args.min_multiple,
      args.max_multiple,
      args.step,
  )
  if not series:
    logger.warning('No valid sweep for min=%s max=%s step=%s',
                   args.min_multiple, args.max_multiple, args.step)
    return

  table = sensitivity_frame(series)

  print('\n' + '=' * 40)
  print('Implied Share Price by EV/EBITDA')
  print('=' * 40)
  print(
      table.to_string(index=False,
                      formatters={
                          'multiple': format_multiple,
                          'implied_share_price': format_currency,
                      }))
  print('=' * 40 + '\n')

  if args.output:
    table.to_csv(args.output, index=False)
    logger.info('Saved to: %s', args.output)


if __name__ == '__main__':
  main()
