'''
Single-company valuation entrypoint.

This module provides the main entry point for running valuations. It:
1. Sanitizes raw inputs into ValuationInputs
2. Computes current-period metrics and scenario prices
3. Projects EBITDA and net debt one step and re-prices the scenarios
4. Returns a ValuationResult

Usage:
  from scenario_valuation.run import run_valuation

  result = run_valuation({
      'sharePrice': 100,
      'sharesOutstanding': 100_000_000,
      'netDebt': 2_000_000_000,
      'ebitda': 1_500_000_000,
      'freeCashFlow': 800_000_000,
      'bullMultiple': 12,
      'baseMultiple': 10,
      'bearMultiple': 8,
  })
  print(f"Base: ${result.current.implied_share_prices.base:.2f}")
'''

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from scenario_valuation.analysis.sensitivity import sweep_from_result
from scenario_valuation.domain.types import ValuationInputs
from scenario_valuation.domain.types import ValuationResult
from scenario_valuation.engine.forward import compute_forward_metrics
from scenario_valuation.engine.multiples import compute_current_metrics
from scenario_valuation.formatting import format_currency
from scenario_valuation.formatting import format_multiple
from scenario_valuation.formatting import format_percent
from scenario_valuation.narrative.summary import generate_analyst_summary
from scenario_valuation.scenarios.config import get_config
from scenario_valuation.scenarios.config import PRESETS
from scenario_valuation.scenarios.config import ValuationConfig

logger = logging.getLogger(__name__)


def run_valuation(
    inputs: Union[ValuationInputs, Mapping[str, Any]]) -> ValuationResult:
  '''
  Run the current and forward valuation for one set of inputs.

  Forward metrics are computed from the current EBITDA and net debt plus
  the growth/paydown percentages, independent of the current scenario
  prices. Invalid numbers degrade to 0; this never raises on bad input.

  Args:
    inputs: ValuationInputs, or a raw mapping (camelCase or snake_case)

  Returns:
    ValuationResult with current and forward metrics
  '''
  if not isinstance(inputs, ValuationInputs):
    inputs = ValuationInputs.from_mapping(inputs)

  if inputs.shares_outstanding == 0:
    logger.debug('Shares outstanding is 0, implied prices will be 0')
  if inputs.ebitda == 0:
    logger.debug('EBITDA is 0, EBITDA ratios will be 0')

  return ValuationResult(
      current=compute_current_metrics(inputs),
      forward=compute_forward_metrics(inputs),
  )


def load_inputs_json(path: Path) -> Dict[str, Any]:
  '''Load a raw inputs mapping from a JSON file.'''
  if not path.exists():
    raise FileNotFoundError(f'Inputs file not found: {path}')
  with open(path, 'r', encoding='utf-8') as f:
    data = json.load(f)
  if not isinstance(data, dict):
    raise ValueError(f'Inputs file must contain a JSON object: {path}')
  return data


_FIELD_FLAGS = {
    'share_price': 'Current share price',
    'shares_outstanding': 'Shares outstanding',
    'net_debt': 'Net debt (negative for net cash)',
    'ebitda': 'Current EBITDA',
    'free_cash_flow': 'Free cash flow',
    'bull_multiple': 'Bull case EV/EBITDA multiple',
    'base_multiple': 'Base case EV/EBITDA multiple',
    'bear_multiple': 'Bear case EV/EBITDA multiple',
    'ebitda_growth_pct': 'EBITDA growth in percent (10 = 10%%)',
    'debt_paydown_pct': 'Net debt paydown in percent',
}


def main() -> None:
  '''CLI entrypoint.'''
  parser = argparse.ArgumentParser(description='Run EV/EBITDA valuation')
  parser.add_argument('--inputs-json',
                      type=Path,
                      help='JSON file with inputs (flags override it)')
  for name, help_text in _FIELD_FLAGS.items():
    parser.add_argument(f'--{name.replace("_", "-")}',
                        dest=name,
                        type=float,
                        default=None,
                        help=help_text)
  parser.add_argument(
      '--preset',
      type=str,
      default='default',
      choices=sorted(PRESETS),
      help='Sweep/threshold preset',
  )
  parser.add_argument('--config-json',
                      type=Path,
                      help='JSON config file (overrides --preset)')
  args = parser.parse_args()

  raw: Dict[str, Any] = {}
  if args.inputs_json:
    raw.update(load_inputs_json(args.inputs_json))
  for name in _FIELD_FLAGS:
    value = getattr(args, name)
    if value is not None:
      raw[name] = value

  if raw:
    inputs = ValuationInputs.from_mapping(raw)
  else:
    logger.info('No inputs supplied, using the example company')
    inputs = ValuationInputs.example()

  if args.config_json:
    config = ValuationConfig.from_json(
        args.config_json.read_text(encoding='utf-8'))
  else:
    config = get_config(args.preset)

  result = run_valuation(inputs)
  current = result.current
  forward = result.forward

  separator = '=' * 70
  logger.info('\n%s', separator)
  logger.info('EV/EBITDA Valuation')
  logger.info('Config: %s', config.name)
  logger.info(separator)

  logger.info('\nCurrent Metrics:')
  logger.info('  Market Cap: %s', format_currency(current.market_cap, 0))
  logger.info('  Enterprise Value: %s',
              format_currency(current.enterprise_value, 0))
  logger.info('  EV/EBITDA: %s', format_multiple(current.ev_to_ebitda))
  logger.info('  FCF Yield: %s', format_percent(current.fcf_yield))
  logger.info('  Net Debt/EBITDA: %s',
              format_multiple(current.net_debt_to_ebitda))
  for scenario, price in current.implied_share_prices.to_dict().items():
    logger.info('  Implied (%s): %s', scenario, format_currency(price))

  logger.info('\nForward Metrics:')
  logger.info('  Forward EBITDA: %s', format_currency(forward.forward_ebitda,
                                                      0))
  logger.info('  Forward Net Debt: %s',
              format_currency(forward.forward_net_debt, 0))
  for scenario, price in forward.implied_share_prices.to_dict().items():
    logger.info('  Implied (%s): %s', scenario, format_currency(price))

  series = sweep_from_result(result, inputs.shares_outstanding, config.sweep)
  logger.info('\nMultiple Sensitivity (%d points):', len(series))
  for point in series:
    logger.info('  %s -> %s', format_multiple(point.multiple),
                format_currency(point.implied_share_price))

  logger.info('\nAnalyst Summary:')
  logger.info('%s', generate_analyst_summary(inputs, result,
                                             config.thresholds))
  logger.info('%s\n', separator)


if __name__ == '__main__':
  logging.basicConfig(
      level=logging.INFO,
      format='%(message)s',
  )
  main()
