'''
Batch valuation for many input sets at once.

This module provides tools to:
1. Run valuations for every row of an inputs table
2. Compare scenario prices and tones across companies
3. Export results to CSV for further analysis

Usage (CLI):
  python -m scenario_valuation.analysis.batch_valuation \
    --inputs-csv inputs/coverage.csv \
    --output results/coverage_valuation.csv \
    -v

Usage (Python API):
  from scenario_valuation.analysis.batch_valuation import batch_valuation

  df = batch_valuation(pd.read_csv('inputs/coverage.csv'))
  df.to_csv('results.csv', index=False)

The inputs table has one column per ValuationInputs field, in snake_case
or camelCase. An optional 'ticker' or 'label' column is carried through.
'''

import argparse
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import pandas as pd

from scenario_valuation.domain.types import CAMEL_CASE_FIELDS
from scenario_valuation.domain.types import ValuationInputs
from scenario_valuation.domain.types import ValuationResult
from scenario_valuation.narrative.tone import assess_tones
from scenario_valuation.run import run_valuation
from scenario_valuation.scenarios.config import get_config
from scenario_valuation.scenarios.config import PRESETS
from scenario_valuation.scenarios.config import ValuationConfig

logger = logging.getLogger(__name__)

ID_COLUMNS = ('ticker', 'label')
REQUIRED_FIELDS = ('share_price', 'shares_outstanding', 'ebitda')


def _result_to_dict(
    inputs: ValuationInputs,
    result: ValuationResult,
    config: ValuationConfig,
) -> Dict[str, Any]:
  '''Convert inputs, result and tones to a flat dictionary row.'''
  tones = assess_tones(inputs, result, config.thresholds)
  row: Dict[str, Any] = dict(inputs.to_dict())
  row.update(result.to_dict())
  row.update({
      'current_upside': tones.current_upside,
      'forward_upside': tones.forward_upside,
      'valuation_tone': tones.valuation.name.lower(),
      'leverage_tone': tones.leverage.name.lower(),
      'forward_tone': tones.forward.name.lower(),
  })
  return row


def _check_columns(frame: pd.DataFrame) -> None:
  '''Raise if a required input column is missing under either naming.'''
  present = {CAMEL_CASE_FIELDS.get(c, c) for c in frame.columns}
  missing = [name for name in REQUIRED_FIELDS if name not in present]
  if missing:
    raise ValueError(f'Missing required input columns: {missing}')


def batch_valuation(
    frame: pd.DataFrame,
    config: Optional[ValuationConfig] = None,
    verbose: bool = False,
) -> pd.DataFrame:
  '''
  Run valuation for every row of an inputs DataFrame.

  Args:
    frame: One row per company; columns named after ValuationInputs
      fields (snake_case or camelCase)
    config: ValuationConfig (default: ValuationConfig.default())
    verbose: Log each row's base-case price and tone

  Returns:
    DataFrame with columns:
    - ticker / label: Carried through when present
    - config: Config name
    - all sanitized input fields
    - all ValuationResult.to_dict() fields
    - current_upside, forward_upside: Base case vs. share price
    - valuation_tone, leverage_tone, forward_tone: Tone names

  Raises:
    ValueError: If a required input column is missing
  '''
  if config is None:
    config = ValuationConfig.default()

  _check_columns(frame)

  rows = []
  for i, record in enumerate(frame.to_dict(orient='records'), 1):
    inputs = ValuationInputs.from_mapping(record)
    result = run_valuation(inputs)

    row: Dict[str, Any] = {
        column: record[column] for column in ID_COLUMNS if column in record
    }
    row['config'] = config.name
    row.update(_result_to_dict(inputs, result, config))
    rows.append(row)

    if verbose:
      label = row.get('ticker', row.get('label', i))
      logger.info('[%d/%d] %s: base=$%.2f (%s)', i, len(frame), label,
                  result.current.implied_share_prices.base,
                  row['valuation_tone'])

  return pd.DataFrame(rows)


def _print_summary(df: pd.DataFrame) -> None:
  '''Print summary statistics for batch valuation results.'''
  total = len(df)

  logger.info('')
  logger.info('=' * 70)
  logger.info('Summary Statistics')
  logger.info('=' * 70)
  logger.info('Total companies: %d', total)
  if total == 0:
    logger.info('=' * 70)
    return

  logger.info('')
  logger.info('EV/EBITDA:')
  logger.info('  Mean:   %.2fx', df['ev_to_ebitda'].mean())
  logger.info('  Median: %.2fx', df['ev_to_ebitda'].median())
  logger.info('')

  logger.info('Base-case upside:')
  logger.info('  Mean:   %.1f%%', df['current_upside'].mean() * 100)
  logger.info('  Median: %.1f%%', df['current_upside'].median() * 100)
  logger.info('')

  counts = df['valuation_tone'].value_counts()
  for tone, count in counts.items():
    logger.info('%s: %d / %d (%.1f%%)', tone, count, total,
                count / total * 100)

  undervalued = df[df['valuation_tone'] == 'undervalued']
  if len(undervalued) > 0 and 'ticker' in df.columns:
    logger.info('Top 5 by upside:')
    top5 = undervalued.nlargest(5, 'current_upside')
    for _, row in top5.iterrows():
      logger.info('  %s: base=$%.2f, price=$%.2f, upside=%.1f%%',
                  row['ticker'], row['implied_price_base'],
                  row['share_price'], row['current_upside'] * 100)

  logger.info('=' * 70)


def main() -> None:
  '''CLI entrypoint for batch valuation.'''
  parser = argparse.ArgumentParser(
      description='Batch EV/EBITDA valuation',
      formatter_class=argparse.RawDescriptionHelpFormatter,
      epilog=__doc__,
  )

  parser.add_argument('--inputs-csv',
                      type=Path,
                      required=True,
                      help='CSV with one row of inputs per company')

  parser.add_argument('--preset',
                      type=str,
                      default='default',
                      choices=sorted(PRESETS),
                      help='Config preset (default: default)')

  parser.add_argument('--output',
                      type=Path,
                      help='Output CSV file path (optional)')

  parser.add_argument('-v',
                      '--verbose',
                      action='store_true',
                      help='Verbose output')

  args = parser.parse_args()

  logging.basicConfig(
      level=logging.DEBUG if args.verbose else logging.INFO,
      format='%(asctime)s [%(levelname)s] %(message)s',
      datefmt='%Y-%m-%d %H:%M:%S',
  )

  if not args.inputs_csv.exists():
    raise FileNotFoundError(f'Inputs file not found: {args.inputs_csv}')

  frame = pd.read_csv(args.inputs_csv)
  logger.info('Loaded %d rows from %s', len(frame), args.inputs_csv)

  config = get_config(args.preset)
  logger.info('Using config: %s', config.name)

  results = batch_valuation(frame, config=config, verbose=args.verbose)

  if args.output:
    args.output.parent.mkdir(parents=True, exist_ok=True)
    results.to_csv(args.output, index=False)
    logger.info('Saved %d results to %s', len(results), args.output)
  else:
    print(results.to_string(index=False))

  _print_summary(results)


if __name__ == '__main__':
  main()
