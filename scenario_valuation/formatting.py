"""
Display formatters for valuation output.

One-way conversions from numbers to strings; every value is sanitized with
to_number first, so bad input renders as zero.
"""

from typing import Any

from scenario_valuation.numeric import to_number


def format_currency(value: Any, digits: int = 2) -> str:
  """
  Format as en-US dollars, e.g. 1234.5 -> '$1,234.50', -3 -> '-$3.00'.

  Args:
    value: Amount in dollars
    digits: Fixed number of fraction digits

  Returns:
    Currency string with thousands separators
  """
  number = to_number(value)
  text = f'${abs(number):,.{digits}f}'
  return f'-{text}' if number < 0 else text


def format_multiple(value: Any, digits: int = 2) -> str:
  """Format a valuation multiple, e.g. 8 -> '8.00x'."""
  # + 0.0 folds -0.0 into 0.0
  return f'{to_number(value) + 0.0:.{digits}f}x'


def format_percent(value: Any, digits: int = 2) -> str:
  """Format a fraction as a percentage, e.g. 0.12 -> '12.00%'."""
  return f'{to_number(value) * 100 + 0.0:.{digits}f}%'
