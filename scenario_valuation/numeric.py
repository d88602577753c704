"""
Numeric sanitization helpers.

Every value that enters the engine passes through to_number, and every
ratio goes through safe_divide, so no calculation can fail on a missing,
non-numeric or non-finite value or on a zero denominator.
"""

from math import isfinite
from typing import Any


def to_number(value: Any) -> float:
  """
  Coerce an arbitrary value into a finite float.

  Booleans map to 1.0/0.0, strings are stripped and parsed as decimal or
  exponent notation (an empty string is 0.0). Digit separators ('1_000')
  and hex/octal/binary prefixes ('0x1A') are not accepted. Anything that
  cannot be parsed, or parses to NaN or +/-inf, becomes 0.0.

  Args:
    value: Raw value (number, numeric string, None, ...)

  Returns:
    Finite float, 0.0 when the value is unusable
  """
  if value is None:
    return 0.0
  if isinstance(value, str):
    value = value.strip()
    if not value or '_' in value:
      return 0.0
  try:
    number = float(value)
  except (TypeError, ValueError, OverflowError):
    return 0.0
  return number if isfinite(number) else 0.0


def safe_divide(numerator: Any, denominator: Any) -> float:
  """
  Divide two values, returning 0.0 when the denominator is zero.

  Both operands are sanitized with to_number first, so a non-finite
  denominator also yields 0.0.
  """
  den = to_number(denominator)
  if not den:
    return 0.0
  return to_number(numerator) / den
