"""
Configuration for valuation runs.

ValuationConfig is a serializable (JSON-friendly) configuration class that
holds the sensitivity sweep range and the thresholds used to pick the
narrative tones. Named presets are resolved with get_config().
"""

from dataclasses import asdict
from dataclasses import dataclass
from dataclasses import field
import json
from typing import Any, Callable, Dict


@dataclass(frozen=True)
class SweepConfig:
  """
  EV/EBITDA range for the multiple sensitivity sweep.

  Attributes:
    min_multiple: First multiple of the sweep (inclusive)
    max_multiple: Last multiple of the sweep (inclusive)
    step: Spacing between multiples
  """
  min_multiple: float = 5.0
  max_multiple: float = 15.0
  step: float = 0.5


@dataclass(frozen=True)
class ToneThresholds:
  """
  Thresholds that select the analyst summary wording.

  Attributes:
    upside: Base-case upside above +upside reads undervalued, below
      -upside reads rich (both strict)
    elevated_leverage: Net debt/EBITDA strictly above this is elevated
    manageable_leverage: Net debt/EBITDA strictly above this is manageable
  """
  upside: float = 0.15
  elevated_leverage: float = 3.0
  manageable_leverage: float = 1.5


@dataclass(frozen=True)
class ValuationConfig:
  """
  Configuration for a valuation run.

  Attributes:
    name: Human-readable config name
    sweep: Sensitivity sweep range
    thresholds: Narrative tone thresholds
  """
  name: str = 'default'
  sweep: SweepConfig = field(default_factory=SweepConfig)
  thresholds: ToneThresholds = field(default_factory=ToneThresholds)

  @classmethod
  def default(cls) -> 'ValuationConfig':
    """
    Create default configuration.

    Uses:
      - 5.0x to 15.0x sweep in 0.5x steps
      - +/-15% base-case upside for the valuation tone
      - 3.0x / 1.5x net debt/EBITDA for the leverage tone
    """
    return cls(name='default')

  @classmethod
  def narrow(cls) -> 'ValuationConfig':
    """Tight 8x-12x sweep in quarter turns."""
    return cls(
        name='narrow',
        sweep=SweepConfig(min_multiple=8.0, max_multiple=12.0, step=0.25),
    )

  @classmethod
  def wide(cls) -> 'ValuationConfig':
    """Wide 4x-20x sweep in whole turns."""
    return cls(
        name='wide',
        sweep=SweepConfig(min_multiple=4.0, max_multiple=20.0, step=1.0),
    )

  def to_dict(self) -> Dict[str, Any]:
    """Convert to dictionary."""
    return asdict(self)

  def to_json(self) -> str:
    """Serialize to JSON string."""
    return json.dumps(self.to_dict(), indent=2)

  @classmethod
  def from_dict(cls, data: Dict[str, Any]) -> 'ValuationConfig':
    """Create from dictionary; missing sections fall back to defaults."""
    return cls(
        name=data.get('name', 'default'),
        sweep=SweepConfig(**data.get('sweep', {})),
        thresholds=ToneThresholds(**data.get('thresholds', {})),
    )

  @classmethod
  def from_json(cls, json_str: str) -> 'ValuationConfig':
    """Create from JSON string."""
    return cls.from_dict(json.loads(json_str))


PRESETS: Dict[str, Callable[[], ValuationConfig]] = {
    'default': ValuationConfig.default,
    'narrow': ValuationConfig.narrow,
    'wide': ValuationConfig.wide,
}


def get_config(name: str) -> ValuationConfig:
  """
  Resolve a preset name to a ValuationConfig.

  Raises:
    ValueError: If name is not a known preset
  """
  if name not in PRESETS:
    raise ValueError(
        f'Unknown config: {name}. Available: {", ".join(sorted(PRESETS))}')
  return PRESETS[name]()
