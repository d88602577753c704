"""Run configuration and named presets."""

from scenario_valuation.scenarios.config import get_config
from scenario_valuation.scenarios.config import SweepConfig
from scenario_valuation.scenarios.config import ToneThresholds
from scenario_valuation.scenarios.config import ValuationConfig

__all__ = [
    'get_config',
    'SweepConfig',
    'ToneThresholds',
    'ValuationConfig',
]
