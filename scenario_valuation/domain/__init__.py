"""Domain types for the scenario valuation engine."""

from scenario_valuation.domain.types import CurrentMetrics
from scenario_valuation.domain.types import ForwardMetrics
from scenario_valuation.domain.types import ScenarioPrices
from scenario_valuation.domain.types import SensitivityPoint
from scenario_valuation.domain.types import ValuationInputs
from scenario_valuation.domain.types import ValuationResult

__all__ = [
    'CurrentMetrics',
    'ForwardMetrics',
    'ScenarioPrices',
    'SensitivityPoint',
    'ValuationInputs',
    'ValuationResult',
]
