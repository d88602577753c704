'''EV/EBITDA valuation engine with pure math functions.'''

from scenario_valuation.engine.forward import compute_forward_metrics
from scenario_valuation.engine.multiples import compute_current_metrics
from scenario_valuation.engine.multiples import compute_implied_share_price

__all__ = [
    'compute_current_metrics',
    'compute_forward_metrics',
    'compute_implied_share_price',
]
