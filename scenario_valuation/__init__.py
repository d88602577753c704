'''
Scenario-based equity valuation engine.

Turns a handful of operating and capital-structure assumptions into
EV/EBITDA based bull/base/bear implied share prices, one-step forward
metrics, a multiple sensitivity sweep and a narrative analyst summary.
All computations are pure functions over the supplied numbers.

Usage:
  from scenario_valuation.domain.types import ValuationInputs
  from scenario_valuation.run import run_valuation
  from scenario_valuation.narrative.summary import generate_analyst_summary

  inputs = ValuationInputs.from_mapping({'sharePrice': 100, ...})
  result = run_valuation(inputs)
  print(generate_analyst_summary(inputs, result))
'''
