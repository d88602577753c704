'''
Valuation analysis utilities.

Import submodules directly to avoid a RuntimeWarning when they are run
with the -m flag:
  from scenario_valuation.analysis.batch_valuation import batch_valuation
  from scenario_valuation.analysis.sensitivity import generate_multiple_sensitivity
'''
