"""Analyst summary: tone classification and prose rendering."""

from scenario_valuation.narrative.summary import generate_analyst_summary
from scenario_valuation.narrative.summary import render_summary
from scenario_valuation.narrative.tone import assess_tones
from scenario_valuation.narrative.tone import ForwardTone
from scenario_valuation.narrative.tone import LeverageTone
from scenario_valuation.narrative.tone import NarrativeTones
from scenario_valuation.narrative.tone import ValuationTone

__all__ = [
    'assess_tones',
    'ForwardTone',
    'generate_analyst_summary',
    'LeverageTone',
    'NarrativeTones',
    'render_summary',
    'ValuationTone',
]
