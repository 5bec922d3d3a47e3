"""Diagnostics module for simulation traces."""

from nfasim.diagnostics.trace import Rule, SimulationTrace, TraceStep, format_states

__all__ = [
    "Rule",
    "SimulationTrace",
    "TraceStep",
    "format_states",
]
