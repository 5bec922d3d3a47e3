"""Automaton model and simulation."""

from nfasim.automaton.automaton import EPSILON, Automaton, State, StateSet, Symbol
from nfasim.automaton.builder import AutomatonBuilder
from nfasim.automaton.simulator import Simulator, accepts

__all__ = [
    "EPSILON",
    "Automaton",
    "State",
    "StateSet",
    "Symbol",
    "AutomatonBuilder",
    "Simulator",
    "accepts",
]
