"""
nfasim - A nondeterministic finite automaton (NFA) simulator.

Automata are loaded from a small line-oriented text format and simulated
over strings by tracking the full set of active states, with epsilon moves.

Example usage:
    >>> from nfasim import load_automaton, Simulator
    >>> automaton = load_automaton("contains_10.fa")
    >>> Simulator(automaton).simulate("0110")
    True

Building an automaton in code:
    >>> from nfasim import AutomatonBuilder, accepts
    >>> fa = AutomatonBuilder(num_states=2, start=0, alphabet={"a"})
    >>> fa = fa.accept(1).transition(0, "a", 1).build()
    >>> accepts(fa, "a")
    True
"""

__version__ = "0.1.0"

from nfasim.automaton.automaton import EPSILON, Automaton
from nfasim.automaton.builder import AutomatonBuilder
from nfasim.automaton.simulator import Simulator, accepts
from nfasim.config import Config
from nfasim.diagnostics.trace import SimulationTrace, TraceStep
from nfasim.parser.fa_parser import load_automaton, parse_automaton
from nfasim.parser.input_line import parse_input_line
from nfasim.exceptions import NfaSimError, LoadError, AutomatonValidationError

__all__ = [
    # Model
    "EPSILON",
    "Automaton",
    "AutomatonBuilder",
    # Simulation
    "Simulator",
    "accepts",
    "SimulationTrace",
    "TraceStep",
    # Loading
    "load_automaton",
    "parse_automaton",
    "parse_input_line",
    # Configuration
    "Config",
    # Exceptions
    "NfaSimError",
    "LoadError",
    "AutomatonValidationError",
    # Version
    "__version__",
]
