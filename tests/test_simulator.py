"""Tests for epsilon-closure and string simulation."""

import pytest

from nfasim.automaton.automaton import EPSILON, Automaton
from nfasim.automaton.simulator import Simulator, accepts

from conftest import make_automaton


class TestEpsilonClosure:
    """Closure follows epsilon edges transitively and nothing else."""

    def test_no_epsilon_edges(self, binary_automaton):
        sim = Simulator(binary_automaton)
        assert sim.epsilon_closure({0}) == frozenset({0})

    def test_chain_with_cycle(self, epsilon_chain_automaton):
        sim = Simulator(epsilon_chain_automaton)
        assert sim.epsilon_closure({0}) == frozenset({0, 1, 2})
        assert sim.epsilon_closure({3}) == frozenset({3, 4})

    def test_empty_set(self, epsilon_chain_automaton):
        assert Simulator(epsilon_chain_automaton).epsilon_closure(set()) == frozenset()

    def test_input_is_not_modified(self, epsilon_chain_automaton):
        states = {0}
        Simulator(epsilon_chain_automaton).epsilon_closure(states)
        assert states == {0}

    @pytest.mark.parametrize(
        "states", [set(), {0}, {1}, {3}, {4}, {0, 3}, {1, 4}, {0, 1, 2, 3, 4}]
    )
    def test_monotonic_and_idempotent(self, epsilon_chain_automaton, states):
        sim = Simulator(epsilon_chain_automaton)
        closure = sim.epsilon_closure(states)
        assert set(states) <= closure
        assert sim.epsilon_closure(closure) == closure

    def test_long_chain(self):
        n = 500
        fa = make_automaton("", n, 0, [n - 1], [(i, EPSILON, i + 1) for i in range(n - 1)])
        sim = Simulator(fa)
        assert sim.epsilon_closure({0}) == frozenset(range(n))
        assert sim.simulate("")


class TestScenarios:
    def test_binary_single_one_rejected(self, binary_automaton):
        """Reaching state 1 alone is not enough."""
        assert not Simulator(binary_automaton).simulate("1")

    def test_binary_one_zero_accepted(self, binary_automaton):
        assert Simulator(binary_automaton).simulate("10")

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("", False),
            ("0", False),
            ("01", False),
            ("110", True),
            ("0010", True),
            ("100", False),
            ("1010", True),
            ("1011", False),
        ],
    )
    def test_binary_strings(self, binary_automaton, text, expected):
        assert Simulator(binary_automaton).simulate(text) is expected

    def test_epsilon_only_accepts_empty_string(self, epsilon_automaton):
        assert Simulator(epsilon_automaton).simulate("")

    def test_symbol_outside_alphabet_rejected(self, binary_automaton):
        assert not Simulator(binary_automaton).simulate("2")

    @pytest.mark.parametrize("text", ["2", "12", "102", "1x0", " 10"])
    def test_any_unknown_symbol_rejects(self, binary_automaton, text):
        assert not Simulator(binary_automaton).simulate(text)

    def test_unknown_symbol_rejects_even_when_everything_accepts(self):
        fa = make_automaton("a", 1, 0, [0], [(0, "a", 0)])
        sim = Simulator(fa)
        assert sim.simulate("aaa")
        assert not sim.simulate("aab")

    def test_nondeterministic_branch_is_tracked(self, branching_automaton):
        """A single-path walker taking 0 -a-> 1 would wrongly reject."""
        sim = Simulator(branching_automaton)
        assert sim.simulate("a")
        assert sim.simulate("ab")
        assert sim.simulate("abbb")
        assert not sim.simulate("b")
        assert not sim.simulate("aa")

    @pytest.mark.parametrize(
        "text,expected",
        [("", False), ("a", True), ("ab", False), ("aba", True), ("abab", False), ("b", False)],
    )
    def test_epsilon_moves_between_symbols(self, epsilon_chain_automaton, text, expected):
        assert Simulator(epsilon_chain_automaton).simulate(text) is expected


class TestEmptyString:
    def test_accepting_start_state(self):
        fa = make_automaton("a", 1, 0, [0], [])
        assert Simulator(fa).simulate("")

    def test_no_accepting_state_reachable(self, binary_automaton):
        assert not Simulator(binary_automaton).simulate("")

    def test_accepting_state_reachable_only_with_input(self, branching_automaton):
        assert not Simulator(branching_automaton).simulate("")


class TestSimulatorDoesNotMutate:
    def test_automaton_unchanged(self, epsilon_chain_automaton):
        before = list(epsilon_chain_automaton.iter_transitions())
        sim = Simulator(epsilon_chain_automaton)
        for text in ["", "a", "ab", "aba", "bb", "zz"]:
            sim.simulate(text)
            sim.trace(text)
        assert list(epsilon_chain_automaton.iter_transitions()) == before

    def test_accepts_helper(self, binary_automaton):
        assert accepts(binary_automaton, "10")
        assert not accepts(binary_automaton, "1")


class TestTrace:
    """Tracing records each step and always agrees with simulate()."""

    @pytest.mark.parametrize("text", ["", "1", "10", "0110", "100", "2", "1a0"])
    def test_trace_agrees_with_simulate(self, binary_automaton, text):
        sim = Simulator(binary_automaton)
        assert sim.trace(text).accepted is sim.simulate(text)

    @pytest.mark.parametrize("text", ["", "a", "ab", "aba", "abab", "bb"])
    def test_trace_agrees_with_epsilon_moves(self, epsilon_chain_automaton, text):
        sim = Simulator(epsilon_chain_automaton)
        assert sim.trace(text).accepted is sim.simulate(text)

    def test_steps(self, binary_automaton):
        trace = Simulator(binary_automaton).trace("10")
        assert trace.initial == frozenset({0})
        assert [step.symbol for step in trace.steps] == ["1", "0"]

        first, second = trace.steps
        assert first.active == frozenset({0})
        assert first.destinations == frozenset({0, 1})
        assert first.result == frozenset({0, 1})
        assert [(r.state, r.targets) for r in second.rules] == [
            (0, frozenset({0})),
            (1, frozenset({2})),
        ]
        assert second.result == frozenset({0, 2})
        assert trace.final == frozenset({0, 2})
        assert trace.accepting_state == 2

    def test_missing_rule_recorded_as_empty(self, branching_automaton):
        trace = Simulator(branching_automaton).trace("b")
        (step,) = trace.steps
        assert [str(rule) for rule in step.rules] == ["(0,b) -> {}"]
        assert step.result == frozenset()
        assert not trace.accepted

    def test_stops_on_empty_set(self, branching_automaton):
        trace = Simulator(branching_automaton).trace("bab")
        assert len(trace.steps) == 1
        assert not trace.accepted

    def test_epsilon_rules_from_destinations(self, epsilon_chain_automaton):
        trace = Simulator(epsilon_chain_automaton).trace("a")
        (step,) = trace.steps
        assert step.active == frozenset({0, 1, 2})
        assert step.destinations == frozenset({3})
        assert [str(rule) for rule in step.closure_rules] == [f"(3,{EPSILON}) -> {{4}}"]
        assert step.result == frozenset({3, 4})

    def test_epsilon_rules_from_active_states(self, epsilon_chain_automaton):
        trace = Simulator(epsilon_chain_automaton).trace("a")
        (step,) = trace.steps
        assert [str(rule) for rule in step.epsilon_rules] == [
            f"(0,{EPSILON}) -> {{1}}",
            f"(1,{EPSILON}) -> {{2}}",
            f"(2,{EPSILON}) -> {{0}}",
        ]
        assert f"  (0,{EPSILON}) -> {{1}}  [epsilon from active state]" in trace.render()

    def test_no_epsilon_rules_without_epsilon_edges(self, binary_automaton):
        trace = Simulator(binary_automaton).trace("10")
        assert all(step.epsilon_rules == [] for step in trace.steps)
        assert "[epsilon from active state]" not in trace.render()

    def test_invalid_symbol(self, binary_automaton):
        trace = Simulator(binary_automaton).trace("12")
        assert trace.invalid_symbol == "2"
        assert trace.steps == []
        assert not trace.accepted
        assert "Invalid symbol in input: '2' -> Rejected" in trace.render()

    def test_render(self, binary_automaton):
        text = Simulator(binary_automaton).trace("10").render()
        lines = text.splitlines()
        assert lines[0] == "Initial states: {0}"
        assert "Symbol: '1'" in lines
        assert "  (0,1) -> {0,1}" in lines
        assert "After epsilon-closure: {0,2}" in lines
        assert lines[-1] == "Accepting state 2 reached -> Accepted"

    def test_render_rejected(self, binary_automaton):
        text = Simulator(binary_automaton).trace("1").render()
        assert text.splitlines()[-1] == "No accepting state in final set -> Rejected"

    def test_render_empty_set(self, branching_automaton):
        text = Simulator(branching_automaton).trace("b").render()
        assert text.splitlines()[-1] == "Empty state set -> Rejected"

    def test_trace_logs_steps(self, binary_automaton, caplog):
        with caplog.at_level("DEBUG", logger="nfasim.automaton.simulator"):
            Simulator(binary_automaton).trace("10")
        assert "Step '1': {0} -> {0,1} -> {0,1}" in caplog.text


class TestUnloadedAutomaton:
    def test_empty_automaton_rejects(self):
        """An automaton with nothing loaded accepts nothing."""
        sim = Simulator(Automaton())
        assert not sim.simulate("")
        assert not sim.simulate("a")
