from enum import Enum

from syntaxgen.dfa import Dfa
from syntaxgen.handles import AutomaticallyHandled, Handle


class Symbol(AutomaticallyHandled, Enum):
    SYMBOL0 = 0
    SYMBOL1 = 1


S0 = Symbol.SYMBOL0.handle()
S1 = Symbol.SYMBOL1.handle()


def build_test_data_1():
    dfa = Dfa()
    states = [dfa.new_state(), dfa.new_state()]
    dfa.link(states[0], states[0], S0)
    dfa.link(states[0], states[1], S1)
    dfa.link(states[1], states[0], S1)
    dfa.link(states[1], states[1], S0)
    dfa.set_initial_state(states[0])
    return dfa, states


def build_test_data_2():
    dfa = Dfa()
    states = [dfa.new_state(), dfa.new_state()]
    dfa.link(states[0], states[0], S0)
    dfa.link(states[0], states[1], S1)
    dfa.link(states[1], states[1], S0)
    dfa.set_initial_state(states[0])
    return dfa, states


def test_scan_1():
    dfa, states = build_test_data_1()
    assert dfa.scan([S1, S0, S0, S1]) == states[0]


def test_scan_2():
    dfa, states = build_test_data_1()
    assert dfa.scan([S1, S0, S0, S1, S1]) == states[1]


def test_dead_route():
    dfa, states = build_test_data_2()
    assert dfa.scan([S0, S0, S1]) == states[1]
    assert dfa.scan([S0, S0, S1, S1]) is None


def test_scan_accepts_generator():
    dfa, states = build_test_data_1()
    assert dfa.scan(s for s in [S1]) == states[1]


def test_scan_empty_stream_returns_initial_state():
    dfa, states = build_test_data_1()
    assert dfa.scan([]) == states[0]


def test_scan_without_initial_state():
    dfa = Dfa()
    state = dfa.new_state()
    dfa.link(state, state, S0)
    assert dfa.scan([S0]) is None
    assert dfa.initial_state is None


def test_step():
    dfa, states = build_test_data_2()
    assert dfa.step(states[0], S1) == states[1]
    assert dfa.step(states[1], S1) is None


def test_new_state_handles_are_sequential():
    dfa = Dfa()
    assert [dfa.new_state() for _ in range(3)] == [Handle(0), Handle(1), Handle(2)]
    assert list(dfa.list_states()) == [Handle(0), Handle(1), Handle(2)]


def test_labels():
    dfa, states = build_test_data_1()
    assert dfa.get_label(states[0]) is None
    dfa.label(states[1], 42)
    assert dfa.get_label(states[1]) == 42
    dfa.label(states[1], None)
    assert dfa.get_label(states[1]) is None


def test_list_symbols():
    dfa, _ = build_test_data_1()
    assert dfa.list_symbols() == [S0, S1]
    assert Dfa().list_symbols() == []


def test_transitions():
    dfa, states = build_test_data_2()
    assert dfa.transitions(states[0]) == {S0: states[0], S1: states[1]}
    assert dfa.transitions(states[1]) == {S0: states[1]}


def test_link_replaces_transition():
    dfa, states = build_test_data_1()
    dfa.link(states[0], states[0], S1)
    assert dfa.step(states[0], S1) == states[0]


def test_equality():
    first, _ = build_test_data_1()
    second, _ = build_test_data_1()
    assert first == second
    other, _ = build_test_data_2()
    assert first != other


def test_equality_considers_labels_and_initial_state():
    first, states = build_test_data_1()
    second, _ = build_test_data_1()
    second.label(states[1], "x")
    assert first != second
    third, _ = build_test_data_1()
    third.set_initial_state(states[1])
    assert first != third