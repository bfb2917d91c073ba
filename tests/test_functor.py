"""Tests for map_value, map_error and bimap."""

from hypothesis import given

from loadable import (
    Failure,
    Idle,
    Loading,
    ReloadFailure,
    Reloading,
    Success,
    bimap,
    fmap,
    map_error,
    map_value,
)
from loadable._helpers import compose, identity

from strategies import int_functions, states, str_functions


class TestMapValue:
    def test_reloading(self):
        assert map_value(lambda x: x + 1, Reloading(7)) == Reloading(8)

    def test_success(self):
        assert map_value(str, Success(7)) == Success("7")

    def test_reload_failure_keeps_error(self):
        assert map_value(lambda x: x * 2, ReloadFailure("e", 7)) == ReloadFailure("e", 14)

    def test_valueless_untouched(self):
        for state in (Idle(), Loading(), Failure("e")):
            assert map_value(lambda x: x + 1, state) == state

    def test_function_not_called_without_value(self):
        calls = []
        map_value(calls.append, Failure("e"))
        assert calls == []

    def test_fmap_alias(self):
        assert fmap is map_value

    def test_preserves_tag(self, all_variants):
        for state in all_variants:
            assert type(map_value(lambda x: x, state)) is type(state)


class TestMapError:
    def test_failure(self):
        assert map_error(len, Failure("err")) == Failure(3)

    def test_reload_failure_keeps_value(self):
        assert map_error(str.upper, ReloadFailure("e", 7)) == ReloadFailure("E", 7)

    def test_errorless_untouched(self):
        for state in (Idle(), Loading(), Success(1), Reloading(1)):
            assert map_error(len, state) == state


class TestBimap:
    def test_both_channels(self):
        assert bimap(lambda x: x + 1, len, ReloadFailure("err", 7)) == ReloadFailure(3, 8)

    @given(states, int_functions, str_functions)
    def test_equals_sequential_maps(self, state, f, g):
        assert bimap(f, g, state) == map_error(g, map_value(f, state))


class TestFunctorLaws:
    """Property-based tests for functor laws over all six variants."""

    @given(states)
    def test_map_value_identity(self, state):
        assert map_value(identity, state) == state

    @given(states, int_functions, int_functions)
    def test_map_value_composition(self, state, f, g):
        assert map_value(compose(g, f), state) == map_value(g, map_value(f, state))

    @given(states)
    def test_map_error_identity(self, state):
        assert map_error(identity, state) == state

    @given(states, str_functions, str_functions)
    def test_map_error_composition(self, state, f, g):
        assert map_error(compose(g, f), state) == map_error(g, map_error(f, state))
