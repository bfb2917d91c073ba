"""Tests for expect_update and update."""

import pytest
from hypothesis import given

from kungfu import Error, Ok

from loadable import (
    Failure,
    Idle,
    Loading,
    ReloadFailure,
    Reloading,
    Success,
    expect_update,
    to_value,
    update,
)

from strategies import errors, states, values, with_value


class TestExpectUpdate:
    """Tests for the loading-expected transition."""

    def test_idle_becomes_loading(self):
        assert expect_update(Idle()) == Loading()

    def test_failure_becomes_loading(self):
        """No value on hand, so the error is simply dropped."""
        assert expect_update(Failure("boom")) == Loading()

    def test_success_becomes_reloading(self):
        assert expect_update(Success(42)) == Reloading(42)

    def test_reload_failure_becomes_reloading(self):
        assert expect_update(ReloadFailure("boom", 7)) == Reloading(7)

    def test_loading_is_idempotent(self):
        assert expect_update(Loading()) == Loading()

    def test_reloading_is_idempotent(self):
        assert expect_update(Reloading(7)) == Reloading(7)

    def test_does_not_mutate_input(self):
        state = Success(42)
        expect_update(state)
        assert state == Success(42)

    @given(with_value)
    def test_value_survives(self, state):
        """Entering a loading state never discards a retained value."""
        assert to_value(expect_update(state)) == to_value(state)

    @given(errors)
    def test_any_failure_becomes_loading(self, error):
        assert expect_update(Failure(error)) == Loading()

    @given(values)
    def test_reloading_fixed_point(self, value):
        assert expect_update(Reloading(value)) == Reloading(value)

    @given(states)
    def test_twice_equals_once(self, state):
        once = expect_update(state)
        assert expect_update(once) == once

    def test_rejects_non_state(self):
        with pytest.raises(AssertionError):
            expect_update("not a state")  # type: ignore[arg-type]


class TestUpdateOk:
    """Folding a successful outcome."""

    @given(values, states)
    def test_ok_always_yields_success(self, value, state):
        assert update(Ok(value), state) == Success(value)

    def test_ok_replaces_stale_value(self):
        assert update(Ok(2), Reloading(1)) == Success(2)

    def test_ok_clears_error(self):
        assert update(Ok(2), ReloadFailure("boom", 1)) == Success(2)


class TestUpdateError:
    """Folding a failed outcome keeps any value on hand."""

    @pytest.mark.parametrize(
        ("state", "expected"),
        [
            (Idle(), Failure("e")),
            (Loading(), Failure("e")),
            (Failure("old"), Failure("e")),
            (Success(42), ReloadFailure("e", 42)),
            (Reloading(7), ReloadFailure("e", 7)),
            (ReloadFailure("old", 7), ReloadFailure("e", 7)),
        ],
    )
    def test_error_table(self, state, expected):
        assert update(Error("e"), state) == expected

    def test_ok_then_error_from_idle(self):
        state = update(Error("e1"), update(Ok(42), Idle()))
        assert state == ReloadFailure("e1", 42)

    def test_keeps_most_recent_value(self):
        state = update(Ok(1), Idle())
        state = update(Ok(2), expect_update(state))
        state = update(Error("e"), expect_update(state))
        assert state == ReloadFailure("e", 2)

    def test_keeps_only_latest_error(self):
        state = update(Error("e1"), Success(1))
        state = update(Error("e2"), state)
        assert state == ReloadFailure("e2", 1)

    @given(errors, states)
    def test_error_never_fabricates_value(self, error, state):
        assert to_value(update(Error(error), state)) == to_value(state)


class TestLifecycle:
    """Full load / reload cycles as a UI would drive them."""

    def test_first_load_success(self):
        state = Idle()
        state = expect_update(state)
        assert state == Loading()
        state = update(Ok("user"), state)
        assert state == Success("user")

    def test_reload_failure_then_retry(self):
        state = Success("user")
        state = expect_update(state)
        state = update(Error("timeout"), state)
        assert state == ReloadFailure("timeout", "user")
        state = expect_update(state)
        assert state == Reloading("user")
        state = update(Ok("user v2"), state)
        assert state == Success("user v2")

    def test_first_load_failure_then_retry(self):
        state = update(Error("timeout"), expect_update(Idle()))
        assert state == Failure("timeout")
        assert expect_update(state) == Loading()
