"""Tests for grammarfix.scenarios.check."""

from unittest.mock import MagicMock, patch

import pytest

from grammarfix.errors import MalformedResponse, TransportError
from grammarfix.models import Correction, Segment
from grammarfix.scenarios.check import CheckScreen, CheckState, Notice


@pytest.fixture
def provider():
    mock = MagicMock()
    mock.get_corrections.return_value = [Correction(word="go", suggestion="goes")]
    return mock


def test_initial_state_is_idle(provider):
    screen = CheckScreen(provider)
    assert screen.state == CheckState()
    assert not screen.state.busy


def test_successful_check(provider):
    screen = CheckScreen(provider)
    states = list(screen.run_check("He go home."))

    assert [s.phase for s in states] == ["checking", "success"]
    assert states[0].busy
    assert states[0].segments == ()

    final = screen.state
    assert final is states[-1]
    assert final.input_text == "He go home."
    assert final.corrections == (Correction(word="go", suggestion="goes"),)
    assert Segment("go", True) in final.segments
    assert final.notice is None
    provider.get_corrections.assert_called_once_with("He go home.")


def test_states_are_replaced_not_mutated(provider):
    screen = CheckScreen(provider)
    before = screen.state
    screen.check("He go home.")
    assert before == CheckState()
    assert screen.state is not before


def test_check_uses_current_input(provider):
    screen = CheckScreen(provider)
    screen.set_input("He go home.")
    assert screen.check().phase == "success"
    provider.get_corrections.assert_called_once_with("He go home.")


def test_blank_input_adds_notice_only(provider):
    screen = CheckScreen(provider)
    screen.set_input("   ")
    state = screen.check()

    assert state.phase == "idle"
    assert state.input_text == "   "
    assert state.notice == Notice("Input Required", "Please enter text to check.")
    provider.get_corrections.assert_not_called()


@pytest.mark.parametrize(
    "error, notice",
    [
        (
            MalformedResponse("Could not parse AI response", raw="oops"),
            Notice("AI Error", "Could not parse AI response"),
        ),
        (
            TransportError("Something went wrong. Try again."),
            Notice("Error", "Something went wrong. Try again."),
        ),
    ],
)
@patch("grammarfix.scenarios.check.build_segments")
def test_provider_error_resets_input(mock_build_segments, provider, error, notice):
    provider.get_corrections.side_effect = error
    screen = CheckScreen(provider)

    state = screen.check("He go home.")

    assert state.phase == "error"
    assert not state.busy
    assert state.input_text == ""
    assert state.segments == ()
    assert state.notice == notice
    mock_build_segments.assert_not_called()


@pytest.mark.parametrize("error", [AssertionError(), RuntimeError("boom"), KeyError("x")])
def test_unexpected_error_clears_busy(provider, error):
    provider.get_corrections.side_effect = error
    screen = CheckScreen(provider)

    state = screen.check("He go home.")

    assert state.phase == "error"
    assert not state.busy
    assert state.notice == Notice("Error", "Something went wrong. Try again.")

    # the next check runs normally
    provider.get_corrections.side_effect = None
    assert screen.check("He go home.").phase == "success"


@patch("grammarfix.scenarios.check.build_segments")
def test_alignment_error_clears_busy(mock_build_segments, provider):
    mock_build_segments.side_effect = ValueError("bad offsets")
    screen = CheckScreen(provider)

    state = screen.check("He go home.")

    assert state.phase == "error"
    assert not state.busy


def test_blank_input_after_success_drops_old_result(provider):
    screen = CheckScreen(provider)
    screen.check("He go home.")

    state = screen.check("")

    assert state.input_text == ""
    assert state.segments == ()
    assert state.corrections == ()
    assert state.notice == Notice("Input Required", "Please enter text to check.")


def test_error_then_new_input_returns_to_idle(provider):
    provider.get_corrections.side_effect = TransportError("down")
    screen = CheckScreen(provider)
    screen.check("He go home.")

    state = screen.set_input("She go")
    assert state == CheckState(input_text="She go")


def test_check_ignored_while_busy(provider):
    screen = CheckScreen(provider, state=CheckState(phase="checking", input_text="a"))

    assert list(screen.run_check("He go home.")) == []
    assert screen.state.phase == "checking"
    provider.get_corrections.assert_not_called()


def test_set_input_ignored_while_busy(provider):
    busy = CheckState(phase="checking", input_text="a")
    screen = CheckScreen(provider, state=busy)
    assert screen.set_input("b") is busy


def test_dismiss_notice(provider):
    screen = CheckScreen(provider)
    screen.check("")
    assert screen.state.notice is not None
    assert screen.dismiss_notice().notice is None


def test_match_phrases_is_passed_to_alignment(provider):
    provider.get_corrections.return_value = [
        Correction(word="she go", suggestion="she goes")
    ]

    plain = CheckScreen(provider).check("she go home")
    assert not any(s.is_mistake for s in plain.segments)

    phrases = CheckScreen(provider, match_phrases=True).check("she go home")
    assert [s.text for s in phrases.segments if s.is_mistake] == ["she", "go"]
