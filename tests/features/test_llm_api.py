"""Tests for grammarfix.features.llm_api.

These tests patch the `openai` module to avoid network calls.
"""

from unittest.mock import MagicMock, patch

import pytest

from grammarfix.features import llm_api


@patch("grammarfix.features.llm_api.openai")
def test_call_llm_with_fake_openai(mock_openai):
    def create(model, input, temperature):
        assert "gpt" in model
        assert temperature == 0
        assert input[0] == {"role": "system", "content": "You check grammar."}
        assert input[-1] == {"role": "user", "content": "hi"}
        res = MagicMock()
        res.output_text = "Hello back"
        return res

    mock_openai.OpenAI().responses.create.side_effect = create

    res = llm_api.call_llm("hi", sys_prompt="You check grammar.")
    assert res == "Hello back"


@patch("grammarfix.features.llm_api.openai")
def test_call_llm_passes_api_key_and_disables_retries(mock_openai):
    mock_openai.OpenAI.return_value.responses.create.return_value.output_text = "[]"

    llm_api.call_llm("hi", sys_prompt="s", model="gpt-test", api_key="sk-test")

    mock_openai.OpenAI.assert_called_once_with(api_key="sk-test", max_retries=0)
    kwargs = mock_openai.OpenAI.return_value.responses.create.call_args.kwargs
    assert kwargs["model"] == "gpt-test"


@patch("grammarfix.features.llm_api.openai")
def test_call_llm_empty_key_falls_back_to_environment(mock_openai):
    mock_openai.OpenAI.return_value.responses.create.return_value.output_text = "[]"

    llm_api.call_llm("hi", sys_prompt="s", api_key="")

    mock_openai.OpenAI.assert_called_once_with(api_key=None, max_retries=0)


@pytest.mark.slow
def test_call_llm_with_real_openai():
    """Test llm_api.call_llm with a real OpenAI call."""
    res = llm_api.call_llm(
        "Hi! What is the value of 2+2?", sys_prompt="You are a helpful assistant."
    )
    assert isinstance(res, str)
    assert "4" in res
