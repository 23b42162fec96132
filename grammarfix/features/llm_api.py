"""Text LLM calling helper.

This module provides a minimal wrapper to call the OpenAI Responses API.
"""

import openai

from grammarfix.util.logs import log_function_duration

DEFAULT_TEXT_MODEL = "gpt-4o-mini-2024-07-18"


@log_function_duration(name="call_llm")
def call_llm(
    query: str,
    sys_prompt: str,
    model: str = DEFAULT_TEXT_MODEL,
    api_key: str | None = None,
) -> str:
    """Return an LLM answer for `query`.

    The client is created without automatic retries; a failed call raises
    immediately.

    Args:
        query: The user's prompt/question.
        sys_prompt: System prompt.
        model: The LLM model to use.
        api_key: OpenAI API key. If empty, the client falls back to the
            OPENAI_API_KEY environment variable.

    Raises:
        openai.OpenAIError: If the client cannot be created or the call fails.
    """
    messages = [
        {"role": "system", "content": sys_prompt},
        {"role": "user", "content": query},
    ]

    client = openai.OpenAI(api_key=api_key or None, max_retries=0)
    resp = client.responses.create(
        model=model,
        input=messages,
        temperature=0,
    )

    content = resp.output_text
    assert isinstance(content, str)
    return content
