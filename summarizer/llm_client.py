"""Lightweight language-model client helper.

Centralises API-key handling so the rest of the codebase can simply do:

    from summarizer.llm_client import chat_completion

and know that the ``openai`` package is pointed at the configured
OpenAI-compatible endpoint (Groq by default) with credentials.
"""
from __future__ import annotations

import asyncio
import json
import os
import re
import types
from typing import Any, Dict, List, Optional

from summarizer.reporting import config


class LLMClientError(RuntimeError):
    """Raised when client configuration is invalid (e.g., missing API key)."""


_API_KEY_VARS = ("GROQ_API_KEY", "OPENAI_API_KEY")

_client: Optional[Any] = None

# Markdown code fences some models wrap JSON in
_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)
_OBJECT_RE = re.compile(r"\{[\s\S]*\}")  # outermost JSON object in string


def _load_openai() -> types.ModuleType:
    """Import ``openai`` lazily.

    Loading is deferred so that unit tests can inject a stub into
    ``sys.modules`` before this function runs.
    """

    import importlib

    return importlib.import_module("openai")


def _api_key() -> Optional[str]:
    for var in _API_KEY_VARS:
        value = os.getenv(var)
        if value:
            return value
    return None


def is_configured() -> bool:
    """Return ``True`` when a model credential is available."""
    return _api_key() is not None


def _ensure_api_key_present() -> str:
    """Return the configured API key or raise.

    Raises
    ------
    LLMClientError
        If neither ``GROQ_API_KEY`` nor ``OPENAI_API_KEY`` is set.
    """

    api_key = _api_key()
    if not api_key:
        raise LLMClientError("GROQ_API_KEY environment variable is not set.")
    return api_key


def get_llm_client() -> Any:
    """Build (once) and return an ``openai.AsyncOpenAI`` client."""

    global _client
    if _client is not None:
        return _client

    openai = _load_openai()
    _client = openai.AsyncOpenAI(
        api_key=_ensure_api_key_present(),
        base_url=config.LLM_BASE_URL,
        timeout=config.LLM_TIMEOUT_SECONDS,
    )
    return _client


def reset_client() -> None:
    """Forget the cached client (used by tests and after key rotation)."""
    global _client
    _client = None


async def chat_completion(
    messages: List[Dict[str, str]],
    *,
    model: str = config.LLM_MODEL,
    timeout: float = config.LLM_TIMEOUT_SECONDS,
    **kwargs: Any,
) -> Dict[str, Any]:
    """Wrapper around ``chat.completions.create`` with sane defaults.

    Parameters
    ----------
    messages
        Chat messages in OpenAI format.
    model
        Model id to use (default: ``config.LLM_MODEL``).
    timeout
        Seconds to wait before giving up with :class:`asyncio.TimeoutError`.
    kwargs
        Additional parameters forwarded to ``chat.completions.create``.

    Always returns a plain ``dict`` with at least
    ``{"choices": [{"message": {"content": ...}}]}`` so callers and tests do
    not depend on the SDK's response classes.
    """

    client = get_llm_client()
    completion = await asyncio.wait_for(
        client.chat.completions.create(model=model, messages=messages, **kwargs),
        timeout=timeout,
    )
    choices = [
        {"message": {"content": choice.message.content}}
        for choice in completion.choices
    ]
    return {"choices": choices, "model": completion.model}


def completion_text(response: Dict[str, Any]) -> str:
    """Return the first choice's content from a :func:`chat_completion` result."""
    try:
        content = response["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as exc:
        raise ValueError("Model response missing expected fields") from exc
    if not isinstance(content, str) or not content.strip():
        raise ValueError("Model response was empty")
    return content


def parse_json_object(content: str) -> Dict[str, Any]:
    """Extract the JSON object from the model's raw string response."""

    stripped = _FENCE_RE.sub("", content.strip())
    match = _OBJECT_RE.search(stripped)
    if not match:
        raise ValueError("Model response did not contain a JSON object")

    try:
        payload = json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        raise ValueError("Failed to parse JSON from model response") from exc

    if not isinstance(payload, dict):
        raise ValueError("JSON payload was not an object")
    return payload
