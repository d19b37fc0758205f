import logging
import openai
from tenacity import before_sleep_log, retry, stop_after_attempt, wait_exponential, retry_if_exception_type
from typing import Protocol

from nexus_connect.core.exceptions import CompletionError, CompletionUnavailableError, EmptyCompletionError

logger = logging.getLogger(__name__)


class CompletionClient(Protocol):
    """Anything that turns a prompt into text.

    With ``json_mode`` the provider is asked for a single JSON object; the
    caller still parses and validates it. Implementations raise
    ``CompletionError`` on any failure.
    """

    def complete(self, prompt: str, *, json_mode: bool = False, max_tokens: int = 256) -> str: ...


class UnavailableCompletionClient:
    """Stand-in used when no provider credential is configured."""

    def complete(self, prompt: str, *, json_mode: bool = False, max_tokens: int = 256) -> str:
        raise CompletionUnavailableError("No language-model provider configured")


class OpenAICompletionClient:
    def __init__(self, client: openai.OpenAI, model: str, max_attempts: int = 2):
        self.client = client
        self.model = model
        self._create = retry(
            wait=wait_exponential(multiplier=0.5, min=0.5, max=2),
            stop=stop_after_attempt(max_attempts),
            retry=retry_if_exception_type((openai.APITimeoutError, openai.APIConnectionError)),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True
        )(self.client.chat.completions.create)

    def complete(self, prompt: str, *, json_mode: bool = False, max_tokens: int = 256) -> str:
        kwargs = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_completion_tokens": max_tokens,
        }
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        try:
            response = self._create(**kwargs)
        except openai.OpenAIError as e:
            raise CompletionError(f"OpenAI request failed: {e}") from e

        content = (response.choices[0].message.content or "").strip() if response.choices else ""
        if not content:
            raise EmptyCompletionError("OpenAI returned an empty completion")
        return content
