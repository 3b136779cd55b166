"""OpenAI-backed clause analyzer."""

from typing import Optional

from openai import OpenAI

from .base import AnalysisResponseError, LLMClauseAnalyzer


DEFAULT_OPENAI_MODEL = "gpt-4o"


class OpenAIClauseAnalyzer(LLMClauseAnalyzer):
    """Compares clause pairs with the OpenAI chat completions API."""

    provider_name = "OpenAI"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_OPENAI_MODEL,
        timeout: float = 60.0,
        client: Optional[OpenAI] = None,
    ):
        """
        Initialize the analyzer.

        Args:
            api_key: OpenAI API key. Ignored when ``client`` is given.
            model: Chat model name.
            timeout: Request timeout in seconds.
            client: Preconfigured OpenAI client.
        """
        super().__init__(model=model, timeout=timeout)
        self._client = client or OpenAI(api_key=api_key, timeout=timeout)

    def _complete(self, messages: list) -> str:
        completion = self._client.chat.completions.create(
            model=self._model,
            messages=messages,
        )
        if not completion.choices:
            raise AnalysisResponseError("No choices in OpenAI response")
        content = completion.choices[0].message.content
        if not content:
            raise AnalysisResponseError("No content in OpenAI response")
        return content
