"""Mistral-backed clause analyzer using the HTTP chat completions endpoint."""

import requests

from .base import AnalysisResponseError, LLMClauseAnalyzer


DEFAULT_MISTRAL_MODEL = "mistral-large-latest"


class MistralClauseAnalyzer(LLMClauseAnalyzer):
    """
    Compares clause pairs with a Mistral chat completions endpoint.

    The endpoint URL is configurable; replies follow the
    ``{"choices": [{"message": {"content": ...}}]}`` shape.
    """

    provider_name = "Mistral"

    def __init__(
        self,
        api_url: str,
        api_key: str,
        model: str = DEFAULT_MISTRAL_MODEL,
        timeout: float = 60.0,
        session=None,
    ):
        super().__init__(model=model, timeout=timeout)
        self._api_url = api_url
        self._api_key = api_key
        self._session = session or requests

    def _complete(self, messages: list) -> str:
        response = self._session.post(
            self._api_url,
            json={"model": self._model, "messages": messages},
            headers={
                "Authorization": f"Bearer {self._api_key}",
                "Content-Type": "application/json",
            },
            timeout=self._timeout,
        )
        response.raise_for_status()

        choices = response.json().get("choices") or []
        content = choices[0].get("message", {}).get("content") if choices else None
        if not content:
            raise AnalysisResponseError("No content in Mistral response")
        return content
