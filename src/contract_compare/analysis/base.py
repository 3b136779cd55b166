"""Base class for chat-completion clause analyzers.

Builds the client-advocate comparison prompt, parses the JSON reply and
converts every failure into the fixed fallback result.
"""

import json
import logging
import re
from abc import abstractmethod
from typing import Any, Dict

from ..interfaces.analyzer import IClauseAnalyzer
from ..models.comparison import AnalysisResult


logger = logging.getLogger(__name__)

SYSTEM_MESSAGE = "You are a legal contract expert."

PROMPT_TEMPLATE = """You are a legal contract analyst always representing the client. Your recommendations should be what the vendor must do to meet the client's requirements.

Clause Type: "{clause_type}"

Compare the client's clause with the vendor's clause below. Your goal is to identify any misalignment, legal risk, or missing provisions.

Client Clause:
{client_text}

Vendor Clause:
{vendor_text}

Please respond in the following structured JSON format:
{{
  "summary": "[Brief comparison: highlight key similarities and differences]",
  "risk": "[HIGH, MEDIUM, LOW - from the client's perspective]",
  "recommendation": "[Actionable suggestion for the vendor to align or mitigate risk in favor of the client]"
}}

Return only a valid JSON object and nothing else, no explanation and no markdown."""

CODE_FENCE_START = re.compile(r"^```[a-z]*\n?", re.IGNORECASE)
CODE_FENCE_END = re.compile(r"```$")


class AnalysisResponseError(Exception):
    """Raised when a backend reply cannot be turned into an AnalysisResult."""


class LLMClauseAnalyzer(IClauseAnalyzer):
    """
    Clause analyzer backed by a chat-completion API.

    Subclasses implement ``_complete`` to send the messages and return the
    raw reply text. This class never lets an exception escape ``analyze``.
    """

    provider_name = "llm"

    def __init__(self, model: str, timeout: float = 60.0):
        self._model = model
        self._timeout = timeout

    @property
    def model(self) -> str:
        return self._model

    def analyze(
        self,
        clause_type: str,
        client_text: str,
        vendor_text: str,
    ) -> AnalysisResult:
        """Compare a clause pair, returning the fallback result on any failure."""
        messages = self.build_messages(clause_type, client_text, vendor_text)
        try:
            content = self._complete(messages)
            return self.parse_response(content)
        except Exception as e:
            logger.warning(
                f"{self.provider_name} analysis failed for {clause_type} clause: {e}"
            )
            return AnalysisResult.fallback()

    @staticmethod
    def build_messages(clause_type: str, client_text: str, vendor_text: str) -> list:
        prompt = PROMPT_TEMPLATE.format(
            clause_type=clause_type,
            client_text=client_text,
            vendor_text=vendor_text,
        )
        return [
            {"role": "system", "content": SYSTEM_MESSAGE},
            {"role": "user", "content": prompt},
        ]

    @staticmethod
    def parse_response(content: Any) -> AnalysisResult:
        """
        Parse a reply into an AnalysisResult.

        Markdown code fences around the JSON object are removed. Missing
        fields default to the empty string.

        Raises:
            AnalysisResponseError: If the reply is empty or not a JSON object.
        """
        if not content or not str(content).strip():
            raise AnalysisResponseError("No content in response")

        text = str(content).strip()
        if text.startswith("```"):
            text = CODE_FENCE_END.sub("", CODE_FENCE_START.sub("", text)).strip()

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise AnalysisResponseError(f"Response is not valid JSON: {e}")
        if not isinstance(data, dict):
            raise AnalysisResponseError("Response JSON is not an object")

        return AnalysisResult(
            summary=_field(data, "summary"),
            risk=_field(data, "risk"),
            recommendation=_field(data, "recommendation"),
        )

    @abstractmethod
    def _complete(self, messages: list) -> str:
        """Send chat messages and return the assistant reply text."""
        pass


def _field(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    return str(value) if value else ""
