"""Unit tests for the chat-completion clause analyzers."""

import json
import threading
import time
from unittest.mock import Mock

import pytest
import requests

from contract_compare.analysis import (
    AnalysisRequest,
    AnalysisRunner,
    LLMClauseAnalyzer,
    MistralClauseAnalyzer,
    OpenAIClauseAnalyzer,
    create_analyzer,
)
from contract_compare.config import AnalysisConfig
from contract_compare.interfaces import IClauseAnalyzer
from contract_compare.models import AnalysisResult


REPLY = {
    "summary": "Vendor allows 45 days instead of 30.",
    "risk": "MEDIUM - longer payment window",
    "recommendation": "Ask the vendor to accept 30 days.",
}


def openai_client(content):
    """Build a mock OpenAI client returning ``content``."""
    client = Mock()
    client.chat.completions.create.return_value = Mock(
        choices=[Mock(message=Mock(content=content))]
    )
    return client


def mistral_session(payload):
    """Build a mock requests session returning ``payload`` as JSON."""
    session = Mock()
    session.post.return_value.json.return_value = payload
    return session


class TestResponseParsing:
    """Tests for reply parsing shared by all backends."""

    def test_plain_json(self):
        """Test a bare JSON object is parsed."""
        result = LLMClauseAnalyzer.parse_response(json.dumps(REPLY))

        assert result == AnalysisResult(**REPLY)

    def test_code_fences_removed(self):
        """Test markdown code fences around the JSON are stripped."""
        content = "```json\n" + json.dumps(REPLY) + "\n```"

        assert LLMClauseAnalyzer.parse_response(content).summary == REPLY["summary"]

    def test_missing_fields_default_to_empty(self):
        """Test absent fields become empty strings."""
        result = LLMClauseAnalyzer.parse_response('{"summary": "Only a summary"}')

        assert result.risk == ""
        assert result.recommendation == ""
        assert not result.failed

    def test_prompt_contents(self):
        """Test the prompt carries the clause type and both clause texts."""
        messages = LLMClauseAnalyzer.build_messages("Payment Terms", "Net 30", "Net 45")

        assert messages[0] == {"role": "system", "content": "You are a legal contract expert."}
        prompt = messages[1]["content"]
        assert 'Clause Type: "Payment Terms"' in prompt
        assert "Client Clause:\nNet 30" in prompt
        assert "Vendor Clause:\nNet 45" in prompt
        assert "always representing the client" in prompt


class TestOpenAIClauseAnalyzer:
    """Tests for the OpenAI backend."""

    def test_analyze(self):
        """Test a successful completion is parsed."""
        client = openai_client(json.dumps(REPLY))
        analyzer = OpenAIClauseAnalyzer(client=client)

        result = analyzer.analyze("Payment Terms", "Net 30", "Net 45")

        assert result == AnalysisResult(**REPLY)
        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o"
        assert kwargs["messages"][1]["role"] == "user"

    def test_api_error_returns_fallback(self):
        """Test client exceptions become the fallback result."""
        client = Mock()
        client.chat.completions.create.side_effect = RuntimeError("rate limited")

        result = OpenAIClauseAnalyzer(client=client).analyze("Payment Terms", "a", "b")

        assert result == AnalysisResult.fallback()
        assert result.failed

    @pytest.mark.parametrize("content", [None, "", "not json", "[1, 2]"])
    def test_unusable_reply_returns_fallback(self, content):
        """Test empty or malformed replies become the fallback result."""
        analyzer = OpenAIClauseAnalyzer(client=openai_client(content))

        assert analyzer.analyze("Payment Terms", "a", "b") == AnalysisResult.fallback()


class TestMistralClauseAnalyzer:
    """Tests for the Mistral backend."""

    def test_analyze(self):
        """Test the HTTP request and reply parsing."""
        session = mistral_session(
            {"choices": [{"message": {"content": json.dumps(REPLY)}}]}
        )
        analyzer = MistralClauseAnalyzer(
            api_url="https://mistral.example/v1/chat/completions",
            api_key="key-123",
            timeout=15.0,
            session=session,
        )

        result = analyzer.analyze("Termination", "30 days notice", "90 days notice")

        assert result == AnalysisResult(**REPLY)
        call = session.post.call_args
        assert call.args[0] == "https://mistral.example/v1/chat/completions"
        assert call.kwargs["headers"]["Authorization"] == "Bearer key-123"
        assert call.kwargs["json"]["model"] == "mistral-large-latest"
        assert call.kwargs["timeout"] == 15.0

    def test_connection_error_returns_fallback(self):
        """Test transport errors become the fallback result."""
        session = Mock()
        session.post.side_effect = requests.ConnectionError("unreachable")
        analyzer = MistralClauseAnalyzer("https://mistral.example", "key", session=session)

        assert analyzer.analyze("Termination", "a", "b") == AnalysisResult.fallback()

    def test_http_error_returns_fallback(self):
        """Test non-success status codes become the fallback result."""
        session = Mock()
        session.post.return_value.raise_for_status.side_effect = requests.HTTPError("500")
        analyzer = MistralClauseAnalyzer("https://mistral.example", "key", session=session)

        assert analyzer.analyze("Termination", "a", "b") == AnalysisResult.fallback()

    def test_empty_choices_returns_fallback(self):
        """Test replies without choices become the fallback result."""
        analyzer = MistralClauseAnalyzer(
            "https://mistral.example", "key", session=mistral_session({"choices": []})
        )

        assert analyzer.analyze("Termination", "a", "b") == AnalysisResult.fallback()


class TestCreateAnalyzer:
    """Tests for analyzer selection."""

    def test_no_provider(self):
        """Test no provider disables analysis."""
        assert create_analyzer(AnalysisConfig()) is None

    def test_unknown_provider(self):
        """Test unknown providers disable analysis."""
        assert create_analyzer(AnalysisConfig(provider="claude")) is None

    def test_openai_without_key(self):
        """Test missing credentials disable analysis."""
        assert create_analyzer(AnalysisConfig(provider="openai")) is None

    def test_openai(self):
        """Test the OpenAI analyzer is built with its model."""
        analyzer = create_analyzer(
            AnalysisConfig(provider="openai", openai_api_key="sk-test", openai_model="gpt-4o-mini")
        )

        assert isinstance(analyzer, OpenAIClauseAnalyzer)
        assert analyzer.model == "gpt-4o-mini"

    def test_mistral_requires_url(self):
        """Test the Mistral analyzer needs an endpoint URL."""
        assert create_analyzer(AnalysisConfig(provider="mistral", mistral_api_key="k")) is None

    def test_mistral(self):
        """Test the Mistral analyzer is built."""
        analyzer = create_analyzer(AnalysisConfig(
            provider="mistral",
            mistral_api_key="k",
            mistral_api_url="https://mistral.example",
        ))

        assert isinstance(analyzer, MistralClauseAnalyzer)


class SlowAnalyzer(IClauseAnalyzer):
    """Analyzer whose call time depends on the clause type."""

    def __init__(self, delays):
        self.delays = delays

    def analyze(self, clause_type, client_text, vendor_text):
        time.sleep(self.delays.get(clause_type, 0))
        if clause_type == "boom":
            raise RuntimeError("analyzer crashed")
        return AnalysisResult(summary=clause_type, risk="LOW", recommendation="")


class TestAnalysisRunner:
    """Tests for concurrent analysis execution."""

    def test_results_follow_request_order(self):
        """Test results are placed by index, not completion order."""
        analyzer = SlowAnalyzer({"first": 0.2, "second": 0.0, "third": 0.1})
        requests_ = [AnalysisRequest(name, "c", "v") for name in ("first", "second", "third")]

        results = AnalysisRunner(analyzer, max_workers=3).run(requests_)

        assert [r.summary for r in results] == ["first", "second", "third"]

    def test_exception_degrades_single_result(self):
        """Test one failing call only affects its own result."""
        analyzer = SlowAnalyzer({})
        requests_ = [AnalysisRequest(name, "c", "v") for name in ("ok", "boom", "fine")]

        results = AnalysisRunner(analyzer).run(requests_)

        assert results[0].summary == "ok"
        assert results[1] == AnalysisResult.fallback()
        assert results[2].summary == "fine"

    def test_timeout_degrades_single_result(self):
        """Test a call exceeding the timeout yields the fallback."""
        analyzer = SlowAnalyzer({"slow": 1.0})
        requests_ = [AnalysisRequest("slow", "c", "v"), AnalysisRequest("fast", "c", "v")]

        results = AnalysisRunner(analyzer, max_workers=2, timeout=0.2).run(requests_)

        assert results[0] == AnalysisResult.fallback()
        assert results[1].summary == "fast"

    def test_empty_requests(self):
        """Test no requests means no work."""
        assert AnalysisRunner(SlowAnalyzer({})).run([]) == []

    def test_timeout_counts_from_call_start(self):
        """Test a slow call is degraded even when an earlier call was slow too."""
        analyzer = SlowAnalyzer({"a": 0.3, "b": 0.6})
        requests_ = [AnalysisRequest("a", "c", "v"), AnalysisRequest("b", "c", "v")]

        results = AnalysisRunner(analyzer, max_workers=2, timeout=0.45).run(requests_)

        assert results[0].summary == "a"
        assert results[1] == AnalysisResult.fallback()

    def test_queued_calls_get_their_own_timeout(self):
        """Test time spent waiting for a worker is not charged to a call."""
        analyzer = SlowAnalyzer({"first": 0.25, "second": 0.25})
        requests_ = [AnalysisRequest("first", "c", "v"), AnalysisRequest("second", "c", "v")]

        results = AnalysisRunner(analyzer, max_workers=1, timeout=0.4).run(requests_)

        assert [r.summary for r in results] == ["first", "second"]

    def test_hung_workers_do_not_stall_the_run(self):
        """Test queued calls give up once every worker is held by a timed-out call."""
        release = threading.Event()

        class HangingAnalyzer(IClauseAnalyzer):
            def analyze(self, clause_type, client_text, vendor_text):
                release.wait(5.0)
                return AnalysisResult(summary=clause_type, risk="LOW", recommendation="")

        requests_ = [AnalysisRequest(str(i), "c", "v") for i in range(4)]
        try:
            start = time.monotonic()
            results = AnalysisRunner(HangingAnalyzer(), max_workers=1, timeout=0.2).run(requests_)
            elapsed = time.monotonic() - start
        finally:
            release.set()

        assert all(r.failed for r in results)
        assert elapsed < 0.6


class TestAnalysisResult:
    """Tests for the analysis result model."""

    def test_fallback_is_failed(self):
        """Test the fallback triple is flagged as a failure."""
        assert AnalysisResult.fallback().failed

    def test_unknown_risk_reply_is_not_failed(self):
        """Test a real reply that rates risk as unknown is kept."""
        result = AnalysisResult(summary="Terms differ.", risk="Unknown", recommendation="Ask.")

        assert not result.failed
