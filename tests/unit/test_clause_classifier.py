"""Unit tests for clause and reporting classification."""

import pytest

from contract_compare.analyzers import (
    ClauseClassifier,
    ClausePattern,
    ReportingClassifier,
)
from contract_compare.config import ConfigurationManager
from contract_compare.models.enums import ClauseType, ReportingClauseType


class TestClauseClassifier:
    """Tests for first-match keyword classification."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1. Payment Terms\nInvoices are payable monthly.", ClauseType.PAYMENT_TERMS),
            ("2. Delivery\nGoods arrive at the client site.", ClauseType.DELIVERY_TERMS),
            ("3. Limitation of Liability\nCapped at fees.", ClauseType.PAYMENT_TERMS),
            ("3. Limitation of Liability\nCapped at one year.", ClauseType.RISK_AND_LIABILITY),
            ("4. Acceptance\nClient will inspect goods.", ClauseType.ACCEPTANCE),
            ("5. Termination\nEither party may end this.", ClauseType.TERMINATION),
            ("6. Confidentiality\nKeep all information secret.", ClauseType.CONFIDENTIALITY),
            ("7. Intellectual Property\nAll rights vest in client.", ClauseType.INTELLECTUAL_PROPERTY),
            ("8. Uptime\nThe service is up 99.9% of the time.", ClauseType.SERVICE_LEVEL),
            ("9. GDPR\nBoth parties comply.", ClauseType.DATA_PROTECTION),
            ("10. Force Majeure\nNeither party is liable.", ClauseType.FORCE_MAJEURE),
            ("11. GOVERNING LAW\nEnglish courts decide.", ClauseType.GOVERNING_LAW),
        ],
    )
    def test_classify(self, text, expected):
        """Test representative clause texts."""
        assert ClauseClassifier().classify(text) == expected

    def test_priority_order(self):
        """Test earlier rules win when several keyword sets match."""
        text = "Payment is due upon delivery and acceptance."

        assert ClauseClassifier().classify(text) == ClauseType.PAYMENT_TERMS

    def test_case_insensitive(self):
        """Test keyword matching ignores case."""
        assert ClauseClassifier().classify("INVOICE SCHEDULE") == ClauseType.PAYMENT_TERMS

    def test_fallback_to_general_terms(self):
        """Test text matching no keyword set is General Terms."""
        assert ClauseClassifier().classify("Notices by email") == ClauseType.GENERAL_TERMS
        assert ClauseClassifier().classify("") == ClauseType.GENERAL_TERMS

    def test_custom_patterns(self):
        """Test a custom ordered table replaces the defaults."""
        classifier = ClauseClassifier((
            ClausePattern(ClauseType.GOVERNING_LAW, ("court",)),
        ))

        assert classifier.classify("The court of Paris") == ClauseType.GOVERNING_LAW
        assert classifier.classify("Payment terms") == ClauseType.GENERAL_TERMS

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("The vendor shall maintain records.", ClauseType.TERMINATION),
            ("Either party may amend this schedule.", ClauseType.TERMINATION),
            ("Equipment remains on site.", ClauseType.INTELLECTUAL_PROPERTY),
            ("All IP vests in the client.", ClauseType.INTELLECTUAL_PROPERTY),
        ],
    )
    def test_short_keywords_match_as_substrings(self, text, expected):
        """Test "end" and "ip" match inside longer words."""
        assert ClauseClassifier().classify(text) == expected


class TestReportingClassifier:
    """Tests for headline reporting classification."""

    def test_termination(self):
        """Test termination wording maps to Termination."""
        result = ReportingClassifier().classify("General Terms", "At the end of agreement")

        assert result == ReportingClauseType.TERMINATION

    def test_limitation_of_liability(self):
        """Test liability wording maps to Limitation of Liability."""
        result = ReportingClassifier().classify(
            "Risk and Liability", "Limitation of liability applies"
        )

        assert result == ReportingClauseType.LIMITATION_OF_LIABILITY

    def test_ip_matches_as_substring(self):
        """Test the IP abbreviation also matches inside longer words."""
        classifier = ReportingClassifier()

        assert (
            classifier.classify("General Terms", "All IP remains with the client")
            == ReportingClauseType.CONFIDENTIALITY_AND_IP
        )
        assert (
            classifier.classify("General Terms", "The vendor equipment list")
            == ReportingClauseType.CONFIDENTIALITY_AND_IP
        )

    def test_narrowed_patterns_from_settings(self):
        """Test a whole-word IP pattern can be loaded as an override."""
        manager = ConfigurationManager()
        manager.load_settings({
            "reporting_patterns": [
                {"clause_type": "Confidentiality and IP", "pattern": r"\bip\b"},
            ]
        })
        classifier = ReportingClassifier(manager.settings.reporting_patterns)

        assert (
            classifier.classify("General Terms", "All IP remains with the client")
            == ReportingClauseType.CONFIDENTIALITY_AND_IP
        )
        assert classifier.classify("General Terms", "The vendor equipment list") is None

    def test_uses_clause_type_label(self):
        """Test the clause type label alone can decide the category."""
        result = ReportingClassifier().classify("Payment Terms", "")

        assert result == ReportingClauseType.PAYMENT_TERMS

    def test_no_match(self):
        """Test unrelated clauses are excluded from reporting."""
        assert ReportingClassifier().classify("General Terms", "Notices by email") is None
