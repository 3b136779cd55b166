"""Clause analyzer interface for the Contract Compare system."""

from abc import ABC, abstractmethod

from ..models.comparison import AnalysisResult


class IClauseAnalyzer(ABC):
    """
    Abstract interface for the qualitative analysis collaborator.
    
    Implementations compare a client clause with a vendor clause of the
    same type and describe the differences, risk and recommended action.
    """

    @abstractmethod
    def analyze(
        self,
        clause_type: str,
        client_text: str,
        vendor_text: str,
    ) -> AnalysisResult:
        """
        Analyze a client/vendor clause pair.
        
        Args:
            clause_type: Label of the shared clause type.
            client_text: Text of the client clause.
            vendor_text: Text of the vendor clause.
            
        Returns:
            AnalysisResult whose ``risk`` starts with HIGH, MEDIUM or LOW
            (optionally followed by an explanation) or is empty. On any
            internal failure implementations return
            ``AnalysisResult.fallback()`` instead of raising.
        """
        pass
