"""Text extractor interface for the Contract Compare system."""

from abc import ABC, abstractmethod


class ITextExtractor(ABC):
    """
    Abstract interface for the text-extraction collaborator.
    
    Implementations turn raw document bytes into plain text. The comparison
    core never inspects the byte format itself.
    """

    @abstractmethod
    def extract(self, data: bytes) -> str:
        """
        Extract plain text from a document.
        
        Args:
            data: Raw document bytes.
            
        Returns:
            The extracted text.
            
        Raises:
            ExtractionError: If no non-whitespace text is recoverable.
        """
        pass
