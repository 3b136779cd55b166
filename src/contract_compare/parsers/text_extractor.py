"""Text extraction from raw document bytes.

Uses PyPDF2 to validate PDF files and pdfplumber to pull their text,
and python-docx for Word documents. Anything else is decoded as plain text.
"""

import io
import logging
from typing import List
from zipfile import BadZipFile

import pdfplumber
from docx import Document
from docx.opc.exceptions import PackageNotFoundError
from PyPDF2 import PdfReader
from PyPDF2.errors import PdfReadError

from ..interfaces.extractor import ITextExtractor
from ..models.enums import DocumentType
from .exceptions import DocumentCorruptedError, ExtractionError, UnsupportedFormatError


logger = logging.getLogger(__name__)

PDF_MAGIC = b"%PDF"
ZIP_MAGIC = b"PK\x03\x04"


class DocumentTextExtractor(ITextExtractor):
    """
    Default text-extraction collaborator.
    
    Detects the document format from its leading bytes and delegates to
    the matching library.
    """

    def extract(self, data: bytes) -> str:
        """
        Extract plain text from document bytes.
        
        Args:
            data: Raw bytes of a PDF, DOCX or plain-text document.
            
        Returns:
            The extracted text.
            
        Raises:
            ExtractionError: If no non-whitespace text can be recovered.
            DocumentCorruptedError: If the document cannot be opened.
        """
        if not data:
            raise ExtractionError(message="Document is empty")

        doc_type = self.detect_document_type(data)
        logger.debug(f"Extracting text from {doc_type.value} document ({len(data)} bytes)")

        if doc_type is DocumentType.PDF:
            text = self._extract_pdf(data)
        elif doc_type is DocumentType.WORD:
            text = self._extract_docx(data)
        else:
            text = self._decode_text(data)

        if not text or not text.strip():
            raise ExtractionError(
                message=(
                    "No readable text found in the document. Please ensure "
                    "the document contains selectable text."
                ),
                details={"document_type": doc_type.value},
            )
        return text

    def detect_document_type(self, data: bytes) -> DocumentType:
        """Detect the document type from its magic bytes."""
        if data.startswith(PDF_MAGIC):
            return DocumentType.PDF
        if data.startswith(ZIP_MAGIC):
            return DocumentType.WORD
        return DocumentType.TEXT

    def _extract_pdf(self, data: bytes) -> str:
        try:
            PdfReader(io.BytesIO(data))
        except PdfReadError as e:
            raise DocumentCorruptedError(
                message="PDF file is corrupted or encrypted",
                details={"original_error": str(e)},
            )

        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                text_parts: List[str] = []
                for page in pdf.pages:
                    page_text = page.extract_text()
                    if page_text:
                        text_parts.append(page_text)
        except Exception as e:
            raise ExtractionError(
                message=f"Failed to extract PDF text: {e}",
                details={"original_error": str(e)},
            )
        return "\n\n".join(text_parts)

    def _extract_docx(self, data: bytes) -> str:
        try:
            document = Document(io.BytesIO(data))
        except (PackageNotFoundError, BadZipFile, KeyError) as e:
            raise UnsupportedFormatError(
                message="Zip archive is not a readable Word document",
                details={
                    "original_error": str(e),
                    "supported_formats": [".pdf", ".docx", ".txt"],
                },
            )
        return "\n".join(paragraph.text for paragraph in document.paragraphs)

    def _decode_text(self, data: bytes) -> str:
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("Document is not valid UTF-8, decoding as latin-1")
            return data.decode("latin-1")
