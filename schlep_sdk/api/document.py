"""Document Extraction API: text, tables, images and OCR from uploaded files."""

from __future__ import annotations

from typing import Optional

from schlep_sdk.api._base import MaybeAwaitable, SubClient, file_part
from schlep_sdk.models import (
    ExtractionResponse,
    ImageExtractionResponse,
    OCRResponse,
    TableExtractionResponse,
)
from schlep_sdk.utils import require


class DocumentClient(SubClient):
    """Client for the Document Extraction API.

    Every method uploads the raw document bytes as a multipart ``file`` part.
    """

    def extract_text(self, file: bytes, format: str) -> MaybeAwaitable[ExtractionResponse]:
        """POST /document/extract/text (format: "pdf", "docx", ...)."""
        require("format", format)
        return self._executor.execute_multipart(
            "/document/extract/text",
            ExtractionResponse,
            files={"file": file_part(file, "document")},
            data={"format": format},
        )

    def extract_tables(self, file: bytes) -> MaybeAwaitable[TableExtractionResponse]:
        """POST /document/extract/tables"""
        return self._executor.execute_multipart(
            "/document/extract/tables",
            TableExtractionResponse,
            files={"file": file_part(file, "document")},
        )

    def extract_images(self, file: bytes) -> MaybeAwaitable[ImageExtractionResponse]:
        """POST /document/extract/images"""
        return self._executor.execute_multipart(
            "/document/extract/images",
            ImageExtractionResponse,
            files={"file": file_part(file, "document")},
        )

    def ocr(self, file: bytes, language: Optional[str] = None) -> MaybeAwaitable[OCRResponse]:
        """POST /document/ocr

        ``language`` is an optional hint (e.g. "eng"); the server detects the
        language when it is omitted.
        """
        data = {"language": language} if language else None
        return self._executor.execute_multipart(
            "/document/ocr",
            OCRResponse,
            files={"file": file_part(file, "image")},
            data=data,
        )
