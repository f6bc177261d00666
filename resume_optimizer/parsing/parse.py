from __future__ import annotations

import io
import logging

from docx import Document
from pypdf import PdfReader

from .models import SUPPORTED_SOURCE_TYPES, ParsedBlock, ParsedDoc

logger = logging.getLogger(__name__)

PDF_ADVISORY_TEXT = (
    "PDF parsing is currently under maintenance. Please upload a Word document or text file for best "
    "results. If you need to use a PDF, please convert it to a Word document first."
)


class UnsupportedFormatError(ValueError):
    def __init__(self, extension: str) -> None:
        self.extension = extension
        super().__init__(
            f"Unsupported file format '.{extension}'. Please upload "
            f"{', '.join(ext.upper() for ext in SUPPORTED_SOURCE_TYPES)} files."
        )


class DocumentReadError(RuntimeError):
    pass


def file_extension(file_name: str) -> str:
    return file_name.rsplit(".", 1)[-1].strip().lower() if "." in file_name else ""


def _parse_txt(content: bytes) -> tuple[str, list[ParsedBlock], list[str]]:
    if content.startswith((b"\xff\xfe", b"\xfe\xff")):
        return content.decode("utf-16"), [], []
    try:
        return content.decode("utf-8-sig"), [], []
    except UnicodeDecodeError:
        # latin-1 maps every byte, so this always succeeds.
        return content.decode("latin-1"), [], ["Text was not valid UTF-8; decoded as latin-1."]


def _parse_pdf(content: bytes) -> tuple[str, list[ParsedBlock], list[str]]:
    warnings: list[str] = []
    blocks: list[ParsedBlock] = []

    try:
        reader = PdfReader(io.BytesIO(content))
        text_parts: list[str] = []
        for index, page in enumerate(reader.pages, start=1):
            page_text = (page.extract_text() or "").strip()
            if page_text:
                text_parts.append(page_text)
                blocks.append(ParsedBlock(page=index, text=page_text))
    except Exception as exc:
        warnings.append(f"PDF parsing failed: {exc}")
        text_parts = []

    if not text_parts:
        warnings.append("No extractable text found in PDF.")
        return PDF_ADVISORY_TEXT, [], warnings
    return "\n".join(text_parts), blocks, warnings


def _parse_docx(content: bytes) -> tuple[str, list[ParsedBlock], list[str]]:
    try:
        document = Document(io.BytesIO(content))
    except Exception as exc:
        raise DocumentReadError("Failed to parse Word document") from exc

    paragraphs = [paragraph.text for paragraph in document.paragraphs]
    blocks = [ParsedBlock(text=text.strip()) for text in paragraphs if text.strip()]
    warnings = [] if blocks else ["No extractable text found in Word document."]
    return "\n".join(paragraphs), blocks, warnings


def parse_document(file_name: str, content: bytes) -> ParsedDoc:
    """Extract raw text from an uploaded document.

    Blank lines between paragraphs are kept, since the exporters turn them
    back into spacing.
    """
    extension = file_extension(file_name)
    if extension == "txt":
        text, blocks, warnings = _parse_txt(content)
    elif extension == "pdf":
        text, blocks, warnings = _parse_pdf(content)
    elif extension in {"doc", "docx"}:
        text, blocks, warnings = _parse_docx(content)
    else:
        raise UnsupportedFormatError(extension)

    for warning in warnings:
        logger.info("document_parse_warning file=%s warning=%s", file_name, warning)

    return ParsedDoc(
        file_name=file_name,
        source_type=extension,
        text=text,
        blocks=blocks,
        parsing_warnings=warnings,
    )
