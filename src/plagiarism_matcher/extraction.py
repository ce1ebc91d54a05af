from __future__ import annotations

import io
import logging
import zipfile
from pathlib import Path
from typing import List

import docx
from docx.opc.exceptions import PackageNotFoundError
from pypdf import PdfReader
from pypdf.errors import PdfReadError

from .errors import DocumentExtractionError, UnsupportedFileTypeError

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {".txt": "txt", ".pdf": "pdf", ".docx": "docx"}
SUPPORTED_MIME_TYPES = {
    "text/plain": "txt",
    "application/pdf": "pdf",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "docx",
}


def get_file_type(path: str | Path, mime_type: str | None = None) -> str | None:
    """Classify a document as 'txt', 'pdf' or 'docx' by extension, then MIME type."""
    suffix = Path(path).suffix.lower()
    if suffix in SUPPORTED_EXTENSIONS:
        return SUPPORTED_EXTENSIONS[suffix]
    if mime_type:
        return SUPPORTED_MIME_TYPES.get(mime_type.lower())
    return None


def is_supported_file(path: str | Path, mime_type: str | None = None) -> bool:
    return get_file_type(path, mime_type) is not None


def supported_extensions() -> List[str]:
    return list(SUPPORTED_EXTENSIONS)


def supported_mime_types() -> List[str]:
    return list(SUPPORTED_MIME_TYPES)


def extract_text(path: str | Path, mime_type: str | None = None) -> str:
    """Return the plain text of a .txt, .pdf or .docx document."""
    file_path = Path(path)
    file_type = get_file_type(file_path, mime_type)
    if file_type is None:
        raise UnsupportedFileTypeError(f"Unsupported file type: {file_path.name}")
    if not file_path.exists():
        raise DocumentExtractionError(f"Document not found: {file_path}")

    logger.debug("Extracting %s text from %s", file_type, file_path)
    if file_type == "pdf":
        return extract_text_from_pdf_bytes(file_path.read_bytes())
    if file_type == "docx":
        return _extract_docx(file_path)
    return _read_plain_text(file_path)


def _read_plain_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        logger.debug("%s is not valid UTF-8, retrying as latin-1", path)
        return path.read_text(encoding="latin-1")


def _extract_docx(path: Path) -> str:
    try:
        document = docx.Document(str(path))
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as exc:
        raise DocumentExtractionError(f"Invalid DOCX document: {path}") from exc
    return "\n".join(paragraph.text for paragraph in document.paragraphs)


def extract_text_from_pdf_bytes(data: bytes) -> str:
    """
    Extract text page by page with pypdf.

    Pages without a text layer (scanned images) contribute nothing, so an
    image-only PDF yields an empty string rather than PDF syntax.
    """
    try:
        reader = PdfReader(io.BytesIO(data))
        pages = [page.extract_text() or "" for page in reader.pages]
    except PdfReadError as exc:
        raise DocumentExtractionError(f"Invalid PDF document: {exc}") from exc
    texts = [text.strip() for text in pages if text.strip()]
    if not texts:
        logger.debug("PDF has no extractable text layer")
    return "\n".join(texts)
