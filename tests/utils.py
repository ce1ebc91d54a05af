from __future__ import annotations

import zlib
from pathlib import Path

import docx


def naive_search(text: str, pattern: str) -> list[int]:
    """Reference double-loop scan returning every start offset of pattern."""
    if not text or not pattern:
        return []
    positions = []
    for start in range(len(text) - len(pattern) + 1):
        if all(text[start + k] == pattern[k] for k in range(len(pattern))):
            positions.append(start)
    return positions


def write_minimal_docx(path: Path, paragraphs: list[str]) -> None:
    """Create a DOCX file containing one paragraph per entry."""
    document = docx.Document()
    for paragraph in paragraphs:
        document.add_paragraph(paragraph)
    document.save(str(path))


def write_minimal_pdf(path: Path, lines: list[str], compress: bool = True) -> None:
    """Create a one-page PDF showing each line in Helvetica.

    With compress=True the content stream is FlateDecode-encoded, as in
    PDFs produced by real authoring tools.
    """
    content = "\n".join(
        f"BT /F1 12 Tf 72 {712 - 14 * idx} Td ({line}) Tj ET"
        for idx, line in enumerate(lines)
    ).encode("latin-1")
    if compress:
        stream = zlib.compress(content)
        stream_dict = f"<< /Length {len(stream)} /Filter /FlateDecode >>".encode()
    else:
        stream = content
        stream_dict = f"<< /Length {len(stream)} >>".encode()

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Resources << /Font << /F1 5 0 R >> >> /Contents 4 0 R >>",
        stream_dict + b"\nstream\n" + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    body = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, obj in enumerate(objects, start=1):
        offsets.append(len(body))
        body += f"{number} 0 obj\n".encode() + obj + b"\nendobj\n"
    xref_offset = len(body)
    body += f"xref\n0 {len(objects) + 1}\n".encode()
    body += b"0000000000 65535 f \n"
    for offset in offsets:
        body += f"{offset:010d} 00000 n \n".encode()
    body += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_offset}\n%%EOF\n"
    ).encode()
    path.write_bytes(bytes(body))
