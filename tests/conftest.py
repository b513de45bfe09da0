import io
import struct
from pathlib import Path

import docx
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

FIXTURES_DIR = Path(__file__).parent / "fixtures"

RESUME_LINES = [
    "Jane Doe",
    "jane.doe@example.com | 555-123-4567",
    "Professional Summary",
    "Backend engineer with eight years of experience.",
    "Experience",
    "- Led migration of 12 services to Python and SQL",
    "Education",
    "- State University, BSc Computer Science",
    "Skills",
    "- Python, SQL, Docker",
]


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def resume_pdf_bytes() -> bytes:
    """Generate a one-page PDF laid out like a short resume."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    y = 720
    for line in RESUME_LINES:
        c.drawString(72, y, line)
        y -= 18
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """Generate a DOCX with two paragraphs and a one-row table."""
    document = docx.Document()
    document.add_paragraph("Hello DOCX World")
    document.add_paragraph("Second paragraph")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Cell A"
    table.rows[0].cells[1].text = "Cell B"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def empty_docx_bytes() -> bytes:
    """Generate a valid DOCX without any text."""
    buf = io.BytesIO()
    docx.Document().save(buf)
    return buf.getvalue()


@pytest.fixture()
def resume_text() -> str:
    return "\n".join(RESUME_LINES)


@pytest.fixture()
def word97_sample_path() -> Path:
    """A .doc saved by Microsoft Word (from the olefile test images, BSD licensed)."""
    return FIXTURES_DIR / "word97_sample.doc"


# Minimal Word 97 writer: a version 3 compound file (512-byte sectors) holding
# a WordDocument stream and a table stream, both padded to the 4096-byte mini
# stream cutoff so every stream lives in regular FAT sectors.
_SECTOR = 512
_STREAM_SIZE = 4096
_END_OF_CHAIN = 0xFFFFFFFE
_FREE_SECT = 0xFFFFFFFF
_FAT_SECT = 0xFFFFFFFD
_NO_STREAM = 0xFFFFFFFF
_TEXT_OFFSET = 0x800
_PLCF_HDD_OFFSET = 0x100


def _dir_entry(
    name: str,
    kind: int,
    *,
    left: int = _NO_STREAM,
    child: int = _NO_STREAM,
    start: int = _END_OF_CHAIN,
    size: int = 0,
) -> bytes:
    encoded = (name + "\x00").encode("utf-16-le") if name else b""
    entry = encoded.ljust(64, b"\x00")
    entry += struct.pack("<HBB", len(encoded), kind, 1)
    entry += struct.pack("<III", left, _NO_STREAM, child)
    entry += b"\x00" * 36
    entry += struct.pack("<IQ", start, size)
    return entry


def _compound_file(streams: list[tuple[str, bytes]]) -> bytes:
    sectors_per_stream = _STREAM_SIZE // _SECTOR
    fat = [_FAT_SECT, _END_OF_CHAIN]
    starts = []
    for _ in streams:
        first = len(fat)
        starts.append(first)
        fat.extend(range(first + 1, first + sectors_per_stream))
        fat.append(_END_OF_CHAIN)
    fat.extend([_FREE_SECT] * (_SECTOR // 4 - len(fat)))

    # Sibling order follows name length: "1Table" sorts before "WordDocument".
    (word_name, _), (table_name, _) = streams
    directory = _dir_entry("Root Entry", 5, child=1)
    directory += _dir_entry(word_name, 2, left=2, start=starts[0], size=_STREAM_SIZE)
    directory += _dir_entry(table_name, 2, start=starts[1], size=_STREAM_SIZE)
    directory += _dir_entry("", 0)

    header = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1" + b"\x00" * 16
    header += struct.pack("<HHHHH", 0x003E, 0x0003, 0xFFFE, 9, 6) + b"\x00" * 6
    header += struct.pack("<IIIIIIIII", 0, 1, 1, 0, 0x1000, _END_OF_CHAIN, 0, _END_OF_CHAIN, 0)
    header += struct.pack("<I", 0) + struct.pack("<I", _FREE_SECT) * 108

    body = struct.pack(f"<{len(fat)}I", *fat) + directory
    for _, data in streams:
        body += data.ljust(_STREAM_SIZE, b"\x00")
    return header + body


def build_word97_document(
    body: str, header: str = "", footer: str = "", *, with_table_stream: bool = True
) -> bytes:
    """Build a .doc whose text is one cp1252 piece: main story, then header stories.

    Without the table stream the reader has no piece table and must fall back
    to the fcMin..fcMac text range.
    """
    text = body + header + footer
    ccp_text, ccp_hdd = len(body), len(header) + len(footer)

    # Six separator stories, then even/odd header, even/odd footer, first header/footer.
    hdd_cps = [0] * 8 + [len(header)] * 2 + [ccp_hdd] * 3
    plcf_hdd = struct.pack(f"<{len(hdd_cps)}I", *hdd_cps) if ccp_hdd else b""

    plc_pcd = struct.pack("<II", 0, len(text))
    plc_pcd += struct.pack("<HIH", 0, 0x40000000 | (_TEXT_OFFSET * 2), 0)
    clx = b"\x02" + struct.pack("<I", len(plc_pcd)) + plc_pcd
    table = clx.ljust(_PLCF_HDD_OFFSET, b"\x00") + plcf_hdd

    fib = bytearray(_TEXT_OFFSET)
    struct.pack_into("<H", fib, 0x0000, 0xA5EC)
    struct.pack_into("<H", fib, 0x000A, 0x0200)
    struct.pack_into("<II", fib, 0x0018, _TEXT_OFFSET, _TEXT_OFFSET + len(body))
    struct.pack_into("<3I", fib, 0x004C, ccp_text, 0, ccp_hdd)
    struct.pack_into("<II", fib, 0x00F2, _PLCF_HDD_OFFSET, len(plcf_hdd))
    struct.pack_into("<II", fib, 0x01A2, 0, len(clx))
    word_document = bytes(fib) + text.encode("cp1252")

    table_name = "1Table" if with_table_stream else "Data"
    return _compound_file([("WordDocument", word_document), (table_name, table)])


@pytest.fixture()
def word97_doc_bytes() -> bytes:
    """A .doc with a three-paragraph body, an odd-page header and an odd-page footer."""
    return build_word97_document(
        "Jane Doe\rSenior Engineer\rExperience\r",
        header="Confidential CV\r",
        footer="Page 1\r",
    )


@pytest.fixture()
def word97_doc_without_table_bytes() -> bytes:
    return build_word97_document("Jane Doe\rExperience\r", with_table_stream=False)
