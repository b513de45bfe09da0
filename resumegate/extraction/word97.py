"""Text recovery for legacy Word 97-2003 (.doc) binary documents.

A .doc file is an OLE2 compound file. The ``WordDocument`` stream starts
with the File Information Block (FIB) which records the character counts
of each story and where the piece table (Clx) lives inside the table
stream (``0Table`` or ``1Table``). The piece table maps character
positions (CPs) onto byte ranges of the ``WordDocument`` stream, either as
8-bit cp1252 ("compressed") or UTF-16LE text.

Stories are laid out back to back in CP space: main body, footnotes, then
the header document. The header document is split into stories by
PlcfHdd: six separator stories, then six stories per section (even
header, odd header, even footer, odd footer, first header, first footer).
"""

import re
import struct
from dataclasses import dataclass, field
from pathlib import Path

import olefile

_WORD_IDENT = 0xA5EC

_FIB_FLAGS = 0x000A
_FIB_FC_MIN = 0x0018
_FIB_CCP_TEXT = 0x004C
_FIB_PLCF_HDD = 0x00F2
_FIB_CLX = 0x01A2
_FIB_MIN_SIZE = _FIB_CLX + 8

_FLAG_ENCRYPTED = 0x0100
_FLAG_WHICH_TABLE = 0x0200
_FC_COMPRESSED = 0x40000000

_SEPARATOR_STORIES = 6
_SECTION_STORY_KINDS = ("header", "header", "footer", "footer", "header", "footer")

_FIELD_CODE = re.compile(r"\x13[^\x13\x14\x15]*\x14")
_FIELD_WITHOUT_RESULT = re.compile(r"\x13[^\x13\x14\x15]*\x15")
_LINE_BREAKS = re.compile(r"[\r\x07\x0b\x0c]")
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0e-\x1f]")


class Word97FormatError(Exception):
    """Raised when a stream does not follow the Word 97 binary layout."""


@dataclass(frozen=True)
class LegacyWordDocument:
    """Text recovered from a .doc file, grouped by story."""

    body: str = ""
    headers: list[str] = field(default_factory=list)
    footers: list[str] = field(default_factory=list)
    text: str = ""


@dataclass(frozen=True)
class _Piece:
    cp_start: int
    cp_end: int
    fc: int
    compressed: bool


class Word97Reader:
    """Reads the text stories of a .doc file stored on disk."""

    def read(self, path: Path) -> LegacyWordDocument | None:
        """Return the document's stories, or None when it holds no Word stream.

        Raises:
            Word97FormatError: if the file is not a readable Word 97 document.
        """
        if not olefile.isOleFile(str(path)):
            raise Word97FormatError("not an OLE2 compound document")
        with olefile.OleFileIO(str(path)) as ole:
            if not ole.exists("WordDocument"):
                return None
            word_stream = ole.openstream("WordDocument").read()
            flags = self._read_fib_header(word_stream)
            table_name = "1Table" if flags & _FLAG_WHICH_TABLE else "0Table"
            table_stream = ole.openstream(table_name).read() if ole.exists(table_name) else b""
        return self._decode(word_stream, table_stream)

    @staticmethod
    def _read_fib_header(word_stream: bytes) -> int:
        if len(word_stream) < _FIB_MIN_SIZE:
            raise Word97FormatError("WordDocument stream is too short")
        ident, = struct.unpack_from("<H", word_stream, 0)
        if ident != _WORD_IDENT:
            raise Word97FormatError(f"unexpected FIB identifier 0x{ident:04X}")
        flags, = struct.unpack_from("<H", word_stream, _FIB_FLAGS)
        if flags & _FLAG_ENCRYPTED:
            raise Word97FormatError("document is encrypted")
        return flags

    def _decode(self, word_stream: bytes, table_stream: bytes) -> LegacyWordDocument:
        ccp_text, ccp_ftn, ccp_hdd = struct.unpack_from("<3I", word_stream, _FIB_CCP_TEXT)
        fc_clx, lcb_clx = struct.unpack_from("<II", word_stream, _FIB_CLX)
        try:
            pieces = _parse_piece_table(table_stream, fc_clx, lcb_clx)
        except Word97FormatError:
            return LegacyWordDocument(text=_fallback_text(word_stream))

        body = _clean(_read_range(word_stream, pieces, 0, ccp_text))
        headers: list[str] = []
        footers: list[str] = []
        hdd_start = ccp_text + ccp_ftn
        for kind, start, end in _header_stories(word_stream, table_stream, ccp_hdd):
            story = _clean(_read_range(word_stream, pieces, hdd_start + start, hdd_start + end))
            if not story.strip():
                continue
            (headers if kind == "header" else footers).append(story.strip())
        return LegacyWordDocument(body=body, headers=headers, footers=footers)


def _parse_piece_table(table: bytes, fc_clx: int, lcb_clx: int) -> list[_Piece]:
    if lcb_clx == 0 or fc_clx + lcb_clx > len(table):
        raise Word97FormatError("Clx is missing")
    pos = fc_clx
    end = fc_clx + lcb_clx
    while pos < end:
        clxt = table[pos]
        if clxt == 0x01:
            cb_grpprl, = struct.unpack_from("<H", table, pos + 1)
            pos += 3 + cb_grpprl
        elif clxt == 0x02:
            lcb, = struct.unpack_from("<I", table, pos + 1)
            return _parse_plc_pcd(table[pos + 5:pos + 5 + lcb])
        else:
            break
    raise Word97FormatError("Pcdt not found in Clx")


def _parse_plc_pcd(data: bytes) -> list[_Piece]:
    count = (len(data) - 4) // 12
    if count <= 0:
        raise Word97FormatError("empty piece table")
    cps = struct.unpack_from(f"<{count + 1}I", data, 0)
    pcd_offset = 4 * (count + 1)
    pieces = []
    for index in range(count):
        fc_raw, = struct.unpack_from("<I", data, pcd_offset + index * 8 + 2)
        compressed = bool(fc_raw & _FC_COMPRESSED)
        fc = (fc_raw & ~_FC_COMPRESSED) // 2 if compressed else fc_raw
        pieces.append(_Piece(cps[index], cps[index + 1], fc, compressed))
    return pieces


def _read_range(word_stream: bytes, pieces: list[_Piece], cp_start: int, cp_end: int) -> str:
    chunks = []
    for piece in pieces:
        lo = max(cp_start, piece.cp_start)
        hi = min(cp_end, piece.cp_end)
        if lo >= hi:
            continue
        if piece.compressed:
            offset = piece.fc + (lo - piece.cp_start)
            raw = word_stream[offset:offset + (hi - lo)]
            chunks.append(raw.decode("cp1252", errors="replace"))
        else:
            offset = piece.fc + 2 * (lo - piece.cp_start)
            raw = word_stream[offset:offset + 2 * (hi - lo)]
            chunks.append(raw.decode("utf-16-le", errors="replace"))
    return "".join(chunks)


def _header_stories(
    word_stream: bytes, table_stream: bytes, ccp_hdd: int
) -> list[tuple[str, int, int]]:
    if ccp_hdd == 0:
        return []
    fc_plcf_hdd, lcb_plcf_hdd = struct.unpack_from("<II", word_stream, _FIB_PLCF_HDD)
    if lcb_plcf_hdd < 8 or fc_plcf_hdd + lcb_plcf_hdd > len(table_stream):
        return []
    count = lcb_plcf_hdd // 4
    cps = struct.unpack_from(f"<{count}I", table_stream, fc_plcf_hdd)
    stories = []
    for index in range(_SEPARATOR_STORIES, count - 1):
        start, end = cps[index], min(cps[index + 1], ccp_hdd)
        if start >= end:
            continue
        kind = _SECTION_STORY_KINDS[(index - _SEPARATOR_STORIES) % len(_SECTION_STORY_KINDS)]
        stories.append((kind, start, end))
    return stories


def _fallback_text(word_stream: bytes) -> str:
    fc_min, fc_mac = struct.unpack_from("<II", word_stream, _FIB_FC_MIN)
    if not 0 < fc_min < fc_mac <= len(word_stream):
        return ""
    return _clean(word_stream[fc_min:fc_mac].decode("cp1252", errors="replace"))


def _clean(text: str) -> str:
    text = _FIELD_CODE.sub("", text)
    text = _FIELD_WITHOUT_RESULT.sub("", text)
    text = text.replace("\x15", "").replace("\x1e", "-").replace("\x1f", "")
    text = _LINE_BREAKS.sub("\n", text)
    return _CONTROL_CHARS.sub("", text)
