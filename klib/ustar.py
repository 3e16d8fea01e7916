"""Reading and writing 512-byte headers of POSIX ustar archives."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

from klib.arithmetic import INT_MAX, ULONG_MAX

USTAR_HEADER_SIZE = 512

# Fixed mtime written into every header: 2006-01-01 08:00:00 UTC.
_MTIME = 1136102400

_NAME = slice(0, 100)
_MODE = slice(100, 108)
_UID = slice(108, 116)
_GID = slice(116, 124)
_SIZE = slice(124, 136)
_MTIME_FIELD = slice(136, 148)
_CHKSUM = slice(148, 156)
_TYPEFLAG = 156
_MAGIC = slice(257, 263)
_VERSION = slice(263, 265)
_UNAME = slice(265, 297)
_GNAME = slice(297, 329)
_PREFIX = slice(345, 500)

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class UstarType(IntEnum):
    """Type of an archive entry; values are the bytes used in the format."""

    REGULAR = ord("0")
    DIRECTORY = ord("5")
    EOF = -1


class UstarError(ValueError):
    """Raised when a header cannot be made or parsed."""


@dataclass(frozen=True)
class UstarEntry:
    """An archive entry described by one header; NAME is None at end of archive."""

    name: Optional[str]
    kind: UstarType
    size: int


def strip_antisocial_prefixes(file_name: str) -> str:
    """Drop leading "/", "./" and "../" components that could escape a directory.

    An empty result, or one that is just "..", becomes ".".
    """
    while file_name.startswith(("/", "./", "../")):
        file_name = file_name[file_name.index("/") + 1 :]
    return "." if file_name in ("", "..") else file_name


def _checksum(header: Union[bytes, bytearray]) -> int:
    """Sum of the header's bytes, counting the chksum field as spaces."""
    field_len = _CHKSUM.stop - _CHKSUM.start
    return sum(header) - sum(header[_CHKSUM]) + field_len * ord(" ")


def _put(header: bytearray, field: slice, text: str) -> None:
    data = text.encode("ascii")
    header[field.start : field.start + len(data)] = data


def make_header(file_name: str, kind: UstarType, size: int) -> bytes:
    """Compose a 512-byte ustar header for a SIZE-byte file named FILE_NAME.

    Raises UstarError if the name, once stripped of dangerous prefixes,
    is longer than 99 bytes.
    """
    if kind not in (UstarType.REGULAR, UstarType.DIRECTORY):
        raise ValueError(f"kind must be REGULAR or DIRECTORY, got {kind!r}")
    if not 0 <= size <= INT_MAX:
        raise ValueError(f"size out of range [0, {INT_MAX}]: {size}")

    stripped = strip_antisocial_prefixes(file_name)
    name = stripped.encode(_ENCODING, _ERRORS)
    if len(name) > 99:
        raise UstarError(f"{stripped}: file name too long")

    header = bytearray(USTAR_HEADER_SIZE)
    header[_NAME.start : _NAME.start + len(name)] = name
    _put(header, _MODE, f"{0o644 if kind == UstarType.REGULAR else 0o755:07o}")
    _put(header, _UID, "0000000")
    _put(header, _GID, "0000000")
    _put(header, _SIZE, f"{size:011o}")
    _put(header, _MTIME_FIELD, f"{_MTIME:011o}")
    header[_TYPEFLAG] = int(kind)
    _put(header, _MAGIC, "ustar")
    _put(header, _VERSION, "00")
    _put(header, _GNAME, "root")
    _put(header, _UNAME, "root")
    _put(header, _CHKSUM, f"{_checksum(header):07o}")
    return bytes(header)


def _parse_octal_field(field: Union[bytes, bytearray]) -> Optional[int]:
    """Parse octal digits ended by a space or NUL; None if malformed."""
    value = 0
    for ofs, byte in enumerate(field):
        if ord("0") <= byte <= ord("7"):
            if value > ULONG_MAX // 8:
                return None
            value = value * 8 + byte - ord("0")
        elif byte in (ord(" "), 0):
            return value if ofs > 0 else None
        else:
            return None
    return None


def parse_header(header: Union[bytes, bytearray, memoryview]) -> UstarEntry:
    """Parse a 512-byte header for a regular file or directory.

    An all-zero header marks the end of the archive and yields an entry
    of kind EOF.  Raises UstarError describing what is wrong otherwise.
    """
    data = bytes(header)
    if len(data) != USTAR_HEADER_SIZE:
        raise ValueError(f"header must be {USTAR_HEADER_SIZE} bytes, got {len(data)}")

    if not any(data):
        return UstarEntry(None, UstarType.EOF, 0)

    if data[_MAGIC] != b"ustar\0":
        raise UstarError("not a ustar archive")
    if data[_VERSION] != b"00":
        raise UstarError("invalid ustar version")
    chksum = _parse_octal_field(data[_CHKSUM])
    if chksum is None:
        raise UstarError("corrupt chksum field")
    if chksum != _checksum(data):
        raise UstarError("checksum mismatch")
    if data[_NAME.stop - 1] != 0 or data[_PREFIX.start] != 0:
        raise UstarError("file name too long")
    typeflag = data[_TYPEFLAG]
    if typeflag not in (UstarType.REGULAR, UstarType.DIRECTORY):
        raise UstarError("unimplemented file type")

    kind = UstarType(typeflag)
    size = 0
    if kind == UstarType.REGULAR:
        parsed = _parse_octal_field(data[_SIZE])
        if parsed is None:
            raise UstarError("corrupt file size field")
        if parsed > INT_MAX:
            raise UstarError("file too large")
        size = parsed

    raw_name = data[_NAME].split(b"\0", 1)[0]
    name = strip_antisocial_prefixes(raw_name.decode(_ENCODING, _ERRORS))
    return UstarEntry(name, kind, size)