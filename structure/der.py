# anise/structure/der.py
"""
Minimal DER (ASN.1 Distinguished Encoding Rules) reader and writer.

Only the subset needed by the file header is supported:

- INTEGER (tag 0x02), minimal two's complement, big endian
- UTF8String (tag 0x0C)
- SEQUENCE (tag 0x30), constructed

Every element is a tag byte, a length, and `length` content bytes.
Lengths use the short form below 128 and the minimal long form above.

Decoding is strict: a wrong tag, a non-minimal length or integer, an
indefinite length, invalid UTF-8, or a length running past the end of the
buffer all raise `DecodeError`. Nothing is ever defaulted.
"""

from __future__ import annotations

from typing import Tuple, Union

from anise.core.errors import DecodeError

TAG_INTEGER = 0x02
TAG_UTF8_STRING = 0x0C
TAG_SEQUENCE = 0x30

# Lengths above 4 GiB are never legitimate for a header.
MAX_LENGTH_OCTETS = 4

BytesLike = Union[bytes, bytearray, memoryview]


# =============================================================
# Encoding
# =============================================================

def encode_length(length: int) -> bytes:
    if length < 0:
        raise ValueError("DER length cannot be negative")
    if length < 0x80:
        return bytes([length])
    octets = length.to_bytes((length.bit_length() + 7) // 8, "big")
    if len(octets) > MAX_LENGTH_OCTETS:
        raise ValueError(f"DER length {length} is too large")
    return bytes([0x80 | len(octets)]) + octets


def tlv_len(content_len: int) -> int:
    """Encoded size of an element carrying `content_len` content bytes."""
    return 1 + len(encode_length(content_len)) + content_len


def integer_content(value: int) -> bytes:
    """Minimal two's complement big-endian encoding of `value`."""
    magnitude = value if value >= 0 else ~value
    return value.to_bytes(magnitude.bit_length() // 8 + 1, "big", signed=True)


class Writer:
    """Append-only DER output buffer."""

    def __init__(self):
        self._buf = bytearray()

    def __len__(self) -> int:
        return len(self._buf)

    def write_tlv(self, tag: int, content: BytesLike) -> None:
        self._buf.append(tag)
        self._buf += encode_length(len(content))
        self._buf += content

    def write_integer(self, value: int) -> None:
        self.write_tlv(TAG_INTEGER, integer_content(value))

    def write_utf8(self, text: str) -> None:
        self.write_tlv(TAG_UTF8_STRING, text.encode("utf-8"))

    def write_sequence(self, inner: "Writer") -> None:
        self.write_tlv(TAG_SEQUENCE, inner.getvalue())

    def getvalue(self) -> bytes:
        return bytes(self._buf)


# =============================================================
# Decoding
# =============================================================

class Reader:
    """
    Cursor over a DER buffer.

    A reader only ever moves forward. `end` bounds the reader, which is how
    the content of a SEQUENCE gets its own reader.
    """

    def __init__(self, data: BytesLike, offset: int = 0, end: int | None = None):
        self._data = bytes(data)
        self._end = len(self._data) if end is None else end
        if not 0 <= offset <= self._end <= len(self._data):
            raise ValueError(f"offset {offset} is outside of the buffer")
        self._pos = offset

    @property
    def position(self) -> int:
        return self._pos

    def remaining(self) -> int:
        return self._end - self._pos

    def is_finished(self) -> bool:
        return self._pos == self._end

    def finish(self, what: str) -> None:
        if not self.is_finished():
            raise DecodeError(f"{self.remaining()} trailing byte(s) after {what}", self._pos)

    def _read_length(self, what: str) -> int:
        if self.remaining() < 1:
            raise DecodeError(f"missing length of {what}", self._pos)
        first = self._data[self._pos]
        self._pos += 1
        if first < 0x80:
            return first
        n_octets = first & 0x7F
        if n_octets == 0:
            raise DecodeError(f"indefinite length not allowed for {what}", self._pos - 1)
        if n_octets > MAX_LENGTH_OCTETS or n_octets > self.remaining():
            raise DecodeError(f"length of {what} overruns the buffer", self._pos - 1)
        octets = self._data[self._pos:self._pos + n_octets]
        self._pos += n_octets
        length = int.from_bytes(octets, "big")
        if octets[0] == 0 or length < 0x80:
            raise DecodeError(f"non-minimal length encoding for {what}", self._pos - n_octets - 1)
        return length

    def read_tlv(self, tag: int, what: str) -> Tuple[bytes, int]:
        """
        Read one element, checking its tag.

        Returns the content bytes and the offset where the element starts.
        """
        start = self._pos
        if self.remaining() < 1:
            raise DecodeError(f"unexpected end of data, expected {what}", start)
        found = self._data[start]
        if found != tag:
            raise DecodeError(f"unexpected tag 0x{found:02X} for {what}, expected 0x{tag:02X}", start)
        self._pos += 1
        length = self._read_length(what)
        if length > self.remaining():
            raise DecodeError(
                f"{what} declares {length} byte(s) but only {self.remaining()} remain", start
            )
        content = self._data[self._pos:self._pos + length]
        self._pos += length
        return content, start

    def read_integer(self, what: str) -> int:
        content, start = self.read_tlv(TAG_INTEGER, what)
        if not content:
            raise DecodeError(f"empty integer for {what}", start)
        if len(content) > 1 and (
            (content[0] == 0x00 and content[1] < 0x80)
            or (content[0] == 0xFF and content[1] >= 0x80)
        ):
            raise DecodeError(f"non-minimal integer encoding for {what}", start)
        return int.from_bytes(content, "big", signed=True)

    def read_unsigned(self, what: str) -> int:
        start = self._pos
        value = self.read_integer(what)
        if value < 0:
            raise DecodeError(f"{what} must not be negative, got {value}", start)
        return value

    def read_utf8(self, what: str) -> str:
        content, start = self.read_tlv(TAG_UTF8_STRING, what)
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(f"invalid UTF-8 in {what}: {exc.reason}", start) from exc

    def read_sequence(self, what: str) -> "Reader":
        """Read a SEQUENCE and return a reader bounded to its content."""
        content, _ = self.read_tlv(TAG_SEQUENCE, what)
        content_start = self._pos - len(content)
        return Reader(self._data, content_start, self._pos)


__all__ = [
    "TAG_INTEGER",
    "TAG_UTF8_STRING",
    "TAG_SEQUENCE",
    "encode_length",
    "tlv_len",
    "integer_content",
    "Writer",
    "Reader",
]
