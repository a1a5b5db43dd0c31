"""IPv4 host parsing as done by the WHATWG URL standard.

The URL grammar is far looser than dotted-quad: one to four parts, each part
decimal, octal (leading ``0``) or hex (leading ``0x``/``0X``), and the last
part absorbs every octet the earlier parts did not fill. ``127.1``,
``0x7f.1`` and ``2130706433`` all name 127.0.0.1.

See https://url.spec.whatwg.org/#concept-ipv4-parser
"""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview, str]

_MAX_U32 = 0xFFFFFFFF

_ZERO = 0x30
_DOT = 0x2E
_SMALL_X = 0x78
_BIG_X = 0x58


class NotAnIpError(ValueError):
    """Raised when the input is not an IPv4 address under the URL grammar."""

    def __init__(self) -> None:
        super().__init__("Not an IPv4 address")


def _digit(byte: int, radix: int) -> Optional[int]:
    """Return the value of an ASCII digit in `radix`, or None."""
    if 0x30 <= byte <= 0x39:
        d = byte - 0x30
    elif 0x61 <= byte <= 0x66:
        d = byte - 0x61 + 10
    elif 0x41 <= byte <= 0x46:
        d = byte - 0x41 + 10
    else:
        return None
    return d if d < radix else None


class IpParser:
    """Single-use cursor over the input bytes.

    A parser is created per call, walks the buffer once from left to right
    and is thrown away. Nothing is shared between calls.
    """

    __slots__ = ("buf", "pos")

    def __init__(self, data: Union[bytes, bytearray, memoryview]):
        self.buf = memoryview(data).cast("B")
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos == len(self.buf)

    def current(self) -> int:
        return self.buf[self.pos]

    def advance(self) -> None:
        assert not self.at_end()
        self.pos += 1

    def radix(self) -> int:
        """Consume the radix prefix of the current part and return the radix."""
        if self.at_end() or self.current() == _DOT:
            raise NotAnIpError()
        if self.current() != _ZERO:
            return 10
        self.advance()
        if not self.at_end() and self.current() in (_SMALL_X, _BIG_X):
            self.advance()
            # "0x" must be followed by something
            if self.at_end():
                raise NotAnIpError()
            return 16
        return 8

    def value(self) -> int:
        """Read one part. Stops at a dot or at the end of input."""
        radix = self.radix()
        if self.at_end():
            return 0
        v = 0
        while True:
            d = _digit(self.current(), radix)
            if d is None:
                break
            v = v * radix + d
            if v > _MAX_U32:
                raise NotAnIpError()
            self.advance()
            if self.at_end():
                return v
        if self.current() != _DOT:
            raise NotAnIpError()
        return v

    @staticmethod
    def last_part(v: int, part: int, at_end: bool) -> int:
        """Check that the terminal part `v` fits in the bits left after `part` octets."""
        if not at_end:
            raise NotAnIpError()
        if v.bit_length() > 32 - 8 * part:
            raise NotAnIpError()
        return v

    def parse(self) -> int:
        address = 0
        for part in range(3):
            x = self.value()
            # a part too wide for one octet, or the end of input, is terminal
            if x >= 256 or self.at_end():
                return address | self.last_part(x, part, self.at_end())
            assert self.current() == _DOT
            self.advance()
            address |= x << (24 - part * 8)
        x = self.value()
        return address | self.last_part(x, 3, self.at_end())


def _as_buffer(data: BytesLike) -> Union[bytes, bytearray, memoryview]:
    if isinstance(data, str):
        # lone surrogates become non-ASCII bytes and fail like any other non-digit
        return data.encode("utf-8", "surrogatepass")
    if isinstance(data, memoryview):
        return data if data.c_contiguous else data.tobytes()
    if isinstance(data, (bytes, bytearray)):
        return data
    raise TypeError(f"Expected str or bytes-like input, got {type(data).__name__}")


def parse(data: BytesLike) -> int:
    """Parse `data` into a 32-bit address, octet 0 in the most significant byte.

    Raises:
        NotAnIpError: if `data` is not an IPv4 address under the URL grammar.
        TypeError: if `data` is neither str nor bytes-like.
    """
    return IpParser(_as_buffer(data)).parse()


__all__ = ["NotAnIpError", "IpParser", "parse"]
