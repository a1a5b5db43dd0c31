"""IPv4 address value object and the thin adapters over the URL parser.

`IPAddress` keeps the four octets of an address; the parser itself only deals
in 32-bit integers (octet 0 in bits 31-24).
"""

from dataclasses import dataclass
from typing import Tuple, Union

from url_ipv4.parser import BytesLike, NotAnIpError, parse


@dataclass(frozen=True)
class IPAddress:
    """Simple IPv4 address value object.

    Internally stores four octets (0-255). Provides parsing from string/int and
    some convenience helpers.
    """
    octets: Tuple[int, int, int, int]

    def __post_init__(self) -> None:
        if len(self.octets) != 4:
            raise ValueError("IPAddress needs exactly four octets")
        self._validate_octets(self.octets)

    @classmethod
    def parse(cls, value: Union['IPAddress', int, Tuple[int, int, int, int], BytesLike]) -> 'IPAddress':
        """Create an IPAddress from a 32-bit integer, a 4-tuple or URL-style text.

        Text (str or bytes-like) goes through the URL IPv4 grammar, so
        ``IPAddress.parse("0x7f.1")`` is 127.0.0.1.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise TypeError("Unsupported type for IPAddress.parse")
        if isinstance(value, int):
            return cls.from_int(value)
        if isinstance(value, (tuple, list)):
            if len(value) != 4:
                raise ValueError("Tuple must have four elements")
            o1, o2, o3, o4 = (int(value[0]), int(value[1]), int(value[2]), int(value[3]))
            return cls((o1, o2, o3, o4))
        if isinstance(value, (str, bytes, bytearray, memoryview)):
            return cls.from_int(parse(value))
        raise TypeError("Unsupported type for IPAddress.parse")

    @staticmethod
    def _validate_octets(octets: Tuple[int, int, int, int]) -> None:
        for o in octets:
            if not (0 <= o <= 255):
                raise ValueError(f"Invalid octet value: {o}")

    def __str__(self) -> str:
        return '.'.join(str(o) for o in self.octets)

    def __int__(self) -> int:
        return self.to_int()

    @property
    def packed(self) -> bytes:
        """The address as four network-order bytes."""
        return bytes(self.octets)

    def to_int(self) -> int:
        a, b, c, d = self.octets
        return (a << 24) | (b << 16) | (c << 8) | d

    @classmethod
    def from_int(cls, value: int) -> 'IPAddress':
        if not (0 <= value <= 0xFFFFFFFF):
            raise ValueError("Integer value out of IPv4 range")
        a = (value >> 24) & 0xFF
        b = (value >> 16) & 0xFF
        c = (value >> 8) & 0xFF
        d = value & 0xFF
        return cls((a, b, c, d))


def is_ipv4(data: BytesLike) -> bool:
    """True when `data` is an IPv4 address under the URL grammar."""
    try:
        parse(data)
    except NotAnIpError:
        return False
    return True


def to_address(data: BytesLike) -> IPAddress:
    """Parse `data` into an IPAddress. Raises NotAnIpError on failure."""
    return IPAddress.from_int(parse(data))


def canonicalize(data: BytesLike) -> str:
    """Dotted-decimal spelling of `data`, e.g. ``"0x7f.1"`` -> ``"127.0.0.1"``."""
    return str(to_address(data))


__all__ = ["IPAddress", "is_ipv4", "to_address", "canonicalize"]
