"""IPv4 parsing with the WHATWG URL grammar.

The parser returns the address as a 32-bit integer; `IPAddress` and the
helpers in `url_ipv4.ip` wrap it for callers that want octets.
"""
from .parser import NotAnIpError, IpParser, parse
from .ip import IPAddress, is_ipv4, to_address, canonicalize

__all__ = [
    "NotAnIpError",
    "IpParser",
    "parse",
    "IPAddress",
    "is_ipv4",
    "to_address",
    "canonicalize",
]
