"""Bulk classification of candidate addresses, one per line."""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from url_ipv4.ip import IPAddress
from url_ipv4.parser import NotAnIpError, parse

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("dotted", "int", "hex")


@dataclass(frozen=True)
class ParseOutcome:
    """Result of classifying one input string."""
    text: str
    value: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.value is not None

    @property
    def address(self) -> Optional[IPAddress]:
        return IPAddress.from_int(self.value) if self.value is not None else None

    def render(self, style: str = "dotted") -> str:
        """Render the parsed value in `style` ('dotted', 'int' or 'hex')."""
        if style not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format {style!r}. Valid: {', '.join(OUTPUT_FORMATS)}")
        if self.value is None:
            return "invalid"
        if style == "int":
            return str(self.value)
        if style == "hex":
            return f"0x{self.value:08x}"
        return str(self.address)

    def format(self, style: str = "dotted") -> str:
        return f"{self.text}\t{self.render(style)}"


@dataclass
class ParseStatistics:
    """Counters updated as lines are classified."""

    total_count: int = 0
    valid_count: int = 0
    invalid_count: int = 0
    skipped_count: int = 0

    def record(self, outcome: ParseOutcome) -> None:
        self.total_count += 1
        if outcome.ok:
            self.valid_count += 1
        else:
            self.invalid_count += 1

    def record_skipped(self) -> None:
        """Called for blank and comment lines."""
        self.skipped_count += 1

    @property
    def valid_ratio(self) -> float:
        return self.valid_count / self.total_count if self.total_count > 0 else 0.0

    def summary(self) -> dict:
        return {
            "total": self.total_count,
            "valid": self.valid_count,
            "invalid": self.invalid_count,
            "skipped": self.skipped_count,
            "valid ratio": round(self.valid_ratio, 4),
        }


def classify(text: str) -> ParseOutcome:
    try:
        value = parse(text)
    except NotAnIpError:
        logger.debug("Not an IPv4 address: %r", text)
        return ParseOutcome(text)
    return ParseOutcome(text, value)


def classify_lines(lines: Iterable[str], stats: Optional[ParseStatistics] = None) -> Iterator[ParseOutcome]:
    """Classify each non-blank line.

    Surrounding whitespace is stripped; blank lines and lines starting with
    ``#`` are skipped.
    """
    for line in lines:
        text = line.strip()
        if not text or text.startswith("#"):
            if stats is not None:
                stats.record_skipped()
            continue
        outcome = classify(text)
        if stats is not None:
            stats.record(outcome)
        yield outcome


__all__ = ["OUTPUT_FORMATS", "ParseOutcome", "ParseStatistics", "classify", "classify_lines"]
