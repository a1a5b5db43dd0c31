import argparse
import logging
import sys
from typing import List, Optional, TextIO

from url_ipv4.batch import OUTPUT_FORMATS, ParseStatistics, classify_lines


def parse_args(argv):
    parser = argparse.ArgumentParser(description='Parse IPv4 addresses with the WHATWG URL grammar')
    parser.add_argument('addresses', nargs='*',
                        help='Candidate addresses, e.g. 127.1 0x7f.0.0.1 2130706433')
    parser.add_argument('-f', dest='file', default=None,
                        help="Read candidates from a file, one per line ('-' for stdin)")
    parser.add_argument('-format', dest='format', choices=OUTPUT_FORMATS, default='dotted',
                        help='Output format for valid addresses: dotted, int or hex')
    parser.add_argument('-debug', required=False, action='store_true', dest='debug', default=False,
                        help='Enable debug logging output to console')
    return parser.parse_args(argv)


def _read_lines(path: str) -> List[str]:
    if path == '-':
        return sys.stdin.read().splitlines()
    with open(path, "r", encoding="utf-8") as f:
        return f.read().splitlines()


def main(argv, out: Optional[TextIO] = None, *, setup_logging: bool = True) -> int:
    """Print one ``input<TAB>result`` line per candidate.

    Returns 0 when every candidate is an address, 1 otherwise.
    """
    args = parse_args(argv)
    if setup_logging:
        set_logger(debug=args.debug)
    out = out if out is not None else sys.stdout

    lines = list(args.addresses)
    if args.file is not None:
        lines.extend(_read_lines(args.file))
    if not lines:
        logging.error("No addresses given. Pass them as arguments or with -f FILE")
        return 2

    stats = ParseStatistics()
    for outcome in classify_lines(lines, stats):
        print(outcome.format(args.format), file=out)

    logging.debug("Parse stats: %s", stats.summary())
    return 0 if stats.invalid_count == 0 else 1


def set_logger(debug: bool = False):
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # remove any existing handlers so we don't duplicate output when reloading
    for h in logger.handlers[:]:
        logger.removeHandler(h)

    # Results go to stdout; logs go to stderr so they can be piped apart.
    console_handler = logging.StreamHandler(stream=sys.stderr)
    console_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    console_handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(filename)s:%(lineno)d %(message)s",
        datefmt="%H:%M:%S",
    ))
    logger.addHandler(console_handler)


if __name__ == '__main__':
    try:
        raise SystemExit(main(sys.argv[1:]))
    except Exception:
        logging.exception("Address parsing failed with an exception")
        raise
