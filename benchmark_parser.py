"""Benchmark: URL IPv4 parser vs ipaddress.IPv4Address, and per input class."""

import ipaddress
import random
import time
from typing import Callable, Dict, List

from url_ipv4.parser import NotAnIpError, parse


def _random_quads(n: int, seed: int = 1972) -> List[str]:
    rng = random.Random(seed)
    return [".".join(str(rng.randrange(256)) for _ in range(4)) for _ in range(n)]


def input_classes(n: int, seed: int = 1972) -> Dict[str, List[str]]:
    """Inputs of each grammar flavour, all derived from the same random addresses."""
    rng = random.Random(seed)
    values = [rng.getrandbits(32) for _ in range(n)]

    def octets(v):
        return [(v >> s) & 0xFF for s in (24, 16, 8, 0)]

    return {
        "decimal": [".".join(str(o) for o in octets(v)) for v in values],
        "octal": [".".join(f"0{o:o}" for o in octets(v)) for v in values],
        "hex": [".".join(f"0x{o:x}" for o in octets(v)) for v in values],
        "short": [f"{v >> 24}.{v & 0xFFFFFF}" for v in values],
        "single": [str(v) for v in values],
        "invalid": [f"{v >> 24}.{(v >> 16) & 0xFF}.{(v >> 8) & 0xFF}.{v & 0xFF}.1" for v in values],
    }


def _time_calls(fn: Callable[[str], object], inputs: List[str], iterations: int) -> float:
    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        for s in inputs:
            try:
                fn(s)
            except (NotAnIpError, ValueError):
                pass
        times.append(time.perf_counter() - start)
    return sum(times) / len(times)


def benchmark_parse(inputs: List[str], iterations: int = 5) -> float:
    """Benchmark url_ipv4.parse."""
    return _time_calls(parse, inputs, iterations)


def benchmark_stdlib(inputs: List[str], iterations: int = 5) -> float:
    """Benchmark ipaddress.IPv4Address (strict dotted-quad only)."""
    return _time_calls(ipaddress.IPv4Address, inputs, iterations)


def benchmark_input_classes(n: int, iterations: int = 5) -> Dict[str, float]:
    """Average seconds to parse `n` inputs of each class."""
    return {name: benchmark_parse(inputs, iterations) for name, inputs in input_classes(n).items()}


if __name__ == "__main__":
    print("=" * 60)
    print("URL IPv4 parser vs ipaddress.IPv4Address")
    print("=" * 60)

    for n in [1000, 10000, 100000]:
        print(f"\n--- {n:,} dotted quads ---")
        quads = _random_quads(n)
        url_time = benchmark_parse(quads)
        std_time = benchmark_stdlib(quads)
        ratio = url_time / std_time

        print(f"  url_ipv4:    {url_time*1000:.3f} ms")
        print(f"  ipaddress:   {std_time*1000:.3f} ms")
        print(f"  Ratio (url/ipaddress): {ratio:.2f}x")

    print(f"\n--- Per input class (10k) ---")
    per_class = benchmark_input_classes(10000)
    for name, seconds in per_class.items():
        print(f"  {name:<8} {seconds*1000:.3f} ms")

    from visualization.benchmark_visualizer import visualize_benchmark
    visualize_benchmark(per_class, n=10000, out_dir="results")

    print("\n" + "=" * 60)
