import datetime
import logging
import os
from typing import Dict, Optional


def visualize_benchmark(per_class: Dict[str, float], n: int, out_dir: str = "results") -> Optional[str]:
    """Bar chart of parse time per input class.

    Args:
        per_class: mapping of input class name -> average seconds for `n` inputs
        n: number of inputs timed per class
        out_dir: output directory for the PNG file

    Returns:
        Path to saved file, or None if visualization failed.
    """
    if not per_class:
        logging.warning("No benchmark data to visualize")
        return None

    try:
        import matplotlib
        matplotlib.use('Agg')
        import matplotlib.pyplot as plt
        import numpy as np
    except ImportError:
        logging.warning("matplotlib not available, skipping benchmark visualization")
        return None

    try:
        names = list(per_class.keys())
        # microseconds per parsed input
        us_per_input = np.array([per_class[k] for k in names]) / max(n, 1) * 1e6

        fig, ax = plt.subplots(figsize=(10, 5))
        colors = plt.cm.Blues(np.linspace(0.4, 0.9, len(names)))
        ax.bar(names, us_per_input, color=colors, edgecolor='navy', linewidth=0.5)
        ax.set_ylabel('Time per input (µs)', fontsize=11)
        ax.set_xlabel('Input class', fontsize=11)
        ax.set_title(f'URL IPv4 parse time by input class ({n:,} inputs)', fontsize=14, fontweight='bold')
        ax.grid(axis='y', alpha=0.3)

        avg = float(np.mean(us_per_input))
        ax.axhline(y=avg, color='red', linestyle='--', linewidth=1.5, label=f'Avg: {avg:.3f} µs')
        ax.legend(loc='upper right')

        plt.tight_layout()

        os.makedirs(out_dir, exist_ok=True)
        timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = os.path.join(out_dir, f"parse_benchmark_{timestamp}.png")
        plt.savefig(filepath, dpi=150, bbox_inches='tight')
        plt.close(fig)

        logging.info(f"Benchmark graph saved to: {filepath}")
        return filepath

    except Exception as e:
        logging.exception(f"Failed to create benchmark visualization: {e}")
        return None


__all__ = ["visualize_benchmark"]
