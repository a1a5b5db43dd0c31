"""Batch address classification (YAML-driven).

Usage:
    python batch_parse.py <path-to-config.yaml>

Example config:

    run:
      file_debug: false
      log_dir: results/logs
    input:
      path: candidates.txt
      encoding: utf-8
    output:
      format: dotted        # dotted | int | hex
      path: results/parsed.tsv
      only_valid: false
"""

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from log_setup import configure_run_logging
from url_ipv4.batch import OUTPUT_FORMATS, ParseStatistics, classify_lines


@dataclass(frozen=True)
class BatchConfig:
    input_path: str
    input_encoding: str = "utf-8"
    output_format: str = "dotted"
    output_path: Optional[str] = None
    only_valid: bool = False
    file_debug: bool = False
    log_dir: str = "results/logs"


def _require_dict(d: Any, path: str) -> Dict[str, Any]:
    if not isinstance(d, dict):
        raise ValueError(f"Expected mapping at '{path}', got {type(d).__name__}")
    return d


def _load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    return _require_dict(data, "/")


def _resolve_yaml_arg(arg: str) -> str:
    """Resolve CLI arg into an absolute YAML path."""
    if not isinstance(arg, str) or not arg:
        raise ValueError("config argument must be a non-empty string")
    if not arg.lower().endswith((".yaml", ".yml")):
        raise ValueError("Config argument must be a YAML file path")

    candidate = os.path.abspath(arg)
    if not os.path.exists(candidate):
        raise FileNotFoundError(f"YAML configuration file not found: {candidate}")
    return candidate


def build_config(cfg: Dict[str, Any]) -> BatchConfig:
    run_cfg = _require_dict(cfg.get("run", {}) or {}, "run")
    input_cfg = _require_dict(cfg.get("input", {}) or {}, "input")
    output_cfg = _require_dict(cfg.get("output", {}) or {}, "output")

    if "path" not in input_cfg:
        raise ValueError("Missing required key 'input.path'")
    input_path = input_cfg["path"]
    if not isinstance(input_path, str) or not input_path:
        raise ValueError(f"Expected non-empty string at 'input.path', got {input_path!r}")

    output_format = str(output_cfg.get("format", "dotted")).strip().lower()
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Invalid output format at 'output.format': {output_format!r}. Valid: {' | '.join(OUTPUT_FORMATS)}"
        )

    output_path = output_cfg.get("path")
    if output_path is not None and not isinstance(output_path, str):
        raise ValueError(f"Expected string at 'output.path', got {type(output_path).__name__}")

    return BatchConfig(
        input_path=input_path,
        input_encoding=str(input_cfg.get("encoding", "utf-8")),
        output_format=output_format,
        output_path=output_path,
        only_valid=bool(output_cfg.get("only_valid", False)),
        file_debug=bool(run_cfg.get("file_debug", False)),
        log_dir=str(run_cfg.get("log_dir", "results/logs")),
    )


def run(config: BatchConfig) -> ParseStatistics:
    """Classify every line of the input file and write the results."""
    stats = ParseStatistics()
    with open(config.input_path, "r", encoding=config.input_encoding) as f:
        outcomes = [o for o in classify_lines(f, stats) if o.ok or not config.only_valid]

    lines = [o.format(config.output_format) for o in outcomes]
    if config.output_path:
        out_dir = os.path.dirname(os.path.abspath(config.output_path))
        os.makedirs(out_dir, exist_ok=True)
        with open(config.output_path, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
        logging.info("Wrote %d results to %s", len(lines), config.output_path)
    else:
        for line in lines:
            print(line)

    return stats


def parse_args(argv):
    p = argparse.ArgumentParser(description="Batch IPv4 classification (YAML-driven)")
    p.add_argument("config", help="Path to YAML configuration file")
    return p.parse_args(argv)


def main(argv) -> int:
    args = parse_args(argv)
    yaml_path = _resolve_yaml_arg(args.config)
    config = build_config(_load_yaml(yaml_path))

    logfile_path = configure_run_logging(
        os.path.splitext(os.path.basename(yaml_path))[0],
        log_dir=config.log_dir,
        console_level=logging.INFO,
        file_level=logging.DEBUG if config.file_debug else logging.INFO,
        force=True,
    )
    logging.info("Logging to console and file: %s", logfile_path)
    logging.info(f"Loaded configuration from: {yaml_path}")

    stats = run(config)

    summary = "\n".join(f"{k}: {v}" for k, v in stats.summary().items())
    logging.info("Batch summary:\n%s", summary)
    return 0


if __name__ == "__main__":
    try:
        raise SystemExit(main(sys.argv[1:]))
    except Exception:
        logging.exception("Batch run failed with an exception")
        raise
