#!/usr/bin/env python3
"""
Command-line interface for the Zipf sampler.

Subcommands:
 1. sample  draw values and write them to Parquet/CSV
 2. bench   time single draws (default N=1_000_000, s=1.07, 10M draws)
 3. check   compare observed frequencies against the exact pmf

Workflow:
 1. Parse --config plus per-run overrides
 2. Merge overrides into the raw YAML, validate once via model_validate (sampler errors surface here)
 3. Run the subcommand with a seeded numpy source
 4. Structured logs & clear exit codes
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from .bench import run_benchmark
from .config import SamplerConfig, build_sampler, read_config_data
from .draws import draw_samples, samples_frame, write_samples
from .errors import reason_code
from .logging_utils import configure_logging
from .sources import seeded_source
from .stats import frequency_report, max_abs_error

# Module-level logger
logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", type=Path, default=None, help="Path to YAML config file")
    common.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Set logging level (overrides config.log_level)",
    )
    common.add_argument("--num-elements", type=int, help="Upper bound N of the support")
    common.add_argument("--exponent", type=float, help="Zipf exponent s")
    common.add_argument("--seed", type=str, help="Override RNG seed")

    parser = argparse.ArgumentParser(
        prog="zipf-sampler",
        description="Draw bounded Zipf-distributed integers via rejection-inversion",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_sample = sub.add_parser("sample", parents=[common], help="Draw values and write them to disk")
    p_sample.add_argument("--draws", type=int, help="Number of values to draw")
    p_sample.add_argument("--out", type=Path, help="Output file (.parquet or .csv)")

    p_bench = sub.add_parser("bench", parents=[common], help="Time single-draw sampling")
    p_bench.add_argument("--samples", type=int, help="Number of draws to time")

    p_check = sub.add_parser("check", parents=[common], help="Compare draws against the exact pmf")
    p_check.add_argument("--draws", type=int, help="Number of values to draw")
    p_check.add_argument(
        "--tolerance",
        type=float,
        default=0.10,
        help="Maximum allowed absolute frequency error per rank",
    )
    return parser


def _resolve_config(args: argparse.Namespace) -> SamplerConfig:
    # Flags are merged into the raw YAML before validation
    data = dict(read_config_data(args.config)) if args.config is not None else {}
    if args.num_elements is not None or args.exponent is not None:
        dist = data.get("distribution")
        dist = dict(dist) if isinstance(dist, dict) else {}
        if args.num_elements is not None:
            dist["num_elements"] = args.num_elements
        if args.exponent is not None:
            dist["exponent"] = args.exponent
        data["distribution"] = dist
    if args.seed is not None:
        try:
            data["seed"] = int(args.seed)
        except ValueError:
            raise ValueError("--seed must be an integer") from None
    if args.log_level is not None:
        data["log_level"] = args.log_level
    if getattr(args, "draws", None) is not None:
        data["draws"] = args.draws
    if getattr(args, "out", None) is not None:
        data["out_path"] = args.out
    if getattr(args, "samples", None) is not None:
        data["bench_samples"] = args.samples
    return SamplerConfig.model_validate(data)


def _cmd_sample(cfg: SamplerConfig) -> int:
    sampler = build_sampler(cfg)
    logger.info(
        "Starting draw (N=%d, exponent=%s, draws=%d, seed=%s)",
        sampler.support_size,
        sampler.exponent,
        cfg.draws,
        cfg.seed,
    )
    start = time.perf_counter()
    samples = draw_samples(sampler, seeded_source(cfg.seed), cfg.draws)
    elapsed = time.perf_counter() - start
    logger.info(
        "Draw complete: %d values in %.2f s (%.0f draws/s)",
        cfg.draws,
        elapsed,
        cfg.draws / elapsed if elapsed > 0 else float("inf"),
    )
    out_path = write_samples(samples_frame(samples), cfg.out_path)
    print(json.dumps({"status": "OK", "out_path": str(out_path), "draws": cfg.draws}))
    return 0


def _cmd_bench(cfg: SamplerConfig) -> int:
    sampler = build_sampler(cfg)
    result = run_benchmark(sampler, seeded_source(cfg.seed), cfg.bench_samples)
    print(
        json.dumps(
            {
                "num_elements": sampler.support_size,
                "exponent": sampler.exponent,
                **result.as_dict(),
            },
            sort_keys=True,
        )
    )
    return 0


def _cmd_check(cfg: SamplerConfig, tolerance: float) -> int:
    sampler = build_sampler(cfg)
    n = sampler.support_size
    samples = draw_samples(sampler, seeded_source(cfg.seed), cfg.draws)
    report = frequency_report(samples, n, sampler.exponent)
    logger.debug("Frequency report:\n%s", report)
    worst = max_abs_error(samples, n, sampler.exponent)
    status = "PASS" if worst < tolerance else "FAIL"
    print(
        json.dumps(
            {
                "status": status,
                "num_elements": n,
                "exponent": sampler.exponent,
                "draws": cfg.draws,
                "max_abs_error": worst,
                "tolerance": tolerance,
            },
            sort_keys=True,
        )
    )
    if status == "FAIL":
        logger.error("Max absolute frequency error %.6f exceeds tolerance %.6f", worst, tolerance)
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Entry point for the zipf-sampler CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = _resolve_config(args)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        configure_logging(logging.INFO)
        logger.error("Config error [%s]: %s", reason_code(e), e)
        sys.exit(1)

    configure_logging(cfg.log_level)
    logger.debug("Arguments: %s", args)

    try:
        if args.command == "sample":
            code = _cmd_sample(cfg)
        elif args.command == "bench":
            code = _cmd_bench(cfg)
        else:
            code = _cmd_check(cfg, args.tolerance)
    except Exception:
        logger.exception("zipf-sampler %s failed unexpectedly", args.command)
        sys.exit(1)
    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
