"""Run the cascade-cipher diagnostics and save a JSON report.

Usage:
    python scripts/run_evaluation.py                         # settings defaults
    python scripts/run_evaluation.py --sac-trials 16 --vectors 50
    python scripts/run_evaluation.py --skip-sac

Diagnostic only. Nothing here measures security.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from fakersa.config import load_settings
from fakersa.evaluation import EvaluationReport, compute_sac, run_roundtrip_tests


def _cli_progress(current: int, total: int) -> None:
    """Print progress to stderr."""
    if current % 16 == 0:
        print(f"  [{current + 1}/{total}] input bits", file=sys.stderr)


def main() -> None:
    settings = load_settings()

    parser = argparse.ArgumentParser(description="Cascade cipher diagnostics (roundtrip + SAC)")
    parser.add_argument(
        "--seed", type=int, default=settings.global_seed,
        help=f"Random seed (default: {settings.global_seed})",
    )
    parser.add_argument(
        "--vectors", type=int, default=settings.roundtrip_vectors,
        help=f"Roundtrip test vectors (default: {settings.roundtrip_vectors})",
    )
    parser.add_argument(
        "--sac-trials", type=int, default=settings.sac_trials,
        help=f"SAC trials per input bit (default: {settings.sac_trials})",
    )
    parser.add_argument(
        "--output-dir", type=str, default=settings.runs_dir,
        help=f"Output directory (default: {settings.runs_dir})",
    )
    parser.add_argument("--skip-sac", action="store_true", help="Skip SAC measurement")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    roundtrip = run_roundtrip_tests(num_vectors=args.vectors, seed=args.seed)
    print(roundtrip.summary())
    report = EvaluationReport(seed=args.seed, roundtrip=roundtrip)

    if not args.skip_sac:
        for input_type in ("plaintext", "key"):
            print(f"SAC over {input_type} bits...", file=sys.stderr)
            sac = compute_sac(
                input_type=input_type,
                trials=args.sac_trials,
                seed=args.seed,
                progress_callback=_cli_progress,
            )
            print(sac.summary())
            report.sac_results.append(sac)

    out_path = report.save(args.output_dir)
    print(f"\nReport saved to: {out_path}")

    if not report.is_perfect:
        sys.exit(1)


if __name__ == "__main__":
    main()
