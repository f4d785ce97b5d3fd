import argparse
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_OUTPUT_PATH, DEFAULT_VARIABILITY_THRESHOLD, make_config
from .errors import AnalysisError
from .pipeline import run_pipeline

logger = logging.getLogger("variability_insights")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="variability-insights",
        description="Flag CSV categories whose std exceeds threshold * mean and plot them.",
    )
    ap.add_argument("data", help="CSV with 'category' and 'value' columns")
    ap.add_argument("--threshold", type=float, default=DEFAULT_VARIABILITY_THRESHOLD,
                    help=f"variability threshold (default {DEFAULT_VARIABILITY_THRESHOLD})")
    ap.add_argument("--output", default=DEFAULT_OUTPUT_PATH,
                    help=f"chart path (default {DEFAULT_OUTPUT_PATH})")
    ap.add_argument("--sep", default=",", help="field delimiter")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = make_config(variability_threshold=args.threshold, output_path=args.output)
        results, chart = run_pipeline(args.data, config, sep=args.sep)
    except AnalysisError as e:
        logger.error("Analysis failed: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print("Analysis complete!")
    for line in results.summary_lines():
        print(line)
    print(f"Chart saved to: {chart.path}")
    return 0
