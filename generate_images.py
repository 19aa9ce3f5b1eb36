import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from printshop.core import ProductImagePipeline, load_jobs
from printshop.encoder import ExceededBudget


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Composite artwork onto mockup backgrounds and save size-limited product images."
    )
    parser.add_argument(
        "--jobs",
        type=Path,
        default=Path("jobs/example_jobs.json"),
        help="Path to the render jobs JSON file.",
    )
    parser.add_argument(
        "--max-bytes",
        type=int,
        default=None,
        help="File-size ceiling for every output, overriding the per-job value.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args()


def main() -> int:
    load_dotenv()
    args = parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    jobs = load_jobs(args.jobs)
    pipeline = ProductImagePipeline(max_bytes=args.max_bytes)
    results = pipeline.run(jobs)

    over_budget = [r for r in results if isinstance(r, ExceededBudget)]
    if over_budget:
        logging.error("%d of %d image(s) did not fit the size budget", len(over_budget), len(results))
        return 1
    logging.info("Product images created and optimized successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
