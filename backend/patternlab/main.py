import argparse
import logging
import sys
from typing import List, Optional

from patternlab.core.config_manager import config_manager
from patternlab.core.example_manager import example_manager

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging_settings = config_manager.get_logging_settings()
    logging.basicConfig(
        level=getattr(logging, logging_settings["level"]),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="patternlab",
        description="Run the design pattern demonstrations and print their output.",
    )
    parser.add_argument(
        "examples",
        nargs="*",
        metavar="EXAMPLE",
        help=f"Examples to run (default: enabled in settings). Available: {', '.join(example_manager.list_examples())}",
    )
    parser.add_argument("--list", action="store_true", help="List the available examples and exit")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list:
        for name in example_manager.list_examples():
            print(name)
        return 0

    unknown = [name for name in args.examples if not example_manager.has_example(name)]
    if unknown:
        parser.error(f"unknown example(s): {', '.join(unknown)}")

    logger.info("Running pattern demonstrations...")
    example_manager.run_all(args.examples or None)
    logger.debug(f"Catalog status: {example_manager.get_catalog_status()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
