"""
Entry point for the WordPress export reader.

Reads a WXR file, prints a summary of its contents and optionally writes
the whole website model as JSON.
"""

import argparse
import logging
import os
import sys

from wpexport.parser import WordPressParser
from wpexport.utils.errors import WXRParseError
from wpexport.utils.reporting import JsonlReporter, LoggingReporter

CONFIG_FILE = "config/parser_config.json"


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Read a WordPress WXR export into a structured website model.",
    )
    parser.add_argument("export", help="Path to the WordPress XML export")
    parser.add_argument("--output", help="Write the website model as JSON to this path")
    parser.add_argument("--config", default=CONFIG_FILE, help="JSON configuration file")
    parser.add_argument("--report", help="Append parse events to this JSON Lines file")
    parser.add_argument("--log-level", help="Logging level (overrides the configuration)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """
    Main function to run the WordPress export reader.
    """
    args = parse_args(argv)

    reporter = JsonlReporter(args.report) if args.report else LoggingReporter()
    try:
        tool = WordPressParser(config_file=args.config, reporter=reporter)
    except WXRParseError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=(args.log_level or tool.config.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not os.path.exists(args.export):
        logging.error("Export file not found: %s", args.export)
        return 1

    try:
        website = tool.parse_file(args.export)
    except WXRParseError as e:
        logging.error("Failed to parse %s: %s", args.export, e)
        return 1

    print(f"{website.title} ({website.link})")
    for name, count in website.counts().items():
        print(f"  {name}: {count}")

    if args.output:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(website.model_dump_json(indent=2))
        print(f"Website model written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
