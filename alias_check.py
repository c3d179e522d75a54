#!/usr/bin/env python3
"""
Alias Check — validate firewall alias definitions
Description:
    This script is the MAIN ENTRY POINT of the alias checker.
    It loads an alias definition file (YAML), validates the content of every
    alias according to its type and reports the invalid entries.

Exit status:
    0 - every alias is valid
    1 - at least one alias has invalid entries
    2 - the configuration, alias file or country table could not be loaded
"""

import argparse
import sys

from core.logger import get_logger
from engine import Engine


# --------------------------------------
# Helper Functions
# --------------------------------------
def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Validate the content of firewall alias definitions."
    )
    parser.add_argument("aliases", help="YAML file with an 'aliases' list")
    parser.add_argument("-c", "--config", default=None, help="Path to config.yaml")
    return parser.parse_args(argv)


def report(results):
    """
    Print every invalid alias with its messages. Returns the number of
    invalid aliases.
    """
    invalid = 0
    for name, messages in results.items():
        if not messages:
            continue
        invalid += 1
        print(f"[!] {name}")
        for message in messages:
            print(f"    ↳ {message}")

    print(f"\n[+] {len(results)} aliases checked, {invalid} invalid.")
    return invalid


# --------------------------------------
# Main Function
# --------------------------------------
def main(argv=None):
    args = parse_args(argv)

    try:
        engine = Engine(args.config)
    except (OSError, ValueError) as e:
        get_logger().error(f"Setup error: {str(e)}")
        return 2

    try:
        results = engine.check_file(args.aliases)
    except (OSError, ValueError) as e:
        engine.logger.error(f"Engine error: {str(e)}")
        return 2

    return 1 if report(results) else 0


# --------------------------------------
# Entry Point
# --------------------------------------
if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n[!] Exiting gracefully...")
        sys.exit(0)
