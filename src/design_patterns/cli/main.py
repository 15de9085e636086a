"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Configuration and logging bootstrap
- Running the requested pattern demonstrations
"""
import argparse
import os
import sys
from typing import List, Optional

from design_patterns import __version__
from design_patterns.cli.demos import DEMOS, TITLES
from design_patterns.config.manager import ConfigurationManager
from design_patterns.config.schemas import PATTERN_NAMES
from design_patterns.domain.core.exceptions import DomainException
from design_patterns.infrastructure.logging.logger import setup_logging
from design_patterns.infrastructure.patterns.singleton_registry import SingletonRegistry


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "design-patterns",
        description="Demonstrations of classic object-oriented design patterns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # Run every demonstration
  %(prog)s observer strategy        # Run selected demonstrations
  %(prog)s --log-level INFO         # Show what the patterns log while running
  %(prog)s --config demo.yaml       # Load settings from a JSON or YAML file
        """,
    )

    parser.add_argument(
        "patterns",
        nargs="*",
        metavar="PATTERN",
        help=f"Patterns to demonstrate (default: configured list). Choices: {', '.join(PATTERN_NAMES)}",
    )
    parser.add_argument("--config", help="Configuration file path")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured logging level",
    )
    parser.add_argument("--list", action="store_true", help="List available patterns and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args(argv)
    unknown = [name for name in args.patterns if name not in PATTERN_NAMES]
    if unknown:
        parser.error(f"unknown pattern(s): {', '.join(unknown)}")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    args = parse_args(argv)

    if args.list:
        for name in PATTERN_NAMES:
            print(f"{name:<16} {TITLES[name]}")
        return 0

    try:
        config_manager = ConfigurationManager(args.config)
        app_config = config_manager.app_config
    except DomainException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Share the manager with code that resolves it through get_singleton
    SingletonRegistry.get_instance().register(ConfigurationManager, config_manager)

    logging_config = app_config.logging
    if args.log_level:
        logging_config = logging_config.model_copy(update={"level": args.log_level})
    logger = setup_logging(logging_config)

    patterns = args.patterns or app_config.demo.patterns
    logger.info("Demonstrations started", patterns=patterns)

    print("\n=== Design Patterns Demonstration ===")
    try:
        for name in patterns:
            print(f"\n--- {TITLES[name]} ---")
            for line in DEMOS[name](app_config.demo):
                print(line)
            logger.debug("Demonstration finished", pattern=name)
    except DomainException as e:
        logger.error("Demonstration failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\nAll demonstrations complete.\n")
    logger.info("Demonstrations complete", count=len(patterns))
    return 0


def cli_entry() -> None:
    """Console script entry point."""
    sys.exit(main())
