"""
dc-sequence - Command Line Interface

Interactive walkthrough of the dc-cli commands needed to export or import
a hub's configuration (settings, extensions, schemas, content types and
content items).

Usage:
    # Ask for import/export interactively:
    dc-sequence

    # Preselect the action type:
    dc-sequence --action export

    # Run against another CLI binary or directory:
    dc-sequence --cli-binary "npx dc-cli" --work-dir exports/production

    # End the sequence as soon as a step fails:
    dc-sequence --stop-on-error

    # Piped answers (stdin is not a terminal) need --action:
    printf "next\nyes\n" | dc-sequence --action export

Configuration:
    Optionally create a .env.dc-cli file with:
        DC_CLI_BINARY=dc-cli          # Optional
        LOG_FILE=dc-sequence.log      # Optional
        WORK_DIR=.                    # Optional
        STOP_ON_ERROR=false           # Optional
        DEBUG=false                   # Optional
"""

import argparse

from dc_sequence.prompts import is_interactive
from dc_sequence.common import configure_logging
from dc_sequence.config import SequenceConfig
from dc_sequence.constants import ACTION_TYPES, EXIT_FAILED
from dc_sequence.sequencer import Sequencer


def _create_parser():
    """Create and return the argument parser."""
    parser = argparse.ArgumentParser(
        description="Step through the dc-cli commands to export or import a hub",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive export/import:
  dc-sequence

  # Import without the import/export question:
  dc-sequence --action import

  # Keep the command log somewhere else:
  dc-sequence --log-file logs/hub-export.log
        """,
    )
    parser.add_argument(
        "--action",
        choices=ACTION_TYPES,
        help="Preselect the action type instead of prompting for it",
    )
    parser.add_argument(
        "--cli-binary",
        type=str,
        help="Command used to invoke dc-cli - default: dc-cli (env: DC_CLI_BINARY)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="File receiving command results - default: dc-sequence.log (env: LOG_FILE)",
    )
    parser.add_argument(
        "--work-dir",
        type=str,
        help="Directory holding settings/, extensions/, ... - default: . (env: WORK_DIR)",
    )
    parser.add_argument(
        "--stop-on-error",
        action="store_true",
        help="End the sequence when a step fails (env: STOP_ON_ERROR)",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging (env: DEBUG)"
    )
    return parser


def main(argv=None):
    """Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        int: Process exit code
    """
    parser = _create_parser()
    args = parser.parse_args(argv)

    config = SequenceConfig(
        cli_binary=args.cli_binary,
        log_file=args.log_file,
        work_dir=args.work_dir,
        stop_on_error=True if args.stop_on_error else None,
        debug=True if args.debug else None,
        load_from_env=True,
    )
    configure_logging(config.DEBUG)

    print("Welcome to the command sequence script!")
    if not is_interactive():
        # Without a terminal the action type must come from --action
        if not args.action:
            print("\nError: stdin is not a terminal.")
            print("Pass --action import or --action export to read answers from input.")
            return EXIT_FAILED
        print("Warning: stdin is not an interactive terminal; answers are read from input.")

    try:
        sequencer = Sequencer(config)
        sequencer.run(action_type=args.action)
        return sequencer.exit_code
    except Exception as e:
        print("\n" + "=" * 70)
        print("Sequence Failed!")
        print("=" * 70)
        print(f"\nError: {str(e)}")

        if config.DEBUG:
            import traceback

            print("\nFull traceback:")
            traceback.print_exc()
        else:
            print("\nRun with --debug flag for detailed error information.")

        print("\n" + "=" * 70)
        return EXIT_FAILED
