"""dc-sequence - Guided dc-cli export/import of hub configuration.

This library walks through the dc-cli commands that export or import a
hub's settings, extensions, schemas, content types and content items,
asking before each step.

Basic usage:
    from dc_sequence import run_sequence

    session = run_sequence(action_type="export", log_file="export.log")
    print(f"Finished in state: {session.state.value}")
"""

from dc_sequence.config import SequenceConfig
from dc_sequence.sequencer import Sequencer


def run_sequence(
    action_type=None,
    cli_binary: str = "dc-cli",
    log_file: str = "dc-sequence.log",
    work_dir: str = ".",
    stop_on_error: bool = False,
    debug: bool = False,
    runner=None,
    channel=None,
):
    """Run the interactive sequence.

    Args:
        action_type: "import" or "export"; asks the user when None
        cli_binary: Command used to invoke dc-cli (default: "dc-cli")
        log_file: File receiving command results (default: "dc-sequence.log")
        work_dir: Directory holding settings/, extensions/, ... (default: ".")
        stop_on_error: End the sequence when a step fails (default: False)
        debug: Enable debug logging (default: False)
        runner: Optional process runner replacing real subprocesses
        channel: Optional prompt channel replacing the console

    Returns:
        Session: Final state, position and steps of the run
    """
    config = SequenceConfig(
        cli_binary=cli_binary,
        log_file=log_file,
        work_dir=work_dir,
        stop_on_error=stop_on_error,
        debug=debug,
        load_from_env=False,  # Don't load from .env when using this API
    )
    sequencer = Sequencer(config, runner=runner, channel=channel)
    return sequencer.run(action_type=action_type)


__all__ = ["run_sequence", "SequenceConfig", "Sequencer"]
__version__ = "1.0.0"
