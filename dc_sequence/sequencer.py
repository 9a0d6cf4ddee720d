"""Interactive controller for the dc-cli import/export sequence.

The sequence is driven by a single loop over a Session:

    SELECTING  -> ask for import/export, append the generated steps
    PROMPTING  -> show the current step, ask next/skip/exit, run the step
    COMPLETED / EXITED / FAILED -> terminal

Each step is executed by ``execute``, which dispatches on the step type
(HubCheck or RunTemplate). The process runner and the prompt channel are
injected so the whole sequence can run against fakes.
"""

import logging
import shlex

from dc_sequence.commands import (
    SETTINGS,
    build_command,
    resolve_settings_file,
)
from dc_sequence.common import InputClosedError, SequenceError
from dc_sequence.config import SequenceConfig
from dc_sequence.constants import (
    ACTION_IMPORT,
    ACTION_TYPE_PROMPT,
    ACTION_TYPES,
    ANSWER_EXIT,
    ANSWER_NEXT,
    ANSWER_NO,
    ANSWER_SKIP,
    ANSWER_YES,
    EXIT_FAILED,
    EXIT_OK,
    HUB_CONFIRM_PROMPT,
    HUB_NAME_PROMPT,
    NEXT_STEP_PROMPT,
)
from dc_sequence.log_sink import LogSink
from dc_sequence.prompts import PromptChannel
from dc_sequence.runner import ProcessResult, ProcessRunner
from dc_sequence.steps import HubCheck, RunTemplate, SequenceState, Session

logger = logging.getLogger(__name__)


class Sequencer:
    """Walks the user through the hub check and the import/export steps."""

    def __init__(
        self,
        config: SequenceConfig,
        runner=None,
        channel=None,
        log_sink=None,
        session=None,
    ):
        self.config = config
        self.runner = runner or ProcessRunner(work_dir=config.WORK_DIR)
        self.channel = channel or PromptChannel()
        self.log_sink = log_sink or LogSink(config.LOG_FILE)
        self.session = session or Session()

    def run(self, action_type=None) -> Session:
        """Run the sequence until it completes, fails or the user exits.

        Args:
            action_type: Preselected "import" or "export"; prompts when None

        Returns:
            Session: the final session state
        """
        if action_type is not None:
            self._choose(action_type.strip().lower())

        while not self.session.finished:
            try:
                if self.session.state is SequenceState.SELECTING:
                    self.select_action_type()
                else:
                    self.prompt_next_step()
            except (InputClosedError, KeyboardInterrupt):
                # Ctrl+C during a running command ends the sequence like EOF does
                self.channel.say("\nExiting the sequence. Goodbye!")
                self.session.state = SequenceState.EXITED

        self.channel.close()
        logger.debug(
            "Sequence ended in state %s at step %d/%d",
            self.session.state.value,
            self.session.position,
            len(self.session.steps),
        )
        return self.session

    @property
    def exit_code(self):
        if self.session.state is SequenceState.FAILED:
            return EXIT_FAILED
        return EXIT_OK

    def select_action_type(self):
        """Ask once for import/export; invalid answers leave the state unchanged."""
        answer = self.channel.ask(ACTION_TYPE_PROMPT)
        if answer in ACTION_TYPES:
            self._choose(answer)
        else:
            self.channel.say("Invalid input. Please type 'import' or 'export'.")

    def _choose(self, action_type):
        self.session.choose_action_type(action_type)
        self.channel.say(f"You selected: {action_type}")

    def prompt_next_step(self):
        """Handle one controller prompt for the current step."""
        step = self.session.current_step
        if step is None:
            self.channel.say("\nAll steps completed! 🎉")
            self.session.state = SequenceState.COMPLETED
            return

        self.channel.say(f"\n{step.description}")
        answer = self.channel.ask(NEXT_STEP_PROMPT)

        if answer == ANSWER_NEXT:
            self.session.advance()
            if not self.execute(step):
                self._handle_step_failure(step)
        elif answer == ANSWER_SKIP:
            self.channel.say("Skipping this step.")
            self.session.advance()
        elif answer == ANSWER_EXIT:
            self.channel.say("Exiting the sequence. Goodbye!")
            self.session.state = SequenceState.EXITED
        else:
            self.channel.say("Invalid input. Please type 'next', 'skip', or 'exit'.")

    def execute(self, step) -> bool:
        """Run a single step.

        Returns:
            bool: True if the step succeeded
        """
        if isinstance(step, HubCheck):
            return self.run_hub_check()
        if isinstance(step, RunTemplate):
            return self.run_template(step)
        raise SequenceError(f"Unknown step type: {type(step).__name__}")

    def _handle_step_failure(self, step):
        logger.error("Step failed: %s", step.description)
        if self.config.STOP_ON_ERROR:
            self.channel.warn("Stopping the sequence because the step failed.")
            self.session.state = SequenceState.FAILED
        else:
            self.channel.warn(
                "The step failed. Continue with the next step or type 'exit' to quit."
            )

    def _cli(self, command):
        return f"{self.config.CLI_BINARY} {command}"

    def run_hub_check(self) -> bool:
        """List hubs and confirm or switch the active one.

        Invalid answers restart the whole check, including the hub listing.
        """
        while True:
            command = self._cli("hub ls")
            self.channel.say(f"Running: {command}")
            result = self.runner.run(command)
            if not result.ok:
                self.channel.warn(f"Error: {result.error}")
                return False

            self.channel.say(result.stdout)
            self.channel.warn(result.stderr)

            answer = self.channel.ask(HUB_CONFIRM_PROMPT)
            if answer == ANSWER_YES:
                self.channel.say("Hub confirmed.")
                return True
            if answer == ANSWER_NO:
                return self._switch_hub()

            self.channel.say("Invalid input. Please type 'yes' or 'no'.")

    def _switch_hub(self) -> bool:
        hub_name = self.channel.ask(HUB_NAME_PROMPT, normalize=False)
        command = self._cli(f"hub use {shlex.quote(hub_name)}")
        self.channel.say(f"\nRunning: {command}")
        result = self.runner.run(command)
        if not result.ok:
            self.channel.warn(f"Error: {result.error}")
            return False

        self.channel.say(result.stdout)
        self.channel.warn(result.stderr)
        self.channel.say(f"Active hub is now: {hub_name}")
        return True

    def command_for(self, step: RunTemplate) -> str:
        """Build the full command line for a generated step.

        Raises:
            SettingsFileNotFoundError: If settings import finds no file
        """
        path = None
        if step.category == SETTINGS and step.action_type == ACTION_IMPORT:
            path = resolve_settings_file(self.config.WORK_DIR)
        return self._cli(build_command(step.category, step.action_type, path))

    def run_template(self, step: RunTemplate) -> bool:
        try:
            command = self.command_for(step)
        except SequenceError as e:
            self.log_sink.write(f"err: {e}\nstderr: ")
            self.channel.warn(f"Error: {e}")
            return False

        logger.info("Running %s", command)
        self.channel.say(f"Running: {command}")
        return self.handle_completion(self.runner.run(command))

    def handle_completion(self, result: ProcessResult) -> bool:
        """Log and display a finished command.

        Returns:
            bool: True if the command succeeded
        """
        if not result.ok:
            self.log_sink.write(f"err: {result.error}\nstderr: {result.stderr}")
            self.channel.warn(f"Error: {result.error}")
            return False

        self.log_sink.write(f"stdout: {result.stdout}")
        self.channel.say(result.stdout)
        self.channel.warn(result.stderr)
        return True
