"""Constants used across the dc_sequence package."""

# Action types accepted by the external CLI import/export subcommands
ACTION_IMPORT = "import"
ACTION_EXPORT = "export"
ACTION_TYPES = (ACTION_IMPORT, ACTION_EXPORT)

# Answers accepted at the controller prompt
ANSWER_NEXT = "next"
ANSWER_SKIP = "skip"
ANSWER_EXIT = "exit"

# Answers accepted at the hub confirmation prompt
ANSWER_YES = "yes"
ANSWER_NO = "no"

# Defaults for SequenceConfig
DEFAULT_CLI_BINARY = "dc-cli"
DEFAULT_LOG_FILE = "dc-sequence.log"
DEFAULT_WORK_DIR = "."

# Directory holding the exported settings archive (relative to the work dir)
SETTINGS_DIR = "./settings"

HUB_STEP_DESCRIPTION = "Step 1: Check and set the correct hub"

# Prompts
ACTION_TYPE_PROMPT = (
    "\nWould you like to 'import' or 'export' data? Type 'import' or 'export': "
)
NEXT_STEP_PROMPT = (
    "\nType 'next' to continue, 'skip' to skip this step, or 'exit' to quit: "
)
HUB_CONFIRM_PROMPT = "\nIs this the correct hub? (yes/no): "
HUB_NAME_PROMPT = "\nEnter the name of the correct hub: "

# Exit codes returned by the CLI
EXIT_OK = 0
EXIT_FAILED = 1
