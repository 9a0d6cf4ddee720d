"""Command templates for the generated import/export steps.

Templates are loaded from the packaged steps.yaml catalog. Built commands do
not include the CLI binary; the sequencer prefixes it when running them.
"""

import logging
import os
from functools import lru_cache

import yaml

from dc_sequence.common import SequenceError, SettingsFileNotFoundError
from dc_sequence.constants import ACTION_IMPORT, ACTION_TYPES, SETTINGS_DIR

logger = logging.getLogger(__name__)

SETTINGS = "settings"


@lru_cache(maxsize=1)
def load_step_catalog():
    """Load the step catalog from the packaged YAML file.

    Returns:
        list: Step definitions (category, label, command, optional import_command)
            in execution order
    """
    catalog_path = os.path.join(
        os.path.dirname(os.path.abspath(__file__)), "steps.yaml"
    )

    with open(catalog_path, "r") as f:
        return yaml.safe_load(f)["steps"]


def get_step_definition(category):
    """Return the catalog entry for a category."""
    for definition in load_step_catalog():
        if definition["category"] == category:
            return definition
    raise SequenceError(f"Unknown step category: {category}")


def build_command(category, action_type, path=None):
    """Build the literal command for a category and action type.

    Args:
        category: Catalog category (e.g. "settings", "content_items")
        action_type: "import" or "export"
        path: Settings file to import (required for settings import only)

    Returns:
        str: Command line without the CLI binary

    Example:
        >>> build_command("extensions", "export")
        'extension export ./extensions'
    """
    if action_type not in ACTION_TYPES:
        raise SequenceError(f"Invalid action type: {action_type}")

    definition = get_step_definition(category)
    template = definition["command"]
    if action_type == ACTION_IMPORT and "import_command" in definition:
        template = definition["import_command"]
        if "{path}" in template and path is None:
            raise SequenceError(f"A file path is required to import {category}")

    return template.format(action=action_type, path=path)


def resolve_settings_file(work_dir=".", settings_dir=SETTINGS_DIR):
    """Find the settings archive to import.

    The first entry of the settings directory listing is used, in platform
    listing order and without filtering.

    Args:
        work_dir: Directory the commands run in
        settings_dir: Settings directory relative to work_dir

    Returns:
        str: The entry joined to settings_dir and prefixed with "./",
            e.g. "././settings/hub-settings.zip"

    Raises:
        SettingsFileNotFoundError: If the directory cannot be read or is empty
    """
    try:
        entries = os.listdir(os.path.join(work_dir, settings_dir))
    except OSError as e:
        raise SettingsFileNotFoundError(
            f"Error reading the settings directory {settings_dir}: {e}"
        ) from e

    if not entries:
        raise SettingsFileNotFoundError(
            f"No settings file found in {settings_dir}"
        )

    file_path = os.path.join(settings_dir, entries[0])
    logger.debug("Resolved settings file %s", file_path)
    return f"./{file_path}"
