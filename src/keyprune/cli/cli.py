"""This module implements a CLI for pruning keys from JSON files."""
import sys
import json
import logging
import shlex
import argparse

from argparse import BooleanOptionalAction
from collections import Counter
from pathlib import Path

from rich.progress import track

from keyprune.common import io
from keyprune.common.logger import setup_logger
from keyprune.config import Config, ConfigError, ERROR_NOT_A_DICT
from keyprune.core import KeyPruner, KeyPruneError
from keyprune.version import __version__

from .validations import keys, non_negative_int, positive_int

logger = logging.getLogger(__name__)


NAME = "key-pruner"
DESCRIPTION = """
    Removes keys from every object of a JSON document, at any nesting level.
    Useful to strip sensitive fields, e.g., passwords or tokens, before sharing data.

    You can provide a configuration file or command-line arguments.
    The latter take precedence, so if you provide both, command-line arguments
    will overwrite options in the config file provided.
"""
EPILOG = (
    "Example: \n"
    "    key-pruner -i data.json -k password,token -o data.clean.json"
)

PROGRESS_BAR_DESCRIPTION = "Pruning records:"

_DEFAULT = "(default: %(default)s)"
HELP_CONFIG_FILE = f"JSON file with configuration {_DEFAULT}."
HELP_VERBOSE = "Set logger level to DEBUG."
HELP_NO_RICH_LOGGING = "Disable rich logging (useful for production environments)."
HELP_ONLY_RENDER_CLI_CALL = "Only render command-line call equivalent to provided config file."

HELP_INPUT_FILE = "JSON file to prune."
HELP_OUTPUT_FILE = "Where to write the result. Defaults to «<input>.pruned.json»."
HELP_KEYS = "Keys to remove, e.g., «password,token»."
HELP_LINES = "If passed, input and output are handled as JSON Lines."
HELP_INDENT = "Indentation of the JSON output."
HELP_MAX_DEPTH = "Fail if objects are nested deeper than this."
HELP_SHOW_PROGRESS = "If passed, renders a progress bar when processing JSON Lines."


def formatter():
    """Returns a formatter for argparse help."""

    def formatter(prog):
        return argparse.RawTextHelpFormatter(prog, max_help_position=50)

    return formatter


def render_command_line_call(config: dict) -> str:
    """Renders command-line call from a configuration dictionary."""
    items = [(k, v) for k, v in config.items() if v is not None and v is not False]

    command = f"{NAME}"
    for k, v in items:
        flag = "--{}".format(k.replace("_", "-"))

        if isinstance(v, bool):
            command += f" \\\n{flag}"
            continue

        if isinstance(v, (list, tuple)):
            v = ",".join(v)

        command += f" \\\n{flag}={shlex.quote(str(v))}"

    return command


def run(config: Config) -> Path:
    """Prunes the configured input file and saves the result."""
    logger.info("Using following configuration: ")
    logger.info(json.dumps(config.to_dict(), indent=4))

    config.validate()

    pruner = KeyPruner(config.keys, max_depth=config.max_depth)
    data = io.json_load(config.input_path, lines=config.lines)

    if config.lines:
        removed = Counter()
        records = data

        if config.show_progress:
            records = track(records, total=len(data), description=PROGRESS_BAR_DESCRIPTION)

        pruned = []
        for record in records:
            pruned_record, record_removed = pruner.prune_and_count(record)
            pruned.append(pruned_record)
            removed.update(record_removed)
    else:
        pruned, removed = pruner.prune_and_count(data)

    for key in sorted(pruner.keys):
        logger.info("Removed {} occurrence(s) of '{}'.".format(removed[key], key))

    path = io.json_save(config.output_path, pruned, indent=config.indent, lines=config.lines)
    logger.info("Output saved to {}.".format(path))

    return path


def cli(args) -> Config:
    """CLI for key pruning."""

    p = argparse.ArgumentParser(
        prog=NAME,
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=formatter(),
    )

    add = p.add_argument
    add("-c", "--config-file", type=Path, default=None, metavar=" ", help=HELP_CONFIG_FILE)
    add("-v", "--verbose", action="store_true", default=False, help=HELP_VERBOSE)
    add("--no-rich-logging", action="store_true", default=False, help=HELP_NO_RICH_LOGGING)
    add("--only-render-cli-call", action="store_true", help=HELP_ONLY_RENDER_CLI_CALL)
    add("--version", action="version", version=f"{NAME}:{__version__}")

    boolean = BooleanOptionalAction
    add = p.add_argument_group("pruning configuration").add_argument
    add("-i", "--input-file", type=str, metavar=" ", help=HELP_INPUT_FILE)
    add("-o", "--output-file", type=str, metavar=" ", help=HELP_OUTPUT_FILE)
    add("-k", "--keys", type=keys, metavar=" ", help=HELP_KEYS)
    add("--lines", default=None, action=boolean, help=HELP_LINES)
    add("--indent", type=positive_int, metavar=" ", help=HELP_INDENT)
    add("--max-depth", type=non_negative_int, metavar=" ", help=HELP_MAX_DEPTH)
    add("--show-progress", default=None, action=boolean, help=HELP_SHOW_PROGRESS)

    ns = p.parse_args(args=args or ["--help"])

    config_file = ns.config_file
    verbose = ns.verbose
    no_rich_logging = ns.no_rich_logging
    only_render_cli_call = ns.only_render_cli_call

    # Delete CLI configuration from parsed namespace.
    del ns.verbose
    del ns.config_file
    del ns.only_render_cli_call
    del ns.no_rich_logging

    setup_logger(verbose=verbose, rich=not no_rich_logging)

    if verbose:
        # The root logger may have been configured elsewhere.
        logging.getLogger().setLevel(logging.DEBUG)

    # Convert namespace of args to dict, erasing null arguments.
    cli_args = {k: v for k, v in vars(ns).items() if v is not None}

    try:
        config = {}
        # Load config file if exists.
        if config_file is not None:
            config = io.json_load(config_file)
            if not isinstance(config, dict):
                raise ConfigError(ERROR_NOT_A_DICT.format(type(config).__name__))
        else:
            only_render_cli_call = False

        # Override configuration file with CLI args.
        config.update(cli_args)
        parsed_config = Config.from_dict(config)

        if only_render_cli_call:
            # Only render equivalent command-line args call and exit.
            logger.info("Equivalent command-line call: ")
            print(render_command_line_call(config))
            return parsed_config

        run(parsed_config)
    except (ConfigError, KeyPruneError, OSError, ValueError) as e:
        logger.error(e)
        sys.exit(1)

    return parsed_config


def main():
    cli(sys.argv[1:])


if __name__ == "__main__":
    main()
