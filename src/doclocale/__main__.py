"""Main entry point for the DocLocale command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from . import __version__, paths
from .config import DocLocaleConfig, load_config
from .errors import DocLocaleError
from .logging_utils import setup_logging
from .models import RunMode
from .templates import DEFAULT_CONFIG_YAML
from .workflow import run_mode

logger = logging.getLogger(__name__)

MODE_CHOICES = ["generate", "inject", "strip", "default"]


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments for the DocLocale CLI.

    Returns:
        argparse.Namespace: An object containing the parsed command-line arguments.

    """
    parser = argparse.ArgumentParser(description="DocLocale TypeDoc Localization Tool")
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"DocLocale {__version__}",
        help="Show the version number and exit.",
    )

    # Shared by the subcommands so '--debug' works after the command name.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug level logging.",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    init_parser = subparsers.add_parser("init", parents=[common], help="Initialize a new DocLocale project.")
    init_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="The directory to initialize the project in (default: current directory).",
    )

    run_parser = subparsers.add_parser("run", parents=[common], help="Generate, inject or strip translations.")
    run_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="The directory to run DocLocale in (default: current directory).",
    )
    run_parser.add_argument(
        "--mode",
        choices=MODE_CHOICES,
        help="Override the configured translation_mode.",
    )
    run_parser.add_argument(
        "--target",
        metavar="CODE",
        help="Override the configured l10n_code.",
    )

    args_list = sys.argv[1:] if argv is None else argv
    if not args_list:
        parser.print_help(sys.stderr)
        sys.exit(1)

    args = parser.parse_args(args_list)
    if args.command is None:
        parser.print_help(sys.stderr)
        sys.exit(1)
    return args


def _init_project(target_path: Path) -> None:
    """Initialize a new DocLocale project structure."""
    logger.info("Initializing DocLocale project in: %s", target_path)

    config_dir = target_path / paths.DOCLOCALE_SUBDIR / "configs"
    config_file = config_dir / paths.CONFIG_FILE_NAMES[0]

    if config_file.exists():
        logger.warning("Configuration file already exists at: %s", config_file)
        return

    try:
        config_dir.mkdir(parents=True, exist_ok=True)
        config_file.write_text(DEFAULT_CONFIG_YAML, encoding="utf-8")
        logger.info("Created default configuration at: %s", config_file)
        logger.info("Project initialized successfully!")
    except OSError:
        logger.exception("Failed to initialize project")
        sys.exit(1)


def _load_config(root_path: Path) -> tuple[DocLocaleConfig, Path] | None:
    """
    Locate the project root and load its configuration.

    Returns:
        The configuration and the project root, or None if loading failed.

    """
    try:
        project_root = paths.find_project_root(root_path)
        config_path = paths.get_config_file_path(project_root)
        logger.info("Loading configuration from: %s", config_path)
        return load_config(str(config_path)), project_root
    except FileNotFoundError:
        logger.exception("Could not find a valid configuration file.")
        return None
    except ValueError:
        logger.exception("The configuration file is invalid.")
        return None


def _validate_directory(path: Path) -> None:
    if not path.exists():
        logger.error("Path does not exist: %s", path)
        sys.exit(1)
    if not path.is_dir():
        logger.error("Path is not a directory: %s", path)
        sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    """
    Run the main entry point for the DocLocale command-line interface.

    Orchestrates the entire process:
    1. Parses command-line arguments.
    2. Loads the configuration and applies overrides.
    3. Runs the selected mode.
    """
    try:
        args = _parse_args(argv)
        target_path = Path(getattr(args, "path", ".")).resolve()
        _validate_directory(target_path)

        if args.command == "init":
            setup_logging(version=__version__, debug=args.debug, project_root=target_path)
            _init_project(target_path)
            return

        setup_logging(version=__version__, debug=args.debug, project_root=target_path)

        loaded = _load_config(target_path)
        if loaded is None:
            logger.critical("Failed to load configuration. Aborting.")
            sys.exit(1)
        config, project_root = loaded

        try:
            config = config.with_overrides(l10n_code=args.target)
        except ValueError:
            logger.exception("Invalid --target value: %s", args.target)
            sys.exit(1)

        mode = RunMode.from_setting(args.mode or config.translation_mode)
        run_mode(config, project_root, mode=mode, debug=args.debug)

    except DocLocaleError as e:
        logger.error("Run aborted: %s", e)  # noqa: TRY400
        logger.debug("Traceback of the aborted run:", exc_info=True)
        sys.exit(1)
    except Exception:
        logger.exception("An unexpected error occurred")
        logger.critical("An unrecoverable error occurred. Please check the logs for details.")
        sys.exit(1)

    logger.info("Done.")


if __name__ == "__main__":
    main()
