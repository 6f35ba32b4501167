#!/usr/bin/env python3
"""
Todo List GUI

Qt-based to-do list backed by a live document store.
"""

import argparse
import faulthandler
import logging
import sys

from pydantic import ValidationError

from todolist.core.errors.errors import ConfigurationError
from todolist.core.settings.settings import TodoSettings


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Todo List GUI")
    parser.add_argument("--backend", help="Document store backend (mongodb or memory)")
    parser.add_argument("--collection", help="Collection holding the tasks")
    parser.add_argument("--log-level", help="Logging level")
    return parser.parse_args(argv)


def build_settings(args) -> TodoSettings:
    """Environment settings with command line overrides applied."""
    overrides = {
        "store_backend": args.backend,
        "collection_name": args.collection,
        "log_level": args.log_level,
    }
    return TodoSettings(**{key: value for key, value in overrides.items() if value is not None})


def main(argv=None):
    """Main entry point for the Todo List GUI."""
    faulthandler.enable()

    args = parse_args(argv)
    try:
        settings = build_settings(args)
    except ValidationError as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 2

    from todolist.gui.logic.generic.log_manager import LogManager
    LogManager(settings)
    logger = logging.getLogger(__name__)

    try:
        from todolist.gui.app import run
        return run([sys.argv[0]], settings)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except Exception as e:
        logger.error(f"Application error: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
