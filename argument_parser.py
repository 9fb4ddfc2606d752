#!/usr/bin/env python3
"""Command line argument parsing and configuration building."""

from __future__ import annotations

import argparse
import os
import sys
from typing import List, NoReturn, Optional

from config import CloneMethod, MirrorPaths, RepoReference, UnforkConfig, Visibility
from errors import UsageError
from logging_utils import Logger
from security import SecurityValidator
from utils import derive_unforked_name, normalize_reference, source_clone_url


class _UnforkArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad usage as UsageError instead of exit 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = _UnforkArgumentParser(
        prog="unfork",
        description="Detach a forked GitHub repository into a standalone repository",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s https://github.com/deep-assistant/api-gateway
  %(prog)s deep-assistant/api-gateway my-username
  %(prog)s git@github.com:acme/widget.git --visibility private
  %(prog)s acme/widget --workdir ~/mirrors --push-method ssh

Requires git and an authenticated GitHub CLI (gh auth login).
        """,
    )
    parser.add_argument(
        "repository",
        help="Repository URL (https, http or git@) or owner/name",
    )
    parser.add_argument(
        "owner",
        nargs="?",
        help="Owner of the new repository (default: the source owner)",
    )
    return parser


def _add_behavior_arguments(parser: argparse.ArgumentParser) -> None:
    """Add behavior and configuration arguments to parser."""
    parser.add_argument(
        "-d",
        "--dry-run",
        action="store_true",
        dest="dry_run",
        help="List actions without doing them",
    )
    parser.add_argument(
        "--workdir",
        dest="workdir",
        default=os.curdir,
        help="Directory holding the local mirrors (default: current directory)",
    )
    parser.add_argument(
        "--visibility",
        dest="visibility",
        choices=[visibility.value for visibility in Visibility],
        default=Visibility.PUBLIC.value,
        help="Visibility for a newly created repository (default: public)",
    )
    parser.add_argument(
        "--push-method",
        dest="push_method",
        choices=[method.value for method in CloneMethod],
        default=CloneMethod.HTTPS.value,
        help="URL form used for the mirror push: https or ssh (default: https)",
    )


def _validate_parsed_arguments(args) -> UnforkConfig:
    """Validate arguments and resolve every path once."""
    source = normalize_reference(args.repository)
    if not source.owner:
        raise UsageError(
            f"cannot determine the owner of '{args.repository}'; "
            "use a full URL or owner/name"
        )

    try:
        SecurityValidator.validate_owner(source.owner)
        SecurityValidator.validate_repo_name(source.name)
        dest_owner = SecurityValidator.validate_owner(args.owner or source.owner)
        dest_name = SecurityValidator.validate_repo_name(
            derive_unforked_name(source.name)
        )
        source_url = SecurityValidator.validate_url(
            source_clone_url(args.repository, source), ["https", "http", "ssh"]
        )
        workdir = SecurityValidator.validate_file_path(args.workdir)
    except ValueError as e:
        Logger.security_event(
            "CONFIG_VALIDATION_FAILED", f"configuration validation failed: {e}"
        )
        raise UsageError(str(e)) from e

    return UnforkConfig(
        source=source,
        source_url=source_url,
        destination=RepoReference(owner=dest_owner, name=dest_name),
        mirrors=MirrorPaths(
            origin=os.path.join(workdir, f"{source.name}.git"),
            unforked=os.path.join(workdir, f"{dest_name}.git"),
        ),
        visibility=Visibility(args.visibility),
        push_method=CloneMethod(args.push_method),
        dry_run=args.dry_run,
    )


def parse_arguments(argv: Optional[List[str]] = None) -> UnforkConfig:
    """Parse command line arguments and return configuration object."""
    parser = _create_argument_parser()
    _add_behavior_arguments(parser)

    try:
        args = parser.parse_args(argv)
        return _validate_parsed_arguments(args)
    except UsageError as e:
        parser.print_usage(sys.stderr)
        Logger.error(f"usage error: {e}")
        sys.exit(e.exit_code)
