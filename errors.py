#!/usr/bin/env python3
"""Error taxonomy for unfork.

Every stage of the pipeline raises a subclass of ``UnforkError``; the
orchestrator turns it into a log line and a process exit code.
"""

from __future__ import annotations

from typing import Optional

# Exit codes
EXIT_EXECUTION_ERROR = 1
EXIT_INTERRUPTED = 130


class UnforkError(Exception):
    """Base class for all failures of an unfork run."""

    stage = "unfork"

    def __init__(self, message: str, exit_code: Optional[int] = None) -> None:
        super().__init__(message)
        if exit_code is not None and exit_code < 0:
            # Killed by signal N: report 128 + N like a shell does
            exit_code = 128 - exit_code
        self.exit_code = exit_code or EXIT_EXECUTION_ERROR


class UsageError(UnforkError):
    """Bad command line arguments."""

    stage = "arguments"


class HostingClientMissing(UnforkError):
    """The GitHub CLI is not available on PATH."""

    stage = "preflight"


class SyncError(UnforkError):
    """Fetching into an existing origin mirror failed."""

    stage = "mirror"


class CloneError(UnforkError):
    """Creating the origin mirror with a bare clone failed."""

    stage = "mirror"


class CopyError(UnforkError):
    """Duplicating the origin mirror on disk failed."""

    stage = "duplicate"


class RepoCreateError(UnforkError):
    """Creating the destination repository failed."""

    stage = "destination"


class PushError(UnforkError):
    """Mirror push to the destination failed."""

    stage = "publish"
