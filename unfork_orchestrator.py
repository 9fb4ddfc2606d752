#!/usr/bin/env python3
"""Main orchestrator for detaching a fork into a standalone repository."""

from __future__ import annotations

import sys
from enum import Enum

from config import UnforkConfig
from errors import EXIT_EXECUTION_ERROR, EXIT_INTERRUPTED, UnforkError
from git_mirror import GitMirror
from github_cli import GitHubCli
from logging_utils import Logger

# Exit codes
EXIT_SUCCESS = 0


class Stage(Enum):
    """Pipeline states, in the order a successful run passes through them."""
    START = "start"
    NORMALIZED = "normalized"
    MIRRORED = "mirrored"
    DUPLICATED = "duplicated"
    DESTINATION_READY = "destination-ready"
    PUBLISHED = "published"
    DONE = "done"


class UnforkOrchestrator:
    def __init__(self, cfg: UnforkConfig) -> None:
        self.cfg = cfg
        self.git = GitMirror()
        self.gh = GitHubCli(push_method=cfg.push_method)
        # Input is normalized by the time a config exists
        self.stage = Stage.NORMALIZED

    def run(self) -> int:
        self.stage = Stage.NORMALIZED
        try:
            # Fail before any mutation if gh is missing
            self.gh.ensure_available()

            if self.cfg.dry_run:
                self._log_plan()
                Logger.info("dry-run completed")
                return EXIT_SUCCESS

            self.git.sync_origin(self.cfg.source_url, self.cfg.mirrors.origin)
            self.stage = Stage.MIRRORED

            self.git.duplicate(self.cfg.mirrors.origin, self.cfg.mirrors.unforked)
            self.stage = Stage.DUPLICATED

            self.gh.ensure_repo(self.cfg.destination, self.cfg.visibility)
            self.stage = Stage.DESTINATION_READY

            self.git.push_mirror(
                self.cfg.mirrors.unforked, self.gh.repo_url(self.cfg.destination)
            )
            self.stage = Stage.PUBLISHED
            Logger.success(f"published {self.cfg.destination.full_name}")

            self._print_summary()
            self.stage = Stage.DONE
            return EXIT_SUCCESS
        except UnforkError as e:
            Logger.error(f"failed at {e.stage} (after {self.stage.value}): {e}")
            return e.exit_code
        except KeyboardInterrupt:
            Logger.error(f"interrupted after {self.stage.value}")
            return EXIT_INTERRUPTED
        except Exception as e:
            Logger.error(f"unexpected error: {e}")
            return EXIT_EXECUTION_ERROR

    def _log_plan(self) -> None:
        mirrors = self.cfg.mirrors
        destination = self.cfg.destination
        Logger.info(
            f"would mirror {self.cfg.source.full_name} from {self.cfg.source_url} "
            f"into {mirrors.origin}"
        )
        Logger.info(f"would copy {mirrors.origin} to {mirrors.unforked}")
        if self.gh.repo_exists(destination):
            Logger.info(f"would reuse existing repo {destination.full_name}")
        else:
            Logger.info(
                f"would create {self.cfg.visibility.value} repo "
                f"{destination.full_name}"
            )
        Logger.info(f"would push --mirror to {self.gh.repo_url(destination)}")

    def _print_summary(self) -> None:
        sys.stdout.write(
            "Done! Your standalone repository is available at:\n"
            f"{self.gh.web_url(self.cfg.destination)}\n"
            "\n"
            "Local mirror directories:\n"
            f"  Original mirror: {self.cfg.mirrors.origin}\n"
            f"  Unforked mirror: {self.cfg.mirrors.unforked}\n"
        )
