#!/usr/bin/env python3
"""Local bare mirror management: sync, duplicate, mirror push."""

from __future__ import annotations

import os
import shutil
import subprocess
from typing import List, Optional

from errors import CloneError, CopyError, PushError, SyncError
from logging_utils import Logger

# A bare clone has no fetch refspec; fetch branches and tags onto themselves.
# refs/pull/* is left out, GitHub rejects it on push.
MIRROR_REFSPECS = ("+refs/heads/*:refs/heads/*", "+refs/tags/*:refs/tags/*")


class GitMirror:
    """Runs git against the origin mirror and its unforked copy.

    git output is not captured so its own progress and diagnostics reach
    the terminal unchanged.
    """

    def __init__(self, git_executable: str = "git") -> None:
        self.git = git_executable

    def _run(self, args: List[str], cwd: Optional[str] = None) -> None:
        subprocess.run([self.git, *args], cwd=cwd, check=True)

    def sync_origin(self, source_url: str, origin_dir: str) -> bool:
        """Fetch into an existing origin mirror or create it.

        Returns True when an existing mirror was updated, False when cloned.
        """
        if os.path.isdir(origin_dir):
            Logger.info(f"updating existing mirror in {origin_dir}")
            try:
                self._run(
                    [
                        f"--git-dir={origin_dir}",
                        "fetch",
                        "--prune",
                        "origin",
                        *MIRROR_REFSPECS,
                    ]
                )
            except subprocess.CalledProcessError as e:
                raise SyncError(
                    f"git fetch failed in {origin_dir} (exit {e.returncode})",
                    exit_code=e.returncode,
                ) from e
            except OSError as e:
                raise SyncError(f"could not run git: {e}") from e
            return True

        Logger.info(f"creating bare mirror of {source_url} into {origin_dir}")
        try:
            self._run(["clone", "--bare", source_url, origin_dir])
        except subprocess.CalledProcessError as e:
            raise CloneError(
                f"git clone of {source_url} failed (exit {e.returncode})",
                exit_code=e.returncode,
            ) from e
        except OSError as e:
            raise CloneError(f"could not run git: {e}") from e
        return False

    def duplicate(self, origin_dir: str, unforked_dir: str) -> None:
        """Replace ``unforked_dir`` with a fresh copy of ``origin_dir``."""
        try:
            if os.path.lexists(unforked_dir):
                Logger.warn(f"removing existing new mirror at {unforked_dir}")
                if os.path.isdir(unforked_dir) and not os.path.islink(unforked_dir):
                    shutil.rmtree(unforked_dir)
                else:
                    os.remove(unforked_dir)

            Logger.info(f"copying {origin_dir} to {unforked_dir}")
            shutil.copytree(origin_dir, unforked_dir, symlinks=True)
        except OSError as e:
            raise CopyError(f"could not copy mirror to {unforked_dir}: {e}") from e

    def push_mirror(self, unforked_dir: str, remote_url: str) -> None:
        """Mirror-push every ref of ``unforked_dir`` to ``remote_url``."""
        Logger.info(f"pushing mirror from {unforked_dir} to {remote_url}")
        try:
            self._run(["push", "--mirror", remote_url], cwd=unforked_dir)
        except subprocess.CalledProcessError as e:
            raise PushError(
                f"git push --mirror to {remote_url} failed (exit {e.returncode})",
                exit_code=e.returncode,
            ) from e
        except OSError as e:
            raise PushError(f"could not run git: {e}") from e
