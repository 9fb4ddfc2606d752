#!/usr/bin/env python3
"""GitHub CLI wrapper for checking and creating destination repositories."""

from __future__ import annotations

import shutil
import subprocess

from config import CloneMethod, RepoReference, Visibility
from errors import HostingClientMissing, RepoCreateError
from logging_utils import Logger

GITHUB_HOST = "github.com"


class GitHubCli:
    """Delegates all hosting operations to an authenticated ``gh``."""

    def __init__(
        self,
        push_method: CloneMethod = CloneMethod.HTTPS,
        gh_executable: str = "gh",
    ) -> None:
        self.push_method = push_method
        self.gh = gh_executable

    def ensure_available(self) -> str:
        """Return the resolved path of ``gh`` or raise HostingClientMissing."""
        path = shutil.which(self.gh)
        if not path:
            raise HostingClientMissing(
                "GitHub CLI (gh) is required. Install it from https://cli.github.com "
                "and authenticate with `gh auth login`."
            )
        Logger.debug(f"using github cli: {path}")
        return path

    def repo_exists(self, repo: RepoReference) -> bool:
        result = subprocess.run(
            [self.gh, "repo", "view", repo.full_name],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
        return result.returncode == 0

    def create_repo(self, repo: RepoReference, visibility: Visibility) -> None:
        Logger.info(f"creating new repo {repo.full_name} ({visibility.value})")
        try:
            subprocess.run(
                [self.gh, "repo", "create", repo.full_name, f"--{visibility.value}"],
                check=True,
            )
        except subprocess.CalledProcessError as e:
            raise RepoCreateError(
                f"gh repo create {repo.full_name} failed (exit {e.returncode})",
                exit_code=e.returncode,
            ) from e
        except OSError as e:
            raise RepoCreateError(f"could not run gh: {e}") from e

    def ensure_repo(self, repo: RepoReference, visibility: Visibility) -> bool:
        """Create ``repo`` unless it already exists. Returns True if created."""
        Logger.info(f"ensuring target repo {repo.full_name} exists")
        if self.repo_exists(repo):
            Logger.info("target repo already exists, skipping creation")
            return False
        self.create_repo(repo, visibility)
        return True

    def web_url(self, repo: RepoReference) -> str:
        return f"https://{GITHUB_HOST}/{repo.full_name}"

    def repo_url(self, repo: RepoReference) -> str:
        """Get the git remote URL based on push method."""
        if self.push_method == CloneMethod.SSH:
            return f"git@{GITHUB_HOST}:{repo.full_name}.git"
        return f"https://{GITHUB_HOST}/{repo.full_name}.git"
