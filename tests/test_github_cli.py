"""Tests for the GitHub CLI wrapper."""

from __future__ import annotations

import subprocess
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from config import CloneMethod, RepoReference, Visibility
from errors import HostingClientMissing, RepoCreateError
from github_cli import GitHubCli

DEST = RepoReference('bob', 'widget-unforked')


@patch('github_cli.shutil.which', return_value=None)
def test_ensure_available_raises_when_gh_missing(_mock_which: MagicMock) -> None:
    with pytest.raises(HostingClientMissing) as excinfo:
        GitHubCli().ensure_available()
    assert excinfo.value.exit_code == 1
    assert 'gh auth login' in str(excinfo.value)


@patch('github_cli.shutil.which', return_value='/usr/bin/gh')
def test_ensure_available_returns_path(_mock_which: MagicMock) -> None:
    assert GitHubCli().ensure_available() == '/usr/bin/gh'


@patch('github_cli.subprocess.run')
def test_repo_exists_uses_exit_status(mock_run: MagicMock) -> None:
    cli = GitHubCli()

    mock_run.return_value = SimpleNamespace(returncode=0)
    assert cli.repo_exists(DEST) is True

    mock_run.return_value = SimpleNamespace(returncode=1)
    assert cli.repo_exists(DEST) is False

    assert mock_run.call_args.args[0] == ['gh', 'repo', 'view', 'bob/widget-unforked']


@patch.object(GitHubCli, 'create_repo')
@patch.object(GitHubCli, 'repo_exists', return_value=True)
def test_ensure_repo_skips_existing(
    _mock_exists: MagicMock, mock_create: MagicMock
) -> None:
    assert GitHubCli().ensure_repo(DEST, Visibility.PUBLIC) is False
    mock_create.assert_not_called()


@patch.object(GitHubCli, 'create_repo')
@patch.object(GitHubCli, 'repo_exists', return_value=False)
def test_ensure_repo_creates_missing(
    _mock_exists: MagicMock, mock_create: MagicMock
) -> None:
    assert GitHubCli().ensure_repo(DEST, Visibility.PUBLIC) is True
    mock_create.assert_called_once_with(DEST, Visibility.PUBLIC)


@patch('github_cli.subprocess.run')
def test_create_repo_passes_visibility(mock_run: MagicMock) -> None:
    GitHubCli().create_repo(DEST, Visibility.PUBLIC)
    mock_run.assert_called_once_with(
        ['gh', 'repo', 'create', 'bob/widget-unforked', '--public'], check=True
    )


@patch('github_cli.subprocess.run')
def test_create_repo_failure_raises(mock_run: MagicMock) -> None:
    mock_run.side_effect = subprocess.CalledProcessError(4, ['gh'])
    with pytest.raises(RepoCreateError) as excinfo:
        GitHubCli().create_repo(DEST, Visibility.PRIVATE)
    assert excinfo.value.exit_code == 4


def test_repo_urls_follow_push_method() -> None:
    https_cli = GitHubCli(push_method=CloneMethod.HTTPS)
    assert https_cli.repo_url(DEST) == 'https://github.com/bob/widget-unforked.git'
    assert https_cli.web_url(DEST) == 'https://github.com/bob/widget-unforked'

    ssh_cli = GitHubCli(push_method=CloneMethod.SSH)
    assert ssh_cli.repo_url(DEST) == 'git@github.com:bob/widget-unforked.git'
