"""Tests for command line parsing and config resolution."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from argument_parser import parse_arguments
from config import CloneMethod, RepoReference, Visibility


def test_url_without_owner_override(tmp_path: Path) -> None:
    cfg = parse_arguments(['https://github.com/acme/widget', '--workdir', str(tmp_path)])

    assert cfg.source == RepoReference('acme', 'widget')
    assert cfg.destination == RepoReference('acme', 'widget-unforked')
    assert cfg.source_url == 'https://github.com/acme/widget'
    assert cfg.visibility == Visibility.PUBLIC
    assert cfg.push_method == CloneMethod.HTTPS
    assert cfg.dry_run is False


def test_owner_override_keeps_source(tmp_path: Path) -> None:
    cfg = parse_arguments(['acme/widget', 'bob', '--workdir', str(tmp_path)])

    assert cfg.source == RepoReference('acme', 'widget')
    assert cfg.destination == RepoReference('bob', 'widget-unforked')
    assert cfg.source_url == 'https://github.com/acme/widget.git'


def test_mirror_paths_are_absolute(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    cfg = parse_arguments(['git@github.com:acme/widget.git'])

    assert os.path.isabs(cfg.mirrors.origin)
    assert cfg.mirrors.origin == os.path.join(os.getcwd(), 'widget.git')
    assert cfg.mirrors.unforked == os.path.join(os.getcwd(), 'widget-unforked.git')


def test_behavior_options(tmp_path: Path) -> None:
    cfg = parse_arguments(
        [
            'acme/widget',
            '--workdir', str(tmp_path),
            '--visibility', 'private',
            '--push-method', 'ssh',
            '--dry-run',
        ]
    )
    assert cfg.visibility == Visibility.PRIVATE
    assert cfg.push_method == CloneMethod.SSH
    assert cfg.dry_run is True


@pytest.mark.parametrize('argv', [[], ['acme/widget', 'bob', 'extra']])
def test_wrong_argument_count_exits_with_one(argv) -> None:
    with pytest.raises(SystemExit) as excinfo:
        parse_arguments(argv)
    assert excinfo.value.code == 1


def test_missing_owner_segment_is_rejected() -> None:
    with pytest.raises(SystemExit) as excinfo:
        parse_arguments(['widget'])
    assert excinfo.value.code == 1


def test_invalid_destination_owner_is_rejected(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        parse_arguments(['acme/widget', 'not an owner'])
    assert excinfo.value.code == 1
    assert 'usage error' in capsys.readouterr().err
