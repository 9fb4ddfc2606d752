#!/usr/bin/env python3
"""Configuration dataclasses for unfork."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CloneMethod(Enum):
    """Enumeration for git push URL forms."""
    HTTPS = "https"
    SSH = "ssh"


class Visibility(Enum):
    """Enumeration for repository visibility levels."""
    PRIVATE = "private"
    PUBLIC = "public"


@dataclass(frozen=True)
class RepoReference:
    """Owner/name pair identifying a GitHub repository."""
    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass
class MirrorPaths:
    """Absolute locations of the two bare mirrors."""
    origin: str
    unforked: str


@dataclass
class UnforkConfig:
    """Main configuration for a single unfork run, resolved once at start."""
    source: RepoReference
    source_url: str
    destination: RepoReference
    mirrors: MirrorPaths
    visibility: Visibility = Visibility.PUBLIC
    push_method: CloneMethod = CloneMethod.HTTPS
    dry_run: bool = False
