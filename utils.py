#!/usr/bin/env python3
"""Utility functions for unfork."""

from config import RepoReference

UNFORKED_SUFFIX = "-unforked"
GIT_SUFFIX = ".git"

# Checked in order; the first matching prefix is stripped
GITHUB_PREFIXES = (
    "git@github.com:",
    "https://github.com/",
    "http://github.com/",
)


def clean_reference(value: str) -> str:
    """Strip one trailing '.git' and then one trailing '/'."""
    if value.endswith(GIT_SUFFIX):
        value = value[: -len(GIT_SUFFIX)]
    if value.endswith("/"):
        value = value[:-1]
    return value


def normalize_reference(value: str) -> RepoReference:
    """Derive the owner/name pair from a GitHub URL or a bare 'owner/name'.

    Input without a '/' yields an empty owner and the whole string as name.
    """
    cleaned = clean_reference(value)
    path = cleaned
    for prefix in GITHUB_PREFIXES:
        if cleaned.startswith(prefix):
            path = cleaned[len(prefix):]
            break
    path = clean_reference(path)

    owner, sep, name = path.partition("/")
    if not sep:
        return RepoReference(owner="", name=path)
    return RepoReference(owner=owner, name=name)


def is_github_url(value: str) -> bool:
    return value.startswith(GITHUB_PREFIXES)


def source_clone_url(value: str, reference: RepoReference) -> str:
    """Return what to clone the origin mirror from.

    URLs are cloned as given (minus the '.git' and '/' suffixes); a bare
    'owner/name' is expanded to its HTTPS GitHub URL.
    """
    cleaned = clean_reference(value)
    if is_github_url(cleaned):
        return cleaned
    return f"https://github.com/{reference.full_name}.git"


def derive_unforked_name(name: str) -> str:
    return f"{name}{UNFORKED_SUFFIX}"
