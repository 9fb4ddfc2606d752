#!/usr/bin/env python3
"""Security validation utilities for unfork."""

import os
import re
from typing import List, Optional


class SecurityValidator:
    """Security validation utilities for input sanitization and validation."""

    # GitHub limits
    MAX_REPO_NAME_LENGTH = 100
    MAX_OWNER_LENGTH = 39
    MAX_URL_LENGTH = 2048
    MAX_PATH_LENGTH = 4096

    SAFE_REPO_NAME_PATTERN = re.compile(r"^[A-Za-z0-9._-]+$")
    SAFE_OWNER_PATTERN = re.compile(r"^[A-Za-z0-9-]+$")

    @staticmethod
    def _has_control_chars(value: str) -> bool:
        return "\x00" in value or any(ord(c) < 32 for c in value)

    @classmethod
    def validate_repo_name(cls, name: str) -> str:
        """Validate a repository name; the name is returned unchanged."""
        if not name or not isinstance(name, str):
            raise ValueError("Repository name must be a non-empty string")

        if len(name) > cls.MAX_REPO_NAME_LENGTH:
            raise ValueError(
                f"Repository name exceeds maximum length of {cls.MAX_REPO_NAME_LENGTH}"
            )

        if name in (".", "..") or "/" in name or "\\" in name:
            raise ValueError("Repository name contains invalid path characters")

        if cls._has_control_chars(name):
            raise ValueError(
                "Repository name contains null bytes or control characters"
            )

        if not cls.SAFE_REPO_NAME_PATTERN.match(name):
            raise ValueError(f"Repository name contains invalid characters: {name}")

        return name

    @classmethod
    def validate_owner(cls, owner: str) -> str:
        """Validate a GitHub user or organization login."""
        if not owner or not isinstance(owner, str):
            raise ValueError("Owner must be a non-empty string")

        if len(owner) > cls.MAX_OWNER_LENGTH:
            raise ValueError(f"Owner exceeds maximum length of {cls.MAX_OWNER_LENGTH}")

        if cls._has_control_chars(owner):
            raise ValueError("Owner contains null bytes or control characters")

        if not cls.SAFE_OWNER_PATTERN.match(owner):
            raise ValueError(f"Owner contains invalid characters: {owner}")

        return owner

    @classmethod
    def validate_url(cls, url: str, allowed_schemes: Optional[List[str]] = None) -> str:
        """Validate a git remote URL."""
        if not url or not isinstance(url, str):
            raise ValueError("URL must be a non-empty string")

        if len(url) > cls.MAX_URL_LENGTH:
            raise ValueError(f"URL exceeds maximum length of {cls.MAX_URL_LENGTH}")

        if cls._has_control_chars(url):
            raise ValueError("URL contains null bytes or control characters")

        if not (url.startswith(("http://", "https://")) or url.startswith("git@")):
            raise ValueError("URL must use http, https, or SSH (git@) scheme")

        if allowed_schemes:
            if url.startswith("git@"):
                scheme = "ssh"
            else:
                scheme = url.split("://")[0].lower()
            if scheme not in allowed_schemes:
                raise ValueError(
                    f"URL scheme '{scheme}' not in allowed schemes: {allowed_schemes}"
                )

        return url

    @classmethod
    def validate_file_path(cls, path: str) -> str:
        """Validate a directory path and return it absolute and normalized."""
        if not path or not isinstance(path, str):
            raise ValueError("File path must be a non-empty string")

        if len(path) > cls.MAX_PATH_LENGTH:
            raise ValueError(
                f"File path exceeds maximum length of {cls.MAX_PATH_LENGTH}"
            )

        if "\x00" in path:
            raise ValueError("File path contains null bytes")

        return os.path.normpath(os.path.abspath(path))

    @classmethod
    def sanitize_for_logging(cls, message: str) -> str:
        """Sanitize message for safe logging by removing potential credentials."""
        if not message:
            return message

        patterns = [
            (r"https?://[^:/@\s]+:[^@\s]+@", "https://[REDACTED]@"),  # URLs with credentials
            (r"token[=:\s]+[^\s]+", "token=[REDACTED]"),  # Token assignments
            (r"password[=:\s]+[^\s]+", "password=[REDACTED]"),  # Password assignments
            (r"ghp_[A-Za-z0-9_]+", "[GITHUB_TOKEN_REDACTED]"),  # GitHub tokens
            (r"gho_[A-Za-z0-9_]+", "[GITHUB_TOKEN_REDACTED]"),  # GitHub OAuth tokens
            (r"ghu_[A-Za-z0-9_]+", "[GITHUB_TOKEN_REDACTED]"),  # GitHub user tokens
            (r"ghs_[A-Za-z0-9_]+", "[GITHUB_TOKEN_REDACTED]"),  # GitHub server tokens
            (r"ghr_[A-Za-z0-9_]+", "[GITHUB_TOKEN_REDACTED]"),  # GitHub refresh tokens
            (r"github_pat_[A-Za-z0-9_]+", "[GITHUB_TOKEN_REDACTED]"),  # Fine-grained tokens
        ]

        sanitized = message
        for pattern, replacement in patterns:
            sanitized = re.sub(pattern, replacement, sanitized, flags=re.IGNORECASE)

        return sanitized
