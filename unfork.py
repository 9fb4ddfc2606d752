#!/usr/bin/env python3
"""
Unfork - Detach a forked GitHub repository into a standalone repository.

This tool keeps a bare mirror of the source repository in the working
directory, copies it to '<name>-unforked.git', makes sure a GitHub repository
of that name exists (via the GitHub CLI) and pushes the copy with
'git push --mirror'. The result has the full history of the fork but no
fork relationship.

License: MIT
"""

from __future__ import annotations

import sys
from typing import List, NoReturn, Optional

from argument_parser import parse_arguments
from unfork_orchestrator import UnforkOrchestrator


def main(argv: Optional[List[str]] = None) -> NoReturn:
    cfg = parse_arguments(argv)
    orchestrator = UnforkOrchestrator(cfg)
    sys.exit(orchestrator.run())


if __name__ == "__main__":
    main()
