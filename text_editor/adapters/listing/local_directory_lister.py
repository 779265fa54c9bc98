"""
Local directory lister: non-hidden entries up to a fixed depth.
"""

import logging
import os
from typing import Optional

from typing_extensions import override

from text_editor.exceptions import ListingError
from text_editor.ports.listing.directory_lister_port import DirectoryListerPort


class LocalDirectoryLister(DirectoryListerPort):
    """
    List a directory the way `find <path> -maxdepth N -not -path '*/.*'` does.

    The first entry is the directory itself, followed by every non-hidden
    descendant up to `max_depth` levels down, sorted by path.
    """

    def __init__(self, max_depth: int = 2, logger: Optional[logging.Logger] = None):
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self._max_depth = max_depth
        self._logger = logger or logging.getLogger(__name__)

    @override
    def list(self, path: str) -> list[str]:
        if not os.path.isdir(path):
            raise ListingError(f"Not a directory: {path}")

        root = path.rstrip(os.sep) or os.sep
        entries: list[str] = []

        def _on_error(err: OSError) -> None:
            raise err

        try:
            for current, dirs, files in os.walk(root, onerror=_on_error):
                rel = os.path.relpath(current, root)
                level = 0 if rel == os.curdir else rel.count(os.sep) + 1
                dirs[:] = [d for d in dirs if not d.startswith(".")]
                for name in dirs + [f for f in files if not f.startswith(".")]:
                    entries.append(os.path.join(current, name))
                if level + 1 >= self._max_depth:
                    # children of this level are listed but not descended into
                    dirs[:] = []
        except OSError as e:
            raise ListingError(str(e)) from e

        entries.sort()
        self._logger.debug(f"Listed {len(entries)} entries under {root}")
        return [root] + entries
