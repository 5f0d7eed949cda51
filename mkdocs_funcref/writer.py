"""
Fragment writer.

Persists generated partials, creating parent directories as needed. Any
filesystem failure is fatal and aborts the run.
"""

from __future__ import annotations

import logging
import os

from mkdocs.exceptions import PluginError

log = logging.getLogger("mkdocs.plugins.funcref")


class FuncRefError(PluginError):
    """Base error for partial generation."""


class DirectoryCreationError(FuncRefError):
    def __init__(self, path, cause):
        super().__init__(f"funcref: cannot create directory {path}: {cause}")
        self.path = path
        self.cause = cause


class FragmentWriteError(FuncRefError):
    def __init__(self, path, cause):
        super().__init__(f"funcref: cannot write {path}: {cause}")
        self.path = path
        self.cause = cause


def _unchanged(path, content):
    if not os.path.isfile(path):
        return False
    try:
        with open(path, encoding="utf-8") as f:
            return f.read() == content
    except (OSError, UnicodeDecodeError):
        return False


class FragmentWriter:
    def __init__(self, *, dry_run=False):
        self.dry_run = dry_run
        self.written: list[str] = []

    def write(self, path, content):
        if not self.dry_run:
            parent = os.path.dirname(path)
            if parent:
                try:
                    os.makedirs(parent, exist_ok=True)
                except OSError as exc:
                    log.error("funcref: mkdir failed for %s", parent)
                    raise DirectoryCreationError(parent, exc) from exc
            if _unchanged(path, content):
                log.debug("funcref: unchanged %s", path)
                self.written.append(path)
                return
            try:
                with open(path, "w", encoding="utf-8") as f:
                    f.write(content)
            except OSError as exc:
                log.error("funcref: write failed for %s", path)
                raise FragmentWriteError(path, exc) from exc
        log.debug("funcref: %swrote %s", "[dry-run] " if self.dry_run else "", path)
        self.written.append(path)
