"""
File names, import identifiers and anchors for generated partials.

Everything here is a pure function of catalog data, so independent pages
referencing the same partial always agree on its path and import name.
"""

from __future__ import annotations

import os
import re

PARTIAL_EXT = ".mdx"
DEFAULT_PARTIALS_DIR = "docs/pages/configuration/_partials/functions/"

TEMPLATE_PARTIAL_IMPORT = 'import {name} from "{path}"\n'
TEMPLATE_PARTIAL_USE = "\n\n<{name} />\n\n"

_WORD_SPLIT_RE = re.compile(r"[^0-9A-Za-z]+")


def function_file(base, name):
    return os.path.join(base, f"{name}{PARTIAL_EXT}")


def flag_file(base, function_name, long):
    return os.path.join(base, function_name, f"{long}{PARTIAL_EXT}")


def group_id(label):
    return label.lower()


def group_file(base, gid):
    return os.path.join(base, f"group_{gid}{PARTIAL_EXT}")


def reference_file(base):
    return os.path.join(base, f"reference{PARTIAL_EXT}")


def global_reference_file(base):
    return os.path.join(base, f"reference_global{PARTIAL_EXT}")


def import_name(name_or_path):
    """``build_images`` and ``.../build_images.mdx`` both give ``PartialBuildImages``."""
    stem = os.path.basename(name_or_path)
    if stem.endswith(PARTIAL_EXT):
        stem = stem[: -len(PARTIAL_EXT)]
    words = [w for w in _WORD_SPLIT_RE.split(stem) if w]
    return "Partial" + "".join(w[:1].upper() + w[1:] for w in words)


def relative_import_path(partial, importing_file):
    rel = os.path.relpath(partial, os.path.dirname(importing_file) or ".")
    rel = rel.replace(os.sep, "/")
    if not rel.startswith("."):
        rel = f"./{rel}"
    return rel


def partial_import(partial, importing_file):
    return TEMPLATE_PARTIAL_IMPORT.format(
        name=import_name(partial), path=relative_import_path(partial, importing_file)
    )


def partial_use(name_or_path):
    return TEMPLATE_PARTIAL_USE.format(name=import_name(name_or_path))


def function_anchor(name):
    return name


def flag_anchor(function_name, long):
    return f"{function_name}-{long}"


def group_anchor(gid):
    return f"group_{gid}"
