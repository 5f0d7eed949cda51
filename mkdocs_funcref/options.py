"""
Flag descriptors derived from options dataclasses.

An options structure is a dataclass whose flag fields carry ``long``,
``short`` and ``description`` metadata. Shared flag sets are composed by
embedding another options dataclass with :func:`embed`; its flags are
expanded in place, at the point of embedding.

Fields that are neither embedded nor carry a ``long`` name are not flags
and are skipped without complaint.
"""

from __future__ import annotations

import dataclasses
import typing
from dataclasses import dataclass

_MISSING = dataclasses.MISSING


@dataclass(frozen=True)
class FlagDescriptor:
    long: str
    short: str = ""
    description: str = ""
    type_name: str = ""


def flag(long, short="", description="", *, default=_MISSING, default_factory=_MISSING, type_name=""):
    """Declare a dataclass field that is exposed as ``--long`` / ``-short``."""
    metadata = {"long": long, "short": short, "description": description}
    if type_name:
        metadata["type_name"] = type_name
    if default is _MISSING and default_factory is _MISSING:
        default = None
    return dataclasses.field(default=default, default_factory=default_factory, metadata=metadata)


def embed(options_type):
    """Declare a field whose flags are spliced into the embedding structure."""
    return dataclasses.field(default_factory=options_type, metadata={"embedded": True, "type": options_type})


def type_display(tp):
    if isinstance(tp, str):
        return tp
    if typing.get_args(tp):
        return str(tp).replace("typing.", "")
    return getattr(tp, "__name__", str(tp))


def _resolved_hints(cls):
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError):
        return {}


def extract_flags(options_type):
    """Return the flags of ``options_type`` in declaration order.

    Accepts a dataclass type or instance; anything else has no flags.
    """
    if options_type is None or not dataclasses.is_dataclass(options_type):
        return []
    cls = options_type if isinstance(options_type, type) else type(options_type)
    hints = _resolved_hints(cls)

    out = []
    for f in dataclasses.fields(cls):
        ftype = hints.get(f.name, f.type)
        if f.metadata.get("embedded"):
            out.extend(extract_flags(f.metadata.get("type", ftype)))
            continue

        long = f.metadata.get("long", "")
        if not long:
            continue

        out.append(
            FlagDescriptor(
                long=long,
                short=f.metadata.get("short", "") or "",
                description=f.metadata.get("description", "") or "",
                type_name=f.metadata.get("type_name") or type_display(ftype),
            )
        )
    return out
