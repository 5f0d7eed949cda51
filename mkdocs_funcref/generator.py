"""
Reference partial generation.

Walks the function catalog once, in order, and for every function writes
its flag partials and its own partial. Grouped functions are represented in
the reference index by their group partial, which is written after the walk
once all members are known. Global functions are additionally listed one by
one in the global reference, under their own partial even when grouped. The
global reference is therefore not byte-compatible with indexes that list a
group there once, through its first member.

Index contents are built by prepending imports and appending uses, so the
import block of an index lists partials in reverse catalog order while the
uses follow catalog order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from . import naming
from .groups import GroupAccumulator
from .options import extract_flags
from .renderer import render_arg_enum, render_flag_name, render_ref
from .writer import FragmentWriter

log = logging.getLogger("mkdocs.plugins.funcref")

INDEX_SEED = "\n\n"


@dataclass
class GenerationResult:
    files: list[str] = field(default_factory=list)
    groups: list[str] = field(default_factory=list)
    reference: str = ""
    reference_global: str = ""


def render_flag(function_name, desc):
    return render_ref(
        expandable=False,
        heading="#### ",
        name=render_flag_name(desc.long, desc.short),
        args=desc.type_name,
        anchor=naming.flag_anchor(function_name, desc.long),
        description=desc.description,
    )


def write_flags(fn, base_path, writer):
    """Write one partial per flag of ``fn``.

    Returns ``(flag_files, children)``: the files to import into the
    function partial and the concatenated use directives.
    """
    flag_files = []
    children = ""
    for desc in extract_flags(fn.flags):
        path = naming.flag_file(base_path, fn.name, desc.long)
        writer.write(path, render_flag(fn.name, desc))
        flag_files.append(path)
        children += naming.partial_use(path)
    return flag_files, children


def render_function(fn, function_file, flag_files, children):
    imports = "".join(naming.partial_import(p, function_file) for p in flag_files)
    return (
        imports
        + "\n"
        + render_ref(
            expandable=children != "",
            heading="### ",
            name=fn.name,
            args=fn.args,
            arg_enum=render_arg_enum(fn.arg_enum),
            returns=fn.returns,
            pipeline_only=not fn.is_global,
            anchor=naming.function_anchor(fn.name),
            description=fn.description,
            children=children,
        )
    )


def generate(functions, base_path=naming.DEFAULT_PARTIALS_DIR, writer=None, groups=None):
    functions = list(functions)
    if writer is None:
        writer = FragmentWriter()
    start = len(writer.written)
    ref_file = naming.reference_file(base_path)
    global_ref_file = naming.global_reference_file(base_path)
    accumulator = GroupAccumulator(base_path, ref_file, groups)

    reference = INDEX_SEED
    reference_global = INDEX_SEED

    for fn in functions:
        function_file = naming.function_file(base_path, fn.name)
        flag_files, children = write_flags(fn, base_path, writer)
        writer.write(function_file, render_function(fn, function_file, flag_files, children))

        own_use = naming.partial_use(fn.name)
        if fn.is_global:
            own_global_import = naming.partial_import(function_file, global_ref_file)
            reference_global = own_global_import + reference_global + own_use

        partial_import = naming.partial_import(function_file, ref_file)
        partial_use = own_use
        if fn.group:
            member = accumulator.add_member(fn.group, fn.name, function_file)
            if not member.is_new:
                continue
            partial_import, partial_use = member.import_, member.use

        reference = partial_import + reference + partial_use

    group_ids = accumulator.finalize(writer)
    writer.write(ref_file, reference)
    writer.write(global_ref_file, reference_global)
    files = writer.written[start:]

    log.info(
        "funcref: %d functions, %d groups, %d partials written to %s",
        len(functions),
        len(group_ids),
        len(files),
        base_path,
    )
    return GenerationResult(
        files=files,
        groups=group_ids,
        reference=reference,
        reference_global=reference_global,
    )
