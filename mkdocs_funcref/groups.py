"""
Group accumulation.

Functions sharing a group label are represented in the reference index by a
single group partial. The group partial transcludes every member; its
imports are prepended (so they end up in reverse catalog order) and its
uses are appended (catalog order).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from . import naming
from .renderer import render_ref

log = logging.getLogger("mkdocs.plugins.funcref")


@dataclass
class Group:
    name: str
    gid: str
    file: str
    imports: str = ""
    uses: str = "\n\n"
    members: list[str] = field(default_factory=list)

    @property
    def content(self):
        return self.imports + self.uses


@dataclass(frozen=True)
class Membership:
    import_: str
    use: str
    is_new: bool


class GroupAccumulator:
    def __init__(self, base_path, reference_file, groups=None):
        self.base_path = base_path
        self.reference_file = reference_file
        self.groups: dict[str, Group] = {} if groups is None else groups

    def add_member(self, label, function_name, function_file):
        """Add a function to the group ``label``.

        Returns the directives the index should use for this function: the
        group's own import/use on the group's first encounter, empty strings
        once the group is already represented in the index.
        """
        gid = naming.group_id(label)
        group = self.groups.get(gid)
        is_new = group is None
        if is_new:
            group = Group(name=label, gid=gid, file=naming.group_file(self.base_path, gid))
            self.groups[gid] = group
            log.debug("funcref: new group %s", gid)

        group.imports = naming.partial_import(function_file, group.file) + group.imports
        group.uses = group.uses + naming.partial_use(function_name)
        group.members.append(function_name)

        if not is_new:
            return Membership("", "", False)
        return Membership(
            naming.partial_import(group.file, self.reference_file),
            naming.partial_use(group.file),
            True,
        )

    def render(self, group):
        return (
            group.imports
            + "\n"
            + render_ref(
                expandable=False,
                heading="### ",
                name=group.name,
                anchor=naming.group_anchor(group.gid),
                children=group.uses,
            )
        )

    def finalize(self, writer):
        for group in self.groups.values():
            writer.write(group.file, self.render(group))
        return list(self.groups)
