"""
MDX renderer for function, flag and group reference blocks.

A single template is used for every kind of block so that function pages,
flag pages and group pages share the same collapsible layout.
"""

from __future__ import annotations

TEMPLATE_FUNCTION_REF = """
<details className="config-field" data-expandable="{expandable}"{attrs}>
<summary>

{heading}`{name}`{args}{arg_enum}{returns}{pipeline_only} {{#{anchor}}}

{description}

</summary>

{children}

</details>
"""

_PIPELINE_ONLY = ' <span className="config-field-pipeline-only">pipeline only</span>'


def _bool(value):
    return "true" if value else "false"


def render_arg_enum(values):
    if not values:
        return ""
    return "<span>" + " ".join(values) + "</span>"


def render_flag_name(long, short=""):
    name = f"--{long}"
    if short:
        name += f" / -{short}"
    return name


def render_ref(
    *,
    expandable,
    attrs="",
    heading,
    name,
    args="",
    arg_enum="",
    returns="",
    pipeline_only=False,
    anchor,
    description="",
    children="",
):
    return TEMPLATE_FUNCTION_REF.format(
        expandable=_bool(expandable),
        attrs=attrs,
        heading=heading,
        name=name,
        args=f" <span className=\"config-field-args\">{args}</span>" if args else "",
        arg_enum=f' <span className="config-field-enum">{arg_enum}</span>' if arg_enum else "",
        returns=f' <span className="config-field-type">{returns}</span>' if returns else "",
        pipeline_only=_PIPELINE_ONLY if pipeline_only else "",
        anchor=anchor,
        description=description,
        children=children,
    )
