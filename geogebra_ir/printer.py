from typing import List

from .numbers import format_number
from .raw import Command, ConstructionItem, Element, ExpressionRecord, Geogebra


def _format_fields(element: Element) -> str:
    parts: List[str] = []
    if element.caption is not None:
        parts.append(f'caption="{element.caption}"')
    parts.append(f"show={'object' if element.show.object else '-'}/{'label' if element.show.label else '-'}")
    if element.coords is not None:
        c = element.coords
        parts.append(f"coords=({format_number(c.x)}, {format_number(c.y)}, {format_number(c.z)})")
    if element.line_style is not None:
        style = element.line_style
        rendered = ",".join(
            f"{key}={value}"
            for key, value in (
                ("thickness", style.thickness),
                ("type", style.type.name.lower() if style.type is not None else None),
                ("opacity", style.opacity),
            )
            if value is not None
        )
        parts.append(f"line=[{rendered}]")
    if element.obj_color is not None:
        color = element.obj_color
        parts.append(f"color=#{color.r:02x}{color.g:02x}{color.b:02x}")
    return " ".join(parts)


def format_item(item: ConstructionItem) -> str:
    """Return a single-line representation of a construction item."""

    if isinstance(item, ExpressionRecord):
        return f"expression {item.label} {item.type.value} = {item.exp}"
    if isinstance(item, Element):
        return f"element {item.label} {item.type.value} {_format_fields(item)}"
    if isinstance(item, Command):
        return f"command {item.name}[{', '.join(item.inputs)}] -> [{', '.join(item.outputs)}]"
    raise ValueError(f"unknown construction item {item!r}")


def print_construction(document: Geogebra) -> str:
    lines = [f"geogebra format={document.format} app={document.app} subApp={document.sub_app}"]
    lines.extend(format_item(item) for item in document.construction.items)
    return "\n".join(lines) + "\n"
