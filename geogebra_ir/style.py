"""Display style attached to expressions and its projection into elements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .raw import Coords, Element, ElementType, LabelMode, LineStyle, ObjColor, Show


@dataclass(frozen=True)
class Style:
    display_label: bool = True
    line_style: Optional[LineStyle] = None
    color: Optional[ObjColor] = None

    def to_element(
        self,
        element_type: ElementType,
        label: str,
        *,
        caption: Optional[str] = None,
        coords: Optional[Coords] = None,
    ) -> Element:
        return Element(
            type=element_type,
            label=label,
            caption=caption,
            label_mode=LabelMode.CAPTION,
            show=Show(object=True, label=self.display_label),
            coords=coords,
            line_style=self.line_style,
            obj_color=self.color,
        )


DEFAULT_STYLE = Style()

# Point derived from other objects (intersections, centers).
BOUND_STYLE = Style(display_label=True, color=ObjColor(97, 97, 97))

# Point placed freely on a path.
FREE_STYLE = Style(display_label=True, color=ObjColor(21, 101, 192))

LINE_STYLE = Style(display_label=False, line_style=LineStyle())

# Segments, rays and conics.
CURVE_STYLE = Style(display_label=False)
