"""Raw GeoGebra document structures.

These are plain data shapes mirroring ``geogebra.xml``. The typed builder in
:mod:`geogebra_ir.workspace` produces them and :mod:`geogebra_ir.xml_io`
renders and parses them.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional, Union

FORMAT = "5.0"
APP = "suite"
SUB_APP = "geometry"


class ElementType(str, Enum):
    POINT = "point"
    SEGMENT = "segment"
    LINE = "line"
    NUMERIC = "numeric"
    CONIC = "conic"
    RAY = "ray"
    LIST = "list"


class LabelMode(IntEnum):
    NAME = 0
    NAME_VALUE = 1
    VALUE = 2
    CAPTION = 3
    CAPTION_VALUE = 9


class LineType(IntEnum):
    FULL = 0
    DOTTED = 1
    DASHED_SHORT = 10
    DASHED_LONG = 15
    DASHED_DOTTED = 20


@dataclass(frozen=True)
class Show:
    object: bool = True
    label: bool = True

    @classmethod
    def none(cls) -> "Show":
        return cls(object=False, label=False)


@dataclass(frozen=True)
class Coords:
    x: float
    y: float
    z: float

    @classmethod
    def xy(cls, x: float, y: float) -> "Coords":
        """Homogeneous coordinates of a finite point."""

        return cls(float(x), float(y), 1.0)


@dataclass(frozen=True)
class LineStyle:
    thickness: Optional[int] = None
    type: Optional[LineType] = None
    opacity: Optional[int] = None


@dataclass(frozen=True)
class ObjColor:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in ("r", "g", "b"):
            value = getattr(self, channel)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral) or not 0 <= value <= 255:
                raise ValueError(f"colour channel {channel}={value!r} is not a byte")


@dataclass
class Element:
    type: ElementType
    label: str
    caption: Optional[str] = None
    label_mode: LabelMode = LabelMode.CAPTION
    show: Show = field(default_factory=Show)
    coords: Optional[Coords] = None
    line_style: Optional[LineStyle] = None
    obj_color: Optional[ObjColor] = None


@dataclass
class ExpressionRecord:
    type: ElementType
    label: str
    exp: str


@dataclass
class Command:
    name: str
    inputs: List[str] = field(default_factory=list)
    outputs: List[str] = field(default_factory=list)


ConstructionItem = Union[Element, Command, ExpressionRecord]


@dataclass
class Construction:
    items: List[ConstructionItem] = field(default_factory=list)

    def labels(self) -> List[str]:
        """Labels defined by elements and expression records, in document order."""

        return [
            item.label
            for item in self.items
            if isinstance(item, (Element, ExpressionRecord))
        ]

    def has_label(self, label: str) -> bool:
        for item in self.items:
            if isinstance(item, (Element, ExpressionRecord)) and item.label == label:
                return True
        return False


@dataclass
class Geogebra:
    """Top-level workspace document."""

    format: str = FORMAT
    app: str = APP
    sub_app: str = SUB_APP
    construction: Construction = field(default_factory=Construction)


# Kernel settings. ``digits`` and ``coord_style`` are observed in real files but
# their exact meaning is undocumented, so they round-trip as opaque integers.


class AngleUnit(str, Enum):
    DEGREE = "degree"
    RADIANT = "radiant"


@dataclass
class Kernel:
    digits: int
    angle_unit: AngleUnit
    coord_style: int


@dataclass
class KernelDocument:
    kernel: Kernel
