"""Typed expression algebra.

Every handle wraps an immutable :class:`Expression` (formula text plus display
style). Operations never mutate their operands: they format the operands' text
into a new template and return a fresh handle of the operation's result type.
Registered nodes are referenced through :class:`Var`, whose text is always the
label, so a formula is emitted once no matter how often it is reused.

Equality of numerics is syntactic-then-literal: ``(1 + 0i) + (2 + 0i)`` is not
equal to ``3`` even though GeoGebra would evaluate it so.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import reduce
from typing import (
    Any,
    ClassVar,
    Dict,
    FrozenSet,
    Generic,
    Iterable,
    Optional,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from .numbers import format_number, is_real_literal, parse_literal
from .raw import ElementType, LineStyle, ObjColor
from .style import BOUND_STYLE, CURVE_STYLE, DEFAULT_STYLE, FREE_STYLE, LINE_STYLE, Style

H = TypeVar("H", bound="Handle")

# Kinds usable as the path of ``Point.on`` or the target of ``Numeric.distance``.
OBJECT_KINDS: FrozenSet[ElementType] = frozenset(
    {
        ElementType.POINT,
        ElementType.LINE,
        ElementType.CONIC,
        ElementType.RAY,
        ElementType.SEGMENT,
    }
)

# Kinds that may be registered as captioned construction elements.
ADDABLE_KINDS: FrozenSet[ElementType] = frozenset(
    {
        ElementType.POINT,
        ElementType.LINE,
        ElementType.CONIC,
        ElementType.SEGMENT,
    }
)


@dataclass(frozen=True)
class Expression:
    """A type-erased formula with its display style."""

    text: str
    style: Style = DEFAULT_STYLE

    @classmethod
    def expr(cls, text: object) -> "Expression":
        return cls(str(text))


@dataclass(frozen=True)
class Var(Generic[H]):
    """Reference to a registered node. Its text is always ``label``.

    Public attributes missing on the Var are looked up on the resolved handle,
    so ``var.x()`` or ``circle_var.center()`` work without an explicit
    conversion. Style setters are not forwarded: the registered element is
    already written, so a style change must happen before registration.
    """

    label: str
    kind: ElementType
    item_kind: Optional[ElementType] = None

    @property
    def text(self) -> str:
        return self.label

    def handle(self) -> "Handle":
        handle_cls = handle_type(self.kind)
        if handle_cls is List:
            return List(Expression(self.label), item_kind=self.item_kind)
        return handle_cls(Expression(self.label))

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        if name.startswith("set_"):
            raise AttributeError(
                f"{name} is not available on registered variable {self.label!r}; "
                "style the handle before adding it"
            )
        return getattr(self.handle(), name)


class Handle:
    """Base of the typed handles; ``kind`` fixes the serialized element type."""

    kind: ClassVar[ElementType]
    default_style: ClassVar[Style] = DEFAULT_STYLE

    __slots__ = ("_expression",)

    def __init__(self, expression: Expression):
        self._expression = expression

    @classmethod
    def _build(cls: Type[H], text: str, style: Optional[Style] = None) -> H:
        return cls(Expression(text, style if style is not None else cls.default_style))

    @property
    def expression(self) -> Expression:
        return self._expression

    @property
    def text(self) -> str:
        return self._expression.text

    @property
    def style(self) -> Style:
        return self._expression.style

    @classmethod
    def of(cls: Type[H], value: Any) -> H:
        """Convert ``value`` to this handle type or raise ``TypeError``."""

        if isinstance(value, cls):
            return value
        if isinstance(value, Var):
            if value.kind is not cls.kind:
                raise TypeError(
                    f"cannot use {value.kind.value} variable {value.label!r} "
                    f"as {cls.kind.value}"
                )
            return cls(Expression(value.label))
        converted = cls._convert(value)
        if converted is None:
            raise TypeError(f"cannot convert {value!r} to {cls.__name__}")
        return converted

    @classmethod
    def _convert(cls: Type[H], value: Any) -> Optional[H]:
        return None

    def _restyle(self, **changes: Any) -> None:
        self._expression = replace(
            self._expression, style=replace(self._expression.style, **changes)
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.text!r})"


class _Labelled(Handle):
    __slots__ = ()

    def set_color(self, r: int, g: int, b: int) -> None:
        self._restyle(color=ObjColor(r, g, b))

    def set_display_label(self, value: bool) -> None:
        self._restyle(display_label=bool(value))


class _Stroked(_Labelled):
    __slots__ = ()

    def set_style(self, style: LineStyle) -> None:
        self._restyle(line_style=style)


class Point(_Labelled):
    kind = ElementType.POINT
    __slots__ = ()

    @classmethod
    def _convert(cls, value: Any) -> Optional["Point"]:
        if isinstance(value, tuple) and len(value) == 2:
            return cls.from_coords(value[0], value[1])
        return None

    @classmethod
    def from_coords(cls, x: "NumericLike", y: "NumericLike") -> "Point":
        return cls._build(f"(real({Numeric.of(x).text}), real({Numeric.of(y).text}))")

    @classmethod
    def intersect(cls, k: "LineLike", l: "LineLike") -> "Point":
        return cls._build(f"Intersect({Line.of(k).text}, {Line.of(l).text})", BOUND_STYLE)

    @classmethod
    def on(cls, path: Any) -> "Point":
        """A point free to move along ``path``."""

        return cls._build(f"Point({_object_text(path)})", FREE_STYLE)

    def x(self) -> "Numeric":
        return Numeric._build(f"x({self.text})")

    def y(self) -> "Numeric":
        return Numeric._build(f"y({self.text})")

    def complex(self) -> "Numeric":
        return Numeric._build(f"ToComplex({self.text})")


class Line(_Stroked):
    kind = ElementType.LINE
    default_style = LINE_STYLE
    __slots__ = ()

    @classmethod
    def through(cls, a: "PointLike", b: "PointLike") -> "Line":
        return cls._build(f"Line({Point.of(a).text}, {Point.of(b).text})")

    @classmethod
    def angle_bisector(cls, a: "PointLike", b: "PointLike", c: "PointLike") -> "Line":
        """Bisector of the angle ``abc`` (vertex ``b``)."""

        return cls._build(
            f"AngleBisector({Point.of(a).text}, {Point.of(b).text}, {Point.of(c).text})"
        )

    @classmethod
    def perpendicular(cls, to: "LineLike", through: "PointLike") -> "Line":
        return cls._build(f"PerpendicularLine({Point.of(through).text}, {Line.of(to).text})")

    @classmethod
    def parallel(cls, to: "LineLike", through: "PointLike") -> "Line":
        return cls._build(f"Line({Point.of(through).text}, {Line.of(to).text})")


class Segment(_Stroked):
    kind = ElementType.SEGMENT
    default_style = CURVE_STYLE
    __slots__ = ()

    @classmethod
    def between(cls, a: "PointLike", b: "PointLike") -> "Segment":
        return cls._build(f"Segment({Point.of(a).text}, {Point.of(b).text})")


class Ray(_Stroked):
    kind = ElementType.RAY
    default_style = CURVE_STYLE
    __slots__ = ()

    @classmethod
    def from_origin(cls, origin: "PointLike", through: "PointLike") -> "Ray":
        return cls._build(f"Ray({Point.of(origin).text}, {Point.of(through).text})")


class Conic(_Stroked):
    kind = ElementType.CONIC
    default_style = CURVE_STYLE
    __slots__ = ()

    @classmethod
    def circle(cls, center: "PointLike", radius: "NumericLike") -> "Conic":
        return cls._build(f"Circle({Point.of(center).text}, abs({Numeric.of(radius).text}))")

    def center(self) -> Point:
        return Point._build(f"Center({self.text})", BOUND_STYLE)


class Numeric(Handle):
    kind = ElementType.NUMERIC
    __slots__ = ()

    # Equality is literal-aware, so equal values may have different hashes.
    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def _convert(cls, value: Any) -> Optional["Numeric"]:
        if is_real_literal(value):
            return cls.from_number(value)
        return None

    @classmethod
    def from_number(cls, value: float) -> "Numeric":
        return cls._build(f"{format_number(value)} + 0i")

    @classmethod
    def zero(cls) -> "Numeric":
        return cls._build("0")

    @classmethod
    def one(cls) -> "Numeric":
        return cls._build("1")

    def is_zero(self) -> bool:
        """Syntactic check only; ``0 + 0i`` is not recognised."""

        return self.text in ("0", "0.0")

    def is_one(self) -> bool:
        """Syntactic check only; ``1 + 0i`` is not recognised."""

        return self.text in ("1", "1.0")

    def is_const(self) -> bool:
        return parse_literal(self.text) is not None

    @classmethod
    def fold_sum(cls, values: Iterable["NumericLike"]) -> "Numeric":
        operands = [cls.of(value) for value in values]
        if not operands:
            return cls.zero()
        return reduce(lambda acc, value: acc + value, operands)

    @classmethod
    def fold_product(cls, values: Iterable["NumericLike"]) -> "Numeric":
        operands = [cls.of(value) for value in values]
        if not operands:
            return cls.one()
        return reduce(lambda acc, value: acc * value, operands)

    @classmethod
    def distance(cls, point: "PointLike", target: Any) -> "Numeric":
        return cls._build(f"Distance({Point.of(point).text}, {_object_text(target)})")

    @classmethod
    def complex(cls, real: "NumericLike", imaginary: "NumericLike") -> "Numeric":
        return cls._build(f"({cls.of(real).text}) + ({cls.of(imaginary).text})i")

    @classmethod
    def angle(cls, a: "PointLike", b: "PointLike", c: "PointLike") -> "Numeric":
        return cls._build(
            f"Angle({Point.of(a).text}, {Point.of(b).text}, {Point.of(c).text})"
        )

    @classmethod
    def angle_lines(cls, k: "LineLike", l: "LineLike") -> "Numeric":
        return cls._build(f"Angle({Line.of(k).text}, {Line.of(l).text})")

    @classmethod
    def atan2(cls, y: "NumericLike", x: "NumericLike") -> "Numeric":
        return cls._build(f"atan2({cls.of(y).text}, {cls.of(x).text})")

    def pow(self, exponent: "NumericLike") -> "Numeric":
        return Numeric._build(f"({self.text})^({Numeric.of(exponent).text})")

    def real(self) -> "Numeric":
        return Numeric._build(f"real({self.text})")

    def imaginary(self) -> "Numeric":
        return Numeric._build(f"imaginary({self.text})")

    def arg(self) -> "Numeric":
        return Numeric._build(f"arg({self.text})")

    def _infix(self, other: Any, op: str, *, reflected: bool = False) -> "Numeric":
        try:
            rhs = Numeric.of(other)
        except TypeError:
            return NotImplemented
        left, right = (rhs, self) if reflected else (self, rhs)
        return Numeric._build(f"({left.text}) {op} ({right.text})")

    def __add__(self, other: Any) -> "Numeric":
        return self._infix(other, "+")

    def __radd__(self, other: Any) -> "Numeric":
        return self._infix(other, "+", reflected=True)

    def __sub__(self, other: Any) -> "Numeric":
        return self._infix(other, "-")

    def __rsub__(self, other: Any) -> "Numeric":
        return self._infix(other, "-", reflected=True)

    def __mul__(self, other: Any) -> "Numeric":
        return self._infix(other, "*")

    def __rmul__(self, other: Any) -> "Numeric":
        return self._infix(other, "*", reflected=True)

    def __truediv__(self, other: Any) -> "Numeric":
        return self._infix(other, "/")

    def __rtruediv__(self, other: Any) -> "Numeric":
        return self._infix(other, "/", reflected=True)

    def __mod__(self, other: Any) -> "Numeric":
        try:
            rhs = Numeric.of(other)
        except TypeError:
            return NotImplemented
        return Numeric._build(f"Mod({self.text}, {rhs.text})")

    def __rmod__(self, other: Any) -> "Numeric":
        try:
            lhs = Numeric.of(other)
        except TypeError:
            return NotImplemented
        return lhs % self

    def __pow__(self, exponent: Any) -> "Numeric":
        try:
            return self.pow(exponent)
        except TypeError:
            return NotImplemented

    def __rpow__(self, base: Any) -> "Numeric":
        try:
            return Numeric.of(base).pow(self)
        except TypeError:
            return NotImplemented

    def __neg__(self) -> "Numeric":
        return Numeric._build(f"-({self.text})")

    def __eq__(self, other: object) -> bool:
        try:
            rhs = Numeric.of(other)
        except TypeError:
            return NotImplemented
        if self.text == rhs.text:
            return True
        left = parse_literal(self.text)
        right = parse_literal(rhs.text)
        if left is not None and right is not None:
            return left == right
        return False


class List(Handle):
    """A brace-wrapped list of homogeneous items."""

    kind = ElementType.LIST
    __slots__ = ("item_kind",)

    def __init__(self, expression: Expression, item_kind: Optional[ElementType] = None):
        super().__init__(expression)
        self.item_kind = item_kind

    @classmethod
    def of(cls, value: Any) -> "List":
        if isinstance(value, List):
            return value
        if isinstance(value, Var):
            if value.kind is not ElementType.LIST:
                raise TypeError(f"cannot use {value.kind.value} variable {value.label!r} as list")
            return cls(Expression(value.label), item_kind=value.item_kind)
        if isinstance(value, (str, bytes, Handle)) or not isinstance(value, Iterable):
            raise TypeError(f"cannot convert {value!r} to List")
        return cls.from_items(value)

    @classmethod
    def from_items(
        cls, items: Iterable[Any], item_kind: Optional[ElementType] = None
    ) -> "List":
        handles = [as_handle(item) for item in items]
        for handle in handles:
            if item_kind is None:
                item_kind = handle.kind
            elif handle.kind is not item_kind:
                raise TypeError(
                    f"list items must share one kind, got {handle.kind.value} "
                    f"among {item_kind.value}"
                )
        body = ", ".join(handle.text for handle in handles)
        return cls(Expression("{" + body + "}"), item_kind=item_kind)

    def _require_items(self, expected: ElementType, operation: str) -> None:
        if self.item_kind is not None and self.item_kind is not expected:
            raise TypeError(
                f"{operation} needs a list of {expected.value}, got {self.item_kind.value}"
            )

    def mean_x(self) -> Numeric:
        self._require_items(ElementType.POINT, "mean_x")
        return Numeric._build(f"MeanX({self.text})")

    def mean_y(self) -> Numeric:
        self._require_items(ElementType.POINT, "mean_y")
        return Numeric._build(f"MeanY({self.text})")

    def sum(self) -> Numeric:
        # The appended zero keeps Sum defined for an empty list.
        self._require_items(ElementType.NUMERIC, "sum")
        return Numeric._build(f"Sum(Append({self.text}, 0 + 0i))")

    def product(self) -> Numeric:
        self._require_items(ElementType.NUMERIC, "product")
        return Numeric._build(f"Product(Append({self.text}, 1 + 0i))")

    def __repr__(self) -> str:
        item = self.item_kind.value if self.item_kind is not None else "?"
        return f"List[{item}]({self.text!r})"


_HANDLE_TYPES: Dict[ElementType, Type[Handle]] = {
    ElementType.POINT: Point,
    ElementType.SEGMENT: Segment,
    ElementType.LINE: Line,
    ElementType.NUMERIC: Numeric,
    ElementType.CONIC: Conic,
    ElementType.RAY: Ray,
    ElementType.LIST: List,
}


def handle_type(kind: ElementType) -> Type[Handle]:
    return _HANDLE_TYPES[kind]


def as_handle(value: Any) -> Handle:
    """Resolve anything the algebra accepts as an operand into a typed handle."""

    if isinstance(value, Handle):
        return value
    if isinstance(value, Var):
        return value.handle()
    if is_real_literal(value):
        return Numeric.of(value)
    if isinstance(value, tuple) and len(value) == 2:
        return Point.of(value)
    raise TypeError(f"{value!r} is not a construction expression")


def _object_text(value: Any) -> str:
    handle = as_handle(value)
    if handle.kind not in OBJECT_KINDS:
        raise TypeError(f"{handle.kind.value} is not a geometric object")
    return handle.text


NumericLike = Union[Numeric, Var, float, int]
PointLike = Union[Point, Var, Tuple[Any, Any]]
LineLike = Union[Line, Var]
