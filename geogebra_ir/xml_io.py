"""Render raw documents to ``geogebra.xml`` text and parse them back."""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Mapping, Optional, Sequence, Union

from lxml import etree

from .errors import DocumentParseError, IndexedAttributeError, SerializationError
from .logging_utils import apply_debug_logging
from .numbers import format_number
from .raw import (
    AngleUnit,
    Command,
    Construction,
    ConstructionItem,
    Coords,
    Element,
    ElementType,
    ExpressionRecord,
    Geogebra,
    Kernel,
    KernelDocument,
    LabelMode,
    LineStyle,
    LineType,
    ObjColor,
    Show,
)

logger = logging.getLogger(__name__)

_INDEX_KEY_RE = re.compile(r"a(0|[1-9][0-9]*)")


def encode_indexed(values: Sequence[str]) -> Dict[str, str]:
    """Encode positional values as ``{"a0": ..., "a1": ...}``."""

    return {f"a{idx}": str(value) for idx, value in enumerate(values)}


def decode_indexed(attrs: Mapping[str, str]) -> List[str]:
    """Rebuild the positional list from an ``a<n>`` attribute map.

    Keys must be exactly ``a0`` .. ``a<n-1>``; anything else raises
    :class:`IndexedAttributeError` instead of guessing an order.
    """

    indexed: Dict[int, str] = {}
    for key, value in attrs.items():
        match = _INDEX_KEY_RE.fullmatch(key)
        if match is None:
            raise IndexedAttributeError(f"unexpected indexed attribute {key!r}")
        indexed[int(match.group(1))] = value
    missing = [idx for idx in range(len(indexed)) if idx not in indexed]
    if missing:
        raise IndexedAttributeError(
            f"indexed attributes are not sequential: missing a{missing[0]} "
            f"in {sorted(attrs)}"
        )
    return [indexed[idx] for idx in range(len(indexed))]


def _bool(value: bool) -> str:
    return "true" if value else "false"


def _attrs(**values: Optional[object]) -> Dict[str, str]:
    return {key: str(value) for key, value in values.items() if value is not None}


def _element_node(parent: etree._Element, element: Element) -> None:
    node = etree.SubElement(
        parent, "element", attrib={"type": element.type.value, "label": element.label}
    )
    if element.caption is not None:
        etree.SubElement(node, "caption", attrib={"val": element.caption})
    etree.SubElement(node, "labelMode", attrib={"val": str(int(element.label_mode))})
    etree.SubElement(
        node,
        "show",
        attrib={"object": _bool(element.show.object), "label": _bool(element.show.label)},
    )
    if element.coords is not None:
        etree.SubElement(
            node,
            "coords",
            attrib={
                "x": format_number(element.coords.x),
                "y": format_number(element.coords.y),
                "z": format_number(element.coords.z),
            },
        )
    if element.line_style is not None:
        style = element.line_style
        etree.SubElement(
            node,
            "lineStyle",
            attrib=_attrs(
                thickness=style.thickness,
                type=int(style.type) if style.type is not None else None,
                opacity=style.opacity,
            ),
        )
    if element.obj_color is not None:
        color = element.obj_color
        etree.SubElement(
            node, "objColor", attrib={"r": str(color.r), "g": str(color.g), "b": str(color.b)}
        )


def _item_node(parent: etree._Element, item: ConstructionItem) -> None:
    if isinstance(item, ExpressionRecord):
        etree.SubElement(
            parent,
            "expression",
            attrib={"type": item.type.value, "label": item.label, "exp": item.exp},
        )
    elif isinstance(item, Element):
        _element_node(parent, item)
    elif isinstance(item, Command):
        node = etree.SubElement(parent, "command", attrib={"name": item.name})
        etree.SubElement(node, "input", attrib=encode_indexed(item.inputs))
        etree.SubElement(node, "output", attrib=encode_indexed(item.outputs))
    else:
        raise SerializationError(f"unknown construction item {item!r}")


def document_to_tree(document: Geogebra) -> etree._Element:
    try:
        root = etree.Element(
            "geogebra",
            attrib={"format": document.format, "app": document.app, "subApp": document.sub_app},
        )
        construction = etree.SubElement(root, "construction")
        for item in document.construction.items:
            _item_node(construction, item)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"cannot build document tree: {exc}") from exc
    return root


def render_document(document: Geogebra, *, pretty_print: bool = False) -> str:
    """Serialize ``document`` without the XML declaration."""

    root = document_to_tree(document)
    try:
        return etree.tostring(root, encoding="unicode", pretty_print=pretty_print)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"cannot render document: {exc}") from exc


def _parse_root(data: Union[str, bytes], expected: str) -> etree._Element:
    if isinstance(data, str):
        data = data.encode("utf-8")
    parser = etree.XMLParser(remove_blank_text=True)
    try:
        root = etree.fromstring(data, parser)
    except etree.XMLSyntaxError as exc:
        raise DocumentParseError(f"malformed XML: {exc}") from exc
    if root.tag != expected:
        raise DocumentParseError(f"expected <{expected}> root, got <{root.tag}>")
    return root


def _children(node: etree._Element) -> List[etree._Element]:
    return [child for child in node if isinstance(child.tag, str)]


def _require(node: etree._Element, name: str) -> str:
    value = node.get(name)
    if value is None:
        raise DocumentParseError(f"<{node.tag}> is missing attribute {name!r}")
    return value


def _parse_bool(node: etree._Element, name: str) -> bool:
    value = _require(node, name)
    if value not in ("true", "false"):
        raise DocumentParseError(f"<{node.tag} {name}={value!r}> is not a boolean")
    return value == "true"


def _optional_int(node: etree._Element, name: str) -> Optional[int]:
    value = node.get(name)
    return int(value) if value is not None else None


def _parse_element(node: etree._Element) -> Element:
    element = Element(type=ElementType(_require(node, "type")), label=_require(node, "label"))
    for child in _children(node):
        tag = child.tag
        if tag == "caption":
            element.caption = _require(child, "val")
        elif tag == "labelMode":
            element.label_mode = LabelMode(int(_require(child, "val")))
        elif tag == "show":
            element.show = Show(object=_parse_bool(child, "object"), label=_parse_bool(child, "label"))
        elif tag == "coords":
            element.coords = Coords(
                float(_require(child, "x")),
                float(_require(child, "y")),
                float(_require(child, "z")),
            )
        elif tag == "lineStyle":
            line_type = _optional_int(child, "type")
            element.line_style = LineStyle(
                thickness=_optional_int(child, "thickness"),
                type=LineType(line_type) if line_type is not None else None,
                opacity=_optional_int(child, "opacity"),
            )
        elif tag == "objColor":
            element.obj_color = ObjColor(
                int(_require(child, "r")), int(_require(child, "g")), int(_require(child, "b"))
            )
        else:
            raise DocumentParseError(f"unsupported element field <{tag}>")
    return element


def _parse_command(node: etree._Element) -> Command:
    command = Command(name=_require(node, "name"))
    for child in _children(node):
        if child.tag == "input":
            command.inputs = decode_indexed(dict(child.attrib))
        elif child.tag == "output":
            command.outputs = decode_indexed(dict(child.attrib))
        else:
            raise DocumentParseError(f"unsupported command field <{child.tag}>")
    return command


def parse_document(data: Union[str, bytes]) -> Geogebra:
    """Parse ``geogebra.xml`` content produced by :func:`render_document`."""

    root = _parse_root(data, "geogebra")
    construction = Construction()
    try:
        document = Geogebra(
            format=_require(root, "format"),
            app=_require(root, "app"),
            sub_app=_require(root, "subApp"),
            construction=construction,
        )
        for section in _children(root):
            if section.tag != "construction":
                continue
            for child in _children(section):
                if child.tag == "expression":
                    construction.items.append(
                        ExpressionRecord(
                            type=ElementType(_require(child, "type")),
                            label=_require(child, "label"),
                            exp=_require(child, "exp"),
                        )
                    )
                elif child.tag == "element":
                    construction.items.append(_parse_element(child))
                elif child.tag == "command":
                    construction.items.append(_parse_command(child))
                else:
                    raise DocumentParseError(f"unsupported construction item <{child.tag}>")
    except ValueError as exc:
        raise DocumentParseError(str(exc)) from exc
    return document


def render_kernel(document: KernelDocument) -> str:
    root = etree.Element("geogebra")
    kernel = etree.SubElement(root, "kernel")
    etree.SubElement(kernel, "digits", attrib={"val": str(document.kernel.digits)})
    etree.SubElement(kernel, "angleUnit", attrib={"val": document.kernel.angle_unit.value})
    etree.SubElement(kernel, "coordStyle", attrib={"val": str(document.kernel.coord_style)})
    return etree.tostring(root, encoding="unicode")


def parse_kernel(data: Union[str, bytes]) -> KernelDocument:
    root = _parse_root(data, "geogebra")
    kernel = root.find("kernel")
    if kernel is None:
        raise DocumentParseError("document has no <kernel> block")
    values: Dict[str, str] = {}
    for name in ("digits", "angleUnit", "coordStyle"):
        node = kernel.find(name)
        if node is None:
            raise DocumentParseError(f"<kernel> is missing <{name}>")
        values[name] = _require(node, "val")
    try:
        return KernelDocument(
            Kernel(
                digits=int(values["digits"]),
                angle_unit=AngleUnit(values["angleUnit"]),
                coord_style=int(values["coordStyle"]),
            )
        )
    except ValueError as exc:
        raise DocumentParseError(str(exc)) from exc


apply_debug_logging(globals(), logger=logger, skip={"encode_indexed", "decode_indexed"})
