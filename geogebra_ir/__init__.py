from .raw import (
    AngleUnit,
    Command,
    Construction,
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
from .errors import (
    ArchiveError,
    DocumentParseError,
    GeogebraError,
    IndexedAttributeError,
    SerializationError,
)
from .style import BOUND_STYLE, CURVE_STYLE, DEFAULT_STYLE, FREE_STYLE, LINE_STYLE, Style
from .expr import (
    ADDABLE_KINDS,
    OBJECT_KINDS,
    Conic,
    Expression,
    Line,
    List,
    Numeric,
    Point,
    Ray,
    Segment,
    Var,
    as_handle,
)
from .config import WorkspaceConfig, get_workspace_config, set_workspace_config
from .xml_io import (
    decode_indexed,
    encode_indexed,
    parse_document,
    parse_kernel,
    render_document,
    render_kernel,
)
from .assembly import ENTRY_NAME, XML_HEADER, finalize, new_document, read_document
from .workspace import Workspace
from .printer import format_item, print_construction
from .demo import build_demo

__all__ = [
    'AngleUnit',
    'Command',
    'Construction',
    'Coords',
    'Element',
    'ElementType',
    'ExpressionRecord',
    'Geogebra',
    'Kernel',
    'KernelDocument',
    'LabelMode',
    'LineStyle',
    'LineType',
    'ObjColor',
    'Show',
    'ArchiveError',
    'DocumentParseError',
    'GeogebraError',
    'IndexedAttributeError',
    'SerializationError',
    'Style',
    'BOUND_STYLE',
    'CURVE_STYLE',
    'DEFAULT_STYLE',
    'FREE_STYLE',
    'LINE_STYLE',
    'ADDABLE_KINDS',
    'OBJECT_KINDS',
    'Conic',
    'Expression',
    'Line',
    'List',
    'Numeric',
    'Point',
    'Ray',
    'Segment',
    'Var',
    'as_handle',
    'WorkspaceConfig',
    'get_workspace_config',
    'set_workspace_config',
    'decode_indexed',
    'encode_indexed',
    'parse_document',
    'parse_kernel',
    'render_document',
    'render_kernel',
    'ENTRY_NAME',
    'XML_HEADER',
    'finalize',
    'new_document',
    'read_document',
    'Workspace',
    'format_item',
    'print_construction',
    'build_demo',
]
