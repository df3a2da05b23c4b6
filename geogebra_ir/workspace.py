"""Label allocation and registration of typed handles into a construction."""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any, BinaryIO, Optional, Sequence, Union

import numpy as np

from .assembly import document_text, finalize, new_document
from .config import WorkspaceConfig, get_workspace_config
from .expr import ADDABLE_KINDS, Handle, List, Point, Var, as_handle
from .raw import Coords, ExpressionRecord, Geogebra, Show

logger = logging.getLogger(__name__)


def _position(position: Union[Sequence[float], np.ndarray]) -> Coords:
    values = np.asarray(position, dtype=float)
    if values.shape != (2,):
        raise ValueError(f"position hint must be an (x, y) pair, got shape {values.shape}")
    return Coords.xy(float(values[0]), float(values[1]))


class Workspace:
    """A GeoGebra workspace being assembled.

    Handles are not retained after registration; only their label survives in
    the returned :class:`Var`, so restyling a handle afterwards has no effect
    on the document.
    """

    def __init__(self, config: Optional[WorkspaceConfig] = None):
        self.config = copy.deepcopy(config) if config is not None else get_workspace_config()
        self._document = new_document()
        self._next_id = 0

    @classmethod
    def open(cls, config: Optional[WorkspaceConfig] = None) -> "Workspace":
        return cls(config)

    @property
    def document(self) -> Geogebra:
        return self._document

    def _next_label(self) -> str:
        construction = self._document.construction
        while True:
            label = f"{self.config.label_prefix}{self._next_id}"
            self._next_id += 1
            if not construction.has_label(label):
                return label

    def _register(
        self,
        handle: Handle,
        *,
        caption: Optional[str],
        coords: Optional[Coords] = None,
        hidden: bool = False,
    ) -> Var:
        label = self._next_label()
        element = handle.style.to_element(handle.kind, label, caption=caption, coords=coords)
        if hidden:
            element.show = Show.none()

        items = self._document.construction.items
        items.append(ExpressionRecord(type=handle.kind, label=label, exp=handle.text))
        items.append(element)
        logger.debug("Registered %s %s = %s", handle.kind.value, label, handle.text)

        item_kind = handle.item_kind if isinstance(handle, List) else None
        return Var(label, handle.kind, item_kind)

    def add(self, expr: Any, caption: object) -> Var:
        """Register a displayed, captioned element (point, line, conic or segment)."""

        handle = as_handle(expr)
        if handle.kind not in ADDABLE_KINDS:
            raise TypeError(
                f"{handle.kind.value} cannot be added as a construction element; use var()"
            )
        return self._register(handle, caption=str(caption))

    def add_point(
        self,
        point: Any,
        caption: object,
        position: Union[Sequence[float], np.ndarray],
    ) -> Var:
        """Register a point with a position hint for its initial coordinates."""

        handle = Point.of(point)
        return self._register(handle, caption=str(caption), coords=_position(position))

    def var(self, expr: Any) -> Var:
        """Register ``expr`` as a hidden auxiliary variable of any kind."""

        return self._register(as_handle(expr), caption=None, hidden=True)

    def to_xml(self) -> str:
        return document_text(self._document, pretty_print=self.config.pretty_print)

    def write(self, stream: BinaryIO) -> None:
        finalize(
            self._document,
            stream,
            compression=self.config.compression,
            pretty_print=self.config.pretty_print,
        )

    def save(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Saving workspace to %s", path)
        with open(path, "wb") as fout:
            self.write(fout)
        return path
