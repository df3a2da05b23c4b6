"""Document assembly and ``.ggb`` container packaging."""

from __future__ import annotations

import logging
import zipfile
from typing import BinaryIO

from .errors import ArchiveError
from .logging_utils import apply_debug_logging
from .raw import APP, FORMAT, SUB_APP, Construction, Geogebra
from .xml_io import parse_document, render_document

logger = logging.getLogger(__name__)

XML_HEADER = '<?xml version="1.0" encoding="utf-8" ?>'
ENTRY_NAME = "geogebra.xml"


def new_document() -> Geogebra:
    return Geogebra(format=FORMAT, app=APP, sub_app=SUB_APP, construction=Construction())


def document_text(document: Geogebra, *, pretty_print: bool = False) -> str:
    """Declaration header followed by the rendered document."""

    return XML_HEADER + render_document(document, pretty_print=pretty_print)


def finalize(
    document: Geogebra,
    stream: BinaryIO,
    *,
    compression: int = zipfile.ZIP_DEFLATED,
    pretty_print: bool = False,
) -> None:
    """Write ``document`` as the single ``geogebra.xml`` entry of a zip container.

    Rendering happens before the container is opened, so a
    :class:`~geogebra_ir.errors.SerializationError` leaves ``stream`` untouched.
    Failures of the sink are raised as :class:`ArchiveError` and not retried.
    """

    payload = document_text(document, pretty_print=pretty_print).encode("utf-8")
    try:
        with zipfile.ZipFile(stream, "w", compression) as archive:
            archive.writestr(ENTRY_NAME, payload)
    except OSError as exc:
        raise ArchiveError(f"cannot write {ENTRY_NAME} container: {exc}") from exc
    logger.info(
        "Wrote %s (%d bytes, %d construction items)",
        ENTRY_NAME,
        len(payload),
        len(document.construction.items),
    )


def read_document(stream: BinaryIO) -> Geogebra:
    """Read back the ``geogebra.xml`` entry of a container written by :func:`finalize`."""

    try:
        with zipfile.ZipFile(stream, "r") as archive:
            payload = archive.read(ENTRY_NAME)
    except KeyError as exc:
        raise ArchiveError(f"container has no {ENTRY_NAME} entry") from exc
    except (OSError, zipfile.BadZipFile) as exc:
        raise ArchiveError(f"cannot read container: {exc}") from exc
    return parse_document(payload)


apply_debug_logging(globals(), logger=logger)
