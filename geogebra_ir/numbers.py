from __future__ import annotations

import numbers
from typing import Optional

import numpy as np


def is_real_literal(value: object) -> bool:
    """True for ints, floats and numpy scalars; ``bool`` is rejected."""

    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Real)


def format_number(value: float) -> str:
    """Render ``value`` positionally with the shortest round-tripping digits.

    ``1.0`` becomes ``"1"`` and ``1e-7`` becomes ``"0.0000001"``; the GeoGebra
    input bar does not need exponent notation this way.
    """

    try:
        number = float(value)
    except OverflowError as exc:
        raise ValueError(f"{value!r} is out of floating-point range") from exc
    return np.format_float_positional(number, trim="-")


def parse_literal(text: str) -> Optional[float]:
    """Parse ``text`` as a single floating-point literal, or return ``None``."""

    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None
