"""Shared helpers for SVG output encoding."""

import re
from functools import lru_cache

_WHITESPACE_RUN = re.compile(r"\s{2,}")
_INTER_TAG_WHITESPACE = re.compile(r">\s+<")


@lru_cache(maxsize=8192)
def _tl_fixed(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    if text.startswith("-") and float(text) == 0:
        return text[1:]
    return text


def _tl_num(value: float) -> str:
    if isinstance(value, int):
        return str(value)
    if abs(value - round(value)) < 1e-9:
        return str(int(round(value)))
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return text or "0"


def _tl_join(values: tuple[float, ...], precision: int) -> str:
    return ";".join(_tl_fixed(value, precision) for value in values)


def _tl_minify(svg: str) -> str:
    """Collapse whitespace runs and strip whitespace between tags."""
    text = _WHITESPACE_RUN.sub(" ", svg)
    text = _INTER_TAG_WHITESPACE.sub("><", text)
    return text.replace("\n", "")
