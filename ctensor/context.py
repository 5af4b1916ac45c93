"""Evaluation-mode switch: while active, operations record no gradients."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

_eval_depth = 0


def begin_eval() -> None:
    """Enter evaluation mode. Calls nest."""
    global _eval_depth
    _eval_depth += 1


def end_eval() -> None:
    """Leave one level of evaluation mode."""
    global _eval_depth
    if _eval_depth <= 0:
        raise RuntimeError("end_eval called outside evaluation mode")
    _eval_depth -= 1


def is_eval() -> bool:
    """Return True while at least one evaluation level is active."""
    return _eval_depth > 0


@contextmanager
def eval_mode() -> Iterator[None]:
    """Run the enclosed block in evaluation mode."""
    begin_eval()
    try:
        yield
    finally:
        end_eval()