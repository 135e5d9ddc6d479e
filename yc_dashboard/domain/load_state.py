"""
yc_dashboard/domain/load_state.py

Fetch-and-render state of one dashboard view.

A view is always in exactly one of three states, so combinations such as
"loading with an error" cannot be expressed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Loading:
    """A fetch is in flight."""


@dataclass(frozen=True)
class Failed:
    """The fetch failed; ``reason`` is safe to show to a user."""

    reason: str


@dataclass(frozen=True)
class Ready(Generic[T]):
    """The fetch succeeded and ``data`` is ready to render."""

    data: T


LoadState = Union[Loading, Failed, Ready[Any]]
