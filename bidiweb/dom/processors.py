"""
Direction processors
====================

A processor knows how to "fix" an element so it reads RTL or LTR. There are
different ways of doing that:

- set the ``direction`` (and optionally ``text-align``) inline style;
  alignment is sometimes part of the design and unrelated to direction, so
  it can be left alone;
- add a css class, when RTL paragraphs need more than a direction (another
  font, size or color) and the stylesheet takes care of it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Mapping, Optional

from ..core.config import DEFAULT_CLASSES, ProcessorMode, ProcessorSettings
from ..core.types import Direction
from .element import Element


class DirectionProcessor(ABC):
    """Applies a direction verdict to an element."""

    @abstractmethod
    def make_rtl(self, element: Element) -> None:
        """Make `element` read right-to-left."""

    @abstractmethod
    def make_ltr(self, element: Element) -> None:
        """Make `element` read left-to-right."""

    @abstractmethod
    def applied_direction(self, element: Element) -> Optional[Direction]:
        """Direction this processor has set on `element`, if any."""

    @abstractmethod
    def clear(self, element: Element) -> None:
        """Remove whatever this processor set on `element`."""

    def apply(self, element: Element, direction: Direction) -> bool:
        """Apply `direction`; NEUTRAL means do nothing. Returns True if applied."""
        if direction is Direction.RTL:
            self.make_rtl(element)
            return True
        if direction is Direction.LTR:
            self.make_ltr(element)
            return True
        return False


class CssClassProcessor(DirectionProcessor):
    """Adds the `rtl` or `ltr` class name from `classes`."""

    def __init__(self, classes: Optional[Mapping[str, str]] = None):
        classes = dict(classes if classes is not None else DEFAULT_CLASSES)
        missing = [key for key in ("rtl", "ltr") if not classes.get(key)]
        if missing:
            raise ValueError(f"classes mapping is missing: {', '.join(missing)}")
        self.classes: Dict[str, str] = classes

    def make_rtl(self, element: Element) -> None:
        element.remove_class(self.classes["ltr"])
        element.add_class(self.classes["rtl"])

    def make_ltr(self, element: Element) -> None:
        element.remove_class(self.classes["rtl"])
        element.add_class(self.classes["ltr"])

    def applied_direction(self, element: Element) -> Optional[Direction]:
        if element.has_class(self.classes["rtl"]):
            return Direction.RTL
        if element.has_class(self.classes["ltr"]):
            return Direction.LTR
        return None

    def clear(self, element: Element) -> None:
        element.remove_class(self.classes["rtl"])
        element.remove_class(self.classes["ltr"])


class InlineStyleProcessor(DirectionProcessor):
    """Sets `direction`, and `text-align` when `align` is True."""

    ALIGNMENT = {Direction.RTL: "right", Direction.LTR: "left"}

    def __init__(self, align: bool = True):
        self.align = align

    def _set(self, element: Element, direction: Direction) -> None:
        element.set_style("direction", direction.css_value)
        if self.align:
            element.set_style("text-align", self.ALIGNMENT[direction])

    def make_rtl(self, element: Element) -> None:
        self._set(element, Direction.RTL)

    def make_ltr(self, element: Element) -> None:
        self._set(element, Direction.LTR)

    def applied_direction(self, element: Element) -> Optional[Direction]:
        value = (element.get_style("direction") or "").strip().lower()
        if value == "rtl":
            return Direction.RTL
        if value == "ltr":
            return Direction.LTR
        return None

    def clear(self, element: Element) -> None:
        direction = self.applied_direction(element)
        element.remove_style("direction")
        # Only drop an alignment we could have written ourselves
        if (
            self.align
            and direction is not None
            and element.get_style("text-align") == self.ALIGNMENT[direction]
        ):
            element.remove_style("text-align")


PROCESSORS = {
    ProcessorMode.css: CssClassProcessor,
    ProcessorMode.style: InlineStyleProcessor,
}


def build_processor(settings: Optional[ProcessorSettings] = None) -> DirectionProcessor:
    """Processor matching `settings.mode`."""
    settings = settings or ProcessorSettings()
    if settings.mode is ProcessorMode.css:
        return CssClassProcessor(settings.classes)
    return InlineStyleProcessor(settings.align)


def apply_direction(
    element: Element, direction: Direction, processor: DirectionProcessor
) -> bool:
    return processor.apply(element, direction)


__all__ = [
    "DirectionProcessor",
    "CssClassProcessor",
    "InlineStyleProcessor",
    "PROCESSORS",
    "build_processor",
    "apply_direction",
]
