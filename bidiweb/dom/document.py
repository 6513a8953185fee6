"""
Automatically set the direction of paragraphs in RTL languages
==============================================================

The simplest way to use this module::

    from bs4 import BeautifulSoup
    from bidiweb.dom import document

    soup = BeautifulSoup(html, "html.parser")
    document.style(".content *", root=soup)

Every element matching the selector has its text inspected, and its
``direction`` and ``text-align`` styles are set according to whether the text
is RTL or LTR. `style` is a convenience over `process_style`, which is itself
a convenience over `process`; `process` takes any `DirectionProcessor`.

For markup that is not in a document yet, `html_style` and `html_css` take an
HTML string and return the processed HTML.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Optional, Tuple, Union

from bs4 import BeautifulSoup, Tag

from ..core.config import BidiSettings
from ..core.types import Direction
from ..i18n.estimator import DirectionEstimator
from ..metrics.instrumentation import MetricsCollector
from ..utils.log_safety import create_safe_logger_wrapper, preview_text
from .element import Element
from .processors import (
    CssClassProcessor,
    DirectionProcessor,
    InlineStyleProcessor,
    build_processor,
)
from .result import ElementReport, ProcessResult

logger = create_safe_logger_wrapper(logging.getLogger(__name__))

Query = Union[str, Tag, Element, Iterable[Union[Tag, Element]]]


def _as_element(node: Union[Tag, Element]) -> Element:
    return node if isinstance(node, Element) else Element(node)


def select_elements(query: Query, root: Optional[Tag] = None) -> List[Element]:
    """
    Resolve `query` into elements.

    `query` may be a css selector (run against `root`), a single tag or
    element, or an iterable of tags/elements.
    """
    if isinstance(query, str):
        if root is None:
            raise TypeError("a root tag is required to run a css selector")
        return [Element(tag) for tag in root.select(query)]
    if isinstance(query, (Tag, Element)):
        return [_as_element(query)]
    return [_as_element(node) for node in query]


def process_elements(
    elements: Iterable[Union[Tag, Element]],
    processor: DirectionProcessor,
    estimator: Optional[DirectionEstimator] = None,
    collector: Optional[MetricsCollector] = None,
    preview_chars: int = 40,
) -> ProcessResult:
    """
    Fix the directionality of `elements`, in order, using `processor`.

    Neutral elements are left untouched.
    """
    estimator = estimator or DirectionEstimator()
    result = ProcessResult()

    for index, node in enumerate(elements):
        element = _as_element(node)
        text = element.text
        analysis = estimator.analyze(text)
        applied = processor.apply(element, analysis.direction)
        preview = preview_text(text, preview_chars)

        result.elements.append(element)
        result.reports.append(
            ElementReport(
                index=index,
                tag=element.name,
                direction=analysis.direction,
                applied=applied,
                text_preview=preview,
                reason=analysis.reason,
            )
        )
        if collector is not None:
            collector.log_decision(index, element.name, analysis, applied, preview)

    counts = result.counts()
    logger.info(
        f"PROCESS: elements={len(result)} rtl={counts['RTL']} "
        f"ltr={counts['LTR']} neutral={counts['NEUTRAL']}"
    )
    return result


def process(
    query: Query,
    processor: DirectionProcessor,
    root: Optional[Tag] = None,
    estimator: Optional[DirectionEstimator] = None,
    collector: Optional[MetricsCollector] = None,
    prune: bool = False,
    preview_chars: int = 40,
) -> ProcessResult:
    """
    Fix the directionality of elements matching `query` using `processor`.

    Returns:
        ProcessResult with the processed elements and one report each
    """
    elements = select_elements(query, root)
    result = process_elements(
        elements, processor, estimator, collector, preview_chars
    )
    if prune:
        result.pruned = prune_redundant_overrides(result.elements, processor)
        if collector is not None:
            collector.log_pruning(result.pruned)
    return result


def process_css(
    query: Query,
    classes: Mapping[str, str],
    root: Optional[Tag] = None,
    **kwargs,
) -> ProcessResult:
    """
    Example::

        process_css(".content *", {"rtl": "rtl", "ltr": "ltr"}, root=soup)
    """
    return process(query, CssClassProcessor(classes), root, **kwargs)


def process_style(
    query: Query, align: bool, root: Optional[Tag] = None, **kwargs
) -> ProcessResult:
    """
    Example::

        # fix direction but not text-align
        process_style(".headers *", False, root=soup)

        # fix both direction and text-align
        process_style(".content *", True, root=soup)
    """
    return process(query, InlineStyleProcessor(align), root, **kwargs)


def style(query: Query, root: Optional[Tag] = None, **kwargs) -> ProcessResult:
    """Fix the given elements with inline direction and alignment."""
    return process_style(query, True, root, **kwargs)


def css(query: Query, root: Optional[Tag] = None, **kwargs) -> ProcessResult:
    """Like `style`, but apply the css classes 'rtl' or 'ltr' instead."""
    return process_css(query, {"rtl": "rtl", "ltr": "ltr"}, root, **kwargs)


def prune_redundant_overrides(
    elements: Iterable[Union[Tag, Element]], processor: DirectionProcessor
) -> int:
    """
    Remove overrides that repeat what the element already inherits.

    An element's override is dropped when its nearest ancestor carrying an
    override (as seen by `processor`) applies the same direction. Elements
    without such an ancestor keep theirs, since the page default is unknown.

    Returns:
        Number of overrides removed
    """
    removed = 0
    for node in elements:
        element = _as_element(node)
        own = processor.applied_direction(element)
        if own is None:
            continue
        inherited = _inherited_direction(element, processor)
        if inherited is own:
            processor.clear(element)
            removed += 1
    logger.debug(f"PRUNE: removed={removed}")
    return removed


def _inherited_direction(
    element: Element, processor: DirectionProcessor
) -> Optional[Direction]:
    for ancestor in element.ancestors():
        direction = processor.applied_direction(ancestor)
        if direction is not None:
            return direction
    return None


# HTML string helpers


def html_to_element(html: str) -> Tag:
    """Parse `html` and return it wrapped in a container <div>."""
    soup = BeautifulSoup("", "html.parser")
    container = soup.new_tag("div")
    fragment = BeautifulSoup(html or "", "html.parser")
    for node in list(fragment.contents):
        container.append(node.extract())
    soup.append(container)
    return container


def _process_html(html: str, processor: DirectionProcessor, **kwargs) -> str:
    container = html_to_element(html)
    process(container.find_all(True), processor, **kwargs)
    return container.decode_contents()


def html_css(
    html: str, classes: Optional[Mapping[str, str]] = None, **kwargs
) -> str:
    """
    Process html before it is inserted into a document.

    Only text inside tags is inspected; top-level text is kept as is.

    Returns:
        The html with rtl/ltr classes added to its elements
    """
    return _process_html(html, CssClassProcessor(classes), **kwargs)


def html_style(html: str, align: bool = True, **kwargs) -> str:
    """Same as `html_css`, but with inline direction (and alignment) styles."""
    return _process_html(html, InlineStyleProcessor(align), **kwargs)


def process_html(
    html: str,
    settings: Optional[BidiSettings] = None,
    selector: str = "*",
    collector: Optional[MetricsCollector] = None,
) -> Tuple[str, ProcessResult]:
    """
    Process an html fragment entirely from `settings`.

    Returns:
        (processed html, ProcessResult)
    """
    settings = settings or BidiSettings()
    container = html_to_element(html)
    result = process(
        selector,
        build_processor(settings.processor),
        root=container,
        estimator=DirectionEstimator(settings.estimation),
        collector=collector,
        prune=settings.processor.prune,
        preview_chars=settings.log_preview_chars,
    )
    return container.decode_contents(), result


__all__ = [
    "select_elements",
    "process_elements",
    "process",
    "process_css",
    "process_style",
    "style",
    "css",
    "prune_redundant_overrides",
    "html_to_element",
    "html_css",
    "html_style",
    "process_html",
]
