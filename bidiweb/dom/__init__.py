"""
Applying direction verdicts to document elements
================================================

Elements are BeautifulSoup tags seen through `Element`; processors write the
verdict as a css class or as inline styles.
"""

from .element import Element, format_style, parse_style
from .processors import (
    CssClassProcessor,
    DirectionProcessor,
    InlineStyleProcessor,
    apply_direction,
    build_processor,
)
from .result import ElementReport, ProcessResult
from .document import (
    css,
    html_css,
    html_style,
    html_to_element,
    process,
    process_css,
    process_elements,
    process_html,
    process_style,
    prune_redundant_overrides,
    select_elements,
    style,
)

__all__ = [
    "Element",
    "parse_style",
    "format_style",
    "DirectionProcessor",
    "CssClassProcessor",
    "InlineStyleProcessor",
    "apply_direction",
    "build_processor",
    "ElementReport",
    "ProcessResult",
    "css",
    "html_css",
    "html_style",
    "html_to_element",
    "process",
    "process_css",
    "process_elements",
    "process_html",
    "process_style",
    "prune_redundant_overrides",
    "select_elements",
    "style",
]
