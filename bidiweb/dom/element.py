"""Element adapter over BeautifulSoup tags."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional

from bs4 import BeautifulSoup, Tag


def split_declarations(style: str) -> List[str]:
    """Split on `;` outside of quotes and parentheses, e.g. `url(data:...;base64,...)`."""
    chunks: List[str] = []
    current: List[str] = []
    depth = 0
    quote = None
    for char in style:
        if quote:
            if char == quote:
                quote = None
        elif char in "\"'":
            quote = char
        elif char == "(":
            depth += 1
        elif char == ")" and depth:
            depth -= 1
        elif char == ";" and not depth:
            chunks.append("".join(current))
            current = []
            continue
        current.append(char)
    chunks.append("".join(current))
    return chunks


def parse_style(style: Optional[str]) -> Dict[str, str]:
    """Parse an inline style attribute into ordered declarations."""
    declarations: Dict[str, str] = {}
    for chunk in split_declarations(style or ""):
        name, sep, value = chunk.partition(":")
        name = name.strip().lower()
        if sep and name:
            declarations[name] = value.strip()
    return declarations


def format_style(declarations: Dict[str, str]) -> str:
    return "; ".join(f"{name}: {value}" for name, value in declarations.items())


class Element:
    """
    Document element seen by the processors.

    Wraps a `bs4.Tag` and exposes the text to estimate plus the two places a
    direction can be written to: the class list and the inline style.
    """

    def __init__(self, tag: Tag):
        self.tag = tag

    def __repr__(self) -> str:
        return f"Element(<{self.name}>)"

    def __eq__(self, other) -> bool:
        return isinstance(other, Element) and other.tag is self.tag

    def __hash__(self) -> int:
        return id(self.tag)

    @property
    def name(self) -> str:
        return self.tag.name or ""

    @property
    def text(self) -> str:
        """Text content, then form value, then placeholder; never None."""
        return (
            self.tag.get_text()
            or self.tag.get("value")
            or self.tag.get("placeholder")
            or ""
        )

    @property
    def parent(self) -> Optional["Element"]:
        parent = self.tag.parent
        if parent is None or isinstance(parent, BeautifulSoup):
            return None
        return Element(parent)

    def ancestors(self) -> Iterator["Element"]:
        parent = self.parent
        while parent is not None:
            yield parent
            parent = parent.parent

    # Classes

    @property
    def classes(self) -> List[str]:
        value = self.tag.get("class") or []
        if isinstance(value, str):
            value = value.split()
        return list(value)

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def add_class(self, name: str):
        classes = self.classes
        if name not in classes:
            classes.append(name)
            self.tag["class"] = classes

    def remove_class(self, name: str):
        classes = [c for c in self.classes if c != name]
        if classes:
            self.tag["class"] = classes
        elif self.tag.has_attr("class"):
            del self.tag["class"]

    # Inline style

    @property
    def style(self) -> Dict[str, str]:
        return parse_style(self.tag.get("style"))

    def get_style(self, name: str) -> Optional[str]:
        return self.style.get(name.lower())

    def set_style(self, name: str, value: str):
        declarations = self.style
        declarations[name.lower()] = value
        self.tag["style"] = format_style(declarations)

    def remove_style(self, name: str):
        declarations = self.style
        declarations.pop(name.lower(), None)
        if declarations:
            self.tag["style"] = format_style(declarations)
        elif self.tag.has_attr("style"):
            del self.tag["style"]
