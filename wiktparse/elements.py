"""Element tree produced by the wikitext parser."""

from __future__ import annotations

import enum
from typing import Any, Optional


class WikiVisitor:
    """Base visitor over wiki elements.

    Every specific visit method falls back to :meth:`visit_element`, which
    walks into the children of container elements. A subclass only needs to
    override the cases it cares about.
    """

    def visit_element(self, element: "WikiElement") -> Any:
        """Visit the children of a container; return their results in order.

        Leaf elements yield ``None``.
        """
        if isinstance(element, ContainerElement):
            return [child.accept(self) for child in element.children]
        return None

    def visit_text(self, element: "TextElement") -> Any:
        return self.visit_element(element)

    def visit_tag(self, tag: "Tag") -> Any:
        return self.visit_element(tag)

    def visit_tagged_content(self, content: "TaggedContent") -> Any:
        return self.visit_element(content)

    def visit_header(self, header: "Header") -> Any:
        return self.visit_element(header)

    def visit_template(self, template: "Template") -> Any:
        return self.visit_element(template)

    def visit_wikilink(self, link: "WikiLink") -> Any:
        return self.visit_element(link)

    def visit_external_link(self, link: "ExternalLink") -> Any:
        return self.visit_element(link)


class WikiElement:
    """A span of the input text, given by start and end offsets.

    An end position of 0 means "not yet known" and is accepted regardless
    of the start position.
    """

    def __init__(self, start_pos: int = 0, end_pos: int = 0) -> None:
        if end_pos != 0 and end_pos < start_pos:
            raise ValueError("End pos < start pos")
        self._start_pos = start_pos
        self._end_pos = end_pos

    @property
    def start_pos(self) -> int:
        return self._start_pos

    @start_pos.setter
    def start_pos(self, pos: int) -> None:
        if pos > self._end_pos:
            raise ValueError("Start pos > end pos")
        self._start_pos = pos

    @property
    def end_pos(self) -> int:
        return self._end_pos

    @end_pos.setter
    def end_pos(self, pos: int) -> None:
        if pos < self._start_pos:
            raise ValueError("End pos < start pos")
        self._end_pos = pos

    def to_string(self) -> str:
        """Reconstruct the wikitext of this element."""
        return ""

    def accept(self, visitor: WikiVisitor) -> Any:
        return visitor.visit_element(self)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.to_string()!r}, "
            f"{self._start_pos}, {self._end_pos})"
        )


class LeafElement(WikiElement):
    """An element without children."""


class ContainerElement(WikiElement):
    """An element holding child elements."""

    def __init__(self, start_pos: int = 0, end_pos: int = 0) -> None:
        super().__init__(start_pos, end_pos)
        self._children: list[WikiElement] = []

    @property
    def children(self) -> list[WikiElement]:
        return self._children

    def add_child(self, child: WikiElement) -> None:
        self._children.append(child)

    def take_children(self) -> list[WikiElement]:
        """Remove and return all children."""
        children, self._children = self._children, []
        return children

    def to_string(self) -> str:
        return "".join(child.to_string() for child in self._children)


class TextElement(WikiElement):
    """Plain text; inactive text is not to be parsed as markup."""

    def __init__(
        self, text: str, active: bool = True, start_pos: int = 0, end_pos: int = 0
    ) -> None:
        super().__init__(start_pos, end_pos)
        self.text = text
        self.active = active

    def to_string(self) -> str:
        return self.text

    def accept(self, visitor: WikiVisitor) -> Any:
        return visitor.visit_text(self)


class TagType(enum.Enum):
    OPENING = "opening"
    CLOSING = "closing"
    SELF_CLOSING = "self_closing"
    INVALID = "invalid"


class Tag(LeafElement):
    """An HTML-like tag such as ``<span>``, ``</span>`` or ``<br/>``."""

    def __init__(
        self,
        name: str,
        attributes: Optional[dict[str, str]] = None,
        tag_type: TagType = TagType.OPENING,
        valid: bool = True,
        start_pos: int = 0,
        end_pos: int = 0,
    ) -> None:
        super().__init__(start_pos, end_pos)
        self.name = name
        self.attributes = dict(attributes or {})
        self.tag_type = tag_type
        self.valid = valid

    def is_opening(self) -> bool:
        return self.tag_type is TagType.OPENING

    def is_closing(self) -> bool:
        return self.tag_type is TagType.CLOSING

    def is_self_closing(self) -> bool:
        return self.tag_type is TagType.SELF_CLOSING

    def is_invalid(self) -> bool:
        return self.tag_type is TagType.INVALID

    def to_string(self) -> str:
        parts = ["<"]
        if self.is_closing():
            parts.append("/")
        parts.append(self.name)
        parts.extend(f' {key}="{value}"' for key, value in self.attributes.items())
        if self.is_self_closing():
            parts.append("/")
        parts.append(">")
        return "".join(parts)

    def accept(self, visitor: WikiVisitor) -> Any:
        return visitor.visit_tag(self)


class TaggedContent(ContainerElement):
    """Content enclosed by an opening tag and, if matched, a closing tag."""

    def __init__(
        self, opening_tag: Optional[Tag], start_pos: int = 0, end_pos: int = 0
    ) -> None:
        super().__init__(start_pos, end_pos)
        self.opening_tag = opening_tag
        self.closing_tag: Optional[Tag] = None

    @property
    def content(self) -> list[WikiElement]:
        return self._children

    def add_child(self, element: Optional[WikiElement]) -> None:
        if element is not None:
            self._children.append(element)

    def take_content(self) -> list[WikiElement]:
        """Remove and return the enclosed elements."""
        return self.take_children()

    def validate(self) -> bool:
        """Whether the opening and closing tags form a proper pair."""
        if self.closing_tag is None or self.opening_tag is None:
            return False
        if self.opening_tag.name != self.closing_tag.name:
            return False
        return self.opening_tag.is_opening() and self.closing_tag.is_closing()

    def to_string(self) -> str:
        parts = []
        if self.opening_tag is not None:
            parts.append(self.opening_tag.to_string())
        parts.extend(child.to_string() for child in self._children)
        if self.closing_tag is not None:
            parts.append(self.closing_tag.to_string())
        return "".join(parts)

    def accept(self, visitor: WikiVisitor) -> Any:
        return visitor.visit_tagged_content(self)


class Header(LeafElement):
    """A section header of level 1 to 6."""

    def __init__(
        self, level: int, title: str, start_pos: int = 0, end_pos: int = 0
    ) -> None:
        super().__init__(start_pos, end_pos)
        if not 1 <= level <= 6:
            raise ValueError("Header level must be between 1 and 6")
        self.level = level
        self.title = title

    def to_string(self) -> str:
        marks = "=" * self.level
        return f"{marks}{self.title}{marks}"

    def accept(self, visitor: WikiVisitor) -> Any:
        return visitor.visit_header(self)


class Template(LeafElement):
    """A template call ``{{name|params}}``."""

    def __init__(
        self,
        name: str,
        params: Optional[dict[str, str]] = None,
        start_pos: int = 0,
        end_pos: int = 0,
    ) -> None:
        super().__init__(start_pos, end_pos)
        self.name = name
        self.params = dict(params or {})

    def to_string(self) -> str:
        parts = ["{{", self.name]
        for key, value in self.params.items():
            if key == "1":
                parts.append(f"|{value}")
            else:
                parts.append(f"|{key}={value}")
        parts.append("}}")
        return "".join(parts)

    def accept(self, visitor: WikiVisitor) -> Any:
        return visitor.visit_template(self)


class WikiLink(LeafElement):
    """An internal link ``[[target|display]]``."""

    def __init__(
        self,
        target: str,
        display: Optional[str] = None,
        start_pos: int = 0,
        end_pos: int = 0,
    ) -> None:
        super().__init__(start_pos, end_pos)
        self.target = target
        self.display = display

    def to_string(self) -> str:
        if self.display is None:
            return f"[[{self.target}]]"
        return f"[[{self.target}|{self.display}]]"

    def accept(self, visitor: WikiVisitor) -> Any:
        return visitor.visit_wikilink(self)


class ExternalLink(LeafElement):
    """An external link ``[url display]``."""

    def __init__(
        self,
        url: str,
        display: Optional[str] = None,
        start_pos: int = 0,
        end_pos: int = 0,
    ) -> None:
        super().__init__(start_pos, end_pos)
        self.url = url
        self.display = display

    def to_string(self) -> str:
        if self.display is None:
            return f"[{self.url}]"
        return f"[{self.url} {self.display}]"

    def accept(self, visitor: WikiVisitor) -> Any:
        return visitor.visit_external_link(self)