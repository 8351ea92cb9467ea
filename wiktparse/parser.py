"""Parser turning wikitext into a tree of wiki elements."""

from __future__ import annotations

import enum
import re
import string
from typing import Callable, Optional, TypeVar

from wiktparse.elements import (
    ExternalLink,
    Header,
    Tag,
    TaggedContent,
    Template,
    TagType,
    TextElement,
    WikiElement,
    WikiLink,
)
from wiktparse.tags import get_tag_factory

_T = TypeVar("_T", bound=WikiElement)

_TAG_PATTERN = re.compile(r"(/?)(\w+)([^/]*)(/?)", re.ASCII)
_ATTR_PATTERN = re.compile(
    r"""\s*(\w+)\s*=\s*("([^"]*)"|'([^']*)'|([^ \t>]+))""", re.ASCII
)
_URL_SCHEME = re.compile(r"[a-zA-Z][a-zA-Z0-9]*://")
_WIKI_SPACE = " \t\f\v"
_TEXT_STOPS = "<[{"


class ParserError(RuntimeError):
    """Raised when wikitext cannot be parsed."""


class StarterType(enum.Enum):
    NONE = "none"
    TAG = "tag"
    TEMPLATE = "template"
    WIKILINK = "wikilink"
    EXTERNAL_LINK = "external_link"
    HEADER = "header"
    TEXT = "text"


def _at_line_start(text: str, pos: int) -> bool:
    return pos == 0 or text[pos - 1] == "\n"


def parse_tag(text: str, pos: int) -> tuple[Optional[Tag], int]:
    """Parse a tag at ``pos``.

    Returns the tag and the position after it, or ``None`` and the position
    just after ``<`` when the tag is malformed or its name is unknown.
    """
    start = pos
    if pos >= len(text) or text[pos] != "<":
        return None, pos
    close = text.find(">", pos + 1)
    if close == -1:
        return None, start + 1
    tag_content = text[start + 1 : close]
    pos = close + 1

    match = _TAG_PATTERN.fullmatch(tag_content)
    if match is None:
        return None, start + 1

    slash, name, attrs_text, self_slash = match.groups()
    is_closing = bool(slash)
    is_self_closing = bool(self_slash)
    if is_closing and is_self_closing:
        tag_type = TagType.INVALID
    elif is_closing:
        tag_type = TagType.CLOSING
    elif is_self_closing:
        tag_type = TagType.SELF_CLOSING
    else:
        tag_type = TagType.OPENING

    attributes: dict[str, str] = {}
    for attr in _ATTR_PATTERN.finditer(attrs_text):
        key, _, double, single, bare = attr.groups()
        if double is not None:
            attributes[key] = double
        elif single is not None:
            attributes[key] = single
        else:
            attributes[key] = bare

    tag = get_tag_factory().create_tag(
        name, attributes, tag_type, tag_type is not TagType.INVALID, start, pos
    )
    if not tag.valid:
        return None, start + 1
    return tag, pos


def _balance_delimiters(
    opening: str, closing: str, text: str, pos: int
) -> Optional[tuple[str, int]]:
    """Find the closing delimiter matching one already consumed.

    Returns the enclosed content and the position after the closing
    delimiter, or ``None`` when the delimiters are unbalanced.
    """
    depth = 1
    content_start = pos
    while pos < len(text):
        if text.startswith(opening, pos):
            depth += 1
            pos += len(opening)
        elif text.startswith(closing, pos):
            depth -= 1
            pos += len(closing)
            if depth == 0:
                return text[content_start : pos - len(closing)], pos
        else:
            pos += 1
    return None


def _split_template_parts(content: str) -> list[str]:
    parts: list[str] = []
    current: list[str] = []
    depth = 0
    for char in content:
        if char in "{[":
            depth += 1
        elif char in "}]":
            depth -= 1
        elif char == "|" and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    if current:
        parts.append("".join(current))
    return parts


def parse_template(text: str, pos: int) -> tuple[Optional[Template], int]:
    """Parse a ``{{...}}`` template at ``pos``, honouring nesting."""
    start = pos
    balanced = _balance_delimiters("{{", "}}", text, pos + 2)
    if balanced is None:
        return None, start
    content, pos = balanced
    parts = _split_template_parts(content)
    if not parts:
        return None, start

    name, *args = parts
    params: dict[str, str] = {}
    for index, part in enumerate(args, start=1):
        key, sep, value = part.partition("=")
        if sep:
            params[key] = value
        else:
            params[str(index)] = part
    return Template(name, params, start, pos), pos


def parse_wikilink(text: str, pos: int) -> tuple[Optional[WikiLink], int]:
    """Parse a ``[[target|display]]`` link, taking in a trailing letter suffix."""
    start = pos
    if not text.startswith("[[", pos):
        return None, pos
    close = text.find("]]", pos + 2)
    if close == -1:
        return None, start
    inner = text[pos + 2 : close]
    pos = close + 2

    target, sep, rest = inner.partition("|")
    display: Optional[str] = rest if sep else None

    suffix_end = pos
    while suffix_end < len(text) and text[suffix_end] in string.ascii_letters:
        suffix_end += 1
    suffix = text[pos:suffix_end]
    pos = suffix_end

    if suffix:
        display = (display if display is not None else target) + suffix
    return WikiLink(target, display, start, pos), pos


def parse_external_link(
    text: str, pos: int
) -> tuple[Optional[ExternalLink], int]:
    """Parse a ``[url description]`` link whose url starts with a scheme."""
    start = pos
    if pos >= len(text) or text[pos] != "[":
        return None, pos
    close = text.find("]", pos + 1)
    if close == -1:
        return None, start
    inner = text[pos + 1 : close]
    pos = close + 1

    url, sep, description = inner.partition(" ")
    display: Optional[str] = None
    if sep:
        trimmed = description.strip(" \t")
        if trimmed:
            display = trimmed

    if _URL_SCHEME.match(url) is None:
        return None, start
    return ExternalLink(url, display, start, pos), pos


def _trimmed_eol_pos(text: str, pos: int) -> int:
    eol = len(text)
    for newline in "\r\n":
        found = text.find(newline, pos)
        if found != -1:
            eol = min(eol, found)
    while eol > pos and text[eol - 1] in _WIKI_SPACE:
        eol -= 1
    return eol


def parse_header(text: str, pos: int) -> tuple[Optional[Header], int]:
    """Parse a ``==title==`` header that starts a line.

    The level is the smaller of the leading and trailing ``=`` counts; only
    whitespace may follow the closing ``=`` on the line.
    """
    start = pos
    if not _at_line_start(text, pos):
        return None, pos

    leading = 0
    while pos + leading < len(text) and text[pos + leading] == "=":
        leading += 1
    if leading == 0:
        return None, pos

    end = _trimmed_eol_pos(text, pos)
    back = end - 1
    while back >= pos and text[back] == "=":
        back -= 1
    trailing = end - 1 - back

    level = min(leading, trailing)
    if not 1 <= level <= 6:
        return None, pos

    title = text[pos + level : end - level].strip(" \t")
    return Header(level, title, start, end), end


def parse_text(text: str, pos: int) -> tuple[Optional[TextElement], int]:
    """Collect plain text up to the next possible markup starter."""
    start = pos
    while pos < len(text):
        char = text[pos]
        if pos > start and (
            char in _TEXT_STOPS or (char == "=" and _at_line_start(text, pos))
        ):
            break
        pos += 1
    if pos == start:
        return None, pos
    return TextElement(text[start:pos], True, start, pos), pos


class Parser:
    """Parses a whole wikitext into a list of top-level elements."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _detect_starter(self) -> StarterType:
        text, pos = self.text, self.pos
        if pos + 1 < len(text):
            if text.startswith("{{", pos):
                return StarterType.TEMPLATE
            if text.startswith("[[", pos):
                return StarterType.WIKILINK
            if text[pos] == "[":
                return StarterType.EXTERNAL_LINK
            if text[pos] == "<":
                return StarterType.TAG
            if text[pos] == "=" and _at_line_start(text, pos):
                return StarterType.HEADER
        return StarterType.NONE

    def _parse_or_text(
        self, subparser: Callable[[str, int], tuple[Optional[_T], int]]
    ) -> WikiElement:
        start = self.pos
        element, self.pos = subparser(self.text, start)
        if element is None:
            element, self.pos = parse_text(self.text, start)
        return element

    def parse(self) -> list[WikiElement]:
        """Parse the input from the current position to the end."""
        text = self.text
        root = TaggedContent(None, 0, len(text))
        stack: list[TaggedContent] = [root]
        subparsers = {
            StarterType.TEMPLATE: parse_template,
            StarterType.WIKILINK: parse_wikilink,
            StarterType.EXTERNAL_LINK: parse_external_link,
            StarterType.HEADER: parse_header,
        }

        while self.pos < len(text):
            start = self.pos
            starter = self._detect_starter()
            if starter is StarterType.TAG:
                tag, self.pos = parse_tag(text, start)
                if tag is None:
                    element, self.pos = parse_text(text, start)
                    stack[-1].add_child(element)
                elif tag.is_opening():
                    content = TaggedContent(tag, start, 0)
                    stack[-1].add_child(content)
                    stack.append(content)
                elif tag.is_closing():
                    top = stack[-1]
                    if (
                        len(stack) > 1
                        and top.opening_tag is not None
                        and top.opening_tag.name == tag.name
                    ):
                        top.closing_tag = tag
                        top.end_pos = self.pos
                        stack.pop()
                    else:
                        element, self.pos = parse_text(text, start)
                        stack[-1].add_child(element)
                else:
                    stack[-1].add_child(tag)
            elif starter in subparsers:
                stack[-1].add_child(self._parse_or_text(subparsers[starter]))
            else:
                element, self.pos = parse_text(text, start)
                stack[-1].add_child(element)

        while len(stack) > 1:
            stack.pop().end_pos = len(text)

        return root.take_content()