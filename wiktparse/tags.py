"""Registry of known tag names and creation of tag elements."""

from __future__ import annotations

import functools
from typing import Optional

from wiktparse.elements import Tag, TaggedContent, TagType


class TagHandler:
    """Hooks called for a recognised tag; by default they do nothing."""

    def handle_open(self, tag: Tag, content: TaggedContent) -> None:
        """Called when an opening tag starts a tagged region."""

    def handle_close(self, tag: Tag) -> None:
        """Called when the matching closing tag is found."""


class NowikiHandler(TagHandler):
    """Handler for ``<nowiki>``."""


class SubHandler(TagHandler):
    """Handler for ``<sub>``."""


class RefHandler(TagHandler):
    """Handler for ``<ref>``."""


class BrHandler(TagHandler):
    """Handler for ``<br>``."""


class SpanHandler(TagHandler):
    """Handler for ``<span>``."""


class TagFactory:
    """Creates tags, marking as valid only those with a registered handler."""

    def __init__(self) -> None:
        self._handlers: dict[str, TagHandler] = {
            "nowiki": NowikiHandler(),
            "sub": SubHandler(),
            "ref": RefHandler(),
            "br": BrHandler(),
            "span": SpanHandler(),
        }

    def has_handler(self, name: str) -> bool:
        return name in self._handlers

    def create_tag(
        self,
        name: str,
        attributes: Optional[dict[str, str]],
        tag_type: TagType,
        syntactically_valid: bool,
        start_pos: int,
        end_pos: int,
    ) -> Tag:
        """Build a tag; it is valid only if well formed and its name is known."""
        valid = syntactically_valid and self.has_handler(name)
        return Tag(name, attributes, tag_type, valid, start_pos, end_pos)


@functools.lru_cache(maxsize=None)
def get_tag_factory() -> TagFactory:
    """Return the shared tag factory."""
    return TagFactory()