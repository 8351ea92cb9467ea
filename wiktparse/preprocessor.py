"""Split wikitext into active text, inactive ``<nowiki>`` text and drop comments."""

from __future__ import annotations

from typing import Iterator, Optional

from wiktparse.elements import TextElement

COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"
NOWIKI_OPEN = "<nowiki>"
NOWIKI_CLOSE = "</nowiki>"

_MARKERS = (COMMENT_OPEN, COMMENT_CLOSE, NOWIKI_OPEN, NOWIKI_CLOSE)


def _marker_positions(text: str) -> list[tuple[int, str]]:
    found = []
    for marker in _MARKERS:
        pos = text.find(marker)
        while pos != -1:
            found.append((pos, marker))
            pos = text.find(marker, pos + 1)
    found.sort(key=lambda item: item[0])
    return found


def _find_marker(
    markers: list[tuple[int, str]], marker: str, start: int
) -> Optional[int]:
    return next(
        (i for i in range(start, len(markers)) if markers[i][1] == marker), None
    )


def _comment_alone_on_line(text: str, start: int, end: int) -> bool:
    line_start = text.rfind("\n", 0, start) + 1
    line_end = text.find("\n", end)
    line_end = len(text) if line_end == -1 else line_end + 1
    before_blank = not text[line_start:start].strip(" \t")
    after_blank = not text[end:line_end].strip(" \t\n")
    return before_blank and after_blank


def _segments(text: str) -> Iterator[tuple[int, int, bool]]:
    markers = _marker_positions(text)
    index = 0
    segment_start = 0
    while index < len(markers):
        pos, marker = markers[index]
        if marker == NOWIKI_OPEN:
            closing = _find_marker(markers, NOWIKI_CLOSE, index + 1)
            if closing is None:
                index += 1
                continue
            close_pos = markers[closing][0]
            if pos > segment_start:
                yield segment_start, pos, True
            yield pos + len(NOWIKI_OPEN), close_pos, False
            segment_start = close_pos + len(NOWIKI_CLOSE)
            index = closing + 1
        elif marker == COMMENT_OPEN:
            if pos > segment_start:
                yield segment_start, pos, True
            closing = _find_marker(markers, COMMENT_CLOSE, index + 1)
            if closing is None:
                segment_start = len(text)
                break
            comment_end = markers[closing][0] + len(COMMENT_CLOSE)
            if (
                _comment_alone_on_line(text, pos, comment_end)
                and comment_end < len(text)
                and text[comment_end] == "\n"
            ):
                comment_end += 1
            segment_start = comment_end
            if closing >= len(markers) - 1:
                break
            index = closing + 1
        else:
            index += 1
    if len(text) > segment_start:
        yield segment_start, len(text), True


def preprocess(text: str) -> list[TextElement]:
    """Return the text fragments left after removing comments.

    Content of a closed ``<nowiki>`` pair becomes an inactive fragment; a
    comment alone on its line also takes its trailing newline with it.
    """
    return [
        TextElement(text[start:end], active, start, end)
        for start, end, active in _segments(text)
    ]