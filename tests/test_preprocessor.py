import pytest

from wiktparse.preprocessor import preprocess


def _texts(fragments):
    return [(f.text, f.active) for f in fragments]


def _joined(text):
    return "".join(f.text for f in preprocess(text))


def test_preprocess_with_comment():
    fragments = preprocess("abc<!-- comment -->def")
    assert _texts(fragments) == [("abc", True), ("def", True)]


def test_preprocess_with_nowiki():
    fragments = preprocess("abc<nowiki>[[link]]</nowiki>def")
    assert _texts(fragments) == [("abc", True), ("[[link]]", False), ("def", True)]


def test_comment_break_a():
    fragments = preprocess("a\n<!--comment -->\nb")
    assert _texts(fragments) == [("a\n", True), ("b", True)]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("This is<!--comment 1--> simple <!--comment 2-->text", "This is simple text"),
        ("This is simple text<!--comment", "This is simple text"),
        ("This is simple --> text<!--comment", "This is simple --> text"),
        ("This is <nowiki><!--comment--></nowiki> text", "This is <!--comment--> text"),
        (
            "This is <nowiki><!--comm</nowiki>ent--> text",
            "This is <!--comment--> text",
        ),
        ("This is <!--comment <nowiki> abc <nowiki> --> text", "This is  text"),
        ("<nowiki><!-- comment--></nowiki>", "<!-- comment-->"),
        ("<nowiki><!-- comment--><nowiki>", "<nowiki><nowiki>"),
        (
            "abc<nowiki>a</nowiki><nowiki>a</nowiki>b<nowiki>c</nowiki><nowiki>d",
            "abcaabc<nowiki>d",
        ),
        ("abc<nowiki>a</nowiki>", "abca"),
        ("abc<nowiki>a<nowiki>", "abc<nowiki>a<nowiki>"),
    ],
)
def test_visible_text(text, expected):
    assert _joined(text) == expected


def test_nowiki_templates_split_active_and_inactive():
    fragments = preprocess("{{name|a|b}}<nowiki>{{name|a|b}}</nowiki>")
    assert _texts(fragments) == [("{{name|a|b}}", True), ("{{name|a|b}}", False)]


def test_plain_text_is_one_active_fragment():
    text = "no markers here\n== at all =="
    fragments = preprocess(text)
    assert _texts(fragments) == [(text, True)]
    assert (fragments[0].start_pos, fragments[0].end_pos) == (0, len(text))


def test_empty_input_gives_no_fragments():
    assert preprocess("") == []


@pytest.mark.parametrize(
    "text",
    [
        "abc<!-- comment -->def",
        "abc<nowiki>[[link]]</nowiki>def",
        "a\n<!--comment -->\nb",
        "x<nowiki>a</nowiki>y<!-- z -->w<nowiki>q",
    ],
)
def test_positions_match_source_slices(text):
    for fragment in preprocess(text):
        assert text[fragment.start_pos:fragment.end_pos] == fragment.text


def test_fragments_are_in_order():
    fragments = preprocess("a<!--x-->b<nowiki>c</nowiki>d<!--y-->e")
    starts = [f.start_pos for f in fragments]
    assert starts == sorted(starts)
    assert "".join(f.text for f in fragments) == "abcde"