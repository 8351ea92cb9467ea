import pytest

from wiktparse.elements import TagType
from wiktparse.tags import TagFactory, get_tag_factory


@pytest.mark.parametrize("name", ["nowiki", "sub", "ref", "br", "span"])
def test_known_tags_have_handlers(name):
    assert get_tag_factory().has_handler(name) is True


@pytest.mark.parametrize("name", ["n", "badname", "", "SPAN"])
def test_unknown_tags_have_no_handler(name):
    assert get_tag_factory().has_handler(name) is False


def test_factory_is_shared():
    factory = get_tag_factory()
    assert factory is get_tag_factory()
    assert factory.has_handler("nowiki") is True
    assert factory.has_handler("div") is False


def test_create_known_tag_is_valid():
    tag = get_tag_factory().create_tag("sub", {}, TagType.OPENING, True, 0, 5)
    assert tag.valid is True
    assert tag.name == "sub"
    assert tag.is_opening()
    assert (tag.start_pos, tag.end_pos) == (0, 5)
    assert tag.to_string() == "<sub>"


def test_create_unknown_tag_is_invalid():
    tag = get_tag_factory().create_tag("n", {}, TagType.OPENING, True, 1, 9)
    assert tag.valid is False
    assert tag.name == "n"


def test_syntactically_invalid_known_tag_is_invalid():
    tag = get_tag_factory().create_tag("span", {}, TagType.INVALID, False, 0, 7)
    assert tag.valid is False
    assert tag.is_invalid()


def test_attributes_are_kept():
    attrs = {"style": "color:red", "class": "highlight"}
    tag = TagFactory().create_tag("span", attrs, TagType.OPENING, True, 0, 10)
    assert tag.attributes == attrs
    assert tag.valid is True


def test_closing_and_self_closing_reconstruction():
    factory = TagFactory()
    closing = factory.create_tag("sub", {}, TagType.CLOSING, True, 0, 6)
    self_closing = factory.create_tag("br", {}, TagType.SELF_CLOSING, True, 0, 5)
    assert closing.to_string() == "</sub>"
    assert self_closing.to_string() == "<br/>"
    assert closing.is_closing() and self_closing.is_self_closing()


def test_invalid_positions_raise():
    with pytest.raises(ValueError):
        TagFactory().create_tag("br", {}, TagType.SELF_CLOSING, True, 5, 2)