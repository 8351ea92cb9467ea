# wiktparse

A small parser for wiki markup. It turns wikitext into a list of elements.
These are plain text, templates (`{{name|a|key=b}}`), section headers
(`== Title ==`), wikilinks (`[[target|display]]`) and external links
(`[https://example.com Example]`). Wikilinks take in trailing letter suffixes,
as in `[[dom]]ostwa`. HTML-like tags are also recognised, and a recognised
opening tag is grouped with its matching closing tag into nested content.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

### Parsing a document

```python
from wiktparse.parser import Parser

elements = Parser("== Intro ==\nSee [[France]] and {{lang|fr|bonjour}}.").parse()
for element in elements:
    print(type(element).__name__, element.to_string())
```

`Parser.parse()` returns the top-level elements. An opening tag with a known
name starts a `TaggedContent`. The elements that follow go inside it until the
matching closing tag. If no closing tag comes, the content runs to the end of
the input. Each element records its span in the input as `start_pos` and
`end_pos`.

Some text only looks like markup, such as an unknown tag like `<n>` or an
unclosed template. Such text is kept as `TextElement`s.

### Parsing a single construct

Each of these functions takes the text and a start position. It returns a pair
`(element, position)`:

- `parse_template`
- `parse_wikilink`
- `parse_external_link`
- `parse_header`
- `parse_tag`
- `parse_text`

On success, the position is just past the construct. When nothing matches, the
element is `None`. The position is then the start position, except for
`parse_tag`, which returns the position just after the `<`.

```python
from wiktparse.parser import parse_template, parse_wikilink

template, end = parse_template("{{name|param0|key1=param1}}", 0)
template.name      # "name"
template.params    # {"1": "param0", "key1": "param1"}

link, end = parse_wikilink("[[dom|domo]]stwa", 0)
link.target        # "dom"
link.display       # "domostwa"
```

Some rules for the individual constructs:

- **Headers** must start a line. Their level is the smaller of the leading and
  trailing `=` counts, and it must be between 1 and 6. Only whitespace may
  follow on the line.
- **External links** need a URL that begins with a scheme followed by `://`.

### Comments and nowiki

`wiktparse.preprocessor.preprocess` splits raw text into `TextElement`
segments:

- HTML comments are dropped. When a comment stands alone on its line, the
  newline after it is dropped as well.
- The contents of a closed `<nowiki>…</nowiki>` pair come out as inactive
  segments (`active` is `False`).

```python
from wiktparse.preprocessor import preprocess

for segment in preprocess("abc<nowiki>[[link]]</nowiki>def"):
    print(segment.text, segment.active)
# abc True
# [[link]] False
# def True
```

### Elements

`wiktparse.elements` defines the following element classes:

- `TextElement`
- `Tag`, whose `tag_type` is a `TagType`
- `TaggedContent`
- `Header`
- `Template`
- `WikiLink`
- `ExternalLink`

Every element has `to_string()`, which rebuilds wikitext from the element.

Two checks raise `ValueError`:

- creating a `Header` with a level outside 1–6;
- giving an element an end position before its start.

### Visiting elements

To walk the elements, subclass `WikiVisitor` and call `element.accept(visitor)`.
Each element type dispatches to its own method:

- `visit_text`
- `visit_tag`
- `visit_tagged_content`
- `visit_header`
- `visit_template`
- `visit_wikilink`
- `visit_external_link`

By default, each of these falls back to `visit_element`. That method visits
the children of a container and returns their results as a list. For a leaf
element it returns `None`.

### Tags

A tag name is recognised when a handler is registered for it in the shared
`TagFactory`, which `get_tag_factory()` in `wiktparse.tags` returns. The
recognised names are `nowiki`, `sub`, `ref`, `br` and `span`. The handlers'
`handle_open` and `handle_close` hooks do nothing by default.

## What it does not do

- There is no command-line tool.
- It does not read dump files or archives; it works on strings you pass in.
- It does not render elements to display text.
- `preprocess` and `Parser` are separate steps. `Parser` does not remove
  comments itself.