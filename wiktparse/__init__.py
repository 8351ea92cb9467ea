"""Parser for wiki markup: templates, headers, links, tags, comments and nowiki."""

__version__ = "0.1.0"