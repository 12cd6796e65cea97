"""App constants: defaults, markdown layout and the page template."""

from .constants import (
    CSS_PAGE,
    DEFAULT_COMBINED_FILE,
    DEFAULT_EXCLUDE,
    DEFAULT_EXTENSIONS,
    DEFAULT_HTML_FILE,
    DEFAULT_PROJECT_NAME,
    DOC_PREAMBLE,
    HTML_TEMPLATE,
    SECTION_TEMPLATE,
)

__all__ = [
    "CSS_PAGE",
    "HTML_TEMPLATE",
    "DOC_PREAMBLE",
    "SECTION_TEMPLATE",
    "DEFAULT_PROJECT_NAME",
    "DEFAULT_COMBINED_FILE",
    "DEFAULT_HTML_FILE",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_EXCLUDE",
]
