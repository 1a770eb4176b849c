"""Common literal values used across apidoc_pages.

These constants keep placeholder tokens, default filenames, and CSS hooks
centralized so the template, the renderers, and the tests import the same
values without drifting. Intended for internal use within the apidoc_pages
package.

Examples
--------
>>> from apidoc_pages import _constants
>>> _constants.PLACEHOLDERS["name"]
'{name}'
>>> _constants.DEFAULT_TOC_FILENAME
'table-of-contents.json'
"""

DEFAULT_TOC_FILENAME = "table-of-contents.json"
SOURCE_GLOB = "*.json"
DEFAULT_PAGE_EXTENSION = ".html"
TOC_CURRENT_CLASS = "toc-current"

# Substitution order matches the order fragments are produced for a page.
PLACEHOLDERS: dict[str, str] = {
    "table_of_contents": "{tableOfContents}",
    "name": "{name}",
    "abstract": "{abstract}",
    "information": "{information}",
    "basic_usage": "{basicUsage}",
    "method_summary": "{methodSummary}",
    "method_detail": "{methodDetail}",
}
