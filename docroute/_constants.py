"""Common literal values used across docroute.

These constants keep reserved anchors, filenames, and directory defaults
centralized so the router, configuration loader, and tests can import the same
values without drifting. Intended for internal use within the docroute
package.

Examples
--------
>>> from docroute import _constants
>>> "main" in _constants.RESERVED_ANCHORS
True
>>> _constants.INDEX_FILENAME
'index.html'
"""

RESERVED_ANCHORS: tuple[str, ...] = ("main", "search", "theme")
INDEX_FILENAME = "index.html"
DOCUMENT_SUFFIX = ".html"
DEFAULT_ASSET_DIRECTORY = "assets"
DEFAULT_MEDIA_DIRECTORY = "media"
FALLBACK_ANCHOR = "anchor"
