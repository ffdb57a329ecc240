"""Common literal values used across codebooks_nav.

These constants keep artefact filenames and content locations centralized so
the exporter, content stores, and tests import the same values without
drifting. Intended for internal use within the codebooks_nav package.

Examples
--------
>>> from codebooks_nav import _constants
>>> _constants.DEFAULT_TOC_PATH
'book_zh/toc.md'
>>> _constants.MODULE_FILENAME.endswith('.mjs')
True
"""

DEFAULT_TOC_PATH = "book_zh/toc.md"
NAVIGATION_FILENAME = "navigation.json"
SIDEBAR_FILENAME = "sidebar.json"
NAV_FILENAME = "nav.json"
MODULE_FILENAME = "sidebar.mjs"
