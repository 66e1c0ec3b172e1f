"""Page layer — content files as page records.

Handles name validation, the depth-first walk of the content tree, route
path derivation, and reading each file into a PageRecord.
"""

from pagewright.pages.discovery import PageRecord, build_page_record, discover_pages
from pagewright.pages.names import check_name, is_valid_name
from pagewright.pages.paths import derive_route_path
from pagewright.pages.walker import WalkEntry, walk_tree

__all__ = [
    "PageRecord",
    "WalkEntry",
    "build_page_record",
    "check_name",
    "derive_route_path",
    "discover_pages",
    "is_valid_name",
    "walk_tree",
]
