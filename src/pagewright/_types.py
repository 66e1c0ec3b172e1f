"""Shared type definitions for pagewright."""

from typing import TypeAlias

# Route URL path (e.g., "/", "/SubDir0/SubDir0Page0")
RoutePath: TypeAlias = str

# Basename of a page file, also its title
PageName: TypeAlias = str

# Identifier a route entry selects its view by
Identifier: TypeAlias = str
