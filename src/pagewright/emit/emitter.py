"""Code emitter — merge predefined routes with discovered pages.

Produces the route table and one view definition per page.  Emission is a
pure function of its inputs and does no I/O, so equal inputs always give
equal artifacts.
"""

from __future__ import annotations

import keyword
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pagewright._errors import DuplicateRouteError
from pagewright._types import Identifier, PageName, RoutePath

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pagewright.pages.discovery import PageRecord
    from pagewright.routes.descriptor import RouteDescriptor

# Names the generated module defines besides the views
_MODULE_GLOBALS = frozenset({"HOME", "ROUTES", "VIEWS"})


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """One row of the route table.

    Attributes:
        path: Route path.
        identifier: Name of the view the route selects.
        params: Path parameter names (predefined routes only).
        generated: False for caller routes, True for page routes.

    """

    path: RoutePath
    identifier: Identifier
    params: tuple[str, ...] = ()
    generated: bool = False


@dataclass(frozen=True, slots=True)
class ViewDefinition:
    """A generated page view: title, body and a link back home."""

    identifier: Identifier
    title: PageName
    content: str
    home: RoutePath


@dataclass(frozen=True, slots=True)
class GeneratedArtifact:
    """Everything a generation run emits.

    Attributes:
        routes: Predefined entries first, then page entries in discovery order.
        views: One view per page, in discovery order.
        home: Route path the views link back to.

    """

    routes: tuple[RouteEntry, ...]
    views: tuple[ViewDefinition, ...]
    home: str

    @property
    def page_routes(self) -> tuple[RouteEntry, ...]:
        """Only the entries generated from pages."""
        return tuple(r for r in self.routes if r.generated)


def to_identifier(name: PageName) -> Identifier:
    """Derive a Python identifier from a validated page name.

    ``Page0``  -> ``Page0``
    ``404``    -> ``page_404``
    ``class``  -> ``class_``
    ``ROUTES`` -> ``ROUTES_``

    """
    if name[:1].isdigit():
        return "page_" + name
    if keyword.iskeyword(name) or name in _MODULE_GLOBALS:
        return name + "_"
    return name


def emit(
    predefined: Sequence[RouteDescriptor],
    pages: Sequence[PageRecord],
    *,
    home: str = "/",
) -> GeneratedArtifact:
    """Build the route table and view definitions.

    Raises:
        DuplicateRouteError: If a page identifier repeats or matches a
            predefined route, which would make the generated module define
            one view twice or shadow a predefined view. Predefined routes
            may share an identifier among themselves.

    """
    routes: list[RouteEntry] = [
        RouteEntry(path=r.path, identifier=r.name, params=r.params)
        for r in predefined
    ]
    views: list[ViewDefinition] = []

    for page in pages:
        identifier = to_identifier(page.name)
        routes.append(RouteEntry(path=page.path, identifier=identifier, generated=True))
        views.append(ViewDefinition(
            identifier=identifier,
            title=page.name,
            content=page.content,
            home=home,
        ))

    _check_unique(routes)
    return GeneratedArtifact(routes=tuple(routes), views=tuple(views), home=home)


def _check_unique(routes: list[RouteEntry]) -> None:
    """Reject page identifiers that repeat or shadow a predefined route.

    Predefined rows may share a view among themselves; only generated rows
    define views in the generated module.
    """
    seen = {r.identifier for r in routes if not r.generated}
    for route in routes:
        if not route.generated:
            continue
        if route.identifier in seen:
            raise DuplicateRouteError(route.identifier)
        seen.add(route.identifier)
