"""Generator inputs — the content directory and the predefined routes.

Predefined routes are an explicit, ordered list of route descriptors.  They
are passed through to the route table untouched and always precede the
generated page routes.  A descriptor can be given three ways::

    RouteDescriptor(path="/", name="Home")
    {"path": "/:..segments", "name": "NotFound", "params": ["segments"]}
    "/:..segments=NotFound(segments)"        # CLI ``--route`` form

Only presence and shape are checked here.  Route path syntax belongs to
whichever router consumes the generated module.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

from pagewright._errors import ConfigError


@dataclass(frozen=True, slots=True)
class RouteDescriptor:
    """A caller-supplied route entry.

    Attributes:
        path: Route path as the host router understands it (e.g. ``/``).
        name: Identifier of the view the route selects.
        params: Names of path parameters the view receives, in order.

    """

    path: str
    name: str
    params: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class GeneratorInput:
    """The two inputs of a generation run, parsed.

    Attributes:
        directory: Root of the content tree.
        predefined: Caller routes, in the order they were supplied.

    """

    directory: Path
    predefined: tuple[RouteDescriptor, ...]


def parse_inputs(
    directory: str | Path | None,
    routes: Iterable[object] = (),
) -> GeneratorInput:
    """Parse the content directory and predefined routes.

    Raises:
        ConfigError: If the directory is missing or a route is malformed.

    """
    if directory is None or not str(directory):
        msg = "A pages directory is required"
        raise ConfigError(msg)

    predefined = tuple(coerce_route(value) for value in routes)
    return GeneratorInput(directory=Path(directory), predefined=predefined)


def coerce_route(value: object) -> RouteDescriptor:
    """Turn a descriptor, mapping, or ``PATH=Name`` string into a RouteDescriptor."""
    if isinstance(value, RouteDescriptor):
        return value
    if isinstance(value, str):
        return parse_route_string(value)
    if isinstance(value, Mapping):
        return _route_from_mapping(value)

    msg = f"Route must be a mapping or 'PATH=Name' string, got {type(value).__name__}"
    raise ConfigError(msg)


def parse_route_string(text: str) -> RouteDescriptor:
    """Parse the CLI route form.

    ``/=Home``                          -> path ``/``, name ``Home``
    ``/:..segments=NotFound(segments)`` -> path ``/:..segments``, params ``("segments",)``

    The split happens at the last ``=``, so paths may contain ``=``.

    """
    path, sep, target = text.rpartition("=")
    if not sep or not path or not target:
        msg = f"Route {text!r} must look like 'PATH=Name' or 'PATH=Name(param, ...)'"
        raise ConfigError(msg)

    name, paren, rest = target.partition("(")
    params: tuple[str, ...] = ()
    if paren:
        if not rest.endswith(")"):
            msg = f"Route {text!r}: unclosed parameter list"
            raise ConfigError(msg)
        params = tuple(p.strip() for p in rest[:-1].split(",") if p.strip())

    name = name.strip()
    if not name:
        msg = f"Route {text!r} has no name"
        raise ConfigError(msg)

    return RouteDescriptor(path=path.strip(), name=name, params=params)


def _route_from_mapping(value: Mapping[object, object]) -> RouteDescriptor:
    path = value.get("path")
    name = value.get("name")
    if not isinstance(path, str) or not path:
        msg = f"Route {dict(value)!r}: 'path' must be a non-empty string"
        raise ConfigError(msg)
    if not isinstance(name, str) or not name:
        msg = f"Route {dict(value)!r}: 'name' must be a non-empty string"
        raise ConfigError(msg)

    raw_params = value.get("params") or ()
    if isinstance(raw_params, str) or not isinstance(raw_params, Iterable):
        msg = f"Route {name!r}: 'params' must be a list of names"
        raise ConfigError(msg)

    return RouteDescriptor(
        path=path,
        name=name,
        params=tuple(str(p) for p in raw_params),
    )
