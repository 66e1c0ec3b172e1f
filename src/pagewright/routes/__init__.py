"""Predefined routes and generator inputs.

Public API::

    from pagewright.routes import parse_inputs

    inputs = parse_inputs("pages/", [{"path": "/", "name": "Home"}])
"""

from pagewright.routes.descriptor import (
    GeneratorInput,
    RouteDescriptor,
    coerce_route,
    parse_inputs,
    parse_route_string,
)

__all__ = [
    "GeneratorInput",
    "RouteDescriptor",
    "coerce_route",
    "parse_inputs",
    "parse_route_string",
]
