"""Pagewright — routes and views generated from a directory of pages.

Every file under the pages directory becomes a page: its basename is the
page identifier and title, its position in the tree is its route path, and
its text is the page body.  Caller-defined routes are placed first.

Quick start::

    import pagewright

    pagewright.generate("my-app/", routes=[{"path": "/", "name": "Home"}])

Lower-level pieces::

    from pagewright.emit import emit, render_module

    pages = pagewright.discover_pages(Path("my-app/pages"))
    artifact = emit(predefined, pages, home="/")
    source = render_module(artifact)

"""

__version__ = "0.1.0"
__all__ = [
    "GeneratorConfig",
    "__version__",
    "check",
    "discover_pages",
    "generate",
    "watch",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import pagewright`` fast while providing a clean top-level API.
    """
    if name == "GeneratorConfig":
        from pagewright.config import GeneratorConfig

        return GeneratorConfig

    if name == "generate":
        from pagewright.generator import generate

        return generate

    if name == "check":
        from pagewright.generator import check

        return check

    if name == "discover_pages":
        from pagewright.pages import discover_pages

        return discover_pages

    if name == "watch":
        from pagewright.watcher import watch

        return watch

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
