"""urlshort: path-to-URL redirects with a fallback handler.

Build a handler from a mapping or a YAML rule document; requests for a
known path get a 302, everything else goes to the fallback::

    from urlshort import ASGIApp, map_handler, not_found, yaml_handler

    handler = map_handler({"/gh": "https://github.com"}, fallback=not_found)
    handler = yaml_handler(open("redirects.yaml", "rb").read(), fallback=handler)

    app = ASGIApp(handler)  # serve with any ASGI server
"""

__version__ = "0.1.0"
__all__ = [
    "ASGIApp",
    "ConfigurationError",
    "Handler",
    "Next",
    "Redirect",
    "RedirectMiddleware",
    "Request",
    "Response",
    "Rule",
    "RuleParseError",
    "RuleTable",
    "UrlshortError",
    "load_rules",
    "map_handler",
    "not_found",
    "parse_rules",
    "yaml_handler",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import urlshort`` cheap; submodules load on first use.
    """
    if name in (
        "Handler",
        "Next",
        "RedirectMiddleware",
        "map_handler",
        "not_found",
        "yaml_handler",
    ):
        from urlshort import handler as _handler

        return getattr(_handler, name)

    if name in ("Rule", "RuleTable", "load_rules", "parse_rules"):
        from urlshort import rules as _rules

        return getattr(_rules, name)

    if name in ("ConfigurationError", "RuleParseError", "UrlshortError"):
        from urlshort import errors as _errors

        return getattr(_errors, name)

    if name == "Request":
        from urlshort.http.request import Request

        return Request

    if name in ("Response", "Redirect"):
        from urlshort.http import response as _resp

        return getattr(_resp, name)

    if name == "ASGIApp":
        from urlshort.server.asgi import ASGIApp

        return ASGIApp

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
