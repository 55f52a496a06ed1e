"""urlshort exception hierarchy.

Shared across the rule builder, the dispatcher, and the CLI so every
module raises and catches the same types.
"""


class UrlshortError(Exception):
    """Base for all urlshort-specific errors."""


class ConfigurationError(UrlshortError):
    """Raised when a handler is constructed with invalid options.

    Typically an unsupported redirect status code.
    """


class RuleParseError(UrlshortError):
    """Raised when rule data cannot be decoded into a rule table.

    ``index`` is the position of the offending record in the YAML
    sequence, or ``None`` when the document as a whole is unusable
    (malformed YAML, wrong top-level shape). The underlying
    ``yaml.YAMLError`` is chained as ``__cause__`` when there is one.
    """

    def __init__(self, detail: str, *, index: int | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.index = index

    def __str__(self) -> str:
        if self.index is not None:
            return f"rule {self.index}: {self.detail}"
        return self.detail
