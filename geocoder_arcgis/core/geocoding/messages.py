"""Error message templates and the default translator.

Templates use ``str.format`` named fields. A host application that
localizes messages passes its own translator with the same signature.
"""

from typing import Any, Protocol

REQUEST_FAILED = "HTTP request to ArcGIS failed. Code: {code} Error: {error}"
NO_CANDIDATES = "ArcGIS could not find any candidates."
NO_VALID_CANDIDATES = "ArcGIS did not return any valid candidates."


class Translator(Protocol):
    """Formats a message template with named replacements."""

    def __call__(self, template: str, **replacements: Any) -> str: ...


def format_message(template: str, **replacements: Any) -> str:
    """Substitute *replacements* into *template* without translating it."""
    if not replacements:
        return template
    return template.format(**replacements)
