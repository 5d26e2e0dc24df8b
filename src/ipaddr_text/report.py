"""Human-readable rendering of parse diagnostics."""

from typing import Iterable

from ipaddr_text.errors import Diagnostic


def format_diagnostic(text: str, diagnostic: Diagnostic) -> str:
    """
    Render one diagnostic with the input underlined at its span.

    Example:
        error: duplicate zero elision
             |
             | 1::2::3
             |    ^^
    """
    width = max(diagnostic.end - diagnostic.begin, 1)
    underline = " " * diagnostic.begin + "^" * width
    return (
        f"error: {diagnostic.message}\n"
        f"     |\n"
        f"     | {text}\n"
        f"     | {underline}"
    )


def format_diagnostics(text: str, diagnostics: Iterable[Diagnostic]) -> str:
    return "\n".join(format_diagnostic(text, d) for d in diagnostics)
