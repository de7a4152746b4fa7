"""Search expression compilation for the provider's asset index."""

from core.utils.constants import SEARCH_RESERVED_CHARACTERS


class AssetSearchCompiler:
    """Build provider search expressions from folder and free-text filters.

    The expression always scopes to a single folder. A free-text term is
    matched as a wildcard substring against both the file name and the
    public identifier:

        folder:business-images AND (filename:*logo* OR public_id:*logo*)

    Characters that carry meaning in the search grammar are escaped, so a
    term is always matched literally and cannot widen the query.
    """

    @staticmethod
    def escape_term(term: str) -> str:
        """Backslash-escape reserved characters and whitespace in ``term``."""
        return "".join(
            f"\\{char}" if char in SEARCH_RESERVED_CHARACTERS or char.isspace() else char
            for char in term
        )

    @staticmethod
    def compile(folder: str, term: str | None = None) -> str:
        """Compile a folder scope and optional term into one expression.

        Compilation cannot fail: an empty or whitespace-only term yields
        the folder-only expression.
        """
        expression = f"folder:{folder}"

        if not term or not term.strip():
            return expression

        escaped = AssetSearchCompiler.escape_term(term.strip())
        return f"{expression} AND (filename:*{escaped}* OR public_id:*{escaped}*)"
