"""Classification of identifier lexemes into keyword or identifier kinds.

The lexer hands over a complete identifier chunk, already delimited by
maximal munch. Matching is exact and case-sensitive, so "If" and "iffy" are
plain identifiers.

"""
from types import MappingProxyType

import langlex.token_kinds as token_kinds


def _build_keyword_table(kinds):
    """Map each keyword spelling to its token kind.

    kinds (List[TokenKind]) - Keyword kinds, each with a distinct text_repr.
    returns (MappingProxyType) - Read-only spelling -> TokenKind mapping.

    """
    table = {}
    for kind in kinds:
        if kind.text_repr in table:
            raise ValueError(f"duplicate keyword spelling '{kind.text_repr}'")
        table[kind.text_repr] = kind
    return MappingProxyType(table)


keyword_table = _build_keyword_table(token_kinds.keyword_kinds)


def classify(spelling):
    """Return the token kind for the given identifier spelling.

    spelling (str) - Identifier text exactly as extracted from source.
    returns (TokenKind) - The keyword kind if `spelling` is reserved,
    otherwise token_kinds.identifier.

    """
    return keyword_table.get(spelling, token_kinds.identifier)


def is_keyword(spelling):
    """Return True iff the given spelling is a reserved word."""
    return spelling in keyword_table
