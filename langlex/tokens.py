"""Classes for representing tokens.

A TokenKind instance represents one of the kinds of tokens recognized (see
token_kinds.py). A Token instance represents a token as produced by the lexer.

"""


class TokenKind:
    """Class representing the various known kinds of tokens.

    Ex: if, fn, while

    There is also a token kind instance for 'identifier', which covers every
    spelling that is not reserved. See token_kinds.py for the list of token
    kinds defined.

    text_repr (str) - The token's representation in text, if it has a fixed
    representation.

    """

    def __init__(self, text_repr="", kinds=None):
        """Initialize a new TokenKind and add it to `kinds`.

        kinds (List[TokenKind]) - List of kinds to which this TokenKind is
        added. This is convenient when defining token kinds in token_kinds.py.

        """
        self.text_repr = text_repr
        if kinds is not None:
            kinds.append(self)

    def __str__(self):
        """Return the representation of this token kind."""
        return self.text_repr

    def __repr__(self):  # pragma: no cover
        return f"TokenKind({self.text_repr!r})"


class Token:
    """Single unit element of the input as produced by the tokenizer.

    kind (TokenKind) - Kind of this token.

    content (str) - Text of the token. For identifiers, this stores the
    identifier name. For keywords, this defaults to the keyword spelling.
    r (Range) - Range of positions that this token covers.

    """

    def __init__(self, kind, content="", r=None):
        """Initialize this token."""
        self.kind = kind

        self.content = content if content else str(self.kind)
        self.r = r

    def __eq__(self, other):
        """Compare kind and content; the source range is not compared."""
        if not isinstance(other, Token):
            return NotImplemented
        return self.kind is other.kind and self.content == other.content

    def __repr__(self):  # pragma: no cover
        return self.content

    def __str__(self):
        """Return the token content."""
        return self.content
