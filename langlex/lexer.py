"""Objects for the lexing phase.

The lexer takes the contents of a source file, splits it into maximal runs
of identifier characters, and turns each run into a keyword or identifier
token. Literals, comments and punctuation are not lexed here; any character
outside the identifier alphabet is reported as unrecognized.

"""
import re
import string

from langlex.errors import LexError, Position, Range, error_collector
from langlex.keywords import classify
from langlex.tokens import Token

identifier_chars = frozenset(string.ascii_letters + string.digits + "_")


class Tagged:
    """Class representing tagged characters.

    c (char) - the character that is tagged
    p (Position) - position of the tagged character
    r (Range) - a length-one range for the character
    """

    def __init__(self, c, p):
        """Initialize object."""
        self.c = c
        self.p = p
        self.r = Range(p, p)


def tokenize(code, filename):
    """Convert given code into a flat list of Tokens.

    code (str) - Full contents of the input.
    filename (str) - Name used in token ranges and error messages.
    return - List of Token objects.
    """
    tokens = []

    for line in split_to_tagged_lines(code, filename):
        try:
            tokens += tokenize_line(line)
        except LexError as e:
            error_collector.add(e)

    return tokens


def split_to_tagged_lines(text, filename):
    """Split the input text into tagged lines.

    text (str) - Input file contents as a string.
    filename (str) - Input file name.
    return - Tagged lines. List of list of Tagged objects, where each second
    order list is a separate line in the input. No newline characters.
    """
    tagged_lines = []
    for line_num, line in enumerate(text.splitlines()):
        tagged_lines.append([Tagged(char, Position(filename, line_num + 1,
                                                   col + 1, line))
                             for col, char in enumerate(line)])
    return tagged_lines


def tokenize_line(line):
    """Tokenize the given single line.

    line - List of Tagged objects.
    return - List of Token objects.
    """
    tokens = []

    # line[chunk_start:chunk_end] is the run of identifier characters being
    # collected. Everything before it has been tokenized already.
    chunk_start = 0
    chunk_end = 0

    while chunk_end < len(line):
        char = line[chunk_end]

        if char.c in identifier_chars:
            chunk_end += 1
            continue

        add_chunk(line[chunk_start:chunk_end], tokens)
        if not char.c.isspace():
            descrip = f"unrecognized character '{char.c}'"
            error_collector.add(LexError(descrip, char.r))

        chunk_start = chunk_end + 1
        chunk_end = chunk_start

    add_chunk(line[chunk_start:chunk_end], tokens)
    return tokens


def chunk_to_str(chunk):
    """Convert the given list of Tagged characters to a string."""
    return "".join(c.c for c in chunk)


def add_chunk(chunk, tokens):
    """Convert chunk into a token and add it to tokens.

    The chunk holds only identifier characters, so it is either a valid
    identifier lexeme or starts with a digit. The latter raises a
    LexError.

    chunk - Chunk to convert into a token, as list of Tagged characters.
    tokens (List[Token]) - List of the tokens thusfar lexed.

    """
    if not chunk:
        return

    range = Range(chunk[0].p, chunk[-1].p)
    identifier_name = match_identifier_name(chunk)
    if identifier_name:
        tokens.append(Token(classify(identifier_name), identifier_name,
                            r=range))
        return

    descrip = f"unrecognized token at '{chunk_to_str(chunk)}'"
    raise LexError(descrip, range)


def match_identifier_name(token_repr):
    """Return a string that represents the name of an identifier.

    token_repr - List of Tagged characters.
    returns (str, or None) - String name of the identifier.

    """
    token_str = chunk_to_str(token_repr)
    if re.match(r"[_a-zA-Z][_a-zA-Z0-9]*$", token_str):
        return token_str
    else:
        return None
