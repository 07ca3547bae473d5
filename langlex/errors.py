"""Diagnostics for the lexer.

Nothing raises past tokenize() or main(). The scanner and the driver record
a LexError in the global `error_collector` and keep going; main() prints the
collected errors once every file has been handled. langlex reports three
kinds of problem: an unreadable file, a character outside the identifier
alphabet, and a chunk that is not a valid identifier.

"""


class ErrorCollector:
    """Accumulates every LexError, kept in printing order."""

    def __init__(self):
        self.issues = []

    def add(self, issue):
        """Record a LexError."""
        self.issues.append(issue)
        self.issues.sort(key=LexError.sort_key)

    def ok(self):
        """Return True iff nothing has been recorded."""
        return not self.issues

    def show(self):  # pragma: no cover
        for issue in self.issues:
            print(issue)

    def clear(self):
        """Forget all recorded errors. Intended only for testing use."""
        self.issues = []


error_collector = ErrorCollector()


class Position:
    """A single character in a source file.

    file (str) - Name of the file.
    line (int) - 1-based line number.
    col (int) - 1-based column; full_line[col - 1] is the character.
    full_line (str) - Text of the whole line, used when printing errors.
    """

    def __init__(self, file, line, col, full_line):
        self.file = file
        self.line = line
        self.col = col
        self.full_line = full_line


class Range:
    """Inclusive span from `start` to `end` on a single line."""

    def __init__(self, start, end=None):
        self.start = start
        self.end = end or start


class LexError(Exception):
    """A problem found while reading or scanning a source file.

    descrip (str) - What went wrong, starting with a lowercase letter, like
    "unrecognized character '+'".
    range (Range) - Where in the source it went wrong. None for problems
    with the file as a whole, such as a file that could not be read.

    """

    bold = "\033[1m"
    red = "\x1B[31m"
    reset = "\x1B[0m"

    def __init__(self, descrip, range=None):
        super().__init__(descrip)
        self.descrip = descrip
        self.range = range

    def sort_key(self):
        """Order file-level errors first, then by file, line and column."""
        if not self.range:
            return (0, "", 0, 0)
        start = self.range.start
        return (1, start.file, start.line, start.col)

    def __str__(self):
        """Render the error, with the source line and a marker if located.

        A located error looks like:

            a.l:1:3: error: unrecognized character '+'
              a+b
              ^
        """
        label = f"{self.red}error:{self.reset} {self.descrip}"
        if not self.range:
            return f"{self.bold}langlex: {label}"

        start, end = self.range.start, self.range.end
        if end.col == start.col:
            marker = "^"
        else:
            marker = "-" * (end.col - start.col + 1)

        return (f"{self.bold}{start.file}:{start.line}:{start.col}: {label}\n"
                f"  {start.full_line}\n"
                f"  {' ' * (start.col - 1)}{self.red}{marker}{self.reset}")
