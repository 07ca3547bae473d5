"""Main executable for the langlex tokenizer."""

import argparse
import sys

import langlex.lexer as lexer
import langlex.token_kinds as token_kinds

from langlex.errors import error_collector, LexError
from langlex.keywords import keyword_table


def main(argv=None):
    """Run the main tokenizer script."""
    arguments = get_arguments(argv)

    if arguments.list_keywords:
        for spelling in keyword_table:
            print(spelling)

    for file in arguments.files:
        process_file(file, arguments)

    error_collector.show()
    return 0 if error_collector.ok() else 1


def process_file(file, args):
    """Tokenize a single file and print its tokens.

    Returns the list of tokens, or None if the file could not be read.
    """
    code = read_file(file)
    if code is None:
        return None

    tokens = lexer.tokenize(code, file)
    if not args.quiet:
        for token in tokens:
            print(format_token(token))
    return tokens


def format_token(token):
    """Return the one-line listing for a token, like `a.l:1:4: keyword fn`."""
    if token.kind is token_kinds.identifier:
        label = "identifier"
    else:
        label = "keyword"

    start = token.r.start
    return f"{start.file}:{start.line}:{start.col}: {label} {token.content}"


def get_arguments(argv=None):
    """Get the command-line arguments.

    argv (List[str]) - Arguments to parse. Defaults to sys.argv[1:].
    """
    desc = """Split source files into keyword and identifier tokens. Option
    flags starting with `-z` are primarily for debugging or diagnostic
    purposes."""
    parser = argparse.ArgumentParser(
        description=desc, usage="langlex [-h] [options] files...")

    # Files to tokenize
    parser.add_argument("files", metavar="files", nargs="*")

    parser.add_argument("-z-list-keywords",
                        help="print every reserved word, one per line",
                        dest="list_keywords", action="store_true")

    parser.add_argument("-z-quiet",
                        help="do not print tokens, only diagnostics",
                        dest="quiet", action="store_true")

    arguments = parser.parse_args(argv)
    if not arguments.files and not arguments.list_keywords:
        parser.error("the following arguments are required: files")
    return arguments


def read_file(file):
    """Return the contents of the given file, or None if it can't be read."""
    try:
        with open(file, encoding="utf-8") as source_file:
            return source_file.read()
    except (OSError, UnicodeDecodeError):
        descrip = f"could not read file: '{file}'"
        error_collector.add(LexError(descrip))
        return None


if __name__ == "__main__":
    sys.exit(main())
