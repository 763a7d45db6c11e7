""" Lexical analysis for shell commands. """


def tokenize(line: str) -> list[str]:
    # No quoting or escapes: tokens are runs of non-whitespace.
    return line.split()
