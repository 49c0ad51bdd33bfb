"""
Pak argument normalization.

The raw command line is a mix of flags and positional tokens:

    pak -r install --yes hello world

Only positional tokens matter past flag handling: the first one is the query
token resolved against the vocabulary, the rest are forwarded verbatim to the
package manager. Flags (any token starting with one or more '-') are erased,
including the ones pak itself understands (-h/--help, -r/--root), since those
are read earlier by the command line.

Notes
- Every flag token is classified on its own; the tokens that follow a flag are
  positional and survive.
- Relative order of surviving tokens is preserved.
"""
import re

# A token is a flag when it starts with one or more dashes ("-", "--", "-r", "--root", "---x").
FLAG = re.compile(r"-+")


def isflag(token, /):
    """Tell whether a raw token is a flag."""
    if not isinstance(token, str):
        raise TypeError("isflag() argument must be a string")
    return FLAG.match(token) is not None


def normalize(tokens, /):
    """
    Remove flag tokens from a raw argument sequence.

    examples
    - normalize(["-r", "install", "pkg"]) -> ("install", "pkg")
    - normalize(["--root", "install"])    -> ("install",)
    - normalize([])                       -> ()
    """
    if isinstance(tokens, str):
        raise TypeError("normalize() argument must be an iterable of strings, not a string")
    return tuple(token for token in tokens if not isflag(token))


def split(tokens, /):
    """
    Normalize and separate the query token from the pass-through arguments.

    returns
    - (query, arguments): query is None when no positional token is left.
    """
    match normalize(tokens):
        case ():
            return None, ()
        case (query, *arguments):
            return query, tuple(arguments)


__all__ = (
    "FLAG",
    "isflag",
    "normalize",
    "split",
)
