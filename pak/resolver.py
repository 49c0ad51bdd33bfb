"""
Pak command resolution: map a typed, possibly abbreviated query token to canonical commands.

What this module provides
- Vocabulary: ordered canonical commands (order is tie-break priority).
- ShortcutTable: index-aligned aliases and the canonical command each one maps to.
- Resolution: immutable ordered set of candidates for one query, plus the scores behind it.
- resolve(query, vocabulary, shortcuts): the resolution algorithm.

Algorithm
1. Score every vocabulary command against the query with jaro_winkler(command, query, 1, 0).
2. Append the mapping of every shortcut whose alias equals the query.
3. Append every vocabulary command whose score equals the best score exactly.
4. Nothing appended means NoMatchError.

Candidates are deduplicated by value and keep insertion order, so shortcut
matches always precede similarity matches. All ties are recorded; the first
candidate is the one acted upon.
"""
from .distance import jaro_winkler
from .faults import FaultCode, NoMatchError, InvalidInputError, ConfigurationError
from .utils import ValueType

# Parameters the resolver hands to jaro_winkler. A threshold of 1 means the
# prefix boost never applies, so ranking is plain Jaro.
BOOST_THRESHOLD = 1
PREFIX_SIZE = 0


def _strings(iterable, what, /):
    if isinstance(iterable, str):
        raise TypeError(f"{what} must be an iterable of strings, not a string")
    items = tuple(iterable)
    for item in items:
        if not isinstance(item, str):
            raise TypeError(f"{what} must only contain strings")
    return items


class Vocabulary(metaclass=ValueType):
    """
    Ordered, read-only sequence of canonical commands.

    Uniqueness is not enforced; a duplicated command only shows up once in a
    resolution because candidates are deduplicated by value.
    """
    __introspectable__ = ("commands",)

    def __init__(self, commands=(), /):
        self._commands = _strings(commands, "vocabulary commands")

    def __iter__(self):
        return iter(self._commands)

    def __len__(self):
        return len(self._commands)

    def __getitem__(self, index):
        return self._commands[index]

    def __contains__(self, command):
        return command in self._commands

    def __eq__(self, other):
        if not isinstance(other, Vocabulary):
            return NotImplemented
        return self._commands == other._commands

    def __hash__(self):
        return hash(self._commands)


class ShortcutTable(metaclass=ValueType):
    """
    Aliases mapped to canonical commands, kept as two index-aligned sequences.

    An alias may appear more than once; every mapping of a matching alias is a
    candidate, in table order.
    """
    __introspectable__ = ("shortcuts", "mappings")

    def __init__(self, shortcuts=(), mappings=(), /):
        shortcuts = _strings(shortcuts, "shortcuts")
        mappings = _strings(mappings, "shortcut mappings")
        if len(shortcuts) != len(mappings):
            raise ConfigurationError(
                "%d shortcuts but %d shortcut mappings" % (len(shortcuts), len(mappings)),
                title="mismatched shortcuts",
                code=FaultCode.INVALID_CONFIG,
                hint="give every entry of 'shortcuts' exactly one entry in 'shortcutMappings'",
            )
        self._shortcuts = shortcuts
        self._mappings = mappings

    def lookup(self, alias, /):
        """Return the mappings of every shortcut equal to alias, in table order."""
        return tuple(mapping for shortcut, mapping in self if shortcut == alias)

    def __iter__(self):
        return zip(self._shortcuts, self._mappings)

    def __len__(self):
        return len(self._shortcuts)

    def __eq__(self, other):
        if not isinstance(other, ShortcutTable):
            return NotImplemented
        return (self._shortcuts, self._mappings) == (other._shortcuts, other._mappings)

    def __hash__(self):
        return hash((self._shortcuts, self._mappings))


class Resolution(metaclass=ValueType):
    """
    Outcome of resolving one query token.

    fields
    - query: the token that was resolved.
    - candidates: canonical commands, shortcut matches first, then the tie set.
    - scores: (command, score) pairs in vocabulary order.

    A resolution behaves like a read-only sequence of its candidates.
    """
    __introspectable__ = ("query", "candidates", "scores")
    __displayable__ = ("query", "candidates")

    def __init__(self, query, candidates, scores=()):
        self._query = query
        self._candidates = tuple(dict.fromkeys(candidates))
        self._scores = tuple(scores)

    @property
    def chosen(self):
        """The candidate that gets executed."""
        return self._candidates[0]

    @property
    def ambiguous(self):
        return len(self._candidates) > 1

    def __iter__(self):
        return iter(self._candidates)

    def __len__(self):
        return len(self._candidates)

    def __getitem__(self, index):
        return self._candidates[index]

    def __contains__(self, command):
        return command in self._candidates


def resolve(query, vocabulary, shortcuts=None, /):
    """
    Resolve a query token against the vocabulary and the shortcut table.

    parameters
    - query: str, the first non-flag argument typed by the user.
    - vocabulary: Vocabulary or an iterable of command strings.
    - shortcuts: ShortcutTable or None (no shortcuts).

    returns
    - Resolution whose first candidate is the command to run.

    raises
    - InvalidInputError: the query is empty or blank.
    - NoMatchError: no shortcut matched and the vocabulary is empty.
    - TypeError: query is not a string.
    """
    if not isinstance(query, str):
        raise TypeError("resolve() query must be a string")
    if not query.strip():
        raise InvalidInputError(
            "empty command given",
            title="empty command",
            code=FaultCode.INVALID_INPUT,
            hint="run 'pak --help' to see available commands",
            query=query,
        )
    if not isinstance(vocabulary, Vocabulary):
        vocabulary = Vocabulary(vocabulary)
    if shortcuts is None:
        shortcuts = ShortcutTable()

    scores = tuple((command, jaro_winkler(command, query, BOOST_THRESHOLD, PREFIX_SIZE)) for command in vocabulary)

    candidates = list(shortcuts.lookup(query))

    if scores:
        best = max(score for _, score in scores)
        # exact equality: every score comes from the same formula, ties are real ties
        candidates.extend(command for command, score in scores if score == best)

    if not candidates:
        raise NoMatchError(
            "command %r does not match any known commands or shortcuts" % query,
            title="no matching command",
            code=FaultCode.NO_MATCH,
            hint="check the 'commands' list of your configuration",
            query=query,
        )

    return Resolution(query, candidates, scores)


__all__ = (
    "BOOST_THRESHOLD",
    "PREFIX_SIZE",
    "Vocabulary",
    "ShortcutTable",
    "Resolution",
    "resolve",
)
