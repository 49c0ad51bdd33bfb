"""
String similarity used to match typed sub-commands against the configured vocabulary.

Scope
- jaro(a, b): Jaro similarity in [0, 1].
- jaro_winkler(a, b, boost_threshold, prefix_size): Jaro with the Winkler common-prefix bonus.

Notes
- Command names are short (3 to 12 characters), so both functions favor a plain,
  readable double loop over anything clever.
- The match window is one narrower than the textbook max(la, lb) // 2 - 1. Scores
  are therefore not comparable with other Jaro implementations, only with each other.
"""


def jaro(a, b, /):
    """
    Return the Jaro similarity between a and b.

    algorithm
    - window: w = max(0, max(la, lb) // 2 - 2).
    - for every position i of a, claim the first unclaimed position j of b within
      [i - w, i + w] holding the same character; that is a match, and a
      half-transposition when i != j.
    - no matches: 0.0. otherwise, with t = halfs // 2:
        (m / la + m / lb + (m - t) / m) / 3

    examples
    - jaro("install", "install") -> 1.0
    - jaro("install", "")        -> 0.0
    """
    la = len(a)
    lb = len(b)

    window = max(0, max(la, lb) // 2 - 2)
    claimed = [False] * lb
    matches = halfs = 0

    for i in range(la):
        for j in range(max(0, i - window), min(lb - 1, i + window) + 1):
            if claimed[j] or a[i] != b[j]:
                continue
            if i != j:
                halfs += 1
            matches += 1
            claimed[j] = True
            break

    if not matches:
        return 0.0

    transpositions = halfs // 2

    return (matches / la + matches / lb + (matches - transpositions) / matches) / 3.0


def jaro_winkler(a, b, /, boost_threshold, prefix_size):
    """
    Return the Jaro-Winkler similarity between a and b.

    The Jaro score is returned unchanged when it does not exceed boost_threshold.
    Above it, the score is raised by 0.1 per leading character the strings share,
    counting at most min(len(a), len(b), prefix_size) characters:

        j + 0.1 * prefix * (1 - j)

    The resolver calls this with boost_threshold=1 and prefix_size=0, which can
    never boost (jaro never exceeds 1), so resolution ranks by plain Jaro.
    """
    score = jaro(a, b)

    if score <= boost_threshold:
        return score

    prefix = 0
    for left, right in zip(a[:prefix_size], b[:prefix_size]):
        if left != right:
            break
        prefix += 1

    return score + 0.1 * prefix * (1.0 - score)


__all__ = (
    "jaro",
    "jaro_winkler",
)
