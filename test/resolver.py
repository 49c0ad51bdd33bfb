"""
Command resolver tests (scoring, shortcuts, ties, faults, value objects).

Scope
- Unique best matches, tie sets, and shortcut precedence.
- NoMatchError / InvalidInputError policies.
- Read-only Vocabulary, ShortcutTable and Resolution objects.

Conventions
- Test method names follow CamelCase per project convention.
- Tests use the public API (resolve, Vocabulary, ShortcutTable).
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from pak import (
    resolve,
    jaro,
    Vocabulary,
    ShortcutTable,
    FaultCode,
    NoMatchError,
    InvalidInputError,
    ConfigurationError,
)


class TestResolve(TestCase):
    """Behavioral tests for resolve()."""

    def testUniqueBestMatch(self):
        resolution = resolve("inst", ["install", "remove", "update"])
        self.assertEqual(tuple(resolution), ("install",))
        self.assertEqual(resolution.chosen, "install")
        self.assertFalse(resolution.ambiguous)

    def testExactCommandWins(self):
        resolution = resolve("update", ["install", "remove", "update", "upgrade"])
        self.assertEqual(resolution.chosen, "update")

    def testShortcutMatchComesFirst(self):
        shortcuts = ShortcutTable(["in"], ["install"])
        resolution = resolve("in", ["install", "remove"], shortcuts)
        self.assertEqual(resolution[0], "install")
        # the similarity winner is the same command, so it is not repeated
        self.assertEqual(tuple(resolution), ("install",))

    def testShortcutPrecedesSimilarityWinner(self):
        shortcuts = ShortcutTable(["in"], ["remove"])
        resolution = resolve("in", ["install", "remove"], shortcuts)
        self.assertEqual(tuple(resolution), ("remove", "install"))
        self.assertEqual(resolution.chosen, "remove")
        self.assertTrue(resolution.ambiguous)

    def testEveryMatchingShortcutIncluded(self):
        shortcuts = ShortcutTable(["s", "x", "s", "s"], ["search", "remove", "sync", "search"])
        resolution = resolve("s", ["search", "sync"], shortcuts)
        self.assertEqual(resolution.candidates[:2], ("search", "sync"))

    def testTiesKeptInVocabularyOrder(self):
        resolution = resolve("ad", ["add", "ads"])
        self.assertEqual(tuple(resolution), ("add", "ads"))
        self.assertEqual(resolution.chosen, "add")

    def testTieOrderFollowsVocabulary(self):
        resolution = resolve("ad", ["ads", "add"])
        self.assertEqual(tuple(resolution), ("ads", "add"))

    def testDuplicatedVocabularyEntriesDeduplicated(self):
        resolution = resolve("inst", ["install", "remove", "install"])
        self.assertEqual(tuple(resolution), ("install",))

    def testUnrelatedQueryTiesEverything(self):
        # every score is zero, so the whole vocabulary is the tie set
        resolution = resolve("zzz", ["install", "remove"])
        self.assertEqual(tuple(resolution), ("install", "remove"))

    def testScoresFollowVocabularyOrder(self):
        vocabulary = ["install", "remove", "update"]
        resolution = resolve("inst", vocabulary)
        self.assertEqual([command for command, _ in resolution.scores], vocabulary)
        self.assertEqual(dict(resolution.scores)["install"], jaro("install", "inst"))

    def testAcceptsVocabularyInstance(self):
        resolution = resolve("rem", Vocabulary(["install", "remove"]))
        self.assertEqual(resolution.chosen, "remove")

    def testEmptyVocabularyRaisesNoMatch(self):
        with self.assertRaises(NoMatchError) as context:
            resolve("install", [])
        self.assertEqual(context.exception.options["code"], FaultCode.NO_MATCH)
        self.assertEqual(context.exception.options["query"], "install")

    def testEmptyVocabularyWithShortcut(self):
        resolution = resolve("in", [], ShortcutTable(["in"], ["install"]))
        self.assertEqual(tuple(resolution), ("install",))
        self.assertEqual(resolution.scores, ())

    def testEmptyQueryRejected(self):
        for query in ("", "   "):
            with self.assertRaises(InvalidInputError) as context:
                resolve(query, ["install"])
            self.assertEqual(context.exception.options["code"], FaultCode.INVALID_INPUT)

    def testNonStringQueryRejected(self):
        with self.assertRaises(TypeError):
            resolve(None, ["install"])


class TestResolution(TestCase):
    """Behavioral tests for the Resolution value object."""

    def setUp(self):
        self.resolution = resolve("ad", ["add", "ads", "remove"])

    def testSequenceBehavior(self):
        self.assertEqual(len(self.resolution), 2)
        self.assertIn("ads", self.resolution)
        self.assertNotIn("remove", self.resolution)
        self.assertEqual(self.resolution[-1], "ads")

    def testReadOnly(self):
        with self.assertRaises(AttributeError):
            self.resolution.query = "other"
        with self.assertRaises(AttributeError):
            self.resolution.extra = 1

    def testCandidatesAreTuples(self):
        self.assertIsInstance(self.resolution.candidates, tuple)
        self.assertIsInstance(self.resolution.scores, tuple)

    def testRepresentation(self):
        self.assertEqual(repr(self.resolution), "resolution(query='ad', candidates=('add', 'ads'))")


class TestVocabulary(TestCase):
    """Behavioral tests for the Vocabulary value object."""

    def testOrderKept(self):
        vocabulary = Vocabulary(["remove", "install"])
        self.assertEqual(list(vocabulary), ["remove", "install"])
        self.assertEqual(vocabulary.commands, ("remove", "install"))
        self.assertEqual(vocabulary[0], "remove")

    def testEquality(self):
        self.assertEqual(Vocabulary(["a", "b"]), Vocabulary(("a", "b")))
        self.assertNotEqual(Vocabulary(["a", "b"]), Vocabulary(["b", "a"]))

    def testStringRejected(self):
        with self.assertRaises(TypeError):
            Vocabulary("install")

    def testNonStringEntryRejected(self):
        with self.assertRaises(TypeError):
            Vocabulary(["install", 1])

    def testReadOnly(self):
        vocabulary = Vocabulary(["install"])
        with self.assertRaises(AttributeError):
            vocabulary.commands = ("remove",)


class TestShortcutTable(TestCase):
    """Behavioral tests for the ShortcutTable value object."""

    def testPairsInOrder(self):
        table = ShortcutTable(["rm", "in"], ["remove", "install"])
        self.assertEqual(list(table), [("rm", "remove"), ("in", "install")])
        self.assertEqual(len(table), 2)

    def testLookupKeepsDuplicates(self):
        table = ShortcutTable(["i", "r", "i"], ["install", "remove", "info"])
        self.assertEqual(table.lookup("i"), ("install", "info"))
        self.assertEqual(table.lookup("x"), ())

    def testMismatchedLengthsRejected(self):
        with self.assertRaises(ConfigurationError) as context:
            ShortcutTable(["rm", "in"], ["remove"])
        self.assertEqual(context.exception.options["code"], FaultCode.INVALID_CONFIG)

    def testEmptyByDefault(self):
        self.assertEqual(len(ShortcutTable()), 0)


if __name__ == "__main__":
    unittest.main()
