"""
Tests for the internal helpers (Unset, coalesce, mirror, ValueType).

This module verifies:
- Singleton identity and falsy semantics of Unset.
- coalesce() only replaces Unset.
- ValueType instances expose frozen views and refuse assignment after construction.
"""
import unittest
from unittest import TestCase

from pak.utils import Unset, UnsetType, ValueType, coalesce, rename


class Sample(metaclass=ValueType):
    __introspectable__ = ("items", "name")

    def __init__(self, items, name):
        self._items = items
        self._name = name


class UnsetTest(TestCase):
    """
    Test suite for the `Unset` singleton.
    """

    def testSingleton(self) -> None:
        self.assertIs(Unset, UnsetType())

    def testFalsy(self) -> None:
        self.assertFalse(Unset)
        self.assertIsNot(Unset, None)

    def testRepr(self) -> None:
        self.assertEqual(repr(Unset), "Unset")

    def testFinal(self) -> None:
        with self.assertRaises(TypeError):
            type("Subclass", (UnsetType,), {})

    def testUnionCheck(self) -> None:
        self.assertIsInstance(Unset, str | Unset)
        self.assertIsInstance("apt", str | Unset)


class CoalesceTest(TestCase):
    def testReplacesUnsetOnly(self) -> None:
        self.assertEqual(coalesce(Unset, "apt"), "apt")
        self.assertIsNone(coalesce(None, "apt"))
        self.assertEqual(coalesce("", "apt"), "")
        self.assertIsNone(coalesce(Unset))


class RenameTest(TestCase):
    def testFunctionForm(self) -> None:
        def function():
            pass

        self.assertEqual(rename(function, "renamed").__name__, "renamed")

    def testDecoratorForm(self) -> None:
        @rename("renamed")
        def function():
            pass

        self.assertEqual(function.__qualname__, "renamed")

    def testWrongArity(self) -> None:
        with self.assertRaises(TypeError):
            rename()


class ValueTypeTest(TestCase):
    """
    Test suite for value objects built with ValueType.
    """

    def setUp(self) -> None:
        self.sample = Sample(["a", ["b"]], "sample")

    def testMirroredContainersAreFrozen(self) -> None:
        self.assertEqual(self.sample.items, ("a", ("b",)))

    def testBackingFieldNotShared(self) -> None:
        items = self.sample.items
        self.assertIsNot(items, self.sample._items)

    def testAssignmentRefused(self) -> None:
        with self.assertRaises(AttributeError):
            self.sample.name = "other"
        with self.assertRaises(AttributeError):
            self.sample._name = "other"

    def testTypename(self) -> None:
        self.assertEqual(Sample.__typename__, "sample")

    def testRepr(self) -> None:
        self.assertEqual(repr(self.sample), "sample(items=('a', ('b',)), name='sample')")


if __name__ == "__main__":
    unittest.main()
