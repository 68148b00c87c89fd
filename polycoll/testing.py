"""
polycoll.testing - unittest helpers for code using polycoll

Mix CollectionAssertions into a unittest.TestCase to compare containers with
the library's own equality functions:

    class MyTest(CollectionAssertions, unittest.TestCase):
        def test_it(self):
            self.assertCollectionEqual(Ar.vec(Ar.vec(1)), Ar.vec(Ar.vec(1)))
"""

from polycoll import collection as Cl


class CollectionAssertions:
    """Assertion methods backed by `Cl.equals_nested` and `Cl.equals`."""

    def assertCollectionEqual(self, first, second, msg=None):
        """Fail unless `first` and `second` are deeply equal."""
        if not Cl.equals_nested(first, second):
            standard_msg = f"{first!r} != {second!r}"
            self.fail(self._formatMessage(msg, standard_msg))

    def assertCollectionNotEqual(self, first, second, msg=None):
        if Cl.equals_nested(first, second):
            standard_msg = f"{first!r} == {second!r}"
            self.fail(self._formatMessage(msg, standard_msg))

    def assertShallowEqual(self, first, second, msg=None):
        """Fail unless `first` and `second` are equal with nested values compared strictly."""
        if not Cl.equals(first, second):
            standard_msg = f"{first!r} != {second!r} (shallow)"
            self.fail(self._formatMessage(msg, standard_msg))


__all__ = ["CollectionAssertions"]
