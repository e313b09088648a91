"""Tests for test method enumeration and method filters."""

from tally.assertions import passed
from tally.testing import ExclusionReason, Filters, TestCase, TestEntry, select_methods


class Base(TestCase):
    def test_base(self):
        return passed()

    def test_overridden(self):
        return passed()


class Sample(Base):
    label = "not callable"
    test_attribute = "also not callable"

    def test_zeta(self):
        return passed()

    def helper(self):
        return passed()

    def test_alpha(self):
        return passed()

    def test_overridden(self):
        return passed()

    def _test_private(self):
        return passed()

    def testnoprefix(self):
        return passed()


class TestIterTests:
    def test_lists_prefixed_callables_in_declaration_order(self):
        names = [entry.name for entry in Sample().iter_tests()]

        assert names == ["test_base", "test_overridden", "test_zeta", "test_alpha"]

    def test_entries_are_bound_methods(self):
        unit = Sample()
        entry = unit.iter_tests()[0]

        assert isinstance(entry, TestEntry)
        assert entry.fn.__self__ is unit

    def test_empty_case(self):
        assert TestCase().iter_tests() == []


class TestSelectMethods:
    def test_no_filters_selects_everything(self):
        outcome = select_methods(Sample(), "sample.py", Filters())

        assert outcome.selected_names == ["test_base", "test_overridden", "test_zeta", "test_alpha"]
        assert outcome.excluded == []

    def test_method_blacklist(self):
        outcome = select_methods(Sample(), "sample.py", Filters(exclude_method="test_*a*"))

        assert outcome.selected_names == ["test_overridden"]
        assert {e.name for e in outcome.excluded} == {"test_base", "test_zeta", "test_alpha"}
        assert all(e.reason is ExclusionReason.BLACKLIST for e in outcome.excluded)

    def test_method_whitelist(self):
        outcome = select_methods(Sample(), "sample.py", Filters(include_method="test_?eta"))

        assert outcome.selected_names == ["test_zeta"]
        assert all(e.reason is ExclusionReason.WHITELIST_MISS for e in outcome.excluded)

    def test_blacklist_checked_before_whitelist(self):
        outcome = select_methods(
            Sample(),
            "sample.py",
            Filters(include_method="test_zeta", exclude_method="test_zeta"),
        )

        reasons = {e.name: e.reason for e in outcome.excluded}
        assert outcome.selected_names == []
        assert reasons["test_zeta"] is ExclusionReason.BLACKLIST
        assert reasons["test_alpha"] is ExclusionReason.WHITELIST_MISS

    def test_whitelist_cannot_admit_unprefixed_methods(self):
        outcome = select_methods(Sample(), "sample.py", Filters(include_method="*"))

        assert "helper" not in outcome.selected_names
        assert "testnoprefix" not in outcome.selected_names
        assert "_test_private" not in outcome.selected_names

    def test_prefix_enforced_for_custom_units(self):
        class Custom:
            def iter_tests(self):
                return [
                    TestEntry(name="check_one", fn=lambda: None),
                    TestEntry(name="test_two", fn=lambda: None),
                ]

        outcome = select_methods(Custom(), "custom.py", Filters())

        assert outcome.selected_names == ["test_two"]
        assert outcome.file_name == "custom.py"
