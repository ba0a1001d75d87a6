from django.test import TestCase

from sheetsync.properties import document_properties
from sheetsync.tracker import STORED_IDS_KEY, DeletionTracker


class TestDeletionTracker(TestCase):
    def setUp(self):
        self.store = document_properties("doc-1")
        self.tracker = DeletionTracker(self.store)

    def test_diff_reports_removed_ids(self):
        self.tracker.snapshot(["1", "2", "3"])
        self.assertEqual(self.tracker.diff({"1", "3"}), ["2"])

    def test_diff_keeps_snapshot_order(self):
        self.tracker.snapshot(["9", "4", "7", "1"])
        self.assertEqual(self.tracker.diff(["4"]), ["9", "7", "1"])

    def test_no_snapshot_reports_nothing(self):
        self.assertEqual(self.tracker.diff({"1"}), [])
        self.assertEqual(self.tracker.diff(set()), [])

    def test_clear_then_diff_reports_nothing(self):
        self.tracker.snapshot(["1", "2"])
        self.tracker.clear()
        self.assertEqual(self.tracker.diff(set()), [])

    def test_snapshot_replaces_previous(self):
        self.tracker.snapshot(["1", "2"])
        self.tracker.snapshot(["5"])
        self.assertEqual(self.tracker.diff(set()), ["5"])

    def test_snapshot_stores_json_array_of_strings(self):
        self.tracker.snapshot([10, "11", "", "10"])
        self.assertEqual(self.store.get(STORED_IDS_KEY), '["10", "11"]')

    def test_numeric_and_string_ids_compare_equal(self):
        self.tracker.snapshot([1, 2])
        self.assertEqual(self.tracker.diff(["1"]), ["2"])

    def test_unreadable_snapshot_is_ignored(self):
        self.store.set(STORED_IDS_KEY, "{not json")
        self.assertEqual(self.tracker.diff([]), [])
        self.store.set(STORED_IDS_KEY, '{"1": true}')
        self.assertEqual(self.tracker.diff([]), [])

    def test_documents_are_isolated(self):
        self.tracker.snapshot(["1"])
        other = DeletionTracker(document_properties("doc-2"))
        self.assertEqual(other.diff([]), [])

    def test_snapshot_with_non_id_items_is_ignored(self):
        self.store.set(STORED_IDS_KEY, '[{"a": 1}]')
        self.assertEqual(self.tracker.diff([]), [])
        self.store.set(STORED_IDS_KEY, '["1", true]')
        self.assertEqual(self.tracker.diff([]), [])

    def test_snapshot_with_numeric_ids_is_read(self):
        self.store.set(STORED_IDS_KEY, '[1, "2"]')
        self.assertEqual(self.tracker.diff([]), ["1", "2"])
