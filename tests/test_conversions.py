"""Tests for mimetype and filename resolution."""
import unittest

from drive_uploader.drive.conversions import (
    SPREADSHEET_MIME_TYPE,
    XLSX_MIME_TYPE,
    find_conversion_rule,
    resolve_filename,
    resolve_mimetypes,
)


class TestResolveMimetypes(unittest.TestCase):
    """Test extension-based conversion types."""

    def test_xlsx(self):
        pair = resolve_mimetypes("out/report.xlsx", convert=True)
        self.assertEqual(pair.local, XLSX_MIME_TYPE)
        self.assertEqual(pair.remote, SPREADSHEET_MIME_TYPE)

    def test_csv(self):
        pair = resolve_mimetypes("data.csv", convert=True)
        self.assertEqual(pair.local, "text/csv")
        self.assertEqual(pair.remote, SPREADSHEET_MIME_TYPE)

    def test_disabled(self):
        self.assertIsNone(resolve_mimetypes("report.xlsx", convert=False))

    def test_unrecognized_extension_is_left_alone(self):
        with self.assertLogs("drive_uploader", level="WARNING"):
            self.assertIsNone(resolve_mimetypes("notes.docx", convert=True))

    def test_match_is_case_sensitive(self):
        self.assertIsNone(find_conversion_rule("REPORT.XLSX"))


class TestResolveFilename(unittest.TestCase):
    """Test remote filename derivation."""

    def test_explicit_name_is_verbatim(self):
        self.assertEqual(resolve_filename("out/report.xlsx", "Monthly.xlsx", convert=True), "Monthly.xlsx")

    def test_xlsx_extension_stripped(self):
        self.assertEqual(resolve_filename("report.xlsx", None, convert=True), "report")

    def test_csv_extension_stripped(self):
        self.assertEqual(resolve_filename("exports/data.csv", None, convert=True), "data")

    def test_last_path_segment(self):
        self.assertEqual(resolve_filename("a/b/anything.bin", None, convert=False), "anything.bin")

    def test_extension_kept_without_conversion(self):
        self.assertEqual(resolve_filename("report.xlsx", "", convert=False), "report.xlsx")

    def test_unrecognized_extension_kept_under_conversion(self):
        self.assertEqual(resolve_filename("notes.docx", None, convert=True), "notes.docx")


if __name__ == "__main__":
    unittest.main()
