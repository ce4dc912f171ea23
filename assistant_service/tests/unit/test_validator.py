import unittest

from exam_assistant.schemas.shared import coerce_semester
from exam_assistant.extraction.validator import (
    invalid_fields,
    validate_candidate,
    validate_exam_fields,
    validate_field,
)

VALID_DATA = {
    "code": "CS101",
    "subject": "Data Structures",
    "examType": "Mid Term",
    "category": "Regular",
    "semester": 2,
    "date": "2026-03-10",
    "startTime": "09:00",
    "endTime": "12:00",
}


def complete(**overrides):
    data = dict(VALID_DATA)
    data.update(overrides)
    return {"status": "complete", "data": data}


class TestValidateCandidate(unittest.TestCase):
    def test_valid_payload_returns_record_with_int_semester(self):
        record = validate_candidate(complete())
        self.assertIsNotNone(record)
        self.assertIsInstance(record.semester, int)
        self.assertEqual(record.code, "CS101")
        self.assertEqual(record.date, "2026-03-10")

    def test_string_semester_is_coerced(self):
        record = validate_candidate(complete(semester="2"))
        self.assertEqual(record.semester, 2)
        self.assertIsInstance(record.semester, int)

    def test_missing_any_required_field_is_rejected(self):
        for field in VALID_DATA:
            data = dict(VALID_DATA)
            del data[field]
            with self.subTest(field=field):
                self.assertIsNone(validate_candidate({"status": "complete", "data": data}))

    def test_null_or_empty_values_are_rejected(self):
        self.assertIsNone(validate_candidate(complete(subject="")))
        self.assertIsNone(validate_candidate(complete(code=None)))
        self.assertIsNone(validate_candidate(complete(code="   ")))

    def test_unrecognized_status_is_rejected(self):
        self.assertIsNone(validate_candidate({"status": "done", "data": VALID_DATA}))
        self.assertIsNone(validate_candidate({"data": VALID_DATA}))
        self.assertIsNone(validate_candidate(["not", "a", "dict"]))

    def test_non_complete_statuses_carry_no_record(self):
        self.assertIsNone(validate_candidate({"status": "incomplete", "data": VALID_DATA}))
        self.assertIsNone(validate_candidate({"status": "off_topic"}))

    def test_complete_without_data_object_is_rejected(self):
        self.assertIsNone(validate_candidate({"status": "complete"}))
        self.assertIsNone(validate_candidate({"status": "complete", "data": "CS101"}))

    def test_enum_matching_is_exact_and_case_sensitive(self):
        # Lower-case variants are rejected on purpose; no normalization is applied.
        self.assertIsNone(validate_candidate(complete(examType="mid term")))
        self.assertIsNone(validate_candidate(complete(examType="Midterm")))
        self.assertIsNone(validate_candidate(complete(category="regular")))
        self.assertIsNotNone(validate_candidate(complete(examType="CA", category="Backlog")))

    def test_semester_must_be_positive_integer(self):
        for bad in (0, -1, 1.5, "two", "", True):
            with self.subTest(semester=bad):
                self.assertIsNone(validate_candidate(complete(semester=bad)))

    def test_date_and_time_formats_are_syntactic(self):
        self.assertIsNone(validate_candidate(complete(date="10-03-2026")))
        self.assertIsNone(validate_candidate(complete(date="2026-3-10")))
        self.assertIsNone(validate_candidate(complete(startTime="9:00")))
        self.assertIsNone(validate_candidate(complete(endTime="12:00 PM")))
        # No calendar check: February 30th passes.
        self.assertIsNotNone(validate_candidate(complete(date="2026-02-30")))

    def test_trailing_newline_is_rejected_not_raised(self):
        for overrides in ({"date": "2026-03-10\n"}, {"startTime": "09:00\n"}, {"endTime": "12:00\n"}):
            with self.subTest(overrides=overrides):
                self.assertIsNone(validate_candidate(complete(**overrides)))
        self.assertFalse(validate_field("date", "2026-03-10\n"))
        self.assertEqual(invalid_fields(dict(VALID_DATA, startTime="09:00\n")), ["startTime"])

    def test_time_ordering_is_not_enforced(self):
        # Known gap: an end time before the start time is still accepted.
        record = validate_candidate(complete(startTime="15:00", endTime="09:00"))
        self.assertIsNotNone(record)

    def test_other_fields_pass_through_unchanged(self):
        record = validate_candidate(complete(subject="  Data Structures "))
        self.assertEqual(record.subject, "  Data Structures ")


class TestFieldLevelValidation(unittest.TestCase):
    def test_coerce_semester(self):
        self.assertEqual(coerce_semester(3), 3)
        self.assertEqual(coerce_semester(3.0), 3)
        self.assertEqual(coerce_semester(" 4 "), 4)
        self.assertEqual(coerce_semester("2.0"), 2)
        self.assertIsNone(coerce_semester(False))
        self.assertIsNone(coerce_semester(None))
        self.assertIsNone(coerce_semester(float("nan")))

    def test_validate_field(self):
        self.assertTrue(validate_field("examType", "Lab"))
        self.assertFalse(validate_field("examType", "Viva"))
        self.assertFalse(validate_field("code", 101))
        self.assertFalse(validate_field("room", "B12"))
        self.assertTrue(validate_field("semester", "3"))
        self.assertFalse(validate_field("semester", True))
        self.assertFalse(validate_field("subject", "   "))

    def test_invalid_fields_reports_in_schema_order(self):
        fields = {"code": "CS101", "examType": "lab", "date": "2026-03-10"}
        self.assertEqual(
            invalid_fields(fields),
            ["subject", "examType", "category", "semester", "startTime", "endTime"],
        )
        self.assertEqual(invalid_fields(VALID_DATA), [])

    def test_validate_exam_fields_on_bare_dict(self):
        self.assertIsNotNone(validate_exam_fields(VALID_DATA))
        self.assertIsNone(validate_exam_fields(None))


if __name__ == "__main__":
    unittest.main()
