import unittest
from unittest.mock import patch

from exam_assistant.extraction.keywords import EXAM_KEYWORDS
from exam_assistant.extraction.topic_guard import is_plausibly_exam_related


class TestTopicGuard(unittest.TestCase):
    def test_matches_keywords_case_insensitively(self):
        self.assertTrue(is_plausibly_exam_related("Add a Data Structures EXAM"))
        self.assertTrue(is_plausibly_exam_related("my MidTerm is next week"))
        self.assertTrue(is_plausibly_exam_related("Lab on friday morning"))

    def test_rejects_chit_chat(self):
        self.assertFalse(is_plausibly_exam_related("hello there, how are you?"))
        self.assertFalse(is_plausibly_exam_related("tell me a joke"))
        self.assertFalse(is_plausibly_exam_related(""))

    def test_ca_keyword_needs_trailing_space(self):
        self.assertFalse(is_plausibly_exam_related("can you sing"))
        self.assertTrue(is_plausibly_exam_related("CA for physics"))

    def test_custom_keyword_table(self):
        self.assertTrue(is_plausibly_exam_related("viva on monday", keywords=("viva",)))
        self.assertFalse(is_plausibly_exam_related("exam on monday", keywords=("viva",)))

    def test_extra_keywords_from_settings(self):
        self.assertFalse(is_plausibly_exam_related("viva tomorrow"))
        with patch(
            "exam_assistant.extraction.topic_guard.settings.extra_topic_keywords",
            return_value=["viva"],
        ):
            self.assertTrue(is_plausibly_exam_related("viva tomorrow"))

    def test_keyword_table_is_lower_case(self):
        for kw in EXAM_KEYWORDS:
            self.assertEqual(kw, kw.lower())


if __name__ == "__main__":
    unittest.main()
