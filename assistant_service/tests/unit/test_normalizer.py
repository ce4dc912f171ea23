import unittest

from exam_assistant.extraction.normalizer import normalize_model_output, strip_code_fences
from exam_assistant.schemas.responses import ParseError


class TestNormalizer(unittest.TestCase):
    def test_strips_json_fence(self):
        self.assertEqual(
            normalize_model_output('```json\n{"status":"off_topic"}\n```'),
            {"status": "off_topic"},
        )

    def test_strips_bare_and_uppercase_fences(self):
        self.assertEqual(normalize_model_output('```\n{"a": 1}\n```'), {"a": 1})
        self.assertEqual(normalize_model_output('```JSON {"a": 1}```'), {"a": 1})

    def test_plain_json_with_whitespace(self):
        self.assertEqual(normalize_model_output('  \n{"status": "incomplete"}\n '), {"status": "incomplete"})

    def test_not_json_yields_parse_error(self):
        result = normalize_model_output("not json")
        self.assertIsInstance(result, ParseError)
        self.assertEqual(result.raw, "not json")

    def test_empty_output_yields_parse_error(self):
        self.assertIsInstance(normalize_model_output(""), ParseError)
        self.assertIsInstance(normalize_model_output("```json\n```"), ParseError)

    def test_non_object_json_yields_parse_error(self):
        self.assertIsInstance(normalize_model_output('["status"]'), ParseError)
        self.assertIsInstance(normalize_model_output("42"), ParseError)

    def test_lenient_repairs_are_not_applied(self):
        self.assertIsInstance(normalize_model_output("{'status': 'off_topic'}"), ParseError)
        self.assertIsInstance(normalize_model_output('Sure! {"status": "off_topic"}'), ParseError)

    def test_strip_code_fences(self):
        self.assertEqual(strip_code_fences('```json\n{"x": 2}\n```  '), '{"x": 2}')


if __name__ == "__main__":
    unittest.main()
