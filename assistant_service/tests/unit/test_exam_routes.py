import unittest

from fastapi import HTTPException

from exam_assistant.api.v1.routes.exams import (
    create_exam,
    delete_exam,
    list_exams,
    toggle_exam_complete,
    update_exam,
)
from exam_assistant.schemas.shared import ExamRecord
from exam_assistant.services.exam_store import InMemoryExamStore

RECORD = ExamRecord(
    code="PH110",
    subject="Physics",
    examType="End Term",
    category="Regular",
    semester=1,
    date="2026-06-02",
    startTime="14:00",
    endTime="17:00",
)


class TestExamRoutes(unittest.TestCase):
    def setUp(self):
        self.store = InMemoryExamStore()

    def test_create_then_list(self):
        created = create_exam(RECORD, user_id="u1", store=self.store)["exam"]
        listed = list_exams(user_id="u1", store=self.store)["exams"]
        self.assertEqual([e.id for e in listed], [created.id])

    def test_update_and_toggle(self):
        exam_id = create_exam(RECORD, user_id="u1", store=self.store)["exam"].id
        changed = RECORD.model_copy(update={"category": "Backlog"})

        self.assertEqual(update_exam(exam_id, changed, user_id="u1", store=self.store)["exam"].category, "Backlog")
        self.assertTrue(toggle_exam_complete(exam_id, user_id="u1", store=self.store)["exam"].completed)

    def test_delete(self):
        exam_id = create_exam(RECORD, user_id="u1", store=self.store)["exam"].id
        self.assertEqual(delete_exam(exam_id, user_id="u1", store=self.store), {"message": "Deleted"})
        self.assertEqual(list_exams(user_id="u1", store=self.store)["exams"], [])

    def test_other_users_exam_is_not_found(self):
        exam_id = create_exam(RECORD, user_id="u1", store=self.store)["exam"].id
        for call in (
            lambda: update_exam(exam_id, RECORD, user_id="u2", store=self.store),
            lambda: delete_exam(exam_id, user_id="u2", store=self.store),
            lambda: toggle_exam_complete(exam_id, user_id="u2", store=self.store),
        ):
            with self.assertRaises(HTTPException) as exc:
                call()
            self.assertEqual(exc.exception.status_code, 404)


if __name__ == "__main__":
    unittest.main()
