"""Student API resources."""

import falcon
import falcon.asgi

from advising.application.dto.student_dto import StudentCreateInput, StudentUpdateInput
from advising.application.use_cases.student.create_student import CreateStudentUseCase
from advising.application.use_cases.student.delete_student import DeleteStudentUseCase
from advising.application.use_cases.student.update_student import UpdateStudentUseCase
from advising.domain.entities import Student
from advising.domain.exceptions import NotFound
from advising.interfaces.api.envelope import respond
from advising.interfaces.api.params import (
    isoformat,
    optional_str,
    parse_cohort,
    read_object,
)

# Leading option the dashboard filters expect.
ALL_STUDENTS = {"id": "all", "firstName": "All", "lastName": "Students", "program": ""}


def student_to_media(s: Student) -> dict:
    return {
        "id": s.id,
        "firstName": s.first_name,
        "lastName": s.last_name,
        "program": s.program,
        "email": s.email,
        "cohort": s.cohort,
        "createdAt": isoformat(s.created_at),
        "updatedAt": isoformat(s.updated_at),
    }


class StudentsResource:
    """GET/POST /api/students - list and create students."""

    def __init__(self, unit_of_work_factory: type, create_student: CreateStudentUseCase) -> None:
        self._uow_factory = unit_of_work_factory
        self._create_student = create_student

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List students ordered by first name."""
        async with self._uow_factory() as uow:
            students = await uow.students.list_all()
        respond(req, resp, [ALL_STUDENTS] + [student_to_media(s) for s in students])

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create student."""
        body = await read_object(req)
        data = StudentCreateInput(
            id=optional_str(body, "id"),
            first_name=optional_str(body, "firstName"),
            last_name=optional_str(body, "lastName"),
            program=optional_str(body, "program"),
            email=optional_str(body, "email"),
            cohort=parse_cohort(body.get("cohort")),
        )
        student = await self._create_student.execute(data)
        respond(req, resp, student_to_media(student), falcon.HTTP_201)


class StudentResource:
    """GET/PUT/DELETE /api/students/{student_id}."""

    def __init__(
        self,
        unit_of_work_factory: type,
        update_student: UpdateStudentUseCase,
        delete_student: DeleteStudentUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._update_student = update_student
        self._delete_student = delete_student

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, student_id: str
    ) -> None:
        async with self._uow_factory() as uow:
            student = await uow.students.get_by_id(student_id)
        if not student:
            raise NotFound("Student", student_id)
        respond(req, resp, student_to_media(student))

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, student_id: str
    ) -> None:
        body = await read_object(req)
        data = StudentUpdateInput(
            first_name=optional_str(body, "firstName"),
            last_name=optional_str(body, "lastName"),
            email=optional_str(body, "email"),
            cohort=parse_cohort(body.get("cohort")),
        )
        student = await self._update_student.execute(student_id, data)
        respond(req, resp, student_to_media(student))

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, student_id: str
    ) -> None:
        await self._delete_student.execute(student_id)
        respond(req, resp, {"message": "Student deleted successfully"})
