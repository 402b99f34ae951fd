"""
Application intake: POST /api/applicants.
Run: pytest tests/test_applicants.py -v
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from conftest import PDF_BYTES, application_form
from satrecruit.db import crud
from satrecruit.db.seed import seed_departments
from satrecruit.main import app
from satrecruit.utils.file_upload import resolve_resume_path

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def applicant_count(client, headers):
    return len(client.get("/api/admin/applicants", headers=headers).json())


class TestSubmitWithoutResume:

    def test_first_applicant_scenario(self):
        seed_departments([{
            "name": "POWER SYSTEM",
            "description": "Power generation and distribution.",
            "icon": "bolt",
            "color": "#FFC857",
            "requirements": [],
            "responsibilities": [],
        }])
        form = {
            "firstName": "Ada",
            "lastName": "Lovelace",
            "email": "ada@example.com",
            "departmentId": "1",
            "experience": "1-3",
            "skills": "C,Math",
        }
        with TestClient(app) as client:
            response = client.post("/api/applicants", data=form)

        assert response.status_code == 201, response.text
        body = response.json()
        assert body["id"] == 1
        assert body["departmentId"] == 1
        assert body["createdAt"]
        assert body["resumePath"] is None

    def test_echoes_submitted_fields(self, client):
        form = application_form()
        response = client.post("/api/applicants", data=form)

        assert response.status_code == 201
        body = response.json()
        for field in ("firstName", "lastName", "email", "phone", "experience", "skills", "coverLetter"):
            assert body[field] == form[field]
        assert body["departmentId"] == 1
        assert body["resumePath"] is None

    def test_values_are_trimmed(self, client):
        response = client.post(
            "/api/applicants", data=application_form(firstName="  Ada  ", email=" ada@example.com ")
        )
        assert response.status_code == 201
        assert response.json()["firstName"] == "Ada"
        assert response.json()["email"] == "ada@example.com"

    def test_blank_optional_fields_become_null(self, client):
        response = client.post("/api/applicants", data=application_form(phone="  ", coverLetter=""))
        assert response.status_code == 201
        assert response.json()["phone"] is None
        assert response.json()["coverLetter"] is None


class TestValidation:

    def test_invalid_email_names_field(self, client, admin_headers):
        response = client.post("/api/applicants", data=application_form(email="not-an-email"))

        assert response.status_code == 400
        assert set(response.json()["errors"]) == {"email"}
        assert applicant_count(client, admin_headers) == 0

    def test_errors_are_aggregated(self, client):
        form = application_form(firstName="", lastName=None, skills="   ", email="a@b")
        response = client.post("/api/applicants", data=form)

        assert response.status_code == 400
        errors = response.json()["errors"]
        assert set(errors) == {"firstName", "lastName", "skills", "email"}
        assert errors["firstName"] == "First name is required"

    def test_non_numeric_department(self, client):
        response = client.post("/api/applicants", data=application_form(departmentId="power"))
        assert response.status_code == 400
        assert response.json()["errors"]["departmentId"] == "Department must be a number"

    @pytest.mark.parametrize("department_id", ["0", "-1", "99999999999999999999"])
    def test_out_of_range_department(self, client, admin_headers, department_id):
        response = client.post("/api/applicants", data=application_form(departmentId=department_id))

        assert response.status_code == 400
        assert response.json()["errors"] == {"departmentId": "Department must be a number"}
        assert applicant_count(client, admin_headers) == 0

    def test_unknown_department(self, client, admin_headers):
        response = client.post("/api/applicants", data=application_form(departmentId="42"))

        assert response.status_code == 400
        assert response.json()["errors"] == {"departmentId": "Selected department does not exist"}
        assert applicant_count(client, admin_headers) == 0

    def test_unknown_department_reported_with_other_errors(self, client):
        response = client.post(
            "/api/applicants", data=application_form(departmentId="42", experience="")
        )
        assert response.status_code == 400
        assert set(response.json()["errors"]) == {"departmentId", "experience"}

    def test_invalid_form_does_not_store_file(self, client, upload_dir):
        response = client.post(
            "/api/applicants",
            data=application_form(email="nope"),
            files={"resume": ("cv.pdf", PDF_BYTES, "application/pdf")},
        )
        assert response.status_code == 400
        assert list(upload_dir.iterdir()) == []


class TestResumeUpload:

    @pytest.mark.parametrize("filename,mime", [
        ("cv.pdf", "application/pdf"),
        ("cv.doc", "application/msword"),
        ("cv.docx", DOCX_MIME),
    ])
    def test_accepted_types_are_stored(self, client, filename, mime):
        response = client.post(
            "/api/applicants",
            data=application_form(),
            files={"resume": (filename, PDF_BYTES, mime)},
        )

        assert response.status_code == 201, response.text
        resume_path = response.json()["resumePath"]
        assert resume_path.startswith("uploads/")
        assert resume_path.endswith(filename)
        assert resolve_resume_path(resume_path).read_bytes() == PDF_BYTES

    def test_wrong_type_rejected(self, client, admin_headers, upload_dir):
        response = client.post(
            "/api/applicants",
            data=application_form(),
            files={"resume": ("cv.png", b"\x89PNG....", "image/png")},
        )

        assert response.status_code == 400
        assert "PDF, DOC, and DOCX" in response.json()["detail"]
        assert applicant_count(client, admin_headers) == 0
        assert list(upload_dir.iterdir()) == []

    def test_15_mib_file_rejected(self, client, admin_headers, upload_dir):
        big = b"0" * (15 * 1024 * 1024)
        response = client.post(
            "/api/applicants",
            data=application_form(),
            files={"resume": ("huge.pdf", big, "application/pdf")},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "File too large. Maximum size: 10MB"
        assert applicant_count(client, admin_headers) == 0
        assert list(upload_dir.iterdir()) == []

    def test_empty_file_part_means_no_resume(self, client):
        response = client.post(
            "/api/applicants",
            data=application_form(),
            files={"resume": ("", b"", "application/octet-stream")},
        )
        assert response.status_code == 201
        assert response.json()["resumePath"] is None

    def test_path_components_are_stripped_from_name(self, client, upload_dir):
        response = client.post(
            "/api/applicants",
            data=application_form(),
            files={"resume": ("../../etc/cv.pdf", PDF_BYTES, "application/pdf")},
        )
        assert response.status_code == 201
        stored = list(upload_dir.iterdir())
        assert len(stored) == 1
        assert stored[0].name.endswith("-cv.pdf")

    def test_same_name_uploads_do_not_collide(self, client, upload_dir):
        for _ in range(3):
            client.post(
                "/api/applicants",
                data=application_form(),
                files={"resume": ("cv.pdf", PDF_BYTES, "application/pdf")},
            )
        assert len(list(upload_dir.iterdir())) == 3

    def test_failed_insert_removes_stored_file(self, client, upload_dir, monkeypatch):
        def broken_insert(*args, **kwargs):
            raise OperationalError("INSERT INTO applicants", {}, Exception("connection lost"))

        monkeypatch.setattr(crud, "create_applicant", broken_insert)
        response = client.post(
            "/api/applicants",
            data=application_form(),
            files={"resume": ("cv.pdf", PDF_BYTES, "application/pdf")},
        )

        assert response.status_code == 500
        assert response.json() == {"detail": "Data store unavailable"}
        assert list(upload_dir.iterdir()) == []


def test_supported_formats(client):
    body = client.get("/api/applicants/resume/formats").json()
    assert body["max_size_mb"] == 10
    assert {f["extension"] for f in body["supported_formats"]} == {".pdf", ".doc", ".docx"}
