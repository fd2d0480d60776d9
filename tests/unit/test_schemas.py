"""Tests for request schema validation."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from src.tracker.models import ProjectStatus
from src.tracker.schemas.auth import LoginRequest, RegisterRequest
from src.tracker.schemas.project import ProjectCreate, ProjectUpdate

pytestmark = pytest.mark.unit


class TestRegisterRequest:
    def test_role_is_not_accepted(self):
        request = RegisterRequest.model_validate(
            {"email": "a@example.com", "password": "pw123", "role": "admin"}
        )

        assert not hasattr(request, "role")

    def test_invalid_email(self):
        with pytest.raises(ValidationError):
            RegisterRequest(email="not-an-email", password="pw123")

    def test_empty_password(self):
        with pytest.raises(ValidationError):
            RegisterRequest(email="a@example.com", password="")


class TestProjectCreate:
    def test_defaults(self):
        project = ProjectCreate(name="X")

        assert project.status is ProjectStatus.PLANNING
        assert project.description is None

    def test_owner_is_not_accepted(self):
        project = ProjectCreate.model_validate({"name": "X", "owner": "someone"})

        assert "owner" not in project.model_dump()

    @pytest.mark.parametrize("name", ["", "   ", "x" * 201])
    def test_invalid_name(self, name):
        with pytest.raises(ValidationError):
            ProjectCreate(name=name)

    def test_unknown_status(self):
        with pytest.raises(ValidationError):
            ProjectCreate.model_validate({"name": "X", "status": "archived"})

    def test_status_uses_wire_values(self):
        project = ProjectCreate.model_validate({"name": "X", "status": "on-hold"})

        assert project.status is ProjectStatus.ON_HOLD


class TestProjectUpdate:
    def test_only_set_fields_are_dumped(self):
        patch = ProjectUpdate.model_validate({"status": "completed", "owner": "someone"})

        assert patch.model_dump(exclude_unset=True) == {"status": ProjectStatus.COMPLETED}

    @pytest.mark.parametrize("field", ["name", "status"])
    def test_explicit_null_rejected(self, field):
        with pytest.raises(ValidationError):
            ProjectUpdate.model_validate({field: None})

    def test_description_may_be_cleared(self):
        patch = ProjectUpdate.model_validate({"description": None})

        assert patch.model_dump(exclude_unset=True) == {"description": None}


class TestLoginRequest:
    def test_email_normalized_like_registration(self):
        login = LoginRequest(email="Bob@Example.COM", password="pw123")
        register = RegisterRequest(email="Bob@Example.COM", password="pw123")

        assert login.email == register.email

    @pytest.mark.parametrize("email", [None, "", "   "])
    def test_blank_email_is_missing(self, email):
        assert LoginRequest(email=email, password="pw123").email is None


class TestProjectDates:
    def test_aware_dates_become_naive_utc(self):
        project = ProjectCreate.model_validate(
            {"name": "X", "start_date": "2026-01-01T00:00:00+05:00"}
        )

        assert project.start_date == datetime(2025, 12, 31, 19, 0)
        assert project.start_date.tzinfo is None

    def test_naive_dates_are_kept(self):
        patch = ProjectUpdate.model_validate({"end_date": "2026-03-31T08:30:00"})

        assert patch.end_date == datetime(2026, 3, 31, 8, 30)
