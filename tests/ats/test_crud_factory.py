"""Unit tests for the CRUD controller with a mocked repository."""

import json
import logging
from unittest.mock import MagicMock

import pytest

from ats.crud.factory import CrudConfig, CrudController, create_crud_controller
from ats.crud.storage import StorageError, StorageOutcome
from ats.models.applicant import Applicant
from ats.schemas.applicant import ApplicantCreate, ApplicantUpdate


def body_of(response) -> dict:
    return json.loads(response.body)


@pytest.fixture
def config():
    return CrudConfig(
        model=Applicant,
        model_name="Applicant",
        id_field="applicant_id",
        default_limit=10,
        max_limit=50,
        create_schema=ApplicantCreate,
        update_schema=ApplicantUpdate,
    )


@pytest.fixture
def controller(config):
    return create_crud_controller(config)


@pytest.fixture
def repo():
    return MagicMock()


class TestCrudConfig:
    """Tests for CrudConfig."""

    def test_defaults(self):
        config = CrudConfig(model=Applicant, model_name="Applicant")
        assert config.id_field == "id"
        assert config.default_limit == 10
        assert config.max_limit == 100
        assert config.create_schema is None

    def test_is_immutable(self, config):
        with pytest.raises(AttributeError):
            config.max_limit = 5

    def test_default_limit_must_fit_max(self):
        with pytest.raises(ValueError):
            CrudConfig(model=Applicant, model_name="Applicant", default_limit=20, max_limit=10)

    def test_independent_instances(self, config):
        first = create_crud_controller(config)
        second = create_crud_controller(
            CrudConfig(model=Applicant, model_name="Candidate", id_field="applicant_id")
        )
        assert first.model_name == "Applicant"
        assert second.model_name == "Candidate"
        assert isinstance(first, CrudController)


class TestList:
    """Tests for list_all."""

    def test_envelope_and_paging(self, controller, repo):
        repo.find_many.return_value = [{"applicant_id": "b"}, {"applicant_id": "a"}]
        repo.count.return_value = 23

        response = controller.list_all(repo, page="2", limit="5")

        assert response.status_code == 200
        body = body_of(response)
        assert body["success"] is True
        assert body["data"]["paging"] == {"total": 23, "page": 2, "limit": 5, "totalPages": 5}
        repo.find_many.assert_called_once_with(
            skip=5, take=5, order_by=[("applicant_id", "desc")], where=None
        )
        repo.count.assert_called_once_with(where=None)

    def test_limit_clamped_and_defaulted(self, controller, repo):
        repo.find_many.return_value = []
        repo.count.return_value = 0

        assert body_of(controller.list_all(repo, limit="500"))["data"]["paging"]["limit"] == 50
        assert body_of(controller.list_all(repo, limit="0"))["data"]["paging"]["limit"] == 10
        assert body_of(controller.list_all(repo, limit="nan"))["data"]["paging"]["limit"] == 10

    def test_storage_failure(self, controller, repo):
        repo.count.side_effect = StorageError(StorageOutcome.UNKNOWN, "db down")
        response = controller.list_all(repo)
        assert response.status_code == 500
        assert body_of(response)["error"] == "Failed to fetch Applicant"


class TestGetById:
    """Tests for get_by_id."""

    def test_blank_id(self, controller, repo):
        response = controller.get_by_id(repo, "  ")
        assert response.status_code == 400
        assert body_of(response)["error"] == "Applicant ID is required"
        repo.find_unique.assert_not_called()

    def test_not_found(self, controller, repo):
        repo.find_unique.return_value = None
        response = controller.get_by_id(repo, "x")
        assert response.status_code == 404
        assert body_of(response)["error"] == "Applicant not found"

    def test_found(self, controller, repo):
        repo.find_unique.return_value = {"applicant_id": "x", "full_name": "Lee"}
        response = controller.get_by_id(repo, "x")
        assert response.status_code == 200
        assert body_of(response)["data"] == {"applicant_id": "x", "full_name": "Lee"}


class TestCreate:
    """Tests for create."""

    def test_validation_failure_never_reaches_storage(self, controller, repo):
        response = controller.create(repo, {"full_name": "", "email": "nope", "extra": 1})

        assert response.status_code == 400
        body = body_of(response)
        assert body["error"] == "Validation failed"
        assert sorted(e["field"] for e in body["errors"]) == ["email", "extra", "full_name"]
        assert repo.mock_calls == []

    def test_success(self, controller, repo):
        repo.create.return_value = {"applicant_id": "new", "full_name": "Lee"}
        response = controller.create(repo, {"full_name": "Lee", "email": "lee@example.com"})

        assert response.status_code == 201
        assert body_of(response)["data"]["applicant_id"] == "new"
        repo.create.assert_called_once_with({"full_name": "Lee", "email": "lee@example.com"})

    def test_without_schema_persists_body_verbatim(self, repo):
        controller = create_crud_controller(CrudConfig(model=Applicant, model_name="Applicant"))
        repo.create.return_value = {"id": 1}
        controller.create(repo, {"anything": "goes"})
        repo.create.assert_called_once_with({"anything": "goes"})

    @pytest.mark.parametrize(
        ("outcome", "status", "message"),
        [
            (StorageOutcome.UNIQUE_VIOLATION, 409, "Applicant with this value already exists"),
            (StorageOutcome.FOREIGN_KEY_VIOLATION, 404, "Related record not found"),
            (StorageOutcome.NOT_FOUND, 404, "Related record not found"),
            (StorageOutcome.UNKNOWN, 500, "Failed to create Applicant"),
        ],
    )
    def test_storage_outcomes(self, controller, repo, outcome, status, message):
        repo.create.side_effect = StorageError(outcome, "driver detail")
        response = controller.create(repo, {"full_name": "Lee", "email": "lee@example.com"})
        assert response.status_code == status
        assert body_of(response)["error"] == message

    def test_unexpected_error_is_logged_not_leaked(self, controller, repo, caplog):
        repo.create.side_effect = RuntimeError("secret connection string")
        with caplog.at_level(logging.ERROR):
            response = controller.create(repo, {"full_name": "Lee", "email": "lee@example.com"})

        assert response.status_code == 500
        assert "secret" not in response.body.decode()
        assert "secret connection string" in caplog.text


class TestUpdate:
    """Tests for update."""

    def test_missing_record_skips_write(self, controller, repo):
        repo.find_unique.return_value = None
        response = controller.update(repo, "missing", {"phone": "1"})

        assert response.status_code == 404
        assert body_of(response)["error"] == "Applicant not found"
        repo.update.assert_not_called()

    def test_validation_failure_skips_storage(self, controller, repo):
        response = controller.update(repo, "x", {"email": "bad"})
        assert response.status_code == 400
        assert repo.mock_calls == []

    def test_blank_id(self, controller, repo):
        response = controller.update(repo, "", {"phone": "1"})
        assert response.status_code == 400
        assert repo.mock_calls == []

    def test_writes_only_given_fields(self, controller, repo):
        repo.find_unique.return_value = {"applicant_id": "x"}
        repo.update.return_value = {"applicant_id": "x", "phone": "1"}
        response = controller.update(repo, "x", {"phone": "1"})

        assert response.status_code == 200
        repo.update.assert_called_once_with("x", {"phone": "1"})

    def test_null_for_required_column_rejected(self, controller, repo):
        response = controller.update(repo, "x", {"full_name": None})

        assert response.status_code == 400
        assert body_of(response)["errors"] == [
            {"field": "full_name", "message": "Field cannot be null"}
        ]
        assert repo.mock_calls == []

    def test_null_for_nullable_column_written(self, controller, repo):
        repo.find_unique.return_value = {"applicant_id": "x", "phone": "1"}
        repo.update.return_value = {"applicant_id": "x", "phone": None}
        response = controller.update(repo, "x", {"phone": None})

        assert response.status_code == 200
        repo.update.assert_called_once_with("x", {"phone": None})

    def test_concurrent_delete_maps_to_not_found(self, controller, repo):
        repo.find_unique.return_value = {"applicant_id": "x"}
        repo.update.side_effect = StorageError(StorageOutcome.NOT_FOUND)
        response = controller.update(repo, "x", {"phone": "1"})
        assert response.status_code == 404

    def test_unique_violation(self, controller, repo):
        repo.find_unique.return_value = {"applicant_id": "x"}
        repo.update.side_effect = StorageError(StorageOutcome.UNIQUE_VIOLATION)
        response = controller.update(repo, "x", {"email": "taken@example.com"})
        assert response.status_code == 409


class TestDelete:
    """Tests for delete."""

    def test_deletes_without_precheck(self, controller, repo):
        repo.delete.return_value = {"applicant_id": "x", "full_name": "Lee"}
        response = controller.delete(repo, "x")

        assert response.status_code == 200
        assert body_of(response)["data"]["full_name"] == "Lee"
        repo.find_unique.assert_not_called()

    def test_not_found(self, controller, repo):
        repo.delete.side_effect = StorageError(StorageOutcome.NOT_FOUND)
        assert controller.delete(repo, "x").status_code == 404

    def test_still_referenced(self, controller, repo):
        repo.delete.side_effect = StorageError(StorageOutcome.FOREIGN_KEY_VIOLATION)
        response = controller.delete(repo, "x")
        assert response.status_code == 409
        assert body_of(response)["error"] == "Applicant is referenced by other records"

    def test_unknown_failure(self, controller, repo):
        repo.delete.side_effect = StorageError(StorageOutcome.UNKNOWN)
        response = controller.delete(repo, "x")
        assert response.status_code == 500
        assert body_of(response)["error"] == "Failed to delete Applicant"
