"""Applicant controller."""

from ats.crud import CrudConfig, create_crud_controller
from ats.models.applicant import Applicant
from ats.schemas.applicant import ApplicantCreate, ApplicantUpdate

applicant_config = CrudConfig(
    model=Applicant,
    model_name="Applicant",
    id_field="applicant_id",
    create_schema=ApplicantCreate,
    update_schema=ApplicantUpdate,
)

applicant_controller = create_crud_controller(applicant_config)
