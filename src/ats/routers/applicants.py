"""Applicant routes."""

from ats.controllers.applicant import applicant_controller
from ats.crud import build_crud_router

applicant_router = build_crud_router(applicant_controller, prefix="/applicants")
