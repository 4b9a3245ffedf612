"""ATS backend: CRUD REST API for an applicant tracking system."""
