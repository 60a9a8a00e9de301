from datetime import datetime

from volunteer_match.models import ApplicationStatus
from volunteer_match.schemas.base import CamelModel, RequestModel
from volunteer_match.schemas.job import JobSummaryResponse


class ApplyRequest(RequestModel):
    volunteer_id: str = ""
    message: str = ""


class ApplicationResponse(CamelModel):
    id: str
    job_id: str
    volunteer_id: str
    message: str
    status: ApplicationStatus
    created_at: datetime
    updated_at: datetime


class VolunteerApplication(CamelModel):
    application: ApplicationResponse
    job: JobSummaryResponse


class VolunteerApplicationsResponse(CamelModel):
    items: list[VolunteerApplication]
