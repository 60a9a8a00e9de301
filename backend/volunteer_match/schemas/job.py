from volunteer_match.models import JobStatus
from volunteer_match.schemas.base import CamelModel, FiniteFloat, RequestModel
from volunteer_match.schemas.profile import ProfileResponse


class JobSummaryResponse(CamelModel):
    id: str
    title: str
    requester_id: str
    scheduled_on: str
    location: str
    distance_km: float
    tags: list[str]
    status: JobStatus


class JobDetailResponse(JobSummaryResponse):
    description: str
    meeting_point: str
    requirements: list[str]
    latitude: float
    longitude: float
    contact_name: str
    contact_number: str


class JobListResponse(CamelModel):
    jobs: list[JobSummaryResponse]


class CreateJobRequest(RequestModel):
    requester_id: str = ""
    title: str = ""
    scheduled_on: str = ""
    location: str = ""
    meeting_point: str = ""
    description: str = ""
    requirements: list[str] = []
    latitude: FiniteFloat = 0.0
    longitude: FiniteFloat = 0.0


class FeedbackRequest(RequestModel):
    volunteer_id: str = ""
    rating: FiniteFloat = 0.0
    comment: str = ""


class Feedback(CamelModel):
    rating: float
    comment: str


class FeedbackResponse(CamelModel):
    job: JobDetailResponse
    profile: ProfileResponse
    feedback: Feedback
