from volunteer_match.schemas.profile import ProfileResponse
from volunteer_match.schemas.auth import LoginRequest, LoginResponse, RegisterRequest
from volunteer_match.schemas.job import (
    CreateJobRequest,
    Feedback,
    FeedbackRequest,
    FeedbackResponse,
    JobDetailResponse,
    JobListResponse,
    JobSummaryResponse,
)
from volunteer_match.schemas.application import (
    ApplicationResponse,
    ApplyRequest,
    VolunteerApplication,
    VolunteerApplicationsResponse,
)

__all__ = [
    "ProfileResponse",
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "CreateJobRequest",
    "Feedback",
    "FeedbackRequest",
    "FeedbackResponse",
    "JobDetailResponse",
    "JobListResponse",
    "JobSummaryResponse",
    "ApplicationResponse",
    "ApplyRequest",
    "VolunteerApplication",
    "VolunteerApplicationsResponse",
]
