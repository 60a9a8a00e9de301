from volunteer_match.models.profile import UserProfile, UserRole
from volunteer_match.models.job import JobDetail, JobStatus, JobSummary
from volunteer_match.models.application import Application, ApplicationStatus

__all__ = [
    "UserProfile",
    "UserRole",
    "JobSummary",
    "JobDetail",
    "JobStatus",
    "Application",
    "ApplicationStatus",
]
