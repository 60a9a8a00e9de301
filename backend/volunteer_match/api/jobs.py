import logging

from fastapi import APIRouter, Depends, HTTPException, status

from volunteer_match.middleware.metrics import (
    APPLICATIONS_SUBMITTED,
    JOBS_COMPLETED,
    JOBS_CREATED,
)
from volunteer_match.models import Application, ApplicationStatus, JobDetail, JobStatus
from volunteer_match.schemas import (
    ApplicationResponse,
    ApplyRequest,
    CreateJobRequest,
    Feedback,
    FeedbackRequest,
    FeedbackResponse,
    JobDetailResponse,
    JobListResponse,
    JobSummaryResponse,
    ProfileResponse,
)
from volunteer_match.services.store import MemoryStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=JobListResponse)
def list_jobs(store: MemoryStore = Depends(get_store)):
    with store.read():
        return JobListResponse(
            jobs=[JobSummaryResponse.model_validate(job.summary()) for job in store.jobs.values()]
        )


@router.get("/{job_id}", response_model=JobDetailResponse)
def get_job(job_id: str, store: MemoryStore = Depends(get_store)):
    with store.read():
        job = store.jobs.get(job_id)
        if not job:
            raise HTTPException(status_code=404, detail="job not found")

        return JobDetailResponse.model_validate(job)


@router.post("", response_model=JobDetailResponse, status_code=status.HTTP_201_CREATED)
def create_job(request: CreateJobRequest, store: MemoryStore = Depends(get_store)):
    if not request.requester_id or not request.title.strip():
        raise HTTPException(status_code=400, detail="requesterId and title are required")

    with store.write():
        requester = store.users.get(request.requester_id)
        if not requester:
            raise HTTPException(status_code=400, detail="requester profile missing")

        job = JobDetail(
            id=store.ids.job_id(len(store.jobs), store.jobs),
            title=request.title,
            requester_id=request.requester_id,
            scheduled_on=request.scheduled_on,
            location=request.location,
            distance_km=0.0,
            # Summary tags mirror the requirements list
            tags=list(request.requirements),
            status=JobStatus.OPEN,
            description=request.description,
            meeting_point=request.meeting_point,
            requirements=list(request.requirements),
            latitude=request.latitude,
            longitude=request.longitude,
            # Snapshot, not kept in sync with later profile edits
            contact_name=requester.full_name,
            contact_number=requester.phone,
        )
        store.jobs[job.id] = job
        response = JobDetailResponse.model_validate(job)

    JOBS_CREATED.inc()
    logger.info(f"Created {job.id} for {job.requester_id}")
    return response


@router.post("/{job_id}/apply", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
def apply_to_job(
    job_id: str,
    request: ApplyRequest,
    store: MemoryStore = Depends(get_store),
):
    with store.write():
        job = store.jobs.get(job_id)
        if not job:
            raise HTTPException(status_code=404, detail="job not found")

        if request.volunteer_id not in store.users:
            raise HTTPException(status_code=400, detail="volunteer profile missing")

        now = store.clock.now()
        application = Application(
            id=store.ids.application_id(job_id, request.volunteer_id),
            job_id=job_id,
            volunteer_id=request.volunteer_id,
            message=request.message,
            status=ApplicationStatus.PENDING,
            created_at=now,
            updated_at=now,
        )
        # Same job/volunteer pair replaces the earlier application
        store.applications[application.id] = application

        job.status = JobStatus.IN_REVIEW
        response = ApplicationResponse.model_validate(application)

    APPLICATIONS_SUBMITTED.inc()
    logger.info(f"{request.volunteer_id} applied to {job_id}")
    return response


@router.post("/{job_id}/feedback", response_model=FeedbackResponse)
def complete_job(
    job_id: str,
    request: FeedbackRequest,
    store: MemoryStore = Depends(get_store),
):
    """
    Mark a job completed and credit the volunteer.

    The completed-job count always increases; only a strictly positive
    rating moves the volunteer's average.
    """
    with store.write():
        job = store.jobs.get(job_id)
        if not job:
            raise HTTPException(status_code=404, detail="job not found")

        profile = store.users.get(request.volunteer_id)
        if not profile:
            raise HTTPException(status_code=400, detail="volunteer profile missing")

        job.status = JobStatus.COMPLETED
        profile.completed_jobs += 1
        if request.rating > 0:
            profile.rating = (
                profile.rating * (profile.completed_jobs - 1) + request.rating
            ) / profile.completed_jobs

        response = FeedbackResponse(
            job=JobDetailResponse.model_validate(job),
            profile=ProfileResponse.model_validate(profile),
            feedback=Feedback(rating=request.rating, comment=request.comment),
        )

    JOBS_COMPLETED.inc()
    logger.info(f"{job_id} completed by {request.volunteer_id} (rating {request.rating})")
    return response
