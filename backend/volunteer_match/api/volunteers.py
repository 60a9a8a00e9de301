from fastapi import APIRouter, Depends, HTTPException

from volunteer_match.schemas import (
    ApplicationResponse,
    JobSummaryResponse,
    VolunteerApplication,
    VolunteerApplicationsResponse,
)
from volunteer_match.services.store import MemoryStore, get_store

router = APIRouter()


@router.get("/{volunteer_id}/applications", response_model=VolunteerApplicationsResponse)
def list_volunteer_applications(volunteer_id: str, store: MemoryStore = Depends(get_store)):
    with store.read():
        if volunteer_id not in store.users:
            raise HTTPException(status_code=404, detail="volunteer not found")

        items = []
        for application in store.applications.values():
            if application.volunteer_id != volunteer_id:
                continue
            job = store.jobs.get(application.job_id)
            if not job:
                continue
            items.append(
                VolunteerApplication(
                    application=ApplicationResponse.model_validate(application),
                    job=JobSummaryResponse.model_validate(job.summary()),
                )
            )

        return VolunteerApplicationsResponse(items=items)
