from fastapi import APIRouter, Depends, HTTPException

from volunteer_match.schemas import JobListResponse, JobSummaryResponse
from volunteer_match.services.store import MemoryStore, get_store

router = APIRouter()


@router.get("/{requester_id}/jobs", response_model=JobListResponse)
def list_requester_jobs(requester_id: str, store: MemoryStore = Depends(get_store)):
    with store.read():
        if requester_id not in store.users:
            raise HTTPException(status_code=404, detail="requester not found")

        return JobListResponse(
            jobs=[
                JobSummaryResponse.model_validate(job.summary())
                for job in store.jobs.values()
                if job.requester_id == requester_id
            ]
        )
