"""
Tests for job endpoints

Tests cover:
- Listing and detail projections
- Job creation (validation, id scheme, snapshot fields)
- Applying (composite key upsert, status side effect)
- Feedback (completion, rating average policy)
"""

import pytest

from volunteer_match.models import JobStatus

SUMMARY_FIELDS = {
    "id",
    "title",
    "requesterId",
    "scheduledOn",
    "location",
    "distanceKm",
    "tags",
    "status",
}


@pytest.fixture
def job_payload():
    return {
        "requesterId": "requester-1",
        "title": "Grocery run",
        "scheduledOn": "2025-03-01",
        "location": "Nimman, Chiang Mai",
        "meetingPoint": "Maya Mall entrance",
        "description": "Help carry groceries home.",
        "requirements": ["Can lift 10kg", "Speaks Thai"],
        "latitude": 18.8026,
        "longitude": 98.9672,
    }


class TestListJobs:
    """Test GET /api/jobs."""

    def test_returns_summaries(self, client):
        response = client.get("/api/jobs")
        assert response.status_code == 200
        jobs = response.json()["jobs"]
        assert {job["id"] for job in jobs} == {"job-1001", "job-1002"}
        for job in jobs:
            assert set(job) == SUMMARY_FIELDS

    def test_includes_created_jobs(self, client, job_payload):
        client.post("/api/jobs", json=job_payload)
        jobs = client.get("/api/jobs").json()["jobs"]
        assert len(jobs) == 3


class TestGetJob:
    """Test GET /api/jobs/{id}."""

    def test_returns_detail(self, client):
        response = client.get("/api/jobs/job-1001")
        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Wheelchair assistance at hospital"
        assert data["meetingPoint"] == "Entrance B, Siriraj Hospital"
        assert data["contactName"] == "Mali Nimman"
        assert data["contactNumber"] == "082-222-2222"
        assert data["latitude"] == 13.7563
        assert data["distanceKm"] == 3.2
        assert data["status"] == "open"

    def test_missing_job(self, client):
        response = client.get("/api/jobs/job-9999")
        assert response.status_code == 404
        assert response.json() == {"error": "job not found"}


class TestCreateJob:
    """Test POST /api/jobs."""

    def test_creates_open_job(self, client, store, job_payload):
        response = client.post("/api/jobs", json=job_payload)
        assert response.status_code == 201

        data = response.json()
        assert data["id"] == "job-1003"
        assert data["status"] == "open"
        assert data["distanceKm"] == 0
        assert data["requirements"] == ["Can lift 10kg", "Speaks Thai"]
        assert data["tags"] == ["Can lift 10kg", "Speaks Thai"]
        assert data["contactName"] == "Mali Nimman"
        assert data["contactNumber"] == "082-222-2222"
        assert "job-1003" in store.jobs

    def test_sequential_ids(self, client, job_payload):
        first = client.post("/api/jobs", json=job_payload).json()
        second = client.post("/api/jobs", json=job_payload).json()
        assert (first["id"], second["id"]) == ("job-1003", "job-1004")

    def test_contact_is_snapshot(self, client, store, job_payload):
        created = client.post("/api/jobs", json=job_payload).json()
        with store.write():
            store.users["requester-1"].phone = "099-999-9999"

        detail = client.get(f"/api/jobs/{created['id']}").json()
        assert detail["contactNumber"] == "082-222-2222"

    def test_unknown_requester_rejected(self, client, store, job_payload):
        job_payload["requesterId"] = "requester-404"
        response = client.post("/api/jobs", json=job_payload)
        assert response.status_code == 400
        assert response.json() == {"error": "requester profile missing"}
        assert len(store.jobs) == 2

    @pytest.mark.parametrize(
        "field, value",
        [("requesterId", ""), ("title", "   "), ("title", None)],
    )
    def test_required_fields(self, client, store, job_payload, field, value):
        job_payload[field] = value
        response = client.post("/api/jobs", json=job_payload)
        assert response.status_code == 400
        assert response.json() == {"error": "requesterId and title are required"}
        assert len(store.jobs) == 2

    @pytest.mark.parametrize("field", ["latitude", "longitude"])
    def test_overflowing_coordinate_rejected(self, client, store, field):
        response = client.post(
            "/api/jobs",
            content=(
                '{"requesterId": "requester-1", "title": "Ride", '
                f'"{field}": 1e400}}'
            ),
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "invalid payload"}
        assert len(store.jobs) == 2

    def test_numeric_string_coordinate_rejected(self, client, store, job_payload):
        job_payload["latitude"] = "18.8"
        response = client.post("/api/jobs", json=job_payload)
        assert response.status_code == 400
        assert len(store.jobs) == 2

    def test_integer_coordinates_accepted(self, client, job_payload):
        job_payload["latitude"] = 18
        response = client.post("/api/jobs", json=job_payload)
        assert response.status_code == 201
        assert response.json()["latitude"] == 18.0

    def test_wrong_coordinate_type(self, client, job_payload):
        job_payload["latitude"] = "north"
        response = client.post("/api/jobs", json=job_payload)
        assert response.status_code == 400
        assert response.json() == {"error": "invalid payload"}


class TestApply:
    """Test POST /api/jobs/{id}/apply."""

    def test_apply_marks_job_in_review(self, client):
        response = client.post(
            "/api/jobs/job-1001/apply",
            json={"volunteerId": "volunteer-1", "message": "Happy to help"},
        )
        assert response.status_code == 201

        data = response.json()
        assert data["id"] == "job-1001-volunteer-1"
        assert data["jobId"] == "job-1001"
        assert data["volunteerId"] == "volunteer-1"
        assert data["message"] == "Happy to help"
        assert data["status"] == "pending"
        assert data["createdAt"] == data["updatedAt"]

        job = client.get("/api/jobs/job-1001").json()
        assert job["status"] == "in_review"

    def test_reapply_overwrites_same_key(self, client, store):
        client.post("/api/jobs/job-1001/apply", json={"volunteerId": "volunteer-1", "message": "first"})
        response = client.post(
            "/api/jobs/job-1001/apply",
            json={"volunteerId": "volunteer-1", "message": "second"},
        )
        assert response.status_code == 201
        assert len(store.applications) == 1
        assert store.applications["job-1001-volunteer-1"].message == "second"
        assert store.jobs["job-1001"].status == JobStatus.IN_REVIEW

    def test_apply_reopens_completed_job_to_review(self, client, store):
        with store.write():
            store.jobs["job-1002"].status = JobStatus.COMPLETED

        client.post("/api/jobs/job-1002/apply", json={"volunteerId": "volunteer-1"})
        assert store.jobs["job-1002"].status == JobStatus.IN_REVIEW

    def test_missing_job(self, client, store):
        response = client.post("/api/jobs/job-9999/apply", json={"volunteerId": "volunteer-1"})
        assert response.status_code == 404
        assert response.json() == {"error": "job not found"}
        assert store.applications == {}

    @pytest.mark.parametrize("volunteer_id", ["volunteer-404", ""])
    def test_unknown_volunteer(self, client, store, volunteer_id):
        response = client.post("/api/jobs/job-1001/apply", json={"volunteerId": volunteer_id})
        assert response.status_code == 400
        assert response.json() == {"error": "volunteer profile missing"}
        assert store.applications == {}
        assert store.jobs["job-1001"].status == JobStatus.OPEN

    def test_missing_body(self, client):
        response = client.post("/api/jobs/job-1001/apply")
        assert response.status_code == 400
        assert response.json() == {"error": "invalid payload"}


class TestFeedback:
    """Test POST /api/jobs/{id}/feedback."""

    def _register_volunteer(self, client, store, rating, completed):
        profile = client.post(
            "/api/auth/register",
            json={"role": "volunteer", "fullName": "Rated Volunteer", "email": "rated@example.com"},
        ).json()
        with store.write():
            store.users[profile["id"]].rating = rating
            store.users[profile["id"]].completed_jobs = completed
        return profile["id"]

    def test_positive_rating_updates_average(self, client, store):
        volunteer_id = self._register_volunteer(client, store, rating=4.0, completed=1)

        response = client.post(
            "/api/jobs/job-1001/feedback",
            json={"volunteerId": volunteer_id, "rating": 5.0, "comment": "Great"},
        )
        assert response.status_code == 200

        data = response.json()
        assert data["job"]["status"] == "completed"
        assert data["job"]["id"] == "job-1001"
        assert data["profile"]["rating"] == 4.5
        assert data["profile"]["completedJobs"] == 2
        assert data["feedback"] == {"rating": 5.0, "comment": "Great"}

    def test_zero_rating_keeps_average(self, client, store):
        before = store.users["volunteer-1"].rating

        response = client.post(
            "/api/jobs/job-1002/feedback",
            json={"volunteerId": "volunteer-1", "rating": 0, "comment": ""},
        )
        assert response.status_code == 200
        assert store.users["volunteer-1"].rating == before
        assert store.users["volunteer-1"].completed_jobs == 43
        assert response.json()["profile"]["completedJobs"] == 43

    def test_negative_rating_keeps_average(self, client, store):
        client.post("/api/jobs/job-1002/feedback", json={"volunteerId": "volunteer-1", "rating": -3})
        assert store.users["volunteer-1"].rating == 4.9
        assert store.users["volunteer-1"].completed_jobs == 43

    def test_completes_job_regardless_of_status(self, client, store):
        client.post("/api/jobs/job-1001/apply", json={"volunteerId": "volunteer-1"})
        client.post("/api/jobs/job-1001/feedback", json={"volunteerId": "volunteer-1", "rating": 4})
        assert store.jobs["job-1001"].status == JobStatus.COMPLETED

        client.post("/api/jobs/job-1001/feedback", json={"volunteerId": "volunteer-1", "rating": 4})
        assert store.jobs["job-1001"].status == JobStatus.COMPLETED
        assert store.users["volunteer-1"].completed_jobs == 44

    def test_missing_job(self, client, store):
        response = client.post("/api/jobs/job-9999/feedback", json={"volunteerId": "volunteer-1", "rating": 5})
        assert response.status_code == 404
        assert response.json() == {"error": "job not found"}
        assert store.users["volunteer-1"].completed_jobs == 42

    def test_unknown_volunteer(self, client, store):
        response = client.post("/api/jobs/job-1001/feedback", json={"volunteerId": "nobody", "rating": 5})
        assert response.status_code == 400
        assert response.json() == {"error": "volunteer profile missing"}
        assert store.jobs["job-1001"].status == JobStatus.OPEN

    def test_overflowing_rating_rejected(self, client, store):
        """1e400 parses to infinity and must not reach the store."""
        response = client.post(
            "/api/jobs/job-1001/feedback",
            content='{"volunteerId": "volunteer-1", "rating": 1e400}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "invalid payload"}
        assert store.users["volunteer-1"].rating == 4.9
        assert store.users["volunteer-1"].completed_jobs == 42
        assert store.jobs["job-1001"].status == JobStatus.OPEN

    def test_numeric_string_rating_rejected(self, client, store):
        response = client.post(
            "/api/jobs/job-1001/feedback",
            json={"volunteerId": "volunteer-1", "rating": "5"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "invalid payload"}
        assert store.users["volunteer-1"].completed_jobs == 42

    def test_non_numeric_rating(self, client):
        response = client.post(
            "/api/jobs/job-1001/feedback",
            json={"volunteerId": "volunteer-1", "rating": "five"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "invalid payload"}
