"""
Test suite for job endpoints.

Tests cover:
- Job creation (admin only)
- Listing and filtering
- Retrieval with company
- Partial updates
- Deletion
"""

import pytest


JOBS_URL = "/api/v1/jobs/"


class TestJobCreation:
    """Tests for POST /jobs"""

    new_job = {
        "title": "Platform Engineer",
        "salary": 140000,
        "equity": 0.6,
        "companyHandle": "c1",
    }

    def test_create_job_as_admin(self, client, companies, admin_headers):
        response = client.post(JOBS_URL, json=self.new_job, headers=admin_headers)

        assert response.status_code == 201
        job = response.json()["job"]
        assert isinstance(job["id"], int)
        assert job["title"] == "Platform Engineer"
        assert job["salary"] == 140000
        assert job["equity"] == "0.6"
        assert job["companyHandle"] == "c1"

    def test_create_job_non_admin(self, client, companies, user_headers):
        response = client.post(JOBS_URL, json=self.new_job, headers=user_headers)

        assert response.status_code == 401

    def test_create_job_anon(self, client, companies):
        response = client.post(JOBS_URL, json=self.new_job)

        assert response.status_code == 401

    def test_create_job_missing_fields(self, client, companies, admin_headers):
        response = client.post(JOBS_URL, json={"title": "new", "salary": 10000}, headers=admin_headers)

        assert response.status_code == 422

    def test_create_job_equity_above_one(self, client, companies, admin_headers):
        response = client.post(JOBS_URL, json={**self.new_job, "equity": 1.2}, headers=admin_headers)

        assert response.status_code == 422

    def test_create_job_negative_salary(self, client, companies, admin_headers):
        response = client.post(JOBS_URL, json={**self.new_job, "salary": -1}, headers=admin_headers)

        assert response.status_code == 422

    def test_create_job_unknown_company(self, client, companies, admin_headers):
        response = client.post(JOBS_URL, json={**self.new_job, "companyHandle": "fake"}, headers=admin_headers)

        assert response.status_code == 400


class TestJobListing:
    """Tests for GET /jobs"""

    def _titles(self, response):
        assert response.status_code == 200
        return [job["title"] for job in response.json()["jobs"]]

    def test_list_jobs_anon(self, client, jobs):
        response = client.get(JOBS_URL)

        assert self._titles(response) == [
            "Backend Engineer",
            "Data Analyst",
            "Engineering Manager",
            "Frontend Engineer",
        ]
        first = response.json()["jobs"][0]
        assert set(first) == {"id", "title", "salary", "equity", "companyHandle"}

    def test_equity_serialized_as_plain_decimal(self, client, jobs):
        response = client.get(JOBS_URL)

        equity = {job["title"]: job["equity"] for job in response.json()["jobs"]}
        assert equity == {
            "Backend Engineer": "0.05",
            "Data Analyst": "0",
            "Engineering Manager": "0.1",
            "Frontend Engineer": None,
        }

    def test_salary_filter(self, client, jobs):
        response = client.get(JOBS_URL, params={"minSalary": 150000})

        assert self._titles(response) == ["Backend Engineer", "Engineering Manager"]

    def test_equity_filter(self, client, jobs):
        response = client.get(JOBS_URL, params={"hasEquity": "true"})

        assert self._titles(response) == ["Backend Engineer", "Engineering Manager"]

    def test_has_equity_false_does_not_filter(self, client, jobs):
        response = client.get(JOBS_URL, params={"hasEquity": "false"})

        assert len(self._titles(response)) == 4

    def test_title_filter(self, client, jobs):
        response = client.get(JOBS_URL, params={"title": "analyst"})

        assert self._titles(response) == ["Data Analyst"]

    def test_all_filters(self, client, jobs):
        response = client.get(JOBS_URL, params={"title": "engineer", "minSalary": 160000, "hasEquity": "true"})

        assert self._titles(response) == ["Engineering Manager"]

    def test_negative_min_salary_rejected(self, client, jobs):
        response = client.get(JOBS_URL, params={"minSalary": -5})

        assert response.status_code == 422

    def test_list_jobs_empty(self, client):
        response = client.get(JOBS_URL)

        assert response.json() == {"jobs": []}


class TestJobRetrieval:
    """Tests for GET /jobs/{id}"""

    def test_get_job(self, client, jobs):
        job_id = jobs["Backend Engineer"]

        response = client.get(f"{JOBS_URL}{job_id}")

        assert response.status_code == 200
        job = response.json()["job"]
        assert job["id"] == job_id
        assert job["title"] == "Backend Engineer"
        assert job["salary"] == 150000
        assert job["equity"] == "0.05"
        assert job["company"] == {
            "handle": "c1",
            "name": "C1",
            "description": "Desc1",
            "numEmployees": 1,
            "logoUrl": "http://c1.img",
        }

    def test_get_nonexistent_job(self, client, jobs):
        response = client.get(f"{JOBS_URL}0")

        assert response.status_code == 404
        assert response.json()["detail"] == "No job: 0"
        assert "WWW-Authenticate" not in response.headers


class TestJobUpdate:
    """Tests for PATCH /jobs/{id}"""

    def test_update_as_admin(self, client, jobs, admin_headers):
        job_id = jobs["Backend Engineer"]

        response = client.patch(f"{JOBS_URL}{job_id}", json={"title": "New"}, headers=admin_headers)

        assert response.status_code == 200
        job = response.json()["job"]
        assert job["id"] == job_id
        assert job["title"] == "New"
        assert job["salary"] == 150000
        assert job["equity"] == "0.05"
        assert job["companyHandle"] == "c1"

    def test_update_anon(self, client, jobs):
        response = client.patch(f"{JOBS_URL}{jobs['Backend Engineer']}", json={"title": "New"})

        assert response.status_code == 401

    def test_update_non_admin(self, client, jobs, user_headers):
        response = client.patch(
            f"{JOBS_URL}{jobs['Backend Engineer']}", json={"title": "New"}, headers=user_headers
        )

        assert response.status_code == 401

    def test_update_nonexistent_job(self, client, jobs, admin_headers):
        response = client.patch(f"{JOBS_URL}0", json={"title": "I don't exist"}, headers=admin_headers)

        assert response.status_code == 404

    @pytest.mark.parametrize("body", [
        {"id": 0},
        {"companyHandle": "c2"},
        {"equity": 1.2},
        {"salary": "lots"},
    ])
    def test_update_invalid_data(self, client, jobs, admin_headers, body):
        response = client.patch(f"{JOBS_URL}{jobs['Backend Engineer']}", json=body, headers=admin_headers)

        assert response.status_code == 422

    def test_update_empty_body(self, client, jobs, admin_headers):
        response = client.patch(f"{JOBS_URL}{jobs['Backend Engineer']}", json={}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "No data"


class TestJobDeletion:
    """Tests for DELETE /jobs/{id}"""

    def test_delete_as_admin(self, client, jobs, admin_headers):
        job_id = jobs["Data Analyst"]

        response = client.delete(f"{JOBS_URL}{job_id}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"deleted": str(job_id)}
        assert client.get(f"{JOBS_URL}{job_id}").status_code == 404

    def test_delete_non_admin(self, client, jobs, user_headers):
        response = client.delete(f"{JOBS_URL}{jobs['Data Analyst']}", headers=user_headers)

        assert response.status_code == 401

    def test_delete_anon(self, client, jobs):
        response = client.delete(f"{JOBS_URL}{jobs['Data Analyst']}")

        assert response.status_code == 401

    def test_delete_nonexistent_job(self, client, jobs, admin_headers):
        response = client.delete(f"{JOBS_URL}0", headers=admin_headers)

        assert response.status_code == 404
