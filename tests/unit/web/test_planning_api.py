#!/usr/bin/env python3
"""
Unit tests for notes, career map, business map and dashboard endpoints.
"""

import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from tests import OTHER_TOKEN, auth_headers, build_test_client

BUSINESS_MAP = {
    "personalStory": "Ten years in logistics",
    "riskProfile": {"activity": "Employed", "marital": "Married", "fund": "6 months"},
    "skill": "Operations",
    "capital": "Small savings",
    "time": "Evenings",
    "knowledge": "Supply chain",
    "connections": ["Former colleagues", "Local suppliers"],
    "opportunities": "Last-mile delivery",
}

CAREER_MAP = {
    "goal": "Engineering manager",
    "hardSkills": "Python, SQL",
    "softSkills": "Mentoring",
    "skillGap": "Budgeting",
}


class PlanningApiTestCase(unittest.TestCase):

    def setUp(self):
        self.client, self.context = build_test_client()
        self.headers = auth_headers()


class TestNotes(PlanningApiTestCase):

    def test_no_notes_is_empty_map(self):
        response = self.client.get("/api/v1/notes", headers=self.headers)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {})

    def test_notes_are_returned_as_module_map(self):
        self.client.post("/api/v1/notes", json={"moduleId": "1.1", "content": "first"}, headers=self.headers)
        self.client.post("/api/v1/notes", json={"moduleId": "1.1", "content": "second"}, headers=self.headers)
        self.client.post("/api/v1/notes", json={"moduleId": "2.3", "content": ""}, headers=self.headers)

        response = self.client.get("/api/v1/notes", headers=self.headers)

        self.assertEqual(response.json(), {"1.1": "second", "2.3": ""})

    def test_save_returns_note(self):
        response = self.client.post(
            "/api/v1/notes", json={"moduleId": "1.1", "content": "hello"}, headers=self.headers
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["moduleId"], "1.1")
        self.assertEqual(response.json()["content"], "hello")

    def test_missing_fields(self):
        response = self.client.post("/api/v1/notes", json={"content": "orphan"}, headers=self.headers)

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Missing required fields: moduleId")

    def test_notes_are_private(self):
        self.client.post("/api/v1/notes", json={"moduleId": "1.1", "content": "secret"}, headers=self.headers)

        response = self.client.get("/api/v1/notes", headers=auth_headers(OTHER_TOKEN))

        self.assertEqual(response.json(), {})


class TestCareerMap(PlanningApiTestCase):

    def test_absent_map_is_empty_object(self):
        response = self.client.get("/api/v1/career-map", headers=self.headers)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {})

    def test_save_then_read(self):
        saved = self.client.post("/api/v1/career-map", json=CAREER_MAP, headers=self.headers)
        self.assertEqual(saved.status_code, 200)

        body = self.client.get("/api/v1/career-map", headers=self.headers).json()

        for key, value in CAREER_MAP.items():
            self.assertEqual(body[key], value)

    def test_second_save_replaces(self):
        self.client.post("/api/v1/career-map", json=CAREER_MAP, headers=self.headers)
        self.client.post("/api/v1/career-map", json={**CAREER_MAP, "goal": "Founder"}, headers=self.headers)

        body = self.client.get("/api/v1/career-map", headers=self.headers).json()

        self.assertEqual(body["goal"], "Founder")

    def test_missing_fields(self):
        response = self.client.post("/api/v1/career-map", json={"goal": "CTO"}, headers=self.headers)

        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            sorted(response.json()["missing_fields"]),
            ["hardSkills", "skillGap", "softSkills"]
        )


class TestBusinessMap(PlanningApiTestCase):

    def test_absent_map_is_empty_object(self):
        self.assertEqual(self.client.get("/api/v1/business-map", headers=self.headers).json(), {})

    def test_risk_profile_round_trip(self):
        response = self.client.post("/api/v1/business-map", json=BUSINESS_MAP, headers=self.headers)
        self.assertEqual(response.status_code, 200)

        body = self.client.get("/api/v1/business-map", headers=self.headers).json()

        self.assertEqual(body["riskProfile"], BUSINESS_MAP["riskProfile"])
        self.assertEqual(body["currentActivity"], "Employed")
        self.assertEqual(body["maritalStatus"], "Married")
        self.assertEqual(body["emergencyFund"], "6 months")
        self.assertEqual(body["connections"], BUSINESS_MAP["connections"])
        self.assertEqual(body["personalStory"], BUSINESS_MAP["personalStory"])

    def test_missing_risk_profile(self):
        payload = {k: v for k, v in BUSINESS_MAP.items() if k != "riskProfile"}

        response = self.client.post("/api/v1/business-map", json=payload, headers=self.headers)

        self.assertEqual(response.status_code, 400)
        self.assertIn("riskProfile", response.json()["message"])

    def test_empty_string_field_is_rejected(self):
        response = self.client.post(
            "/api/v1/business-map", json={**BUSINESS_MAP, "skill": ""}, headers=self.headers
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "skill must not be empty")

    def test_connections_must_be_a_list(self):
        response = self.client.post(
            "/api/v1/business-map", json={**BUSINESS_MAP, "connections": "everyone"}, headers=self.headers
        )
        self.assertEqual(response.status_code, 400)


class TestDashboard(PlanningApiTestCase):

    DATE = "Mon Jan 05 2026"

    def test_date_is_required(self):
        response = self.client.get("/api/v1/dashboard", headers=self.headers)

        self.assertEqual(response.status_code, 400)
        self.assertFalse(response.json()["success"])
        self.assertEqual(response.json()["missing_fields"], ["date"])

    def test_absent_dashboard_is_empty_object(self):
        response = self.client.get("/api/v1/dashboard", params={"date": self.DATE}, headers=self.headers)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {})

    def test_save_then_read(self):
        payload = {
            "dateString": self.DATE,
            "bigWin": "Sign the lease",
            "schedule": [{"time": "09:00", "activity": "Calls"}],
            "reviewAchieved": True,
            "reviewBest": "Focus",
            "reviewLesson": "Start earlier",
        }
        self.client.post("/api/v1/dashboard", json=payload, headers=self.headers)

        body = self.client.get("/api/v1/dashboard", params={"date": self.DATE}, headers=self.headers).json()

        for key, value in payload.items():
            self.assertEqual(body[key], value)

    def test_save_replaces_whole_dashboard(self):
        self.client.post(
            "/api/v1/dashboard", json={"dateString": self.DATE, "bigWin": "A"}, headers=self.headers
        )
        self.client.post(
            "/api/v1/dashboard", json={"dateString": self.DATE, "reviewBest": "B"}, headers=self.headers
        )

        body = self.client.get("/api/v1/dashboard", params={"date": self.DATE}, headers=self.headers).json()

        self.assertIsNone(body["bigWin"])
        self.assertEqual(body["reviewBest"], "B")

    def test_missing_date_string(self):
        response = self.client.post("/api/v1/dashboard", json={"bigWin": "A"}, headers=self.headers)

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["missing_fields"], ["dateString"])

    def test_dashboards_are_private(self):
        self.client.post(
            "/api/v1/dashboard", json={"dateString": self.DATE, "bigWin": "A"}, headers=self.headers
        )

        response = self.client.get(
            "/api/v1/dashboard", params={"date": self.DATE}, headers=auth_headers(OTHER_TOKEN)
        )

        self.assertEqual(response.json(), {})


if __name__ == '__main__':
    unittest.main()
