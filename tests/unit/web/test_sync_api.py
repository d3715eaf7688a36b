#!/usr/bin/env python3
"""
Unit tests for POST /api/v1/sync.
"""

import sys
import unittest
from pathlib import Path
from unittest.mock import patch

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from sqlalchemy.exc import SQLAlchemyError

from tests import OTHER_SUBJECT_ID, OTHER_TOKEN, TEST_SUBJECT_ID, auth_headers, build_test_client


class TestSyncEndpoint(unittest.TestCase):

    def setUp(self):
        self.client, self.context = build_test_client()

    def test_sync_with_body(self):
        response = self.client.post(
            "/api/v1/sync", json={"email": "ada@example.com", "name": "Ada"}, headers=auth_headers()
        )

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["message"], "User synchronized")
        self.assertEqual(body["user"]["id"], TEST_SUBJECT_ID)
        self.assertEqual(body["user"]["email"], "ada@example.com")
        self.assertEqual(body["user"]["name"], "Ada")

    def test_sync_falls_back_to_token_claims(self):
        response = self.client.post("/api/v1/sync", headers=auth_headers())

        user = response.json()["user"]
        self.assertEqual(user["email"], "test@example.com")
        self.assertEqual(user["name"], "Test User")

    def test_sync_without_name_anywhere_uses_default(self):
        response = self.client.post("/api/v1/sync", json={}, headers=auth_headers(OTHER_TOKEN))

        user = response.json()["user"]
        self.assertEqual(user["id"], OTHER_SUBJECT_ID)
        self.assertIsNone(user["email"])
        self.assertEqual(user["name"], "New User")

    def test_second_sync_updates_the_same_user(self):
        self.client.post("/api/v1/sync", json={"name": "Ada"}, headers=auth_headers())
        response = self.client.post("/api/v1/sync", json={"name": "Ada Lovelace"}, headers=auth_headers())

        self.assertEqual(response.json()["user"]["name"], "Ada Lovelace")

    def test_identity_comes_from_the_token_only(self):
        response = self.client.post(
            "/api/v1/sync", json={"id": "someone-else", "name": "Mallory"}, headers=auth_headers()
        )
        self.assertEqual(response.json()["user"]["id"], TEST_SUBJECT_ID)

    def test_database_failure_is_500(self):
        with patch(
            "database.repositories.user.UserRepository.sync",
            side_effect=SQLAlchemyError("database unavailable")
        ):
            response = self.client.post("/api/v1/sync", json={}, headers=auth_headers())

        self.assertEqual(response.status_code, 500)
        self.assertFalse(response.json()["success"])
        self.assertEqual(response.json()["message"], "Failed to synchronize user")

    def test_requires_auth(self):
        self.assertEqual(self.client.post("/api/v1/sync", json={}).status_code, 401)


if __name__ == '__main__':
    unittest.main()
