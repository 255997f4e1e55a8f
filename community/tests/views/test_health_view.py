from unittest.mock import patch

from django.db import OperationalError
from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient


class HealthViewTestCase(TestCase):
    def test_health_reports_database(self):
        response = APIClient().get(reverse("health"))
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "OK")
        self.assertTrue(body["database"])
        self.assertIn("timestamp", body)

    @patch("community.views.health_view.connection")
    def test_health_when_database_is_down(self, mock_connection):
        mock_connection.ensure_connection.side_effect = OperationalError("down")
        body = APIClient().get(reverse("health")).json()
        self.assertFalse(body["database"])
