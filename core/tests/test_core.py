from django.test import SimpleTestCase, TestCase
from rest_framework import status
from rest_framework.exceptions import NotAuthenticated, NotFound
from rest_framework.test import APIClient

from core.backend import BackendError, NO_ROWS_CODE, fetch_single, fetch_single_or_none, require_user
from core.exceptions import ServiceUnavailable, custom_exception_handler
from users.models import User


class HealthCheckTestCase(TestCase):
    def test_health(self):
        resp = APIClient().get("/api/health/")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.json()["status"], "ok")
        self.assertTrue(resp.json()["db"])


class BackendHelperTestCase(TestCase):
    def test_fetch_single_needs_exactly_one_row(self):
        with self.assertRaises(BackendError) as ctx:
            fetch_single(User.objects.none(), "id")
        self.assertEqual(ctx.exception.code, NO_ROWS_CODE)

        User.objects.create_user(username="a", password="pass")
        User.objects.create_user(username="b", password="pass")
        with self.assertRaises(BackendError):
            fetch_single(User.objects.all(), "id")

        self.assertIsNone(fetch_single_or_none(User.objects.filter(username="zed"), "id"))
        self.assertEqual(fetch_single(User.objects.filter(username="a"), "username"), {"username": "a"})

    def test_require_user(self):
        with self.assertRaises(NotAuthenticated):
            require_user(None)


class ExceptionHandlerTests(SimpleTestCase):
    def test_drf_errors_are_wrapped(self):
        resp = custom_exception_handler(NotFound("Team not found"), {})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.data["errors"], {"detail": "Team not found"})
        self.assertFalse(resp.data["success"])

    def test_service_unavailable_is_503(self):
        resp = custom_exception_handler(ServiceUnavailable("Image storage is unavailable"), {})
        self.assertEqual(resp.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(resp.data["errors"], {"detail": "Image storage is unavailable"})

    def test_backend_errors_keep_message_and_code(self):
        resp = custom_exception_handler(BackendError("boom", code="23505"), {})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data["errors"], {"detail": "boom", "code": "23505"})

        resp = custom_exception_handler(BackendError("no rows", code=NO_ROWS_CODE), {})
        self.assertEqual(resp.status_code, 404)
