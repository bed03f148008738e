# core/responses.py
from rest_framework import status
from rest_framework.response import Response


def api_error(message: str, status_code=status.HTTP_400_BAD_REQUEST):
    """
    Small helper to standardize error responses across apps.
    Always returns: {"error": "<message>"} with the given status code.
    """
    return Response({"error": message}, status=status_code)


def ux_response(data):
    """Envelope used by the dashboard endpoints."""
    return Response({
        "meta": {"success": True},
        "data": data,
    })
