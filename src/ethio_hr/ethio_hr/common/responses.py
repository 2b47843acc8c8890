from __future__ import annotations

import logging

from flask import jsonify

from ..core.exceptions import CalendarConversionError, GeofenceError, LocationIntegrityError, ValidationError

logger = logging.getLogger(__name__)


def ok(data: dict, status: int = 200):
    return jsonify({"success": True, **data}), status


def fail(message: str, status: int, **extra):
    return jsonify({"success": False, "message": message, **extra}), status


def error_response(e: Exception):
    """Map a raised exception to a JSON error response."""

    if isinstance(e, (ValidationError, CalendarConversionError)):
        return fail(str(e), 400)
    if isinstance(e, GeofenceError):
        return fail(str(e), 403, geofence=e.result.to_dict())
    if isinstance(e, LocationIntegrityError):
        return fail(str(e), 403, integrity=e.report.to_dict())
    logger.exception("Unhandled error while serving request")
    return fail("Internal server error", 500)
