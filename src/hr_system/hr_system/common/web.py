from __future__ import annotations

import dataclasses
import logging
from datetime import date
from enum import Enum
from functools import wraps
from typing import Any, Iterable, Optional

from flask import jsonify, request, session
from flask.json.provider import DefaultJSONProvider

from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, StorageError, ValidationError
from .audit import Actor
from .datetime_utils import parse_iso_date

logger = logging.getLogger(__name__)


class JSONProvider(DefaultJSONProvider):
    """Serialize dates as ISO strings, and dataclasses/enums by value."""

    def default(self, obj):
        if isinstance(obj, date):
            return obj.isoformat()
        if isinstance(obj, Enum):
            return obj.value
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return dataclasses.asdict(obj)
        return super().default(obj)


def current_role() -> Optional[Role]:
    try:
        return Role(session.get("role"))
    except ValueError:
        return None


def current_actor() -> Actor:
    return Actor(user_id=session.get("user_id"), email=session.get("email"), role=session.get("role"))


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"success": False, "message": "Please sign in to continue."}), 401
        return view(*args, **kwargs)

    return wrapper


def ok(message: Optional[str] = None, *, warnings: Iterable[str] = (), status: int = 200, **data: Any):
    body: dict[str, Any] = {"success": True, "message": message, "warnings": list(warnings)}
    body.update(data)
    return jsonify(body), status


def fail(message: str, *, field: Optional[str] = None, status: int = 400):
    return jsonify({"success": False, "message": message, "errors": {field or "form": [message]}}), status


def json_errors(view):
    """Translate domain errors raised by services into JSON results."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return fail(str(e), field=e.field, status=400)
        except AuthorizationError as e:
            return fail(str(e), status=403)
        except NotFoundError as e:
            return fail(str(e), status=404)
        except StorageError:
            logger.exception("Storage failure in %s", view.__name__)
            return fail("The database is unavailable. Please try again later.", status=503)
        except Exception:
            logger.exception("Unexpected error in %s", view.__name__)
            return fail("An unexpected error occurred.", status=500)

    return wrapper


def form_date(name: str, *, source=None) -> Optional[date]:
    """Optional YYYY-MM-DD value from the request form (or ``source``)."""
    values = request.form if source is None else source
    value = (values.get(name) or "").strip()
    if not value:
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError("Dates must use the YYYY-MM-DD format.", name)
