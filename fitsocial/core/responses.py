# Standard JSON envelopes shared by every router.
# Payloads may hold pydantic models; FastAPI encodes them with their aliases.

import math
from datetime import datetime, timezone
from typing import Any, Dict, Optional


def _metadata() -> Dict[str, str]:
    return {"timestamp": datetime.now(timezone.utc).isoformat()}


def success_response(data: Any, message: str = "Success") -> Dict[str, Any]:
    return {
        "success": True,
        "message": message,
        "data": data,
        "metadata": _metadata(),
    }


def created_response(data: Any, message: str = "Created successfully") -> Dict[str, Any]:
    return success_response(data, message)


def updated_response(data: Any, message: str = "Updated successfully") -> Dict[str, Any]:
    return success_response(data, message)


def deleted_response(message: str = "Deleted successfully") -> Dict[str, Any]:
    return {
        "success": True,
        "message": message,
        "metadata": _metadata(),
    }


def paginated_response(data: Any, page: int, limit: int, total: int, message: str = "Success") -> Dict[str, Any]:
    """Success envelope with page bookkeeping for list endpoints"""
    total_pages = math.ceil(total / limit) if limit else 0
    body = success_response(data, message)
    body["pagination"] = {
        "page": page,
        "limit": limit,
        "total": total,
        "totalPages": total_pages,
        "hasNext": page < total_pages,
        "hasPrev": page > 1,
    }
    return body


def error_response(code: str, message: str, details: Optional[Any] = None) -> Dict[str, Any]:
    error: Dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return {
        "success": False,
        "error": error,
        "metadata": _metadata(),
    }
