from fastapi import Request
import logging
import time
import uuid
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("fitsocial")

REQUEST_ID_HEADER = "X-Request-ID"

class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        # A caller-supplied request id takes precedence
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id

        method = request.method
        path = request.url.path
        query_string = request.url.query

        logger.info(f"[{request_id}] Request: {method} {path} {query_string}")

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(f"[{request_id}] Response: {response.status_code} in {process_time:.4f}s")

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
