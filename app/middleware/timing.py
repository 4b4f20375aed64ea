import logging
import time

from fastapi import Request

logger = logging.getLogger(__name__)


async def timing_middleware(request: Request, call_next):
    """Log each request with its status and duration, and expose the duration as a header."""
    start_time = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as e:
        process_time = (time.perf_counter() - start_time) * 1000
        logger.error(f"Request failed: {request.method} {request.url.path} - {process_time:.2f}ms - {e}")
        raise

    process_time = (time.perf_counter() - start_time) * 1000
    response.headers["X-Process-Time"] = f"{process_time:.2f}ms"
    logger.info(f"{request.method} {request.url.path} - {response.status_code} - {process_time:.2f}ms")
    return response
