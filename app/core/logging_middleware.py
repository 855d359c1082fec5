from fastapi import Request
from app.core.logger import logger
import time
import uuid

REQUEST_ID_HEADER = "X-Request-ID"

async def log_requests(request: Request, call_next):
    """요청 단위 request_id 부여 + 요청/응답 로깅"""

    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
    client = request.client.host if request.client else "unknown"
    start_time = time.perf_counter()

    with logger.contextualize(request_id=request_id):
        logger.info(f"{request.method} {request.url.path} from {client}")

        try:
            response = await call_next(request)
        except Exception:
            elapsed = (time.perf_counter() - start_time) * 1000
            # 처리되지 않은 예외는 기록 후 그대로 전파
            logger.exception(f"{request.method} {request.url.path} failed after {elapsed:.2f}ms")
            raise

        elapsed = (time.perf_counter() - start_time) * 1000
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed:.2f}ms)")

    response.headers[REQUEST_ID_HEADER] = request_id
    return response
