import logging
import re
import sys
import time
import uuid

from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

_LOG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "{extra[request_id]} | <level>{message}</level>"
)

# Pillow logs every PNG chunk it parses at DEBUG.
_QUIET_LOGGERS = ("PIL", "multipart", "uvicorn.access")

# Polled by load balancers; logged at DEBUG.
_HEALTH_CHECK_PATHS = frozenset({"/health"})

_CLIENT_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


class _InterceptHandler(logging.Handler):
    """Forward stdlib records (engine modules, uvicorn, Pillow) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        level: str | int
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk back past the logging module so loguru reports the real caller.
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(log_level: str = "INFO") -> None:
    """Make loguru the only log sink.

    Engine modules log through ``logging.getLogger(__name__)`` so they stay
    usable without this setup; once it runs their records end up on the
    same stderr sink, tagged with the current request id. Colour is only
    used when stderr is a terminal.
    """
    logger.remove()
    logger.configure(extra={"request_id": "-"})
    logger.add(
        sys.stderr,
        format=_LOG_FORMAT,
        level=log_level.upper(),
        colorize=sys.stderr.isatty(),
    )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def request_id_for(request: Request) -> str:
    """Reuse a well-formed client-supplied request id, otherwise mint a short one."""
    supplied = request.headers.get(REQUEST_ID_HEADER, "")
    if _CLIENT_REQUEST_ID.match(supplied):
        return supplied
    return uuid.uuid4().hex[:8]


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id, log its outcome and echo the id back in a response header."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        rid = request_id_for(request)
        route = f"{request.method} {request.url.path}"
        level = "DEBUG" if request.url.path in _HEALTH_CHECK_PATHS else "INFO"

        with logger.contextualize(request_id=rid):
            logger.log(level, "{route}", route=route)
            start = time.perf_counter()
            try:
                response = await call_next(request)
            except Exception:
                logger.exception(
                    "{route} -> UNHANDLED ({elapsed:.0f}ms)",
                    route=route,
                    elapsed=(time.perf_counter() - start) * 1000,
                )
                raise
            logger.log(
                "WARNING" if response.status_code >= 500 else level,
                "{route} -> {status} ({elapsed:.0f}ms)",
                route=route,
                status=response.status_code,
                elapsed=(time.perf_counter() - start) * 1000,
            )

        response.headers[REQUEST_ID_HEADER] = rid
        return response
