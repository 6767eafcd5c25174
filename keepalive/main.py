import logging
import threading
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from keepalive.api_schemas import ConfigResponse, HealthResponse
from keepalive.config import DEFAULT_CONFIG, LOG_FORMAT, settings
from keepalive.runner import build_notifier, loop_forever, run_on_demand

logger = logging.getLogger(__name__)

TRIGGER_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


@asynccontextmanager
async def lifespan(_: FastAPI):
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format=LOG_FORMAT)
    if settings.KEEPALIVE_INTERVAL_S > 0:
        t = threading.Thread(
            target=loop_forever,
            args=(DEFAULT_CONFIG, settings.KEEPALIVE_INTERVAL_S),
            kwargs={"notifier": build_notifier()},
            daemon=True,
        )
        t.start()
        logger.info("Keepalive timer started, interval=%ss", settings.KEEPALIVE_INTERVAL_S)
    else:
        logger.info("Keepalive timer disabled; relying on external trigger")
    yield


app = FastAPI(
    title="Keepalive",
    version="1.0.0",
    description=(
        "Checks a fixed list of endpoints with retries and sends a Telegram "
        "alert when any of them stays unreachable."
    ),
    lifespan=lifespan,
)


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["system"],
    summary="Health Check",
    description="Liveness endpoint of the keepalive service itself.",
)
def health():
    return {"status": "ok"}


@app.get(
    "/config",
    response_model=ConfigResponse,
    tags=["system"],
    summary="Current Effective Config",
    description="Returns non-secret runtime config values.",
)
def config():
    return {
        "urls": list(DEFAULT_CONFIG.urls),
        "max_retries": DEFAULT_CONFIG.max_retries,
        "retry_delay_s": DEFAULT_CONFIG.retry_delay_s,
        "timeout_s": DEFAULT_CONFIG.timeout_s,
        "interval": settings.KEEPALIVE_INTERVAL_S,
        "notifications_enabled": bool(settings.TG_BOT_TOKEN and settings.TG_CHAT_ID),
    }


@app.api_route(
    "/{path:path}",
    methods=TRIGGER_METHODS,
    response_class=PlainTextResponse,
    tags=["trigger"],
    summary="Run Checks Now",
    description="Runs one sweep over all endpoints and returns the summary text.",
)
def trigger(path: str):
    message = run_on_demand(DEFAULT_CONFIG, notifier=build_notifier())
    return PlainTextResponse(message, status_code=200)
