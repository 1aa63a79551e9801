from fastapi import APIRouter, FastAPI
from fastapi.responses import PlainTextResponse
import os
import logging
import uvicorn

FALLBACK_STATUS_CODE = 503
FALLBACK_MESSAGE = "Chat is currently unavailable. Please try again later."

# Environment config
FALLBACK_HOST = os.getenv("FALLBACK_HOST", "0.0.0.0")
FALLBACK_PORT = int(os.getenv("FALLBACK_PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

router = APIRouter()


@router.get("/health")
def health():
    return {"status": "ok", "service": "fallback"}


# Called by the gateway when the chat service is down. Other methods get 405 from routing.
@router.api_route("/fallback", methods=["GET", "POST"], response_class=PlainTextResponse)
def fallback():
    return PlainTextResponse(FALLBACK_MESSAGE, status_code=FALLBACK_STATUS_CODE)


def create_app() -> FastAPI:
    app = FastAPI(title="Fallback Service")
    app.include_router(router)
    return app


app = create_app()


def run():
    logging.basicConfig(level=LOG_LEVEL)
    logging.info("Starting fallback service on %s:%s", FALLBACK_HOST, FALLBACK_PORT)
    uvicorn.run(app, host=FALLBACK_HOST, port=FALLBACK_PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
