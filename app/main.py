"""Alert bridge - FastAPI application for Pub/Sub push delivery."""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

import uvicorn
from fastapi import FastAPI, HTTPException, Request, status

from app.config import get_settings
from app.errors import ConfigurationError, DecodeError, ForwarderError, ParseError
from app.forwarder import AlertForwarder, create_forwarder

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Global forwarder instance
forwarder: AlertForwarder | None = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    global forwarder

    settings = get_settings()

    # Configure logging level
    logging.getLogger().setLevel(settings.log_level.upper())

    if settings.webhook_url:
        forwarder = create_forwarder(settings)
        logger.info(f"Forwarding {forwarder.source.name} alerts to {forwarder.channel.name}")
    else:
        logger.error("WEBHOOK_URL is not set, push deliveries will be rejected")
        forwarder = None

    logger.info("Alert bridge started")

    yield

    forwarder = None
    logger.info("Alert bridge stopped")


app = FastAPI(
    title="Alert bridge",
    description="Relays Cloud Monitoring alerts from Pub/Sub to Google Chat",
    version="0.1.0",
    lifespan=lifespan,
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/pubsub/push")
async def pubsub_push(request: Request) -> dict[str, Any]:
    """Receive a Pub/Sub push delivery and forward it."""
    if not forwarder:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Forwarder not configured. Set WEBHOOK_URL.",
        )

    body = await request.body()

    try:
        incident = await forwarder.forward(body)
    except (DecodeError, ParseError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ConfigurationError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    except ForwarderError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))

    return {"status": "ok", "incident_id": incident.incident_id}


def run() -> None:
    """Run the application using uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    run()
