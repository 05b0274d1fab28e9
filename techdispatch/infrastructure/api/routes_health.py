"""Welcome and health check endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from techdispatch.application.ports.blob_store import BlobStore
from techdispatch.config import settings
from techdispatch.domain.exceptions import StorageIOError
from techdispatch.infrastructure.api.dependencies import get_blob_store

router = APIRouter(tags=["health"])

SERVICE_NAME = "Technician Task Assignment"


@router.get("/", response_class=PlainTextResponse)
async def home():
    return f"Welcome to {SERVICE_NAME}"


@router.get("/health")
async def health_check(store: BlobStore = Depends(get_blob_store)):
    """Check that the prediction store can be reached."""
    try:
        await store.exists(settings.predictions_key)
        storage_status = "connected"
    except StorageIOError as e:
        storage_status = f"error: {e.reason}"

    return {
        "status": "ok" if storage_status == "connected" else "degraded",
        "storage": storage_status,
        "service": SERVICE_NAME,
    }
