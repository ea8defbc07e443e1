# app/worker.py
"""Outbox worker: delivers booking notifications the API never got to send.

Run with ``python -m app.worker`` from the ``worker`` directory after
installing the project.
"""
import asyncio
import signal

from stayvista.core.config import settings
from stayvista.core.logging_config import setup_logging
from stayvista.db.database import close_db
from stayvista.service.notification_service import deliver_pending

logger = setup_logging("stayvista-worker")

# -----------------------------
# Graceful shutdown
# -----------------------------
stop_flag = False


def handle_shutdown(sig, frame):
    global stop_flag
    logger.info("Received shutdown signal: %s. Stopping worker...", sig)
    stop_flag = True


signal.signal(signal.SIGTERM, handle_shutdown)
signal.signal(signal.SIGINT, handle_shutdown)


# -----------------------------
# Main loop
# -----------------------------
async def drain_once() -> int:
    sent = await deliver_pending(older_than_seconds=settings.OUTBOX_STALE_SECONDS)
    if sent:
        logger.info("Delivered %s stale notification(s).", sent)
    return sent


async def worker_forever():
    logger.info("Outbox worker started.")
    while not stop_flag:
        try:
            await drain_once()
        except Exception as e:
            logger.error("Worker encountered an error: %s", e)
        await asyncio.sleep(settings.OUTBOX_POLL_SECONDS)

    close_db()
    logger.info("Worker shutdown complete.")


if __name__ == "__main__":
    asyncio.run(worker_forever())
