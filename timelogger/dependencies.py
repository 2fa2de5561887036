# timelogger/dependencies.py

import logging
from typing import Generator

from anyio import from_thread
from fastapi import Request
from sqlalchemy.orm import Session

from timelogger.core.abort import AbortSignal
from timelogger.database import SessionLocal

logger = logging.getLogger("Timelogger.Requests")

def get_db() -> Generator[Session, None, None]:
    """
    Yield a fresh database session and close it once the request is done.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

async def get_abort_signal(request: Request) -> AbortSignal:
    """
    Abort signal for a create/update request.

    It fires when the client has gone away, either before the handler runs or
    by the time ``save`` is about to commit. Handlers run in the worker thread
    pool, so the later check hops back onto the event loop to ask the server.
    """
    def client_gone() -> bool:
        gone = from_thread.run(request.is_disconnected)
        if gone:
            logger.info(f"Client disconnected before commit: {request.method} {request.url.path}")
        return gone

    signal = AbortSignal(check=client_gone)
    if await request.is_disconnected():
        logger.info(f"Client disconnected: {request.method} {request.url.path}")
        signal.abort()
    return signal
