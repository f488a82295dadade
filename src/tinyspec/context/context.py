from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from tinyspec.testing.session import Session


SESSION_CONTEXT: ContextVar[Session | None] = ContextVar("session_context", default=None)


@contextmanager
def session_scope(session: Session) -> Iterator[Session]:
    """Install ``session`` as the current session for the duration of the block."""
    token = SESSION_CONTEXT.set(session)
    try:
        yield session
    finally:
        SESSION_CONTEXT.reset(token)
