from .context import SESSION_CONTEXT, session_scope
from .output_capture import OutputBuffer, capture_output, captured

__all__ = [
    "SESSION_CONTEXT",
    "OutputBuffer",
    "capture_output",
    "captured",
    "session_scope",
]
