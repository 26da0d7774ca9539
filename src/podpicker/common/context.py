from contextvars import ContextVar
from typing import Optional

# Tags log records emitted while a single choose() call is in flight
dispatch_id_ctx: ContextVar[Optional[str]] = ContextVar("dispatch_id", default=None)
