# resize.py

import asyncio
import signal
from enum import Enum
from typing import Awaitable, Callable, Optional

_CLOSED = object()

class ResizeEvents:
    """
    Closable stream of terminal resize notifications.

    Iterate with ``async for``; iteration ends once close() is called.
    A notification arriving while another is still pending is folded into
    it, since a single repaint picks up the latest size anyway.
    """
    def __init__(self):
        self._queue: asyncio.Queue = asyncio.Queue()
        self._pending = False
        self._closed = False

    def start(self) -> None:
        """Begin delivering notifications. Injected sources need nothing here."""

    def notify(self) -> None:
        if self._closed or self._pending:
            return
        self._pending = True
        self._queue.put_nowait(True)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._queue.put_nowait(_CLOSED)

    @property
    def closed(self) -> bool:
        return self._closed

    def __aiter__(self):
        return self

    async def __anext__(self):
        item = await self._queue.get()
        if item is _CLOSED:
            raise StopAsyncIteration
        self._pending = False
        return item

class SigwinchEvents(ResizeEvents):
    """Resize notifications driven by SIGWINCH on the running event loop."""
    def __init__(self):
        super().__init__()
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    def start(self) -> None:
        self._loop = asyncio.get_running_loop()
        self._loop.add_signal_handler(signal.SIGWINCH, self.notify)

    def close(self) -> None:
        if self._loop is not None:
            self._loop.remove_signal_handler(signal.SIGWINCH)
            self._loop = None
        super().close()

class ReactorState(Enum):
    IDLE = 'idle'
    HANDLING = 'handling'

class ResizeReactor:
    """Runs a full recompute and repaint for every resize notification."""
    def __init__(self, events: ResizeEvents, on_resize: Callable[[], Awaitable[None]]):
        self.events = events
        self.state = ReactorState.IDLE
        self._on_resize = on_resize

    async def run(self) -> None:
        """Handle notifications until the source is closed."""
        async for _ in self.events:
            self.state = ReactorState.HANDLING
            try:
                await self._on_resize()
            finally:
                self.state = ReactorState.IDLE
