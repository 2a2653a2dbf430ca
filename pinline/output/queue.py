# output/queue.py

import asyncio
import codecs
from typing import List, Optional, Union

class OutputQueue:
    """
    Unbounded FIFO of output bytes between producers and the render loop.

    Any number of producers may append, from the event loop or from other
    threads once the queue is bound to a loop. Exactly one consumer drains.
    Bytes are decoded on the consumer side so a UTF-8 character split
    across two appends still reaches the renderer whole.
    """
    def __init__(self):
        self._chunks: asyncio.Queue = asyncio.Queue()
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._decoder = codecs.getincrementaldecoder('utf-8')(errors='replace')

    def bind(self, loop: asyncio.AbstractEventLoop) -> None:
        """Remember the loop the consumer runs on, for appends from other threads."""
        self._loop = loop

    def append(self, data: Union[bytes, str]) -> int:
        """Queue data without blocking; return the number of bytes accepted."""
        if isinstance(data, str):
            data = data.encode('utf-8')
        if not data:
            return 0

        if self._loop is not None and not self._on_loop_thread():
            self._loop.call_soon_threadsafe(self._chunks.put_nowait, data)
        else:
            self._chunks.put_nowait(data)
        return len(data)

    def _on_loop_thread(self) -> bool:
        try:
            return asyncio.get_running_loop() is self._loop
        except RuntimeError:
            return False

    async def drain(self) -> str:
        """
        Wait for output and return everything queued so far as one batch.

        Returns an empty string when the queued bytes end inside a
        multi-byte character; the rest follows with the next batch.
        """
        parts: List[bytes] = [await self._chunks.get()]
        while not self._chunks.empty():
            parts.append(self._chunks.get_nowait())
        return self._decoder.decode(b''.join(parts))

    def pending(self) -> int:
        """Number of chunks waiting to be drained."""
        return self._chunks.qsize()
