# prompt.py

import asyncio
import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional, Union

from rich.console import Console

from .commands import Command, CommandTable, split_command_line
from .config import PromptConfig
from .display.engine import RenderEngine
from .display.terminal import ConsoleWriter, TerminalSize, Vt100ConsoleWriter, get_terminal_size
from .input import InputFrontEnd
from .logger import Logger
from .output import OutputQueue, OutputStream, create_console
from .resize import ResizeEvents, ResizeReactor, SigwinchEvents

class PromptEventType(Enum):
    RERENDER = 'rerender'

@dataclass(frozen=True)
class PromptEvent:
    type: PromptEventType

class Prompt:
    """
    Terminal multiplexer: scrolling output above a pinned status line and prompt.

    Producers call append_output() from anywhere. A drain task feeds the
    queued output to the render engine, a resize reactor repaints on
    terminal size changes and the input front end dispatches submitted
    lines to commands. Every terminal write from these paths goes through
    one lock, so output batches, status updates and repaints never
    interleave.

    Each completed geometry recompute puts a RERENDER event on ``events``.
    """

    def __init__(self, commands: Union[CommandTable, Iterable[Command]] = (),
                 config: Optional[PromptConfig] = None,
                 writer: Optional[ConsoleWriter] = None,
                 size_source: Callable[[], TerminalSize] = get_terminal_size,
                 resize_events: Optional[ResizeEvents] = None,
                 input_factory: Callable[..., InputFrontEnd] = InputFrontEnd,
                 logger=None):
        self.config = config or PromptConfig()
        self.logger = logger or Logger(__name__, self.config.logging_enabled, self.config.log_file)
        self.commands = commands if isinstance(commands, CommandTable) else CommandTable(commands)

        self._engine = RenderEngine(
            writer=writer or Vt100ConsoleWriter(),
            styles=self.config.styles(),
            prompt_prefix=self.config.prefix,
            logger=self.logger,
        )
        self._lock = asyncio.Lock()
        self._queue = OutputQueue()
        self.stream = OutputStream(self._queue)

        self._size_source = size_source
        self._resize_events = resize_events or SigwinchEvents()
        self._reactor = ResizeReactor(self._resize_events, self._on_resize)
        self._input_factory = input_factory

        self.events: asyncio.Queue = asyncio.Queue()
        self._ready = asyncio.Event()
        self._closed = asyncio.Event()
        self._tasks: List[asyncio.Task] = []

    @property
    def engine(self) -> RenderEngine:
        return self._engine

    @property
    def reactor(self) -> ResizeReactor:
        return self._reactor

    # Public operations

    def append_output(self, data: Union[bytes, str]) -> int:
        """Queue output for printing; never blocks, returns bytes accepted."""
        return self._queue.append(data)

    def console(self) -> Console:
        """A rich Console that prints into the output area."""
        geometry = self._engine.geometry
        width = geometry.usable_columns if geometry.ready else None
        return create_console(self.stream, width=width)

    async def set_status(self, text: str) -> None:
        """
        Show text on the status line in the alert style.

        Raises OSError when the terminal write fails.
        """
        async with self._lock:
            self._engine.show_status(text)

    async def initial_setup(self) -> None:
        """
        Size the screen for the first time.

        Pushes the existing terminal content up into the scrollback instead
        of erasing it, then paints the pinned rows.
        """
        try:
            await self.rerender(initial=True)
        except OSError as e:
            self.logger.critical(f"Error during the initial rerender: {e}", exc_info=True)

    async def rerender(self, initial: bool = False) -> None:
        """Recompute geometry from the current terminal size and repaint."""
        size = self._size_source()
        self.logger.debug(f"Rerendering for {size.columns}x{size.lines}")
        async with self._lock:
            try:
                self._engine.repaint(size, initial=initial)
            finally:
                self._ready.set()
        self.events.put_nowait(PromptEvent(PromptEventType.RERENDER))

    async def run(self) -> None:
        """
        Start the background tasks and return once the screen is set up.

        Output appended before this call is printed after the initial setup.
        """
        self._queue.bind(asyncio.get_running_loop())
        self._spawn(self._drain_loop(), 'drain')
        await self.initial_setup()

        front_end = self._input_factory(
            on_change=self.complete,
            on_submit=self.dispatch,
            on_interrupt=self.interrupt,
            on_cursor=self.track_cursor,
            on_resize=self._resize_events.notify,
            interrupt_key=self.config.interrupt_key,
        )
        self._spawn(front_end.run(), 'input')

        self._resize_events.start()
        self._spawn(self._reactor.run(), 'resize')

    async def wait_closed(self) -> None:
        """Wait until the interrupt key was pressed or close() was called."""
        await self._closed.wait()

    async def close(self) -> None:
        """Stop the background tasks. Output still queued is dropped."""
        self._resize_events.close()
        current = asyncio.current_task()
        tasks = [task for task in self._tasks if task is not current]
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()
        self._closed.set()

    async def __aenter__(self):
        await self.run()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
        return False

    # Background tasks and callbacks

    def _spawn(self, coro, name: str) -> None:
        self._tasks.append(asyncio.create_task(coro, name=f"pinline-{name}"))

    async def _drain_loop(self) -> None:
        await self._ready.wait()
        while True:
            batch = await self._queue.drain()
            if not batch:
                continue
            async with self._lock:
                self._engine.render_batch(batch)

    async def _on_resize(self) -> None:
        try:
            await self.rerender()
        except OSError as e:
            self.logger.critical(f"Error during the rerender: {e}", exc_info=True)

    def complete(self, text: str) -> List[str]:
        """Track the live prompt text and suggest matching command names."""
        # Runs on the event loop between lock holders, never inside a batch
        self._engine.state.prompt_text = text
        if not text or any(c.isspace() for c in text):
            return []
        return [name for name in self.commands.names() if name.startswith(text)]

    def track_cursor(self, offset: int) -> None:
        """Record where the input cursor sits within the live prompt text."""
        self._engine.state.prompt_cursor = offset

    async def dispatch(self, line: str) -> None:
        """Run the command named by the first word of a submitted line."""
        if not line.strip():
            return
        self.logger.debug(f"Submitted: {line}")

        name, args = split_command_line(line)
        command = self.commands.get(name)
        if command is None:
            try:
                await self.set_status(f"Unknown command '{name}'")
            except OSError as e:
                self.logger.critical(f"Error flushing prompt buffer: {e}", exc_info=True)
            return

        self.logger.debug(f"Running '{name}' with args {args}")
        try:
            result = command.run(args)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            self.logger.error(f"Command '{name}' failed: {e}", exc_info=True)

    def interrupt(self) -> None:
        """Ask the host to shut down, as the interrupt key does."""
        self.logger.debug("Interrupt requested")
        self._closed.set()
