# input/frontend.py

import inspect
from typing import Any, Callable, Iterable, List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.key_binding import KeyBindings

class CallbackCompleter(Completer):
    """Offers whatever the completion callback suggests for the live line."""
    def __init__(self, callback: Callable[[str], List[str]]):
        self._callback = callback

    def get_completions(self, document, complete_event) -> Iterable[Completion]:
        word = document.get_word_before_cursor()
        for suggestion in self._callback(document.current_line):
            yield Completion(suggestion, start_position=-len(word))

class InputFrontEnd:
    """
    Line editor for the prompt row, built on a prompt_toolkit session.

    The session edits only the text after the prompt prefix; the render
    engine paints the prefix and the session starts drawing wherever the
    engine parked the cursor. It must never draw below the prompt row, so
    no space is reserved for a completion menu. Completions are cycled in
    place with Tab.

    This class reports the buffer text and cursor offset on every change,
    hands completed lines to the submission callback and turns the
    interrupt key into a call to on_interrupt. Size changes seen while the
    session is active are reported through on_resize, since the session
    takes over SIGWINCH while it runs.
    """
    def __init__(self, on_change: Callable[[str], List[str]],
                 on_submit: Callable[[str], Any],
                 on_interrupt: Callable[[], None],
                 on_cursor: Optional[Callable[[int], None]] = None,
                 on_resize: Optional[Callable[[], None]] = None,
                 interrupt_key: str = 'c-c',
                 input=None, output=None):
        self._on_change = on_change
        self._on_submit = on_submit
        self._on_interrupt = on_interrupt
        self._on_cursor = on_cursor
        self._on_resize = on_resize
        self._last_size = None
        self.session = PromptSession(
            message='',
            completer=CallbackCompleter(on_change),
            complete_while_typing=True,
            reserve_space_for_menu=0,
            key_bindings=self._setup_key_bindings(interrupt_key),
            erase_when_done=True,
            input=input,
            output=output,
        )
        buffer = self.session.default_buffer
        buffer.on_text_changed += self._text_changed
        buffer.on_cursor_position_changed += self._cursor_moved
        self.session.app.before_render += self._check_size

    def _setup_key_bindings(self, interrupt_key: str) -> KeyBindings:
        kb = KeyBindings()

        @kb.add(interrupt_key)
        def _(event):
            event.app.exit(exception=KeyboardInterrupt)

        return kb

    def _text_changed(self, buffer) -> None:
        self._on_change(buffer.document.current_line)

    def _cursor_moved(self, buffer) -> None:
        if self._on_cursor:
            self._on_cursor(buffer.document.cursor_position_col)

    def _check_size(self, app) -> None:
        size = app.output.get_size()
        if self._last_size is not None and size != self._last_size and self._on_resize:
            self._on_resize()
        self._last_size = size

    async def read_line(self) -> str:
        """Read one line and pass it to the submission callback."""
        line = await self.session.prompt_async()
        # The session erased its line; the next one starts empty
        self._on_change('')
        if self._on_cursor:
            self._on_cursor(0)
        result = self._on_submit(line)
        if inspect.isawaitable(result):
            await result
        return line

    async def run(self) -> None:
        """Read lines until the interrupt key or end of input."""
        while True:
            try:
                await self.read_line()
            except (KeyboardInterrupt, EOFError):
                self._on_interrupt()
                return
