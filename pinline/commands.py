# commands.py

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Optional, Protocol, Tuple

class Command(Protocol):
    """Something the user can run by typing its name at the prompt."""
    name: str

    def run(self, args: List[str]) -> Any: ...

@dataclass(frozen=True)
class FunctionCommand:
    """Command backed by a plain function or coroutine function."""
    name: str
    func: Callable[[List[str]], Any]

    def run(self, args: List[str]) -> Any:
        return self.func(args)

class CommandTable:
    """Ordered, read-only set of commands looked up by exact name."""
    def __init__(self, commands: Iterable[Command] = ()):
        self._commands: Tuple[Command, ...] = tuple(commands)

    def get(self, name: str) -> Optional[Command]:
        """Return the first command called name, or None."""
        for command in self._commands:
            if command.name == name:
                return command
        return None

    def names(self) -> List[str]:
        return [command.name for command in self._commands]

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

def split_command_line(line: str) -> Tuple[str, List[str]]:
    """Split a submitted line into command name and arguments."""
    fields = line.split()
    return fields[0], fields[1:]
