"""Output sinks the upgrade notes are written to."""

from typing import Protocol

from rich.console import Console

from common.logger import console as default_console


class OutputSink(Protocol):
    """Anything that can render lines of text in order.

    Messages written with markup=True may carry console markup; all other
    messages are shown exactly as given.
    """

    def write(self, message: str, newline: bool = True, markup: bool = True) -> None: ...


class ConsoleOutput:
    """Writes messages to a rich console."""

    def __init__(self, console: Console | None = None):
        self.console = console or default_console

    def write(self, message: str, newline: bool = True, markup: bool = True) -> None:
        self.console.print(
            message,
            end="\n" if newline else "",
            soft_wrap=True,
            markup=markup,
            emoji=markup,
        )


class BufferedOutput:
    """Keeps written messages in memory, e.g. for tests or later replay."""

    def __init__(self):
        self.messages: list[str] = []
        self._pending = ""

    def write(self, message: str, newline: bool = True, markup: bool = True) -> None:
        self._pending += message
        if newline:
            self.messages.append(self._pending)
            self._pending = ""

    @property
    def text(self) -> str:
        """All written output joined as it would appear on a console."""
        return "".join(m + "\n" for m in self.messages) + self._pending
