"""Notification port used by the version model and the commands.

Components never print directly; they receive a `Reporter` and call its
leveled methods or drive a `Progress` indicator obtained from it.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Protocol, TextIO

SUCCESS_MARK = "✓"
ERROR_MARK = "✗"
INFO_MARK = "ℹ"
WARNING_MARK = "⚠"
PROGRESS_MARK = "…"


class Progress(Protocol):
    text: str

    def start(self) -> None: ...

    def update(self, text: str) -> None: ...

    def succeed(self, text: str) -> None: ...

    def fail(self, text: str) -> None: ...

    def info(self, text: str) -> None: ...


class Reporter(Protocol):
    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def progress(self, text: str) -> Progress: ...


class ConsoleProgress:
    def __init__(self, reporter: "ConsoleReporter", text: str) -> None:
        self._reporter = reporter
        self.text = text

    def start(self) -> None:
        self._reporter._emit(PROGRESS_MARK, self.text)

    def update(self, text: str) -> None:
        self.text = text

    def succeed(self, text: str) -> None:
        self.text = text
        self._reporter.success(text)

    def fail(self, text: str) -> None:
        self.text = text
        self._reporter.error(text)

    def info(self, text: str) -> None:
        self.text = text
        self._reporter.info(text)


class ConsoleReporter:
    """Marker-prefixed lines; errors go to `err`, everything else to `out`."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None, quiet: bool = False) -> None:
        self._out = out
        self._err = err
        self.quiet = quiet

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err if self._err is not None else sys.stderr

    def _emit(self, mark: str, message: str) -> None:
        if self.quiet:
            return
        print(f"{mark} {message}", file=self.out)

    def success(self, message: str) -> None:
        self._emit(SUCCESS_MARK, message)

    def error(self, message: str) -> None:
        print(f"{ERROR_MARK} {message}", file=self.err)

    def info(self, message: str) -> None:
        self._emit(INFO_MARK, message)

    def warning(self, message: str) -> None:
        self._emit(WARNING_MARK, message)

    def progress(self, text: str) -> ConsoleProgress:
        return ConsoleProgress(self, text)


@dataclass
class RecordingProgress:
    owner: "RecordingReporter"
    text: str
    started: bool = False

    def start(self) -> None:
        self.started = True
        self.owner.events.append(("start", self.text))

    def update(self, text: str) -> None:
        self.text = text
        self.owner.events.append(("update", text))

    def succeed(self, text: str) -> None:
        self.text = text
        self.owner.events.append(("succeed", text))

    def fail(self, text: str) -> None:
        self.text = text
        self.owner.events.append(("fail", text))

    def info(self, text: str) -> None:
        self.text = text
        self.owner.events.append(("progress_info", text))


@dataclass
class RecordingReporter:
    """In-memory reporter; `events` holds `(level, message)` pairs in call order."""

    events: list[tuple[str, str]] = field(default_factory=list)

    def success(self, message: str) -> None:
        self.events.append(("success", message))

    def error(self, message: str) -> None:
        self.events.append(("error", message))

    def info(self, message: str) -> None:
        self.events.append(("info", message))

    def warning(self, message: str) -> None:
        self.events.append(("warning", message))

    def progress(self, text: str) -> RecordingProgress:
        return RecordingProgress(self, text)

    def messages(self, level: str) -> list[str]:
        return [message for kind, message in self.events if kind == level]
