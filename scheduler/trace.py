"""
Trace sinks: where the engine's human-readable event lines go.

A sink is any callable taking one string. The engine receives its sink at
construction, so there is no process-wide logger to configure and two
simulations can write to two different places.

- TraceRecorder:    keeps the lines in memory (tests, API responses)
- LoggingTraceSink: forwards each line to the logging module
- FileTraceSink:    writes each line to a file, optionally echoing to a stream
- tee():            fans one line out to several sinks

Trace lines are the simulation's output, not diagnostics. Diagnostics go
through logging.getLogger(__name__) like everywhere else.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

TraceSink = Callable[[str], None]

logger = logging.getLogger(__name__)


def discard(message: str) -> None:
    """Sink used when the caller does not want a trace."""


class TraceRecorder:

    def __init__(self):
        self.lines: list[str] = []

    def __call__(self, message: str) -> None:
        self.lines.append(message)

    def text(self) -> str:
        return "\n".join(self.lines)


class LoggingTraceSink:

    def __init__(self, log: Optional[logging.Logger] = None, level: int = logging.INFO):
        self._log = log or logger
        self._level = level

    def __call__(self, message: str) -> None:
        self._log.log(self._level, message)


class FileTraceSink:
    """
    Writes every trace line to `path`, one line per event.

    Use it as a context manager so the file is closed even if the
    simulation raises:

        with FileTraceSink("out.txt", echo=sys.stdout) as sink:
            run_simulation(jobs, trace=sink)
    """

    def __init__(self, path: Union[str, Path], echo: Optional[TextIO] = None):
        self.path = Path(path)
        self._echo = echo
        self._file: Optional[TextIO] = None

    def open(self) -> "FileTraceSink":
        self._file = self.path.open("w", encoding="utf-8")
        logger.debug(f"Writing trace to {self.path}")
        return self

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "FileTraceSink":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __call__(self, message: str) -> None:
        if self._file is None:
            raise RuntimeError(f"Trace file {self.path} is not open")
        self._file.write(message + "\n")
        if self._echo is not None:
            print(message, file=self._echo)


def tee(*sinks: TraceSink) -> TraceSink:
    """Combine several sinks into one; each line goes to all of them, in order."""

    def fan_out(message: str) -> None:
        for sink in sinks:
            sink(message)

    return fan_out
