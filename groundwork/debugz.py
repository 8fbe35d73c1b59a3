"""Stack dumps of the running threads, on demand, on signal or on a schedule."""

from __future__ import annotations

import signal
import sys
import threading
import traceback
from collections.abc import Callable, Iterable
from datetime import datetime


def _thread_header(ident: int | None, names: dict[int | None, str]) -> str:
    return f"thread {names.get(ident, 'unknown')} [{ident}]:"


def _emit(text: str) -> str:
    sys.stdout.write(text + "\n")
    sys.stdout.flush()
    return text


def generate_stack() -> str:
    """Return the stacks of all threads."""
    names = {thread.ident: thread.name for thread in threading.enumerate()}
    sections = [
        _thread_header(ident, names) + "\n" + "".join(traceback.format_stack(frame))
        for ident, frame in sys._current_frames().items()
    ]
    return "\n".join(sections)


def generate_local_stack() -> str:
    """Return the stack of the calling thread."""
    current = threading.current_thread()
    names = {current.ident: current.name}
    frames = traceback.format_stack()[:-1]
    return _thread_header(current.ident, names) + "\n" + "".join(frames)


def dump_stack() -> str:
    """Print the stacks of all threads to stdout and return them."""
    return _emit(generate_stack())


def dump_local_stack() -> str:
    """Print the stack of the calling thread to stdout and return it."""
    return _emit(generate_local_stack())


def add_stack_dump_handler() -> None:
    """Print all stacks whenever the process receives SIGQUIT."""
    signal.signal(
        signal.SIGQUIT,
        lambda signum, frame: _emit(
            f"\n DUMPING STACK AS REQUESTED BY SIGQUIT \n\n{generate_stack()}"
        ),
    )


def dump_stack_on_tick(
    ticks: Iterable[datetime], file_formatter: Callable[[datetime], str]
) -> threading.Thread:
    """Write a stack dump for each tick to the file named by file_formatter.

    Runs in a daemon thread, which is returned; failures are printed.
    """

    def run() -> None:
        for tick in ticks:
            try:
                dump_stack_to_file(file_formatter(tick))
            except OSError as err:
                print(f"error dumping stackdump to file [{err}]")

    thread = threading.Thread(target=run, name="stack-dump-ticker", daemon=True)
    thread.start()
    return thread


def dump_stack_to_file(file_name: str) -> None:
    """Write the stacks of all threads to file_name."""
    with open(file_name, "w", encoding="utf-8") as out:
        out.write(generate_stack())