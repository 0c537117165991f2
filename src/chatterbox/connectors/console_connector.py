# src/chatterbox/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ..core.commands import (
    DateMatches,
    Farewell,
    Listing,
    Outcome,
    TaskAdded,
    TaskMarked,
    TaskRemoved,
)
from ..core.errors import ChatterboxError, StorageError
from ..core.executor import execute
from ..core.parser import parse
from ..core.state import AppState
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

LINE = "_" * 32

ReadLine = Callable[[], str]
PrintLines = Callable[..., None]


def _print_lines(*lines: str) -> None:
    for line in lines:
        print(line)


def _numbered(tasks: Iterable[Task]) -> list[str]:
    return [f" {i}.{task}" for i, task in enumerate(tasks, start=1)]


def render_outcome(outcome: Outcome) -> list[str]:
    """Outcome -> console lines (without separators)."""
    if isinstance(outcome, Farewell):
        return [" Bye! Hope to see you again soon!"]

    if isinstance(outcome, Listing):
        return [" Here are the tasks in your list:", *_numbered(outcome.tasks)]

    if isinstance(outcome, TaskAdded):
        return [
            " Got it. I've added this task:",
            f"   {outcome.task}",
            f" Now you have {outcome.total} tasks in the list.",
        ]

    if isinstance(outcome, TaskRemoved):
        return [
            " Noted. I've removed this task:",
            f"   {outcome.task}",
            f" Now you have {outcome.total} tasks in the list.",
        ]

    if isinstance(outcome, TaskMarked):
        head = (
            " Nice! Congrats on finishing this task!"
            if outcome.done
            else " OK, I've forgotten about it already!"
        )
        return [head, f"   {outcome.task}"]

    if isinstance(outcome, DateMatches):
        lines = [f" Tasks on {outcome.day.isoformat()}:"]
        if not outcome.tasks:
            lines.append(" No tasks found for this date.")
        else:
            lines.extend(_numbered(outcome.tasks))
        return lines

    raise TypeError(f"Unknown outcome: {outcome!r}")


def render_error(err: ChatterboxError) -> str:
    return f" OOPS!!! {err}"


def handle_line(state: AppState, line: str) -> tuple[list[str], bool]:
    """
    Process one input line to completion.

    Returns (lines to print, whether the session should end).
    """
    try:
        command = parse(line)
        outcome = execute(command, state.tasks, state.store)
    except StorageError as e:
        lines = render_outcome(e.outcome) if e.outcome is not None else []  # type: ignore[arg-type]
        lines.append(render_error(e))
        return lines, False
    except ChatterboxError as e:
        logger.debug("Command rejected: %r -> %s", line, e)
        return [render_error(e)], False
    except Exception:
        logger.exception("Command handler crashed.")
        return [" OOPS!!! Internal error while handling that command."], False

    return render_outcome(outcome), isinstance(outcome, Farewell)


def run_console_loop(
    state: AppState,
    read_line: ReadLine = input,
    print_lines: PrintLines = _print_lines,
) -> None:
    app_name = str(getattr(state.settings, "app_name", "Chatterbox"))
    logger.info("Console connector started (%d tasks).", state.tasks.size())

    print_lines(LINE, f" Hello! I'm {app_name}", " What can I do for you?", LINE)

    while True:
        try:
            line = read_line()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print_lines("")
            break

        print_lines(LINE)
        lines, is_exit = handle_line(state, line)
        print_lines(*lines, LINE)
        if is_exit:
            break

    logger.info("Console connector finished.")
