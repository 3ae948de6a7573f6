"""Choose-one-of-N prompts with interchangeable backends.

``RichChooser`` drives an interactive terminal. ``LineChooser`` reads a
plain line (piped stdin, CI). ``PresetChooser`` answers from a list given
up front, which is what scripted runs and tests use.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable

import click
import structlog

log = structlog.get_logger("joylint.prompt")


@runtime_checkable
class Chooser(Protocol):
    """Interface every prompt backend must satisfy.

    With ``strict=False`` the answer is free text and *choices* are only
    shown as hints (used where the answer carries extra arguments).
    """

    def choose(
        self,
        message: str,
        choices: Sequence[str],
        default: str | None = None,
        strict: bool = True,
    ) -> str: ...


class RichChooser:
    """Interactive selection via rich.prompt."""

    def __init__(self, console=None) -> None:
        self._console = console

    def choose(
        self,
        message: str,
        choices: Sequence[str],
        default: str | None = None,
        strict: bool = True,
    ) -> str:
        from rich.prompt import Prompt

        kwargs: dict = {"console": self._console}
        if default is not None:
            kwargs["default"] = default
        if strict:
            answer = Prompt.ask(message, choices=list(choices), **kwargs)
        else:
            answer = Prompt.ask(f"{message} [{'/'.join(choices)}]", **kwargs)
        return answer.strip()


class LineChooser:
    """Single-line fallback for non-interactive stdin."""

    def choose(
        self,
        message: str,
        choices: Sequence[str],
        default: str | None = None,
        strict: bool = True,
    ) -> str:
        if strict:
            answer = click.prompt(
                message,
                type=click.Choice(list(choices)),
                default=default,
                show_choices=True,
            )
        else:
            answer = click.prompt(
                f"{message} [{'/'.join(choices)}]",
                default=default or "",
                show_default=bool(default),
            )
        return str(answer).strip()


class PresetChooser:
    """Answer prompts from pre-supplied values, in order."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)

    def choose(
        self,
        message: str,
        choices: Sequence[str],
        default: str | None = None,
        strict: bool = True,
    ) -> str:
        if self._answers:
            answer = self._answers.pop(0).strip()
        elif default is not None:
            answer = default
        else:
            raise click.UsageError(f"No answer supplied for prompt: {message}")

        if strict and answer not in choices:
            raise click.BadParameter(
                f"'{answer}' is not one of {', '.join(choices)}", param_hint=message
            )
        log.debug("prompt.preset_answer", message=message, answer=answer)
        return answer


def get_chooser(answers: Iterable[str] | None = None) -> Chooser:
    """Presets when *answers* are given, rich on a TTY, line input otherwise."""
    if answers is not None:
        return PresetChooser(answers)
    if sys.stdin.isatty():
        return RichChooser()
    return LineChooser()


def query_command(commands: Sequence[str], chooser: Chooser, strict: bool = True) -> str:
    return chooser.choose("What do you want to do next?", commands, default="build", strict=strict)
