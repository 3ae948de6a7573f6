"""Release control — route a verb to git / pnpm / tar / coscli steps.

Every step runs synchronously; the first failing command aborts the
verb with ExternalProcessError.
"""

from __future__ import annotations

import os
import tarfile
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import click
import structlog

from joylint.core.config import ControlConfig
from joylint.exceptions import ConfigError, InvalidCommandError, ReleaseError
from joylint.process import capture_output, run_command
from joylint.prompt import Chooser, query_command

log = structlog.get_logger("joylint.control")

COMMANDS: list[str] = ["dev", "build", "tag", "deltag", "release"]

ALERT_MESSAGE = "\nPlease confirm your input!\n"

DEV_SERVER_CMD = ["pnpx", "react-scripts", "start"]
DIST_DIR = "dist"
ARCHIVE_GLOB = "dist-*.tar.gz"


def _now() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def _check_ref_names(names: list[str]) -> None:
    """Git would read a leading dash as an option."""
    for name in names:
        if name.startswith("-"):
            raise InvalidCommandError(f"Invalid tag name '{name}': must not start with '-'")


class ReleaseController:
    """Run control verbs against the project at *cwd*."""

    def __init__(
        self,
        cwd: str | Path,
        config: ControlConfig | None = None,
        echo: Callable[..., None] = click.secho,
    ) -> None:
        self.cwd = Path(cwd)
        self.config = config or ControlConfig()
        self._echo = echo

    # ── routing ──────────────────────────────────────────────────────────

    def dispatch(self, args: list[str], chooser: Chooser | None = None) -> bool:
        """Route ``[target, *rest]`` to its verb.

        With no *args* the command line is asked through *chooser* and
        split on whitespace. Returns False when the verb is unknown (the
        usage hint has been printed; this is not an error).
        """
        if not args and chooser is not None:
            answer = query_command(COMMANDS, chooser, strict=False)
            args = answer.split()

        if not args or args[0] not in COMMANDS:
            self.usage()
            return False

        target, *rest = args
        log.info("control.dispatch", command=target, args=rest)
        handlers: dict[str, Callable[[list[str]], None]] = {
            "dev": self.develop,
            "build": self.build,
            "tag": lambda rest: self.tag(rest[0] if rest else None),
            "deltag": self.deltag,
            "release": lambda rest: self.release(rest[0] if rest else None),
        }
        handlers[target](rest)
        return True

    def usage(self) -> None:
        self._echo(ALERT_MESSAGE, fg="red")
        self._echo(f"Support command ===> {' '.join(COMMANDS)}")

    # ── verbs ────────────────────────────────────────────────────────────

    def develop(self, rest: list[str] | None = None) -> None:
        """Start the dev server with developmentEnv layered over our environment."""
        env = {**os.environ, **self.config.development_env}
        if self.config.development_env:
            log.debug("control.dev_env", keys=sorted(self.config.development_env))
        run_command(DEV_SERVER_CMD, cwd=self.cwd, env=env)

    def build(self, rest: list[str] | None = None) -> None:
        if rest and "--analysis" in rest:
            run_command(["pnpm", "run", "analyze"], cwd=self.cwd)
        else:
            run_command(["pnpm", "run", "build"], cwd=self.cwd)
        self._echo(f"Successfully built at {_now()}", fg="green", bold=True)

    def head_short_sha(self) -> str:
        return capture_output(["git", "rev-parse", "--short", "HEAD"], cwd=self.cwd)

    def tag(self, name: str | None = None) -> str:
        """Create an annotated tag (default: short HEAD sha) and push tags."""
        tag_name = name or self.head_short_sha()
        _check_ref_names([tag_name])
        self._echo(f"Tag name is {tag_name}", fg="blue")
        run_command(["git", "tag", "-a", tag_name, "-m", f"Created at {_now()}"], cwd=self.cwd)
        run_command(["git", "push", "--tag"], cwd=self.cwd)
        self._echo(f"Successfully tag at {_now()}", fg="green", bold=True)
        return tag_name

    def deltag(self, names: list[str]) -> list[str]:
        """Delete tags on origin and locally; ``--all`` removes every local tag."""
        if names and names[0] == "--all":
            tags = capture_output(["git", "tag", "-l"], cwd=self.cwd).split()
            if not tags:
                self._echo("No tags to delete.")
                return []
            run_command(["git", "push", "origin", "-d", *tags], cwd=self.cwd)
            run_command(["git", "tag", "-d", *tags], cwd=self.cwd)
            self._echo(
                f"Successfully delete all tags on remote/local at {_now()}", fg="green", bold=True
            )
            return tags

        if not names:
            raise InvalidCommandError("deltag needs tag names or --all")
        _check_ref_names(names)

        run_command(["git", "tag", "-d", *names], cwd=self.cwd)
        run_command(["git", "push", "origin", "-d", *names], cwd=self.cwd)
        self._echo(
            f"Successfully delete {' '.join(names)} on remote/local at {_now()}",
            fg="green",
            bold=True,
        )
        return names

    def release(self, name: str | None = None) -> Path:
        """Build, archive dist/ as dist-<name>.tar.gz, upload it, then tag <name>.

        *name* defaults to the short HEAD sha; passing one avoids archive
        name clashes when nothing new was committed.
        """
        if not self.config.cos_path:
            raise ConfigError("No upload target: set cosPath in configs/env.json or JOYLINT_COS_PATH")

        file_name = name or self.head_short_sha()
        _check_ref_names([file_name])
        archive = self.cwd / f"dist-{file_name}.tar.gz"

        self.build()

        for old in self.cwd.glob(ARCHIVE_GLOB):
            old.unlink()

        dist = self.cwd / DIST_DIR
        if not dist.is_dir():
            raise ReleaseError(f"Build output not found: {dist}")
        with tarfile.open(archive, "w:gz") as tar:
            tar.add(dist, arcname=DIST_DIR)
        log.info("control.archived", archive=archive.name)

        remote = f"{self.config.cos_path.rstrip('/')}/{archive.name}"
        run_command(["coscli", "cp", archive.name, remote], cwd=self.cwd)

        self.tag(file_name)
        return archive
