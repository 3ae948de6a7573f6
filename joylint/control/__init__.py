"""Release control commands: dev, build, tag, deltag, release."""

from joylint.control.commands import COMMANDS, ReleaseController

__all__ = ["COMMANDS", "ReleaseController"]
