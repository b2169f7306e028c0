"""Launch files, URLs, and selected text with the system's default handler."""

from __future__ import annotations

import logging

import click

logger = logging.getLogger(__name__)


class LaunchError(RuntimeError):
    """Raised when the default handler reports a failure."""


class ClickLauncher:
    """:class:`~textcmd.services.host.Launcher` backed by :func:`click.launch`.

    Args:
        wait: Block until the launched application exits.
        locate: Open the containing folder instead of the file itself.
    """

    def __init__(self, *, wait: bool = False, locate: bool = False) -> None:
        self.wait = wait
        self.locate = locate

    def launch(self, target: str) -> int:
        if not target:
            msg = "Nothing to launch"
            raise LaunchError(msg)
        logger.debug("Launching %s", target)
        exit_code = click.launch(target, wait=self.wait, locate=self.locate)
        if exit_code != 0:
            msg = f"Launching {target!r} failed with exit code {exit_code}"
            raise LaunchError(msg)
        return exit_code
