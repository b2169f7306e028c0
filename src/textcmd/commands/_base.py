"""Click base classes and shared options for textcmd commands.

TextCommand and TextGroup accept an ``examples`` parameter; passing
``--examples`` prints them and exits, keeping ``--help`` short.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import click

F = TypeVar("F", bound=Callable[..., Any])


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class TextCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class TextGroup(click.Group):
    """Click Group whose subcommands are TextCommands by default."""

    command_class = TextCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def selection_options(*, file_required: bool = False) -> Callable[[F], F]:
    """Add the ``FILE`` argument plus ``--lines`` and ``--language``.

    Without FILE the command filters stdin to stdout.
    """

    def decorator(fn: F) -> F:
        fn = click.option(
            "--language",
            "-L",
            default=None,
            help="Language id (default: inferred from the file extension).",
        )(fn)
        fn = click.option(
            "--lines",
            "line_range",
            default=None,
            metavar="N[:M]",
            help="Select lines N through M (1-based, inclusive; 'N:' runs to the end).",
        )(fn)
        fn = click.argument(
            "file",
            required=file_required,
            type=click.Path(dir_okay=False, path_type=Path),
        )(fn)
        return fn

    return decorator
