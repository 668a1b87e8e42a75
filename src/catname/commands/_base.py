"""Click base classes with --examples support.

``--examples`` prints usage examples and exits, so ``--help`` stays short.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
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


class CatCommand(click.Command):
    """Command that accepts an ``examples`` string."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        if examples:
            _add_examples_option(self, examples)


class CatGroup(click.Group):
    """Group whose subcommands are :class:`CatCommand` by default."""

    command_class = CatCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        if examples:
            _add_examples_option(self, examples)


def scope_options(func: Any) -> Any:
    """Attach the ``--shop`` and ``--lang`` options shared by scoped commands."""
    func = click.option(
        "--lang",
        "language_id",
        type=click.IntRange(min=1),
        default=1,
        show_default=True,
        help="Language id.",
    )(func)
    func = click.option(
        "--shop",
        "shop_id",
        type=click.IntRange(min=1),
        default=1,
        show_default=True,
        help="Shop id.",
    )(func)
    return func
