"""Selector commands: build one compound selector, render a document.

Contents:
    * :func:`cli_build` - Chain ``KIND=VALUE`` parts into a compound selector.
    * :func:`cli_render` - Render an expression document.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import lib_log_rich.runtime
import orjson
import rich_click as click

from selkit.domain.builder import css_selector_builder
from selkit.domain.enums import OutputFormat, PartKind
from selkit.domain.errors import ConfigurationError, ExpressionDocumentError, SelectorError
from selkit.domain.selector import Renderable, Selector

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

PartSpec = tuple[PartKind, str]


def _parse_parts(ctx: click.Context, param: click.Parameter, value: tuple[str, ...]) -> list[PartSpec]:
    """Split each ``KIND=VALUE`` at its first ``=``.

    Values keep any further ``=`` verbatim, so ``attr=href$=".png"`` is an
    attribute part with value ``href$=".png"``.

    Raises:
        click.BadParameter: A part lacks ``=`` or names an unknown kind.
    """
    parts: list[PartSpec] = []
    for raw in value:
        kind, sep, text = raw.partition("=")
        if not sep:
            raise click.BadParameter(f"{raw!r} is not KIND=VALUE", ctx=ctx, param=param)
        try:
            parts.append((PartKind.parse(kind), text))
        except ValueError as exc:
            raise click.BadParameter(str(exc), ctx=ctx, param=param) from exc
    return parts


def _build_selector(parts: list[PartSpec]) -> Selector:
    (first_kind, first_value), *rest = parts
    selector = css_selector_builder.start(first_kind, first_value)
    for kind, value in rest:
        selector.add(kind, value)
    return selector


def _format_option(func: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "--format",
        "output_format",
        type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
        default=None,
        help="Output format; defaults to selkit.output_format from configuration",
    )(func)


def _emit(expression: Renderable, output_format: OutputFormat) -> None:
    text = expression.stringify()
    if output_format is OutputFormat.JSON:
        click.echo(orjson.dumps({"selector": text}).decode("utf-8"))
    else:
        click.echo(text)


def _fail(exc: Exception, log_message: str, *, exit_code: ExitCode) -> None:
    """Log ``exc``, show it on stderr and exit with ``exit_code``."""
    logger.error(log_message, extra={"error": str(exc), "error_type": type(exc).__name__})
    click.echo(f"Error: {exc}", err=True)
    raise SystemExit(exit_code)


def _execute(cli_ctx: CLIContext, output_format: str | None, build: Callable[[bool], Renderable]) -> None:
    """Resolve settings, build the expression and print it.

    ``build`` receives the effective ``strict_combinators`` setting.

    Exceptions map to exit codes most specific first:

    1. ConfigurationError -> CONFIG_ERROR (78)
    2. FileNotFoundError -> FILE_NOT_FOUND (2)
    3. ExpressionDocumentError / SelectorError -> INVALID_ARGUMENT (22)
    """
    try:
        settings = cli_ctx.settings()
        fmt = OutputFormat(output_format.lower()) if output_format else settings.output_format
        _emit(build(settings.strict_combinators), fmt)
    except ConfigurationError as exc:
        _fail(exc, "Invalid selkit configuration", exit_code=ExitCode.CONFIG_ERROR)
    except FileNotFoundError as exc:
        _fail(exc, "Expression document not found", exit_code=ExitCode.FILE_NOT_FOUND)
    except (ExpressionDocumentError, SelectorError) as exc:
        _fail(exc, "Selector rejected", exit_code=ExitCode.INVALID_ARGUMENT)


@click.command("build", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("parts", nargs=-1, required=True, metavar="KIND=VALUE...", callback=_parse_parts)
@_format_option
@click.pass_context
def cli_build(ctx: click.Context, parts: list[PartSpec], output_format: str | None) -> None:
    r"""Build one compound selector from parts given in order.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element.
    Parts must follow that order; element, id and pseudo-element may appear
    only once.

    \b
    Example:
        selkit build element=a 'attr=href$=".png"' pseudo-class=focus
        a[href$=".png"]:focus
    """
    cli_ctx = get_cli_context(ctx)
    extra = {"command": "build", "parts": len(parts)}
    with lib_log_rich.runtime.bind(job_id="cli-build", extra=extra):
        logger.info("Building selector", extra={"kinds": [kind.value for kind, _ in parts]})
        _execute(cli_ctx, output_format, lambda _strict: _build_selector(parts))


@click.command("render", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("document", type=click.Path(dir_okay=False, path_type=Path))
@_format_option
@click.option(
    "--strict-combinators/--no-strict-combinators",
    "strict_combinators",
    default=None,
    help="Reject combinators other than ' ', '+', '~', '>' (default from configuration)",
)
@click.pass_context
def cli_render(
    ctx: click.Context,
    document: Path,
    output_format: str | None,
    strict_combinators: bool | None,
) -> None:
    r"""Render the selector expression described by a JSON DOCUMENT.

    \b
    Document nodes:
        {"parts": [{"kind": "element", "value": "div"}, ...]}
        {"left": NODE, "combinator": "+", "right": NODE}
    """
    cli_ctx = get_cli_context(ctx)

    def _load(configured_strict: bool) -> Renderable:
        strict = configured_strict if strict_combinators is None else strict_combinators
        return cli_ctx.services.load_expression(document, strict_combinators=strict)

    extra = {"command": "render", "document": str(document)}
    with lib_log_rich.runtime.bind(job_id="cli-render", extra=extra):
        logger.info("Rendering expression document")
        _execute(cli_ctx, output_format, _load)


__all__ = ["cli_build", "cli_render"]
