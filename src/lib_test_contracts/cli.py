"""CLI adapter for ``lib_test_contracts`` built on ``lib_cli_exit_tools``.

Purpose
-------
Expose the exception contract verifier and the class scanner on the command
line so a package can be checked without writing a test module first.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command that wires global traceback handling into
  ``lib_cli_exit_tools``.
* :func:`cli_info` – prints distribution metadata for quick diagnostics.
* :func:`cli_verify_exception` – runs :func:`verify_exception_class` on targets.
* :func:`cli_missing_method` – prints classes lacking a declared method.
* :func:`cli_missing_interface` – prints classes lacking an interface.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
The CLI lives in the outermost layer. It calls the composition root
(:mod:`lib_test_contracts.core`) and never reaches into adapters directly.
``lib_cli_exit_tools`` centralises the exit code strategy so all commands behave
consistently across shells and CI.
"""

from __future__ import annotations

import sys
from importlib import metadata
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .adapters.class_index.default import ModuleWalkClassIndex
from .core import (
    ExceptionContractViolation,
    ProbeValues,
    load_target,
    print_classes_without_interface,
    print_classes_without_method,
    verify_exception_class,
)

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000
_DEFAULTS: Final[ProbeValues] = ProbeValues()


def _resolve_version() -> str:
    """Return the installed package version, ``"0.0.0"`` when metadata is missing."""

    try:
        return metadata.version("lib_test_contracts")
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Exception contract and failure assertion checks",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="lib_test_contracts",
    message="lib_test_contracts version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Root command configuring traceback handling for all subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata("lib_test_contracts")
    except metadata.PackageNotFoundError:
        click.echo("lib_test_contracts (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', 'lib_test_contracts')}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")
    for entry in meta.get_all("Project-URL") or []:
        click.echo(f"  {entry}")


@cli.command("verify-exception", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("targets", nargs=-1, required=True)
@click.option(
    "--probe-message",
    default=_DEFAULTS.message,
    show_default=True,
    help="Message passed to the message and message+cause constructors",
)
@click.option(
    "--cause-message",
    default=_DEFAULTS.cause_message,
    show_default=True,
    help="Message carried by the cause passed to the message+cause constructor",
)
@click.pass_context
def cli_verify_exception(
    ctx: click.Context,
    targets: Sequence[str],
    probe_message: str,
    cause_message: str,
) -> None:
    """Verify the constructor contract of each ``module:Class`` in *targets*.

    Prints ``PASS <target>`` or ``FAIL <target>: <diagnostic>`` per target and
    exits with status 1 when any target fails.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> result = CliRunner().invoke(cli, ["verify-exception", "lib_test_contracts:ToolkitError"])
    >>> result.output.strip()
    'PASS lib_test_contracts:ToolkitError'
    """

    values = ProbeValues(message=probe_message, cause_message=cause_message)
    failures = 0
    for target in targets:
        exception_type = load_target(target)
        try:
            verify_exception_class(exception_type, values)  # type: ignore[arg-type]
        except ExceptionContractViolation as exc:
            failures += 1
            click.echo(f"FAIL {target}: {exc}")
        else:
            click.echo(f"PASS {target}")
    if failures:
        ctx.exit(1)


@cli.command("missing-method", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("method_name")
@click.argument("packages", nargs=-1, required=True)
@click.option(
    "--include-tests/--no-include-tests",
    default=False,
    show_default=True,
    help="Also scan test modules (tests/, test_*.py, conftest.py)",
)
def cli_missing_method(method_name: str, packages: Sequence[str], include_tests: bool) -> None:
    """List classes under *packages* that do not declare *method_name* themselves."""

    print_classes_without_method(method_name, *packages, index=ModuleWalkClassIndex(include_tests=include_tests))


@cli.command("missing-interface", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("interface")
@click.argument("packages", nargs=-1, required=True)
@click.option(
    "--include-tests/--no-include-tests",
    default=False,
    show_default=True,
    help="Also scan test modules (tests/, test_*.py, conftest.py)",
)
def cli_missing_interface(interface: str, packages: Sequence[str], include_tests: bool) -> None:
    """List classes under *packages* that do not subclass the ``module:Class`` *interface*."""

    resolved = load_target(interface)
    if not isinstance(resolved, type):
        raise click.BadParameter(f"{interface} is not a class", param_hint="INTERFACE")
    print_classes_without_interface(resolved, *packages, index=ModuleWalkClassIndex(include_tests=include_tests))


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="lib_test_contracts",
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
