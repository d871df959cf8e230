from __future__ import annotations

import json
import sys
from pathlib import Path

import typer
from pydantic import ValidationError
from typer.main import get_command

from talent_audit.core.errors import RoundQueryError
from talent_audit.core.identity import resolver_for
from talent_audit.core.interpretation import summarize
from talent_audit.core.reports import (
    build_comparison_report,
    build_quadrant_report,
    build_round_report,
)
from talent_audit.integrations.round_store import DirectoryRoundStore
from talent_audit.models.config import (
    CombineMode,
    Config,
    IdentityMode,
    load_env,
)
from talent_audit.models.query_params import QueryParams
from talent_audit.ui.reporting import (
    render_comparison_md,
    render_round_md,
    save_report_md,
)
from talent_audit.ui.tables import ReportView
from talent_audit.utils.logging import configure_logging, get_logger

cli = typer.Typer(add_completion=False, no_args_is_help=True)
logger = get_logger(__name__)


@cli.callback()
def root() -> None:
	"""
	Root callback for the talent-audit CLI.

	Sets up the Typer application with no-args-is-help behavior.
	"""
	return None


def _setup(params: QueryParams) -> tuple[Config, DirectoryRoundStore]:
	"""Load environment, configure logging and open the store."""
	load_env()
	config = Config()
	config.apply_overrides(params)
	configure_logging(config.log_level)
	logger.debug("using store %s (combine=%s, identity=%s)",
	             config.store_path, config.combine_mode.value,
	             config.identity_mode.value)
	return config, DirectoryRoundStore(config.store_path)


def _params(**kwargs) -> QueryParams:
	try:
		return QueryParams(**kwargs)
	except ValidationError as exc:
		typer.secho(f"Invalid arguments: {exc.errors()[0]['msg']}",
		            fg=typer.colors.RED, err=True)
		raise typer.Exit(code=2)


def _echo_json(data: dict) -> None:
	typer.echo(json.dumps(data, indent=2))


def _export_path(config: Config, output: str) -> Path:
	"""Resolve relative export paths against OUTPUT_DIR."""
	path = Path(output)
	return path if path.is_absolute() else config.output_path / path


def report_impl(
    round_id: str,
    store_dir: str | None = None,
    as_json: bool = False,
    output: str | None = None,
) -> None:
	"""
	Print the single-round report for round_id.

	An unknown round prints an empty report rather than failing.

	Parameters:
		round_id: Round identifier.
		store_dir: Override for the snapshot directory.
		as_json: Print camelCase JSON instead of tables.
		output: Optional markdown export path; relative paths land
			under OUTPUT_DIR.
	"""
	params = _params(round_id=round_id, store_dir=store_dir)
	config, store = _setup(params)
	report = build_round_report(store, params.round_id)
	summary = summarize(report)
	if output:
		path = _export_path(config, output)
		save_report_md(path, render_round_md(report, summary))
		logger.info("saved round report to %s", path)
	if as_json:
		data = report.to_api()
		data["executiveSummary"] = summary.to_api() if summary else None
		_echo_json(data)
	else:
		ReportView().print_round(report, summary)


def compare_impl(
    current_id: str,
    previous_id: str,
    store_dir: str | None = None,
    as_json: bool = False,
    output: str | None = None,
    combine_mode: CombineMode | None = None,
    identity_mode: IdentityMode | None = None,
) -> None:
	"""
	Print the comparison between two rounds.

	Exits with code 1 when a round id is missing or unknown.
	"""
	params = _params(round_id=current_id, previous_round_id=previous_id,
	                 store_dir=store_dir, combine_mode=combine_mode,
	                 identity_mode=identity_mode)
	config, store = _setup(params)
	try:
		report = build_comparison_report(
		    store,
		    params.round_id,
		    params.previous_round_id,
		    identity=resolver_for(config.identity_mode),
		    mode=config.combine_mode,
		)
	except RoundQueryError as exc:
		typer.secho(str(exc), fg=typer.colors.RED, err=True)
		raise typer.Exit(code=1)
	if output:
		path = _export_path(config, output)
		save_report_md(path, render_comparison_md(report))
		logger.info("saved comparison report to %s", path)
	if as_json:
		_echo_json(report.to_api())
	else:
		ReportView().print_comparison(report)


def quadrants_impl(
    round_id: str,
    store_dir: str | None = None,
    as_json: bool = False,
    combine_mode: CombineMode | None = None,
    identity_mode: IdentityMode | None = None,
) -> None:
	"""Print quadrant buckets and priority actions for one round."""
	params = _params(round_id=round_id, store_dir=store_dir,
	                 combine_mode=combine_mode, identity_mode=identity_mode)
	config, store = _setup(params)
	report = build_quadrant_report(
	    store,
	    params.round_id,
	    identity=resolver_for(config.identity_mode),
	    mode=config.combine_mode,
	)
	if as_json:
		_echo_json(report.to_api())
	else:
		ReportView().print_quadrants(report)


def rounds_impl(store_dir: str | None = None) -> None:
	"""List the rounds available in the store."""
	_, store = _setup(_params(store_dir=store_dir))
	ReportView().print_rounds(store.list_rounds())


_STORE_DIR_OPTION = typer.Option(None, "--store-dir",
                                 help="Override snapshot directory")
_JSON_OPTION = typer.Option(False, "--json/--no-json",
                            help="Print JSON instead of tables")
_OUTPUT_OPTION = typer.Option(None, "--output",
                              help="Also save a markdown report here")
_COMBINE_OPTION = typer.Option(
    None, "--combine-mode",
    help="How ratings from several leaders are combined")
_IDENTITY_OPTION = typer.Option(
    None, "--identity-mode", help="How employees are matched across rounds")


@cli.command()
def report(
    round_id: str,
    store_dir: str = _STORE_DIR_OPTION,
    as_json: bool = _JSON_OPTION,
    output: str = _OUTPUT_OPTION,
) -> None:
	"""Stage distribution and performance by stage for one round."""
	report_impl(round_id, store_dir, as_json, output)


@cli.command()
def compare(
    current_id: str,
    previous_id: str,
    store_dir: str = _STORE_DIR_OPTION,
    as_json: bool = _JSON_OPTION,
    output: str = _OUTPUT_OPTION,
    combine_mode: CombineMode = _COMBINE_OPTION,
    identity_mode: IdentityMode = _IDENTITY_OPTION,
) -> None:
	"""Movement, transitions and talent health between two rounds."""
	compare_impl(current_id, previous_id, store_dir, as_json, output,
	             combine_mode, identity_mode)


@cli.command()
def quadrants(
    round_id: str,
    store_dir: str = _STORE_DIR_OPTION,
    as_json: bool = _JSON_OPTION,
    combine_mode: CombineMode = _COMBINE_OPTION,
    identity_mode: IdentityMode = _IDENTITY_OPTION,
) -> None:
	"""Quadrant classification and priority actions for one round."""
	quadrants_impl(round_id, store_dir, as_json, combine_mode, identity_mode)


@cli.command()
def rounds(store_dir: str = _STORE_DIR_OPTION) -> None:
	"""List rounds in the store."""
	rounds_impl(store_dir)


def entrypoint(argv=None, *, standalone_mode: bool = True):
	"""
	Typer entrypoint that defaults to `report` when appropriate.

	Allows calling 'talent-audit ROUND_ID' without explicitly
	specifying the 'report' subcommand.

	Parameters:
		argv: Command-line arguments. Defaults to sys.argv[1:].
		standalone_mode: If True, Click handles exit codes.

	Returns:
		Result of the Click application main invocation.
	"""
	args = sys.argv[1:] if argv is None else list(argv)

	_click_app = get_command(cli)
	commands = getattr(_click_app, "commands", {}).keys()
	if args and not args[0].startswith("-") and args[0] not in commands:
		args = ["report"] + args
	return _click_app.main(
	    args=args,
	    prog_name="talent-audit",
	    standalone_mode=standalone_mode,
	)


if __name__ == "__main__":
	entrypoint()
