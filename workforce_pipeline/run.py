"""Main pipeline runner: validates and executes the domain pipelines."""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

import pandas as pd
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from workforce_pipeline.config import AnalyticsConfig, apply_overrides, resolve_config
from workforce_pipeline.domains import workforce

type DomainResult = dict[str, bool | str | int]

console = Console()

DOMAINS = {
    "workforce": workforce,
}

PREVIEW_COLUMNS = [
    "department_name",
    "average_department_score",
    "department_performance_rank",
    "top_performer_name",
    "salary_quartile",
    "avg_salary",
    "highest_turnover_project",
    "turnover_rate",
]


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
    )


def validate_all(config: AnalyticsConfig) -> list[DomainResult]:
    results = []
    for name, module in DOMAINS.items():
        match module.validate(config):
            case {"status": "ok", **rest}:
                results.append({"domain": name, "valid": True, **rest})
            case {"status": "error", "message": msg}:
                results.append({"domain": name, "valid": False, "error": msg})
            case _:
                results.append({"domain": name, "valid": False, "error": "Unknown validation result"})
    return results


def _format_cell(value) -> str:
    match value:
        case float() as f if pd.isna(f):
            return "—"
        case float() as f:
            return f"{f:,.2f}"
        case pd.Timestamp() as ts:
            return ts.date().isoformat()
        case _ if pd.isna(value):
            return "—"
        case _:
            return str(value)


def render_preview(report: pd.DataFrame, rows: int) -> Table:
    table = Table(title=f"Workforce report (first {min(rows, len(report))} of {len(report)} rows)")
    for col in PREVIEW_COLUMNS:
        table.add_column(col, justify="right" if col != "department_name" else "left")

    for record in report[PREVIEW_COLUMNS].head(rows).to_dict(orient="records"):
        table.add_row(*(_format_cell(record[col]) for col in PREVIEW_COLUMNS))
    return table


def run_domain(name: str, config: AnalyticsConfig) -> None:
    console.print(f"\n[cyan]{'=' * 60}[/cyan]")
    console.print(f"[bold cyan]Domain: {name}[/bold cyan]")
    result = DOMAINS[name].run(config=config)
    console.print(render_preview(result.report, config.preview_rows))


def run_all(config: AnalyticsConfig) -> None:
    console.print("[bold]Running all domain pipelines...[/bold]")
    for name in config.domains:
        if name not in DOMAINS:
            console.print(f"[red]Unknown domain '{name}' in configuration[/red]")
            sys.exit(1)
        run_domain(name, config)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the workforce analytics pipeline")
    parser.add_argument("--validate", action="store_true", help="Only validate inputs, don't run")
    parser.add_argument("--domain", type=str, help="Run a specific domain only")
    parser.add_argument("--env", type=str, default="production", help="Configuration environment")
    parser.add_argument("--data-dir", type=Path, help="Directory holding the table CSV exports")
    parser.add_argument("--output", type=Path, help="Directory to write the report into")
    parser.add_argument("--format", choices=["csv", "parquet", "excel", "json"], help="Report file format")
    parser.add_argument("--join", choices=["inner", "left"], help="Join mode for the final report")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> AnalyticsConfig:
    config = resolve_config(args.env)
    overrides = {
        "data_dir": args.data_dir,
        "output_dir": args.output,
        "output_format": args.format,
        "report_join": args.join,
    }
    config = apply_overrides(config, {k: v for k, v in overrides.items() if v is not None})
    if args.domain:
        config = replace(config, domains=[args.domain])
    return config


def main(argv: list[str] | None = None):
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = config_from_args(args)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        sys.exit(1)

    if args.validate:
        results = validate_all(config)
        table = Table(title="Validation Results")
        table.add_column("Domain")
        table.add_column("Valid")
        table.add_column("Details")

        for r in results:
            status = "[green]✓[/green]" if r["valid"] else "[red]✗[/red]"
            detail = r.get("error", "OK")
            table.add_row(r["domain"], status, detail)

        console.print(table)

        if not all(r["valid"] for r in results):
            sys.exit(1)
    elif args.domain:
        if args.domain not in DOMAINS:
            console.print(f"[red]Unknown domain: {args.domain}[/red]")
            sys.exit(1)
        run_domain(args.domain, config)
    else:
        run_all(config)


if __name__ == "__main__":
    main()
