"""Command-line interface for deriving dashboard analytics.

Provides subcommands: `summary` and `export`. Each command is implemented as
a `cmd_*` function that accepts an argparse namespace.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from crm_analytics.aggregate.build import derive_from_dataset
from crm_analytics.config import get_settings
from crm_analytics.ingest.load_dataset import empty_dataset, load_dataset, sample_dataset
from crm_analytics.logging_config import configure_logging
from crm_analytics.models import AnalyticsResult, Dataset

log = logging.getLogger(__name__)


# --------------------------------------------------
# Helpers
# --------------------------------------------------
def _resolve_dataset(args: argparse.Namespace) -> Dataset:
    """Pick the dataset for a command.

    Precedence: `--empty`, then `--data`, then `CRM_DATA_PATH`, then the
    built-in sample.
    """
    if args.empty:
        log.info("Using the empty dataset")
        return empty_dataset()

    path = args.data or get_settings().data_path
    if path is not None:
        return load_dataset(Path(path))

    log.info("Using the built-in sample dataset")
    return sample_dataset()


def _derive(args: argparse.Namespace) -> AnalyticsResult:
    s = get_settings()
    return derive_from_dataset(
        _resolve_dataset(args),
        recent_limit=s.recent_deals_limit,
        top_limit=s.top_companies_limit,
    )


def render_summary(result: AnalyticsResult) -> str:
    """Render a plain-text report of an `AnalyticsResult`."""
    k = result.kpis
    lines = [
        f"State: {result.state.value}",
        "",
        "KPIs",
        f"  Total Revenue   {k.total_revenue.value}",
        f"  Active Deals    {k.active_deals.value}",
        f"  Win Rate        {k.win_rate.value}",
        f"  Monthly Growth  {k.monthly_growth.value}",
        "",
        "Pipeline",
    ]
    if result.pipeline:
        lines += [
            f"  {b.stage.value:<12} ${b.total_value:>12,.0f}  {b.deal_count:>4} deals"
            for b in result.pipeline
        ]
    else:
        lines.append("  No pipeline data")

    lines += ["", "Recent Deals"]
    if result.recent_deals:
        lines += [
            f"  {d.close_date.isoformat()}  {d.name} ({d.company}) {d.stage.value} ${d.value:,.0f}"
            for d in result.recent_deals
        ]
    else:
        lines.append("  No deals yet")

    lines += ["", "Top Companies"]
    if result.top_companies:
        lines += [
            f"  {c.name:<20} ${c.total_value:>12,.0f}  {c.deal_count:>4} deals"
            for c in result.top_companies
        ]
    else:
        lines.append("  No companies yet")

    return "\n".join(lines) + "\n"


# --------------------------------------------------
# SUMMARY
# --------------------------------------------------
def cmd_summary(args: argparse.Namespace) -> None:
    """Print KPI headlines, the pipeline and both leaderboards.

    Args:
        args: argparse namespace with `data` and `empty`.
    """
    sys.stdout.write(render_summary(_derive(args)))


# --------------------------------------------------
# EXPORT
# --------------------------------------------------
def cmd_export(args: argparse.Namespace) -> None:
    """Write the full `AnalyticsResult` as JSON to `args.out`.

    Args:
        args: argparse namespace with `out`, `data` and `empty`.
    """
    result = _derive(args)
    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(result.model_dump_json(indent=2), encoding="utf-8")
    log.info("Analytics written to %s (state=%s)", out, result.state.value)


# --------------------------------------------------
# CLI
# --------------------------------------------------
def _add_source_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--data", type=Path, default=None, help="JSON dataset file")
    p.add_argument("--empty", action="store_true", help="derive for the unpopulated dashboard")


def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser for the CLI.

    Returns:
        Configured argparse.ArgumentParser with `summary` and `export` subcommands.
    """
    p = argparse.ArgumentParser(prog="crm-analytics")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_summary = sub.add_parser("summary")
    _add_source_args(p_summary)

    p_export = sub.add_parser("export")
    p_export.add_argument("--out", type=Path, required=True)
    _add_source_args(p_export)

    return p


def main(argv: list[str] | None = None) -> None:
    """CLI entry point: parse args, configure logging and dispatch commands."""
    load_dotenv()
    configure_logging(get_settings().log_path)

    args = build_parser().parse_args(argv)

    if args.cmd == "summary":
        cmd_summary(args)
    elif args.cmd == "export":
        cmd_export(args)
    else:
        raise SystemExit(2)


if __name__ == "__main__":
    main()
