#!/usr/bin/env python3
"""MCM Assess - tiered capability assessment for MCM allocation modelling.

Shows, for a country profile, which methodology tier each module would use
and the resulting data quality rating.

Usage:
    mcm-assess assess                          # Default country (registry default_country)
    mcm-assess assess --country italy          # Switch the active country
    mcm-assess assess --country vietnam --json # Machine-readable report
    mcm-assess compare                         # One summary row per country
    mcm-assess countries                       # List available country profiles
    mcm-assess catalog                         # Show modules and tiers
    mcm-assess validate --strict               # Fail on tier order / weight disagreements
    mcm-assess --catalog rules_v2.yaml assess  # Use an explicit rule set
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .catalog import (
    CapabilityRegistry,
    RuleCatalog,
    get_default_catalog,
    get_default_registry,
    load_catalog,
    load_registry,
)
from .config import get_default_country, get_log_level
from .constants import LOG_LEVELS
from .engine import AssessmentEngine
from .errors import ConfigurationError, UnknownSubjectError
from .schemas import AssessmentReport
from .utils.logger import configure_global_logging, get_logger

console = Console()
logger = logging.getLogger(__name__)


def _load_catalog(args: argparse.Namespace) -> RuleCatalog:
    if args.catalog:
        return load_catalog(args.catalog)
    return get_default_catalog()


def _load_registry(args: argparse.Namespace, catalog: RuleCatalog) -> CapabilityRegistry:
    registry = load_registry(args.profiles) if args.profiles else get_default_registry()
    for key, extra in registry.unknown_keys(catalog).items():
        logger.warning(f"Country '{key}' declares capabilities unknown to the catalog: {', '.join(extra)}")
    return registry


def render_report(report: AssessmentReport) -> None:
    """Print a report as a summary panel plus one table per module."""
    style = report.status.style
    summary = (
        f"[bold]{report.subject_name}[/bold]\n"
        f"[bold {style}]{report.percentage}% Data Quality[/bold {style}]\n"
        f"[{style}]{report.status.value} ({report.total_score}/{report.max_score})[/{style}]"
    )
    if report.proxy_attributes:
        proxies = ", ".join(f"{k}: {v}" for k, v in report.proxy_attributes.items())
        summary += f"\n[dim]{escape(proxies)}[/dim]"
    console.print(Panel(summary, title="Assessment Summary", border_style=style))

    for assessment in report.module_assessments:
        tier = assessment.selected_tier
        table = Table(
            title=f"{assessment.module.name}: {tier.name}",
            caption=tier.outcome,
            title_justify="left",
        )
        table.add_column("Tier", justify="right")
        table.add_column("Method")
        table.add_column("Requires", style="cyan")
        table.add_column("Weight", justify="right")
        table.add_column("Available", justify="center")
        table.add_column("", justify="center")

        for check in assessment.checks:
            table.add_row(
                str(check.tier.level),
                check.tier.name,
                check.tier.required_capability or "-",
                str(check.tier.quality_weight),
                "[green]✓[/green]" if check.satisfied else "[red]✗[/red]",
                "[bold white on blue] USED [/bold white on blue]" if check.selected else "",
            )
        console.print(table)

    console.print()
    console.print(f"For [bold]{report.subject_name}[/bold], the framework identifies:")
    for line in report.insights():
        console.print(f"  • {line}")


def cmd_assess(args: argparse.Namespace) -> int:
    """Assess a single country."""
    catalog = _load_catalog(args)
    registry = _load_registry(args, catalog)

    country = args.country or get_default_country() or registry.default_key
    try:
        record = registry.get(country)
    except UnknownSubjectError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1

    report = AssessmentEngine(catalog).assess(record)
    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        render_report(report)
    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    """Assess every registered country."""
    catalog = _load_catalog(args)
    registry = _load_registry(args, catalog)
    engine = AssessmentEngine(catalog)
    reports = [engine.assess(record) for record in registry]

    if args.json:
        print(json.dumps([r.to_dict() for r in reports], indent=2))
        return 0

    table = Table(title=f"Data Quality by Country (catalog v{catalog.version})")
    table.add_column("Key", style="cyan")
    table.add_column("Country")
    table.add_column("Tiers", justify="center")
    table.add_column("Score", justify="right")
    table.add_column("Quality", justify="right")
    table.add_column("Status")

    for report in reports:
        table.add_row(
            report.subject_key,
            report.subject_name,
            "/".join(str(a.selected_tier.level) for a in report.module_assessments),
            f"{report.total_score}/{report.max_score}",
            f"{report.percentage}%",
            f"[{report.status.style}]{report.status.value}[/{report.status.style}]",
        )
    console.print(table)
    return 0


def cmd_countries(args: argparse.Namespace) -> int:
    """List country profiles."""
    catalog = _load_catalog(args)
    registry = _load_registry(args, catalog)

    table = Table(title="Country Profiles")
    table.add_column("Key", style="cyan")
    table.add_column("Name")
    table.add_column("Region")
    table.add_column("Data Sources", justify="right")
    for record in registry:
        marker = " (default)" if record.subject_key == registry.default_key else ""
        table.add_row(
            record.subject_key + marker,
            record.subject_name,
            str(record.proxy_attributes.get("region", "-")),
            f"{len(record.available_keys())}/{len(catalog.capability_keys)}",
        )
    console.print(table)
    return 0


def cmd_catalog(args: argparse.Namespace) -> int:
    """Show modules and tiers in catalog order."""
    catalog = _load_catalog(args)

    if args.json:
        print(json.dumps(catalog.to_dict(), indent=2))
        return 0

    for module in catalog:
        table = Table(title=f"{module.name} ({module.id})", title_justify="left")
        table.add_column("Tier", justify="right")
        table.add_column("Method")
        table.add_column("Requires", style="cyan")
        table.add_column("Weight", justify="right")
        table.add_column("Outcome")
        for tier in module.tiers:
            table.add_row(
                str(tier.level),
                tier.name,
                tier.required_capability or "-",
                str(tier.quality_weight),
                tier.outcome,
            )
        console.print(table)
    console.print(f"Catalog v{catalog.version}: {len(catalog)} modules, max score {catalog.max_score}")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate the catalog (and profiles) without assessing."""
    catalog = _load_catalog(args)
    registry = _load_registry(args, catalog)

    warnings = catalog.ordering_warnings()
    if warnings and args.strict:
        raise ConfigurationError("; ".join(warnings))
    for warning in warnings:
        console.print(f"[yellow]Warning:[/yellow] {escape(warning)}")
    console.print(
        f"[green]OK[/green] catalog v{catalog.version}: {len(catalog)} modules, "
        f"{len(catalog.capability_keys)} capability keys, max score {catalog.max_score}; "
        f"{len(registry)} country profiles"
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tiered capability assessment for MCM allocation modelling")
    parser.add_argument("--catalog", type=Path, help="Rule catalog YAML (default: config/mcm_modules.yaml)")
    parser.add_argument("--profiles", type=Path, help="Country profiles YAML (default: config/country_profiles.yaml)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level (default: $MCM_LOG_LEVEL or INFO)",
    )
    parser.add_argument("--log-file", type=Path, help="Also write logs to this file")

    subparsers = parser.add_subparsers(dest="command", required=True)

    assess_parser = subparsers.add_parser("assess", help="Assess one country")
    assess_parser.add_argument("--country", "-c", help="Country key (e.g., nigeria, vietnam, italy)")
    assess_parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    assess_parser.set_defaults(func=cmd_assess)

    compare_parser = subparsers.add_parser("compare", help="Assess every country")
    compare_parser.add_argument("--json", action="store_true", help="Print the reports as JSON")
    compare_parser.set_defaults(func=cmd_compare)

    countries_parser = subparsers.add_parser("countries", help="List country profiles")
    countries_parser.set_defaults(func=cmd_countries)

    catalog_parser = subparsers.add_parser("catalog", help="Show modules and tiers")
    catalog_parser.add_argument("--json", action="store_true", help="Print the catalog as JSON")
    catalog_parser.set_defaults(func=cmd_catalog)

    validate_parser = subparsers.add_parser("validate", help="Validate catalog and profiles")
    validate_parser.add_argument(
        "--strict", action="store_true", help="Treat tier order / weight disagreements as errors"
    )
    validate_parser.set_defaults(func=cmd_validate)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        log_level = args.log_level or get_log_level()
        configure_global_logging(log_level, phase=args.command)
        if args.log_file:
            get_logger("mcm_framework", log_level, log_file=args.log_file, phase=args.command)
        return args.func(args)
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        return 1
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] File not found: {escape(str(e.filename))}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
