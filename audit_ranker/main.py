"""CLI entrypoint: load a Lighthouse report and rank its performance audits."""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from audit_ranker.config import DEFAULT_CATEGORY
from audit_ranker.engine.classifier import calculate_rating, metric_audits
from audit_ranker.engine.impact import estimate_impact, metric_impacts
from audit_ranker.engine.performance import PerformanceRanker
from audit_ranker.engine.ranker import guidance_level
from audit_ranker.errors import RankerError
from audit_ranker.loaders.report import (
    category_from_lhr,
    fetch_psi_report,
    load_report,
    meta_from_lhr,
)
from audit_ranker.models import Rating

console = Console()

RATING_COLORS = {
    Rating.PASS: "green",
    Rating.AVERAGE: "yellow",
    Rating.FAIL: "red",
    Rating.ERROR: "bold red",
}


def _load(args: argparse.Namespace) -> dict:
    if args.report:
        return load_report(args.report)
    return fetch_psi_report(args.url, strategy=args.strategy)


def _fmt_score(score: float | None) -> str:
    return "--" if score is None else f"{score:.2f}"


def cmd_rank(args: argparse.Namespace) -> None:
    """Print metrics, ranked failing audits, and passed audits."""
    lhr = _load(args)
    category = category_from_lhr(lhr, args.category)
    view = PerformanceRanker().build(category, meta_from_lhr(lhr))

    # Metrics
    metrics = Table(title="Metrics", show_lines=False)
    metrics.add_column("Metric", style="cyan")
    metrics.add_column("Value", justify="right")
    metrics.add_column("Score", justify="right")
    metrics.add_column("Weight", justify="right")

    for m in view.metric_audits:
        rating = calculate_rating(m.result.score, m.result.score_display_mode)
        style = RATING_COLORS[rating]
        metrics.add_row(
            m.acronym or m.id,
            m.result.display_value or "--",
            f"[{style}]{_fmt_score(m.result.score)}[/{style}]",
            f"{m.weight:g}",
        )
    console.print(metrics)

    # Ranked audits
    ranked = Table(title="Audits by Impact", show_lines=True)
    ranked.add_column("#", justify="right")
    ranked.add_column("Audit", style="cyan", max_width=40)
    ranked.add_column("Type", justify="center")
    ranked.add_column("Score", justify="right")
    ranked.add_column("Impact", justify="right")
    ranked.add_column("Linear", justify="right")
    ranked.add_column("Guidance", justify="right")

    for i, a in enumerate(view.ranked_audits, 1):
        impact = view.impacts[a.id]
        ranked.add_row(
            str(i),
            a.result.title or a.id,
            view.classifications[a.id].value,
            _fmt_score(a.result.score),
            f"{impact.overall_impact:.4f}",
            f"{impact.overall_linear_impact:.4f}",
            str(guidance_level(a)),
        )
    console.print(ranked)

    if view.passed_audits:
        console.print(f"\n[green]Passed audits ({len(view.passed_audits)}):[/green]")
        for a in view.passed_audits:
            console.print(f"  [dim]{a.id}[/dim]  {a.result.title}")

    if view.calculator_href:
        console.print(f"\n[bold]Scoring calculator:[/bold] {view.calculator_href}\n")


def cmd_calc_link(args: argparse.Namespace) -> None:
    lhr = _load(args)
    category = category_from_lhr(lhr, args.category)
    view = PerformanceRanker().build(category, meta_from_lhr(lhr))
    if not view.calculator_href:
        console.print("[yellow]No metric audits in report.[/yellow]")
        sys.exit(1)
    console.print(view.calculator_href, soft_wrap=True)


def cmd_explain(args: argparse.Namespace) -> None:
    """Per-metric breakdown of a single audit's estimated impact."""
    lhr = _load(args)
    category = category_from_lhr(lhr, args.category)
    audit = next((a for a in category.audit_refs if a.id == args.audit_id), None)
    if audit is None:
        console.print(f"[red]No audit {args.audit_id!r} in {category.id}[/red]")
        sys.exit(1)

    metrics = metric_audits(category.audit_refs)
    impact = estimate_impact(audit, metrics)

    console.print(Panel(
        f"[bold]{audit.result.title}[/bold]\n{audit.id}",
        title=f"Impact: {impact.overall_impact:.4f} / Linear: {impact.overall_linear_impact:.4f}",
    ))

    breakdown = metric_impacts(audit, metrics)
    if not breakdown:
        console.print("  [dim]No metric savings could be estimated.[/dim]\n")
        return

    table = Table(show_header=True, show_lines=False, padding=(0, 1))
    table.add_column("Metric", min_width=6)
    table.add_column("Savings", justify="right")
    table.add_column("Value", justify="right")
    table.add_column("Score", justify="right")
    table.add_column("New", justify="right")
    table.add_column("Wt", justify="right")
    table.add_column("Impact", justify="right")
    table.add_column("Linear", justify="right")

    for m in breakdown:
        table.add_row(
            m.acronym,
            f"{m.savings:,.0f}",
            f"{m.metric_value:,.0f}",
            f"{m.current_score:.2f}",
            f"{m.new_score:.2f}",
            f"{m.weight:g}",
            f"{m.weighted_impact:.4f}",
            f"{m.linear_impact:.4f}",
        )
    console.print(table)
    console.print()


def _add_source_args(p: argparse.ArgumentParser) -> None:
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--report", help="Path to a Lighthouse or PageSpeed JSON report")
    src.add_argument("--url", help="Page URL to analyze with PageSpeed Insights")
    p.add_argument("--strategy", choices=["mobile", "desktop"], default="mobile")
    p.add_argument("--category", default=DEFAULT_CATEGORY, help="Report category id")


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="audit-ranker",
        description="Rank Lighthouse performance audits by estimated score impact",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command")

    rnk = sub.add_parser("rank", help="Classify and rank the category's audits")
    _add_source_args(rnk)

    calc = sub.add_parser("calc-link", help="Print the scoring calculator link")
    _add_source_args(calc)

    exp = sub.add_parser("explain", help="Break down one audit's estimated impact")
    exp.add_argument("audit_id", help="Audit id, e.g. render-blocking-resources")
    _add_source_args(exp)

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )

    commands = {"rank": cmd_rank, "calc-link": cmd_calc_link, "explain": cmd_explain}
    if args.command not in commands:
        parser.print_help()
        sys.exit(1)

    try:
        commands[args.command](args)
    except RankerError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
