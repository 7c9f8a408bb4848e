"""Main entry point for Hesabu"""

import asyncio
import argparse

from core.enums import CellKind, ReportType, ValidationStatus
from core.exceptions import ReportingError
from db.sources import create_source
from engine.validator import format_amount, summarize
from orchestrator import ReportingOrchestrator
from ui.progress import ConsoleProgress
from utils.log import configure_logging
from config import settings

STATUS_MARKS = {
    ValidationStatus.PASSED: "✓",
    ValidationStatus.FAILED: "✗",
    ValidationStatus.SKIPPED: "-",
}


def _report_type(value: str) -> ReportType:
    for report_type in ReportType:
        if value in (report_type.value, report_type.form_code):
            return report_type
    raise argparse.ArgumentTypeError(f"unknown report '{value}'")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Hesabu - BOT regulatory return computation and validation"
    )
    parser.add_argument(
        "--source",
        choices=["sample", "database"],
        default=settings.REPORT_SOURCE,
        help="Where report inputs come from"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    audit = sub.add_parser("audit", help="Load reports and run cross-sheet validation")
    audit.add_argument(
        "--report",
        type=_report_type,
        action="append",
        help="Limit to a report (name or form code); repeatable"
    )

    show = sub.add_parser("show", help="Print every cell of one report")
    show.add_argument("report", type=_report_type)
    return parser


async def run_audit(orchestrator: ReportingOrchestrator, report_types=None) -> int:
    ctx = await orchestrator.run(report_types)

    print("\nValidation results")
    for result in ctx.results:
        mark = STATUS_MARKS[result.status]
        line = f"  [{mark}] {result.rule_id} {result.description}"
        if result.status == ValidationStatus.SKIPPED:
            missing = ", ".join(r.form_code for r in result.missing_reports)
            line += f" (skipped: {missing} not loaded)"
        print(line)
        if result.message:
            print(f"      {result.message}")

    summary = summarize(ctx.results)
    print(
        f"\n{summary.passed} passed, {summary.failed} failed, {summary.skipped} skipped"
    )
    return 0 if summary.all_passed else 1


async def run_show(orchestrator: ReportingOrchestrator, report_type: ReportType) -> int:
    await orchestrator.run([report_type])
    store = orchestrator.store(report_type)
    print(f"\n{report_type.form_code} {report_type.value}")
    for cell in store.cells():
        marker = "=" if cell.kind == CellKind.DERIVED else " "
        print(f"  {cell.cell_id:>14} {marker} {format_amount(cell.value):>20}  {cell.label}")
    return 0


def main():
    args = build_parser().parse_args()
    configure_logging(settings.LOG_LEVEL, settings.LOG_JSON)

    orchestrator = ReportingOrchestrator(
        source=create_source(args.source),
        progress=ConsoleProgress(),
    )

    try:
        if args.command == "show":
            return asyncio.run(run_show(orchestrator, args.report))
        return asyncio.run(run_audit(orchestrator, args.report))
    except ReportingError as e:
        print(f"\n✗ Failed: {e}")
        return 2


if __name__ == "__main__":
    exit(main())
