"""schengen-calc CLI 入口: compliance queries over a JSON visit file."""

from __future__ import annotations

import argparse
import datetime as dt
import json
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel

from schengen_calc.domain.exceptions import DomainError
from schengen_calc.domain.membership import resolve_country_code
from schengen_calc.domain.models import ComplianceReport, ComplianceStatus
from schengen_calc.services import compliance_service


def _parse_date(value: str) -> dt.date:
    try:
        return dt.date.fromisoformat(value.strip())
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, use YYYY-MM-DD") from exc


def _load_visits(path: str) -> list[dict[str, Any]]:
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        payload = payload.get("visits", [])
    if not isinstance(payload, list):
        raise ValueError("visits file must hold a JSON list or an object with a 'visits' list")
    return payload


def _dump(value: Any) -> str:
    if isinstance(value, BaseModel):
        data = value.model_dump(mode="json")
    elif isinstance(value, list):
        data = [item.model_dump(mode="json") if isinstance(item, BaseModel) else item for item in value]
    else:
        data = value
    return json.dumps(data, ensure_ascii=False, indent=2)


def _format_status(status: ComplianceStatus) -> str:
    lines = [
        f"Reference date : {status.reference_date}",
        f"Days used      : {status.used_days} / 90",
        f"Days remaining : {status.remaining_days}",
        f"Compliant      : {'yes' if status.is_compliant else 'NO'}",
    ]
    if status.next_reset_date is not None:
        lines.append(f"Next reset     : {status.next_reset_date}")
    return "\n".join(lines)


def _format_report(report: ComplianceReport) -> str:
    lines = [_format_status(report.status)]
    for issue in report.warnings:
        lines.append(f"! {issue.message}")
    for text in report.recommendations:
        lines.append(f"- {text}")
    if report.next_allowed_entry is not None:
        lines.append(f"Next allowed entry: {report.next_allowed_entry}")
    return "\n".join(lines)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="schengen-calc", description="Schengen 90/180-day calculator")
    sub = parser.add_subparsers(dest="command", required=True)

    status = sub.add_parser("status", help="Usage of the 180-day window on a date")
    status.add_argument("--visits", required=True, help="JSON file with the visit list")
    status.add_argument("--date", type=_parse_date, default=None, help="Reference date (default: today)")
    status.add_argument("--text", action="store_true", help="Readable output instead of JSON")

    report = sub.add_parser("report", help="Status plus warnings and recommendations")
    report.add_argument("--visits", required=True)
    report.add_argument("--date", type=_parse_date, default=None)
    report.add_argument("--text", action="store_true")

    violations = sub.add_parser("violations", help="Periods over the 90-day limit")
    violations.add_argument("--visits", required=True)
    violations.add_argument("--from", dest="from_date", type=_parse_date, default=None)
    violations.add_argument("--to", dest="to_date", type=_parse_date, default=None)

    validate = sub.add_parser("validate", help="Check a planned trip before booking")
    validate.add_argument("--visits", required=True)
    validate.add_argument("--entry", type=_parse_date, required=True)
    validate.add_argument("--exit", type=_parse_date, required=True)
    validate.add_argument("--country", required=True)

    window = sub.add_parser("safe-window", help="First compliant window of a given length")
    window.add_argument("--visits", required=True)
    window.add_argument("--days", type=int, required=True, help="Stay length, 1-90")
    window.add_argument("--start", type=_parse_date, default=None)
    window.add_argument("--horizon", type=int, default=None)

    member = sub.add_parser("member", help="Is a country part of the Schengen Area")
    member.add_argument("country")
    return parser


def _run(args: argparse.Namespace) -> str:
    if args.command == "member":
        return _dump({
            "country": args.country,
            "code": resolve_country_code(args.country),
            "is_member": compliance_service.is_schengen_member(args.country),
        })

    visits = _load_visits(args.visits)
    if args.command == "status":
        result = compliance_service.compute_status(visits, args.date)
        return _format_status(result) if args.text else _dump(result)
    if args.command == "report":
        result = compliance_service.compute_report(visits, args.date)
        return _format_report(result) if args.text else _dump(result)
    if args.command == "violations":
        return _dump(compliance_service.find_violations(visits, args.from_date, args.to_date))
    if args.command == "validate":
        return _dump(
            compliance_service.validate_future_trip(visits, args.entry, args.exit, args.country)
        )
    window = compliance_service.find_safe_window(visits, args.days, args.start, args.horizon)
    return _dump({"found": window is not None, "window": window.model_dump(mode="json") if window else None})


def main(argv: list[str] | None = None) -> int:
    load_dotenv()  # 自动加载 .env 文件
    args = _build_parser().parse_args(argv)
    try:
        print(_run(args))
    except DomainError as exc:
        print(_dump({"error": True, "code": exc.code, "message": str(exc)}), file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
