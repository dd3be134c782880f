from __future__ import annotations

import csv
import json

from .report import Report


def export_checks_csv(path: str, report: Report):
    fieldnames = ['url', 'label', 'pass', 'tip']
    with open(path, 'w', newline='') as f:
        w = csv.DictWriter(f, fieldnames=fieldnames)
        w.writeheader()
        for c in report.checks:
            w.writerow({
                'url': report.url,
                'label': c.label,
                'pass': c.passed,
                'tip': '' if c.passed else c.tip,
            })


def report_to_json(report: Report, indent: int = 4) -> str:
    return json.dumps(report.to_dict(), indent=indent)


def format_report_text(report: Report) -> str:
    """Human-readable summary: extracted fields, then one line per check."""
    lines = [
        f"URL Analyzed: {report.url}",
        f"SEO Score: {report.score}% ({report.passed_count}/{len(report.checks)} checks passed)",
        "",
        f"Title: {report.title or '-'}",
        f"Meta description: {report.description or '-'}",
        f"Canonical: {report.canonical or '-'}",
        f"H1: {' | '.join(report.h1s) if report.h1s else '-'}",
        f"Images: {report.images.total} total, {report.images.missing_alt} missing alt",
        f"Viewport: {report.viewport or '-'}",
        f"Robots: {report.robots or '-'}",
        f"Charset: {report.charset or '-'}",
        "",
        "Checks:",
    ]
    for c in report.checks:
        mark = "PASS" if c.passed else "FAIL"
        line = f"  [{mark}] {c.label}"
        if not c.passed and c.tip:
            line += f" - {c.tip}"
        lines.append(line)
    return "\n".join(lines)
