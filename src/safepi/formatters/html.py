"""Self-contained HTML report rendering."""

from datetime import datetime

from safepi.models import ObservatoryScan
from safepi.validators import escape_html, is_valid_url

from .colors import HtmlColor, html_grade_color, html_status_color
from .dates import DISPLAY_FORMAT, local_timestamp

STYLESHEET = """
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            line-height: 1.6;
            max-width: 800px;
            margin: 0 auto;
            padding: 20px;
            background-color: #f8f9fa;
        }
        .container {
            background: white;
            padding: 30px;
            border-radius: 8px;
            box-shadow: 0 2px 10px rgba(0,0,0,0.1);
        }
        .header {
            text-align: center;
            border-bottom: 3px solid #007bff;
            padding-bottom: 20px;
            margin-bottom: 30px;
        }
        .header h1 { color: #333; margin: 0; }
        .status {
            display: inline-block;
            padding: 8px 16px;
            border-radius: 4px;
            font-weight: bold;
            color: white;
        }
        .grade { font-size: 2em; font-weight: bold; margin: 10px 0; }
        .metric {
            display: flex;
            justify-content: space-between;
            padding: 10px 0;
            border-bottom: 1px solid #eee;
        }
        .metric:last-child { border-bottom: none; }
        .metric-label { font-weight: bold; color: #555; }
        .metric-value { color: #333; }
        .details-link {
            display: inline-block;
            margin-top: 20px;
            padding: 10px 20px;
            color: white;
            text-decoration: none;
            border-radius: 4px;
        }
        .timestamp {
            text-align: center;
            color: #666;
            font-size: 0.9em;
            margin-top: 30px;
            padding-top: 20px;
            border-top: 1px solid #eee;
        }
"""

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Security Scan Report - {title_host}</title>
    <style>{stylesheet}    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>Security Scan Report</h1>
            <h2>{heading_host}</h2>
        </div>

        <div style="text-align: center; margin-bottom: 30px;">
            <div class="status" style="background-color: {status_color};">{status}</div>
            <div class="grade" style="color: {grade_color};">{grade}</div>
        </div>
{metrics}
{details_link}
        <div class="timestamp">
            Generated on {generated_at}<br>
            Scan performed on {scanned_at}
        </div>
    </div>
</body>
</html>
"""

METRIC_TEMPLATE = """
        <div class="metric">
            <span class="metric-label">{label}:</span>
            <span class="metric-value"{style}>{value}</span>
        </div>"""

DETAILS_LINK_TEMPLATE = """
        <div style="text-align: center;">
            <a href="{url}" class="details-link" style="background-color: {color};" target="_blank" rel="noopener noreferrer">
                View Detailed Report
            </a>
        </div>
"""


def _metric(label: str, value: object, color: HtmlColor | None = None) -> str:
    style = f' style="color: {color.value};"' if color else ""
    return METRIC_TEMPLATE.format(label=label, value=escape_html(value), style=style)


def render_details_link(details_url: str | None) -> str:
    """Render the outbound link, only for a present and valid http(s) URL."""
    if not details_url or not is_valid_url(details_url):
        return ""
    return DETAILS_LINK_TEMPLATE.format(
        url=escape_html(details_url),
        color=HtmlColor.PRIMARY.value,
    )


def format_html(
    scan: ObservatoryScan,
    passing_score: int,
    generated_at: datetime | None = None,
) -> str:
    """Render a scan as a complete HTML document with inline styles.

    Every value taken from the payload is escaped before interpolation.
    """
    passed = scan.passed(passing_score)
    score_color = html_status_color(passed)
    failed_color = HtmlColor.DANGER if scan.tests_failed > 0 else HtmlColor.SUCCESS

    metrics = "".join(
        [
            _metric("Score", f"{scan.score}/{passing_score}", score_color),
            _metric("Tests Passed", scan.tests_passed, HtmlColor.SUCCESS),
            _metric("Tests Failed", scan.tests_failed, failed_color),
            _metric("Total Tests", scan.tests_quantity),
            _metric("Algorithm Version", scan.algorithm_version or "N/A"),
        ]
    )

    return PAGE_TEMPLATE.format(
        title_host=escape_html(scan.host or "Unknown"),
        heading_host=escape_html(scan.host or "Unknown Domain"),
        stylesheet=STYLESHEET,
        status="PASS" if passed else "FAIL",
        status_color=html_status_color(passed).value,
        grade=escape_html(scan.grade or "N/A"),
        grade_color=html_grade_color(scan.grade).value,
        metrics=metrics,
        details_link=render_details_link(scan.details_url),
        generated_at=(generated_at or datetime.now()).strftime(DISPLAY_FORMAT),
        scanned_at=escape_html(local_timestamp(scan.scanned_at)),
    )
