# backend/core/exports.py

"""
CSV and printable HTML output shared by the export endpoints.
"""

import csv
from datetime import datetime
from io import StringIO
from typing import Any, Iterable, Optional, Sequence

from fastapi.responses import HTMLResponse, Response
from jinja2 import Environment, select_autoescape

_jinja_env = Environment(
    autoescape=select_autoescape(['html', 'xml'], default_for_string=True),
    trim_blocks=True,
    lstrip_blocks=True,
)

PRINT_TEMPLATE = _jinja_env.from_string("""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{{ title }}</title>
<style>
body { font-family: Arial, sans-serif; margin: 24px; }
h1 { font-size: 20px; margin-bottom: 4px; }
.meta { color: #666; font-size: 12px; margin-bottom: 16px; }
table { width: 100%; border-collapse: collapse; }
th, td { border: 1px solid #ddd; padding: 6px 8px; text-align: left; font-size: 13px; }
th { background: #f5f5f5; }
tfoot td { font-weight: bold; }
</style>
</head>
<body>
<h1>{{ title }}</h1>
<div class="meta">
{% if subtitle %}{{ subtitle }} &middot; {% endif %}Generated {{ generated_at }}
</div>
{% if rows %}
<table>
<thead>
<tr>{% for header in headers %}<th>{{ header }}</th>{% endfor %}</tr>
</thead>
<tbody>
{% for row in rows %}
<tr>{% for cell in row %}<td>{{ cell }}</td>{% endfor %}</tr>
{% endfor %}
</tbody>
{% if footer %}
<tfoot>
<tr>{% for cell in footer %}<td>{{ cell }}</td>{% endfor %}</tr>
</tfoot>
{% endif %}
</table>
{% else %}
<p>No records to display.</p>
{% endif %}
</body>
</html>
""")


def _cell(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def to_csv(headers: Sequence[str], rows: Iterable[Sequence[Any]]) -> str:
    """
    Build a CSV document with every cell quoted.

    Embedded quotes are doubled. Returns an empty string when there are no
    rows, so callers can tell "nothing to export" apart from a header-only file.
    """
    rows = list(rows)
    if not rows:
        return ""

    output = StringIO()
    writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(headers)
    for row in rows:
        writer.writerow([_cell(value) for value in row])
    return output.getvalue().rstrip("\n")


def render_print_document(
    title: str,
    headers: Sequence[str],
    rows: Iterable[Sequence[Any]],
    subtitle: Optional[str] = None,
    footer: Optional[Sequence[Any]] = None,
    generated_at: Optional[datetime] = None,
) -> str:
    """Render a self-contained HTML page meant for the browser print dialog"""
    generated_at = generated_at or datetime.now()
    return PRINT_TEMPLATE.render(
        title=title,
        subtitle=subtitle,
        headers=list(headers),
        rows=[[_cell(value) for value in row] for row in rows],
        footer=[_cell(value) for value in footer] if footer else None,
        generated_at=generated_at.strftime("%Y-%m-%d %H:%M"),
    )


def csv_response(content: str, filename_prefix: str) -> Response:
    return Response(
        content=content,
        media_type="text/csv",
        headers={
            "Content-Disposition": f"attachment; filename={filename_prefix}_{datetime.utcnow().strftime('%Y%m%d')}.csv"
        }
    )


def html_response(content: str) -> HTMLResponse:
    return HTMLResponse(content=content)
