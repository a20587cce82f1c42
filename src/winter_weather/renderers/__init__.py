"""Pure rendering functions: structured data -> HTML strings.

All renderers follow the same pattern:
  - Input: dataclasses from analysis/ plus a Locale
  - Output: str (HTML fragment, or a full page for ``page``)
  - No side effects, no I/O, no Prefect decorators

Used by flows/build.py which renders one page per dashboard state.

Public API:
  - charts: build_metric_chart_html
  - summary_table: build_summary_table_html
  - page: build_dashboard_html, page_name, all_states
  - format_utils: format_value, winter_color

Adding a renderer (UI module)
-----------------------------
1. Create ``renderers/{name}.py`` with a build function::

       from winter_weather.renderers import render_template

       def build_mywidget_html(rows: list[SummaryRow], locale: Locale) -> str:
           items = [...]
           return render_template("mywidget.html.j2", items=items)

2. Create a Jinja2 template in ``templates/{name}.html.j2``.
   Templates produce HTML fragments (no <html>/<body> tags).
   CSS goes in ``templates/base.html.j2`` within the <style> block.

3. Wire into ``renderers/page.py``: call your build function in
   ``build_dashboard_html()`` and pass the result to ``base.html.j2``.

4. Add tests: call your build function with sample data and assert
   the returned HTML contains expected content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
