from __future__ import annotations

from ..core.enums import ExportColumn
from .options import TOGGLE_FIELDS, ExportOptions

COLUMN_FIELD_PREFIX = "column_"


def options_from_form(form, *, fallback: ExportOptions) -> ExportOptions:
    """Read ExportOptions from the export form (a werkzeug MultiDict).

    Checkboxes only appear in a submitted form when ticked, so a missing
    toggle means False. Dates and color scheme fall back to `fallback`.
    """
    data = {
        "start_date": form.get("start_date") or fallback.start_date,
        "end_date": form.get("end_date") or fallback.end_date,
        "selected_employees": [e for e in form.getlist("selected_employees") if e],
        "columns": {c.value: f"{COLUMN_FIELD_PREFIX}{c.value}" in form for c in ExportColumn},
        "color_scheme": form.get("color_scheme") or fallback.color_scheme,
    }
    for name in TOGGLE_FIELDS:
        data[name] = name in form
    return ExportOptions.from_dict(data, base=fallback)
