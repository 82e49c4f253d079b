"""Forms for the analytics API.

The request body carries the raw records; the query string carries the
render parameters validated here.
"""

from __future__ import annotations

from django import forms

from analysis.windows import WINDOW_TAGS


class AnalyticsRequestForm(forms.Form):
    """Validate window selection and layout parameters for a render pass."""

    window = forms.ChoiceField(
        required=False,
        choices=[(tag, tag.capitalize()) for tag in WINDOW_TAGS],
        label="Window",
        help_text="Day, week (since Sunday) or month (since the 1st).",
    )
    width = forms.FloatField(
        required=False,
        min_value=0,
        label="Width",
        help_text="Layout width in pixels reported by the host; 0 when not measured yet.",
    )
    today = forms.DateField(
        required=False,
        label="Today",
        help_text="Optional override for the window end date (defaults to the server's local date).",
    )

    def clean_window(self) -> str:
        """Default to the single-day window when no tag is supplied."""

        return self.cleaned_data.get("window") or "day"

    def clean_width(self) -> float:
        """Treat a missing width as an unmeasured layout."""

        width = self.cleaned_data.get("width")
        return 0.0 if width is None else float(width)
