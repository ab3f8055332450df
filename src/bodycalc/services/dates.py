"""Date helpers for progress entries."""

from datetime import UTC, date, datetime

DATE_STYLES = {
    "short": "{month}/{day}",
    "medium": "{month_name} {day}, {year}",
    "long": "{weekday}, {month_name} {day}, {year}",
}


def today_iso() -> str:
    """Return today's UTC date as YYYY-MM-DD."""
    return datetime.now(tz=UTC).date().isoformat()


def format_date(iso_date: str, style: str = "medium") -> str:
    """Format an ISO date for display; unknown styles fall back to medium."""
    value = date.fromisoformat(iso_date[:10])
    template = DATE_STYLES.get(style, DATE_STYLES["medium"])
    return template.format(
        month=value.month,
        day=value.day,
        year=value.year,
        month_name=value.strftime("%b"),
        weekday=value.strftime("%a"),
    )
