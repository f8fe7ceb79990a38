"""Daily standup and weekly report reminder messages."""

from datetime import datetime, timedelta, timezone
from typing import Optional

SATURDAY = 5
SUNDAY = 6


def local_now(offset_hours: int = 7) -> datetime:
    """Current time in the team's fixed-offset timezone."""
    return datetime.now(timezone(timedelta(hours=offset_hours)))


def build_weekly_report_message(date: datetime) -> str:
    return (
        "📊 *Weekly Report Reminder* 📊\n\n"
        f"Good {date:%A}, team! <users/all> ☀️\n\n"
        "Don't forget to fill out your weekly report! Have a great weekend! 🌟"
    )


def build_standup_message(today: datetime, time_label: str = "10:00 AM (UTC+7)") -> Optional[str]:
    """
    Build the reminder for ``today``.

    Returns the weekly report reminder on Saturday, nothing on Sunday and the
    standup prompt on weekdays.
    """
    weekday = today.weekday()
    if weekday == SUNDAY:
        return None
    if weekday == SATURDAY:
        return build_weekly_report_message(today)

    return (
        "⏰ *Daily Standup Reminder* ⏰\n\n"
        "Good morning team! <users/all> ☀️\n\n"
        f"*Date:* {today:%A}, {today:%B} {today.day}, {today.year}\n"
        f"*Time:* {time_label}\n\n"
        "Please share your updates for today's standup:\n"
        "1. What did you do yesterday?\n"
        "2. What will you do today?\n"
        "3. Any blockers or challenges?\n\n"
        "Let's have a great day! 🚀"
    )
