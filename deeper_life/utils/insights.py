"""
Terminal formatting for habit reports, habit stats and routine checklists.
"""

from typing import Any, Dict, List, Optional


WIDTH = 60


def format_progress_bar(percentage: int, width: int = 20) -> str:
    """Render a percentage as a fixed-width bar."""
    percentage = max(0, min(100, percentage))
    filled = int(round(width * percentage / 100))
    return "█" * filled + "░" * (width - filled)


def format_report_cli(report: Dict[str, Any]) -> str:
    """
    Format a habit report for terminal display.

    Args:
        report: Output of ``generate_report``

    Returns:
        Terminal-formatted string with box drawing
    """
    lines = []
    lines.append("=" * WIDTH)
    lines.append("  HABIT REPORT")
    lines.append("=" * WIDTH)

    summary = report.get("summary", {})
    percentage = summary.get("percentage", 0)
    lines.append(
        f"  Today: {summary.get('completed', 0)}/{summary.get('total', 0)} "
        f"{format_progress_bar(percentage)} {percentage}%"
    )
    remaining = summary.get("habits", {}).get("remaining", [])
    if remaining:
        lines.append(f"  Still to do: {', '.join(remaining)}")

    habits = report.get("habits", [])
    if habits:
        lines.append("-" * WIDTH)
        lines.append(f"    {'Habit':<22} {'Streak':>6} {'Best':>5} {'7d':>5} {'30d':>5} {'Week':>6}")
        for entry in habits:
            stats = entry.get("stats", {})
            weekly = entry.get("weekly", {})
            change = weekly.get("change", 0)
            trend = "↑" if change > 0 else ("↓" if change < 0 else "=")
            lines.append(
                f"    {entry.get('name', '')[:22]:<22} "
                f"{stats.get('current_streak', 0):>6} "
                f"{stats.get('longest_streak', 0):>5} "
                f"{stats.get('completion_rate_7_days', 0):>4}% "
                f"{stats.get('completion_rate_30_days', 0):>4}% "
                f"{weekly.get('this_week', 0):>4} {trend}"
            )

    insights = report.get("insights", [])
    if insights:
        lines.append("-" * WIDTH)
        for insight in insights:
            lines.append(f"  💡 {insight}")

    lines.append("=" * WIDTH)
    return "\n".join(lines)


def format_habit_detail_cli(
    name: str,
    stats: Dict[str, Any],
    weekly: Dict[str, Any],
    prediction: int,
    message: str,
    history: Optional[str] = None
) -> str:
    lines = []
    lines.append("=" * WIDTH)
    lines.append(f"  {name.upper()}")
    lines.append("=" * WIDTH)
    if history:
        lines.append(f"  {history}")
        lines.append("")
    done_today = "yes" if stats.get("completed_today") else "no"
    lines.append(f"  Done today:      {done_today}")
    lines.append(f"  Current streak:  {stats.get('current_streak', 0)} days")
    lines.append(f"  Longest streak:  {stats.get('longest_streak', 0)} days")
    lines.append(f"  Last 7 days:     {stats.get('completion_rate_7_days', 0)}%")
    lines.append(f"  Last 30 days:    {stats.get('completion_rate_30_days', 0)}%")
    lines.append(
        f"  This week:       {weekly.get('this_week', 0)} "
        f"(last week {weekly.get('last_week', 0)}, change {weekly.get('change', 0):+d})"
    )
    lines.append(f"  Tomorrow:        {prediction}% likely")
    lines.append("-" * WIDTH)
    lines.append(f"  {message}")
    lines.append("=" * WIDTH)
    return "\n".join(lines)


def format_routine_items_cli(title: str, items: List[Dict[str, Any]], progress: Dict[str, Any]) -> str:
    """
    Format a routine checklist.

    Args:
        items: Serialised routine items (``RoutineItem.to_dict()``)
        progress: Output of ``get_progress``
    """
    lines = [f"{title} ({progress.get('completed', 0)}/{progress.get('total', 0)}, {progress.get('percentage', 0)}%)"]
    for item in items:
        mark = "✅" if item.get("completed") else "⭕"
        detail = ""
        if item.get("type") == "counter":
            detail = f" [{item.get('current', 0)}/{item.get('target', 0)}]"
        elif item.get("type") == "timer" and item.get("duration"):
            detail = f" [{item['duration'] // 60} min timer]"
        elif item.get("type") == "text" and item.get("value"):
            detail = f" [{len([l for l in item['value'].splitlines() if l.strip()])} lines]"
        lines.append(f"  {mark} {item.get('id', ''):<13} {item.get('label', '')}{detail}")
    return "\n".join(lines)
