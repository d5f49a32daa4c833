"""CLI interface using Typer."""

from __future__ import annotations

import json
from datetime import date, timedelta
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.table import Table

from rooted.calories.engine import (
    calculate_daily_calorie_target,
    calculate_smart_adjustment,
    get_weekly_summary,
    predict_goal_completion,
)
from rooted.calories.models import DailyTracking, FitnessGoal, UserProfile
from rooted.config import configure_logging, get_settings
from rooted.db import get_db
from rooted.profiles.body_calc import (
    WeightUnit,
    calculate_bmi,
    calculate_bmr,
    convert_weight,
    format_weight,
)
from rooted.profiles.height import (
    HeightValue,
    convert_height,
    convert_to_inches,
    format_height,
    is_valid_height,
    parse_height_input,
)
from rooted.storage import CalorieStore, SQLiteCalorieStore
from rooted.tracking import (
    WeightLog,
    calculate_goal_progress,
    calculate_weight_change,
    weight_trend,
)

app = typer.Typer(
    help="Calorie targets, adaptive adjustments and weight goal tracking",
    no_args_is_help=True,
)
console = Console()

# Subcommand groups
height_app = typer.Typer(help="Convert and parse heights")
profile_app = typer.Typer(help="Manage body profile")
goal_app = typer.Typer(help="Manage fitness goal")
track_app = typer.Typer(help="Log and list daily calorie intake")
weight_app = typer.Typer(help="Log weight and track goal progress")
config_app = typer.Typer(help="Show or write configuration")

app.add_typer(height_app, name="height")
app.add_typer(profile_app, name="profile")
app.add_typer(goal_app, name="goal")
app.add_typer(track_app, name="track")
app.add_typer(weight_app, name="weight")
app.add_typer(config_app, name="config")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Rooted calorie tracker."""
    level = "DEBUG" if verbose else get_settings().logging.level
    configure_logging(level)


# ============================================================================
# Helpers
# ============================================================================


def output_json(response: dict) -> None:
    """Output JSON response to stdout."""
    print(json.dumps(response, indent=2))


def fail(
    command: str,
    message: str,
    json_output: bool,
    suggestion: Optional[str] = None,
) -> NoReturn:
    """Report an error and exit with status 1."""
    if json_output:
        response = {"success": False, "command": command, "errors": [message]}
        if suggestion:
            response["suggestions"] = [suggestion]
        output_json(response)
    else:
        console.print(f"[red]{message}[/red]")
        if suggestion:
            console.print(suggestion)
    raise typer.Exit(1)


def use_json(flag: bool) -> bool:
    """JSON output is on when requested by flag or by the configured default."""
    return flag or get_settings().defaults.output_format == "json"


def get_store() -> CalorieStore:
    """Return the configured store."""
    return SQLiteCalorieStore(get_db())


def parse_date(value: Optional[str], command: str, json_output: bool) -> date:
    """Parse an ISO date option, defaulting to today."""
    if value is None:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError:
        fail(command, f"Invalid date '{value}', expected YYYY-MM-DD", json_output)


def require_profile(store: CalorieStore, command: str, json_output: bool) -> UserProfile:
    profile = store.load_profile()
    if profile is None:
        fail(
            command,
            "No profile found",
            json_output,
            "Create one with: rooted profile set --age 30 --sex female --height 65 --weight 150",
        )
    return profile


def require_goal(store: CalorieStore, command: str, json_output: bool) -> FitnessGoal:
    goal = store.load_goal()
    if goal is None:
        fail(
            command,
            "No goal found",
            json_output,
            "Create one with: rooted goal set --type lose_weight --target-weight 140 --weekly 1",
        )
    return goal


def recent_window(days: Optional[int]) -> int:
    return days if days is not None else get_settings().defaults.recent_days


# ============================================================================
# Height and BMI Commands
# ============================================================================


@height_app.command("convert")
def height_convert(
    text: str = typer.Argument(..., help="Height, e.g. 70, 177.8 or 5'10"),
    from_unit: str = typer.Option("in", "--from", help="Input unit (in/cm/ft)"),
    to_unit: str = typer.Option("cm", "--to", help="Output unit (in/cm/ft)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Convert a height between units."""
    json_output = use_json(json_output)
    parsed = parse_height_input(text, from_unit)
    if parsed is None:
        fail("height convert", f"Could not parse height '{text}'", json_output)

    converted = convert_height(parsed, to_unit)
    valid = is_valid_height(converted)

    if json_output:
        output_json({
            "success": True,
            "command": "height convert",
            "data": {
                "value": converted.value,
                "unit": converted.unit,
                "feet": converted.feet,
                "inches": converted.inches,
                "plausible": valid,
            },
            "human_summary": f"{format_height(parsed)} = {format_height(converted)}",
        })
    else:
        console.print(f"{format_height(parsed)} = [bold]{format_height(converted)}[/bold]")
        if not valid:
            console.print("[yellow]Height is outside the 4-8 ft range[/yellow]")


@height_app.command("parse")
def height_parse(
    text: str = typer.Argument(..., help="Height text, e.g. 5'10 or 5ft 10in"),
    unit: str = typer.Option("ft", "--unit", help="Input unit (in/cm/ft)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Parse height text and show it in inches."""
    json_output = use_json(json_output)
    parsed = parse_height_input(text, unit)
    if parsed is None:
        fail("height parse", f"Could not parse height '{text}'", json_output)

    inches = convert_to_inches(parsed)
    if json_output:
        output_json({
            "success": True,
            "command": "height parse",
            "data": {
                "value": parsed.value,
                "unit": parsed.unit,
                "feet": parsed.feet,
                "inches": parsed.inches,
                "total_inches": inches,
                "plausible": is_valid_height(parsed),
            },
            "human_summary": f"{format_height(parsed)} ({inches:.1f} in)",
        })
    else:
        console.print(f"{format_height(parsed)} ({inches:.1f} in)")


@app.command()
def bmi(
    height: float = typer.Option(..., "--height", help="Height in inches"),
    weight: float = typer.Option(..., "--weight", help="Weight in lbs"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Calculate BMI from height and weight."""
    json_output = use_json(json_output)
    if height <= 0:
        fail("bmi", "Height must be positive", json_output)

    value = calculate_bmi(height, weight)
    if json_output:
        output_json({
            "success": True,
            "command": "bmi",
            "data": {"bmi": round(value, 1)},
            "human_summary": f"BMI {value:.1f}",
        })
    else:
        console.print(f"BMI: [bold]{value:.1f}[/bold]")


# ============================================================================
# Profile and Goal Commands
# ============================================================================


@profile_app.command("set")
def profile_set(
    age: int = typer.Option(..., "--age", help="Age in years"),
    sex: str = typer.Option(..., "--sex", help="Sex (male/female)"),
    height: str = typer.Option(..., "--height", help="Height, e.g. 70 or 5'10"),
    height_unit: Optional[str] = typer.Option(None, "--height-unit", help="Height unit (in/cm/ft)"),
    weight: float = typer.Option(..., "--weight", help="Current weight"),
    weight_unit: Optional[str] = typer.Option(None, "--weight-unit", help="Weight unit (lbs/kg)"),
    activity: str = typer.Option(
        "moderate",
        "--activity",
        help="Activity level (sedentary/light/moderate/active/very_active)",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Create or replace the body profile."""
    json_output = use_json(json_output)
    defaults = get_settings().defaults
    parsed = parse_height_input(height, height_unit or defaults.height_unit)
    if parsed is None:
        fail("profile set", f"Could not parse height '{height}'", json_output)

    weight_lbs = convert_weight(weight, weight_unit or defaults.weight_unit, WeightUnit.LBS.value)

    try:
        profile = UserProfile(
            age=age,
            sex=sex.lower(),
            height_inches=convert_to_inches(parsed),
            weight_lbs=weight_lbs,
            activity_level=activity.lower(),
        )
    except ValueError as e:
        fail("profile set", str(e), json_output)

    get_store().save_profile(profile)

    if json_output:
        output_json({
            "success": True,
            "command": "profile set",
            "data": profile.to_dict(),
            "human_summary": "Saved profile",
        })
    else:
        console.print("[green]Saved profile[/green]")
        if not is_valid_height(parsed):
            console.print("[yellow]Height is outside the 4-8 ft range[/yellow]")


@profile_app.command("show")
def profile_show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the body profile with BMI and BMR."""
    json_output = use_json(json_output)
    profile = require_profile(get_store(), "profile show", json_output)
    bmi_value = calculate_bmi(profile.height_inches, profile.weight_lbs)
    bmr = calculate_bmr(profile.weight_lbs, profile.height_inches, profile.age, profile.sex)

    if json_output:
        data = profile.to_dict()
        data.update({"bmi": round(bmi_value, 1), "bmr": round(bmr)})
        output_json({
            "success": True,
            "command": "profile show",
            "data": data,
            "human_summary": f"{profile.sex}, {profile.age}y, {profile.height_inches:.1f}in, {profile.weight_lbs:.1f}lbs",
        })
    else:
        height = HeightValue(value=profile.height_inches, unit="in")
        console.print("[bold]Profile[/bold]")
        console.print(f"  Age: {profile.age}")
        console.print(f"  Sex: {profile.sex}")
        console.print(f"  Height: {format_height(convert_height(height, 'ft'))} ({format_height(height)})")
        console.print(f"  Weight: {format_weight(profile.weight_lbs, 'lbs')}")
        console.print(f"  Activity: {profile.activity_level}")
        console.print(f"  BMI: {bmi_value:.1f}")
        console.print(f"  BMR: {bmr:.0f} kcal/day")


@goal_app.command("set")
def goal_set(
    goal_type: str = typer.Option(
        ..., "--type", help="Goal type (lose_weight/gain_weight/maintain_weight)"
    ),
    target_weight: float = typer.Option(..., "--target-weight", help="Target weight in lbs"),
    weekly: float = typer.Option(1.0, "--weekly", help="Planned change in lbs per week"),
    start: Optional[str] = typer.Option(None, "--start", help="Start date (YYYY-MM-DD)"),
    target_date: Optional[str] = typer.Option(None, "--target-date", help="Target date (YYYY-MM-DD)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Create or replace the fitness goal."""
    json_output = use_json(json_output)
    start_date = parse_date(start, "goal set", json_output)
    end_date = parse_date(target_date, "goal set", json_output) if target_date else None

    try:
        goal = FitnessGoal(
            goal_type=goal_type.lower(),
            target_weight_lbs=target_weight,
            weekly_goal_lbs=weekly,
            start_date=start_date,
            target_date=end_date,
        )
    except ValueError as e:
        fail("goal set", str(e), json_output)

    get_store().save_goal(goal)

    if json_output:
        output_json({
            "success": True,
            "command": "goal set",
            "data": goal.to_dict(),
            "human_summary": f"Saved goal {goal.goal_type}",
        })
    else:
        console.print(f"[green]Saved goal {goal.goal_type}[/green]")


@goal_app.command("show")
def goal_show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the fitness goal."""
    json_output = use_json(json_output)
    goal = require_goal(get_store(), "goal show", json_output)

    if json_output:
        output_json({
            "success": True,
            "command": "goal show",
            "data": goal.to_dict(),
            "human_summary": f"{goal.goal_type} to {goal.target_weight_lbs} lbs",
        })
    else:
        console.print("[bold]Goal[/bold]")
        console.print(f"  Type: {goal.goal_type}")
        console.print(f"  Target weight: {format_weight(goal.target_weight_lbs, 'lbs')}")
        console.print(f"  Weekly change: {goal.weekly_goal_lbs} lbs")
        console.print(f"  Started: {goal.start_date.isoformat()}")
        if goal.target_date:
            console.print(f"  Target date: {goal.target_date.isoformat()}")


# ============================================================================
# Calorie Target Commands
# ============================================================================


@app.command()
def target(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the daily calorie target for the profile and goal."""
    json_output = use_json(json_output)
    store = get_store()
    profile = require_profile(store, "target", json_output)
    goal = require_goal(store, "target", json_output)

    result = calculate_daily_calorie_target(profile, goal)

    if json_output:
        output_json({
            "success": True,
            "command": "target",
            "data": result.to_dict(),
            "human_summary": f"Target {result.daily_target} kcal/day (TDEE {result.tdee})",
        })
    else:
        console.print(f"BMR:     {result.bmr} kcal")
        console.print(f"TDEE:    {result.tdee} kcal")
        console.print(f"Target:  [bold]{result.daily_target} kcal/day[/bold]")


@app.command()
def adjust(
    days: Optional[int] = typer.Option(None, "--days", "-d", help="Days of history to use"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Suggest a corrected target from recent intake."""
    json_output = use_json(json_output)
    store = get_store()
    profile = require_profile(store, "adjust", json_output)
    goal = require_goal(store, "adjust", json_output)

    window = recent_window(days)
    base = calculate_daily_calorie_target(profile, goal)
    recent = store.load_recent_days(window)
    result = calculate_smart_adjustment(recent, base.daily_target, goal)

    if json_output:
        output_json({
            "success": True,
            "command": "adjust",
            "data": {
                "base_target": base.daily_target,
                "adjusted_target": result.daily_target,
                "adjustment_reason": result.adjustment_reason,
                "days_used": len(recent),
            },
            "human_summary": result.adjustment_reason or "No adjustment needed",
        })
    else:
        console.print(f"Base target:     {base.daily_target} kcal/day")
        console.print(f"Adjusted target: [bold]{result.daily_target} kcal/day[/bold]")
        console.print(result.adjustment_reason or "[green]No adjustment needed[/green]")


@track_app.command("log")
def track_log(
    consumed: float = typer.Argument(..., help="Calories consumed"),
    date_str: Optional[str] = typer.Option(None, "--date", help="Date (YYYY-MM-DD), default today"),
    target_calories: Optional[float] = typer.Option(
        None, "--target", help="Target for the day (default: computed and adjusted)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Log calories consumed for a day."""
    json_output = use_json(json_output)
    store = get_store()
    day = parse_date(date_str, "track log", json_output)

    if target_calories is not None:
        tracking = DailyTracking.for_day(day, target_calories, consumed)
    else:
        profile = require_profile(store, "track log", json_output)
        goal = require_goal(store, "track log", json_output)
        base = calculate_daily_calorie_target(profile, goal)
        previous = store.load_recent_days(
            get_settings().defaults.recent_days, today=day - timedelta(days=1)
        )
        adjustment = calculate_smart_adjustment(previous, base.daily_target, goal)
        tracking = DailyTracking.for_day(day, base.daily_target, consumed, adjustment)

    store.save_day_tracking(tracking)

    if json_output:
        output_json({
            "success": True,
            "command": "track log",
            "data": tracking.to_dict(),
            "human_summary": f"{day.isoformat()}: {consumed:.0f} of {tracking.target_calories:.0f} kcal",
        })
    else:
        console.print(
            f"[green]Logged {consumed:.0f} kcal on {day.isoformat()}[/green] "
            f"({tracking.remaining_calories:+.0f} remaining of {tracking.target_calories:.0f})"
        )
        if tracking.is_adjusted:
            console.print(f"[yellow]{tracking.adjustment_reason}[/yellow]")


@track_app.command("list")
def track_list(
    days: Optional[int] = typer.Option(None, "--days", "-d", help="Number of days to show"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List tracked days."""
    json_output = use_json(json_output)
    window = recent_window(days)
    history = get_store().load_recent_days(window)

    if json_output:
        output_json({
            "success": True,
            "command": "track list",
            "data": {"entries": [t.to_dict() for t in history]},
            "human_summary": f"{len(history)} tracked days in the last {window} days",
        })
        return

    if not history:
        console.print("No tracked days found")
        return

    table = Table(title=f"Calorie Tracking (last {window} days)")
    table.add_column("Date", style="cyan")
    table.add_column("Target", justify="right")
    table.add_column("Consumed", justify="right")
    table.add_column("Remaining", justify="right")
    table.add_column("Adjusted")

    for t in history:
        table.add_row(
            t.date.isoformat(),
            f"{t.target_calories:.0f}",
            f"{t.consumed_calories:.0f}",
            f"{t.remaining_calories:+.0f}",
            "yes" if t.is_adjusted else "",
        )

    console.print(table)


@app.command()
def summary(
    days: Optional[int] = typer.Option(None, "--days", "-d", help="Days to summarize"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Summarize recent intake against targets."""
    json_output = use_json(json_output)
    window = recent_window(days)
    history = get_store().load_recent_days(window)
    result = get_weekly_summary(history)

    if json_output:
        output_json({
            "success": True,
            "command": "summary",
            "data": {**result.to_dict(), "days_tracked": len(history)},
            "human_summary": "On track" if result.on_track else "Off track",
        })
    else:
        console.print(f"Days tracked:        {len(history)} of {window}")
        console.print(f"Total target:        {result.total_target:.0f} kcal")
        console.print(f"Total consumed:      {result.total_consumed:.0f} kcal")
        console.print(f"Deviation:           {result.weekly_deviation:+.0f} kcal")
        console.print(f"Avg daily deviation: {result.average_daily_deviation:+.0f} kcal")
        if result.on_track:
            console.print("[green]On track[/green]")
        else:
            console.print("[red]Off track[/red]")


@app.command()
def predict(
    days: Optional[int] = typer.Option(None, "--days", "-d", help="Days of history to use"),
    weight: Optional[float] = typer.Option(
        None, "--weight", help="Current weight in lbs (default: latest log or profile)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Project when the goal weight will be reached."""
    json_output = use_json(json_output)
    store = get_store()
    profile = require_profile(store, "predict", json_output)
    goal = require_goal(store, "predict", json_output)

    if weight is None:
        latest = store.load_latest_weight_log()
        if latest is not None:
            weight = convert_weight(latest.weight, latest.unit, WeightUnit.LBS.value)
        else:
            weight = profile.weight_lbs

    recent = store.load_recent_days(recent_window(days))
    result = predict_goal_completion(weight, goal.target_weight_lbs, recent, goal)

    if json_output:
        output_json({
            "success": True,
            "command": "predict",
            "data": {**result.to_dict(), "current_weight_lbs": weight},
            "human_summary": (
                f"About {result.estimated_days} days" if result.estimated_days is not None
                else "No rate to project from"
            ),
        })
        return

    if result.estimated_days is None:
        console.print("[yellow]No observed or planned rate to project from[/yellow]")
    elif result.estimated_date is None:
        console.print(f"Estimated: [bold]{result.estimated_days} days[/bold]")
    else:
        console.print(
            f"Estimated: [bold]{result.estimated_days} days[/bold] "
            f"({result.estimated_date.isoformat()})"
        )
    console.print(f"Weekly rate: {result.weekly_rate_lbs:.2f} lbs")
    if result.on_pace:
        console.print("[green]On pace[/green]")
    else:
        console.print("[yellow]Not on pace with the planned rate[/yellow]")


# ============================================================================
# Weight Commands
# ============================================================================


@weight_app.command("add")
def weight_add(
    weight: float = typer.Argument(..., help="Weight"),
    unit: Optional[str] = typer.Option(None, "--unit", help="Unit (lbs/kg)"),
    date_str: Optional[str] = typer.Option(None, "--date", help="Date (YYYY-MM-DD), default today"),
    notes: Optional[str] = typer.Option(None, "--notes", help="Optional notes"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Log a weight measurement."""
    json_output = use_json(json_output)
    logged_at = parse_date(date_str, "weight add", json_output)
    try:
        log = WeightLog(
            log_id=None,
            weight=weight,
            unit=(unit or get_settings().defaults.weight_unit).lower(),
            logged_at=logged_at,
            notes=notes,
        )
    except ValueError as e:
        fail("weight add", str(e), json_output)

    stored = get_store().add_weight_log(log)

    if json_output:
        output_json({
            "success": True,
            "command": "weight add",
            "data": stored.to_dict(),
            "human_summary": f"Logged {format_weight(stored.weight, stored.unit)}",
        })
    else:
        console.print(
            f"[green]Logged {format_weight(stored.weight, stored.unit)} "
            f"on {stored.logged_at.isoformat()}[/green]"
        )


@weight_app.command("list")
def weight_list(
    days: Optional[int] = typer.Option(None, "--days", "-d", help="Only the last N days"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List weight logs, newest first."""
    json_output = use_json(json_output)
    store = get_store()
    if days is None:
        logs = store.load_weight_logs()
    else:
        today = date.today()
        logs = store.load_weight_logs_between(today - timedelta(days=days), today)
    change = calculate_weight_change(logs)

    if json_output:
        output_json({
            "success": True,
            "command": "weight list",
            "data": {
                "entries": [log.to_dict() for log in logs],
                "change": change.to_dict() if change else None,
            },
            "human_summary": f"{len(logs)} weight entries",
        })
        return

    if not logs:
        console.print("No weight entries found")
        return

    table = Table(title="Weight Log")
    table.add_column("ID", justify="right")
    table.add_column("Date", style="cyan")
    table.add_column("Weight", justify="right")
    table.add_column("Notes")

    for log in logs:
        table.add_row(
            str(log.log_id),
            log.logged_at.isoformat(),
            format_weight(log.weight, log.unit),
            log.notes or "",
        )

    console.print(table)
    if change:
        console.print(
            f"Change: {change.change:+.1f} lbs ({change.change_percent:+.1f}%) over {change.period}"
        )


@weight_app.command("update")
def weight_update(
    log_id: int = typer.Argument(..., help="Weight log ID"),
    weight: Optional[float] = typer.Option(None, "--weight", help="New weight"),
    unit: Optional[str] = typer.Option(None, "--unit", help="New unit (lbs/kg)"),
    date_str: Optional[str] = typer.Option(None, "--date", help="New date (YYYY-MM-DD)"),
    notes: Optional[str] = typer.Option(None, "--notes", help="New notes"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Change fields of a weight log."""
    json_output = use_json(json_output)
    changes: dict = {}
    if weight is not None:
        changes["weight"] = weight
    if unit is not None:
        changes["unit"] = unit.lower()
    if date_str is not None:
        changes["logged_at"] = parse_date(date_str, "weight update", json_output)
    if notes is not None:
        changes["notes"] = notes
    if not changes:
        fail(
            "weight update",
            "Nothing to update",
            json_output,
            "Pass --weight, --unit, --date or --notes",
        )

    try:
        updated = get_store().update_weight_log(log_id, **changes)
    except ValueError as e:
        fail("weight update", str(e), json_output)
    if updated is None:
        fail("weight update", f"No weight log with ID {log_id}", json_output)

    if json_output:
        output_json({
            "success": True,
            "command": "weight update",
            "data": updated.to_dict(),
            "human_summary": f"Updated weight log {log_id}",
        })
    else:
        console.print(f"[green]Updated weight log {log_id}[/green]")


@weight_app.command("delete")
def weight_delete(
    log_id: int = typer.Argument(..., help="Weight log ID"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Delete a weight log."""
    json_output = use_json(json_output)
    if not get_store().delete_weight_log(log_id):
        fail("weight delete", f"No weight log with ID {log_id}", json_output)

    if json_output:
        output_json({
            "success": True,
            "command": "weight delete",
            "data": {"log_id": log_id},
            "human_summary": f"Deleted weight log {log_id}",
        })
    else:
        console.print(f"[green]Deleted weight log {log_id}[/green]")


@weight_app.command("progress")
def weight_progress(
    trend_days: int = typer.Option(30, "--trend-days", help="Days of weight trend to include"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show progress toward the goal weight."""
    json_output = use_json(json_output)
    store = get_store()
    goal = require_goal(store, "weight progress", json_output)
    profile = store.load_profile()
    logs = store.load_weight_logs()

    progress = calculate_goal_progress(
        goal, logs, start_weight=profile.weight_lbs if profile else None
    )
    if progress is None:
        fail(
            "weight progress",
            "No weight entries found",
            json_output,
            "Log one with: rooted weight add 150",
        )
    trend = weight_trend(logs, trend_days)

    if json_output:
        output_json({
            "success": True,
            "command": "weight progress",
            "data": {
                **progress.to_dict(),
                "trend": [log.to_dict() for log in trend],
            },
            "human_summary": f"{progress.percent_complete:.0f}% complete",
        })
        return

    console.print(f"Start:    {format_weight(progress.start_weight, 'lbs')}")
    console.print(f"Current:  {format_weight(progress.current_weight, 'lbs')}")
    console.print(f"Target:   {format_weight(progress.target_weight, 'lbs')}")
    console.print(f"Progress: [bold]{progress.percent_complete:.0f}%[/bold]")
    console.print(f"Days elapsed: {progress.days_elapsed}")
    if progress.days_remaining is not None:
        console.print(f"Days remaining: {progress.days_remaining}")
    if progress.on_track:
        console.print("[green]On track[/green]")
    else:
        console.print("[yellow]Behind the planned weekly rate[/yellow]")
    if trend:
        points = " -> ".join(format_weight(log.weight, log.unit) for log in trend)
        console.print(f"Last {trend_days} days: {points}")


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the active configuration."""
    json_output = use_json(json_output)
    data = get_settings().to_dict()
    if json_output:
        output_json({"success": True, "command": "config show", "data": data})
        return

    for section, values in data.items():
        console.print(f"[bold]{section}[/bold]")
        for key, value in values.items():
            console.print(f"  {key}: {value}")


@config_app.command("init")
def config_init(
    path: Optional[Path] = typer.Option(None, "--path", help="Config file to write"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write the current configuration to a YAML file."""
    from rooted.config.settings import default_config_path

    target_path = path or default_config_path()
    if target_path.exists() and not force:
        console.print(f"[red]{target_path} already exists[/red] (use --force to overwrite)")
        raise typer.Exit(1)

    written = get_settings().save(target_path)
    console.print(f"[green]Wrote {written}[/green]")


if __name__ == "__main__":
    app()
