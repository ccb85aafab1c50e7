"""Assessment command."""

import json
from pathlib import Path

import click

from ..errors import AssessmentError
from ..models.categories import ExerciseType
from ..services.assessment import AssessmentService
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    format_table,
    format_value,
)


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--chart", "chart_type",
    type=click.Choice([t.value for t in ExerciseType]),
    help="Also show the radar-chart projection for one exercise group",
)
@click.option("--json", "as_json", is_flag=True, help="Print the full report as JSON")
@click.option("--save", is_flag=True, help="Store the assessment in the member's history")
@click.option("--skip-invalid", is_flag=True, help="Drop invalid values instead of failing")
@click.pass_context
@async_command
async def assess(
    ctx: click.Context,
    file: Path,
    chart_type: str | None,
    as_json: bool,
    save: bool,
    skip_invalid: bool,
):
    """Score a measurement file for one member.

    FILE is a JSON document with "profile", "measurements" and optional
    "flags" keys:

    \b
        {"profile": {"age": 28, "bodyweight": 70, "gender": "male"},
         "measurements": [{"category_id": 4, "value": 120}],
         "flags": {"4": {"depth_limited": true}}}
    """
    try:
        data = json.loads(file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        echo_error(f"Could not parse {file}: {e}")
        ctx.exit(1)

    service = AssessmentService()
    try:
        assessment, payload = service.run(data, skip_invalid=skip_invalid)
    except AssessmentError as e:
        echo_error(str(e))
        ctx.exit(1)

    if save:
        ensure_initialized(ctx)
        try:
            saved = await service.save(assessment, payload)
        except ValueError as e:
            echo_error(str(e))
            ctx.exit(1)

    if as_json:
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    for rejection in assessment.rejected:
        echo_warning(f"Skipped category {rejection.category_id}: {rejection.reason}")

    rows = []
    for result in assessment.results:
        rows.append([
            result.name,
            format_value(result.raw_value, result.unit),
            str(result.score),
            result.level_name,
            result.next_level_name or "-",
            format_value(result.remaining, result.unit) if result.next_level_name else "-",
        ])

    click.echo()
    click.echo(format_table(["Exercise", "Value", "Score", "Level", "Next", "Remaining"], rows))

    issues = [(r.name, issue) for r in assessment.results for issue in r.issues]
    if issues:
        click.echo()
        click.echo(click.style("Issues:", bold=True))
        for name, issue in issues:
            click.echo(f"  - {name}: {issue}")

    summary = assessment.summary
    click.echo()
    click.echo(click.style("Overall:", bold=True))
    click.echo(f"  Level: {summary.overall_level} (average {summary.average_score:.1f})")
    click.echo(f"  {summary.description}")

    if chart_type:
        chart = assessment.chart(ExerciseType(chart_type))
        click.echo()
        click.echo(click.style(f"Chart ({chart_type}):", bold=True))
        chart_rows = []
        for label, score in zip(chart.labels, chart.scores):
            rep = chart.representatives[label]
            shown = "-" if rep.is_empty else f"{rep.exercise_name} ({format_value(rep.raw_value, rep.unit)})"
            chart_rows.append([label, f"{score:.2f}", shown])
        click.echo(format_table(["Region", "Score", "Representative"], chart_rows))

    if save:
        click.echo()
        echo_success(f"Saved as assessment {saved.id}")
    elif assessment.profile.member_id is None and not assessment.profile.name:
        echo_info("Add profile.member_id to keep history with --save.")
