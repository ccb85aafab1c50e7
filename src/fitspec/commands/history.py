"""Assessment history commands."""

import json

import click

from ..db.repositories import AssessmentRepository
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
)


@click.group()
def history():
    """Review stored assessments."""
    pass


@history.command("list")
@click.option("--member", "-m", "member_id", help="Only show one member's history")
@click.pass_context
@async_command
async def list_history(ctx: click.Context, member_id: str | None):
    """List stored assessments, newest first."""
    ensure_initialized(ctx)

    repo = AssessmentRepository()
    items = await repo.list_by_member(member_id) if member_id else await repo.list_all()

    if not items:
        echo_info("No assessments stored yet.")
        return

    rows = [
        [
            str(item.id),
            item.member_id,
            item.measured_at.strftime("%Y-%m-%d %H:%M"),
            ", ".join(item.exercise_types),
            item.overall_level or "-",
            f"{item.average_score:.1f}" if item.average_score is not None else "-",
        ]
        for item in items
    ]
    click.echo(format_table(["ID", "Member", "Measured", "Groups", "Level", "Average"], rows))


@history.command("show")
@click.argument("assessment_id", type=int)
@click.pass_context
@async_command
async def show(ctx: click.Context, assessment_id: int):
    """Print a stored assessment as JSON."""
    ensure_initialized(ctx)

    saved = await AssessmentRepository().get(assessment_id)
    if saved is None:
        echo_error(f"Assessment {assessment_id} not found.")
        ctx.exit(1)

    click.echo(json.dumps(saved.to_dict(), indent=2, ensure_ascii=False))


@history.command("delete")
@click.argument("assessment_id", type=int, required=False)
@click.option("--member", "-m", "member_id", help="Delete a member's whole history")
@click.option("--all", "delete_all", is_flag=True, help="Delete every stored assessment")
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(
    ctx: click.Context,
    assessment_id: int | None,
    member_id: str | None,
    delete_all: bool,
    force: bool,
):
    """Delete one assessment, a member's history, or everything."""
    ensure_initialized(ctx)

    if assessment_id is None and not member_id and not delete_all:
        echo_error("Give an assessment ID, --member or --all.")
        ctx.exit(1)

    repo = AssessmentRepository()
    if assessment_id is not None and not delete_all and not member_id:
        if await repo.get(assessment_id) is None:
            echo_error(f"Assessment {assessment_id} not found.")
            ctx.exit(1)

    if not force:
        if not click.confirm("Are you sure you want to delete the selected assessments?"):
            echo_info("Cancelled")
            return

    if delete_all:
        count = await repo.clear()
        echo_success(f"Deleted {count} assessments")
    elif member_id:
        count = await repo.delete_by_member(member_id)
        echo_success(f"Deleted {count} assessments for {member_id}")
    else:
        await repo.delete(assessment_id)
        echo_success(f"Deleted assessment {assessment_id}")
