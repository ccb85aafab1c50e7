"""Category and level standard listing commands."""

import click

from ..errors import AssessmentError
from ..models.assessment import LEVEL_NAMES
from ..models.categories import ExerciseType, categories_for_type, get_category, list_categories
from ..models.member import MemberProfile
from ..scoring.standards import level_standards
from .base import echo_error, format_table

EXERCISE_TYPES = [t.value for t in ExerciseType]


@click.command()
@click.option(
    "--type", "-t", "exercise_type",
    type=click.Choice(EXERCISE_TYPES),
    help="Only show one exercise group",
)
def categories(exercise_type: str | None):
    """List the measurable exercise categories."""
    items = categories_for_type(ExerciseType(exercise_type)) if exercise_type else list_categories()

    rows = [
        [str(c.id), c.name, c.unit_kind.value, c.body_region.value, c.exercise_type.value]
        for c in items
    ]
    click.echo(format_table(["ID", "Name", "Unit", "Region", "Group"], rows))


@click.command()
@click.option("--age", type=int, required=True, help="Member age in years")
@click.option("--weight", "bodyweight", type=float, required=True, help="Bodyweight in kg")
@click.option("--gender", type=click.Choice(["male", "female"]), required=True)
@click.option(
    "--type", "-t", "exercise_type",
    type=click.Choice(EXERCISE_TYPES),
    help="Only show one exercise group",
)
@click.pass_context
def standards(ctx: click.Context, age: int, bodyweight: float, gender: str, exercise_type: str | None):
    """Show the level thresholds for a member.

    Examples:

        fitspec standards --age 28 --weight 70 --gender male

        fitspec standards --age 45 --weight 60 --gender female -t bodyweight
    """
    try:
        profile = MemberProfile(age=age, bodyweight=bodyweight, gender=gender)
    except AssessmentError as e:
        echo_error(str(e))
        ctx.exit(1)

    rows = []
    for thresholds in level_standards(profile):
        category = get_category(thresholds.category_id)
        if exercise_type and category.exercise_type.value != exercise_type:
            continue
        rows.append(
            [category.name, thresholds.unit] + [f"{v:g}" for v in thresholds.values]
        )

    click.echo(format_table(["Exercise", "Unit", *LEVEL_NAMES], rows))
