"""Command line entry point for student-records.

Start the interactive menu with::

    student-records

or run a batch of commands with::

    student-records run commands.txt
"""

from decimal import Decimal
from typing import Any, Optional

import click

from .audit_logger import get_audit_logger
from .commands import (
    EXIT_MESSAGE,
    Command,
    CommandType,
    dispatch,
    parse_amount,
    resolve_command_type,
    run_script,
)
from .config import ENV_COURSE_COST, ENV_ID_WIDTH, ENV_LOG_LEVEL, RegistryConfig
from .exceptions import InvalidAmountError, UnknownCommandError
from .models import OperationResult, coerce_amount
from .registry import StudentRegistry

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AmountType(click.ParamType):
    """Click parameter type producing a :class:`Decimal` amount.

    With ``allow_zero`` the amount must be non-negative, otherwise strictly
    positive.
    """

    name = "amount"

    def __init__(self, allow_zero: bool = False) -> None:
        self.allow_zero = allow_zero

    def convert(
        self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]
    ) -> Decimal:
        if isinstance(value, Decimal):
            return value
        try:
            if self.allow_zero:
                amount = coerce_amount(value)
                if amount < 0:
                    raise InvalidAmountError(value, "Amount must not be negative.")
                return amount
            return parse_amount(value)
        except InvalidAmountError as e:
            self.fail(str(e), param, ctx)


def _echo_result(result: OperationResult) -> None:
    click.secho(result.message, fg=None if result.ok else "red")


@click.group(
    "student-records",
    invoke_without_command=True,
    context_settings={
        "max_content_width": 160,
    },
)
@click.option(
    "--course-cost",
    type=AmountType(allow_zero=True),
    default="500",
    show_default=True,
    envvar=ENV_COURSE_COST,
    help="Amount charged for every course enrollment.",
)
@click.option(
    "--id-width",
    type=click.IntRange(min=1),
    default=5,
    show_default=True,
    envvar=ENV_ID_WIDTH,
    help="Number of digits student IDs are zero-padded to.",
)
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar=ENV_LOG_LEVEL,
    help="Minimum level of the JSON audit log written to stderr.",
)
@click.version_option(package_name="student-records")
@click.pass_context
def main(ctx: click.Context, course_cost: Decimal, id_width: int, log_level: str):
    """In-memory student records: enroll students and track tuition balances.

    Without a subcommand the interactive menu is started.
    """
    config = RegistryConfig(course_cost=course_cost, id_width=id_width, log_level=log_level)
    get_audit_logger().set_level(config.log_level)
    ctx.obj = StudentRegistry(config)

    if ctx.invoked_subcommand is None:
        ctx.invoke(menu)


def _prompt_text(label: str) -> str:
    # empty input is accepted as-is
    return click.prompt(label, default="", show_default=False)


def _read_command(choice: CommandType) -> Command:
    if choice is CommandType.ADD_STUDENT:
        return Command(choice, name=_prompt_text("Enter Student name"))
    if choice is CommandType.EXIT:
        return Command(choice)

    student_id = _prompt_text("Enter student id")
    if choice is CommandType.ENROLL:
        return Command(choice, student_id=student_id, course=_prompt_text("Enter course name"))
    if choice is CommandType.PAY_TUITION:
        amount = click.prompt("Enter payment amount", type=AmountType())
        return Command(choice, student_id=student_id, amount=amount)
    return Command(choice, student_id=student_id)


@main.command("menu")
@click.pass_obj
def menu(registry: StudentRegistry):
    """Run the interactive menu until Exit is chosen or input ends."""
    click.echo("\nStudent Management System")
    while True:
        click.echo("\nOptions:")
        for command_type in CommandType:
            click.echo(f"  {command_type.value}. {command_type.label}")

        try:
            raw_choice = click.prompt("Select an option", type=str)
            try:
                choice = resolve_command_type(raw_choice)
            except UnknownCommandError as e:
                click.secho(str(e), fg="yellow")
                continue
            command = _read_command(choice)
        except click.Abort:
            click.echo()
            click.echo(EXIT_MESSAGE)
            return

        result = dispatch(registry, command)
        _echo_result(result)
        if choice is CommandType.EXIT:
            return


@main.command("run")
@click.argument("script", type=click.File("r"), default="-")
@click.pass_obj
def run(registry: StudentRegistry, script):
    """Execute commands from SCRIPT (or stdin), one per line.

    \b
    add <name>
    enroll <student_id> <course>
    balance <student_id>
    pay <student_id> <amount>
    status <student_id>
    exit
    """
    for result in run_script(registry, script):
        _echo_result(result)
