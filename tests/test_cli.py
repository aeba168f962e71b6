"""Tests for the click command line interface."""

import pytest
from click.testing import CliRunner

from student_records.cli import main


@pytest.fixture()
def runner():
    return CliRunner()


def _menu_input(*lines: str) -> str:
    return "\n".join(lines) + "\n"


# ---- Interactive menu ----------------------------------------------------


def test_menu_add_enroll_and_status(runner):
    result = runner.invoke(
        main,
        input=_menu_input("1", "Alice", "2", "00001", "Math", "5", "00001", "6"),
    )
    assert result.exit_code == 0, result.output
    assert "Student Management System" in result.output
    assert "Student Alice with ID 00001 has been added." in result.output
    assert "Alice has been enrolled in Math" in result.output
    assert "Courses Enrolled: Math" in result.output
    assert "Tuition Balance: $500" in result.output
    assert "Exiting the program" in result.output


def test_menu_lists_options(runner):
    result = runner.invoke(main, ["menu"], input=_menu_input("6"))
    assert result.exit_code == 0
    for label in ["1. Add Student", "2. Enroll in Course", "3. View Balance",
                  "4. Pay Tuition", "5. Show Status", "6. Exit"]:
        assert label in result.output


def test_menu_pay_reprompts_on_invalid_amount(runner):
    result = runner.invoke(
        main,
        input=_menu_input("1", "Bob", "2", "00001", "Art", "4", "00001", "abc", "-10", "200", "3", "00001", "6"),
    )
    assert result.exit_code == 0, result.output
    assert result.output.count("Please enter a valid positive number.") == 2
    assert "Bob has paid $200. Current balance is $300" in result.output
    assert "The balance for Bob (ID: 00001) is $300" in result.output


def test_menu_overpayment_and_unknown_id(runner):
    result = runner.invoke(
        main,
        input=_menu_input("1", "Bob", "4", "00001", "100", "3", "99999", "6"),
    )
    assert result.exit_code == 0
    assert "Cannot pay more than the current balance of $0" in result.output
    assert "Student with ID 99999 not found." in result.output


def test_menu_invalid_choice(runner):
    result = runner.invoke(main, input=_menu_input("9", "6"))
    assert result.exit_code == 0
    assert "Invalid choice. Please select again." in result.output


def test_course_cost_option(runner):
    result = runner.invoke(
        main,
        ["--course-cost", "750"],
        input=_menu_input("1", "Alice", "2", "00001", "Math", "3", "00001", "6"),
    )
    assert result.exit_code == 0
    assert "is $750" in result.output


def test_course_cost_from_env(runner):
    result = runner.invoke(
        main,
        input=_menu_input("1", "Alice", "2", "00001", "Math", "3", "00001", "6"),
        env={"STUDENT_RECORDS_COURSE_COST": "125"},
    )
    assert result.exit_code == 0
    assert "is $125" in result.output


def test_negative_course_cost_rejected(runner):
    result = runner.invoke(main, ["--course-cost", "-1", "menu"])
    assert result.exit_code == 2
    assert "Amount must not be negative." in result.output


# ---- Batch scripts -------------------------------------------------------


def test_run_script_from_stdin(runner):
    script = "add Alice\nenroll 00001 Math\npay 00001 600\npay 00001 500\nstatus 00001\n"
    result = runner.invoke(main, ["--log-level", "error", "run"], input=script)
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == "Student Alice with ID 00001 has been added."
    assert lines[1] == "Alice has been enrolled in Math"
    assert lines[2] == "Cannot pay more than the current balance of $500"
    assert lines[3] == "Alice has paid $500. Current balance is $0"
    assert "Tuition Balance: $0" in lines


def test_run_script_from_file(runner, tmp_path):
    script = tmp_path / "commands.txt"
    script.write_text("add Alice\nbalance 00002\nexit\nadd Bob\n")
    result = runner.invoke(main, ["--id-width", "3", "run", str(script)])
    assert result.exit_code == 0, result.output
    assert "Student Alice with ID 001 has been added." in result.output
    assert "Student with ID 00002 not found." in result.output
    assert "Bob" not in result.output


# ---- End of input --------------------------------------------------------


def test_menu_exits_cleanly_at_end_of_input(runner):
    result = runner.invoke(main, input="1\nAlice\n")
    assert result.exit_code == 0, result.output
    assert "Student Alice with ID 00001 has been added." in result.output
    assert result.output.rstrip().endswith("Exiting the program")


def test_menu_exits_cleanly_at_amount_prompt(runner):
    result = runner.invoke(
        main,
        input="1\nAlice\n2\n00001\nMath\n4\n00001\n",
    )
    assert result.exit_code == 0, result.output
    assert "Enter payment amount" in result.output
    assert "has paid" not in result.output
    assert result.output.rstrip().endswith("Exiting the program")
