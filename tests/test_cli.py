from decimal import Decimal

from projects_app.cli.app import OPERATIONS, ProjectsApp
from projects_app.schemas.project import Project


class Console:
    """Feeds scripted answers to the app and records what it prints."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.lines = []

    def input(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def print(self, line=""):
        self.lines.append(line)

    @property
    def text(self):
        return "\n".join(self.lines)


def run_app(service, answers):
    console = Console(answers)
    app = ProjectsApp(service, input_fn=console.input, output=console.print)
    app.run()
    return app, console


def test_blank_selection_exits(service):
    _, console = run_app(service, [""])

    assert all(f"  {op}" in console.lines for op in OPERATIONS)
    assert console.lines[-1] == "Exiting the application."


def test_add_project(service):
    _, console = run_app(service, ["1", "Build shed", "12.5", "", "3", "", ""])

    assert "You have successfully created project" in console.text
    [summary] = service.list_project_names()
    details = service.fetch_project_by_id(summary.project_id)
    assert details.project_name == "Build shed"
    assert details.estimated_hours == Decimal("12.50")
    assert details.actual_hours is None
    assert details.difficulty == 3


def test_invalid_difficulty_is_reported_and_nothing_is_stored(service):
    _, console = run_app(service, ["1", "Build shed", "", "", "9", "", ""])

    assert "Error: 9 is not between 1 and 5. Try again." in console.text
    assert service.list_project_names() == []


def test_decimal_prompt_returns_two_place_decimal(service):
    console = Console(["7.5", ""])
    app = ProjectsApp(service, input_fn=console.input, output=console.print)

    assert app.get_decimal_input("Enter the actual hours") == Decimal("7.50")
    assert app.get_decimal_input("Enter the actual hours") is None
    assert console.prompts == ["Enter the actual hours: "] * 2


def test_invalid_menu_choice(service):
    _, console = run_app(service, ["42", ""])

    assert "42 is not a valid choice. Try again." in console.text


def test_non_numeric_menu_choice(service):
    _, console = run_app(service, ["abc", ""])

    assert "Error: abc is not a valid number. Try again." in console.text


def test_list_projects(service):
    shed = service.add_project(Project(project_name="Build shed"))
    _, console = run_app(service, ["2", ""])

    assert f"  {shed.project_id}: Build shed" in console.lines


def test_select_project_sets_current_project(service):
    shed = service.add_project(Project(project_name="Build shed"))
    app, console = run_app(service, ["3", str(shed.project_id), ""])

    assert app.current_project.project_id == shed.project_id
    assert "You are viewing:" in console.text


def test_select_missing_project_prints_error(service):
    app, console = run_app(service, ["3", "999", ""])

    assert "Error: Project with ID=999 does not exist Try again." in console.text
    assert app.current_project is None


def test_update_without_selection(service):
    _, console = run_app(service, ["4", ""])

    assert "You do not have an active project." in console.text


def test_update_keeps_blank_fields(service):
    shed = service.add_project(
        Project(project_name="Build shed", estimated_hours=Decimal("12.50"), difficulty=3)
    )
    answers = ["3", str(shed.project_id), "4", "", "", "10", "", "Done", ""]
    app, console = run_app(service, answers)

    details = service.fetch_project_by_id(shed.project_id)
    assert details.project_name == "Build shed"
    assert details.estimated_hours == Decimal("12.50")
    assert details.actual_hours == Decimal("10.00")
    assert details.difficulty == 3
    assert details.notes == "Done"
    assert app.current_project == details
    assert any("[Build shed]" in prompt for prompt in console.prompts)


def test_delete_project(service):
    shed = service.add_project(Project(project_name="Build shed"))
    app, console = run_app(service, ["3", str(shed.project_id), "5", str(shed.project_id), ""])

    assert f"Project with ID={shed.project_id} has been deleted" in console.text
    assert service.list_project_names() == []
    assert app.current_project is None


def test_delete_missing_project_prints_error(service):
    _, console = run_app(service, ["5", "999", ""])

    assert "Error: Project with ID=999 does not exist Try again." in console.text


def test_end_of_input_exits(service):
    _, console = run_app(service, [])

    assert console.lines[-1] == "Exiting the application."


def test_menu_option_99_clears_current_project(service):
    shed = service.add_project(Project(project_name="Build shed"))
    app, _ = run_app(service, ["3", str(shed.project_id), "99", ""])

    assert app.current_project is None


def test_missing_name_is_a_validation_error(service):
    _, console = run_app(service, ["1", "", "", "", "", "", ""])

    assert "Invalid project_name" in console.text
    assert service.list_project_names() == []
