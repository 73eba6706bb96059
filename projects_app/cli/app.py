"""
Console Application Module

The interactive menu. Reads a selection, runs the matching operation through
ProjectService, and prints the outcome. A failing operation prints its error
and the menu comes back; nothing short of a blank selection ends the loop.
"""
from decimal import Decimal
from typing import Callable, List, Optional

from projects_app.cli.inputs import build_project, clean, parse_decimal, parse_int
from projects_app.core.exceptions import ProjectsError
from projects_app.core.logging import get_logger
from projects_app.schemas.project import ProjectDetails
from projects_app.services.project_service import ProjectService

logger = get_logger(__name__)

OPERATIONS: List[str] = [
    "1) Add a project",
    "2) List the available projects",
    "3) Select a project",
    "4) Update project details",
    "5) Delete a project",
    "99) Display the menu",
]


def format_project(project: ProjectDetails) -> str:
    lines = [
        f"   ID={project.project_id}",
        f"   name={project.project_name}",
        f"   estimatedHours={project.estimated_hours}",
        f"   actualHours={project.actual_hours}",
        f"   difficulty={project.difficulty}",
        f"   notes={project.notes}",
        "   Materials:",
    ]
    lines += [
        f"      ID={m.material_id}, name={m.material_name}, numRequired={m.num_required}, cost={m.cost}"
        for m in project.materials
    ]
    lines.append("   Steps:")
    lines += [f"      {s.step_order}. {s.step_text}" for s in project.steps]
    lines.append("   Categories:")
    lines += [f"      {c.category_name}" for c in project.categories]
    return "\n".join(lines)


class ProjectsApp:
    """
    Menu loop over a ProjectService.

    Args:
        service: The service every operation goes through
        input_fn: Reads one line given a prompt (defaults to input)
        output: Writes one line (defaults to print)
    """

    def __init__(
        self,
        service: ProjectService,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        self.service = service
        self._input = input_fn
        self._print = output
        self.current_project: Optional[ProjectDetails] = None
        self._actions = {
            1: self.create_project,
            2: self.list_projects,
            3: self.select_project,
            4: self.update_project_details,
            5: self.delete_project,
            99: self.clear_current_project,
        }

    # === Prompt helpers ===

    def get_string_input(self, prompt: str) -> Optional[str]:
        return clean(self._input(f"{prompt}: "))

    def get_int_input(self, prompt: str, field: Optional[str] = None) -> Optional[int]:
        return parse_int(self.get_string_input(prompt), field=field)

    def get_decimal_input(self, prompt: str, field: Optional[str] = None) -> Optional[Decimal]:
        return parse_decimal(self.get_string_input(prompt), field=field)

    # === Menu loop ===

    def run(self) -> None:
        """Process selections until the user enters a blank line."""
        while True:
            try:
                selection = self.get_user_selection()
                if selection is None:
                    self._print("Exiting the application.")
                    return
                action = self._actions.get(selection)
                if action is None:
                    self._print(f"\n{selection} is not a valid choice. Try again.")
                    continue
                action()
            except ProjectsError as e:
                self._print(f"\nError: {e} Try again.")
            except EOFError:
                self._print("Exiting the application.")
                return
            except Exception as e:
                logger.exception("Unexpected error")
                self._print(f"\nError: {e} Try again.")

    def get_user_selection(self) -> Optional[int]:
        self.print_operations()
        return self.get_int_input(
            "\nEnter a menu choice or press the Enter key to quit. "
            "Enter 99 to display menu choices again"
        )

    def print_operations(self) -> None:
        self._print("\nMenu choices:")
        for line in OPERATIONS:
            self._print(f"  {line}")

        if self.current_project is None:
            self._print("\nYou do not have an active project.")
        else:
            self._print("\nYou are viewing:\n" + format_project(self.current_project))

    # === Operations ===

    def create_project(self) -> None:
        project_name = self.get_string_input("Enter the project name")
        estimated_hours = self.get_decimal_input("Enter the estimated hours", "estimated_hours")
        actual_hours = self.get_decimal_input("Enter the actual hours", "actual_hours")
        difficulty = self.get_int_input("Enter the project difficulty (1-5)", "difficulty")
        notes = self.get_string_input("Enter the project notes")

        project = build_project(
            project_name=project_name,
            estimated_hours=estimated_hours,
            actual_hours=actual_hours,
            difficulty=difficulty,
            notes=notes,
        )
        db_project = self.service.add_project(project)
        self._print(
            f"You have successfully created project: "
            f"{db_project.project_id}: {db_project.project_name}"
        )

    def list_projects(self) -> None:
        projects = self.service.list_project_names()
        self.current_project = None

        self._print("\nAvailable projects:")
        for project in projects:
            self._print(f"  {project.project_id}: {project.project_name}")

    def select_project(self) -> None:
        self.list_projects()
        project_id = self.get_int_input("Select a project ID to see that project", "project_id")
        if project_id is None:
            return
        self.current_project = self.service.fetch_project_by_id(project_id)

    def update_project_details(self) -> None:
        current = self.current_project
        if current is None:
            self._print("\nYou do not have an active project. Choose menu option 3 to select a project")
            return

        project_name = self.get_string_input(f"Enter the project name [{current.project_name}]")
        estimated_hours = self.get_decimal_input(
            f"Enter the estimated hours [{current.estimated_hours}]", "estimated_hours"
        )
        actual_hours = self.get_decimal_input(
            f"Enter the actual hours [{current.actual_hours}]", "actual_hours"
        )
        difficulty = self.get_int_input(
            f"Enter the project difficulty (1-5) [{current.difficulty}]", "difficulty"
        )
        notes = self.get_string_input(f"Enter the project notes [{current.notes}]")

        # Blank answers keep the current value
        project = build_project(
            project_id=current.project_id,
            project_name=project_name if project_name is not None else current.project_name,
            estimated_hours=estimated_hours if estimated_hours is not None else current.estimated_hours,
            actual_hours=actual_hours if actual_hours is not None else current.actual_hours,
            difficulty=difficulty if difficulty is not None else current.difficulty,
            notes=notes if notes is not None else current.notes,
        )
        self.service.modify_project_details(project)
        self.current_project = self.service.fetch_project_by_id(current.project_id)

    def delete_project(self) -> None:
        self.list_projects()
        project_id = self.get_int_input("Enter the ID of the project to delete", "project_id")
        if project_id is None:
            return

        # list_projects() already cleared the current project
        self.service.delete_project(project_id)
        self._print(f"Project with ID={project_id} has been deleted")

    def clear_current_project(self) -> None:
        self.current_project = None
