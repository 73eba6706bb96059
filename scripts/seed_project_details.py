import sys
import os
from decimal import Decimal
from sqlmodel import Session, select

# Add current directory to path
sys.path.append(os.getcwd())

from projects_app.db.session import ConnectionProvider
from projects_app.models import (
    CategoryTable,
    MaterialTable,
    ProjectCategoryTable,
    ProjectTable,
    StepTable,
)

MATERIALS = [
    ("2x4 lumber", 20, Decimal("4.50")),
    ("Galvanized screws (box)", 2, Decimal("12.99")),
]
STEPS = [
    "Level the ground and lay the foundation",
    "Frame the walls",
    "Attach the roof",
]
CATEGORIES = ["Outdoor", "Woodworking"]


def seed_project_details(project_id: int) -> int:
    print(f"--- Seeding details for project {project_id} ---")

    with Session(ConnectionProvider().engine) as session:
        if session.get(ProjectTable, project_id) is None:
            print(f"Project with ID={project_id} does not exist.")
            return 1

        for name, num_required, cost in MATERIALS:
            session.add(MaterialTable(
                project_id=project_id, material_name=name, num_required=num_required, cost=cost
            ))

        for order, step_text in enumerate(STEPS, start=1):
            session.add(StepTable(project_id=project_id, step_text=step_text, step_order=order))

        for name in CATEGORIES:
            # Reuse existing categories by name
            category = session.exec(
                select(CategoryTable).where(CategoryTable.category_name == name)
            ).first()
            if category is None:
                category = CategoryTable(category_name=name)
                session.add(category)
                session.flush()
            if session.get(ProjectCategoryTable, (project_id, category.category_id)) is None:
                session.add(ProjectCategoryTable(project_id=project_id, category_id=category.category_id))

        session.commit()

    print(f"Added {len(MATERIALS)} materials, {len(STEPS)} steps, {len(CATEGORIES)} categories.")
    return 0


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python scripts/seed_project_details.py <project_id>")
        sys.exit(2)
    sys.exit(seed_project_details(int(sys.argv[1])))
