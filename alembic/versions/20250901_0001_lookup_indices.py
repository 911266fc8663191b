"""composite lookup indices and favourites uniqueness

Revision ID: 20250901_0001
Revises:
Create Date: 2025-09-01 00:00:00

"""
from alembic import op
from sqlalchemy import inspect

# revision identifiers, used by Alembic.
revision = "20250901_0001"
down_revision = None
branch_labels = None
depends_on = None

# Las tablas las crea SQLModel (init_db); aquí sólo índices de consulta
INDICES = [
    ("ix_meal_entry_user_date", "meal_entry", ["user_id", "entry_date"], False),
    ("ix_nutritional_goal_user_updated", "nutritional_goal", ["user_id", "updated_at"], False),
    # BDs creadas antes de la UniqueConstraint de favorite_recipe
    ("ux_favorite_recipe_user_recipe", "favorite_recipe", ["user_id", "recipe_id"], True),
]


def _has_unique(insp, table: str, cols) -> bool:
    return any(uc["column_names"] == cols for uc in insp.get_unique_constraints(table))


def upgrade():
    insp = inspect(op.get_bind())
    for name, table, cols, unique in INDICES:
        if not insp.has_table(table):
            continue
        if name in {ix["name"] for ix in insp.get_indexes(table)}:
            continue
        if unique and _has_unique(insp, table, cols):
            continue
        op.create_index(name, table, cols, unique=unique)


def downgrade():
    insp = inspect(op.get_bind())
    for name, table, _cols, _unique in INDICES:
        if insp.has_table(table) and name in {ix["name"] for ix in insp.get_indexes(table)}:
            op.drop_index(name, table_name=table)
