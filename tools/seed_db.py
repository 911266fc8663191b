"""
Carga el catálogo base de recetas en la base de datos configurada (DB_URL).
Idempotente: las recetas ya presentes (por nombre) no se duplican.

Uso:
  python -m tools.seed_db
  python -m tools.seed_db --db-url sqlite:///./otra.db
"""
import argparse
import logging

from sqlmodel import Session

from api.config import settings
from api.db import _make_engine, init_db
from api.logging_config import configure_logging
from api.services.seed import BASE_RECIPES, seed_recipes
from api.storage.sql import SqlStorage

logger = logging.getLogger("tools.seed_db")

def main():
    parser = argparse.ArgumentParser(description="Seed del catálogo de recetas")
    parser.add_argument("--db-url", default=settings.db_url)
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args()

    configure_logging(args.log_level)
    engine = _make_engine(args.db_url)
    init_db(engine)
    with Session(engine, expire_on_commit=False) as session:
        created = seed_recipes(SqlStorage(session))
    engine.dispose()
    logger.info("Seed terminado: %d nuevas de %d recetas base", created, len(BASE_RECIPES))
    print(f"✅ {created} recetas nuevas ({len(BASE_RECIPES)} en el catálogo base)")

if __name__ == "__main__":
    main()
