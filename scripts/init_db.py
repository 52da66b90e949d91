#!/usr/bin/env python3
"""
Standalone database initialization script.
Creates the schema, an admin account and a starter meal catalogue.
"""

import argparse
import logging
import os
import sys
from decimal import Decimal

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from app.exceptions import ConflictError
from domain.enums import UserType
from domain.models import SessionLocal, init_database
from domain.schemas.meal_schemas import MealCreate
from domain.schemas.user_schemas import UserCreate
from repositories import MealRepository
from services.meal_service import MealService
from services.user_service import UserService

logger = logging.getLogger("mealbox.scripts.init_db")

STARTER_MEALS = [
    MealCreate(
        name="Family week box",
        description="Five dinners for four people",
        price=Decimal("89.90"),
        image="family-box.jpg",
    ),
    MealCreate(
        name="Vegetarian box",
        description="Four plant-based dinners for two",
        price=Decimal("54.90"),
        image="veggie-box.jpg",
    ),
    MealCreate(
        name="Quick lunch box",
        description="Five ready-in-15-minutes lunches",
        price=Decimal("39.90"),
        image="lunch-box.jpg",
    ),
]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Initialize the Mealbox database")
    parser.add_argument("--admin-email", default=os.getenv("ADMIN_EMAIL", "admin@example.com"))
    parser.add_argument("--admin-password", default=os.getenv("ADMIN_PASSWORD"))
    parser.add_argument("--skip-meals", action="store_true", help="Do not seed meals")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    init_database()

    db = SessionLocal()
    try:
        if args.admin_password:
            try:
                UserService.create_user(
                    db,
                    UserCreate(email=args.admin_email, password=args.admin_password),
                    user_type=UserType.ADMIN,
                )
            except ConflictError:
                logger.info("Admin %s already exists", args.admin_email)
        else:
            logger.warning("No admin password given; skipping admin account")

        if not args.skip_meals and not MealRepository(db).get_all(limit=1):
            for meal in STARTER_MEALS:
                MealService.create_meal(db, meal)
            logger.info("Seeded %d meals", len(STARTER_MEALS))
    except Exception:
        logger.exception("Database initialization failed")
        return 1
    finally:
        db.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
