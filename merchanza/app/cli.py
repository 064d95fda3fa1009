from __future__ import annotations

import click
from flask import Blueprint
from werkzeug.security import generate_password_hash

from merchanza.app.extensions import db
from merchanza.app.models import Product, User, empty_cart

cli_bp = Blueprint("cli", __name__, cli_group=None)


@cli_bp.cli.command("init-db")
def init_db() -> None:
    """Create tables."""
    db.create_all()
    click.echo("DB initialized (tables created).")


@cli_bp.cli.command("seed")
def seed_data() -> None:
    """Seed minimal dev data.

    Safe to run multiple times; it will no-op if data exists.
    """
    db.create_all()

    if not User.query.filter_by(email="user@example.com").first():
        db.session.add(
            User(
                name="Demo User",
                email="user@example.com",
                password_hash=generate_password_hash("Password123!"),
                cart_data=empty_cart(),
            )
        )

    if Product.query.count() == 0:
        products = [
            Product(name="Striped Flutter Sleeve Blouse", image="", category="women", new_price=50.0, old_price=80.5),
            Product(name="Slim Fit Bomber Jacket", image="", category="men", new_price=85.0, old_price=120.5),
            Product(name="Hooded Kids Sweatshirt", image="", category="kid", new_price=30.0, old_price=45.0),
            Product(name="Cotton Crew T-Shirt", image="", category="clothing", new_price=15.0, old_price=25.0),
        ]
        db.session.add_all(products)

    db.session.commit()
    click.echo("Seed complete. Login: user@example.com / Password123!")
