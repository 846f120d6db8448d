import click
from flask import current_app
from flask.cli import with_appcontext

from app import db
from core.managers.module_manager import ModuleManager


@click.command("create-db")
@with_appcontext
def create_db():
    """Create every table registered by the application modules."""
    db.create_all()
    click.echo("Database tables created.")


@click.command("seed")
@click.option("--reset", is_flag=True, help="Drop and recreate all tables before seeding.")
@with_appcontext
def seed(reset):
    """Run the seeders of every module, lowest priority first."""
    if reset:
        db.drop_all()
    db.create_all()

    for seeder_class in ModuleManager(current_app).get_seeders():
        seeder_class().run()
        click.echo(f"{seeder_class.__name__} completed.")

    click.echo("Database seeded.")
