# manage.py
import sys

from app import create_app
from trackhub.database.db_manager import db
from trackhub.database.seed import seed_database

USAGE = "Usage: python manage.py [create_db|seed_db]"


def create_db():
    """Creates the database tables (create_app already does this; kept for explicit setup)."""
    app = create_app()
    with app.app_context():
        print(f"Database URI: {app.config['SQLALCHEMY_DATABASE_URI']}")
        db.create_all()
        print("Database tables created!")


def seed_db():
    """Drops every table, recreates it and inserts the sample tracks."""
    app = create_app()
    with app.app_context():
        count = seed_database()
        print(f"Database seeding successful: {count} tracks inserted.")


COMMANDS = {
    'create_db': create_db,
    'seed_db': seed_db,
}


if __name__ == '__main__':
    if len(sys.argv) > 1:
        command = COMMANDS.get(sys.argv[1])
        if command is None:
            print(f"Unknown command: {sys.argv[1]}")
            print(USAGE)
            sys.exit(1)
        command()
    else:
        print(f"No command provided. {USAGE}")
