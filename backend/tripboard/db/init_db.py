"""
Database initialization script.

Usage:
    python -m tripboard.db.init_db
"""
from tripboard.core.config import settings
from tripboard.db.session import Database

if __name__ == "__main__":
    print("Initializing database...")
    database = Database(settings.DATABASE_URL, echo=settings.DB_ECHO)
    database.create_all()
    database.dispose()
    print("Database initialized successfully!")
