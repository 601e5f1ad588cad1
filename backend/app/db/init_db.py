"""
Database initialization script.
"""
from app.core.config import get_settings
from app.db.session import build_engine, init_db

if __name__ == "__main__":
    settings = get_settings()
    print(f"Initializing database at {settings.DATABASE_URL}...")
    init_db(build_engine(settings))
    print("Database initialized successfully!")
