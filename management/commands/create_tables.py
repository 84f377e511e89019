import asyncio
import sys
from pathlib import Path

def run():
    """Create all tables directly from the ORM models (local development only, use alembic elsewhere)"""

    # Add the project root to Python path so we can import the app
    project_root = Path(__file__).parent.parent.parent
    sys.path.insert(0, str(project_root))

    try:
        from app.core.database import create_all_tables, dispose_engine
        from app.core.config import settings

        async def create():
            try:
                await create_all_tables()
            finally:
                await dispose_engine()
            print(f"Tables created for {settings.DATABASE_URL.split('@')[-1]}")

        asyncio.run(create())

    except ImportError as e:
        print(f"Error importing app: {e}")
        print("Make sure you're running this from the project root directory.")
    except Exception as e:
        print(f"Error creating tables: {e}")

if __name__ == "__main__":
    run()
