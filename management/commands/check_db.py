import asyncio
import sys
from pathlib import Path
from sqlalchemy import text

def run():
    """Open a connection with the configured DATABASE_URL and run SELECT 1"""

    project_root = Path(__file__).parent.parent.parent
    sys.path.insert(0, str(project_root))

    try:
        from app.core.database import create_engine
        from app.core.config import settings

        async def check():
            engine = create_engine(settings.DATABASE_URL)
            print('Using DB:', settings.DATABASE_URL.split('@')[-1])
            try:
                async with engine.connect() as conn:
                    result = await conn.execute(text('SELECT 1'))
                print('DB CONNECTED, result:', result.scalar())
            except Exception as e:
                print('DB CONNECTION FAILED:', e)
            finally:
                await engine.dispose()

        asyncio.run(check())

    except ImportError as e:
        print(f"Error importing app: {e}")

if __name__ == "__main__":
    run()
