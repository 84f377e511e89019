import sys
import uvicorn
from dotenv import load_dotenv

def run():
    """Start the FastAPI development server"""
    load_dotenv(".env.local")
    port = int(sys.argv[2]) if len(sys.argv) > 2 else 8000
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=port,
        reload=False,
        log_level="debug"
    )

if __name__ == "__main__":
    run()
