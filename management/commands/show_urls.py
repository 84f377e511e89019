import sys
from pathlib import Path

def run():
    """List every API route with its methods, tags and handler"""

    # Add the project root to Python path so we can import the app
    project_root = Path(__file__).parent.parent.parent
    sys.path.insert(0, str(project_root))

    try:
        from fastapi.routing import APIRoute
        from app.main import app
    except ImportError as e:
        print(f"Error importing FastAPI app: {e}")
        print("Make sure you're running this from the project root directory.")
        return

    routes = [
        (route.path, ", ".join(sorted(route.methods - {"HEAD"})), ", ".join(route.tags or []), route.endpoint.__name__)
        for route in app.routes
        if isinstance(route, APIRoute)
    ]
    if not routes:
        print("No routes found.")
        return

    routes.sort()
    widths = [max(len(row[i]) for row in routes + [("Path", "Methods", "Tags", "Endpoint")]) for i in range(3)]
    header = f"{'Path':<{widths[0]}} | {'Methods':<{widths[1]}} | {'Tags':<{widths[2]}} | Endpoint"
    print(header)
    print("-" * len(header))
    for path, methods, tags, endpoint in routes:
        print(f"{path:<{widths[0]}} | {methods:<{widths[1]}} | {tags:<{widths[2]}} | {endpoint}")
    print(f"\nTotal routes: {len(routes)}")

if __name__ == "__main__":
    run()
