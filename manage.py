#!/usr/bin/env python3
"""
Django-style management script for running commands
Usage: python manage.py <command> [args]
"""
import sys
import importlib
from pathlib import Path

COMMANDS_DIR = Path(__file__).parent / "management" / "commands"

def main():
    if len(sys.argv) < 2:
        print("Usage: python manage.py <command> [args]")
        print("Available commands:")
        for file in sorted(COMMANDS_DIR.glob("*.py")):
            if file.name != "__init__.py":
                print(f"  {file.stem}")
        return

    command = sys.argv[1]

    try:
        module = importlib.import_module(f"management.commands.{command}")
    except ModuleNotFoundError:
        print(f"Command '{command}' not found")
        return

    if hasattr(module, 'run'):
        module.run()
    else:
        print(f"Command '{command}' does not have a run() function")

if __name__ == "__main__":
    main()
