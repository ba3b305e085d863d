"""
Entry point for running the scheduler CLI as a module.

Usage:
    python -m practice_scheduler plan skills.json
    python -m practice_scheduler --help
"""
from .cli import main

if __name__ == "__main__":
    main()
