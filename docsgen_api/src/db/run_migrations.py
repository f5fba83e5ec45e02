"""
Run Alembic commands without an alembic.ini.

The script location is the migrations package next to this module and the
database comes from the same settings the application uses (DATABASE_URL or
POSTGRES_*).

Usage:
    python -m src.db.run_migrations upgrade head
    python -m src.db.run_migrations downgrade -1
    python -m src.db.run_migrations stamp head     # adopt a database created outside Alembic
    python -m src.db.run_migrations history
"""

import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from alembic import command
from alembic.config import Config

# name -> (alembic command, default arguments)
_COMMANDS: Dict[str, Tuple[Callable[..., None], List[str]]] = {
    "upgrade": (command.upgrade, ["head"]),
    "downgrade": (command.downgrade, ["-1"]),
    "stamp": (command.stamp, ["head"]),
    "history": (command.history, []),
    "current": (command.current, []),
    "heads": (command.heads, []),
}


# PUBLIC_INTERFACE
def build_config(database_url: Optional[str] = None) -> Config:
    """
    Alembic configuration for this project.

    ``database_url`` overrides the configured database; env.py reads it back
    from ``sqlalchemy.url``.
    """
    if database_url is None:
        from src.db.config import get_settings

        database_url = get_settings().sync_database_url

    cfg = Config()
    cfg.set_main_option("script_location", str(Path(__file__).resolve().parent / "migrations"))
    cfg.set_main_option("sqlalchemy.url", database_url)
    return cfg


# PUBLIC_INTERFACE
def main(argv: List[str] | None = None) -> None:
    """Dispatch ``argv`` (default: the process arguments) to Alembic."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(f"Usage: run_migrations <{'|'.join(sorted(_COMMANDS))}|show> [args...]")
        sys.exit(1)

    name, rest = args[0], args[1:]
    if name == "show":
        if len(rest) != 1:
            print("Usage: run_migrations show <revision>")
            sys.exit(2)
        command.show(build_config(), rest[0])
        return
    if name not in _COMMANDS:
        print(f"Unsupported Alembic command: {name}")
        sys.exit(2)

    func, defaults = _COMMANDS[name]
    func(build_config(), *(rest or defaults))


if __name__ == "__main__":
    main()
