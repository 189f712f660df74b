import sys
from pathlib import Path

from app.core.logging import setup_logging
from app.db.session import engine, Session, init_db
from app.db.seed import seed_all

DEFAULT_SEED_PATH = Path(__file__).resolve().parents[1] / "app" / "db" / "seed_data.yaml"


def run_seed(seed_path: str | Path = DEFAULT_SEED_PATH) -> None:
    setup_logging()
    init_db()
    with Session(engine) as session:
        seed_all(session=session, seed_path=seed_path)


if __name__ == "__main__":
    run_seed(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_SEED_PATH)
