"""Tests for the Alembic migration that creates the rsvp table."""
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

BACKEND_DIR = Path(__file__).resolve().parents[1]


def _alembic_config(url: str) -> Config:
    cfg = Config(str(BACKEND_DIR / "alembic.ini"))
    cfg.set_main_option("script_location", str(BACKEND_DIR / "alembic"))
    cfg.set_main_option("sqlalchemy.url", url)
    return cfg


class TestMigrations:

    def test_upgrade_creates_rsvp_table(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'migrated.db'}"
        command.upgrade(_alembic_config(url), "head")

        engine = create_engine(url)
        try:
            columns = {c["name"]: c for c in inspect(engine).get_columns("rsvp")}
        finally:
            engine.dispose()
        assert set(columns) == {"rsvp_id", "guest_name", "total_attending"}
        assert columns["guest_name"]["nullable"] is False
        assert columns["total_attending"]["nullable"] is False

    def test_downgrade_drops_rsvp_table(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'migrated.db'}"
        cfg = _alembic_config(url)
        command.upgrade(cfg, "head")
        command.downgrade(cfg, "base")

        engine = create_engine(url)
        try:
            assert "rsvp" not in inspect(engine).get_table_names()
        finally:
            engine.dispose()
