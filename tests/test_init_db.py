from sqlalchemy import create_engine, inspect

from scripts.init_db import main


def test_init_db_creates_tables_from_environment(tmp_path, monkeypatch):
    db_path = tmp_path / "bootstrap.sqlite"
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("NODE_ENV", "development")
    monkeypatch.setenv("APP_ORIGIN", "http://localhost:5173")
    monkeypatch.setenv("PORT", "8000")
    monkeypatch.setenv("BASE_PATH", "/api/v1")
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_path}")

    main(["--reset"])

    engine = create_engine(f"sqlite:///{db_path}")
    try:
        assert "invoices" in inspect(engine).get_table_names()
    finally:
        engine.dispose()
