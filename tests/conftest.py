import uuid

import pytest

from invoicing.config import Settings
from invoicing.db.engine import create_db_engine, init_schema

from factories import insert_customer, insert_project, insert_user


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        NODE_ENV="test",
        APP_ORIGIN="http://localhost:5173",
        PORT="8000",
        BASE_PATH="/api/v1/",
        DATABASE_URL=f"sqlite:///{tmp_path / 'invoicing.sqlite'}",
    )


@pytest.fixture
def engine(settings):
    engine = create_db_engine(settings)
    init_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def owner(engine):
    """A user with one customer and one project, as ids."""
    with engine.begin() as conn:
        user_id = insert_user(conn)
        customer_id = insert_customer(conn, user_id)
        project_id = insert_project(conn, user_id, customer_id)
    return {"user_id": user_id, "customer_id": customer_id, "project_id": project_id}


@pytest.fixture
def new_uuid():
    return uuid.uuid4
