"""
Pytest configuration and fixtures.
"""
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from sentinel.core.database import Base, get_db
from sentinel.main import app

# Registers the table with Base.metadata
from sentinel.models import ConfigSnapshotRecord

# Use file-based SQLite for testing (more reliable than in-memory)
TEST_DATABASE_URL = "sqlite:///./test_sentinel_audit.db"

test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    pool_pre_ping=False,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


PANOS_RULE_TEMPLATE = """
            <entry name="{name}">
              <from><member>{from_zone}</member></from>
              <to><member>{to_zone}</member></to>
              <source><member>{source}</member></source>
              <destination><member>{destination}</member></destination>
              <application><member>{application}</member></application>
              <service><member>application-default</member></service>
              <action>{action}</action>{disabled}
            </entry>"""


def render_panos_config(rules, nat_rules="", interfaces=""):
    """Render a minimal Palo Alto XML running-config."""
    rendered = "".join(
        PANOS_RULE_TEMPLATE.format(
            name=rule["name"],
            from_zone=rule.get("from_zone", "trust"),
            to_zone=rule.get("to_zone", "untrust"),
            source=rule.get("source", "any"),
            destination=rule.get("destination", "any"),
            application=rule.get("application", "web-browsing"),
            action=rule.get("action", "allow"),
            disabled="\n              <disabled>yes</disabled>" if rule.get("disabled") else "",
        )
        for rule in rules
    )
    return f"""<config version="10.1.0">
  <devices>
    <entry name="localhost.localdomain">
      <network>
        <interface>
          <ethernet>{interfaces}
          </ethernet>
        </interface>
      </network>
      <vsys>
        <entry name="vsys1">
          <rulebase>
            <security>
              <rules>{rendered}
              </rules>
            </security>
            <nat>
              <rules>{nat_rules}
              </rules>
            </nat>
          </rulebase>
        </entry>
      </vsys>
    </entry>
  </devices>
</config>
"""


@pytest.fixture(scope="session")
def panos_config():
    """Factory rendering Palo Alto XML configs from rule dicts."""
    return render_panos_config


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """
    Create all tables before tests run and drop them after all tests complete.
    """
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(scope="function")
def db_session():
    """
    Provide a database session for tests that need direct DB access.
    """
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.query(ConfigSnapshotRecord).delete()
        db.commit()
        db.close()


@pytest.fixture(scope="function")
def client():
    """
    Create a test client with database override.

    The get_db dependency is overridden to use TestingSessionLocal,
    creating a new session for each request (as FastAPI expects).
    Stored snapshots are removed after each test.
    """
    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()
    cleanup = TestingSessionLocal()
    try:
        cleanup.query(ConfigSnapshotRecord).delete()
        cleanup.commit()
    finally:
        cleanup.close()
