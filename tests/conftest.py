import sys
from pathlib import Path
import pytest
import os

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

os.environ["RECALL_DATABASE_URL"] = "sqlite:///test_recall.db"

from recall.database import engine


@pytest.fixture(scope="function", autouse=True)
def db_setup():
    from recall.review_model import Base
    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)

    yield
