import os
import tempfile
from pathlib import Path

_tmpdir = Path(tempfile.mkdtemp(prefix="city_explorer_test_"))
_db_path = _tmpdir / "test.db"

os.environ.setdefault("DATABASE_URL", f"sqlite:///{_db_path.as_posix()}")
os.environ.setdefault("LOG_DIR", str(_tmpdir / "logs"))

import pytest
from fastapi.testclient import TestClient

from app.db.base import Base
from app.db.crud import BlobStore
from app.db.session import engine
from app.main import create_app
from app.models.enums import PriceLevel
from app.schemas.places import Place

import app.models


@pytest.fixture()
def clean_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def blobs(clean_db):
    return BlobStore()


@pytest.fixture()
def client(clean_db):
    app = create_app()
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def make_place():
    def _make(place_id: str, **kwargs) -> Place:
        fields = {
            "name": f"Place {place_id}",
            "category": "Парк",
            "address": "ул. Ленина, 1",
            "hours": "Круглосуточно",
            "rating": 4.5,
            "price_level": PriceLevel.budget,
            "distance": "500 м",
            "latitude": 58.60,
            "longitude": 49.67,
        }
        fields.update(kwargs)
        return Place(id=place_id, **fields)

    return _make


@pytest.fixture()
def catalog(make_place):
    return (
        make_place("1", name="Кофейня «Зерно»", category="Кафе", distance="400 м"),
        make_place("2", name="Ресторан «Вятка»", category="Ресторан", distance="800 м", price_level=PriceLevel.premium),
        make_place("3", name="Дендропарк", category="Парк", distance="6 км"),
        make_place("4", name="Кинотеатр «Октябрь»", category="Кинотеатр", distance="1.2 км", price_level=PriceLevel.medium),
        make_place("5", name="Краеведческий музей", category="Музей", distance="2 км"),
    )
