"""Pytest bootstrap: test settings, in-memory database and payload builders."""

import os
from pathlib import Path
import sys

# Settings are read at import time, so these must be set before profgui loads.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SEED_ADMIN_ON_STARTUP", "false")
os.environ.setdefault("SECRET_KEY", "test-secret")

# Ensure project root is on sys.path so `import profgui` works without install
PROJECT_ROOT = Path(__file__).resolve().parents[1]
project_root_str = str(PROJECT_ROOT)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from profgui import models  # noqa: F401
from profgui.database import Base


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    try:
        yield sessionmaker(bind=engine, autocommit=False, autoflush=False)
    finally:
        engine.dispose()


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


# ---------------- payload builders ----------------

def student_payload(**overrides):
    payload = {
        "first_name": "Mariama",
        "last_name": "Diallo",
        "phone": "+224 621 11 22 33",
        "email": "",
        "password": "secret1",
        "city": "Conakry",
        "level": "10ème année",
        "subjects": ["Mathématiques", "Anglais"],
        "course_type": "domicile",
    }
    payload.update(overrides)
    return payload


def parent_payload(**overrides):
    payload = {
        "first_name": "Ibrahima",
        "last_name": "Camara",
        "phone": "622445566",
        "email": "ibrahima@example.com",
        "password": "secret2",
        "address": "Quartier Kaloum, Conakry",
        "children": [
            {
                "first_name": "Aissatou",
                "last_name": "Camara",
                "level": "5ème année",
                "subjects": ["Français"],
            },
            {
                "first_name": "Mamadou",
                "last_name": "Camara",
                "level": "9ème année",
                "subjects": ["Mathématiques", "Physique-Chimie"],
            },
        ],
    }
    payload.update(overrides)
    return payload


def teacher_payload(**overrides):
    payload = {
        "first_name": "Fatoumata",
        "last_name": "Bah",
        "phone": "623778899",
        "email": "fatoumata@example.com",
        "password": "secret3",
        "city": "Conakry",
        "subjects": ["Mathématiques", "Physique-Chimie"],
        "levels": ["10ème année", "12ème année / Terminale"],
        "diploma": "Master en Mathématiques",
        "experience": "5 ans au lycée Donka",
        "availability": "Soirs et week-ends",
        "course_type": "les_deux",
        "bio": "Professeure passionnée",
    }
    payload.update(overrides)
    return payload
