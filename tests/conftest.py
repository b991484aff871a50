import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.db import get_db, init_db
from main import app
from models.classes import Class as ClassModel
from models.students import Student as StudentModel
from models.subjects import Subject as SubjectModel
from services.repository import SqlRecordsRepository


@pytest.fixture
def engine():
    # one in-memory database per test, shared by every connection
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def repo(db_session):
    return SqlRecordsRepository(db_session)


@pytest.fixture
def client(session_factory):
    def _override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _override_get_db
    # no context manager: the startup hook would create tables in the configured database
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def school(db_session):
    """
    One class of four students (enrolment order Ama, Kofi, Esi, Yaw) and two subjects.
    Nothing scored yet.
    """
    cls = ClassModel(name="JHS 1A", level="JHS 1")
    db_session.add(cls)
    db_session.commit()

    students = [StudentModel(full_name=name, class_id=cls.id) for name in ("Ama Mensah", "Kofi Boateng", "Esi Owusu", "Yaw Asante")]
    maths = SubjectModel(name="Mathematics", code="MATH")
    english = SubjectModel(name="English Language", code="ENG")
    db_session.add_all(students + [maths, english])
    db_session.commit()

    return {
        "class": cls,
        "students": students,
        "maths": maths,
        "english": english,
    }
