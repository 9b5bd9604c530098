import pytest

from student_information import create_app
from student_information.context import StudentInformationContext
from student_information.extensions import db


def dispose(app):
    with app.app_context():
        db.engine.dispose()


@pytest.fixture
def built_apps():
    apps = []
    yield apps
    for app in apps:
        dispose(app)


@pytest.fixture
def app():
    app = create_app("config.TestingConfig")
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.drop_all()
    dispose(app)


@pytest.fixture
def open_context(app):
    def _open():
        return StudentInformationContext(app)
    return _open


@pytest.fixture
def ctx(open_context):
    with open_context() as ctx:
        yield ctx
