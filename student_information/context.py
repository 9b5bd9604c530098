"""Persistence context for the student information model.

A :class:`StudentInformationContext` is one unit of work: it pushes its own
Flask application context, so the Flask-SQLAlchemy session it hands out is
not shared with any other context. Use it as a ``with`` block::

    with StudentInformationContext(app) as ctx:
        ctx.students.add(Student(first_mid_name="Ada", last_name="Lovelace"))
        ctx.save_changes()
"""
import logging

from flask.globals import app_ctx
from sqlalchemy.exc import SQLAlchemyError

from . import create_app
from .errors import ContextClosedError, ContextOrderError, EntityNotFoundError
from .extensions import db
from .models import Course, Enrollment, Student

logger = logging.getLogger(__name__)


class EntitySet:
    """Collection handle for one mapped model, bound to a session."""

    def __init__(self, session, model):
        self.session = session
        self.model = model

    @property
    def query(self):
        return self.session.query(self.model)

    def filter_by(self, **criteria):
        return self.query.filter_by(**criteria)

    def get(self, ident):
        return self.session.get(self.model, ident)

    def get_or_raise(self, ident):
        obj = self.get(ident)
        if obj is None:
            raise EntityNotFoundError(self.model, ident)
        return obj

    def all(self):
        return self.query.all()

    def count(self):
        return self.query.count()

    def add(self, obj):
        self.session.add(obj)
        return obj

    def add_all(self, objs):
        self.session.add_all(objs)

    def remove(self, obj):
        self.session.delete(obj)

    def __iter__(self):
        return iter(self.all())

    def __len__(self):
        return self.count()

    def __bool__(self):
        # truthiness must not depend on a COUNT query
        return True

    def __repr__(self):
        return f"<EntitySet {self.model.__name__}>"


class StudentInformationContext:
    """Exposes the ``courses``, ``enrollments`` and ``students`` collections.

    :param app: a configured Flask app. When omitted, one is built with
        :func:`create_app` from ``config_object`` (default ``config.Config``).
    :param config_object: anything ``app.config.from_object`` accepts.
    """

    def __init__(self, app=None, config_object=None):
        if app is None:
            app = create_app(config_object or "config.Config")
        self.app = app
        self._app_context = None
        self._session = None
        self._sets = {}
        self._depth = 0

    @property
    def is_open(self):
        return self._app_context is not None

    def open(self):
        """Open the unit of work. Re-entering an open context nests it;
        only the outermost :meth:`close` releases the session."""
        if self.is_open:
            self._depth += 1
            return self
        self._depth = 1
        self._app_context = self.app.app_context()
        self._app_context.push()
        self._session = db.session()
        self._sets = {
            "courses": EntitySet(self._session, Course),
            "enrollments": EntitySet(self._session, Enrollment),
            "students": EntitySet(self._session, Student),
        }
        logger.debug("Opened context on %s", self.app.name)
        return self

    def close(self):
        if not self.is_open:
            return
        if self._depth > 1:
            self._depth -= 1
            return
        if app_ctx._get_current_object() is not self._app_context:
            raise ContextOrderError(
                "StudentInformationContext closed while a later context is still open"
            )
        try:
            # teardown removes the scoped session, discarding unsaved changes
            self._app_context.pop()
        finally:
            self._app_context = None
            self._session = None
            self._sets = {}
            self._depth = 0
        logger.debug("Closed context on %s", self.app.name)

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def _require_open(self):
        if not self.is_open:
            raise ContextClosedError("StudentInformationContext is not open")

    @property
    def session(self):
        self._require_open()
        return self._session

    def _set(self, name):
        self._require_open()
        return self._sets[name]

    @property
    def courses(self):
        return self._set("courses")

    @property
    def enrollments(self):
        return self._set("enrollments")

    @property
    def students(self):
        return self._set("students")

    def save_changes(self):
        session = self.session
        try:
            session.commit()
        except SQLAlchemyError:
            logger.warning("Commit failed, rolling back", exc_info=True)
            session.rollback()
            raise
        logger.debug("Committed changes")

    def ensure_created(self):
        with self.app.app_context():
            db.create_all()
