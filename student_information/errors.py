class StudentInformationError(Exception):
    """Base class for errors raised by this package.

    Storage failures are not wrapped: SQLAlchemy's own exceptions
    (``IntegrityError``, ``OperationalError``...) reach the caller as is.
    """

class EntityNotFoundError(StudentInformationError, LookupError):
    def __init__(self, model, ident):
        self.model = model
        self.ident = ident
        super().__init__(f"{model.__name__} {ident} does not exist")

class ContextClosedError(StudentInformationError, RuntimeError):
    pass

class ContextOrderError(StudentInformationError, RuntimeError):
    """Closing a context while another one pushed after it is still open."""
