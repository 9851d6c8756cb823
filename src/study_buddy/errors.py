"""Error taxonomy shared by generation, storage and the API layer."""


class StudyNotesError(Exception):
    """Base class for all study-notes failures scoped to a single request."""


class ValidationError(StudyNotesError):
    """Input rejected before any external call (e.g. no topics given)."""


class GenerationError(StudyNotesError):
    """The generation provider call failed."""


class ResponseParseError(GenerationError):
    """The provider answered, but not with JSON of the shape {"notes": [...]}."""


class PersistenceError(StudyNotesError):
    """A store read or write failed at the transport or query level."""


class NotFoundError(StudyNotesError):
    """A lookup by id matched no stored row."""


class AuthenticationError(StudyNotesError):
    """Credentials or an access token were rejected by the identity provider."""
