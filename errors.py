"""
Taxonomie des erreurs de l'API utilisateurs.

Chaque erreur porte un `ErrorKind` (exactement trois variantes) qui détermine
le code HTTP et le préfixe du message renvoyé au client.
"""
import enum
from http import HTTPStatus


class ErrorKind(str, enum.Enum):
    validation = "validation"
    not_found = "not_found"
    internal = "internal"


STATUS_BY_KIND = {
    ErrorKind.validation: HTTPStatus.BAD_REQUEST,
    ErrorKind.not_found: HTTPStatus.NOT_FOUND,
    ErrorKind.internal: HTTPStatus.INTERNAL_SERVER_ERROR,
}


class ResourceError(Exception):
    """Erreur métier remontée par UserService."""

    kind: ErrorKind = ErrorKind.internal

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind].value

    def envelope(self) -> dict:
        return error_envelope(self.status_code, self.message)


class ValidationError(ResourceError):
    kind = ErrorKind.validation


class NotFoundError(ResourceError):
    kind = ErrorKind.not_found


class InternalError(ResourceError):
    kind = ErrorKind.internal


def error_envelope(status_code: int, detail) -> dict:
    """Construit le corps uniforme `{"message": "<Phrase HTTP>: <détail>"}`."""
    try:
        phrase = HTTPStatus(status_code).phrase
    except ValueError:
        phrase = "Error"
    return {"message": f"{phrase}: {detail}"}


def format_validation_errors(err) -> str:
    """Résume les erreurs pydantic / FastAPI en une ligne `champ: message; ...`."""
    return "; ".join(
        f"{'.'.join(map(str, e['loc'])) or 'body'}: {e['msg']}" for e in err.errors()
    )
