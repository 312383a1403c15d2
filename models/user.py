from enum import Enum
from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel
from pydantic.networks import validate_email


class UserRole(str, Enum):
    standard = "standard"
    admin = "admin"


def check_email(value: str) -> str:
    # Valide l'adresse mais conserve la chaîne telle que saisie (pas de normalisation du domaine).
    _, normalized = validate_email(value)
    if normalized.lower() != value.lower():
        raise ValueError("value is not a valid email address")
    return value


Email = Annotated[str, AfterValidator(check_email)]


class SecurityQuestion(BaseModel):
    questionText: str
    answerText: str


class User(BaseModel):
    id: Optional[str] = None  # MongoDB ObjectId as str
    email: Email
    password: str  # stored as supplied, not hashed
    firstName: str
    lastName: str
    phoneNumber: str
    address: str
    isDisabled: bool = False
    role: UserRole = UserRole.standard
    selectedSecurityQuestions: List[SecurityQuestion] = []
