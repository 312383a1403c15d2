from typing import Any, List

from pydantic import BaseModel, field_validator

from models.user import Email, SecurityQuestion, UserRole

# Champs renvoyés par la liste et la lecture d'un utilisateur.
# Le mot de passe, l'adresse, le téléphone et les questions de sécurité ne sont jamais exposés.
SUMMARY_FIELDS = ("firstName", "lastName", "email", "role")

CREATE_DEFAULTS = {
    "isDisabled": False,
    "role": UserRole.standard,
    "selectedSecurityQuestions": [],
}


# Schéma pour la création d'utilisateur (tout sauf l'id, généré par MongoDB)
class UserCreate(BaseModel):
    email: Email
    password: str
    firstName: str
    lastName: str
    phoneNumber: str
    address: str
    isDisabled: bool = False
    role: UserRole = UserRole.standard
    selectedSecurityQuestions: List[SecurityQuestion] = []

    # null vaut absence : on applique la valeur par défaut
    @field_validator("isDisabled", "role", "selectedSecurityQuestions", mode="before")
    @classmethod
    def null_means_default(cls, value, info):
        if value is None:
            return CREATE_DEFAULTS[info.field_name]
        return value


# Schéma pour la lecture d'un utilisateur (réponse API).
# Types libres : une mise à jour peut avoir écrit n'importe quelle valeur JSON.
class UserSummary(BaseModel):
    id: str
    firstName: Any = None
    lastName: Any = None
    email: Any = None
    role: Any = None


class ErrorMessage(BaseModel):
    message: str
