import logging
from typing import List, Optional

import pydantic
from bson import ObjectId
from pymongo import ASCENDING
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from errors import InternalError, NotFoundError, ValidationError, format_validation_errors
from models.user import User
from schemas import SUMMARY_FIELDS, UserCreate, UserSummary

logger = logging.getLogger(__name__)

SUMMARY_PROJECTION = {field: 1 for field in SUMMARY_FIELDS}


def to_summary(document: dict) -> UserSummary:
    return UserSummary(
        id=str(document["_id"]),
        **{field: document.get(field) for field in SUMMARY_FIELDS},
    )


def parse_user_id(user_id: str) -> ObjectId:
    """Vérifie la forme de l'identifiant avant tout appel à MongoDB."""
    if not isinstance(user_id, str) or not ObjectId.is_valid(user_id):
        raise ValidationError("Invalid userId")
    return ObjectId(user_id)


class UserService:
    """
    Opérations CRUD sur la collection des utilisateurs.

    La collection est injectée à la construction ; le service ne garde aucun
    état entre deux requêtes. Aucun utilisateur n'est jamais supprimé
    physiquement : la suppression passe `isDisabled` à True.
    """

    def __init__(self, collection: Collection):
        self.collection = collection

    def create_user(self, data) -> User:
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        try:
            candidate = UserCreate.model_validate(data)
        except pydantic.ValidationError as e:
            logger.warning(f"Création refusée: {format_validation_errors(e)}")
            raise ValidationError(format_validation_errors(e))

        document = candidate.model_dump(mode="json")
        logger.info(f"Création de l'utilisateur {candidate.email}")
        try:
            result = self.collection.insert_one(document)
        except PyMongoError as e:
            logger.error(f"Échec de l'insertion de {candidate.email}: {e}")
            raise InternalError(str(e))

        document.pop("_id", None)
        return User(id=str(result.inserted_id), **document)

    def list_users(self) -> List[UserSummary]:
        try:
            cursor = self.collection.find({}, SUMMARY_PROJECTION).sort("_id", ASCENDING)
            return [to_summary(doc) for doc in cursor]
        except PyMongoError as e:
            logger.error(f"Échec de la lecture des utilisateurs: {e}")
            raise InternalError(str(e))

    def get_user_by_id(self, user_id: str) -> UserSummary:
        oid = parse_user_id(user_id)
        try:
            document = self.collection.find_one({"_id": oid}, SUMMARY_PROJECTION)
        except PyMongoError as e:
            logger.error(f"Échec de la lecture de l'utilisateur {user_id}: {e}")
            raise InternalError(str(e))

        if document is None:
            logger.warning(f"Utilisateur {user_id} introuvable")
            raise NotFoundError(f"Unable to find user with userId {user_id}")
        return to_summary(document)

    def get_user_by_email(self, email: str) -> Optional[UserSummary]:
        try:
            document = self.collection.find_one({"email": email}, SUMMARY_PROJECTION)
        except PyMongoError as e:
            logger.error(f"Échec de la recherche de {email}: {e}")
            raise InternalError(str(e))
        return to_summary(document) if document else None

    def update_user(self, user_id: str, patch) -> None:
        # Le contenu du patch n'est pas validé : n'importe quel champ peut être écrasé.
        oid = parse_user_id(user_id)
        if not isinstance(patch, dict) or not patch:
            raise ValidationError("Request body must be a non-empty JSON object")

        logger.info(f"Mise à jour de l'utilisateur {user_id}: {sorted(patch)}")
        self._update_one(user_id, oid, patch)

    def disable_user(self, user_id: str) -> None:
        oid = parse_user_id(user_id)
        logger.info(f"Désactivation de l'utilisateur {user_id}")
        self._update_one(user_id, oid, {"isDisabled": True})

    def _update_one(self, user_id: str, oid: ObjectId, fields: dict) -> None:
        try:
            result = self.collection.update_one({"_id": oid}, {"$set": fields})
        except PyMongoError as e:
            logger.error(f"Échec de la mise à jour de l'utilisateur {user_id}: {e}")
            raise InternalError(str(e))

        if result.matched_count == 0:
            logger.warning(f"Utilisateur {user_id} introuvable")
            raise NotFoundError(f"Unable to find user with userId {user_id}")
