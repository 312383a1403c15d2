import logging

from dotenv import load_dotenv

load_dotenv()

import config
from database import MongoConnection
from errors import ResourceError
from services.user_service import UserService

logger = logging.getLogger(__name__)


def ensure_admin_user(service: UserService) -> str:
    """
    Vérifie si l'admin existe déjà, le crée sinon.
    Un compte existant est promu au rôle admin ; un compte désactivé le reste.
    Retourne l'id de l'utilisateur.
    """
    existing = service.get_user_by_email(config.ADMIN_EMAIL)
    if existing:
        logger.info(f"L'utilisateur '{config.ADMIN_EMAIL}' existe déjà. Mise à jour du rôle.")
        if existing.role != "admin":
            service.update_user(existing.id, {"role": "admin"})
        return existing.id

    logger.info(f"Création de l'utilisateur admin '{config.ADMIN_EMAIL}'.")
    created = service.create_user({
        "email": config.ADMIN_EMAIL,
        "password": config.ADMIN_PASSWORD,
        "firstName": config.ADMIN_FIRST_NAME,
        "lastName": config.ADMIN_LAST_NAME,
        "phoneNumber": config.ADMIN_PHONE_NUMBER,
        "address": config.ADMIN_ADDRESS,
        "role": "admin",
    })
    return created.id


def main():
    logging.basicConfig(level=config.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')
    try:
        with MongoConnection() as connection:
            user_id = ensure_admin_user(UserService(connection.get_collection()))
            logger.info(f"Utilisateur admin prêt (id: {user_id}).")
    except ResourceError as e:
        logger.error(f"Une erreur est survenue : {e.envelope()['message']}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
