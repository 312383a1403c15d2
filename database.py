# Base de données: connexion MongoDB avec un cycle de vie explicite.
# Le client est ouvert au démarrage de l'application et fermé à son arrêt ;
# les services reçoivent la collection en paramètre au lieu d'un client global.

import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

import config

logger = logging.getLogger(__name__)


class MongoConnection:
    def __init__(
        self,
        uri: str = config.MONGO_URI,
        db_name: str = config.DB_NAME,
        timeout_ms: int = config.MONGO_TIMEOUT_MS,
    ):
        self.uri = uri
        self.db_name = db_name
        self.timeout_ms = timeout_ms
        self.client: Optional[MongoClient] = None

    def open(self) -> "MongoConnection":
        if self.client is None:
            logger.info(f"Connexion à MongoDB (base '{self.db_name}')")
            self.client = MongoClient(self.uri, serverSelectionTimeoutMS=self.timeout_ms)
        return self

    def close(self) -> None:
        if self.client is not None:
            logger.info("Fermeture de la connexion MongoDB")
            self.client.close()
            self.client = None

    def get_database(self) -> Database:
        """
        Retourne la base de données MongoDB configurée.
        """
        if self.client is None:
            raise RuntimeError("La connexion MongoDB n'est pas ouverte")
        return self.client[self.db_name]

    def get_collection(self, name: str = config.USERS_COLLECTION) -> Collection:
        return self.get_database()[name]

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc, tb):
        self.close()
