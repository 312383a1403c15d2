# main.py: Point d'entrée pour le serveur uvicorn.
# Ce fichier charge l'environnement, configure les logs
# et expose l'application créée par l'app factory.

import logging

from dotenv import load_dotenv

# Charger les variables d'environnement au tout début
load_dotenv()

import config
from app_factory import create_app #qui se trouve dans app_factory.py

logging.basicConfig(level=config.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')

app = create_app()
