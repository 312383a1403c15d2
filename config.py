# config.py
"""
Configuration centralisée du backend BCRS.
Les valeurs sont lues depuis l'environnement (fichier .env chargé par main.py),
avec des valeurs par défaut pour le développement local.
"""
import os

# --- MongoDB ---
MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017/")
DB_NAME = os.getenv("DB_NAME", "bcrs")
USERS_COLLECTION = os.getenv("USERS_COLLECTION", "users")
MONGO_TIMEOUT_MS = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))

# --- Application ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# --- Compte administrateur créé par create_admin.py ---
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@bcrs.com")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin")  # IMPORTANT: à changer en production
ADMIN_FIRST_NAME = os.getenv("ADMIN_FIRST_NAME", "Bob")
ADMIN_LAST_NAME = os.getenv("ADMIN_LAST_NAME", "Admin")
ADMIN_PHONE_NUMBER = os.getenv("ADMIN_PHONE_NUMBER", "000-000-0000")
ADMIN_ADDRESS = os.getenv("ADMIN_ADDRESS", "BCRS")
