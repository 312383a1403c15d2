from fastapi import Request

from services.user_service import UserService

# --- DÉPENDANCES FASTAPI ---

def get_user_service(request: Request) -> UserService:
    """Retourne le UserService construit par l'app factory au démarrage."""
    service = getattr(request.app.state, "user_service", None)
    if service is None:
        raise RuntimeError("UserService non initialisé : l'application n'a pas démarré")
    return service
