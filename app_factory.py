# Imports from standard library or third-party packages
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.collection import Collection
from starlette.exceptions import HTTPException as StarletteHTTPException

# Imports from this project
import config
from database import MongoConnection
from errors import ResourceError, error_envelope, format_validation_errors
from routers import users
from services.user_service import UserService

logger = logging.getLogger(__name__)


async def resource_error_handler(request: Request, exc: ResourceError):
    return JSONResponse(status_code=exc.status_code, content=exc.envelope())


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # FastAPI renvoie 422 par défaut ; l'API expose 400 pour toute entrée invalide.
    detail = format_validation_errors(exc)
    logger.warning(f"{request.method} {request.url.path} refusé: {detail}")
    return JSONResponse(status_code=400, content=error_envelope(400, detail))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(exc.status_code, exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Erreur inattendue sur {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content=error_envelope(500, str(exc)))


def create_app(users_collection: Optional[Collection] = None, connection: Optional[MongoConnection] = None):
    """
    Crée et configure l'instance de l'application FastAPI.

    Si `users_collection` est fourni (tests, scripts), il est utilisé tel quel et
    aucune connexion MongoDB n'est ouverte. Sinon la connexion est ouverte au
    démarrage et fermée à l'arrêt.
    """
    app = FastAPI(
        title="BCRS API Documentation",
        description="This is the API documentation for Bob's Computer Repair Shop",
        version="1.0.0"
    )

    if users_collection is not None:
        app.state.user_service = UserService(users_collection)
    else:
        connection = connection or MongoConnection()

        # Événements de démarrage et d'arrêt
        @app.on_event("startup")
        def on_startup():
            connection.open()
            app.state.user_service = UserService(connection.get_collection(config.USERS_COLLECTION))

        @app.on_event("shutdown")
        def on_shutdown():
            connection.close()

    # Configuration CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,  # Doit être restreint en production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Enveloppe d'erreur uniforme : {"message": "<Statut>: <détail>"}
    app.add_exception_handler(ResourceError, resource_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Inclusion des routeurs
    app.include_router(users.router, prefix="/users", tags=["User"])

    @app.get("/", tags=["Root"])
    def read_root():
        return {"message": "Welcome to the BCRS API!"}

    return app
