from typing import List

from fastapi import APIRouter, Body, Depends, Response

from dependencies import get_user_service
from models.user import User
from schemas import ErrorMessage, UserSummary
from services.user_service import UserService

router = APIRouter()

BAD_REQUEST = {400: {"model": ErrorMessage, "description": "Bad Request"}}
NOT_FOUND = {404: {"model": ErrorMessage, "description": "Not Found"}}
SERVER_ERROR = {500: {"model": ErrorMessage, "description": "Internal Server Error"}}

CREATE_EXAMPLE = {
    "email": "jimbob@bcrs.com",
    "password": "SecurePassword123",
    "firstName": "James",
    "lastName": "Robert",
    "phoneNumber": "123-456-7890",
    "address": "456 Tech Lane, Urban City, USA",
    "isDisabled": False,
    "role": "admin",
    "selectedSecurityQuestions": [
        {"questionText": "What is your mother's maiden name?", "answerText": "Smith"},
        {"questionText": "What was your first pet's name?", "answerText": "Rover"},
        {"questionText": "What is your favorite color?", "answerText": "Blue"},
    ],
}


# Les corps sont reçus en dict brut : la validation est faite par UserService.
@router.post(
    "",
    summary="Create a new user",
    response_model=User,
    status_code=201,
    responses={**BAD_REQUEST, **SERVER_ERROR},
)
def create_user(
    user: dict = Body(..., examples=[CREATE_EXAMPLE]),
    service: UserService = Depends(get_user_service),
):
    return service.create_user(user)


@router.get(
    "",
    summary="Find all users",
    response_model=List[UserSummary],
    responses=SERVER_ERROR,
)
def list_users(service: UserService = Depends(get_user_service)):
    return service.list_users()


@router.get(
    "/{user_id}",
    summary="Find user by id",
    response_model=UserSummary,
    responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
)
def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    return service.get_user_by_id(user_id)


@router.put(
    "/{user_id}",
    summary="Update a user",
    status_code=204,
    response_class=Response,
    responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
)
def update_user(
    user_id: str,
    patch: dict = Body(..., examples=[{"role": "admin", "isDisabled": False}]),
    service: UserService = Depends(get_user_service),
):
    service.update_user(user_id, patch)
    return Response(status_code=204)


@router.delete(
    "/{user_id}",
    summary="Disable a user",
    status_code=204,
    response_class=Response,
    responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
)
def disable_user(user_id: str, service: UserService = Depends(get_user_service)):
    # L'utilisateur n'est pas supprimé, seulement désactivé.
    service.disable_user(user_id)
    return Response(status_code=204)
