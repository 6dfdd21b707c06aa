from fastapi import APIRouter, Depends, status
from fastapi.responses import Response
from pydantic import BaseModel

from catalog.auth.dependencies import get_current_user, get_repository
from catalog.auth.passwords import hash_password
from catalog.repository import CatalogRepository
from catalog.validation import user_registration_rules

router = APIRouter(tags=['users'])


class AuthenticatedUserResponse(BaseModel):
    emailAddress: str
    password: str


@router.get('/users', response_model=AuthenticatedUserResponse)
def get_authenticated_user(current_user: dict = Depends(get_current_user)):
    return AuthenticatedUserResponse(
        emailAddress=current_user['emailAddress'],
        password=current_user['password'],
    )


@router.post('/users', status_code=status.HTTP_201_CREATED, response_class=Response)
def create_user(
    data: dict = Depends(user_registration_rules),
    repository: CatalogRepository = Depends(get_repository),
):
    repository.create_user({
        'firstName': data['firstName'],
        'lastName': data['lastName'],
        'emailAddress': data['emailAddress'],
        'password': hash_password(data['password']),
    })
    return Response(status_code=status.HTTP_201_CREATED, headers={'Location': '/'})
