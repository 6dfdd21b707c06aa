from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response
from pydantic import BaseModel

from catalog.auth.dependencies import get_current_user, get_repository
from catalog.core import config
from catalog.repository import CatalogRepository
from catalog.validation import course_rules

router = APIRouter(tags=['courses'])

COURSE_NOT_FOUND = 'Course not found.'


class CourseResponse(BaseModel):
    title: str
    owner: str


def ensure_course_owner(course: dict[str, Any], current_user: dict[str, Any]) -> None:
    if config.ENFORCE_COURSE_OWNERSHIP and course['userId'] != current_user['id']:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail='Only the owner of this course can change it.',
        )


def course_fields(data: dict[str, Any]) -> dict[str, Any]:
    return {
        'title': data['title'],
        'description': data['description'],
        'estimatedTime': data.get('estimatedTime'),
        'materialsNeeded': data.get('materialsNeeded'),
    }


@router.get('/courses', response_model=list[CourseResponse])
def list_courses(repository: CatalogRepository = Depends(get_repository)):
    return repository.list_courses()


@router.get('/courses/{course_id}', response_model=CourseResponse)
def get_course(course_id: int, repository: CatalogRepository = Depends(get_repository)):
    course = repository.get_course(course_id)
    if course is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=COURSE_NOT_FOUND)
    return course


@router.post('/courses', status_code=status.HTTP_201_CREATED, response_class=Response)
def create_course(
    data: dict = Depends(course_rules),
    current_user: dict = Depends(get_current_user),
    repository: CatalogRepository = Depends(get_repository),
):
    course_id = repository.create_course({**course_fields(data), 'userId': current_user['id']})
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={'Location': f'/courses/{course_id}'},
    )


@router.put('/courses/{course_id}', status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def update_course(
    course_id: int,
    data: dict = Depends(course_rules),
    current_user: dict = Depends(get_current_user),
    repository: CatalogRepository = Depends(get_repository),
):
    course = repository.get_course(course_id)
    if course is None:
        # Without ownership checks a missing id is a no-op, like DELETE.
        if not config.ENFORCE_COURSE_OWNERSHIP:
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=COURSE_NOT_FOUND)
    ensure_course_owner(course, current_user)

    repository.update_course({**course_fields(data), 'id': course_id, 'userId': course['userId']})
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete('/courses/{course_id}', status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_course(
    course_id: int,
    current_user: dict = Depends(get_current_user),
    repository: CatalogRepository = Depends(get_repository),
):
    course = repository.get_course(course_id)
    if course is not None:
        ensure_course_owner(course, current_user)
        repository.delete_course(course_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
