"""Course catalog repository.

Every operation is a single parameterized statement run through the
StorageContext. Results come back as plain dicts keyed by the column names
the API exposes (``emailAddress``, ``userId``, ...).
"""

import logging
from typing import Any, Iterable

from sqlalchemy import inspect

from catalog.auth.passwords import hash_password
from catalog.database import Base, StorageContext
from catalog.models.course import Course
from catalog.models.user import User

logger = logging.getLogger(__name__)

_COURSE_WITH_OWNER_SQL = '''
    SELECT "Courses"."id" AS "id",
           "Courses"."userId" AS "userId",
           "Courses"."title" AS "title",
           "Users"."firstName" || ' ' || "Users"."lastName" AS "owner"
    FROM "Courses"
    INNER JOIN "Users" ON "Courses"."userId" = "Users"."id"
'''


class CatalogRepository:
    def __init__(self, context: StorageContext, enable_logging: bool = False):
        self.context = context
        self.enable_logging = enable_logging

    def log(self, message: str) -> None:
        if self.enable_logging:
            logger.info(message)

    def table_exists(self, table_name: str) -> bool:
        self.log(f'Checking if the {table_name} table exists...')
        return table_name in inspect(self.context.engine).get_table_names()

    # Users

    def list_users(self) -> list[dict[str, Any]]:
        self.log('Getting list of users...')
        return self.context.retrieve(
            '''
            SELECT "id", "firstName", "lastName", "emailAddress", "password"
            FROM "Users"
            ORDER BY "id"
            '''
        )

    def find_user_by_email(self, email: str) -> dict[str, Any] | None:
        return self.context.retrieve_single(
            'SELECT "emailAddress" FROM "Users" WHERE "emailAddress" = :email',
            email=email,
        )

    def create_user(self, user: dict[str, Any]) -> int:
        """Insert a user. ``user['password']`` must already be hashed."""
        return self.context.retrieve_value(
            '''
            INSERT INTO "Users"
              ("firstName", "lastName", "emailAddress", "password", "createdAt", "updatedAt")
            VALUES
              (:firstName, :lastName, :emailAddress, :password, CURRENT_TIMESTAMP, CURRENT_TIMESTAMP)
            RETURNING "id"
            ''',
            firstName=user['firstName'],
            lastName=user['lastName'],
            emailAddress=user['emailAddress'],
            password=user['password'],
        )

    def delete_user(self, user_id: int) -> int:
        self.log(f'Deleting user {user_id}...')
        return self.context.execute('DELETE FROM "Users" WHERE "id" = :id', id=user_id)

    # Courses

    def list_courses(self) -> list[dict[str, Any]]:
        self.log('Getting list of courses...')
        return self.context.retrieve(_COURSE_WITH_OWNER_SQL + ' ORDER BY "Courses"."id"')

    def get_course(self, course_id: int) -> dict[str, Any] | None:
        self.log(f'Getting course {course_id}...')
        return self.context.retrieve_single(
            _COURSE_WITH_OWNER_SQL + ' WHERE "Courses"."id" = :id',
            id=course_id,
        )

    def create_course(self, course: dict[str, Any]) -> int:
        """Insert a course and return its generated id."""
        return self.context.retrieve_value(
            '''
            INSERT INTO "Courses"
              ("userId", "title", "description", "estimatedTime", "materialsNeeded", "createdAt", "updatedAt")
            VALUES
              (:userId, :title, :description, :estimatedTime, :materialsNeeded, CURRENT_TIMESTAMP, CURRENT_TIMESTAMP)
            RETURNING "id"
            ''',
            userId=course['userId'],
            title=course['title'],
            description=course['description'],
            estimatedTime=course.get('estimatedTime'),
            materialsNeeded=course.get('materialsNeeded'),
        )

    def update_course(self, course: dict[str, Any]) -> int:
        self.log(f"Updating course {course['id']}...")
        return self.context.execute(
            '''
            UPDATE "Courses"
            SET "userId" = :userId,
                "title" = :title,
                "description" = :description,
                "estimatedTime" = :estimatedTime,
                "materialsNeeded" = :materialsNeeded,
                "updatedAt" = CURRENT_TIMESTAMP
            WHERE "id" = :id
            ''',
            id=course['id'],
            userId=course['userId'],
            title=course['title'],
            description=course['description'],
            estimatedTime=course['estimatedTime'],
            materialsNeeded=course['materialsNeeded'],
        )

    def delete_course(self, course_id: int) -> int:
        self.log(f'Deleting course {course_id}...')
        return self.context.execute('DELETE FROM "Courses" WHERE "id" = :id', id=course_id)

    # Schema

    def bootstrap(self, seed_users: Iterable[dict[str, Any]], seed_courses: Iterable[dict[str, Any]]) -> None:
        engine = self.context.engine
        tables = [User.__table__, Course.__table__]

        for table_name in ('Courses', 'Users'):
            if self.table_exists(table_name):
                self.log(f'Dropping the {table_name} table...')
        Base.metadata.drop_all(bind=engine, tables=tables)

        self.log('Creating the Users and Courses tables...')
        Base.metadata.create_all(bind=engine, tables=tables)

        self.log('Hashing the user passwords...')
        users = [{**user, 'password': hash_password(user['password'])} for user in seed_users]

        self.log('Creating the user records...')
        for user in users:
            self.create_user(user)

        self.log('Creating the course records...')
        for course in seed_courses:
            self.create_course(course)

        self.log('Database successfully initialized!')
