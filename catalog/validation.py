"""Request body validation.

A route declares an ordered list of field rules. ``RequestValidator`` runs
them against the JSON body and collects every failure message, in the order
the rules were declared, before deciding whether the request may continue.
Rules may await, which lets a rule consult the database.

Once a rule for a field fails, later rules for the same field are skipped, so
a missing email address reports one message instead of three.
"""

from abc import ABC, abstractmethod
from typing import Any

from email_validator import EmailNotValidError, validate_email
from fastapi import Depends, Request
from fastapi.concurrency import run_in_threadpool

from catalog.auth.dependencies import get_repository
from catalog.repository import CatalogRepository

_MISSING = object()

INVALID_BODY_MESSAGE = 'Request body must be a JSON object'


class RequestValidationFailed(Exception):
    def __init__(self, errors: list[str]):
        super().__init__(errors)
        self.errors = errors


class FieldRule(ABC):
    message = 'Invalid value for "{field}"'

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        if message is not None:
            self.message = message

    @abstractmethod
    async def check(self, value: Any, repository: CatalogRepository) -> bool:
        """Return True when ``value`` satisfies the rule."""

    def format_message(self, value: Any) -> str:
        return self.message.format(field=self.field, value=value)


class Required(FieldRule):
    message = 'Please provide a value for "{field}"'

    async def check(self, value: Any, repository: CatalogRepository) -> bool:
        if value is _MISSING or value is None or value is False:
            return False
        if isinstance(value, str):
            return bool(value.strip())
        return True


class IsText(FieldRule):
    """Passes for strings; a missing or null value passes too."""
    message = 'Please provide text for "{field}"'

    async def check(self, value: Any, repository: CatalogRepository) -> bool:
        return value is _MISSING or value is None or isinstance(value, str)


class ValidEmail(FieldRule):
    message = 'Please provide a valid email address for "{field}"'

    async def check(self, value: Any, repository: CatalogRepository) -> bool:
        if not isinstance(value, str):
            return False
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True


class UniqueEmail(FieldRule):
    message = 'The email address "{value}" is already in use'

    async def check(self, value: Any, repository: CatalogRepository) -> bool:
        existing = await run_in_threadpool(repository.find_user_by_email, value)
        return existing is None


class RequestValidator:
    """FastAPI dependency returning the parsed body once every rule passes."""

    def __init__(self, *rules: FieldRule):
        self.rules = rules

    async def validate(self, body: dict[str, Any], repository: CatalogRepository) -> list[str]:
        errors: list[str] = []
        failed_fields: set[str] = set()
        for rule in self.rules:
            if rule.field in failed_fields:
                continue
            value = body.get(rule.field, _MISSING)
            if not await rule.check(value, repository):
                failed_fields.add(rule.field)
                errors.append(rule.format_message(value))
        return errors

    async def __call__(
        self,
        request: Request,
        repository: CatalogRepository = Depends(get_repository),
    ) -> dict[str, Any]:
        raw_body = await request.body()
        try:
            body = await request.json() if raw_body.strip() else {}
        except ValueError:
            body = None
        if not isinstance(body, dict):
            raise RequestValidationFailed([INVALID_BODY_MESSAGE])

        errors = await self.validate(body, repository)
        if errors:
            raise RequestValidationFailed(errors)
        return body


user_registration_rules = RequestValidator(
    Required('firstName'),
    IsText('firstName'),
    Required('lastName'),
    IsText('lastName'),
    Required('emailAddress'),
    ValidEmail('emailAddress'),
    UniqueEmail('emailAddress'),
    Required('password'),
    IsText('password'),
)

course_rules = RequestValidator(
    Required('title'),
    IsText('title'),
    Required('description'),
    IsText('description'),
    IsText('estimatedTime'),
    IsText('materialsNeeded'),
)
