import asyncio

import pytest

from catalog.validation import (
    FieldRule,
    IsText,
    RequestValidator,
    Required,
    UniqueEmail,
    ValidEmail,
    course_rules,
    user_registration_rules,
)


class _AlwaysFails(FieldRule):
    async def check(self, value, repository) -> bool:
        return False


@pytest.mark.parametrize('value', ['Title', 0, ['a'], True])
def test_required_accepts_present_values(value) -> None:
    assert asyncio.run(Required('title').check(value, None)) is True


@pytest.mark.parametrize('value', [None, '', '   ', False])
def test_required_rejects_empty_values(value) -> None:
    assert asyncio.run(Required('title').check(value, None)) is False


def test_required_rejects_missing_field() -> None:
    errors = asyncio.run(RequestValidator(Required('title')).validate({}, None))

    assert errors == ['Please provide a value for "title"']


@pytest.mark.parametrize('value', ['joe@smith.com', 'first.last+tag@example.org'])
def test_valid_email_accepts_well_formed_addresses(value: str) -> None:
    assert asyncio.run(ValidEmail('emailAddress').check(value, None)) is True


@pytest.mark.parametrize('value', ['joe', 'joe@', '@smith.com', 'joe smith@example.com', 42])
def test_valid_email_rejects_malformed_addresses(value) -> None:
    assert asyncio.run(ValidEmail('emailAddress').check(value, None)) is False


def test_unique_email_consults_repository(seeded_repository) -> None:
    rule = UniqueEmail('emailAddress')

    assert asyncio.run(rule.check('joe@smith.com', seeded_repository)) is False
    assert asyncio.run(rule.check('new@example.com', seeded_repository)) is True


def test_validator_collects_all_messages_in_declaration_order() -> None:
    errors = asyncio.run(course_rules.validate({'title': '', 'description': None}, None))

    assert errors == [
        'Please provide a value for "title"',
        'Please provide a value for "description"',
    ]


def test_validator_skips_remaining_rules_for_failed_field(seeded_repository) -> None:
    errors = asyncio.run(user_registration_rules.validate({'firstName': 'Ann', 'lastName': 'Lee'}, seeded_repository))

    assert errors == [
        'Please provide a value for "emailAddress"',
        'Please provide a value for "password"',
    ]


def test_validator_reports_duplicate_email(seeded_repository) -> None:
    body = {
        'firstName': 'Joe',
        'lastName': 'Smith',
        'emailAddress': 'joe@smith.com',
        'password': 'secret',
    }

    errors = asyncio.run(user_registration_rules.validate(body, seeded_repository))

    assert errors == ['The email address "joe@smith.com" is already in use']


def test_validator_uses_custom_message() -> None:
    validator = RequestValidator(_AlwaysFails('title', 'Title "{value}" is not allowed'))

    errors = asyncio.run(validator.validate({'title': 'Draft'}, None))

    assert errors == ['Title "Draft" is not allowed']


def test_validator_passes_valid_body() -> None:
    errors = asyncio.run(course_rules.validate({'title': 'Title', 'description': 'Body'}, None))

    assert errors == []


@pytest.mark.parametrize('value', ['2 hours', '', None])
def test_is_text_accepts_strings_and_null(value) -> None:
    assert asyncio.run(IsText('estimatedTime').check(value, None)) is True


@pytest.mark.parametrize('value', [{'h': 1}, ['a'], 5, True])
def test_is_text_rejects_other_json_types(value) -> None:
    assert asyncio.run(IsText('estimatedTime').check(value, None)) is False


def test_course_rules_reject_non_text_values() -> None:
    body = {'title': 5, 'description': 'Body', 'estimatedTime': {'h': 1}, 'materialsNeeded': ['saw']}

    errors = asyncio.run(course_rules.validate(body, None))

    assert errors == [
        'Please provide text for "title"',
        'Please provide text for "estimatedTime"',
        'Please provide text for "materialsNeeded"',
    ]


def test_field_rule_subclass_must_implement_check() -> None:
    class _NoCheck(FieldRule):
        pass

    with pytest.raises(TypeError):
        _NoCheck('title')
