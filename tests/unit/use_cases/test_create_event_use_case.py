from datetime import date, time
from uuid import uuid4

import pytest

from community_api.app.use_cases.events import CreateEventUseCase
from community_api.constants import (
    INVALID_EVENT_INPUT,
    ORGANIZATION_NOT_AUTHORIZED,
    ORGANIZATION_NOT_FOUND,
    USER_NOT_FOUND,
)
from community_api.domain.entities import (
    EventAdmin,
    EventRegistrant,
    MembershipRole,
    Organization,
    OrganizationMembership,
    Recurrence,
    User,
)


def make_user():
    return User(
        id=uuid4(),
        email=f"{uuid4().hex}@example.com",
        password_hash="hash",
        first_name="firstName",
        last_name="lastName",
    )


def make_organization(creator_id):
    return Organization(
        id=uuid4(),
        name="name",
        description="description",
        is_public=True,
        creator_id=creator_id,
    )


def make_event_input(organization_id, **overrides):
    data = {
        "title": "newTitle",
        "description": "newDescription",
        "start_date": "2026-10-17",
        "end_date": "2026-10-18",
        "start_time": "10:00:00",
        "end_time": "12:00:00",
        "all_day": False,
        "recurring": False,
        "recurrence": "DAILY",
        "is_public": False,
        "is_registerable": False,
        "location": "newLocation",
        "latitude": 1,
        "longitude": 1,
    }
    if organization_id is not None:
        data["organization_id"] = str(organization_id)
    data.update(overrides)
    return data


def make_blank_event_input(organization_id):
    """Payload whose date, time and text scalars are all empty strings"""
    return make_event_input(
        organization_id,
        title="",
        description="",
        location="",
        start_date="",
        end_date="",
        start_time="",
        end_time="",
    )


def assert_nothing_written(mock_uow):
    mock_uow.events.create.assert_not_called()
    mock_uow.event_admins.create.assert_not_called()
    mock_uow.event_registrants.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_user_without_payload(mock_uow):
    """Requester is checked first, even when no payload is given"""
    use_case = CreateEventUseCase(mock_uow)
    result = await use_case.execute(uuid4(), None)

    assert result.is_err()
    assert result.error.code == USER_NOT_FOUND
    mock_uow.organizations.get_by_id.assert_not_called()
    assert_nothing_written(mock_uow)


@pytest.mark.asyncio
async def test_unknown_user_with_valid_payload(mock_uow):
    """USER_NOT_FOUND wins over an existing organization"""
    owner = make_user()
    organization = make_organization(owner.id)
    mock_uow.organizations.get_by_id.return_value = organization

    use_case = CreateEventUseCase(mock_uow)
    result = await use_case.execute(uuid4(), make_event_input(organization.id))

    assert result.is_err()
    assert result.error.code == USER_NOT_FOUND
    assert_nothing_written(mock_uow)


@pytest.mark.asyncio
async def test_unknown_organization(mock_uow):
    user = make_user()
    mock_uow.users.get_by_id.return_value = user

    use_case = CreateEventUseCase(mock_uow)
    result = await use_case.execute(user.id, make_event_input(uuid4()))

    assert result.is_err()
    assert result.error.code == ORGANIZATION_NOT_FOUND
    assert_nothing_written(mock_uow)


@pytest.mark.asyncio
async def test_missing_payload_reports_organization_not_found(mock_uow):
    user = make_user()
    mock_uow.users.get_by_id.return_value = user

    use_case = CreateEventUseCase(mock_uow)
    result = await use_case.execute(user.id, None)

    assert result.is_err()
    assert result.error.code == ORGANIZATION_NOT_FOUND
    mock_uow.organizations.get_by_id.assert_not_called()
    assert_nothing_written(mock_uow)


@pytest.mark.asyncio
async def test_missing_organization_id_reports_organization_not_found(mock_uow):
    user = make_user()
    mock_uow.users.get_by_id.return_value = user

    use_case = CreateEventUseCase(mock_uow)
    result = await use_case.execute(user.id, make_event_input(None))

    assert result.is_err()
    assert result.error.code == ORGANIZATION_NOT_FOUND
    assert_nothing_written(mock_uow)


@pytest.mark.asyncio
async def test_neither_creator_nor_member(mock_uow):
    owner = make_user()
    outsider = make_user()
    organization = make_organization(owner.id)
    mock_uow.users.get_by_id.return_value = outsider
    mock_uow.organizations.get_by_id.return_value = organization

    use_case = CreateEventUseCase(mock_uow)
    result = await use_case.execute(outsider.id, make_event_input(organization.id))

    assert result.is_err()
    assert result.error.code == ORGANIZATION_NOT_AUTHORIZED
    assert_nothing_written(mock_uow)


@pytest.mark.asyncio
async def test_creator_creates_event(mock_uow):
    user = make_user()
    organization = make_organization(user.id)
    mock_uow.users.get_by_id.return_value = user
    mock_uow.organizations.get_by_id.return_value = organization

    use_case = CreateEventUseCase(mock_uow)
    result = await use_case.execute(user.id, make_event_input(organization.id))

    assert result.is_ok()
    event = result.value
    assert event.title == "newTitle"
    assert event.description == "newDescription"
    assert event.location == "newLocation"
    assert event.latitude == 1
    assert event.longitude == 1
    assert event.all_day is False
    assert event.recurring is False
    assert event.is_public is False
    assert event.is_registerable is False
    assert event.recurrence == Recurrence.daily
    assert event.creator == str(user.id)
    assert event.organization == str(organization.id)
    assert event.admins == [str(user.id)]
    assert len(event.registrants) == 1
    assert event.registrants[0].user_id == str(user.id)
    assert event.registrants[0].user == str(user.id)

    created_event = mock_uow.events.create.call_args.args[0]
    assert str(created_event.id) == event.id
    assert created_event.creator_id == user.id
    assert created_event.organization_id == organization.id

    admin = mock_uow.event_admins.create.call_args.args[0]
    assert isinstance(admin, EventAdmin)
    assert (admin.event_id, admin.user_id) == (created_event.id, user.id)

    registrant = mock_uow.event_registrants.create.call_args.args[0]
    assert isinstance(registrant, EventRegistrant)
    assert (registrant.event_id, registrant.user_id) == (created_event.id, user.id)

    mock_uow.organizations.create.assert_not_called()
    mock_uow.memberships.create.assert_not_called()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_member_creates_event(mock_uow):
    owner = make_user()
    member = make_user()
    organization = make_organization(owner.id)
    mock_uow.users.get_by_id.return_value = member
    mock_uow.organizations.get_by_id.return_value = organization
    mock_uow.memberships.get_by_user_and_organization.return_value = (
        OrganizationMembership(
            user_id=member.id,
            organization_id=organization.id,
            role=MembershipRole.member,
        )
    )

    use_case = CreateEventUseCase(mock_uow)
    result = await use_case.execute(member.id, make_event_input(organization.id))

    assert result.is_ok()
    assert result.value.creator == str(member.id)
    assert result.value.admins == [str(member.id)]
    mock_uow.memberships.get_by_user_and_organization.assert_called_once_with(
        member.id, organization.id
    )


@pytest.mark.asyncio
async def test_identical_calls_create_distinct_events(mock_uow):
    user = make_user()
    organization = make_organization(user.id)
    mock_uow.users.get_by_id.return_value = user
    mock_uow.organizations.get_by_id.return_value = organization
    event_input = make_event_input(organization.id)

    use_case = CreateEventUseCase(mock_uow)
    first = await use_case.execute(user.id, event_input)
    second = await use_case.execute(user.id, event_input)

    assert first.is_ok() and second.is_ok()
    assert first.value.id != second.value.id
    assert mock_uow.events.create.call_count == 2


@pytest.mark.asyncio
async def test_unknown_user_with_invalid_payload(mock_uow):
    """USER_NOT_FOUND is reported before the payload is looked at"""
    data = make_event_input(uuid4(), start_date="not a date")
    del data["title"]

    use_case = CreateEventUseCase(mock_uow)
    result = await use_case.execute(uuid4(), data)

    assert result.is_err()
    assert result.error.code == USER_NOT_FOUND
    mock_uow.organizations.get_by_id.assert_not_called()
    assert_nothing_written(mock_uow)


@pytest.mark.asyncio
async def test_unknown_organization_with_blank_fields(mock_uow):
    user = make_user()
    mock_uow.users.get_by_id.return_value = user

    use_case = CreateEventUseCase(mock_uow)
    result = await use_case.execute(user.id, make_blank_event_input(uuid4()))

    assert result.is_err()
    assert result.error.code == ORGANIZATION_NOT_FOUND
    assert_nothing_written(mock_uow)


@pytest.mark.asyncio
@pytest.mark.parametrize("data", [{"organization_id": "not-a-uuid"}, ["not", "a", "mapping"]])
async def test_unresolvable_organization_reference(mock_uow, data):
    user = make_user()
    mock_uow.users.get_by_id.return_value = user

    use_case = CreateEventUseCase(mock_uow)
    result = await use_case.execute(user.id, data)

    assert result.is_err()
    assert result.error.code == ORGANIZATION_NOT_FOUND
    mock_uow.organizations.get_by_id.assert_not_called()
    assert_nothing_written(mock_uow)


@pytest.mark.asyncio
async def test_outsider_with_blank_fields_is_not_authorized(mock_uow):
    owner = make_user()
    outsider = make_user()
    organization = make_organization(owner.id)
    mock_uow.users.get_by_id.return_value = outsider
    mock_uow.organizations.get_by_id.return_value = organization

    use_case = CreateEventUseCase(mock_uow)
    result = await use_case.execute(
        outsider.id, make_blank_event_input(organization.id)
    )

    assert result.is_err()
    assert result.error.code == ORGANIZATION_NOT_AUTHORIZED
    assert_nothing_written(mock_uow)


@pytest.mark.asyncio
async def test_invalid_fields_are_rejected_after_authorization(mock_uow):
    user = make_user()
    organization = make_organization(user.id)
    mock_uow.users.get_by_id.return_value = user
    mock_uow.organizations.get_by_id.return_value = organization
    data = make_event_input(organization.id, start_date="")
    del data["title"]

    use_case = CreateEventUseCase(mock_uow)
    result = await use_case.execute(user.id, data)

    assert result.is_err()
    assert result.error.code == INVALID_EVENT_INPUT
    assert "title" in result.error.message
    assert "start_date" in result.error.message
    mock_uow.memberships.get_by_user_and_organization.assert_called_once()
    assert_nothing_written(mock_uow)


@pytest.mark.asyncio
async def test_blank_optional_dates_and_times_are_unset(mock_uow):
    user = make_user()
    organization = make_organization(user.id)
    mock_uow.users.get_by_id.return_value = user
    mock_uow.organizations.get_by_id.return_value = organization
    data = make_event_input(
        organization.id, end_date="", start_time="", end_time="", all_day=True
    )

    use_case = CreateEventUseCase(mock_uow)
    result = await use_case.execute(user.id, data)

    assert result.is_ok()
    assert result.value.start_date == date(2026, 10, 17)
    assert result.value.end_date is None
    assert result.value.start_time is None
    assert result.value.end_time is None


@pytest.mark.asyncio
async def test_http_date_strings_are_accepted(mock_uow):
    user = make_user()
    organization = make_organization(user.id)
    mock_uow.users.get_by_id.return_value = user
    mock_uow.organizations.get_by_id.return_value = organization
    now = "Sat, 17 Oct 2026 10:00:00 GMT"
    data = make_event_input(
        organization.id, start_date=now, end_date=now, start_time=now, end_time=now
    )

    use_case = CreateEventUseCase(mock_uow)
    result = await use_case.execute(user.id, data)

    assert result.is_ok()
    assert result.value.start_date == date(2026, 10, 17)
    assert result.value.end_date == date(2026, 10, 17)
    assert result.value.start_time == time(10, 0)
    assert result.value.end_time == time(10, 0)
