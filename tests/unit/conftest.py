import pytest
from unittest.mock import AsyncMock, MagicMock


def _returns_argument(entity):
    return entity


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Mock repositories
    uow.users = MagicMock()
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=_returns_argument)

    uow.organizations = MagicMock()
    uow.organizations.get_by_id = AsyncMock(return_value=None)
    uow.organizations.create = AsyncMock(side_effect=_returns_argument)

    uow.memberships = MagicMock()
    uow.memberships.get_by_user_and_organization = AsyncMock(return_value=None)
    uow.memberships.get_by_organization_id = AsyncMock(return_value=[])
    uow.memberships.create = AsyncMock(side_effect=_returns_argument)

    uow.events = MagicMock()
    uow.events.get_by_id = AsyncMock(return_value=None)
    uow.events.get_by_creator_id = AsyncMock(return_value=[])
    uow.events.create = AsyncMock(side_effect=_returns_argument)

    uow.event_admins = MagicMock()
    uow.event_admins.get_by_event_id = AsyncMock(return_value=[])
    uow.event_admins.get_by_user_id = AsyncMock(return_value=[])
    uow.event_admins.create = AsyncMock(side_effect=_returns_argument)

    uow.event_registrants = MagicMock()
    uow.event_registrants.get_by_event_and_user = AsyncMock(return_value=None)
    uow.event_registrants.get_by_event_id = AsyncMock(return_value=[])
    uow.event_registrants.get_by_user_id = AsyncMock(return_value=[])
    uow.event_registrants.create = AsyncMock(side_effect=_returns_argument)

    return uow
