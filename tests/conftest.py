"""
Shared fixtures: submission factory, in-memory store, API client.
"""
import datetime as dt
import itertools

import pytest
from fastapi.testclient import TestClient

from lottery_sales.config import ROLE_ASSISTANT, ROLE_TERRITORY_MANAGER
from lottery_sales.data.schemas import CurrentUser, Submission
from lottery_sales.data.store import SubmissionStore
from lottery_sales.main import create_app

# Wednesday
NOW = dt.datetime(2025, 10, 15, 12, 0, tzinfo=dt.timezone.utc)

_ids = itertools.count(1)


def make_submission(
    sales=None,
    user_id="u-assistant",
    username="kamal",
    full_name="Kamal Perera",
    district="Colombo",
    city="Maharagama",
    dealer_name="Lucky Stores",
    dealer_number="123456",
    created_at=None,
    is_draft=False,
    submission_id=None,
    **extra,
) -> Submission:
    """Build a Submission the way the store would load it.

    ``sales`` maps brand name → {day_field: count}.
    """
    created = created_at or NOW - dt.timedelta(days=1)
    raw = {
        "id": submission_id or f"sub-{next(_ids)}",
        "userId": user_id,
        "user": {"id": user_id, "username": username, "fullName": full_name},
        "district": district,
        "city": city,
        "dealerName": dealer_name,
        "dealerNumber": dealer_number,
        "assistantName": extra.pop("assistant_name", "Nimal"),
        "salesMethod": extra.pop("sales_method", "Counter"),
        "salesLocation": extra.pop("sales_location", "Main Street"),
        "isDraft": is_draft,
        "createdAt": created.isoformat(),
        "updatedAt": extra.pop("updated_at", created).isoformat(),
        "dailySales": [
            {"brandName": brand, **counts} for brand, counts in (sales or {}).items()
        ],
    }
    return Submission.from_dict(raw)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def manager():
    return CurrentUser(id="u-manager", role=ROLE_TERRITORY_MANAGER, username="tm", full_name="Territory Manager")


@pytest.fixture
def assistant():
    return CurrentUser(id="u-assistant", role=ROLE_ASSISTANT, username="kamal", full_name="Kamal Perera")


@pytest.fixture
def other_assistant():
    return CurrentUser(id="u-other", role=ROLE_ASSISTANT, username="sunil")


@pytest.fixture
def store():
    return SubmissionStore()


@pytest.fixture
def sample_submissions():
    return [
        make_submission(
            {"Sasiri": {"monday": 10, "tuesday": 5}, "Kapruka": {"friday": 3}},
            district="Colombo", city="A", dealer_name="Dealer One",
            created_at=NOW - dt.timedelta(days=2),
        ),
        make_submission(
            {"Sasiri": {"sunday": 7}, "Jayoda": {"monday": 1, "wednesday": 2}},
            district="Colombo", city="B", dealer_name="Dealer Two",
            created_at=NOW - dt.timedelta(days=1),
        ),
        make_submission(
            {"Ada Kotipathi": {"saturday": 4}},
            user_id="u-other", username="sunil", full_name=None,
            district="Galle", city="Hikkaduwa", dealer_name="Dealer One",
            created_at=NOW - dt.timedelta(days=20),
        ),
    ]


@pytest.fixture
def loaded_store(sample_submissions):
    return SubmissionStore(submissions=sample_submissions)


def auth_headers(user: CurrentUser) -> dict:
    headers = {"X-User-Id": user.id, "X-User-Role": user.role, "X-Username": user.username}
    if user.full_name:
        headers["X-Full-Name"] = user.full_name
    return headers


@pytest.fixture
def client(loaded_store):
    with TestClient(create_app(loaded_store)) as c:
        yield c
