import datetime as dt

from lottery_sales.data.schemas import Submission, SubmissionFilter, parse_datetime

from tests.conftest import make_submission


def test_from_dict_recomputes_totals():
    sub = Submission.from_dict({
        "id": "s1",
        "userId": "u1",
        "totalTickets": 12345,
        "dailySales": [
            {"brandName": "Sasiri", "monday": "10", "tuesday": 5, "weeklyTotal": 0},
            {"brandName": "Kapruka", "friday": "oops"},
        ],
    })
    assert [s.weekly_total for s in sub.daily_sales] == [15, 0]
    assert sub.total_tickets == 15
    assert all(s.submission_id == "s1" for s in sub.daily_sales)


def test_to_dict_round_trips_through_from_dict():
    sub = make_submission({"Sasiri": {"monday": 3}})
    again = Submission.from_dict(sub.to_dict())
    assert again == sub


def test_submitted_by_prefers_full_name():
    assert make_submission(full_name="Kamal Perera").submitted_by == "Kamal Perera"
    assert make_submission(full_name=None, username="kamal").submitted_by == "kamal"


def test_parse_datetime_accepts_trailing_z():
    parsed = parse_datetime("2025-01-02T03:04:05.000Z")
    assert parsed == dt.datetime(2025, 1, 2, 3, 4, 5, tzinfo=dt.timezone.utc)


def test_filter_district_and_city_are_case_insensitive_substrings():
    sub = make_submission(district="Nuwara Eliya", city="Hatton")
    assert SubmissionFilter(district="eliya").matches(sub)
    assert SubmissionFilter(city="HAT").matches(sub)
    assert not SubmissionFilter(district="Kandy").matches(sub)


def test_filter_date_range_needs_both_bounds():
    sub = make_submission(created_at=dt.datetime(2025, 3, 10, 23, 30, tzinfo=dt.timezone.utc))
    assert SubmissionFilter(start_date=dt.date(2025, 4, 1)).matches(sub)
    assert SubmissionFilter(start_date=dt.date(2025, 3, 1), end_date=dt.date(2025, 3, 10)).matches(sub)
    assert not SubmissionFilter(start_date=dt.date(2025, 3, 11), end_date=dt.date(2025, 3, 31)).matches(sub)


def test_filter_draft_flag():
    draft = make_submission(is_draft=True)
    assert SubmissionFilter(is_draft=True).matches(draft)
    assert not SubmissionFilter(is_draft=False).matches(draft)
    assert SubmissionFilter().matches(draft)
