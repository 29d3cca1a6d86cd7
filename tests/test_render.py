import json

from job_feed.models import Listing
from job_feed.render import UserProfile, format_card, format_detail, greeting, load_profile, match_summary


def test_greeting_without_profile():
    assert greeting(None) == "Find your next opportunity."


def test_greeting_with_full_profile():
    profile = UserProfile(name="Sam", current_job="Barista", goals="Move into UX", location="Lisbon")
    assert greeting(profile) == (
        "Hi, Sam! Looking to move on from Barista. Goal: Move into UX"
        "Preferred location: Lisbon."
    )


def test_match_summary():
    assert match_summary(0) == "0 jobs matched to your profile"
    assert match_summary(12) == "12 jobs matched to your profile"


def test_load_profile_accepts_camel_case(tmp_path):
    path = tmp_path / "profile.json"
    path.write_text(json.dumps({"name": "Ana", "currentJob": "Teacher", "skills": ["x"]}), encoding="utf-8")

    profile = load_profile(path)
    assert profile == UserProfile(name="Ana", current_job="Teacher")


def test_load_profile_missing_or_broken(tmp_path):
    assert load_profile(tmp_path / "nope.json") is None
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert load_profile(broken) is None


def test_format_card():
    job = Listing(
        id="remoteok-1",
        title="Data Analyst",
        company="Acme",
        location="Remote",
        salary="$40,000 - $50,000",
        url="https://remoteok.com/remote-jobs/1",
        description="<p>" + "x" * 50 + "</p>",
        tags=["sql", "python", "excel", "tableau"],
        type="contract",
        source="Remote OK",
    )
    card = format_card(job, preview_length=10).splitlines()

    assert card == [
        "Data Analyst @ Acme [contract]",
        "  Remote | $40,000 - $50,000 | Remote OK",
        "  xxxxxxxxxx...",
        "  sql, python, excel",
        "  Apply: https://remoteok.com/remote-jobs/1",
    ]


def test_format_card_minimal_listing():
    job = Listing(id="muse-1", title="Baker", source="The Muse")
    assert format_card(job) == "Baker @ \n   | N/A | The Muse"


def test_format_detail_shows_full_description_and_all_tags():
    job = Listing(
        id="remotive-9",
        title="Data Analyst",
        company="Acme",
        location="Remote",
        description="<p>" + "y" * 300 + "</p><ul><li>SQL</li></ul>",
        tags=["sql", "python", "excel", "tableau"],
        type="contract",
        publication_date="2024-05-01T10:00:00",
        url="https://remotive.com/jobs/9",
        source="Remotive",
    )

    assert format_detail(job).splitlines() == [
        "Data Analyst",
        "Acme",
        "Remote | N/A | Remotive",
        "Type: contract",
        "Posted: 2024-05-01T10:00:00",
        "",
        "Description",
        "y" * 300 + "SQL",
        "",
        "sql, python, excel, tableau",
        "",
        "Apply: https://remotive.com/jobs/9",
    ]


def test_format_detail_minimal_listing():
    job = Listing(id="muse-1", title="Baker", source="The Muse")
    assert format_detail(job) == "Baker\n\n | N/A | The Muse\n\nDescription\n"
