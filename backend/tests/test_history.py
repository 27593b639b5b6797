"""Unified history feed across field, subject and review-list versions."""

from datetime import datetime

from coursereview.models.version import PageVersion, SubjectReviewVersion, SubjectVersion
from coursereview.services import history_service


def _seed_mixed_history(db, users):
    db.add_all([
        PageVersion(
            field_id=101,
            version_number=1,
            user_id=users["kari"].user_id,
            subject_ids='["TDT4120"]',
            description="initial",
            created_at=datetime(2026, 3, 1, 10, 0),
        ),
        SubjectVersion(
            subject_id="TDT4120",
            version_number=1,
            user_id=users["moderator"].user_id,
            action_type="deleted",
            description="removed",
            created_at=datetime(2026, 3, 1, 10, 5),
        ),
        SubjectReviewVersion(
            subject_id="TDT4120",
            reviews="[]",
            user_id=users["ola"].user_id,
            action_type="commented on",
            created_at=datetime(2026, 3, 1, 9, 0),
        ),
    ])
    db.commit()


def test_history_is_newest_first_across_sources(client, db, seed_users, seed_catalog):
    _seed_mixed_history(db, seed_users)

    resp = client.get("/api/history")
    assert resp.status_code == 200
    body = resp.json()

    assert [e["action_type"] for e in body] == ["deleted", "added", "commented on"]
    assert [e["user_name"] for e in body] == ["Moderator", "Kari", "Ola"]
    assert [e["source"] for e in body] == ["subject", "field", "review"]
    assert [e["entity_id"] for e in body] == ["TDT4120", "101", "TDT4120"]
    assert body[0]["timestamp"].startswith("2026-03-01T10:05")
    assert body[1]["version_number"] == 1


def test_field_entries_are_always_added(client, db, seed_users, seed_subjects):
    user_id = seed_users["kari"].user_id
    client.post("/api/fields/101/version", json={"userId": user_id, "description": "edited things"})
    client.post("/api/fields/102/version", json={"userId": user_id, "description": "deleted things"})

    entries = history_service.get_history(db)
    assert len(entries) == 2
    assert {e["action_type"] for e in entries} == {"added"}
    assert {e["entity_id"] for e in entries} == {"101", "102"}


def test_history_empty(client, seed_catalog):
    resp = client.get("/api/history")
    assert resp.status_code == 200
    assert resp.json() == []


def test_history_is_sorted_descending(client, db, seed_users, seed_catalog):
    user_id = seed_users["kari"].user_id
    for minute in (3, 1, 4, 1, 5, 9, 2, 6):
        db.add(SubjectVersion(
            subject_id=f"S{minute}",
            version_number=db.query(SubjectVersion).filter(SubjectVersion.subject_id == f"S{minute}").count() + 1,
            user_id=user_id,
            action_type="edited",
            created_at=datetime(2026, 1, 1, 12, minute),
        ))
        db.flush()
    db.commit()

    timestamps = [e["timestamp"] for e in history_service.get_history(db)]
    assert timestamps == sorted(timestamps, reverse=True)
    assert len(timestamps) == 8


def test_same_second_entries_have_stable_order(client, db, seed_users, seed_catalog):
    user_id = seed_users["moderator"].user_id
    stamp = datetime(2026, 4, 2, 8, 30, 15)
    # a subject deletion logs the subject and its field in the same second
    db.add_all([
        PageVersion(field_id=101, version_number=1, user_id=user_id, subject_ids="[]", created_at=stamp),
        SubjectVersion(subject_id="TDT4120", version_number=1, user_id=user_id, action_type="edited",
                       created_at=stamp),
        SubjectVersion(subject_id="TDT4120", version_number=2, user_id=user_id, action_type="deleted",
                       created_at=stamp),
        SubjectReviewVersion(subject_id="TDT4120", reviews="[]", user_id=user_id, action_type="commented on",
                             created_at=stamp),
    ])
    db.commit()

    for _ in range(3):
        body = client.get("/api/history").json()
        assert [(e["source"], e["action_type"]) for e in body] == [
            ("subject", "deleted"),
            ("subject", "edited"),
            ("review", "commented on"),
            ("field", "added"),
        ]
