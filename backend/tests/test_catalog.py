from coursereview.models.subject import Subject


def test_list_campuses_and_fields(client, seed_catalog):
    campuses = client.get("/api/campuses")
    assert campuses.status_code == 200
    assert [c["name"] for c in campuses.json()] == ["Trondheim"]

    fields = client.get("/api/campuses/Trondheim/fields")
    assert fields.status_code == 200
    assert [f["field_id"] for f in fields.json()] == [101, 102]

    assert client.get("/api/campuses/Oslo/fields").status_code == 404


def test_get_field(client, seed_catalog):
    resp = client.get("/api/fields/101")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Informatikk"
    assert client.get("/api/fields/999").status_code == 404


def test_subjects_by_field_and_level(client, seed_subjects):
    all_subjects = client.get("/api/fields/101/subjects").json()
    assert [s["subject_id"] for s in all_subjects] == ["TDT4100", "TDT4120", "TDT4900"]

    masters = client.get("/api/fields/101/subjects", params={"level_id": 2}).json()
    assert [s["subject_id"] for s in masters] == ["TDT4900"]


def test_subject_counts_by_level(client, seed_subjects):
    resp = client.get("/api/fields/101/subject-counts")
    assert resp.status_code == 200
    assert resp.json() == [
        {"level_id": 1, "count": 2},
        {"level_id": 2, "count": 1},
        {"level_id": None, "count": 3},
    ]


def test_list_levels(client, seed_catalog):
    resp = client.get("/api/levels")
    assert [lvl["name"] for lvl in resp.json()] == ["Bachelor", "Master"]


def test_subject_counts_total_includes_subjects_without_level(client, db, seed_subjects):
    db.add(Subject(subject_id="TDT4290", name="Kundestyrt prosjekt", field_id=101, level_id=None,
                   description="Prosjekt"))
    db.commit()

    body = client.get("/api/fields/101/subject-counts").json()
    assert body == [
        {"level_id": 1, "count": 2},
        {"level_id": 2, "count": 1},
        {"level_id": None, "count": 4},
    ]
    # exactly one row without a level id, and it is the total
    assert [row for row in body if row["level_id"] is None] == [{"level_id": None, "count": 4}]
