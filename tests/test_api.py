TERM = {"term": "First Term", "academic_year": "2024/2025"}


def _create(client, path, payload):
    res = client.post(path, json=payload)
    assert res.status_code == 200, res.text
    body = res.json()
    assert body["success"] is True
    return body["data"]


def _setup_class(client):
    cls = _create(client, "/v1/classes/", {"name": "JHS 2B", "level": "JHS 2"})
    akua = _create(client, "/v1/students/", {"full_name": "Akua Darko", "class_id": cls["id"]})
    kwame = _create(client, "/v1/students/", {"full_name": "Kwame Appiah", "class_id": cls["id"]})
    science = _create(client, "/v1/subjects/", {"name": "Integrated Science", "code": "SCI"})
    return cls, akua, kwame, science


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "ok"


def test_score_upsert_keeps_one_row(client):
    _, akua, _, science = _setup_class(client)
    payload = {"student_id": akua["id"], "subject_id": science["id"], "class_score": 50, "exam_score": 50, **TERM}

    first = _create(client, "/v1/scores/", payload)
    second = _create(client, "/v1/scores/", {**payload, "exam_score": 90})

    assert first["id"] == second["id"]
    assert second["converted_exam_score"] == 54
    assert second["total"] == 74
    assert second["grade"] == "B2"

    listed = client.get("/v1/scores/", params={"student_id": akua["id"]}).json()["data"]
    assert len(listed) == 1


def test_score_update_recomputes(client):
    _, akua, _, science = _setup_class(client)
    score = _create(client, "/v1/scores/", {"student_id": akua["id"], "subject_id": science["id"], "class_score": 100, "exam_score": 100, **TERM})
    assert score["grade"] == "A1"

    res = client.put(f"/v1/scores/{score['id']}", json={"exam_score": 0})
    assert res.status_code == 200
    data = res.json()["data"]
    assert (data["converted_class_score"], data["converted_exam_score"], data["total"], data["grade"]) == (40, 0, 40, "E8")


def test_score_out_of_range_is_a_validation_error(client):
    _, akua, _, science = _setup_class(client)
    res = client.post("/v1/scores/", json={"student_id": akua["id"], "subject_id": science["id"], "class_score": 101, "exam_score": 50, **TERM})
    assert res.status_code == 422
    body = res.json()
    assert body["success"] is False
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert "class_score" in body["error"]["message"]


def test_unknown_term_is_rejected(client):
    _, akua, _, science = _setup_class(client)
    res = client.post("/v1/scores/", json={"student_id": akua["id"], "subject_id": science["id"], "class_score": 1, "exam_score": 1,
                                           "term": "Fourth Term", "academic_year": "2024/2025"})
    assert res.status_code == 422


def test_bulk_score_sheet(client):
    _, akua, kwame, science = _setup_class(client)
    res = client.post("/v1/scores/bulk", json={
        "subject_id": science["id"],
        "entries": [
            {"student_id": akua["id"], "class_score": 80, "exam_score": 80},
            {"student_id": kwame["id"], "class_score": 30, "exam_score": 30},
        ],
        **TERM,
    })
    assert res.status_code == 200
    assert [s["grade"] for s in res.json()["data"]] == ["A1", "F9"]


def test_missing_student_is_not_found(client):
    res = client.get("/v1/students/999")
    assert res.status_code == 404
    body = res.json()
    assert body["success"] is False
    assert body["error"]["code"] == "NOT_FOUND"
    assert "999" in body["error"]["message"]


def test_unknown_route_uses_error_envelope(client):
    res = client.get("/v1/nowhere")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "HTTP_404"


def test_duplicate_subject_is_a_conflict(client):
    _create(client, "/v1/subjects/", {"name": "French"})
    res = client.post("/v1/subjects/", json={"name": "French"})
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "CONFLICT"


def test_attendance_endpoints(client):
    _, akua, _, _ = _setup_class(client)
    record = _create(client, "/v1/attendance/", {"student_id": akua["id"], "total_days_present": 45, "total_days_in_term": 60, **TERM})
    assert record["percentage"] == 75

    res = client.post("/v1/attendance/", json={"student_id": akua["id"], "total_days_present": 61, "total_days_in_term": 60, **TERM})
    assert res.status_code == 422

    res = client.put(f"/v1/attendance/{record['id']}", json={"total_days_present": 70})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_ARGUMENT"


def test_grading_endpoints(client):
    res = client.get("/v1/grading/grade", params={"total": 64.5})
    assert res.json()["data"] == {"total": 64.5, "grade": "C4", "interpretation": "Credit", "is_pass": True}

    res = client.post("/v1/grading/normalize", json={"class_score": 62, "exam_score": 70})
    assert res.json()["data"] == {"converted_class": 25, "converted_exam": 42, "total": 67, "grade": "B3"}

    res = client.get("/v1/grading/attendance-percentage", params={"present": 2, "total_days": 3})
    assert res.json()["data"]["percentage"] == 67


def test_attendance_percentage_with_no_school_days(client):
    res = client.get("/v1/grading/attendance-percentage", params={"present": 5, "total_days": 0})
    assert res.status_code == 400
    body = res.json()
    assert body["error"]["code"] == "INVALID_ARGUMENT"
    assert body["latency_ms"] is not None


def test_rank_endpoint_ties(client):
    res = client.post("/v1/grading/rank", json={"students": [
        {"student_id": 7, "total_score": 50},
        {"student_id": 3, "total_score": 50},
        {"student_id": 1, "total_score": 40},
    ]})
    assert res.status_code == 200
    assert [(s["student_id"], s["position"]) for s in res.json()["data"]] == [(7, 1), (3, 2), (1, 3)]


def test_reports(client):
    cls, akua, kwame, science = _setup_class(client)
    _create(client, "/v1/scores/", {"student_id": akua["id"], "subject_id": science["id"], "class_score": 60, "exam_score": 60, **TERM})
    _create(client, "/v1/scores/", {"student_id": kwame["id"], "subject_id": science["id"], "class_score": 90, "exam_score": 90, **TERM})

    res = client.get(f"/v1/reports/class/{cls['id']}", params=TERM)
    assert res.status_code == 200
    report = res.json()["data"]
    assert [(r["full_name"], r["position"]) for r in report["students"]] == [("Kwame Appiah", 1), ("Akua Darko", 2)]
    assert report["summary"]["highest_total"] == 90

    res = client.get(f"/v1/reports/student/{akua['id']}", params=TERM)
    card = res.json()["data"]
    assert (card["position"], card["total_students"]) == (2, 2)
    assert card["lines"][0]["grade"] == "C4"

    res = client.get("/v1/reports/dashboard")
    assert res.json()["data"]["average_score"] == 75


def test_report_rejects_bad_academic_year(client):
    cls, _, _, _ = _setup_class(client)
    res = client.get(f"/v1/reports/class/{cls['id']}", params={"term": "First Term", "academic_year": "2024-25"})
    assert res.status_code == 422


def test_delete_student(client):
    _, akua, _, science = _setup_class(client)
    _create(client, "/v1/scores/", {"student_id": akua["id"], "subject_id": science["id"], "class_score": 60, "exam_score": 60, **TERM})

    res = client.delete(f"/v1/students/{akua['id']}")
    assert res.status_code == 200
    assert client.get(f"/v1/students/{akua['id']}").status_code == 404
    assert client.get("/v1/scores/", params={"student_id": akua["id"]}).json()["data"] == []


def test_class_with_students_cannot_be_deleted(client):
    cls, akua, kwame, _ = _setup_class(client)

    res = client.delete(f"/v1/classes/{cls['id']}")
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "HTTP_409"

    # report cards keep working
    card = client.get(f"/v1/reports/student/{akua['id']}", params=TERM).json()["data"]
    assert card["class_name"] == "JHS 2B"

    client.delete(f"/v1/students/{akua['id']}")
    client.delete(f"/v1/students/{kwame['id']}")
    assert client.delete(f"/v1/classes/{cls['id']}").status_code == 200


def test_student_needs_an_existing_class(client):
    res = client.post("/v1/students/", json={"full_name": "Nana Yeboah", "class_id": 42})
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "NOT_FOUND"


def test_deleting_class_teacher_unlinks_class(client):
    teacher = _create(client, "/v1/teachers/", {"full_name": "Kwabena Asare", "username": "kasare"})
    cls = _create(client, "/v1/classes/", {"name": "JHS 3A", "level": "JHS 3", "class_teacher_id": teacher["id"]})

    assert client.delete(f"/v1/teachers/{teacher['id']}").status_code == 200
    data = client.get(f"/v1/classes/{cls['id']}").json()["data"]
    assert data["class_teacher_id"] is None


def test_teacher_classes_endpoint(client):
    cls, akua, kwame, science = _setup_class(client)
    _create(client, "/v1/scores/", {"student_id": kwame["id"], "subject_id": science["id"], "class_score": 90, "exam_score": 90, **TERM})
    teacher = _create(client, "/v1/teachers/", {
        "full_name": "Adwoa Boakye",
        "username": "aboakye",
        "assigned_class_ids": [cls["id"]],
        "assigned_subject_ids": [science["id"]],
    })

    res = client.get(f"/v1/teachers/{teacher['id']}/classes", params=TERM)
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["total_students"] == 2
    assert [s["code"] for s in data["subjects"]] == ["SCI"]
    rows = data["classes"][0]["students"]
    assert [(r["full_name"], r["subject_count"], r["average_score"], r["total_score"]) for r in rows] == [
        ("Akua Darko", 0, 0, 0),
        ("Kwame Appiah", 1, 90, 90),
    ]

    assert client.get("/v1/teachers/999/classes").status_code == 404


def test_non_finite_numbers_are_rejected(client):
    for value in ("inf", "-inf", "nan"):
        res = client.get("/v1/grading/grade", params={"total": value})
        assert res.status_code == 422
        assert res.json()["error"]["code"] == "VALIDATION_ERROR"

    res = client.post(
        "/v1/grading/rank",
        content='{"students": [{"student_id": 1, "total_score": Infinity}]}',
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 422
