from uuid import uuid4

from tests.factories import BATCH, make_family, make_pair, make_student

PREVIEW = "/families/auto-assign-children"
EXECUTE = "/families/execute-auto-assign"


async def test_preview_returns_camel_case_proposals(client, seed):
    family = make_family(make_pair(), title="Lions")
    son = make_student("male", student_code="S-1", first_name="Abel")
    await seed(students=[son], families=[family])

    resp = await client.post(PREVIEW, json={"mode": "homogeneous", "targetBatch": BATCH})

    assert resp.status_code == 200
    body = resp.json()
    assert body["preview"] is True
    assert "failedAssignments" not in body

    [assignment] = body["assignments"]
    assert assignment["familyId"] == str(family.id)
    assert assignment["familyTitle"] == "Lions"
    assert assignment["grandparentIndex"] == 0
    assert assignment["parentPairIndex"] == 0
    assert assignment["studentId"] == str(son.id)
    assert assignment["student"]["firstName"] == "Abel"
    assert assignment["student"]["studentCode"] == "S-1"
    assert assignment["relationship"] == "son"
    assert assignment["birthOrder"] == 1
    assert assignment["addressMatch"] == "Matched kebele: 01"
    assert "diversityScore" not in assignment

    stats = body["statistics"]
    assert stats["totalAssigned"] == 1
    assert stats["genderDistribution"] == {"sons": 1, "daughters": 0, "balance": 1}
    assert stats["qualityLevel"] == "Excellent"
    assert body["configuration"]["maxChildrenPerFamily"] == 4
    assert body["configuration"]["addressLevel"] == "kebele"


async def test_preview_accepts_numeric_batch(client, seed):
    await seed(students=[make_student("male")], families=[make_family(make_pair())])

    resp = await client.post(PREVIEW, json={"mode": "homogeneous", "targetBatch": int(BATCH)})

    assert resp.status_code == 200
    assert resp.json()["statistics"]["totalAssigned"] == 1


async def test_preview_lists_failed_slots(client, seed):
    family = make_family(make_pair(), title="Lions")
    stranger = make_student("male", region="Tigray", zone="Central", wereda="Axum", kebele="03")
    await seed(students=[stranger], families=[family])

    resp = await client.post(PREVIEW, json={"mode": "homogeneous", "targetBatch": BATCH})

    assert resp.status_code == 200
    [failed] = resp.json()["failedAssignments"]
    assert failed["familyTitle"] == "Lions"
    assert failed["reason"] == "No suitable students available matching criteria"


async def test_preview_validation_messages(client, seed):
    await seed(families=[make_family(make_pair())])

    missing = await client.post(PREVIEW, json={"mode": "homogeneous"})
    assert missing.status_code == 400
    assert missing.json()["code"] == "validation_error"
    assert missing.json()["message"] == "Mode and target batch are required"

    bad_mode = await client.post(PREVIEW, json={"mode": "mixed", "targetBatch": BATCH})
    assert bad_mode.status_code == 400
    assert bad_mode.json()["message"] == 'Mode must be either "homogeneous" or "heterogeneous"'

    empty_batch = await client.post(PREVIEW, json={"mode": "homogeneous", "targetBatch": "1999"})
    assert empty_batch.status_code == 400
    assert empty_batch.json()["message"] == "No students found in batch 1999"


async def test_preview_without_families(client):
    resp = await client.post(PREVIEW, json={"mode": "heterogeneous", "targetBatch": BATCH})

    assert resp.status_code == 400
    assert resp.json()["message"] == "No eligible families found (families with both parents)"


async def test_preview_then_execute_round_trip(client, seed):
    family = make_family(make_pair(), title="Lions")
    kids = [make_student("male", student_code="S-1"), make_student("female")]
    await seed(students=kids, families=[family])

    preview = await client.post(
        PREVIEW, json={"mode": "homogeneous", "targetBatch": BATCH, "maxChildrenPerFamily": 2}
    )
    proposals = preview.json()["assignments"]
    assert len(proposals) == 2

    # proposals are posted back as-is
    resp = await client.post(EXECUTE, json={"assignments": proposals})

    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Successfully assigned 2 children"
    assert {a["familyTitle"] for a in body["assignments"]} == {"Lions"}
    assert sorted(a["studentId"] for a in body["assignments"]) == ["N/A", "S-1"]
    assert all(a["addressMatch"] == "Matched kebele: 01" for a in body["assignments"])

    again = await client.post(EXECUTE, json={"assignments": proposals})
    assert again.status_code == 409
    assert again.json()["code"] == "student_already_in_family"


async def test_execute_error_statuses(client, seed):
    family = make_family(make_pair())
    son = make_student("male")
    await seed(students=[son], families=[family])
    item = {
        "familyId": str(family.id),
        "grandparentIndex": 0,
        "parentPairIndex": 0,
        "studentId": str(son.id),
        "relationship": "son",
        "birthOrder": 1,
    }

    empty = await client.post(EXECUTE, json={"assignments": []})
    assert empty.status_code == 400
    assert empty.json()["message"] == "No assignments to execute"

    no_family = await client.post(EXECUTE, json={"assignments": [{**item, "familyId": str(uuid4())}]})
    assert no_family.status_code == 404
    assert no_family.json()["code"] == "family_not_found"

    no_slot = await client.post(EXECUTE, json={"assignments": [{**item, "parentPairIndex": 5}]})
    assert no_slot.status_code == 404
    assert no_slot.json()["code"] == "family_slot_not_found"

    no_student = await client.post(EXECUTE, json={"assignments": [{**item, "studentId": str(uuid4())}]})
    assert no_student.status_code == 404
    assert no_student.json()["code"] == "student_not_found"

    malformed = await client.post(EXECUTE, json={"assignments": [{**item, "birthOrder": 0}]})
    assert malformed.status_code == 422
    assert malformed.json()["code"] == "invalid_request"
    assert malformed.json()["details"]["errors"]


async def test_error_body_echoes_request_id(client):
    resp = await client.post(
        PREVIEW, json={"mode": "homogeneous"}, headers={"X-Request-ID": "req-42"}
    )

    assert resp.status_code == 400
    assert resp.headers["X-Request-ID"] == "req-42"
    assert resp.json()["correlation_id"] == "req-42"


async def test_batches(client, seed):
    await seed(
        students=[
            make_student(batch="2025"),
            make_student(batch=BATCH),
            make_student(batch="2020", is_active=False),
        ]
    )

    resp = await client.get("/families/batches")

    assert resp.status_code == 200
    assert resp.json() == {"batches": [BATCH, "2025"]}


async def test_health_and_root(client):
    health = await client.get("/_health/db")
    assert health.status_code == 200
    assert health.json()["ok"] is True
    assert "X-Response-Time" in health.headers

    root = await client.get("/")
    assert root.status_code == 200
    assert root.json()["health"] == "/_health/db"
