from __future__ import annotations


def _math_question(client, headers, text_fragment: str) -> dict:
    subjects = client.get("/subjects").json()
    math = next(s for s in subjects if s["name"] == "Mathematics")
    topics = client.get(f"/subjects/{math['id']}/topics").json()
    for topic in topics:
        questions = client.get(f"/topics/{topic['id']}/questions", params={"limit": 50}, headers=headers).json()
        for question in questions:
            if text_fragment in question["question_text"]:
                return question
    raise AssertionError(f"seeded question not found: {text_fragment}")


def _profile(client, headers) -> dict:
    resp = client.get("/student/profile", headers=headers)
    assert resp.status_code == 200
    return resp.json()


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json().get("status") == "ok"
    assert resp.headers.get("x-request-id")


def test_catalog_is_seeded(client, auth_headers):
    subjects = client.get("/subjects").json()
    assert {"Mathematics", "Science", "English Language Arts", "Social Studies"} <= {s["name"] for s in subjects}

    question = _math_question(client, auth_headers, "2x + 5 = 13")
    assert question["options"] == ["x = 3", "x = 4", "x = 5", "x = 6"]
    assert question["points"] == 10

    sat = client.get("/exams/sat/questions", headers=auth_headers)
    assert sat.status_code == 200
    assert sat.json() and all(q["exam_type"] == "SAT" for q in sat.json())


def test_correct_answer_awards_points_and_records_attempt(client, auth_headers):
    question = _math_question(client, auth_headers, "2x + 5 = 13")

    resp = client.post(
        f"/questions/{question['id']}/answer",
        json={"studentAnswer": " X = 4 ", "timeSpent": 30},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["isCorrect"] is True
    assert body["pointsEarned"] == 10
    assert body["correctAnswer"] == "x = 4"
    assert body["feedback"]["type"] == "success"
    assert _profile(client, auth_headers)["total_points"] == 10

    wrong = client.post(
        f"/questions/{question['id']}/answer",
        json={"studentAnswer": "x = 6"},
        headers=auth_headers,
    ).json()
    assert wrong["isCorrect"] is False
    assert wrong["pointsEarned"] == 0
    assert wrong["feedback"]["type"] == "helpful"
    assert _profile(client, auth_headers)["total_points"] == 10


def test_answer_unknown_question_is_404(client, auth_headers):
    resp = client.post("/questions/999999/answer", json={"studentAnswer": "4"}, headers=auth_headers)
    assert resp.status_code == 404
    body = resp.json()
    assert body["success"] is False
    assert body["error"]["code"] == "not_found"


def test_session_lifecycle(client, auth_headers):
    start = client.post("/sessions", json={"sessionType": "practice"}, headers=auth_headers)
    assert start.status_code == 200
    session_id = start.json()["sessionId"]

    done = client.put(
        f"/sessions/{session_id}",
        json={"questionsAnswered": 5, "correctAnswers": 4, "pointsEarned": 40, "sessionDuration": 600},
        headers=auth_headers,
    )
    assert done.status_code == 200
    assert done.json() == {"success": True}

    again = client.put(
        f"/sessions/{session_id}",
        json={"questionsAnswered": 9, "correctAnswers": 9, "pointsEarned": 90},
        headers=auth_headers,
    )
    assert again.status_code == 400
    assert again.json()["error"]["message"] == "Session already completed"

    missing = client.put(
        "/sessions/999999",
        json={"questionsAnswered": 1, "correctAnswers": 1, "pointsEarned": 10},
        headers=auth_headers,
    )
    assert missing.status_code == 404


def test_session_for_unknown_topic_is_404(client, auth_headers):
    resp = client.post("/sessions", json={"sessionType": "practice", "topicId": 999999}, headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json()["error"]["message"] == "Topic not found"


def test_homework_help_is_limited_to_three_per_day(client, auth_headers):
    remaining = []
    for i in range(3):
        resp = client.post(
            "/homework-help",
            data={"questionText": f"How do I solve problem {i}?", "subject": "Mathematics"},
            headers=auth_headers,
        )
        assert resp.status_code == 200, resp.text
        body = resp.json()
        assert body["pointsEarned"] == 5
        assert body["steps"] and body["relatedConcepts"]
        remaining.append(body["usageRemaining"])
    assert remaining == [2, 1, 0]

    blocked = client.post(
        "/homework-help",
        data={"questionText": "One more?", "subject": "Mathematics"},
        headers=auth_headers,
    )
    assert blocked.status_code == 429
    body = blocked.json()
    assert body["success"] is False
    assert (body["limit"], body["used"], body["resetTime"]) == (3, 3, "midnight")

    assert _profile(client, auth_headers)["total_points"] == 15
    history = client.get("/homework-help/history", headers=auth_headers).json()
    assert len(history) == 3


def test_homework_help_requires_text_and_subject(client, auth_headers):
    resp = client.post("/homework-help", data={"subject": "Science"}, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "validation_error"


def test_homework_rating(client, auth_headers):
    created = client.post(
        "/homework-help",
        data={"questionText": "What is a cell?", "subject": "Science"},
        headers=auth_headers,
    ).json()
    session_id = created["sessionId"]

    assert client.post(f"/homework-help/{session_id}/rate", json={"rating": 6}, headers=auth_headers).status_code == 400
    assert client.post(f"/homework-help/{session_id}/rate", json={"rating": 0}, headers=auth_headers).status_code == 400
    assert client.post("/homework-help/999999/rate", json={"rating": 4}, headers=auth_headers).status_code == 404

    ok = client.post(f"/homework-help/{session_id}/rate", json={"rating": 5}, headers=auth_headers)
    assert ok.status_code == 200
    history = client.get("/homework-help/history", headers=auth_headers).json()
    assert history[0]["student_rating"] == 5


def test_diagnostic_flow_flags_weak_topics(client, auth_headers):
    start = client.post("/diagnostic-test", json={"subject": "Mathematics"}, headers=auth_headers)
    assert start.status_code == 200
    started = start.json()
    assert len(started["questions"]) == 3
    assert started["estimatedTime"] == 6

    submit = client.post(
        f"/diagnostic-test/{started['testId']}/submit",
        json={
            "responses": [
                {"questionId": 1, "answer": "x = 4", "isCorrect": True, "topic": "Algebra Basics"},
                {"questionId": 2, "answer": "y = 11", "isCorrect": False, "topic": "Linear Equations"},
            ],
            "testDuration": 120,
        },
        headers=auth_headers,
    )
    assert submit.status_code == 200
    result = submit.json()
    assert result["abilityEstimate"] == 0.5
    assert result["strengths"] == ["Algebra Basics"]
    assert result["weaknesses"] == ["Linear Equations"]
    assert result["recommendations"] == ["Linear Equations"]

    graph = client.get("/knowledge-graph/Mathematics", headers=auth_headers).json()
    by_topic = {node["topic"]: node for node in graph}
    assert by_topic["Linear Equations"]["mastery"]["level"] == 0.3
    assert by_topic["Linear Equations"]["mastery"]["practiceCount"] == 1
    assert by_topic["Algebra Basics"]["mastery"]["level"] == 0.0


def test_diagnostic_submit_unknown_test_is_404(client, auth_headers):
    resp = client.post(
        "/diagnostic-test/999999/submit",
        json={"responses": [{"isCorrect": True, "topic": "Algebra Basics"}]},
        headers=auth_headers,
    )
    assert resp.status_code == 404


def test_learning_path_is_created_once(client, auth_headers):
    first = client.get("/learning-path/Science", headers=auth_headers).json()
    second = client.get("/learning-path/Science", headers=auth_headers).json()
    assert first == second
    assert first["pathName"] == "Science Learning Path"
    assert len(first["pathStructure"]) == 4
    assert first["estimatedCompletionTime"] == 180


def test_purchase_without_enough_points(client, auth_headers):
    items = client.get("/pet/items").json()
    apple = next(item for item in items if item["name"] == "Apple")
    resp = client.post("/pet/purchase", json={"itemId": apple["id"]}, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["error"]["message"] == "Not enough points"
    assert _profile(client, auth_headers)["total_points"] == 0


def test_purchase_after_earning_points(client, auth_headers):
    question = _math_question(client, auth_headers, "2x + 5 = 13")
    client.post(f"/questions/{question['id']}/answer", json={"studentAnswer": "x = 4"}, headers=auth_headers)

    items = client.get("/pet/items").json()
    ball = next(item for item in items if item["name"] == "Ball")
    crown = next(item for item in items if item["name"] == "Crown")

    bought = client.post("/pet/purchase", json={"itemId": ball["id"]}, headers=auth_headers)
    assert bought.status_code == 200
    assert bought.json() == {"success": True, "pointsRemaining": 0}

    locked = client.post("/pet/purchase", json={"itemId": crown["id"]}, headers=auth_headers)
    assert locked.status_code == 400
    assert locked.json()["error"]["message"] == "Item not unlocked yet"


def test_learning_goals(client, auth_headers):
    created = client.post(
        "/learning-goals",
        json={"goalType": "exam_score", "targetValue": "1400", "targetDate": "2027-05-01"},
        headers=auth_headers,
    )
    assert created.status_code == 200
    goals = client.get("/learning-goals", headers=auth_headers).json()
    assert [g["id"] for g in goals] == [created.json()["goalId"]]
    assert goals[0]["current_value"] == "0"
