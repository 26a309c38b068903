"""
Tests for meal plan routes.

Verifies:
- meals without a date or type are dropped
- any non-empty meal type is kept
- meals come back ordered by date
- end date before start date is rejected
- plans are owner-checked
"""

from test_fixtures import auth


def _create(client, token="token-alice", user_id="u1", **body):
    payload = {"userId": user_id, "startDate": "2025-03-03", **body}
    return client.post("/meal-plan/create", headers=auth(token), json=payload)


def test_create_plan_and_read_meals_in_date_order(client, store):
    r = _create(
        client,
        endDate="2025-03-09",
        meals=[
            {"date": "2025-03-05", "type": "dinner", "recipeName": "Chili"},
            {"date": "2025-03-03", "type": "breakfast", "recipeName": "Oats"},
            {"date": "2025-03-04"},
            {"type": "lunch"},
            {"date": "2025-03-04", "type": "brunch", "recipeName": "Frittata"},
            {"date": "2025-03-06", "type": "   "},
            {"date": "not a date", "type": "lunch"},
        ],
    )
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Meal plan created"
    plan_id = body["mealPlanId"]
    assert store.count("meal_plan_meals") == 3

    r = client.get(f"/meal-plan/{plan_id}", headers=auth())
    assert r.status_code == 200
    body = r.json()
    assert body["plan"]["name"] == "Meal Plan"
    assert body["plan"]["startDate"] == "2025-03-03"
    assert body["plan"]["endDate"] == "2025-03-09"
    assert [m["recipeName"] for m in body["meals"]] == ["Oats", "Frittata", "Chili"]
    assert [m["mealType"] for m in body["meals"]] == ["breakfast", "brunch", "dinner"]


def test_end_before_start_is_400(client, store):
    r = _create(client, endDate="2025-03-01")
    assert r.status_code == 400
    assert store.count("meal_plans") == 0


def test_start_date_required(client):
    r = client.post("/meal-plan/create", headers=auth(), json={"userId": "u1"})
    assert r.status_code == 400


def test_list_plans_and_owner_check(client):
    _create(client, name="Week 10")
    r = _create(client, token="token-bob", user_id="u2", name="Bob's week")
    bobs_plan = r.json()["mealPlanId"]

    r = client.get("/meal-plans/u1", headers=auth())
    assert [p["name"] for p in r.json()["plans"]] == ["Week 10"]

    assert client.get(f"/meal-plan/{bobs_plan}", headers=auth()).status_code == 403
    assert client.get("/meal-plan/nope", headers=auth()).status_code == 404
