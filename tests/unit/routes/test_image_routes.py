from tests.test_data import (
    CARDIO_FALLBACK,
    CARDIO_SECOND_IMAGE,
    CORE_FALLBACK,
    DEFAULT_IMAGE,
)

# ----------------- GET /images/categories -----------------


def test_get_categories_lists_catalog_in_order(client):
    response = client.get("/images/categories")
    body = response.json()

    assert response.status_code == 200
    assert [item["category"] for item in body][0] == "chest"
    assert [item["category"] for item in body][-1] == "full_body"
    assert len(body) == 9


def test_get_categories_includes_pool_size_and_fallback(client):
    body = client.get("/images/categories").json()
    cardio = next(item for item in body if item["category"] == "cardio")

    assert cardio["pool_size"] == 3
    assert cardio["fallback_image"] == CARDIO_FALLBACK
    assert "burpee" in cardio["keywords"]


# ----------------- GET /images/categories/{label} -----------------


def test_get_category_images_known_label(client):
    response = client.get("/images/categories/Cardio")

    assert response.status_code == 200
    assert response.json()[0] == CARDIO_FALLBACK
    assert len(response.json()) == 3


def test_get_category_images_unknown_label_returns_default(client):
    response = client.get("/images/categories/zumba")

    assert response.status_code == 200
    assert response.json() == [DEFAULT_IMAGE]


# ----------------- POST /images/workout -----------------


def test_recommend_workout_image_empty_body_returns_default(client, route_rng):
    response = client.post("/images/workout", json={})

    assert response.status_code == 200
    assert response.json() == {"image": DEFAULT_IMAGE}
    assert route_rng.calls == []


def test_recommend_workout_image_keyword_match_uses_pool(client, route_rng):
    response = client.post(
        "/images/workout",
        json={"exercises": [{"name": "Burpees", "muscle_group": "cardio"}]},
    )

    assert response.status_code == 200
    assert response.json() == {"image": CARDIO_SECOND_IMAGE}
    assert len(route_rng.calls) == 1


def test_recommend_workout_image_from_category_and_goal(client, route_rng):
    response = client.post(
        "/images/workout",
        json={"category": "strength", "fitness_goals": ["mobility"]},
    )

    assert response.json() == {"image": CORE_FALLBACK}


def test_recommend_workout_image_rejects_malformed_body(client):
    response = client.post("/images/workout", json={"exercises": "lots"})
    assert response.status_code == 422


# ----------------- GET /images/exercise -----------------


def test_recommend_exercise_image_alias_uses_fallback(client, route_rng):
    response = client.get(
        "/images/exercise", params={"muscle_group": "abs", "name": "Hollow Hold"}
    )

    assert response.json() == {"image": CORE_FALLBACK}
    assert route_rng.calls == []


def test_recommend_exercise_image_without_params_returns_default(client, route_rng):
    assert client.get("/images/exercise").json() == {"image": DEFAULT_IMAGE}


# ----------------- GET /images/category -----------------


def test_recommend_category_image(client, route_rng):
    response = client.get("/images/category", params={"label": "running"})
    assert response.json() == {"image": CARDIO_FALLBACK}


def test_recommend_workout_image_accepts_null_lists(client, route_rng):
    response = client.post(
        "/images/workout",
        json={"exercises": None, "fitness_goals": None, "category": "yoga"},
    )

    assert response.status_code == 200
    assert response.json() == {"image": CORE_FALLBACK}


def test_recommend_workout_image_accepts_camel_case_body(client, route_rng):
    response = client.post(
        "/images/workout",
        json={
            "exercises": [{"name": "Burpees", "muscleGroup": "cardio"}],
            "fitnessGoals": ["endurance"],
        },
    )

    assert response.status_code == 200
    assert response.json() == {"image": CARDIO_SECOND_IMAGE}
