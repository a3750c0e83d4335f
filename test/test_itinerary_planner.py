from agents.itinerary_planner_agent import ItineraryPlannerAgent
from models.itinerary import ItineraryDay, TripPlan
from models.preferences import TripPreferences


def prefs(duration, categories=("a", "b")):
    return TripPreferences(categories=list(categories), location="X", duration=duration, pace="low", budget="low")


def places(prefix, n):
    return [{"name": f"{prefix}{i}"} for i in range(n)]


def test_round_robin_selection():
    first, second = places("a", 3), places("b", 5)
    days = ItineraryPlannerAgent().run(prefs(6), [first, second])

    assert len(days) == 6
    assert [d.day for d in days] == [1, 2, 3, 4, 5, 6]
    assert days[4].places == [first[1], second[4]]
    for i, d in enumerate(days):
        assert d.places == [first[i % 3], second[i % 5]]


def test_empty_category_contributes_nothing():
    food = places("f", 2)
    days = ItineraryPlannerAgent().run(prefs(3), [[], food])
    assert [d.places for d in days] == [[food[0]], [food[1]], [food[0]]]


def test_zero_duration_is_empty():
    assert ItineraryPlannerAgent().run(prefs(0), [places("a", 2)]) == []


def test_day_never_has_more_places_than_categories():
    results = [places("a", 1), places("b", 4), []]
    days = ItineraryPlannerAgent().run(prefs(5, categories=("a", "b", "c")), results)
    assert len(days) == 5
    assert all(len(d.places) <= 3 for d in days)


def test_trip_plan_serialises_to_json_shape():
    plan = TripPlan(
        preferences=prefs(2, categories=("food",)),
        itinerary=[
            ItineraryDay(day=1, places=[{"name": "Le Bistro", "location": {"formatted_address": "1 Rue\n Haute"}}]),
            ItineraryDay(day=2),
        ],
    )
    assert plan.to_dict() == {
        "preferences": {"categories": ["food"], "location": "X", "duration": 2, "pace": "low", "budget": "low"},
        "itinerary": [
            {"day": 1, "places": [{"name": "Le Bistro", "location": {"formatted_address": "1 Rue\n Haute"}}]},
            {"day": 2, "places": []},
        ],
    }
