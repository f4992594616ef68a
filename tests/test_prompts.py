from travel_planner.nodes import ACCOMMODATIONS, ACTIVITIES, FLIGHTS, ITINERARY
from travel_planner.nodes.accommodations_node import build_accommodations_prompt
from travel_planner.nodes.activities_node import build_activities_prompt
from travel_planner.nodes.common import UNDEFINED, render_list, render_value
from travel_planner.nodes.flights_node import build_flights_prompt
from travel_planner.nodes.itinerary_node import build_itinerary_prompt


def test_itinerary_prompt_interpolates_preferences():
    prompt = build_itinerary_prompt(
        destination="Kyoto",
        startDate="2024-04-01",
        endDate="2024-04-05",
        budget=150000,
        interests=["temples", "food", "gardens"],
        accommodationType="Ryokan",
        transportationType="Train",
    )
    assert prompt.startswith("\n    Create a detailed travel itinerary based on the following preferences:")
    assert "Destination: Kyoto" in prompt
    assert "Start Date: 2024-04-01" in prompt
    assert "End Date: 2024-04-05" in prompt
    assert "Budget: 150000 INR" in prompt
    assert "Interests: temples, food, gardens" in prompt
    assert "Accommodation Preference: Ryokan" in prompt
    assert "Transportation Preference: Train" in prompt
    assert '"additionalTips": [' in prompt
    assert "// ... more days" in prompt


def test_itinerary_prompt_missing_fields_render_undefined():
    prompt = build_itinerary_prompt(destination="Paris")
    assert "Interests: undefined" in prompt
    assert "Budget: undefined INR" in prompt
    assert "Start Date: undefined" in prompt


def test_flights_prompt():
    prompt = build_flights_prompt("Delhi", "Mumbai", "2024-05-01")
    assert "Provide flight recommendations from Delhi to Mumbai on 2024-05-01." in prompt
    assert '"flightNumber": "XX123"' in prompt
    assert "// more flights" in prompt


def test_accommodations_prompt_repeats_destination_in_example():
    prompt = build_accommodations_prompt("Lisbon", "2024-06-10", "2024-06-14", "near the old town")
    assert "Provide accommodation recommendations in Lisbon for check-in on 2024-06-10 and check-out on 2024-06-14." in prompt
    assert "Preferences: near the old town" in prompt
    assert '"location": "Area in Lisbon"' in prompt
    assert '"amenities": ["amenity1", "amenity2", ...]' in prompt


def test_activities_prompt():
    prompt = build_activities_prompt("Cape Town", ["hiking", "wine"])
    assert "Provide activity recommendations in Cape Town based on these interests: hiking, wine." in prompt
    assert '"location": "Location within Cape Town"' in prompt


def test_render_value_spelling():
    assert render_value(UNDEFINED) == "undefined"
    assert render_value(None) == "null"
    assert render_value(True) == "true"
    assert render_value(2000.0) == "2000"
    assert render_value(99.5) == "99.5"
    assert render_value(["a", "b"]) == "a,b"
    assert render_value({"a": 1}) == "[object Object]"


def test_render_list():
    assert render_list(["beaches", "nightlife"]) == "beaches, nightlife"
    assert render_list([]) == ""
    assert render_list(UNDEFINED) == "undefined"
    assert render_list("museums") == "museums"


def test_capability_shapes():
    assert ITINERARY.shape == "object"
    assert FLIGHTS.shape == "array"
    assert ACCOMMODATIONS.shape == "array"
    assert ACTIVITIES.shape == "array"


def test_capability_prompt_only_reads_declared_fields():
    prompt = FLIGHTS.prompt_for({"origin": "Pune", "date": "2024-07-07", "cabin": "business"})
    assert "from Pune to undefined on 2024-07-07" in prompt
    assert "business" not in prompt


def test_capability_keeps_explicit_null():
    prompt = ACTIVITIES.prompt_for({"destination": None, "interests": ["art"]})
    assert "recommendations in null based on these interests: art." in prompt
