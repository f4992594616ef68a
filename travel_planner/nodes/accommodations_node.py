from typing import Any

from travel_planner.nodes.common import UNDEFINED, render_value
from travel_planner.pipeline import Capability
from travel_planner.utils.json_extractor import ARRAY

ACCOMMODATIONS_PROMPT = '''
    Provide accommodation recommendations in {destination} for check-in on {check_in} and check-out on {check_out}.
    Preferences: {preferences}
    Include details like hotel names, prices, amenities, and location.
    Format as JSON array with the following structure:
    [
      {{
        "name": "Accommodation name",
        "type": "Hotel/Hostel/Apartment",
        "pricePerNight": "XXX USD",
        "totalPrice": "XXX USD",
        "location": "Area in {destination}",
        "rating": "X.X/5",
        "amenities": ["amenity1", "amenity2", ...],
        "description": "Brief description"
      }},
      // more accommodations
    ]
    '''


def build_accommodations_prompt(
    destination: Any = UNDEFINED,
    checkIn: Any = UNDEFINED,
    checkOut: Any = UNDEFINED,
    preferences: Any = UNDEFINED,
) -> str:
    """Compose the lodging prompt; the destination also appears in the example JSON."""
    return ACCOMMODATIONS_PROMPT.format(
        destination=render_value(destination),
        check_in=render_value(checkIn),
        check_out=render_value(checkOut),
        preferences=render_value(preferences),
    )


CAPABILITY = Capability(
    name="accommodations",
    shape=ARRAY,
    build_prompt=build_accommodations_prompt,
    fields=("destination", "checkIn", "checkOut", "preferences"),
    error_label="Error getting accommodation recommendations",
)
