from typing import Any

from travel_planner.nodes.common import UNDEFINED, render_value
from travel_planner.pipeline import Capability
from travel_planner.utils.json_extractor import ARRAY

FLIGHTS_PROMPT = '''
    Provide flight recommendations from {origin} to {destination} on {date}.
    Include flight details like estimated prices, airlines, departure and arrival times.
    Format as JSON array with the following structure:
    [
      {{
        "airline": "Airline name",
        "flightNumber": "XX123",
        "departureTime": "HH:MM",
        "arrivalTime": "HH:MM",
        "duration": "Xh Ym",
        "price": "XXX USD",
        "stops": 0,
        "departureAirport": "XXX",
        "arrivalAirport": "YYY"
      }},
      // more flights
    ]
    '''


def build_flights_prompt(origin: Any = UNDEFINED, destination: Any = UNDEFINED, date: Any = UNDEFINED) -> str:
    return FLIGHTS_PROMPT.format(
        origin=render_value(origin),
        destination=render_value(destination),
        date=render_value(date),
    )


CAPABILITY = Capability(
    name="flights",
    shape=ARRAY,
    build_prompt=build_flights_prompt,
    fields=("origin", "destination", "date"),
    error_label="Error getting flight recommendations",
)
