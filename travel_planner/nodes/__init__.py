from travel_planner.nodes.itinerary_node import CAPABILITY as ITINERARY
from travel_planner.nodes.flights_node import CAPABILITY as FLIGHTS
from travel_planner.nodes.accommodations_node import CAPABILITY as ACCOMMODATIONS
from travel_planner.nodes.activities_node import CAPABILITY as ACTIVITIES

__all__ = [
    "ITINERARY",
    "FLIGHTS",
    "ACCOMMODATIONS",
    "ACTIVITIES",
]
