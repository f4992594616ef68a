from typing import Any

from travel_planner.nodes.common import UNDEFINED, render_list, render_value
from travel_planner.pipeline import Capability
from travel_planner.utils.json_extractor import ARRAY

ACTIVITIES_PROMPT = '''
    Provide activity recommendations in {destination} based on these interests: {interests}.
    Include details like activity names, descriptions, estimated costs, and durations.
    Format as JSON array with the following structure:
    [
      {{
        "name": "Activity name",
        "category": "Category (e.g., Museum, Outdoor, Adventure)",
        "description": "Brief description",
        "estimatedCost": "XXX INR",
        "duration": "X hours",
        "location": "Location within {destination}",
        "bestTimeToVisit": "Morning/Afternoon/Evening"
      }},
      // more activities
    ]
    '''


def build_activities_prompt(destination: Any = UNDEFINED, interests: Any = UNDEFINED) -> str:
    return ACTIVITIES_PROMPT.format(
        destination=render_value(destination),
        interests=render_list(interests),
    )


CAPABILITY = Capability(
    name="activities",
    shape=ARRAY,
    build_prompt=build_activities_prompt,
    fields=("destination", "interests"),
    error_label="Error getting activity recommendations",
)
