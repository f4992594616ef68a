from typing import Any

from travel_planner.nodes.common import UNDEFINED, render_list, render_value
from travel_planner.pipeline import Capability
from travel_planner.utils.json_extractor import OBJECT

ITINERARY_PROMPT = '''
    Create a detailed travel itinerary based on the following preferences:
    
    Destination: {destination}
    Start Date: {start_date}
    End Date: {end_date}
    Budget: {budget} INR
    Interests: {interests}
    Accommodation Preference: {accommodation_type}
    Transportation Preference: {transportation_type}
    
    Please structure the itinerary day by day including:
    1. Morning, afternoon, and evening activities
    2. Recommended restaurants for meals
    3. Estimated costs for each activity and meal
    4. Travel time between locations
    5. Accommodation recommendations
    6. Local tips and cultural insights
    
    Format the response as a structured JSON with the following format:
    {{
      "destination": "City Name, Country",
      "duration": "X days",
      "totalEstimatedCost": "XXXX INR",
      "itinerary": [
        {{
          "day": 1,
          "date": "YYYY-MM-DD",
          "activities": [
            {{
              "time": "Morning",
              "activity": "Activity name",
              "description": "Brief description",
              "estimatedCost": "XX INR",
              "location": "Location name",
              "travelTime": "X minutes from previous location"
            }},
            // ... more activities
          ],
          "meals": [
            {{
              "type": "Breakfast/Lunch/Dinner",
              "recommendation": "Restaurant name",
              "cuisine": "Cuisine type",
              "estimatedCost": "XX INR",
              "location": "Location"
            }},
            // ... more meals
          ],
          "accommodation": {{
            "name": "Accommodation name",
            "type": "Hotel/Hostel/Airbnb",
            "estimatedCost": "XX INR",
            "location": "Location"
          }}
        }},
        // ... more days
      ],
      "additionalTips": [
        "Tip 1",
        "Tip 2",
        // ... more tips
      ]
    }}
    '''


def build_itinerary_prompt(
    destination: Any = UNDEFINED,
    startDate: Any = UNDEFINED,
    endDate: Any = UNDEFINED,
    budget: Any = UNDEFINED,
    interests: Any = UNDEFINED,
    accommodationType: Any = UNDEFINED,
    transportationType: Any = UNDEFINED,
) -> str:
    """Compose the day-by-day itinerary prompt from the trip preferences."""
    return ITINERARY_PROMPT.format(
        destination=render_value(destination),
        start_date=render_value(startDate),
        end_date=render_value(endDate),
        budget=render_value(budget),
        interests=render_list(interests),
        accommodation_type=render_value(accommodationType),
        transportation_type=render_value(transportationType),
    )


CAPABILITY = Capability(
    name="itinerary",
    shape=OBJECT,
    build_prompt=build_itinerary_prompt,
    fields=(
        "destination",
        "startDate",
        "endDate",
        "budget",
        "interests",
        "accommodationType",
        "transportationType",
    ),
    error_label="Error generating itinerary",
)
