from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List, Optional

#-------------------------------------------------------
# Request bodies
#
# Fields are untyped and optional: values are passed to the prompt exactly
# as received, and a missing field is rendered as "undefined".
#-------------------------------------------------------

class RequestBody(BaseModel):
    model_config = ConfigDict(extra="allow")


class TripPreferences(RequestBody):
    """Input for a full day-by-day itinerary"""
    destination: Any = Field(None, description="City or region to visit")
    startDate: Any = Field(None, description="Trip start date (YYYY-MM-DD)")
    endDate: Any = Field(None, description="Trip end date (YYYY-MM-DD)")
    budget: Any = Field(None, description="Total budget in INR")
    interests: Any = Field(None, description="Ordered list of interests")
    accommodationType: Any = Field(None, description="e.g. Hotel, Hostel, Airbnb")
    transportationType: Any = Field(None, description="e.g. Public transport, Car rental")


class FlightSearchRequest(RequestBody):
    origin: Any = Field(None, description="Departure city or airport")
    destination: Any = Field(None, description="Arrival city or airport")
    date: Any = Field(None, description="Travel date (YYYY-MM-DD)")


class AccommodationSearchRequest(RequestBody):
    destination: Any = Field(None, description="City to stay in")
    checkIn: Any = Field(None, description="Check-in date (YYYY-MM-DD)")
    checkOut: Any = Field(None, description="Check-out date (YYYY-MM-DD)")
    preferences: Any = Field(None, description="Free-text lodging preferences")


class ActivitySearchRequest(RequestBody):
    destination: Any = Field(None, description="City to explore")
    interests: Any = Field(None, description="Ordered list of interests")

#-------------------------------------------------------
# Response shapes
#
# These mirror the example JSON embedded in each prompt. They document the
# API and are never used to validate what the model returns.
#-------------------------------------------------------

class ItineraryActivity(BaseModel):
    time: Optional[str] = None
    activity: Optional[str] = None
    description: Optional[str] = None
    estimatedCost: Optional[str] = None
    location: Optional[str] = None
    travelTime: Optional[str] = None


class Meal(BaseModel):
    type: Optional[str] = None
    recommendation: Optional[str] = None
    cuisine: Optional[str] = None
    estimatedCost: Optional[str] = None
    location: Optional[str] = None


class Lodging(BaseModel):
    name: Optional[str] = None
    type: Optional[str] = None
    estimatedCost: Optional[str] = None
    location: Optional[str] = None


class DayPlan(BaseModel):
    day: Optional[int] = None
    date: Optional[str] = None
    activities: List[ItineraryActivity] = []
    meals: List[Meal] = []
    accommodation: Optional[Lodging] = None


class Itinerary(BaseModel):
    """Model output for /api/generate-itinerary. Monetary values are free-form strings like "500 INR"."""
    destination: Optional[str] = None
    duration: Optional[str] = None
    totalEstimatedCost: Optional[str] = None
    itinerary: List[DayPlan] = []
    additionalTips: List[str] = []


class Flight(BaseModel):
    airline: Optional[str] = None
    flightNumber: Optional[str] = None
    departureTime: Optional[str] = None
    arrivalTime: Optional[str] = None
    duration: Optional[str] = None
    price: Optional[str] = None
    stops: Optional[int] = None
    departureAirport: Optional[str] = None
    arrivalAirport: Optional[str] = None


class AccommodationOption(BaseModel):
    name: Optional[str] = None
    type: Optional[str] = None
    pricePerNight: Optional[str] = None
    totalPrice: Optional[str] = None
    location: Optional[str] = None
    rating: Optional[str] = None
    amenities: List[str] = []
    description: Optional[str] = None


class ActivityOption(BaseModel):
    name: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    estimatedCost: Optional[str] = None
    duration: Optional[str] = None
    location: Optional[str] = None
    bestTimeToVisit: Optional[str] = None


class ErrorResponse(BaseModel):
    """Body returned with HTTP 500 for any failure"""
    error: str
