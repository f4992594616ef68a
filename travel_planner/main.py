from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from typing import Any, List, Mapping, Optional

from travel_planner import __version__
from travel_planner.config import Settings
from travel_planner.nodes import ACCOMMODATIONS, ACTIVITIES, FLIGHTS, ITINERARY
from travel_planner.pipeline import Capability, run_capability
from travel_planner.schemas.trip_schema import (
    AccommodationOption,
    AccommodationSearchRequest,
    ActivityOption,
    ActivitySearchRequest,
    ErrorResponse,
    Flight,
    FlightSearchRequest,
    Itinerary,
    TripPreferences,
)
from travel_planner.utils.gemini_client import CompletionClient, GeminiClient
from travel_planner.utils.logger import logger


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_completion_client(request: Request) -> CompletionClient:
    return request.app.state.completion_client


def _body_fields(body) -> Mapping[str, Any]:
    """Only the keys the client actually sent; absent ones stay absent."""
    if body is None:
        return {}
    return body.model_dump(exclude_unset=True)


async def _respond(capability: Capability, body, client, settings: Settings):
    try:
        result = await run_capability(capability, _body_fields(body), client, settings)
        return JSONResponse(content=result)
    except Exception as e:
        return JSONResponse(status_code=500, content={"error": str(e)})


def create_app(settings: Settings, client: Optional[CompletionClient] = None) -> FastAPI:
    """
    Build the API application.

    Args:
        settings: Process settings, shared by reference with the completion client
        client: Completion client to use; defaults to a GeminiClient

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="AI Travel Planner",
        description="Relays structured trip requests to Gemini and returns the JSON it produces",
        version=__version__,
    )

    app.state.settings = settings
    app.state.completion_client = client if client is not None else GeminiClient(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def body_error_handler(request: Request, exc: RequestValidationError):
        # Bodies that are not JSON objects never reach the pipeline
        message = "; ".join(error["msg"] for error in exc.errors())
        logger.error(f"Rejected request body for {request.url.path}: {message}")
        return JSONResponse(status_code=422, content={"error": message})

    error_response = {500: {"model": ErrorResponse}}

    @app.post("/api/generate-itinerary", responses={200: {"model": Itinerary}, **error_response})
    async def generate_itinerary(
        preferences: Optional[TripPreferences] = None,
        completion_client: CompletionClient = Depends(get_completion_client),
        settings: Settings = Depends(get_settings),
    ):
        """Generate a day-by-day itinerary from trip preferences."""
        logger.info("Generating itinerary")
        return await _respond(ITINERARY, preferences, completion_client, settings)

    @app.post("/api/flights", responses={200: {"model": List[Flight]}, **error_response})
    async def get_flights(
        query: Optional[FlightSearchRequest] = None,
        completion_client: CompletionClient = Depends(get_completion_client),
        settings: Settings = Depends(get_settings),
    ):
        """Flight recommendations between two places on a date."""
        logger.info("Getting flight recommendations")
        return await _respond(FLIGHTS, query, completion_client, settings)

    @app.post("/api/accommodations", responses={200: {"model": List[AccommodationOption]}, **error_response})
    async def get_accommodations(
        query: Optional[AccommodationSearchRequest] = None,
        completion_client: CompletionClient = Depends(get_completion_client),
        settings: Settings = Depends(get_settings),
    ):
        """Accommodation recommendations for a stay."""
        logger.info("Getting accommodation recommendations")
        return await _respond(ACCOMMODATIONS, query, completion_client, settings)

    @app.post("/api/activities", responses={200: {"model": List[ActivityOption]}, **error_response})
    async def get_activities(
        query: Optional[ActivitySearchRequest] = None,
        completion_client: CompletionClient = Depends(get_completion_client),
        settings: Settings = Depends(get_settings),
    ):
        """Activity recommendations matching a list of interests."""
        logger.info("Getting activity recommendations")
        return await _respond(ACTIVITIES, query, completion_client, settings)

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    @app.get("/", include_in_schema=False)
    async def root(settings: Settings = Depends(get_settings)):
        return FileResponse(settings.static_dir / "index.html")

    # Remaining paths fall through to the bundled static assets
    app.mount("/", StaticFiles(directory=settings.static_dir), name="static")

    return app
