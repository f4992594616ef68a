import pytest

from conftest import StubCompletionClient
from travel_planner.nodes import FLIGHTS, ITINERARY
from travel_planner.pipeline import run_capability
from travel_planner.utils.json_extractor import ExtractionError


@pytest.mark.asyncio
async def test_run_capability_uses_configured_model(settings):
    client = StubCompletionClient(reply='```json\n[{"airline": "Air India"}]\n```')
    result = await run_capability(FLIGHTS, {"origin": "Delhi", "destination": "Goa", "date": "2024-12-20"}, client, settings)
    assert result == [{"airline": "Air India"}]
    model_id, prompt = client.calls[0]
    assert model_id == settings.model_name
    assert "from Delhi to Goa on 2024-12-20" in prompt


@pytest.mark.asyncio
async def test_run_capability_reraises_extraction_error(settings):
    client = StubCompletionClient(reply="No idea, sorry.")
    with pytest.raises(ExtractionError, match="Could not parse JSON from the response"):
        await run_capability(ITINERARY, {}, client, settings)


@pytest.mark.asyncio
async def test_run_capability_reraises_upstream_error(settings):
    error = ConnectionError("upstream unreachable")
    client = StubCompletionClient(error=error)
    with pytest.raises(ConnectionError) as exc_info:
        await run_capability(ITINERARY, {"destination": "Rome"}, client, settings)
    assert exc_info.value is error
    assert len(client.calls) == 1
