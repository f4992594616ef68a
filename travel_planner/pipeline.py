from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Tuple

from travel_planner.config import Settings
from travel_planner.utils.json_extractor import extract_json
from travel_planner.utils.logger import logger


@dataclass(frozen=True)
class Capability:
    """One prompt-and-parse route: what to ask the model and what shape to expect back."""
    name: str
    shape: str
    build_prompt: Callable[..., str]
    fields: Tuple[str, ...]
    error_label: str

    def prompt_for(self, payload: Mapping[str, Any]) -> str:
        """
        Build the prompt from the request body.

        Fields absent from the payload are left to the builder's defaults,
        which render them as "undefined".
        """
        kwargs: Dict[str, Any] = {
            field: payload[field] for field in self.fields if field in payload
        }
        return self.build_prompt(**kwargs)


async def run_capability(
    capability: Capability,
    payload: Mapping[str, Any],
    client,
    settings: Settings,
) -> Any:
    """
    Run a single request through prompt building, completion and JSON extraction.

    Args:
        capability: The route's prompt builder and expected shape
        payload: Request body fields, as received
        client: Completion client exposing `complete(model_id, prompt)`
        settings: Process settings (supplies the model name)

    Returns:
        The parsed JSON object or array from the model response

    Raises:
        Any error from the completion client or the extractor, unchanged
    """
    try:
        prompt = capability.prompt_for(payload)
        text = await client.complete(settings.model_name, prompt)
        logger.info(f"Received raw response for {capability.name}: {text[:100]}...")
        return extract_json(text, capability.shape)
    except Exception as e:
        logger.error(f"{capability.error_label}: {str(e)}")
        raise
