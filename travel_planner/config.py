import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

DEFAULT_PORT = 3000
DEFAULT_MODEL = "gemini-1.5-flash"
PUBLIC_DIR = Path(__file__).parent / "public"


class Settings(BaseModel):
    """Process-wide configuration, built once at startup and passed down."""
    gemini_api_key: str = ""
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    model_name: str = DEFAULT_MODEL
    static_dir: Path = PUBLIC_DIR

    @classmethod
    def from_env(cls, env_file=None) -> "Settings":
        """
        Load settings from a .env file and the process environment.

        Only GEMINI_API_KEY and PORT are read from the environment.

        Raises:
            ValueError: If PORT is set but is not an integer
        """
        load_dotenv(dotenv_path=env_file)

        port = os.getenv("PORT")
        if port:
            try:
                port = int(port)
            except ValueError:
                raise ValueError(f"PORT must be an integer, got {port!r}")
        else:
            port = DEFAULT_PORT

        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY", "").strip(),
            port=port,
        )
