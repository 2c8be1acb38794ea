import os
from dataclasses import dataclass

from dotenv import load_dotenv

from figma2html.errors import ConfigError

DEFAULT_FILE_KEY = "n5yLH8Hbf7d6VFqxiAECcn"
DEFAULT_OUTPUT_DIR = "output"


@dataclass(frozen=True)
class Settings:
    token: str
    file_key: str = DEFAULT_FILE_KEY
    frame_name: str | None = None
    output_dir: str = DEFAULT_OUTPUT_DIR

    @classmethod
    def from_env(cls, dotenv_path=None, **overrides):
        """
        Build settings from the environment (a .env file is loaded first if present).
        Non-None keyword overrides win over environment values.
        """
        load_dotenv(dotenv_path)

        values = {
            "token": os.getenv("FIGMA_TOKEN"),
            "file_key": os.getenv("FIGMA_FILE_KEY") or DEFAULT_FILE_KEY,
            "frame_name": os.getenv("FRAME_NAME") or None,
            "output_dir": os.getenv("OUTPUT_DIR") or DEFAULT_OUTPUT_DIR,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})

        if not values["token"]:
            raise ConfigError("Set FIGMA_TOKEN env var (and optionally FIGMA_FILE_KEY).")
        return cls(**values)
