"""
Settings for the Wikipedia Data application.

Settings live in a JSON file owned by the user. Values present in the file
override the defaults below; everything else keeps its default.
"""

import copy
import json
import logging
import os
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List

from wikipedia_data.models import WikipediaTemplate

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "config.json"
LANGUAGE_ENV_VAR = "WIKIPEDIA_DATA_LANGUAGE"

DEFAULT_TEMPLATES: List[WikipediaTemplate] = [
    WikipediaTemplate(
        key=1,
        name="Wikipedia template #1",
        description="Template inserted by 'Apply Template #1 for Active Note Title'.",
        value="| {{thumbnailTemplate}} | {{summary}} |\n|-|-|\n| | wikipedia:: [{{title}}]({{url}}) |\n",
    ),
    WikipediaTemplate(
        key=2,
        name="Wikipedia template #2",
        description="Template inserted by 'Apply Template #2 for Active Note Title'.",
        value="> [!summary]- Wikipedia Synopsis\n{{introText}}\n",
    ),
    WikipediaTemplate(
        key=3,
        name="Wikipedia template #3",
        description="Template inserted by 'Apply Template #3 for Active Note Title'.",
        value=(
            "| {{thumbnailTemplate}} | {{summary}} |\n|-|-|\n"
            "| | wikipedia:: [{{title}}]({{url}}) |\n"
            "> [!summary]- Wikipedia Synopsis\n{{introText}}\n"
        ),
    ),
]


@dataclass
class Settings:
    """User-editable options read at the start of every invocation."""

    language: str = "en"
    bold_search_term: bool = True
    templates: List[WikipediaTemplate] = field(
        default_factory=lambda: copy.deepcopy(DEFAULT_TEMPLATES)
    )
    thumbnail_template: str = "![img \\|150]({{thumbnailUrl}})"
    use_paragraph_template: bool = True
    paragraph_template: str = "> {{paragraphText}}\n>\n"
    timeout: float = 10

    def get_language(self) -> str:
        return self.language or "en"

    def template(self, number: int) -> str:
        """Returns the text of template slot ``number`` (1-based)."""
        if number < 1 or number > len(self.templates):
            raise ValueError(
                f"Template number must be between 1 and {len(self.templates)}, got {number}"
            )
        return self.templates[number - 1]["value"]


def default_config_path() -> str:
    """Config file next to this module."""
    base_dir = os.path.dirname(os.path.abspath(__file__))
    return os.path.join(base_dir, DEFAULT_CONFIG_FILENAME)


def settings_from_dict(data: Dict[str, Any]) -> Settings:
    """Overlays known keys from ``data`` on the default settings."""
    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        logger.warning("Ignoring unknown settings: %s", ", ".join(unknown))
    return Settings(**{k: v for k, v in data.items() if k in known})


def load_settings(config_path: str = "") -> Settings:
    """Loads settings from a JSON file, falling back to defaults."""
    config_path = config_path or default_config_path()
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            settings = settings_from_dict(json.load(f))
    except FileNotFoundError:
        logger.warning("Config file not found at %s. Using default settings.", config_path)
        settings = Settings()

    language = os.environ.get(LANGUAGE_ENV_VAR)
    if language:
        settings.language = language
    return settings


def save_settings(settings: Settings, config_path: str = "") -> None:
    """Writes every setting to the JSON config file."""
    config_path = config_path or default_config_path()
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(asdict(settings), f, indent=2, ensure_ascii=False)
    logger.info("Saved settings to %s", config_path)
