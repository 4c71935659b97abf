"""Localized messages."""

import json
from importlib import resources
from typing import Optional

from rich.markup import escape

from branchsweep.logging_config import get_logger

SUPPORTED_LANGUAGES = ("en", "ja")
DEFAULT_LANGUAGE = "en"

logger = get_logger(__name__)


def resolve_language(flag: Optional[str], env_lang: Optional[str]) -> str:
    """Pick the message language.

    The ``--lang`` flag wins when given; otherwise ``LANG`` selects Japanese
    when it mentions ``ja``. Anything unsupported falls back to English.
    """
    if flag:
        selected = flag
    elif env_lang and "ja" in env_lang:
        selected = "ja"
    else:
        selected = DEFAULT_LANGUAGE
    return selected if selected in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE


def load_messages(lang: str) -> dict[str, str]:
    """Load the message bundle shipped for a language."""
    bundle = resources.files("branchsweep") / "locales" / f"{lang}.json"
    return json.loads(bundle.read_text(encoding="utf-8"))


class Localizer:
    """Message lookup for one language, with English as fallback."""

    def __init__(self, lang: str, messages: dict[str, str], fallback: Optional[dict[str, str]] = None) -> None:
        self.lang = lang
        self.messages = messages
        self.fallback = fallback or {}

    @classmethod
    def for_language(cls, lang: str) -> "Localizer":
        lang = lang if lang in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE
        fallback = load_messages(DEFAULT_LANGUAGE)
        messages = fallback if lang == DEFAULT_LANGUAGE else load_messages(lang)
        return cls(lang, messages, fallback)

    def _template(self, message_id: str) -> str:
        if message_id in self.messages:
            return self.messages[message_id]
        if message_id in self.fallback:
            return self.fallback[message_id]
        logger.debug("No message for %s", message_id)
        return message_id

    def text(self, message_id: str, **data: object) -> str:
        """Plain message, for places that do not render rich markup."""
        return self._template(message_id).format(**data)

    def markup(self, message_id: str, **data: object) -> str:
        """Message for a rich console; substituted values are escaped."""
        return self._template(message_id).format(**{key: escape(str(value)) for key, value in data.items()})
