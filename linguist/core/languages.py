"""
Languages

Static language table plus the source-language variant used in prompts.

A source language is either a named language or AutoDetect, which lets the
remote model work out the language on its own. The stored form of AutoDetect
is the sentinel "auto".
"""

from dataclasses import dataclass

AUTO_CODE = "auto"

# Values accepted from callers and older history entries as "detect for me"
_AUTO_ALIASES = {"auto", "detect language", "detect"}


@dataclass(frozen=True)
class Language:
    """A supported language."""

    code: str
    name: str
    flag: str = ""

    @property
    def label(self) -> str:
        return f"{self.flag} {self.name}".strip()


LANGUAGES: tuple[Language, ...] = (
    Language("en", "English", "🇺🇸"),
    Language("ne", "Nepali", "🇳🇵"),
    Language("si", "Sinhala", "🇱🇰"),
    Language("es", "Spanish", "🇪🇸"),
    Language("fr", "French", "🇫🇷"),
    Language("de", "German", "🇩🇪"),
    Language("zh", "Chinese", "🇨🇳"),
    Language("ja", "Japanese", "🇯🇵"),
)

_BY_CODE = {lang.code: lang for lang in LANGUAGES}


def get_language(code: str) -> Language | None:
    """Look up a language by code (case-insensitive)."""
    if not code:
        return None
    return _BY_CODE.get(code.lower())


def language_name(code: str) -> str:
    """Display name for a code, falling back to the raw code."""
    lang = get_language(code)
    return lang.name if lang else code


@dataclass(frozen=True)
class SourceLanguage:
    """
    Source language of a translation request.

    Use SourceLanguage.named("ne") or SourceLanguage.auto(). `code` is None
    for AutoDetect.
    """

    code: str | None = None

    @classmethod
    def named(cls, code: str) -> "SourceLanguage":
        if not code:
            raise ValueError("Language code must not be empty")
        return cls(code=code)

    @classmethod
    def auto(cls) -> "SourceLanguage":
        return cls(code=None)

    @classmethod
    def parse(cls, value: "str | SourceLanguage | None") -> "SourceLanguage":
        """Build from a code, an auto alias, or pass an instance through."""
        if isinstance(value, SourceLanguage):
            return value
        if value is None or value.strip().lower() in _AUTO_ALIASES:
            return cls.auto()
        return cls.named(value.strip())

    @property
    def is_auto(self) -> bool:
        return self.code is None

    @property
    def name(self) -> str | None:
        """Display name for prompts; None for AutoDetect."""
        if self.code is None:
            return None
        return language_name(self.code)

    @property
    def storage_code(self) -> str:
        """Value written to ActivityRecord.source_lang."""
        return AUTO_CODE if self.code is None else self.code

    def __str__(self) -> str:
        return "Auto" if self.is_auto else self.name
