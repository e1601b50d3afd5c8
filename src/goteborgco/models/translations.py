"""Ids of the same entity in the other supported language."""

from __future__ import annotations

from goteborgco.models.base import Entity
from goteborgco.models.filters import Lang


class Translations(Entity):
    sv: int | None = None
    en: int | None = None

    def get_translation(self, lang: Lang | str) -> int | None:
        return getattr(self, Lang(lang).value)

    def has_translation(self, lang: Lang | str) -> bool:
        return self.get_translation(lang) is not None

    def get_available_translations(self) -> list[tuple[Lang, int]]:
        """Return ``(lang, id)`` pairs for each translation present, sv first."""
        available: list[tuple[Lang, int]] = []
        if self.sv is not None:
            available.append((Lang.SV, self.sv))
        if self.en is not None:
            available.append((Lang.EN, self.en))
        return available
