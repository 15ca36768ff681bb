"""Settings Repository - site settings, hero carousel and static pages."""
from datetime import datetime, timezone
from typing import Any, Dict, List

from pydantic import ValidationError

from storefront.errors import (
    ERROR_INVALID_PAGE_DATA,
    ERROR_INVALID_SETTINGS_DATA,
    ERROR_INVALID_SLIDES,
    ERROR_PAGE_NOT_FOUND,
    NotFoundError,
    ValidationFailed,
)
from storefront.models import Footer, HeroSlide, Logo, PageContent, SiteSettings, SocialLinks


def _section(model, value: Any) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ValidationFailed(ERROR_INVALID_SETTINGS_DATA)
    return model.normalize_keys(value)


class SettingsRepository:
    """Holds the single SiteSettings aggregate.

    Partial updates merge section by section:
    - logo: shallow merge
    - footer: shallow merge, socialLinks merged one level deeper
    - heroCarousel: replaced wholesale
    - pages: merged per page key
    """

    def __init__(self, settings: SiteSettings) -> None:
        self._settings = settings

    def get(self) -> SiteSettings:
        return self._settings

    def update(self, data: Dict[str, Any]) -> SiteSettings:
        data = _section(SiteSettings, data)
        current = self._settings.to_json()

        if data.get("logo"):
            current["logo"] = {**current["logo"], **_section(Logo, data["logo"])}

        if data.get("footer"):
            footer_update = _section(Footer, data["footer"])
            social = _section(SocialLinks, footer_update.get("socialLinks") or {})
            current["footer"] = {
                **current["footer"],
                **footer_update,
                "socialLinks": {**current["footer"]["socialLinks"], **social},
            }

        if data.get("heroCarousel") is not None:
            if not isinstance(data["heroCarousel"], list):
                raise ValidationFailed(ERROR_INVALID_SLIDES)
            current["heroCarousel"] = list(data["heroCarousel"])

        if data.get("pages"):
            if not isinstance(data["pages"], dict):
                raise ValidationFailed(ERROR_INVALID_SETTINGS_DATA)
            current["pages"] = {**current["pages"], **data["pages"]}

        try:
            self._settings = SiteSettings.model_validate(current)
        except ValidationError as e:
            raise ValidationFailed.from_pydantic(ERROR_INVALID_SETTINGS_DATA, e) from e
        return self._settings

    def get_hero_slides(self) -> List[HeroSlide]:
        return list(self._settings.hero_carousel)

    def replace_hero_slides(self, slides: Any) -> List[HeroSlide]:
        if not isinstance(slides, list):
            raise ValidationFailed(ERROR_INVALID_SLIDES)
        return self.update({"heroCarousel": slides}).hero_carousel

    def get_page(self, page: str) -> PageContent:
        content = self._settings.pages.get(page)
        if content is None:
            raise NotFoundError(ERROR_PAGE_NOT_FOUND)
        return content

    def update_page(self, page: str, data: Any) -> PageContent:
        """Merge ``data`` onto an existing page and stamp ``lastUpdated``."""
        existing = self.get_page(page)
        if not isinstance(data, dict):
            raise ValidationFailed(ERROR_INVALID_PAGE_DATA)

        merged = {
            **existing.to_json(),
            **PageContent.normalize_keys(data),
            "lastUpdated": datetime.now(timezone.utc).isoformat(),
        }
        try:
            updated = PageContent.model_validate(merged)
        except ValidationError as e:
            raise ValidationFailed.from_pydantic(ERROR_INVALID_PAGE_DATA, e) from e

        return self.update({"pages": {page: updated.to_json()}}).pages[page]
