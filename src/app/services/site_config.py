"""
Site Configuration Loader

Reads the static JSON content files once and exposes typed accessors.
Services and areas are deduplicated by slug (or slugified name).
"""

import json
import logging
import os
import re
from typing import Any, Dict, List, Optional, TypeVar

from pydantic import TypeAdapter

from src.domain.site_content import (
    AreaConfig,
    BusinessConfig,
    FAQConfig,
    FeatureFlags,
    FooterMenu,
    HeroConfig,
    HeroGalleryItem,
    NavigationConfig,
    NavLink,
    NavMenuItem,
    ProjectConfig,
    Ratings,
    ServiceConfig,
    ServiceLocation,
    Statistic,
    TrustIndicator,
    VisualAssetsConfig,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

SOLAR_KEYWORDS = ("solar", "roofing", "roof", "pool", "energy")


class SiteConfigError(Exception):
    """A content file is missing or does not match its schema"""


def slugify(name: str) -> str:
    return re.sub(r"\s+", "-", name.lower())


def _dedupe_by_slug(entries: List[T]) -> List[T]:
    seen = set()
    unique = []
    for entry in entries:
        key = entry.slug or slugify(entry.name)
        if key in seen:
            continue
        seen.add(key)
        unique.append(entry)
    return unique


class SiteConfig:
    """Typed, read-only view over the site content JSON files"""

    FILES = {
        "business": "business.json",
        "services": "services.json",
        "areas": "areas.json",
        "faqs": "faqs.json",
        "navigation": "navigation.json",
        "visual_assets": "visual-assets.json",
        "projects": "projects.json",
    }

    def __init__(
        self,
        business: BusinessConfig,
        services: List[ServiceConfig],
        areas: List[AreaConfig],
        faqs: List[FAQConfig],
        navigation: NavigationConfig,
        visual_assets: VisualAssetsConfig,
        projects: List[ProjectConfig],
    ):
        self._business = business
        self._raw_services = services
        self._raw_areas = areas
        self._faqs = faqs
        self._navigation = navigation
        self._visual_assets = visual_assets
        self._projects = projects

        self._services = _dedupe_by_slug(services)
        self._areas = _dedupe_by_slug(areas)

    @classmethod
    def from_directory(cls, directory: str) -> "SiteConfig":
        def read(key: str, default: Any) -> Any:
            path = os.path.join(directory, cls.FILES[key])
            if not os.path.exists(path):
                logger.warning(f"Site config file missing, using defaults: {path}")
                return default
            try:
                with open(path, "r", encoding="utf-8") as r_file:
                    return json.load(r_file)
            except json.JSONDecodeError as exc:
                raise SiteConfigError(f"Invalid JSON in {path}: {exc}") from exc

        business_data = read("business", None)
        if business_data is None:
            raise SiteConfigError(f"business.json is required in {directory}")

        projects_data: Dict[str, Any] = read("projects", {"projects": []})

        try:
            return cls(
                business=BusinessConfig.model_validate(business_data),
                services=TypeAdapter(List[ServiceConfig]).validate_python(read("services", [])),
                areas=TypeAdapter(List[AreaConfig]).validate_python(read("areas", [])),
                faqs=TypeAdapter(List[FAQConfig]).validate_python(read("faqs", [])),
                navigation=NavigationConfig.model_validate(read("navigation", {})),
                visual_assets=VisualAssetsConfig.model_validate(read("visual_assets", {})),
                projects=TypeAdapter(List[ProjectConfig]).validate_python(
                    projects_data.get("projects") or []
                ),
            )
        except ValueError as exc:
            raise SiteConfigError(f"Site config in {directory} does not match schema: {exc}") from exc

    # Business

    @property
    def business(self) -> BusinessConfig:
        return self._business

    @property
    def hero(self) -> Optional[HeroConfig]:
        return self._business.hero

    @property
    def trust_indicators(self) -> List[TrustIndicator]:
        return self._business.trust_indicators or []

    @property
    def statistics(self) -> List[Statistic]:
        return self._business.statistics or []

    @property
    def ratings(self) -> Optional[Ratings]:
        return self._business.ratings

    # Services

    @property
    def services(self) -> List[ServiceConfig]:
        return list(self._services)

    def service_by_slug(self, slug: str) -> Optional[ServiceConfig]:
        return next((s for s in self._services if s.slug == slug), None)

    def featured_services(self) -> List[ServiceConfig]:
        return [s for s in self._services if s.is_featured]

    def service_navigation(self) -> List[NavLink]:
        return [NavLink(label=s.name, path=f"/services/{s.slug}") for s in self._services[:4]]

    def has_solar_services(self) -> bool:
        """Solar options only make sense for roofing, solar or pool businesses."""
        for service in self._services:
            text = f"{service.name} {service.slug} {service.short_description}".lower()
            if any(keyword in text for keyword in SOLAR_KEYWORDS):
                return True
        return False

    # Areas

    @property
    def areas(self) -> List[AreaConfig]:
        return list(self._areas)

    def area_by_slug(self, slug: str) -> Optional[AreaConfig]:
        return next((a for a in self._raw_areas if a.slug == slug), None)

    def area_names(self) -> List[str]:
        return [a.name for a in self._raw_areas]

    def service_locations(self) -> List[ServiceLocation]:
        return [
            ServiceLocation(
                id=str(index + 1),
                name=area.name,
                slug=area.slug,
                description=area.description or f"Professional services in {area.name}",
            )
            for index, area in enumerate(self._areas)
        ]

    # FAQs

    @property
    def faqs(self) -> List[FAQConfig]:
        return list(self._faqs)

    def faqs_by_category(self, category: str) -> List[FAQConfig]:
        return [f for f in self._faqs if f.category == category]

    def general_faqs(self) -> List[FAQConfig]:
        return self.faqs_by_category("general")

    # Navigation

    @property
    def navigation(self) -> NavigationConfig:
        return self._navigation

    def main_menu(self) -> List[NavMenuItem]:
        return [item for item in self._navigation.main_menu if item.visible]

    def footer_menu(self) -> FooterMenu:
        return self._navigation.footer_menu

    def features(self) -> FeatureFlags:
        return self._navigation.features or FeatureFlags(store_enabled=False)

    # Visual assets

    @property
    def visual_assets(self) -> VisualAssetsConfig:
        return self._visual_assets

    def hero_gallery(self) -> List[HeroGalleryItem]:
        return self._visual_assets.hero_gallery or []

    def default_images(self) -> Dict[str, str]:
        return {
            "service": self._visual_assets.default_service_image or "",
            "area": self._visual_assets.default_area_image or "",
        }

    # Projects

    @property
    def projects(self) -> List[ProjectConfig]:
        return list(self._projects)

    def featured_projects(self) -> List[ProjectConfig]:
        return [p for p in self._projects if p.featured]

    def project_by_slug(self, slug: str) -> Optional[ProjectConfig]:
        return next((p for p in self._projects if p.slug == slug), None)

    def projects_by_category(self, category: str) -> List[ProjectConfig]:
        if category == "all":
            return list(self._projects)
        return [p for p in self._projects if (p.category or "").lower() == category.lower()]
