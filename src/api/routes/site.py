from typing import List, Optional

from fastapi import APIRouter, Depends, status

from config import ApplicationConfig
from libs.result import Error
from src.api.error import ClientError
from src.app.services.site_config import SiteConfig
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.site import ResolveTenantConfigUseCase, TenantCompanyConfig
from src.depends import get_site_config, get_unit_of_work
from src.domain.base import CamelModel
from src.domain.site_content import (
    AreaConfig,
    BusinessConfig,
    FAQConfig,
    FeatureFlags,
    FooterMenu,
    HeroGalleryItem,
    NavLink,
    NavMenuItem,
    ProjectConfig,
    ServiceConfig,
    ServiceLocation,
)

router = APIRouter(prefix="/site", tags=["Site"])


class ServicesResponse(CamelModel):
    services: List[ServiceConfig]
    featured: List[ServiceConfig]
    navigation: List[NavLink]
    has_solar_services: bool


class AreasResponse(CamelModel):
    areas: List[AreaConfig]
    names: List[str]
    locations: List[ServiceLocation]


class NavigationResponse(CamelModel):
    main_menu: List[NavMenuItem]
    footer_menu: FooterMenu
    features: FeatureFlags


class VisualAssetsResponse(CamelModel):
    hero_gallery: List[HeroGalleryItem]
    default_service_image: str
    default_area_image: str


def _not_found(kind: str, slug: str) -> ClientError:
    return ClientError(
        Error(f"{kind.upper()}_NOT_FOUND", f"{kind.capitalize()} not found: {slug}"),
        status_code=status.HTTP_404_NOT_FOUND,
    )


@router.get("/business", response_model=BusinessConfig, response_model_exclude_none=True)
async def get_business(site: SiteConfig = Depends(get_site_config)):
    return site.business


@router.get("/tenant-config", response_model=TenantCompanyConfig)
async def get_tenant_config(
    site: SiteConfig = Depends(get_site_config),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Company identity of the deployed tenant

    Stored tenant profile and branding override the static business config;
    isResolved is false when the tenant has no stored profile.
    """
    use_case = ResolveTenantConfigUseCase(uow, site)
    result = await use_case.execute(ApplicationConfig.TENANT_ID)
    return result.value


@router.get("/services", response_model=ServicesResponse, response_model_exclude_none=True)
async def list_services(site: SiteConfig = Depends(get_site_config)):
    return ServicesResponse(
        services=site.services,
        featured=site.featured_services(),
        navigation=site.service_navigation(),
        has_solar_services=site.has_solar_services(),
    )


@router.get("/services/{slug}", response_model=ServiceConfig, response_model_exclude_none=True)
async def get_service(slug: str, site: SiteConfig = Depends(get_site_config)):
    service = site.service_by_slug(slug)
    if service is None:
        raise _not_found("service", slug)
    return service


@router.get("/areas", response_model=AreasResponse, response_model_exclude_none=True)
async def list_areas(site: SiteConfig = Depends(get_site_config)):
    return AreasResponse(
        areas=site.areas, names=site.area_names(), locations=site.service_locations()
    )


@router.get("/areas/{slug}", response_model=AreaConfig, response_model_exclude_none=True)
async def get_area(slug: str, site: SiteConfig = Depends(get_site_config)):
    area = site.area_by_slug(slug)
    if area is None:
        raise _not_found("area", slug)
    return area


@router.get("/faqs", response_model=List[FAQConfig])
async def list_faqs(category: Optional[str] = None, site: SiteConfig = Depends(get_site_config)):
    if category:
        return site.faqs_by_category(category)
    return site.faqs


@router.get("/navigation", response_model=NavigationResponse, response_model_exclude_none=True)
async def get_navigation(site: SiteConfig = Depends(get_site_config)):
    return NavigationResponse(
        main_menu=site.main_menu(),
        footer_menu=site.footer_menu(),
        features=site.features(),
    )


@router.get("/visual-assets", response_model=VisualAssetsResponse, response_model_exclude_none=True)
async def get_visual_assets(site: SiteConfig = Depends(get_site_config)):
    images = site.default_images()
    return VisualAssetsResponse(
        hero_gallery=site.hero_gallery(),
        default_service_image=images["service"],
        default_area_image=images["area"],
    )


@router.get("/projects", response_model=List[ProjectConfig], response_model_exclude_none=True)
async def list_projects(
    category: str = "all",
    featured: bool = False,
    site: SiteConfig = Depends(get_site_config),
):
    if featured:
        return site.featured_projects()
    return site.projects_by_category(category)


@router.get("/projects/{slug}", response_model=ProjectConfig, response_model_exclude_none=True)
async def get_project(slug: str, site: SiteConfig = Depends(get_site_config)):
    project = site.project_by_slug(slug)
    if project is None:
        raise _not_found("project", slug)
    return project
