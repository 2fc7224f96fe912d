"""
Site Content Models

Shapes of the static JSON configuration synced from the CMS
(business, services, areas, FAQs, navigation, visual assets, projects).
"""

from typing import List, Optional, Union

from pydantic import Field

from src.domain.base import CamelModel


class Address(CamelModel):
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    full: Optional[str] = None


class OwnerInfo(CamelModel):
    name: Optional[str] = None
    bio: Optional[str] = None
    photo: Optional[str] = None


class BrandColors(CamelModel):
    primary: str = ""
    secondary: str = ""
    accent: str = ""


class SocialLinks(CamelModel):
    facebook: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = None
    yelp: Optional[str] = None
    youtube: Optional[str] = None
    tiktok: Optional[str] = None
    google: Optional[str] = None


class SeoConfig(CamelModel):
    site_url: str = ""
    default_title: str = ""
    title_template: str = ""
    description: str = ""
    keywords: List[str] = Field(default_factory=list)


class HeroConfig(CamelModel):
    headline: str
    headline_highlight: str = ""
    subheadline: str = ""
    cta_primary: Optional[str] = None
    cta_secondary: Optional[str] = None
    image: Optional[str] = None
    video: Optional[str] = None


class TrustIndicator(CamelModel):
    icon: str
    text: str


class Statistic(CamelModel):
    icon: str
    number: str
    label: str
    description: str = ""


class CertificationLogo(CamelModel):
    src: str
    alt: str


class Ratings(CamelModel):
    average: str
    count: str
    platform: Optional[str] = None


class BusinessConfig(CamelModel):
    name: str
    tagline: str = ""
    description: str = ""
    phone: str = ""
    phone_raw: str = ""
    email: str = ""
    address: Address = Field(default_factory=Address)
    owner: Optional[Union[str, OwnerInfo]] = None
    logo: str = ""
    logo_dark: Optional[str] = None
    favicon: Optional[str] = None
    colors: BrandColors = Field(default_factory=BrandColors)
    hours: str = ""
    emergency_service: Optional[bool] = None
    years_in_business: Optional[int] = None
    founded_year: Optional[int] = None
    license_number: Optional[str] = None
    employees_count: Optional[str] = None
    certifications: List[str] = Field(default_factory=list)
    unique_selling_points: List[str] = Field(default_factory=list)
    social: SocialLinks = Field(default_factory=SocialLinks)
    seo: SeoConfig = Field(default_factory=SeoConfig)
    hero: Optional[HeroConfig] = None
    trust_indicators: Optional[List[TrustIndicator]] = None
    statistics: Optional[List[Statistic]] = None
    certification_logos: Optional[List[CertificationLogo]] = None
    ratings: Optional[Ratings] = None


class ServiceBenefit(CamelModel):
    icon: str
    title: str
    description: str


class QuestionAnswer(CamelModel):
    question: str
    answer: str


class ProcessStep(CamelModel):
    title: str
    description: str


class TrustSection(CamelModel):
    title: str
    points: List[str] = Field(default_factory=list)


class ServiceConfig(CamelModel):
    id: str = ""
    name: str
    slug: str = ""
    short_description: str = ""
    description: str = ""
    icon: str = ""
    hero_image: Optional[str] = None
    hero_title: Optional[str] = None
    hero_highlight: Optional[str] = None
    hero_subheadline: Optional[str] = None
    intro_text: Optional[str] = None
    benefits: List[ServiceBenefit] = Field(default_factory=list)
    process_steps: Optional[List[ProcessStep]] = None
    cta_text: Optional[str] = None
    cta_subtext: Optional[str] = None
    trust_section: Optional[TrustSection] = None
    faqs: List[QuestionAnswer] = Field(default_factory=list)
    seo_title: Optional[str] = None
    seo_description: Optional[str] = None
    seo_keywords: Optional[List[str]] = None
    is_featured: Optional[bool] = None


class AreaTestimonial(CamelModel):
    name: str
    text: str
    rating: int
    project: str


class WhyChooseUsItem(CamelModel):
    title: str
    description: str


class Coordinates(CamelModel):
    lat: float
    lng: float


class AreaConfig(CamelModel):
    slug: str = ""
    name: str
    full_name: str = ""
    description: str = ""
    population: str = ""
    hero_image: Optional[str] = None
    hero_headline: Optional[str] = None
    hero_subheadline: Optional[str] = None
    intro_text: Optional[str] = None
    why_choose_us: Optional[List[WhyChooseUsItem]] = None
    local_expertise: Optional[str] = None
    neighborhood_highlights: Optional[List[str]] = None
    cta_text: Optional[str] = None
    cta_subtext: Optional[str] = None
    seo_title: Optional[str] = None
    seo_description: Optional[str] = None
    neighborhoods: List[str] = Field(default_factory=list)
    services: List[str] = Field(default_factory=list)
    testimonial: Optional[AreaTestimonial] = None
    faqs: List[QuestionAnswer] = Field(default_factory=list)
    coordinates: Optional[Coordinates] = None


class FAQConfig(CamelModel):
    id: str
    question: str
    answer: str
    category: str


class LinkItem(CamelModel):
    label: str
    href: str
    description: Optional[str] = None


class NavMenuItem(CamelModel):
    label: str
    href: str
    visible: bool = True
    children: Optional[List[LinkItem]] = None


class FooterMenu(CamelModel):
    company: List[LinkItem] = Field(default_factory=list)
    services: List[LinkItem] = Field(default_factory=list)
    areas: List[LinkItem] = Field(default_factory=list)


class NavServiceEntry(CamelModel):
    slug: str
    name: str
    is_featured: Optional[bool] = None


class NavAreaEntry(CamelModel):
    slug: str
    city: str
    state: str
    is_primary: Optional[bool] = None


class FeatureFlags(CamelModel):
    store_enabled: bool = False


class NavigationConfig(CamelModel):
    main_menu: List[NavMenuItem] = Field(default_factory=list)
    footer_menu: FooterMenu = Field(default_factory=FooterMenu)
    services_list: List[NavServiceEntry] = Field(default_factory=list)
    areas_list: List[NavAreaEntry] = Field(default_factory=list)
    features: Optional[FeatureFlags] = None


class HeroGalleryItem(CamelModel):
    url: str
    caption: Optional[str] = None
    location: Optional[str] = None
    project_type: Optional[str] = None


class VisualAssetsConfig(CamelModel):
    hero_gallery: List[HeroGalleryItem] = Field(default_factory=list)
    default_service_image: str = ""
    default_area_image: str = ""


class ProjectConfig(CamelModel):
    id: Optional[str] = None
    title: str
    slug: str
    category: str = ""
    project_type: str = ""
    location: str = ""
    city: Optional[str] = None
    state: Optional[str] = None
    neighborhood: Optional[str] = None
    completed_date: str = ""
    duration_days: Optional[int] = None
    cost_range: Optional[str] = None
    photos: Optional[int] = None
    image_url: Optional[str] = None
    before_image_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    short_description: Optional[str] = None
    story: Optional[str] = None
    challenges_overcome: Optional[str] = None
    benefits: Optional[List[str]] = None
    featured: Optional[bool] = None
    service_slug: Optional[str] = None


class NavLink(CamelModel):
    label: str
    path: str


class ServiceLocation(CamelModel):
    """Service area entry shown in the area list"""

    id: str
    name: str
    slug: str
    description: str
