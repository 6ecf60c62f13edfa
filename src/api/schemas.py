"""Pydantic schemas for API request/response validation.

This module defines the request bodies, response models and the schema of
the optional content file loaded at startup.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.core.carousel_logic import CarouselTransition, Direction, TransitionSource
from src.core.content import Project, SectionHeadings
from src.core.portfolio import PortfolioSnapshot
from src.core.theme import Theme


class SelectProjectRequest(BaseModel):
    """Schema for jumping the carousel to a project."""

    index: int = Field(..., description="Zero-based project index")

    model_config = ConfigDict(json_schema_extra={"example": {"index": 2}})


class ScrollSample(BaseModel):
    """Schema for one scroll position reported by the client."""

    scroll_top: float = Field(..., ge=0)
    scroll_height: float = Field(..., ge=0)
    viewport_height: float = Field(..., ge=0)
    elapsed: float | None = Field(
        None,
        ge=0,
        le=1.0,
        description="Seconds since the previous sample; measured by the server when omitted",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "scroll_top": 1200,
                "scroll_height": 5000,
                "viewport_height": 900,
                "elapsed": 0.016,
            }
        }
    )


class StateResponse(BaseModel):
    """Schema for the state snapshot handed to the view layer."""

    active_index: int
    direction: Direction
    is_dark: bool

    @classmethod
    def from_snapshot(cls, snapshot: PortfolioSnapshot) -> "StateResponse":
        return cls(
            active_index=snapshot.active_index,
            direction=snapshot.direction,
            is_dark=snapshot.is_dark,
        )


class ThemeResponse(BaseModel):
    theme: Theme
    is_dark: bool
    toggle_label: str


class ProjectResponse(BaseModel):
    slug: str
    name: str
    image: str
    href: str
    description: str
    technologies: list[str]

    @classmethod
    def from_project(cls, project: Project) -> "ProjectResponse":
        return cls(
            slug=project.slug,
            name=project.name,
            image=project.image,
            href=project.href,
            description=project.description,
            technologies=list(project.technologies),
        )


class CarouselResponse(BaseModel):
    """Schema for the carousel's current position."""

    active_index: int
    direction: Direction
    total: int
    running: bool
    interval_seconds: float
    project: ProjectResponse


class TransitionResponse(BaseModel):
    """Schema for the result of a carousel operation."""

    previous_index: int
    active_index: int
    direction: Direction
    source: TransitionSource
    changed: bool

    @classmethod
    def from_transition(cls, transition: CarouselTransition) -> "TransitionResponse":
        return cls(
            previous_index=transition.previous_index,
            active_index=transition.active_index,
            direction=transition.direction,
            source=transition.source,
            changed=transition.changed,
        )


class ProgressResponse(BaseModel):
    raw: float
    smoothed: float


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    error: str
    detail: str | None = None
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "Invalid argument",
                "detail": "Carousel index 7 out of range [0, 3)",
                "code": "INVALID_INPUT",
            }
        }
    )


# Content file


class ProjectFile(BaseModel):
    slug: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    image: str
    href: str
    description: str
    technologies: list[str] = Field(default_factory=list)


class ContactFile(BaseModel):
    href: str
    label: str
    description: str
    icon: str


class ExperienceFile(BaseModel):
    title: str
    description: str


_DEFAULT_HEADINGS = SectionHeadings()


class HeadingsFile(BaseModel):
    about: str = _DEFAULT_HEADINGS.about
    experience: str = _DEFAULT_HEADINGS.experience
    projects: str = _DEFAULT_HEADINGS.projects
    technologies: str = _DEFAULT_HEADINGS.technologies
    project_link: str = _DEFAULT_HEADINGS.project_link
    contact: str = _DEFAULT_HEADINGS.contact


class ContentFile(BaseModel):
    """Schema of the JSON file named by PORTFOLIO_CONTENT_PATH."""

    owner: str
    role: str
    about: str
    github_url: str
    experience: ExperienceFile
    services: list[str] = Field(default_factory=list)
    projects: list[ProjectFile] = Field(..., min_length=1)
    contacts: list[ContactFile] = Field(default_factory=list)
    contact_intro: str = ""
    contact_highlight: str = ""
    contact_outro: str = ""
    headings: HeadingsFile = Field(default_factory=HeadingsFile)

    @model_validator(mode="after")
    def check_unique_slugs(self) -> "ContentFile":
        seen: set[str] = set()
        for project in self.projects:
            if project.slug in seen:
                raise ValueError(f"Duplicate project slug: {project.slug!r}")
            seen.add(project.slug)
        return self
