"""Pure render functions for each page section.

Every section is a total function of the theme (plus the content it shows)
returning a frozen view descriptor. Theme-dependent colors come from one
``Palette`` per theme, so no section branches on dark/light itself. Color
values are design tokens; turning them into pixels is the view layer's job.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

from src.core.carousel_logic import CarouselState, Direction
from src.core.content import PortfolioContent, Project, SectionHeadings
from src.core.theme import Theme

ACCENT_GRADIENT = ("green-400", "blue-500")
INDICATOR_ACTIVE = "green-400"


@dataclass(frozen=True)
class Palette:
    page_background: str
    page_text: str
    hero_background: str
    section_background: str
    body_text: str
    muted_text: str
    experience_card: tuple[str, str]
    project_card: str
    project_title: str
    project_description: str
    technologies_heading: str
    tag_background: str
    tag_text: str
    indicator_inactive: str
    contact_intro: str
    contact_highlight: str
    contact_card: tuple[str, str]
    contact_label: str
    contact_description: str


DARK_PALETTE = Palette(
    page_background="black",
    page_text="green-200",
    hero_background="black",
    section_background="black",
    body_text="white",
    muted_text="green-200",
    experience_card=("green-900", "blue-900"),
    project_card="gray-800",
    project_title="green-400",
    project_description="gray-300",
    technologies_heading="blue-400",
    tag_background="gray-700",
    tag_text="green-300",
    indicator_inactive="gray-600",
    contact_intro="green-300",
    contact_highlight="green-400",
    contact_card=("gray-800", "gray-900"),
    contact_label="green-400",
    contact_description="gray-300",
)

LIGHT_PALETTE = Palette(
    page_background="gray-100",
    page_text="gray-900",
    hero_background="white",
    section_background="gray-100",
    body_text="gray-800",
    muted_text="gray-600",
    experience_card=("green-100", "blue-100"),
    project_card="white",
    project_title="green-600",
    project_description="gray-600",
    technologies_heading="blue-600",
    tag_background="gray-200",
    tag_text="green-700",
    indicator_inactive="gray-300",
    contact_intro="gray-700",
    contact_highlight="green-600",
    contact_card=("white", "gray-100"),
    contact_label="green-600",
    contact_description="gray-600",
)

_PALETTES = {Theme.DARK: DARK_PALETTE, Theme.LIGHT: LIGHT_PALETTE}


def palette_for(theme: Theme) -> Palette:
    return _PALETTES[theme]


@dataclass(frozen=True)
class ShellView:
    theme: Theme
    background: str
    text: str


@dataclass(frozen=True)
class ThemeToggleView:
    label: str
    gradient: tuple[str, str] = ACCENT_GRADIENT


@dataclass(frozen=True)
class ProgressBarView:
    scale_x: float
    gradient: tuple[str, str] = ACCENT_GRADIENT


@dataclass(frozen=True)
class HeroView:
    title: str
    subtitle: str
    background: str
    subtitle_color: str
    title_gradient: tuple[str, str] = ACCENT_GRADIENT


@dataclass(frozen=True)
class AboutView:
    heading: str
    body: str
    github_url: str
    background: str
    body_color: str


@dataclass(frozen=True)
class ExperienceCardView:
    title: str
    description: str
    gradient: tuple[str, str]
    title_color: str
    description_color: str


@dataclass(frozen=True)
class ExperienceView:
    heading: str
    card: ExperienceCardView
    services: tuple[str, ...]
    service_color: str
    background: str


@dataclass(frozen=True)
class SlideAnimation:
    """Enter/exit offsets for the carousel card.

    Forward: the new card enters from the right and the old one leaves to
    the left. Backward mirrors both.
    """

    direction: Direction
    enter_offset: str
    exit_offset: str
    stiffness: float = 300.0
    damping: float = 30.0
    fade_seconds: float = 0.2


@dataclass(frozen=True)
class TagView:
    label: str
    background: str
    text: str


@dataclass(frozen=True)
class ProjectCardView:
    slug: str
    name: str
    description: str
    image: str
    href: str
    link_label: str
    technologies_heading: str
    tags: tuple[TagView, ...]
    background: str
    title_color: str
    description_color: str
    technologies_heading_color: str


@dataclass(frozen=True)
class IndicatorView:
    index: int
    active: bool
    color: str


@dataclass(frozen=True)
class ProjectsView:
    heading: str
    active_index: int
    card: ProjectCardView
    indicators: tuple[IndicatorView, ...]
    animation: SlideAnimation
    background: str


@dataclass(frozen=True)
class ContactCardView:
    href: str
    label: str
    description: str
    icon: str
    gradient: tuple[str, str]
    label_color: str
    description_color: str


@dataclass(frozen=True)
class ContactView:
    heading: str
    intro: str
    highlight: str
    outro: str
    intro_color: str
    highlight_color: str
    cards: tuple[ContactCardView, ...]
    background: str


def _serialize(items: list[tuple[str, Any]]) -> dict[str, Any]:
    return {
        key: value.value if isinstance(value, Enum) else value for key, value in items
    }


@dataclass(frozen=True)
class PageView:
    """Everything the view layer needs to paint one frame of the page."""

    shell: ShellView
    theme_toggle: ThemeToggleView
    progress: ProgressBarView
    hero: HeroView
    about: AboutView
    experience: ExperienceView
    projects: ProjectsView
    contact: ContactView

    def to_dict(self) -> dict[str, Any]:
        """Plain nested dict with enum members replaced by their values."""
        return asdict(self, dict_factory=_serialize)


def render_shell(theme: Theme) -> ShellView:
    palette = palette_for(theme)
    return ShellView(
        theme=theme, background=palette.page_background, text=palette.page_text
    )


def render_theme_toggle(theme: Theme) -> ThemeToggleView:
    # The button names the theme it switches to
    return ThemeToggleView(label="Light Mode" if theme.is_dark else "Dark Mode")


def render_progress_bar(progress: float) -> ProgressBarView:
    return ProgressBarView(scale_x=min(1.0, max(0.0, progress)))


def render_hero(theme: Theme, content: PortfolioContent) -> HeroView:
    palette = palette_for(theme)
    return HeroView(
        title=content.greeting,
        subtitle=content.role,
        background=palette.hero_background,
        subtitle_color=palette.body_text,
    )


def render_about(theme: Theme, content: PortfolioContent) -> AboutView:
    palette = palette_for(theme)
    return AboutView(
        heading=content.headings.about,
        body=content.about,
        github_url=content.github_url,
        background=palette.section_background,
        body_color=palette.body_text,
    )


def render_experience(theme: Theme, content: PortfolioContent) -> ExperienceView:
    palette = palette_for(theme)
    return ExperienceView(
        heading=content.headings.experience,
        card=ExperienceCardView(
            title=content.experience.title,
            description=content.experience.description,
            gradient=palette.experience_card,
            title_color=palette.body_text,
            description_color=palette.muted_text,
        ),
        services=content.services,
        service_color=palette.body_text,
        background=palette.section_background,
    )


def slide_animation(direction: Direction) -> SlideAnimation:
    enter = "100%" if direction is Direction.FORWARD else "-100%"
    exit_ = "-100%" if direction is Direction.FORWARD else "100%"
    return SlideAnimation(direction=direction, enter_offset=enter, exit_offset=exit_)


def render_project_card(
    theme: Theme, project: Project, headings: SectionHeadings
) -> ProjectCardView:
    palette = palette_for(theme)
    return ProjectCardView(
        slug=project.slug,
        name=project.name,
        description=project.description,
        image=project.image,
        href=project.href,
        link_label=headings.project_link,
        technologies_heading=headings.technologies,
        tags=tuple(
            TagView(label=tech, background=palette.tag_background, text=palette.tag_text)
            for tech in project.technologies
        ),
        background=palette.project_card,
        title_color=palette.project_title,
        description_color=palette.project_description,
        technologies_heading_color=palette.technologies_heading,
    )


def render_projects(
    theme: Theme,
    carousel: CarouselState[Project],
    headings: SectionHeadings,
) -> ProjectsView:
    palette = palette_for(theme)
    active = carousel.current_index
    return ProjectsView(
        heading=headings.projects,
        active_index=active,
        card=render_project_card(theme, carousel.current_item, headings),
        indicators=tuple(
            IndicatorView(
                index=i,
                active=i == active,
                color=INDICATOR_ACTIVE if i == active else palette.indicator_inactive,
            )
            for i in range(carousel.total_items)
        ),
        animation=slide_animation(carousel.direction),
        background=palette.section_background,
    )


def render_contact(theme: Theme, content: PortfolioContent) -> ContactView:
    palette = palette_for(theme)
    return ContactView(
        heading=content.headings.contact,
        intro=content.contact_intro,
        highlight=content.contact_highlight,
        outro=content.contact_outro,
        intro_color=palette.contact_intro,
        highlight_color=palette.contact_highlight,
        cards=tuple(
            ContactCardView(
                href=link.href,
                label=link.label,
                description=link.description,
                icon=link.icon,
                gradient=palette.contact_card,
                label_color=palette.contact_label,
                description_color=palette.contact_description,
            )
            for link in content.contacts
        ),
        background=palette.section_background,
    )


def compose_page(
    theme: Theme,
    carousel: CarouselState[Project],
    content: PortfolioContent,
    progress: float = 0.0,
) -> PageView:
    """Render every section for one theme and carousel snapshot."""
    return PageView(
        shell=render_shell(theme),
        theme_toggle=render_theme_toggle(theme),
        progress=render_progress_bar(progress),
        hero=render_hero(theme, content),
        about=render_about(theme, content),
        experience=render_experience(theme, content),
        projects=render_projects(theme, carousel, content.headings),
        contact=render_contact(theme, content),
    )
