"""Tests for the pure section renderers."""

import json
from dataclasses import fields

import pytest

from src.core.carousel_logic import CarouselState, Direction
from src.core.content import DEFAULT_CONTENT, Project
from src.core.sections import (
    DARK_PALETTE,
    INDICATOR_ACTIVE,
    LIGHT_PALETTE,
    Palette,
    compose_page,
    palette_for,
    render_about,
    render_contact,
    render_experience,
    render_hero,
    render_progress_bar,
    render_projects,
    render_shell,
    render_theme_toggle,
    slide_animation,
)
from src.core.theme import Theme


@pytest.fixture
def carousel() -> CarouselState[Project]:
    return CarouselState(items=DEFAULT_CONTENT.projects)


class TestPalette:
    @pytest.mark.parametrize("theme", list(Theme))
    def test_defined_for_every_theme(self, theme):
        assert isinstance(palette_for(theme), Palette)

    def test_dark_and_light_differ(self):
        assert palette_for(Theme.DARK) is DARK_PALETTE
        assert palette_for(Theme.LIGHT) is LIGHT_PALETTE
        assert DARK_PALETTE.page_background == "black"
        assert LIGHT_PALETTE.page_background == "gray-100"

    def test_no_empty_tokens(self):
        for palette in (DARK_PALETTE, LIGHT_PALETTE):
            for f in fields(palette):
                assert getattr(palette, f.name)


class TestThemeToggle:
    def test_label_names_the_other_theme(self):
        assert render_theme_toggle(Theme.DARK).label == "Light Mode"
        assert render_theme_toggle(Theme.LIGHT).label == "Dark Mode"


class TestProgressBar:
    @pytest.mark.parametrize("value,expected", [(-0.2, 0.0), (0.4, 0.4), (1.7, 1.0)])
    def test_scale_clamped(self, value, expected):
        assert render_progress_bar(value).scale_x == expected


class TestStaticSections:
    def test_shell(self):
        assert render_shell(Theme.DARK).text == "green-200"
        assert render_shell(Theme.LIGHT).text == "gray-900"

    def test_hero(self):
        hero = render_hero(Theme.LIGHT, DEFAULT_CONTENT)
        assert hero.title == "Hola, soy Nico"
        assert hero.subtitle == "Frontend Developer"
        assert hero.background == "white"

    def test_about(self):
        about = render_about(Theme.DARK, DEFAULT_CONTENT)
        assert about.github_url == "https://github.com/Nicodeveloper97"
        assert about.body_color == "white"

    def test_experience_lists_all_services(self):
        view = render_experience(Theme.DARK, DEFAULT_CONTENT)
        assert len(view.services) == 7
        assert view.card.gradient == ("green-900", "blue-900")

    def test_contact_cards(self):
        view = render_contact(Theme.LIGHT, DEFAULT_CONTENT)
        assert [c.label for c in view.cards] == ["Email", "LinkedIn", "WhatsApp"]
        assert all(c.label_color == "green-600" for c in view.cards)

    @pytest.mark.parametrize("theme", list(Theme))
    def test_render_is_pure(self, theme):
        assert render_contact(theme, DEFAULT_CONTENT) == render_contact(
            theme, DEFAULT_CONTENT
        )


class TestSlideAnimation:
    def test_forward_enters_from_right(self):
        animation = slide_animation(Direction.FORWARD)
        assert animation.enter_offset == "100%"
        assert animation.exit_offset == "-100%"

    def test_backward_enters_from_left(self):
        animation = slide_animation(Direction.BACKWARD)
        assert animation.enter_offset == "-100%"
        assert animation.exit_offset == "100%"

    def test_spring_parameters(self):
        animation = slide_animation(Direction.FORWARD)
        assert (animation.stiffness, animation.damping) == (300.0, 30.0)
        assert animation.fade_seconds == 0.2


class TestProjects:
    def test_card_shows_active_project(self, carousel):
        view = render_projects(Theme.DARK, carousel, DEFAULT_CONTENT.headings)
        assert view.card.name == "Gestión de estacionamiento"
        assert [t.label for t in view.card.tags] == [
            "ReactJS",
            "Tailwind CSS",
            "NodeJS",
            "JavaScript",
        ]

    def test_indicators_mark_active(self):
        state = CarouselState(items=DEFAULT_CONTENT.projects, current_index=2)
        view = render_projects(Theme.LIGHT, state, DEFAULT_CONTENT.headings)
        assert [i.active for i in view.indicators] == [False, False, True]
        assert view.indicators[2].color == INDICATOR_ACTIVE
        assert view.indicators[0].color == "gray-300"

    def test_animation_follows_direction(self):
        state = CarouselState(
            items=DEFAULT_CONTENT.projects,
            current_index=2,
            direction=Direction.BACKWARD,
        )
        view = render_projects(Theme.DARK, state, DEFAULT_CONTENT.headings)
        assert view.animation.direction is Direction.BACKWARD

    def test_theme_changes_colors_only(self, carousel):
        dark = render_projects(Theme.DARK, carousel, DEFAULT_CONTENT.headings)
        light = render_projects(Theme.LIGHT, carousel, DEFAULT_CONTENT.headings)
        assert dark.card.name == light.card.name
        assert dark.card.background == "gray-800"
        assert light.card.background == "white"


class TestComposePage:
    @pytest.mark.parametrize("theme", list(Theme))
    def test_total_over_themes(self, theme, carousel):
        page = compose_page(theme, carousel, DEFAULT_CONTENT)
        assert page.shell.theme is theme

    def test_to_dict_is_json_serializable(self, carousel):
        page = compose_page(Theme.DARK, carousel, DEFAULT_CONTENT, progress=0.3)
        data = page.to_dict()
        encoded = json.loads(json.dumps(data))
        assert encoded["shell"]["theme"] == "dark"
        assert encoded["projects"]["animation"]["direction"] == "forward"
        assert encoded["progress"]["scale_x"] == 0.3
