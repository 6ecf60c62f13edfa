"""Static portfolio content.

Everything here is immutable for the life of the process. The core treats
content as an opaque input: it never fetches it and only checks that the
project list is not empty.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Project:
    """One featured portfolio item.

    Attributes:
        slug: Stable identifier, unique within the project list.
        name: Display name.
        image: Image reference (path or URL), opaque to the core.
        href: External link to the live project.
        description: Free text shown on the carousel card.
        technologies: Ordered technology tags.
    """

    slug: str
    name: str
    image: str
    href: str
    description: str
    technologies: tuple[str, ...] = ()


@dataclass(frozen=True)
class ContactLink:
    """A contact card: where it links and how it is labelled."""

    href: str
    label: str
    description: str
    icon: str


@dataclass(frozen=True)
class ExperienceEntry:
    title: str
    description: str


@dataclass(frozen=True)
class SectionHeadings:
    about: str = "Sobre Mí"
    experience: str = "Experiencia"
    projects: str = "Proyectos Destacados"
    technologies: str = "Tecnologías:"
    project_link: str = "Ver Proyecto"
    contact: str = "¿Listo para empezar?"


@dataclass(frozen=True)
class PortfolioContent:
    """The full content bundle rendered by the page."""

    owner: str
    role: str
    about: str
    github_url: str
    experience: ExperienceEntry
    services: tuple[str, ...]
    projects: tuple[Project, ...]
    contacts: tuple[ContactLink, ...]
    contact_intro: str = ""
    contact_highlight: str = ""
    contact_outro: str = ""
    headings: SectionHeadings = field(default_factory=SectionHeadings)

    @property
    def greeting(self) -> str:
        return f"Hola, soy {self.owner}"


def content_from_dict(data: dict[str, Any]) -> PortfolioContent:
    """Build a PortfolioContent from plain data, e.g. a validated JSON file.

    Missing optional keys fall back to the dataclass defaults.
    """
    headings = data.get("headings")
    return PortfolioContent(
        owner=data["owner"],
        role=data["role"],
        about=data["about"],
        github_url=data["github_url"],
        experience=ExperienceEntry(**data["experience"]),
        services=tuple(data.get("services", ())),
        projects=tuple(
            Project(
                slug=p["slug"],
                name=p["name"],
                image=p["image"],
                href=p["href"],
                description=p["description"],
                technologies=tuple(p.get("technologies", ())),
            )
            for p in data["projects"]
        ),
        contacts=tuple(ContactLink(**c) for c in data.get("contacts", ())),
        contact_intro=data.get("contact_intro", ""),
        contact_highlight=data.get("contact_highlight", ""),
        contact_outro=data.get("contact_outro", ""),
        headings=SectionHeadings(**headings) if headings else SectionHeadings(),
    )


DEFAULT_CONTENT = PortfolioContent(
    owner="Nico",
    role="Frontend Developer",
    about=(
        "Soy un desarrollador frontend apasionado por crear experiencias web "
        "innovadoras y atractivas. Mi enfoque se centra en la intersección "
        "entre diseño y tecnología, buscando siempre nuevas formas de mejorar "
        "la interacción del usuario con la web."
    ),
    github_url="https://github.com/Nicodeveloper97",
    experience=ExperienceEntry(
        title="Freelancer en plataformas",
        description=(
            "Ofrezco servicios especializados en desarrollo frontend, "
            "enfocándome en crear soluciones web de alta calidad y rendimiento."
        ),
    ),
    services=(
        "Desarrollo de componentes personalizados",
        "Integración eficiente de APIs",
        "Creación de interfaces responsivas",
        "Optimización de código para maximizar el rendimiento",
        "Desarrollo de aplicaciones de una sola página (SPAs) con React",
        "Migraciones a React",
        "Soluciones avanzadas para mejorar la experiencia y funcionalidad de proyectos web",
    ),
    projects=(
        Project(
            slug="estacionamiento",
            name="Gestión de estacionamiento",
            image="assets/Parksmart.png",
            href="https://estacionamientopriv.netlify.app/",
            description=(
                "Este es el front-end del proyecto Estacionamiento Privado, una "
                "aplicación web desarrollada en React que permite a los usuarios "
                "gestionar el acceso y disponibilidad de un estacionamiento "
                "privado. El diseño es moderno y responsivo, utilizando Tailwind "
                "CSS para los estilos."
            ),
            technologies=("ReactJS", "Tailwind CSS", "NodeJS", "JavaScript"),
        ),
        Project(
            slug="nuba",
            name="Nuba",
            image="assets/nuba.png",
            href="https://nuba.com/",
            description=(
                "Nuba es una página web dedicada a la planificación y "
                "organización de viajes personalizados de lujo. Su principal "
                "objetivo es crear experiencias únicas para sus clientes, "
                "enfocándose en ofrecer itinerarios exclusivos diseñados a medida."
            ),
            technologies=("HTML", "CSS", "JavaScript", "ReactJS"),
        ),
        Project(
            slug="wallock",
            name="Wallock",
            image="assets/wallock.png",
            href="https://wallock.netlify.app/",
            description=(
                "Wallock es una aplicación de administración de contraseñas "
                "basada en la web, diseñada para almacenar y organizar "
                "credenciales de manera segura."
            ),
            technologies=("ReactJS", "Tailwind CSS", "Firebase"),
        ),
    ),
    contacts=(
        ContactLink(
            href="mailto:nicoiglesiasdeveloper@gmail.com",
            label="Email",
            description="Envíame un correo y discutamos tus ideas.",
            icon="mail",
        ),
        ContactLink(
            href="https://www.linkedin.com/in/nicolasiglesias97",
            label="LinkedIn",
            description="Conecta conmigo y explora mi experiencia profesional.",
            icon="linkedin",
        ),
        ContactLink(
            href="https://wa.me/542804334435",
            label="WhatsApp",
            description="Contáctame rápidamente a través de WhatsApp.",
            icon="phone",
        ),
    ),
    contact_intro="Si quieres llevar tu proyecto al siguiente nivel, no dudes en ",
    contact_highlight="contactarme",
    contact_outro=". Estoy aquí para ayudarte a hacer tus ideas realidad.",
)
