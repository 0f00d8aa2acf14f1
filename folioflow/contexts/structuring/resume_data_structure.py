"""
Canonical Resume Structure

Defines the single normalized record of portfolio content. This structure is the
interface between the structuring context (which produces it from model output),
the editing context (which mutates it), and the rendering context (which reads it).

Every list item carries a session-local `id` (see folioflow.utils.timestamp) used
for targeted update and removal.
"""

import copy
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Type, TypeVar, Union

from folioflow.utils.timestamp import next_item_id

T = TypeVar("T")

CONTACT_CHANNELS = ("email", "phone", "linkedin", "github", "website", "twitter", "portfolio")


@dataclass
class ContactInfo:
    """Contact channels. An empty string means the channel is unset."""

    email: str = ""
    phone: str = ""
    linkedin: str = ""
    github: str = ""
    website: str = ""
    twitter: str = ""
    portfolio: str = ""


@dataclass
class Experience:
    id: int = field(default_factory=next_item_id)
    role: str = ""
    company: str = ""
    duration: str = ""
    location: str = ""
    description: str = ""
    link: str = ""


@dataclass
class Education:
    id: int = field(default_factory=next_item_id)
    degree: str = ""
    institution: str = ""
    year: str = ""
    description: str = ""
    gpa: str = ""
    link: str = ""


@dataclass
class Project:
    id: int = field(default_factory=next_item_id)
    name: str = ""
    description: str = ""
    technologies: str = ""
    link: str = ""
    github: str = ""


@dataclass
class Certification:
    id: int = field(default_factory=next_item_id)
    name: str = ""
    issuer: str = ""
    year: str = ""
    link: str = ""


@dataclass
class Language:
    id: int = field(default_factory=next_item_id)
    name: str = ""
    proficiency: str = "Fluent"


@dataclass
class Award:
    id: int = field(default_factory=next_item_id)
    title: str = ""
    issuer: str = ""
    year: str = ""
    description: str = ""


@dataclass
class CustomSection:
    """
    A resume section with no fixed home (e.g. "Volunteering", "Publications").

    Items are kept exactly as the model returned them: strings or dicts.
    """

    name: str = ""
    type: str = ""
    items: List[Union[str, Dict[str, Any]]] = field(default_factory=list)


# List attribute name -> item type, for generic item commands
ITEM_TYPES: Dict[str, Type] = {
    "experiences": Experience,
    "education": Education,
    "projects": Project,
    "certifications": Certification,
    "languages": Language,
    "awards": Award,
}


def _build(cls: Type[T], data: Dict[str, Any]) -> T:
    """Instantiate a dataclass from a dict, ignoring unknown keys."""
    names = {f.name for f in fields(cls)}
    return cls(**{k: v for k, v in data.items() if k in names})


@dataclass
class CanonicalResume:
    """
    The canonical in-memory resume record.

    Attributes:
        full_name, title, location, bio: Header fields
        skills: Skill names, in source order
        experiences, education, projects, certifications, languages, awards: Typed lists
        custom_sections: Sections with no fixed home, retained verbatim
        contact: Merged contact channels
        profile_photo: Data URL of the uploaded photo ("" if none)
    """

    full_name: str = ""
    title: str = ""
    location: str = ""
    bio: str = ""
    skills: List[str] = field(default_factory=list)
    experiences: List[Experience] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    certifications: List[Certification] = field(default_factory=list)
    languages: List[Language] = field(default_factory=list)
    awards: List[Award] = field(default_factory=list)
    custom_sections: List[CustomSection] = field(default_factory=list)
    contact: ContactInfo = field(default_factory=ContactInfo)
    profile_photo: str = ""

    @property
    def skills_text(self) -> str:
        """Skills joined for a single text input ("Python, SQL, Docker")."""
        return ", ".join(self.skills)

    @property
    def initials(self) -> str:
        """Up to two initials from the full name, for avatar fallbacks."""
        return "".join(part[0] for part in self.full_name.split()[:2]).upper()

    def copy(self) -> "CanonicalResume":
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CanonicalResume":
        """Rebuild a resume from to_dict() output."""
        data = copy.deepcopy(data)
        for list_name, item_type in ITEM_TYPES.items():
            data[list_name] = [_build(item_type, item) for item in data.get(list_name, [])]
        data["custom_sections"] = [
            _build(CustomSection, section) for section in data.get("custom_sections", [])
        ]
        data["contact"] = _build(ContactInfo, data.get("contact", {}))
        return _build(cls, data)
