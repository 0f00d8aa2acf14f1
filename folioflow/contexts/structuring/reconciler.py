"""
Resume Field Reconciliation

Maps the language model's loosely-typed output into a CanonicalResume.

The model returns something shaped like:

    {
        "fullName": "...", "title": "...", "location": "...", "bio": "...",
        "contact": {"email": "...", "github": "...", ...},
        "sections": [{"name": "Work Experience", "type": "experience", "items": [...]}, ...]
    }

but nothing about that shape is guaranteed. Sections may be tagged with a type or
only named descriptively, items may be strings or dicts with varying keys, and
profile links may show up both in `contact` and in a "Profiles" section. Every
access here degrades to an empty default; reconcile() never raises on bad input.

Processing order:
1. Locate typed sections by type or name keyword
2. Merge a "Profiles"/"Socials" section into contact info (first writer wins)
3. Map typed sections onto canonical item records
4. Keep every section with no fixed home as a custom section
"""

import copy
from typing import Any, Dict, List, Optional, Tuple

from folioflow.contexts.structuring.logger import (
    _log_debug,
    _log_warning,
    log_reconciliation_result,
)
from folioflow.contexts.structuring.resume_data_structure import (
    CONTACT_CHANNELS,
    Award,
    CanonicalResume,
    Certification,
    ContactInfo,
    CustomSection,
    Education,
    Experience,
    Language,
    Project,
)
from folioflow.contexts.structuring.section_patterns import (
    ACHIEVEMENT,
    AWARD,
    CERTIFICATION,
    DURATION_KEYS,
    EDUCATION,
    EXPERIENCE,
    LANGUAGE,
    ORGANIZATION_KEYS,
    PROFILE_SECTION_KEYWORDS,
    PROJECTS,
    RESERVED_SECTION_KEYWORDS,
    SKILLS,
    TITLE_KEYS,
)

Section = Dict[str, Any]


# ============================================================================
# Defensive Access Helpers
# ============================================================================


def _text(value: Any) -> str:
    """Coerce a scalar model value to a string; containers other than lists become ""."""
    if value is None or isinstance(value, dict):
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return ""
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, list):
        return ", ".join(_text(v) for v in value if _text(v))
    return ""


def _first(item: Any, keys: List[str], default: str = "") -> str:
    """First non-empty value among keys of a dict item."""
    if not isinstance(item, dict):
        return default
    for key in keys:
        value = _text(item.get(key))
        if value:
            return value
    return default


def _items(section: Optional[Section]) -> list:
    if not isinstance(section, dict):
        return []
    items = section.get("items")
    return items if isinstance(items, list) else []


def _lower(value: Any) -> str:
    return value.lower() if isinstance(value, str) else ""


def _sections(model_output: Dict[str, Any]) -> List[Section]:
    sections = model_output.get("sections")
    if not isinstance(sections, list):
        return []
    return [s for s in sections if isinstance(s, dict)]


# ============================================================================
# Section Lookup
# ============================================================================


def find_section(sections: List[Section], keyword: str) -> Optional[Section]:
    """
    Find the first section declared with this type or whose name contains the keyword.

    Matching is case-insensitive. Checking the name as well as the type tolerates
    models that only name sections descriptively ("Professional Experience").
    """
    keyword = keyword.lower()
    for section in sections:
        if _lower(section.get("type")) == keyword or keyword in _lower(section.get("name")):
            return section
    return None


def is_custom_section(section: Section) -> bool:
    """True when neither type nor name contains a reserved keyword."""
    section_type = _lower(section.get("type"))
    name = _lower(section.get("name"))
    return not any(
        keyword in section_type or keyword in name for keyword in RESERVED_SECTION_KEYWORDS
    )


def _find_profile_section_index(sections: List[Section]) -> Optional[int]:
    for index, section in enumerate(sections):
        name = _lower(section.get("name"))
        if any(keyword in name for keyword in PROFILE_SECTION_KEYWORDS):
            return index
    return None


# ============================================================================
# Contact Merge
# ============================================================================


def _contact_from_model(raw_contact: Any) -> ContactInfo:
    if not isinstance(raw_contact, dict):
        return ContactInfo()
    return ContactInfo(**{channel: _text(raw_contact.get(channel)) for channel in CONTACT_CHANNELS})


def _classify_profile_item(item: Any, contact: ContactInfo) -> Optional[Tuple[str, str]]:
    """
    Decide which contact channel (if any) a profile item fills.

    Named platforms win over generic links. Only an unset channel can be filled,
    and the first two unclassified items go to website then portfolio.

    Returns:
        (channel, value) or None if the item stays in the Profiles section
    """
    if isinstance(item, dict):
        label = _first(item, TITLE_KEYS)
        link = _text(item.get("link"))
        generic_value = link or _text(item.get("description")) or label
    else:
        label = _text(item)
        link = ""
        generic_value = label

    lowered = label.lower()
    named_value = link or label

    if not contact.twitter and ("twitter" in lowered or " x " in lowered or lowered == "x"):
        channel, value = "twitter", named_value
    elif not contact.github and "github" in lowered:
        channel, value = "github", named_value
    elif not contact.linkedin and "linkedin" in lowered:
        channel, value = "linkedin", named_value
    elif not contact.website:
        channel, value = "website", generic_value
    elif not contact.portfolio:
        channel, value = "portfolio", generic_value
    else:
        return None

    # An item with nothing to put in the channel stays in the section
    if not value:
        return None
    return channel, value


def _leftover_profile_item(item: Any) -> Any:
    if isinstance(item, dict):
        return item
    return {"title": _text(item), "description": "", "link": ""}


def merge_profile_section(sections: List[Section], contact: ContactInfo) -> List[Section]:
    """
    Move profile/social links into contact channels without losing any item.

    Items that fit no free channel are kept in the profile section (strings become
    {title, description, link} dicts); the section is dropped if nothing remains.

    Returns:
        The section list with the profile section rewritten or removed
    """
    index = _find_profile_section_index(sections)
    if index is None:
        return sections

    profile_section = sections[index]
    raw_items = profile_section.get("items")
    if not isinstance(raw_items, list):
        return sections

    remaining = []
    for item in raw_items:
        classification = _classify_profile_item(item, contact)
        if classification is None:
            remaining.append(_leftover_profile_item(item))
            continue
        channel, value = classification
        setattr(contact, channel, value)
        _log_debug(f"Profile item moved to contact.{channel}")

    sections = list(sections)
    if remaining:
        sections[index] = {**profile_section, "items": remaining}
    else:
        del sections[index]
    return sections


# ============================================================================
# Typed List Mapping
# ============================================================================


def map_experience(item: Any) -> Experience:
    if not isinstance(item, dict):
        return Experience(description=_text(item))
    return Experience(
        role=_first(item, TITLE_KEYS + ["role", "position"]),
        company=_first(item, ORGANIZATION_KEYS),
        duration=_first(item, DURATION_KEYS),
        location=_text(item.get("location")),
        description=_text(item.get("description")),
        link=_text(item.get("link")),
    )


def map_education(item: Any) -> Education:
    if not isinstance(item, dict):
        return Education(description=_text(item))
    return Education(
        degree=_first(item, ["title", "degree", "name"]),
        institution=_first(item, ["organization", "institution", "school"]),
        year=_first(item, DURATION_KEYS),
        description=_text(item.get("description")),
        gpa=_text(item.get("gpa")),
        link=_text(item.get("link")),
    )


def map_project(item: Any) -> Project:
    if not isinstance(item, dict):
        return Project(description=_text(item))
    return Project(
        name=_first(item, TITLE_KEYS),
        description=_text(item.get("description")),
        technologies=_text(item.get("technologies")),
        link=_text(item.get("link")),
        github=_text(item.get("github")),
    )


def map_certification(item: Any) -> Certification:
    if not isinstance(item, dict):
        return Certification(name=_text(item))
    return Certification(
        name=_first(item, TITLE_KEYS),
        issuer=_first(item, ORGANIZATION_KEYS),
        year=_first(item, DURATION_KEYS),
        link=_text(item.get("link")),
    )


def map_language(item: Any) -> Language:
    if not isinstance(item, dict):
        return Language(name=_text(item))
    return Language(
        name=_first(item, TITLE_KEYS + ["language"]),
        proficiency=_first(item, ["proficiency", "level"], default="Fluent"),
    )


def map_award(item: Any) -> Award:
    if not isinstance(item, dict):
        return Award(title=_text(item))
    return Award(
        title=_first(item, TITLE_KEYS),
        issuer=_first(item, ORGANIZATION_KEYS),
        year=_first(item, DURATION_KEYS),
        description=_text(item.get("description")),
    )


def map_skills(items: list) -> List[str]:
    skills = []
    for item in items:
        skill = _first(item, TITLE_KEYS) if isinstance(item, dict) else _text(item)
        if skill.strip():
            skills.append(skill)
    return skills


def _custom_section(section: Section) -> CustomSection:
    return CustomSection(
        name=_text(section.get("name")),
        type=_text(section.get("type")),
        items=list(_items(section)),
    )


# ============================================================================
# Orchestration
# ============================================================================


def reconcile(model_output: Any) -> CanonicalResume:
    """
    Reconcile raw model output into a CanonicalResume.

    The input is deep-copied and never mutated. Missing or malformed fields
    become empty defaults; this function does not raise on bad data.

    Args:
        model_output: Parsed JSON returned by the language model

    Returns:
        A new CanonicalResume with fresh item ids
    """
    if not isinstance(model_output, dict):
        _log_warning(f"Model output is {type(model_output).__name__}, not an object; using empty resume")
        return CanonicalResume()

    model_output = copy.deepcopy(model_output)
    sections = _sections(model_output)

    skills_section = find_section(sections, SKILLS)
    experience_section = find_section(sections, EXPERIENCE)
    education_section = find_section(sections, EDUCATION)
    projects_section = find_section(sections, PROJECTS)
    certifications_section = find_section(sections, CERTIFICATION)
    languages_section = find_section(sections, LANGUAGE)
    awards_section = find_section(sections, AWARD) or find_section(sections, ACHIEVEMENT)

    contact = _contact_from_model(model_output.get("contact"))
    sections = merge_profile_section(sections, contact)

    certification_items = _items(certifications_section)
    if certifications_section is None and isinstance(model_output.get("certifications"), list):
        certification_items = model_output["certifications"]

    resume = CanonicalResume(
        full_name=_text(model_output.get("fullName")),
        title=_text(model_output.get("title")),
        location=_text(model_output.get("location")),
        bio=_text(model_output.get("bio")),
        skills=map_skills(_items(skills_section)),
        experiences=[map_experience(item) for item in _items(experience_section)],
        education=[map_education(item) for item in _items(education_section)],
        projects=[map_project(item) for item in _items(projects_section)],
        certifications=[map_certification(item) for item in certification_items],
        languages=[map_language(item) for item in _items(languages_section)],
        awards=[map_award(item) for item in _items(awards_section)],
        custom_sections=[_custom_section(s) for s in sections if is_custom_section(s)],
        contact=contact,
    )

    log_reconciliation_result(resume)
    return resume
