"""
Keyword tables for matching model-output sections to canonical lists.

Keywords are lowercase and matched as substrings of section names (or exactly
against a section's declared type).
"""

SKILLS = "skills"
EXPERIENCE = "experience"
EDUCATION = "education"
PROJECTS = "projects"
CERTIFICATION = "certification"
LANGUAGE = "language"
AWARD = "award"
ACHIEVEMENT = "achievement"

# Sections containing any of these in type or name have a fixed home
RESERVED_SECTION_KEYWORDS = [
    SKILLS,
    EXPERIENCE,
    EDUCATION,
    PROJECTS,
    CERTIFICATION,
    LANGUAGE,
    AWARD,
    ACHIEVEMENT,
]

# Section names that hold social/profile links to merge into contact info
PROFILE_SECTION_KEYWORDS = ["profile", "social"]

# Field aliases the model uses interchangeably, in lookup order
TITLE_KEYS = ["title", "name"]
ORGANIZATION_KEYS = ["organization", "company", "issuer"]
DURATION_KEYS = ["duration", "date", "year"]
