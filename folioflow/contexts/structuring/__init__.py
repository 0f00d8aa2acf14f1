"""
Structuring Context

Responsibilities:
- Defines the canonical resume record shared by editing and rendering
- Reconciles loosely-typed language-model output into that record
- Merges profile/social sections into contact channels

Owns: CanonicalResume and the model-output -> canonical mapping
Never: Calls the language model, or raises on malformed model output
"""

from folioflow.contexts.structuring.reconciler import (
    find_section,
    is_custom_section,
    merge_profile_section,
    reconcile,
)
from folioflow.contexts.structuring.resume_data_structure import (
    CONTACT_CHANNELS,
    ITEM_TYPES,
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

__all__ = [
    # Reconciliation
    "reconcile",
    "find_section",
    "is_custom_section",
    "merge_profile_section",
    # Canonical record
    "CanonicalResume",
    "ContactInfo",
    "CustomSection",
    "Experience",
    "Education",
    "Project",
    "Certification",
    "Language",
    "Award",
    "ITEM_TYPES",
    "CONTACT_CHANNELS",
]
