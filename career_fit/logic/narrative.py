"""
Narrative Interest Tags

Maps free-text career aspirations onto a small interest lexicon.
Tags are qualitative context for reports only and carry zero weight in the
final score.
"""

import re
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple


# Interest tag -> keywords looked for in aspiration text and program titles
INTEREST_LEXICON: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "Technology": (
        "tech", "technology", "digital", "computer", "coding", "programming",
        "software", "apps", "ai", "artificial intelligence", "machine learning",
        "web", "data", "robotics", "cyber",
    ),
    "Healthcare": (
        "health", "medical", "medicine", "patient", "hospital", "nursing",
        "doctor", "therapy", "pharmacy", "dentist",
    ),
    "Arts & Design": (
        "art", "design", "designer", "creative", "graphics", "illustration",
        "photography", "animation", "fashion",
    ),
    "Business": (
        "business", "management", "finance", "accounting", "economics",
        "marketing", "entrepreneur", "startup", "investment",
    ),
    "Education": (
        "teach", "teacher", "teaching", "education", "school", "tutoring",
        "mentoring",
    ),
    "Science": (
        "science", "scientist", "research", "laboratory", "experiment",
        "biology", "chemistry", "physics",
    ),
    "Engineering": (
        "engineering", "engineer", "build", "mechanical", "electrical",
        "civil", "construction", "architecture",
    ),
    "Environment": (
        "environment", "environmental", "sustainability", "sustainable",
        "climate", "renewable", "conservation", "ecology",
    ),
    "Law & Government": (
        "law", "lawyer", "legal", "government", "policy", "justice",
        "diplomat", "public service",
    ),
    "Media & Communication": (
        "media", "journalism", "journalist", "writing", "writer",
        "broadcasting", "content", "communication",
    ),
    "Space & Aviation": (
        "space", "astronaut", "aerospace", "aviation", "pilot", "satellite",
    ),
    "Hospitality & Tourism": (
        "hospitality", "tourism", "hotel", "travel", "culinary", "chef",
    ),
})

_PATTERNS = {
    tag: re.compile(r"\b(" + "|".join(re.escape(k) for k in keywords) + r")\b", re.IGNORECASE)
    for tag, keywords in INTEREST_LEXICON.items()
}


def extract_interest_tags(text: Optional[str]) -> List[str]:
    """Lexicon tags whose keywords occur in the text, in lexicon order."""
    if not text:
        return []
    return [tag for tag, pattern in _PATTERNS.items() if pattern.search(text)]


def program_interest_tags(aspirations: Optional[str], program_title: str) -> List[str]:
    """
    Aspiration tags that also describe the program.

    Falls back to every aspiration tag when none of them match the title, so
    a report still has narrative context to show.
    """
    tags = extract_interest_tags(aspirations)
    if not tags:
        return []
    title_tags = set(extract_interest_tags(program_title))
    shared = [tag for tag in tags if tag in title_tags]
    return shared or tags
