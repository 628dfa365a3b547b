import re

EDUCATIONAL_KEYWORDS = frozenset({
    "tutorial", "learn", "course", "lesson", "guide", "how to", "basics", "fundamentals",
    "introduction", "overview", "explained", "step by step", "tips", "tricks", "best practices",
    "complete guide", "full course", "crash course", "beginners", "advanced", "intermediate",
    "masterclass", "workshop", "training", "education", "academic", "lecture", "seminar",
})

NON_EDUCATIONAL_KEYWORDS = frozenset({
    "vlog", "daily", "lifestyle", "funny", "comedy", "entertainment", "gaming", "music video",
    "song", "cover", "reaction", "challenge", "prank", "unboxing", "haul", "review", "unbox",
    "asmr", "satisfying", "relaxing", "sleep", "meditation", "workout", "fitness", "dance",
})

SHALLOW_MARKERS = ("short", "quick")
EXTREME_DURATION_MARKERS = ("10 hour", "24 hour")

EMOJI_RE = re.compile(
    "[\U0001F600-\U0001F64F"
    "\U0001F300-\U0001F5FF"
    "\U0001F680-\U0001F6FF"
    "\U0001F1E0-\U0001F1FF"
    "\u2600-\u26FF"
    "\u2700-\u27BF]"
)


class EducationalClassifier:
    """Keyword rules deciding whether a video looks like a lesson.

    Every negative signal vetoes a positive keyword match.
    """

    def __init__(
        self,
        educational_keywords=EDUCATIONAL_KEYWORDS,
        non_educational_keywords=NON_EDUCATIONAL_KEYWORDS,
        shallow_markers=SHALLOW_MARKERS,
        extreme_duration_markers=EXTREME_DURATION_MARKERS,
    ):
        self.educational_keywords = frozenset(k.lower() for k in educational_keywords)
        self.non_educational_keywords = frozenset(k.lower() for k in non_educational_keywords)
        self.shallow_markers = tuple(shallow_markers)
        self.extreme_duration_markers = tuple(extreme_duration_markers)

    def has_educational_keyword(self, title: str, description: str) -> bool:
        text = f"{title} {description}".lower()
        return any(keyword in text for keyword in self.educational_keywords)

    def has_non_educational_keyword(self, title: str, description: str) -> bool:
        text = f"{title} {description}".lower()
        return any(keyword in text for keyword in self.non_educational_keywords)

    @staticmethod
    def has_emoji(title: str) -> bool:
        return bool(EMOJI_RE.search(title))

    def is_educational(self, title: str, description: str) -> bool:
        lowered_title = title.lower()
        if any(marker in lowered_title for marker in self.shallow_markers):
            return False
        if any(marker in lowered_title for marker in self.extreme_duration_markers):
            return False
        return (
            self.has_educational_keyword(title, description)
            and not self.has_non_educational_keyword(title, description)
            and not self.has_emoji(title)
        )

    def is_acceptable(self, title: str, description: str) -> bool:
        """Relaxed check: only the disqualifying signals apply."""
        return not self.has_non_educational_keyword(title, description) and not self.has_emoji(title)


default_classifier = EducationalClassifier()
