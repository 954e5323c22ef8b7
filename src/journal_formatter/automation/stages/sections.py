"""Section names recognised as manuscript headers."""

SECTION_NAMES: tuple[str, ...] = (
    "ABSTRACT",
    "INTRODUCTION",
    "METHODOLOGY",
    "METHODS",
    "RESULTS",
    "DISCUSSION",
    "CONCLUSION",
    "REFERENCES",
)
