"""Enumerations for journal formatting."""

from enum import Enum


class ReferenceStyle(str, Enum):
    """Citation-marker conventions a journal can require."""

    VANCOUVER = "Vancouver"
    APA = "APA"
    CHICAGO = "Chicago"
    HARVARD = "Harvard"
    MLA = "MLA"
    IEEE = "IEEE"
    AMA = "AMA"
    CSE = "CSE"
    ACS = "ACS"
    NATURE = "Nature"
    SCIENCE = "Science"


class FontFamily(str, Enum):
    """Font names offered when creating a custom format.

    ``JournalFormat.font_family`` is a plain string, so this list is a set of
    suggestions rather than a closed choice.
    """

    TIMES_NEW_ROMAN = "Times New Roman"
    ARIAL = "Arial"
    GARAMOND = "Garamond"
    HELVETICA = "Helvetica"
    CALIBRI = "Calibri"
    GEORGIA = "Georgia"
