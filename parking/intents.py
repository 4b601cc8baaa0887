import re

PARKING_AVAILABILITY = "parking_availability"
SUPPORT = "support"
GENERAL = "general"

_PARKING_NOUNS = ("park", "spot", "space")
_AVAILABILITY_CUES = (
    "available",
    "find",
    "is there",
    "can i",
    "at",
    "near",
    "tomorrow",
    "today",
)
_PARKING_PHRASE_RE = re.compile(r"\bwhere can i park\b")
_SUPPORT_TERMS = {"support", "help", "contact"}
_TOKEN_RE = re.compile(r"[a-z0-9]+")

_AVAILABILITY_SUGGESTIONS = (
    "Would you like to book one of these spaces?",
    "Do you need directions to any of these locations?",
    "Would you like to see more parking options in this area?",
)


def wants_parking(query):
    lowered = (query or "").lower()
    if _PARKING_PHRASE_RE.search(lowered):
        return True
    if not any(noun in lowered for noun in _PARKING_NOUNS):
        return False
    return any(cue in lowered for cue in _AVAILABILITY_CUES)


def wants_support(query):
    tokens = set(_TOKEN_RE.findall((query or "").lower()))
    return bool(tokens & _SUPPORT_TERMS)


def detect_intent(query):
    if wants_parking(query):
        return PARKING_AVAILABILITY
    if wants_support(query):
        return SUPPORT
    return GENERAL


def suggestions_for(intent):
    if intent == PARKING_AVAILABILITY:
        return list(_AVAILABILITY_SUGGESTIONS)
    return []
