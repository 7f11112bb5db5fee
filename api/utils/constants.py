"""Category taxonomy and prompt text for furniture query classification."""

# Canonical categories, in the order results are reported
ALLOWED_CATEGORIES = (
    "bed",
    "wardrobe",
    "sofa",
    "desk",
    "dining table",
    "coffee table",
    "mirror",
    "bookcase",
    "drawer",
    "cabinet",
    "tv unit",
    "bedside table",
    "dining chair",
    "armchair",
    "sideboard",
    "office chair",
    "dressing table",
)

# Alternate phrasing -> canonical category
CATEGORY_SYNONYMS = {
    "couch": "sofa",
    "settee": "sofa",
    "loveseat": "sofa",
    "sectional": "sofa",
    "closet": "wardrobe",
    "armoire": "wardrobe",
    "nightstand": "bedside table",
    "night table": "bedside table",
    "shelves": "bookcase",
    "shelving": "bookcase",
    "bookshelf": "bookcase",
    "chest of drawers": "drawer",
    "dresser": "drawer",
    "cupboard": "cabinet",
    "tv stand": "tv unit",
    "media console": "tv unit",
    "entertainment unit": "tv unit",
    "kitchen table": "dining table",
    "accent chair": "armchair",
    "buffet": "sideboard",
    "credenza": "sideboard",
    "desk chair": "office chair",
    "task chair": "office chair",
    "vanity table": "dressing table",
    "makeup table": "dressing table",
}

# Room -> categories that belong in it
ROOM_CATEGORIES = {
    "bedroom": ("bed", "wardrobe", "bedside table", "drawer", "mirror", "dressing table", "armchair"),
    "living room": ("sofa", "armchair", "coffee table", "tv unit", "bookcase", "cabinet", "mirror", "sideboard"),
    "dining room": ("dining table", "dining chair", "sideboard", "cabinet", "mirror"),
    "office": ("desk", "office chair", "bookcase", "cabinet", "drawer"),
}

# Word-boundary anchored so "desk" never matches inside "desktop"
KEYWORD_PATTERNS = {
    "bed": r"\b(bed|beds)\b",
    "wardrobe": r"\b(wardrobe|wardrobes|closet|closets|armoire|armoires)\b",
    "sofa": r"\b(sofa|sofas|couch|couches|settee|settees|loveseat|loveseats|sectional|sectionals)\b",
    "desk": r"\b(desk|desks)\b(?!\s+chairs?\b)",
    "dining table": r"\b(dining table|dining tables|kitchen table|kitchen tables)\b",
    "coffee table": r"\b(coffee table|coffee tables)\b",
    "mirror": r"\b(mirror|mirrors)\b",
    "bookcase": r"\b(bookcase|bookcases|bookshelf|bookshelves|shelves|shelving)\b",
    "drawer": r"\b(drawer|drawers|chest of drawers|dresser|dressers)\b",
    "cabinet": r"\b(cabinet|cabinets|cupboard|cupboards)\b",
    "tv unit": r"\b(tv unit|tv units|tv stand|tv stands|media console|entertainment unit)\b",
    "bedside table": r"\b(bedside table|bedside tables|nightstand|nightstands|night table)\b",
    "dining chair": r"\b(dining chair|dining chairs)\b",
    "armchair": r"\b(armchair|armchairs|accent chair|accent chairs)\b",
    "sideboard": r"\b(sideboard|sideboards|buffet|credenza|credenzas)\b",
    "office chair": r"\b(office chair|office chairs|desk chair|desk chairs|task chair|task chairs)\b",
    "dressing table": r"\b(dressing table|dressing tables|vanity table|makeup table)\b",
}

DEFAULT_FALLBACK_CATEGORIES = ("sofa", "bed", "dining table")

QUERY_CLASSIFICATION_PROMPT = """
You are a furniture search assistant. Map the shopper's request onto catalog categories.

ALLOWED CATEGORIES (use these exact names, nothing else):
{categories}

SYNONYMS (always answer with the canonical name on the right):
{synonyms}

ROOMS (if the shopper names a room, pick categories from that room's list):
{rooms}

INSTRUCTIONS:
- Return every allowed category the request asks for, most relevant first
- Set "room" to one of the room names above, or null if no room is mentioned
- Set "confidence" to "high", "medium" or "low"
- Never invent categories outside the allowed list

Respond with a single JSON object and no other text:
{{
    "categories": ["..."],
    "room": null,
    "confidence": "high"
}}

Shopper request: {query}
"""
