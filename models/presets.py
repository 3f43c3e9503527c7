"""
Prompt presets and option lists used by the feature pages.
"""

from pydantic import BaseModel


class SearchSuggestion(BaseModel):
    """A one-click recipe search."""
    name: str
    flag: str


class KitchenCommand(BaseModel):
    """A suggested spoken question, in the three supported languages."""
    en: str
    hi: str
    ta: str


GLOBAL_SUGGESTIONS = [
    SearchSuggestion(name="Paneer Butter Masala", flag="🇮🇳"),
    SearchSuggestion(name="Classic Italian Lasagna", flag="🇮🇹"),
    SearchSuggestion(name="Thai Green Curry", flag="🇹🇭"),
    SearchSuggestion(name="Japanese Sushi Rolls", flag="🇯🇵"),
    SearchSuggestion(name="Mexican Street Tacos", flag="🇲🇽"),
    SearchSuggestion(name="French Beef Bourguignon", flag="🇫🇷"),
    SearchSuggestion(name="Korean Bibimbap", flag="🇰🇷"),
    SearchSuggestion(name="Spanish Paella", flag="🇪🇸"),
]

EDIT_PRESETS = [
    "Make it look professionally plated",
    "Add a rustic wooden table background",
    "Brighten the colors and add steam",
    "Convert to a retro cookbook style",
    "Add a glass of wine next to the plate",
    "Make it look like a street food stall at night",
]

SUGGESTED_COMMANDS = [
    KitchenCommand(en="Does this look done?", hi="क्या यह पक गया है?", ta="இது வெந்துவிட்டதா?"),
    KitchenCommand(en="Identify these ingredients", hi="इन्हें पहचानें", ta="இவற்றை அடையாளம் காணவும்"),
    KitchenCommand(en="How should I cut this?", hi="इसे कैसे काटें?", ta="இதை எப்படி வெட்டுவது?"),
    KitchenCommand(en="Is the pan hot enough?", hi="क्या पैन पर्याप्त गर्म है?", ta="பாத்திரம் சூடாக உள்ளதா?"),
]

# Gemini Live prebuilt voices
VOICE_OPTIONS = {
    "Kore": "Kore (Firm)",
    "Puck": "Puck (Upbeat)",
    "Charon": "Charon (Informative)",
    "Fenrir": "Fenrir (Excitable)",
    "Aoede": "Aoede (Breezy)",
}

DEFAULT_VOICE_NAME = "Kore"


def get_voice_display_name(voice_id: str) -> str:
    """Get the display name for a voice ID."""
    return VOICE_OPTIONS.get(voice_id, voice_id)
