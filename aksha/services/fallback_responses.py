"""Canned replies used when the AI backend cannot be reached."""

from __future__ import annotations

import re
from dataclasses import dataclass

GREETING_PATTERN = re.compile(r"^(hi|hello|hey|greetings)\b")


@dataclass(frozen=True)
class _Rule:
    any_of: tuple[str, ...]
    reply: str
    all_of: tuple[str, ...] = ()

    def matches(self, text: str) -> bool:
        if self.all_of and not all(_has_word(text, word) for word in self.all_of):
            return False
        return not self.any_of or any(_has_word(text, word) for word in self.any_of)


def _has_word(text: str, word: str) -> bool:
    # Whole words only: "bus" skips "abuse", "how" skips "however".
    return re.search(rf"\b{re.escape(word)}\b", text) is not None


GREETING_REPLY = (
    "Hello! I'm Aksha's AI safety assistant. I'm here to help with safety concerns "
    "or questions about using the app. How can I assist you today?"
)

# First match wins, so specific situations come before generic ones.
CHAT_RULES = (
    _Rule(
        all_of=("safe",),
        any_of=("walk", "walking"),
        reply=(
            "Stick to well-lit areas, avoid wearing headphones, and let someone know your route. "
            "Location sharing lets your trusted contacts follow your journey, and the SOS button "
            "is always available in an emergency."
        ),
    ),
    _Rule(
        any_of=("public transport", "bus", "buses", "train", "trains", "metro"),
        reply=(
            "Wait in well-lit, populated areas and sit near the driver if possible. "
            "Share your live location with a trusted contact for the whole trip."
        ),
    ),
    _Rule(
        any_of=("uber", "taxi", "cab", "ride", "rides"),
        reply=(
            "Verify the driver and vehicle details before getting in, and share your trip "
            "with trusted contacts so someone knows where you are."
        ),
    ),
    _Rule(
        any_of=("being followed", "following me", "follows me", "stalked", "stalking"),
        reply=(
            "Stay calm and move toward a populated place immediately. Don't go home directly. "
            "Enter a store or approach a police officer, and use SOS to send your location "
            "to your emergency contacts."
        ),
    ),
    _Rule(
        all_of=("how", "sos"),
        any_of=(),
        reply=(
            "Tap the SOS button on the home screen. Your selected emergency contacts get a text "
            "with your location and battery level."
        ),
    ),
    _Rule(
        any_of=("add contact", "add contacts", "emergency contact", "emergency contacts"),
        reply=(
            "Open the contacts list and select up to 5 people with a phone number. "
            "They are the ones notified when you trigger SOS."
        ),
    ),
    _Rule(
        any_of=("emergency", "danger", "dangerous", "help me"),
        reply=(
            "If you're in immediate danger, press SOS to alert your emergency contacts with your "
            "location, move somewhere safe if you can, and call 112 or your local emergency number."
        ),
    ),
    _Rule(
        any_of=("track", "tracking", "journey", "location", "share my location"),
        reply=(
            "Turn on location sharing from the home screen and your trusted contacts can follow "
            "your live location until you switch it off."
        ),
    ),
)

EMERGENCY_RULES = (
    _Rule(
        any_of=("follow", "following", "followed", "follows"),
        reply=(
            "If someone is following you:\n\n"
            "1. Stay calm and move to a crowded, well-lit area\n"
            "2. Enter a public place like a store or restaurant\n"
            "3. Call a trusted contact\n"
            "4. Use the SOS button to alert your emergency contacts\n"
            "5. If the threat is immediate, call 112"
        ),
    ),
    _Rule(
        any_of=("assault", "assaulted", "attack", "attacked"),
        reply=(
            "If you're facing potential assault:\n\n"
            "1. Press SOS immediately\n"
            "2. Create distance between yourself and the threat if possible\n"
            "3. Make noise to attract attention\n"
            "4. Call 112 or have someone call for you"
        ),
    ),
    _Rule(
        any_of=("lost", "unfamiliar"),
        reply=(
            "If you're lost or in an unfamiliar area:\n\n"
            "1. Stay in a well-lit, populated area\n"
            "2. Check the map to identify where you are\n"
            "3. Share your live location with a trusted contact\n"
            "4. Contact someone who can guide you"
        ),
    ),
)

DEFAULT_EMERGENCY_REPLY = (
    "Emergency guidance:\n\n"
    "1. Stay calm and assess your surroundings\n"
    "2. Move to a safe location if possible\n"
    "3. Use SOS to alert your emergency contacts\n"
    "4. Call emergency services (112) if in immediate danger"
)


def canned_chat_reply(prompt: str) -> str:
    text = prompt.lower().strip()
    for rule in CHAT_RULES:
        if rule.matches(text):
            return rule.reply
    if GREETING_PATTERN.match(text):
        return GREETING_REPLY
    return (
        "I'm having trouble reaching my full knowledge base right now. "
        "I can still help with using SOS, emergency contacts, location sharing, "
        "or general safety advice. Could you tell me a bit more?"
    )


def emergency_guidance(situation: str) -> str:
    text = situation.lower()
    for rule in EMERGENCY_RULES:
        if rule.matches(text):
            return rule.reply
    return DEFAULT_EMERGENCY_REPLY
