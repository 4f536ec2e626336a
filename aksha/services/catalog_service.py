"""Static safety catalogue: helplines and situation tips."""

from __future__ import annotations

from aksha.schemas.catalog import Helpline, SafetySituation

HELPLINES: tuple[Helpline, ...] = (
    Helpline(
        id="emergency",
        name="Emergency Services",
        number="112",
        description="National Emergency Number",
        category="emergency",
    ),
    Helpline(
        id="women",
        name="Women's Helpline",
        number="1091",
        description="National Women Commission Helpline",
        category="women",
    ),
    Helpline(
        id="domestic-violence",
        name="Domestic Violence",
        number="181",
        description="Women's Helpline Against Violence",
        category="women",
    ),
    Helpline(
        id="police",
        name="Police",
        number="100",
        description="Police Control Room",
        category="emergency",
    ),
    Helpline(
        id="ambulance",
        name="Ambulance",
        number="108",
        description="Emergency Medical Services",
        category="medical",
    ),
    Helpline(
        id="child",
        name="Child Helpline",
        number="1098",
        description="Childline for children in distress",
        category="support",
    ),
)

SAFETY_SITUATIONS: tuple[SafetySituation, ...] = (
    SafetySituation(
        id=1,
        title="Being Followed",
        description="What to do if you think someone is following you",
        tips=[
            "Stay calm and trust your instincts. If you feel unsafe, you probably are.",
            "Change your route and direction suddenly; see if they follow.",
            "Head to a public place with people around, like a store or restaurant.",
            "Call someone and tell them where you are and what's happening.",
            "Use SOS to alert your emergency contacts.",
            "If you're certain someone is following you, don't go home. Go to a police station.",
        ],
    ),
    SafetySituation(
        id=2,
        title="Domestic Abuse",
        description="Resources and steps for those experiencing abuse",
        tips=[
            "Your safety is the priority: develop a safety plan and escape route.",
            "Memorize important emergency numbers including local shelters.",
            "Keep important documents (ID, bank cards) accessible.",
            "Create code words with friends to signal when you need help.",
            "Contact a domestic violence hotline for professional guidance and support.",
        ],
    ),
    SafetySituation(
        id=3,
        title="Public Transport Safety",
        description="Stay safe while using buses, trains, and rideshares",
        tips=[
            "Sit near the driver or in view of the security camera.",
            "Share your trip details with a trusted contact including expected arrival time.",
            "Keep valuables hidden and bags secured close to your body.",
            "Verify driver identity and car details before entering a rideshare.",
        ],
    ),
    SafetySituation(
        id=4,
        title="Street Harassment",
        description="How to respond to unwanted attention or harassment",
        tips=[
            "Project confidence with body language.",
            "Set clear boundaries in a firm voice, then move away.",
            "Move toward other people or into a shop.",
            "Report the incident and, if it is safe, note the location.",
        ],
    ),
)


def list_helplines(category: str | None = None) -> list[Helpline]:
    if category is None:
        return list(HELPLINES)
    return [h for h in HELPLINES if h.category == category]


def list_situations() -> list[SafetySituation]:
    return list(SAFETY_SITUATIONS)


def get_situation(situation_id: int) -> SafetySituation | None:
    for situation in SAFETY_SITUATIONS:
        if situation.id == situation_id:
            return situation
    return None
