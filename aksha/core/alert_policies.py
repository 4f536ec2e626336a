"""SOS alert policy constants."""

from __future__ import annotations

# Maximum number of emergency contacts that can be selected
MAX_SELECTED_CONTACTS = 5

# First line of every SOS text
EMERGENCY_PREAMBLE = "EMERGENCY! I need help. This is an SOS alert from Aksha."

# Sent instead of a maps link when no location sample is available
LOCATION_UNAVAILABLE_TEXT = "My location is unavailable right now. Please call me immediately."

MAPS_URL_TEMPLATE = "https://maps.google.com/?q={latitude:.6f},{longitude:.6f}"

# Message attached to the server-side SOS flag
BACKEND_SOS_MESSAGE = "I need help! This is my current location."

# Separators accepted between numbers in an sms: URI
SMS_NUMBER_SEPARATORS = (";", "&")
