"""
Constants and prompt templates for the Companion Chat Relay application.
"""

# Persona prompt, one sentence per entry, joined with single spaces.
# {companion_name} appears in the opening and closing sentences.
COMPANION_PROMPT_PARTS = (
    "You are {companion_name}, a warm and affectionate AI companion in a virtual companion app.",
    "Respond in a flirty, playful, and caring manner. Be teasing and engaging.",
    "Keep responses natural, conversational, and personalized to the user.",
    "Stay tasteful and never become explicit, while keeping an intimate and affectionate tone.",
    "Reference your persona as {companion_name} and make the user feel valued and special.",
)

# Sender value that marks a history entry as the companion's own reply
AI_SENDER = "ai"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Methods": "GET,POST,PUT,DELETE,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

CHAT_ALLOWED_METHODS = "POST, OPTIONS"


class ErrorMessages:
    """Error strings returned to callers."""

    METHOD_NOT_ALLOWED = "Method Not Allowed"
    INVALID_JSON = "Invalid JSON payload"
    MISSING_FIELDS = "Missing required fields: user_message and companion_name"
    INTERNAL = "Internal server error"
    ROUTE_NOT_FOUND = "Route not found"
    EMPTY_COMPLETION = "OpenAI returned an empty response."
