import os

from dotenv import load_dotenv

load_dotenv()

DB_PATH = os.environ.get("CHAT_DB_PATH") or (
    "/tmp/chat.db" if os.environ.get("VERCEL") else "chat.db"
)
LISTINGS_CSV_PATH = os.environ.get("LISTINGS_CSV_PATH") or os.path.join(
    os.path.dirname(os.path.dirname(__file__)), "data", "driveway_listings.csv"
)
try:
    HISTORY_LIMIT = int(os.environ.get("CHAT_HISTORY_LIMIT", "20"))
except ValueError:
    HISTORY_LIMIT = 20
MODEL = os.environ.get("OPENAI_MODEL", "gpt-4o-mini")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
SUPPORT_CONTACT = os.environ.get("SUPPORT_CONTACT", "support@easypark.com")
SYSTEM_PROMPT = (
    "You are a friendly assistant for a driveway parking marketplace where homeowners rent "
    "out their driveways by the hour. Keep responses concise and natural. "
    "Help drivers understand how searching, booking and paying for a driveway works, and "
    "help homeowners understand how listing a driveway works. "
    "Do not invent addresses, prices or availability; if asked about availability, ask the "
    "caller for a location, a date and a time. "
    "If random questions are asked, try to bring the topic back to parking. "
    "Do not generate super long sentences, and response is suitable for being read aloud."
)
HELP_MESSAGE = (
    "I can help you find available parking. Try asking 'Is there parking near downtown?' "
    "or 'Is there parking near market tomorrow at 10am?'"
)
SUPPORT_MESSAGE = (
    "For customer support, please contact us at {contact} or use the "
    '"Contact Us" form on our website.'
)
UNAVAILABLE_MESSAGE = (
    "I'm sorry, I couldn't check parking availability at the moment. "
    "Please try again with specific location and time details."
)
ERROR_MESSAGE = "Sorry, I'm having trouble right now. Please try again."
