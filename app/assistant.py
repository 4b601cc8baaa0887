import logging
import os
import sqlite3

from openai import OpenAI, OpenAIError

from parking.context import resolve_query
from parking.intents import PARKING_AVAILABILITY, SUPPORT, detect_intent
from parking.listings import load_listings

from . import config
from .db import load_messages, save_message

logger = logging.getLogger(__name__)


def check_availability(user_text):
    try:
        listings = load_listings(config.LISTINGS_CSV_PATH)
    except OSError:
        logger.exception("Could not load listings from %s", config.LISTINGS_CSV_PATH)
        return config.UNAVAILABLE_MESSAGE
    return resolve_query(user_text, listings)


def _chat_completion(user_text, history):
    api_key = os.environ.get("OPENAI_API_KEY")
    if not api_key:
        return config.HELP_MESSAGE

    client = OpenAI(api_key=api_key)
    messages = [{"role": "system", "content": config.SYSTEM_PROMPT}]
    messages.extend(history)
    if not history or history[-1] != {"role": "user", "content": user_text}:
        messages.append({"role": "user", "content": user_text})
    completion = client.chat.completions.create(
        model=config.MODEL,
        messages=messages,
        temperature=0,
    )
    reply = (completion.choices[0].message.content or "").strip()
    return reply or "Sorry, I don't have a response right now."


def answer_query(user_text, history=None):
    intent = detect_intent(user_text)
    if intent == PARKING_AVAILABILITY:
        return intent, check_availability(user_text)
    if intent == SUPPORT:
        return intent, config.SUPPORT_MESSAGE.format(contact=config.SUPPORT_CONTACT)
    try:
        return intent, _chat_completion(user_text, history or [])
    except OpenAIError:
        logger.exception("Chat completion failed")
        return intent, config.ERROR_MESSAGE


def generate_reply(user_text, call_sid=None, save_user=True):
    if not call_sid:
        return answer_query(user_text)[1]
    try:
        if save_user and user_text:
            save_message(call_sid, "user", user_text)
        _, reply = answer_query(user_text, history=load_messages(call_sid))
        save_message(call_sid, "assistant", reply)
    except sqlite3.Error:
        logger.exception("Conversation store failed for call %s", call_sid)
        return config.ERROR_MESSAGE
    return reply
