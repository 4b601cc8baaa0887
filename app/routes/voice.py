from flask import Blueprint, Response, request
from twilio.twiml.voice_response import Gather, VoiceResponse

from parking.intents import wants_parking

from ..assistant import generate_reply
from ..db import (
    clear_call,
    get_last_assistant_message,
    pop_pending_text,
    save_message,
    set_pending_text,
)

voice_bp = Blueprint("voice", __name__)

VOICE = "Polly.Joanna"
_GREETING = (
    "Hello! Thanks for calling the driveway parking line. "
    "Ask me where you can park, for example near Market Street tomorrow at 2pm."
)
_NOT_HEARD = "Sorry, I didn't catch that. Please say that again."
_GOODBYE = "Thanks for calling. Feel free to call again if you need a spot. Goodbye."

_END_CALL_PHRASES = (
    "thanks for your time",
    "thank you for your time",
    "goodbye",
    "good bye",
    "bye",
    "see you",
    "talk to you later",
    "have a good day",
    "have a nice day",
    "thanks anyway",
    "call you back",
    "i'll call back",
    "maybe later",
    "not interested",
)

_REPEAT_PHRASES = (
    "say again",
    "say that again",
    "repeat that",
    "repeat it",
    "can you repeat",
    "could you repeat",
    "i didn't hear",
    "i didn't catch",
    "what did you say",
    "come again",
    "pardon",
)


def should_end_call(user_text):
    if not user_text:
        return False
    lowered = user_text.lower()
    return any(phrase in lowered for phrase in _END_CALL_PHRASES)


def should_repeat(user_text):
    if not user_text:
        return False
    lowered = user_text.lower()
    return any(phrase in lowered for phrase in _REPEAT_PHRASES)


def build_gather():
    return Gather(
        input="speech",
        action="/voice/respond",
        method="POST",
        speech_timeout="auto",
    )


def _twiml(resp):
    return Response(str(resp), mimetype="text/xml")


def _say_and_listen(resp, text):
    resp.say(text, voice=VOICE)
    resp.append(build_gather())
    resp.redirect("/voice", method="POST")
    return _twiml(resp)


def _not_heard(resp):
    resp.say(_NOT_HEARD, voice=VOICE)
    resp.redirect("/voice", method="POST")
    return _twiml(resp)


def _hang_up(resp, call_sid):
    resp.say(_GOODBYE, voice=VOICE)
    resp.hangup()
    if call_sid:
        clear_call(call_sid)
    return _twiml(resp)


@voice_bp.route("/voice", methods=["POST"])
def voice():
    resp = VoiceResponse()
    gather = build_gather()
    gather.say(_GREETING, voice=VOICE)
    resp.append(gather)
    resp.redirect("/voice", method="POST")
    return _twiml(resp)


@voice_bp.route("/voice/respond", methods=["POST"])
def voice_respond():
    call_sid = request.form.get("CallSid")
    user_text = request.form.get("SpeechResult", "").strip()
    resp = VoiceResponse()
    if not user_text:
        return _not_heard(resp)

    if should_end_call(user_text):
        return _hang_up(resp, call_sid)

    if should_repeat(user_text):
        last_reply = get_last_assistant_message(call_sid) if call_sid else ""
        if not last_reply:
            last_reply = "Sorry, I don't have that handy. Could you repeat your question?"
        return _say_and_listen(resp, last_reply)

    if call_sid and wants_parking(user_text):
        save_message(call_sid, "user", user_text)
        set_pending_text(call_sid, user_text)
        resp.say("Sure, let me check for you.", voice=VOICE)
        resp.redirect("/voice/answer", method="POST")
        return _twiml(resp)

    reply = generate_reply(user_text, call_sid=call_sid, save_user=True)
    return _say_and_listen(resp, reply)


@voice_bp.route("/voice/answer", methods=["POST"])
def voice_answer():
    call_sid = request.form.get("CallSid")
    resp = VoiceResponse()
    user_text = pop_pending_text(call_sid) if call_sid else ""
    if not user_text:
        return _not_heard(resp)

    reply = generate_reply(user_text, call_sid=call_sid, save_user=False)
    return _say_and_listen(resp, reply)
