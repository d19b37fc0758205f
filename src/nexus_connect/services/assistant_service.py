import json
import logging
import math
from datetime import datetime

from nexus_connect.core.exceptions import (
    CompletionError,
    CompletionUnavailableError,
    EmptyCompletionError,
)
from nexus_connect.models.assistant import DonationSuggestion, IntentAnalysis
from nexus_connect.models.submission import DONATION_FREQUENCIES
from nexus_connect.services import prompts
from nexus_connect.services.completion_client import CompletionClient

logger = logging.getLogger(__name__)


def parse_json_object(raw: str) -> dict:
    result = json.loads(raw)
    if not isinstance(result, dict):
        raise ValueError(f"Expected a JSON object, got {type(result).__name__}")
    return result


def _number(value, default: float) -> float:
    # bool is an int subclass; "true" is not a confidence
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    try:
        number = float(value)
    except OverflowError:
        return default
    # json.loads accepts NaN, Infinity and 1e400
    return number if math.isfinite(number) else default


class AssistantService:
    """Intent analysis, donation advice and chat for the assistant widget.

    Each call tries the language model first and answers from the keyword
    tables in :mod:`prompts` when the model is unavailable, errors out or
    returns something unparseable. None of these methods raise for
    upstream failures.
    """

    def __init__(self, completion_client: CompletionClient):
        self.completion_client = completion_client

    # ------------------------------------------------------------------
    # Intent
    # ------------------------------------------------------------------

    def analyze_intent(self, message: str, language: str = "fr") -> IntentAnalysis:
        year = datetime.now().year
        prompt = prompts.INTENT_PROMPT.format(year=year, message=message, language=language)

        try:
            result = parse_json_object(
                self.completion_client.complete(prompt, json_mode=True, max_tokens=256)
            )
        except CompletionUnavailableError:
            logger.info("Language model not configured, using keyword intent analysis")
            return self.analyze_intent_fallback(message, language)
        except (CompletionError, ValueError) as e:
            logger.error(f"Intent analysis error: {e}")
            return self.analyze_intent_fallback(message, language)

        intent = result.get("intent")
        if intent not in prompts.REDIRECT_PATHS:
            intent = "unclear"
        confidence = _number(result.get("confidence"), prompts.DEFAULT_MODEL_CONFIDENCE)
        suggestion = result.get("suggestion")
        if not isinstance(suggestion, str) or not suggestion.strip():
            suggestion = prompts.GENERIC_HELP[language]

        return IntentAnalysis(
            intent=intent,
            confidence=min(max(confidence, 0.0), 1.0),
            suggestion=suggestion,
            redirect_path=prompts.REDIRECT_PATHS[intent],
        )

    def analyze_intent_fallback(self, message: str, language: str = "fr") -> IntentAnalysis:
        lower_message = message.lower()

        for intent, confidence, keywords in prompts.INTENT_KEYWORDS:
            if any(keyword in lower_message for keyword in keywords):
                return IntentAnalysis(
                    intent=intent,
                    confidence=confidence,
                    suggestion=prompts.INTENT_SUGGESTIONS[intent][language],
                    redirect_path=prompts.REDIRECT_PATHS[intent],
                )

        return IntentAnalysis(
            intent="unclear",
            confidence=prompts.UNCLEAR_CONFIDENCE,
            suggestion=prompts.INTENT_SUGGESTIONS["unclear"][language],
            redirect_path=None,
        )

    # ------------------------------------------------------------------
    # Donation advice
    # ------------------------------------------------------------------

    def suggest_donation(self, message: str, language: str = "fr") -> DonationSuggestion:
        year = datetime.now().year
        prompt = prompts.DONATION_PROMPT.format(year=year, message=message, language=language)

        try:
            result = parse_json_object(
                self.completion_client.complete(prompt, json_mode=True, max_tokens=256)
            )
        except CompletionUnavailableError:
            logger.info("Language model not configured, using keyword donation advice")
            return self.suggest_donation_fallback(message, language)
        except (CompletionError, ValueError) as e:
            logger.error(f"Donation suggestion error: {e}")
            return self.suggest_donation_fallback(message, language)

        amount = _number(result.get("suggestedAmount"), prompts.DEFAULT_MODEL_DONATION)
        clamped = min(max(round(amount), prompts.MIN_DONATION_SUGGESTION), prompts.MAX_DONATION_SUGGESTION)
        if clamped != amount:
            logger.warning(f"Model suggested {amount}, clamped to {clamped}")

        frequency = result.get("frequency")
        if frequency not in DONATION_FREQUENCIES:
            frequency = "ponctuel"

        reason = result.get("reason")
        if not isinstance(reason, str) or not reason.strip():
            reason = prompts.DEFAULT_DONATION_BUCKET[3][language].format(year=year)
        text = result.get("message")
        if not isinstance(text, str) or not text.strip():
            text = prompts.DEFAULT_DONATION_MESSAGE[language]

        return DonationSuggestion(
            suggested_amount=clamped,
            frequency=frequency,
            reason=reason,
            message=text,
        )

    def suggest_donation_fallback(self, message: str, language: str = "fr") -> DonationSuggestion:
        lower_message = message.lower()
        year = datetime.now().year

        bucket = next(
            (b for b in prompts.DONATION_BUCKETS if any(cue in lower_message for cue in b[0])),
            prompts.DEFAULT_DONATION_BUCKET,
        )
        _, amount, frequency, reasons, messages = bucket

        return DonationSuggestion(
            suggested_amount=amount,
            frequency=frequency,
            reason=reasons[language].format(year=year),
            message=messages[language],
        )

    # ------------------------------------------------------------------
    # Chat
    # ------------------------------------------------------------------

    def chat(self, message: str, context: str | None = None, language: str = "fr") -> str:
        prompt = prompts.CHAT_PROMPT.format(
            year=datetime.now().year,
            context=f"Context: {context}" if context else "",
            language=language,
            message=message,
        )

        try:
            return self.completion_client.complete(prompt, max_tokens=150)
        except CompletionUnavailableError:
            logger.info("Language model not configured, chat is offline")
            return prompts.CHAT_OFFLINE[language]
        except EmptyCompletionError:
            return prompts.CHAT_EMPTY[language]
        except CompletionError as e:
            logger.error(f"Chat error: {e}")
            return prompts.CHAT_ERROR[language]
