# -*- coding: utf-8 -*-
"""
Command Router

Keyword-trigger intent classification for the chat / voice front-end, plus
the canned replies it reads back. Dispatch only; never runs enrichment.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

PLATFORM_NAMES = "Amazon, Flipkart, Meesho, and Myntra"


class Intent(Enum):
    """Front-end command intents"""

    GREET = "greet"
    CATALOG = "catalog"
    STATUS = "status"
    PROCESS = "process"
    HELP = "help"
    UNKNOWN = "unknown"


# Checked in order; first rule with a matching trigger wins.
_INTENT_RULES: tuple[tuple[Intent, tuple[str, ...]], ...] = (
    (Intent.GREET, ("hello",)),
    (Intent.CATALOG, ("catalog", "sheet")),
    (Intent.STATUS, ("status",)),
    (Intent.PROCESS, ("process", "fill", "enrich")),
    (Intent.HELP, ("help",)),
)

# "hi" only as a whole word so "this" / "which" do not greet.
_HI_PATTERN = re.compile(r"\bhi\b")


@dataclass
class AssistantSession:
    """What the front-end currently holds"""

    catalog_rows: int = 0
    raw_data: str = ""

    @property
    def has_raw_data(self) -> bool:
        return bool(self.raw_data and self.raw_data.strip())


@dataclass
class AssistantReply:
    intent: Intent
    message: str


def classify_intent(command: str) -> Intent:
    """
    Examples:
        >>> classify_intent("Please enrich my listings")
        <Intent.PROCESS: 'process'>
    """
    lowered = (command or "").lower()
    if _HI_PATTERN.search(lowered):
        return Intent.GREET
    for intent, triggers in _INTENT_RULES:
        if any(trigger in lowered for trigger in triggers):
            return intent
    return Intent.UNKNOWN


def respond(command: str, session: AssistantSession) -> AssistantReply:
    """Classify a command and build the reply for the current session."""
    intent = classify_intent(command)

    if intent == Intent.GREET:
        message = (
            "Hello! I'm your catalog assistant. I can help you manage your e-commerce "
            f"catalogs for {PLATFORM_NAMES}. Upload your catalog sheet and raw data, "
            "and I'll enrich it for you."
        )
    elif intent == Intent.CATALOG:
        if session.catalog_rows == 0:
            message = "Please upload your catalog sheet first using the upload button."
        else:
            message = (
                f"I have loaded {session.catalog_rows} items in your catalog. "
                "You can now provide raw data for me to fill in the details."
            )
    elif intent == Intent.STATUS:
        provided = "provided" if session.has_raw_data else "not provided"
        message = (
            f"Catalog has {session.catalog_rows} rows. Raw data is {provided}. "
            "Ready to process when you give the command."
        )
    elif intent == Intent.PROCESS:
        if session.catalog_rows == 0:
            message = "Please upload your catalog sheet first."
        elif not session.has_raw_data:
            message = "Please provide raw data for me to work with."
        else:
            message = (
                "Processing your catalog with the provided data. "
                "This will enrich your product listings for all platforms."
            )
    elif intent == Intent.HELP:
        message = (
            f"I can help you with catalog management for {PLATFORM_NAMES}. "
            "Upload your catalog sheet, provide raw product data, and I'll enrich it "
            "with proper titles, descriptions, prices, and attributes suitable for each platform."
        )
    else:
        message = (
            "I'm here to help with your e-commerce catalog management. "
            "Try saying 'help' to learn what I can do."
        )

    return AssistantReply(intent=intent, message=message)
