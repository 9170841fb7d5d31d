# -*- coding: utf-8 -*-

import pytest

from catalog.pipeline.router import AssistantSession, Intent, classify_intent, respond


@pytest.mark.parametrize(
    "command, expected",
    [
        ("Hello there", Intent.GREET),
        ("hi JARVIS", Intent.GREET),
        ("Show my catalog", Intent.CATALOG),
        ("open the sheet", Intent.CATALOG),
        ("what is the status", Intent.STATUS),
        ("Process it", Intent.PROCESS),
        ("fill the blanks", Intent.PROCESS),
        ("ENRICH NOW", Intent.PROCESS),
        ("help", Intent.HELP),
        ("what's the weather", Intent.UNKNOWN),
        ("", Intent.UNKNOWN),
    ],
)
def test_classify_intent(command: str, expected: Intent) -> None:
    assert classify_intent(command) == expected


def test_hi_inside_word_is_not_greeting() -> None:
    assert classify_intent("this is nothing") == Intent.UNKNOWN


def test_first_rule_wins() -> None:
    """'catalog' is checked before 'enrich'"""
    assert classify_intent("enrich my catalog") == Intent.CATALOG


def test_catalog_reply_without_upload() -> None:
    reply = respond("catalog", AssistantSession())
    assert reply.intent == Intent.CATALOG
    assert reply.message == "Please upload your catalog sheet first using the upload button."


def test_catalog_reply_with_rows() -> None:
    reply = respond("catalog", AssistantSession(catalog_rows=12))
    assert "12 items" in reply.message


def test_status_reply() -> None:
    reply = respond("status", AssistantSession(catalog_rows=3, raw_data="x"))
    assert reply.message.startswith("Catalog has 3 rows. Raw data is provided.")

    reply = respond("status", AssistantSession(catalog_rows=3, raw_data="  "))
    assert "Raw data is not provided." in reply.message


def test_process_reply_prompts_for_missing_inputs() -> None:
    assert respond("process", AssistantSession()).message == "Please upload your catalog sheet first."
    assert respond("process", AssistantSession(catalog_rows=1)).message == (
        "Please provide raw data for me to work with."
    )
    assert respond("process", AssistantSession(catalog_rows=1, raw_data="Nike")).message.startswith(
        "Processing your catalog"
    )


def test_unknown_reply_suggests_help() -> None:
    assert "Try saying 'help'" in respond("weather?", AssistantSession()).message
