import copy

import pytest

from portfolio_gateway.services.knowledge_service import KB_RULES, match_local

GREETING, IDENTITY, SKILLS, EDUCATION, CERTS, CONTACT, PROJECTS = (reply for _, reply in KB_RULES)


@pytest.mark.parametrize(
    "prompt, expected",
    [
        ("Hello there", GREETING),
        ("HEY!", GREETING),
        ("Who are you?", IDENTITY),
        ("What is your NAME", IDENTITY),
        ("List your skills", SKILLS),
        ("What's the tech stack?", SKILLS),
        ("Where did he study? college?", EDUCATION),
        ("Any Certifications?", CERTS),
        ("Did he pass AZ-400", CERTS),
        ("contact details please", CONTACT),
        ("phone number please", CONTACT),
        ("Show me a featured PROJECT", PROJECTS),
    ],
)
def test_trigger_returns_fixed_reply(prompt, expected):
    assert match_local(prompt) == expected


def test_no_trigger_returns_none():
    assert match_local("Explain quantum computing") is None
    assert match_local("") is None


def test_first_rule_wins():
    assert match_local("hi, tell me about kalu") == GREETING
    assert match_local("kalu skills") == IDENTITY
    assert match_local("email about a project") == CONTACT


def test_substring_matching_is_not_word_bounded():
    # "this" contains "hi"
    assert match_local("what does this do") == GREETING


def test_idempotent():
    rules_before = copy.deepcopy(KB_RULES)
    prompt = "What are Kalu's skills?"
    assert match_local(prompt) == match_local(prompt)
    assert match_local("Explain recursion") is None
    assert match_local("Explain recursion") is None
    assert KB_RULES == rules_before
