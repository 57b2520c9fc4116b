"""
Local profile knowledge base — fast canned answers for portfolio / FAQ prompts.
"""

from typing import Optional, Tuple

# (triggers, reply) pairs. Order matters: the first rule with a matching
# trigger wins, so greetings shadow everything below them.
KB_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (
        ("hello", "hi", "hey"),
        "Hello! I am SK Pinkun — Kalu's virtual assistant. "
        "Ask me about his skills, projects, or contact info.",
    ),
    (
        ("kalu", "who are you", "name"),
        "Kalu Ch Sahu — DevOps & Network Security Engineer (B.Tech 5th Semester).",
    ),
    (
        ("skills", "skill", "tech stack"),
        "Skills: Azure AKS, Docker, Terraform, CI/CD, GitHub Actions, Python, Linux, Networking.",
    ),
    (
        ("education", "college"),
        "B.Tech in Computer Science at Gayatri College of Engineering (5th Semester).",
    ),
    (
        ("certi", "az-", "certification"),
        "Certifications: AZ-400 (DevOps), AZ-204, AZ-900.",
    ),
    (
        ("contact", "email", "phone"),
        "Email: kalusahu902@gmail.com — LinkedIn button on the page.",
    ),
    (
        ("project", "featured"),
        "Featured project: Secure Cloud Migration to Azure AKS with ingress & Azure Policy.",
    ),
)


def match_local(prompt: str) -> Optional[str]:
    """Return the canned reply for the first rule whose trigger occurs in `prompt`.

    Matching is plain substring containment on the lowercased prompt, so "hi"
    also fires inside words like "this". Returns None when no rule matches.
    """
    text = prompt.lower()
    for triggers, reply in KB_RULES:
        if any(t in text for t in triggers):
            return reply
    return None
