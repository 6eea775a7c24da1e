"""
Heuristic commit summaries for yday.

Turns a repository's commit messages into a short story such as
"Building auth & api" or "Fixing login, token". Pure string work;
no language model involved.
"""

import re
from collections import Counter
from typing import List

from yday.models.entities import RepositoryActivity, RepositorySummary

MAX_SUMMARY_LENGTH = 35
NO_COMMITS_SUMMARY = "No meaningful commits"

PRIMARY_ACTIONS = {
    'feat': "Building",
    'fix': "Fixing",
    'refactor': "Refactoring",
    'update': "Updating",
    'add': "Adding",
    'chore': "Maintaining",
}
DEFAULT_ACTION = "Working on"

FEATURE_PATTERN = re.compile(
    r'\b(auth|login|user|api|database|test|ui|component|service|model|controller|'
    r'config|deploy|docker|security|payment|notification|search|mobile|performance|'
    r'documentation|integration)\w*\b',
    re.IGNORECASE,
)

# (pattern, replacement) applied in order to every message
MESSAGE_CLEANUPS = [
    (re.compile(r'^Merge pull request.*$'), ''),
    (re.compile(r'^Merge branch.*$'), ''),
    (re.compile(r'^WIP\s*:'), ''),
    (re.compile(r'^[Ff]ix\s*:'), 'fix:'),
    (re.compile(r'^[Aa]dd\s*:'), 'add:'),
    (re.compile(r'^[Uu]pdate\s*:'), 'update:'),
    (re.compile(r'^[Ff]eat\s*:'), 'feat:'),
    (re.compile(r'^[Ff]eature\s*:'), 'feat:'),
]

STOP_WORDS = frozenset(
    "this that with from into have been were will your they when what also some "
    "work more file code line text data info item part side main full very most "
    "many much less same each only just good best make made need want take come "
    "know think look find give keep turn move show help call might could would "
    "should still after before where there here back down over such being doing "
    "going".split()
)


def clean_messages(messages: List[str]) -> List[str]:
    """Drop merge noise and normalize conventional prefixes."""
    cleaned = []
    for message in messages:
        for pattern, replacement in MESSAGE_CLEANUPS:
            message = pattern.sub(replacement, message)
        message = message.strip()
        if message:
            cleaned.append(message)
    return cleaned


def extract_commit_types(messages: List[str]) -> List[str]:
    """Conventional commit types, most frequent first."""
    counts = Counter()
    for message in messages:
        match = re.match(r'^([a-z]+):', message)
        if match:
            counts[match.group(1)] += 1
    return [commit_type for commit_type, _ in counts.most_common()]


def extract_key_features(messages: List[str]) -> List[str]:
    """Up to three feature words (auth, api, ui, ...), most frequent first."""
    counts = Counter()
    for message in messages:
        for match in FEATURE_PATTERN.finditer(message):
            counts[match.group(0).lower()] += 1
    return [feature for feature, _ in counts.most_common(3)]


def determine_primary_action(commit_types: List[str]) -> str:
    if not commit_types:
        return DEFAULT_ACTION
    return PRIMARY_ACTIONS.get(commit_types[0], DEFAULT_ACTION)


def extract_meaningful_terms(messages: List[str]) -> List[str]:
    """The two most frequent words of four letters or more, minus stop words."""
    counts = Counter()
    for message in messages:
        for word in re.findall(r'\b[a-z]{4,}\b', message.lower()):
            if word not in STOP_WORDS:
                counts[word] += 1
    return [term for term, _ in counts.most_common(2)]


def find_best_commit_message(messages: List[str]) -> str:
    """First message that is descriptive but not too long, or ''."""
    for message in messages:
        without_type = re.sub(r'^[a-z]*:', '', message).strip()
        if 10 < len(without_type) < 50:
            return message
    return ''


def clean_and_capitalize(text: str) -> str:
    cleaned = re.sub(r'\s+', ' ', text).strip()
    return cleaned[:1].upper() + cleaned[1:]


def generate_summary(messages: List[str]) -> str:
    """
    Summarize commit messages in a few words.

    Prefers "<action> <feature> & <feature>", then "<action> <terms>",
    then a trimmed descriptive message, then "Code changes".
    """
    cleaned = clean_messages(messages or [])
    if not cleaned:
        return NO_COMMITS_SUMMARY

    action = determine_primary_action(extract_commit_types(cleaned))
    features = extract_key_features(cleaned)

    if features:
        story = f"{action} {features[0]}"
        if len(features) > 1 and features[1] != features[0]:
            story = f"{story} & {features[1]}"
    else:
        terms = extract_meaningful_terms(cleaned)
        if terms:
            story = f"{action} {', '.join(terms)}"
        else:
            best = find_best_commit_message(cleaned)
            if best:
                story = re.sub(r'^[a-z]*:', '', best).strip()[:30]
            else:
                story = "Code changes"

    story = clean_and_capitalize(story)
    if len(story) > MAX_SUMMARY_LENGTH:
        return story[:MAX_SUMMARY_LENGTH - 3] + "..."
    return story


def summarize(activities: List[RepositoryActivity]) -> List[RepositorySummary]:
    """One summary per repository, in input order."""
    return [
        RepositorySummary(
            repository_name=repo.repository_name,
            commit_count=repo.commit_count,
            summary=generate_summary([c.message for c in repo.commits]),
        )
        for repo in activities
    ]
