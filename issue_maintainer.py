#!/usr/bin/env python3
"""
GitHub Issue Maintainer

This script scans issues in GitHub repositories and applies maintenance
actions to them based on a declarative list of directives:
- Labeling issues that have been closed or untouched for a number of days
- Posting a comment and closing stale issues
- Locking old closed issues

Each configuration entry names an owner, an optional list of repositories
(all repositories of the owner when empty) and an ordered list of directives.
Directives are independent: one issue can be labeled, commented on, closed
and locked within the same run. Locked issues are never touched.

No state is kept between runs; every decision is derived from the current
GitHub data and the wall-clock time.
"""

import argparse
import functools
import logging
import os
import sys
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Iterable, Iterator, List, Optional

import yaml
from github import Github, GithubException
from jinja2 import Template, TemplateError, TemplateSyntaxError


logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    stream=sys.stdout
)
logger = logging.getLogger(__name__)


# Page size used for every listing and search request
PAGE_SIZE = 100

# Retry policy for mutations
MAX_ATTEMPTS = 5

DEFAULT_CONFIG_PATH = 'config.yaml'
DEFAULT_LOCK_REASON = 'resolved'

VALID_STATES = ('open', 'closed', 'all')

SECONDS_PER_DAY = 24 * 60 * 60

# Exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIGURATION_ERROR = 2


class MaintenanceError(Exception):
    """Base class for errors that abort a maintenance run."""


class ConfigurationError(MaintenanceError):
    """Raised when configuration is invalid or missing required fields."""


class TransportError(MaintenanceError):
    """Raised when listing repositories or issues from GitHub fails."""


class MutationError(MaintenanceError):
    """Raised when a change to an issue still fails after all retries."""


# Failures worth retrying. requests' connection errors derive from OSError.
RETRYABLE_EXCEPTIONS = (GithubException, OSError)


# =============================================================================
# Data Model
# =============================================================================


@dataclass(frozen=True)
class Directive:
    query: Optional[str] = None
    state: Optional[str] = None
    days_closed: int = 0
    days_not_updated: int = 0
    label: Optional[str] = None
    lock: bool = False
    close: bool = False
    close_comment: Optional[str] = None


@dataclass(frozen=True)
class ConfigEntry:
    owner: str
    repos: tuple = ()
    directives: tuple = ()


@dataclass(frozen=True)
class Issue:
    number: int
    state: str
    locked: bool
    closed_at: Optional[datetime]
    updated_at: Optional[datetime]
    labels: frozenset
    title: str = ''


@dataclass(frozen=True)
class LabelAction:
    label: str
    kind = 'label'


@dataclass(frozen=True)
class CommentAction:
    body: str
    kind = 'comment'


@dataclass(frozen=True)
class CloseAction:
    kind = 'close'


@dataclass(frozen=True)
class LockAction:
    kind = 'lock'


# Summary counter incremented for each applied action kind
ACTION_SUMMARY_KEYS = {
    'label': 'labels_added',
    'comment': 'comments_posted',
    'close': 'issues_closed',
    'lock': 'issues_locked',
}


# =============================================================================
# Configuration
# =============================================================================


_ENTRY_FIELDS = {
    'owner': 'owner',
    'repos': 'repos',
    'directives': 'directives',
}

_DIRECTIVE_FIELDS = {
    'query': 'query',
    'state': 'state',
    'daysclosed': 'days_closed',
    'daysnotupdated': 'days_not_updated',
    'label': 'label',
    'lock': 'lock',
    'close': 'close',
    'closecomment': 'close_comment',
}


def _normalize_key(key) -> str:
    """Fold a config key so that daysClosed, DaysClosed and days_closed match."""
    return str(key).replace('_', '').replace('-', '').lower()


def _map_fields(raw: dict, fields: dict, where: str) -> dict:
    """
    Translate the keys of a raw config mapping to attribute names.

    Args:
        raw: Mapping loaded from the configuration file
        fields: Normalized key to attribute name table
        where: Location of the mapping, used in error messages

    Returns:
        Dictionary keyed by attribute name

    Raises:
        ConfigurationError: If the mapping has unknown or duplicated keys
    """
    if not isinstance(raw, dict):
        raise ConfigurationError(f"{where} must be a mapping")

    mapped = {}
    for key, value in raw.items():
        name = fields.get(_normalize_key(key))
        if name is None:
            raise ConfigurationError(f"Unknown key '{key}' in {where}")
        if name in mapped:
            raise ConfigurationError(f"Duplicate key '{key}' in {where}")
        mapped[name] = value
    return mapped


def _optional_string(value, name: str, where: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"'{name}' in {where} must be a string")
    return value or None


def _day_count(value, name: str, where: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigurationError(
            f"'{name}' in {where} must be a non-negative integer, got {value!r}"
        )
    return value


def _flag(value, name: str, where: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ConfigurationError(f"'{name}' in {where} must be true or false")
    return value


def parse_directive(raw: dict, where: str = 'directive') -> Directive:
    """
    Build a Directive from its configuration mapping.

    Args:
        raw: Mapping with any of query, state, daysClosed, daysNotUpdated,
            label, lock, close and closeComment
        where: Location of the directive, used in error messages

    Returns:
        The parsed Directive

    Raises:
        ConfigurationError: If a field has the wrong type or value
    """
    fields = _map_fields(raw, _DIRECTIVE_FIELDS, where)

    state = _optional_string(fields.get('state'), 'state', where)
    if state is not None and state not in VALID_STATES:
        raise ConfigurationError(
            f"'state' in {where} must be one of {', '.join(VALID_STATES)}, got '{state}'"
        )

    close_comment = _optional_string(fields.get('close_comment'), 'closeComment', where)
    if close_comment is not None:
        try:
            Template(close_comment)
        except TemplateSyntaxError as e:
            raise ConfigurationError(f"Invalid 'closeComment' template in {where}: {e}") from e

    return Directive(
        query=_optional_string(fields.get('query'), 'query', where),
        state=state,
        days_closed=_day_count(fields.get('days_closed'), 'daysClosed', where),
        days_not_updated=_day_count(fields.get('days_not_updated'), 'daysNotUpdated', where),
        label=_optional_string(fields.get('label'), 'label', where),
        lock=_flag(fields.get('lock'), 'lock', where),
        close=_flag(fields.get('close'), 'close', where),
        close_comment=close_comment,
    )


def parse_entry(raw: dict, index: int = 0) -> ConfigEntry:
    """
    Build a ConfigEntry from its configuration mapping.

    Args:
        raw: Mapping with owner, repos and directives
        index: Position of the entry in the configuration, used in error messages

    Returns:
        The parsed ConfigEntry

    Raises:
        ConfigurationError: If the owner is missing or a field is malformed
    """
    where = f"entry #{index + 1}"
    fields = _map_fields(raw, _ENTRY_FIELDS, where)

    owner = fields.get('owner')
    if not owner or not isinstance(owner, str):
        raise ConfigurationError(f"Every config entry must set `owner` ({where})")
    where = f"entry #{index + 1} ({owner})"

    repos = fields.get('repos') or []
    if not isinstance(repos, list) or not all(isinstance(r, str) and r for r in repos):
        raise ConfigurationError(f"'repos' in {where} must be a list of repository names")

    directives = fields.get('directives') or []
    if not isinstance(directives, list):
        raise ConfigurationError(f"'directives' in {where} must be a list")

    return ConfigEntry(
        owner=owner,
        repos=tuple(repos),
        directives=tuple(
            parse_directive(d, f"directive #{i + 1} of {where}")
            for i, d in enumerate(directives)
        ),
    )


def parse_entries(config: dict) -> List[ConfigEntry]:
    """Parse every entry of a loaded configuration, preserving order."""
    return [parse_entry(raw, i) for i, raw in enumerate(config.get('entries') or [])]


def validate_config(config: dict) -> None:
    """
    Validate that the configuration is well formed.

    Args:
        config: Configuration dictionary to validate

    Raises:
        ConfigurationError: If required keys are missing or malformed
    """
    if not config:
        raise ConfigurationError("Configuration is empty")

    if not isinstance(config, dict):
        raise ConfigurationError("Configuration must be a list of entries or a mapping")

    unknown = set(config) - {'entries', 'github'}
    if unknown:
        raise ConfigurationError(
            f"Unknown top-level configuration key(s): {', '.join(sorted(map(str, unknown)))}"
        )

    github_section = config.get('github')
    if github_section is not None and not isinstance(github_section, dict):
        raise ConfigurationError("'github' section must be a mapping")

    entries = config.get('entries')
    if not entries:
        raise ConfigurationError("No entries configured. Add at least one entry with an `owner`.")
    if not isinstance(entries, list):
        raise ConfigurationError("'entries' must be a list")

    parse_entries(config)


def load_config(config_path: str) -> dict:
    """
    Load and validate configuration from a YAML (or JSON) file.

    A document that is a plain list is treated as the list of entries.
    """
    with open(config_path, 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f)
    if isinstance(config, list):
        config = {'entries': config}
    validate_config(config)
    return config


# =============================================================================
# GitHub Issue Store
# =============================================================================


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def issue_from_github(gh_issue) -> Issue:
    """Take a snapshot of a PyGithub Issue object."""
    return Issue(
        number=gh_issue.number,
        state=gh_issue.state,
        locked=bool(gh_issue.locked),
        closed_at=_as_utc(gh_issue.closed_at),
        updated_at=_as_utc(gh_issue.updated_at),
        labels=frozenset(label.name for label in gh_issue.labels),
        title=gh_issue.title or '',
    )


class GitHubIssueStore:
    """
    Thin adapter over a PyGithub client exposing the calls the bot needs.

    Listing and search methods return lazily paginated iterables; requests
    are only made while iterating. Mutations raise GithubException on failure.
    """

    def __init__(self, gh):
        self.gh = gh

    def _repo(self, owner: str, repo: str):
        return self.gh.get_repo(f"{owner}/{repo}")

    def list_repositories(self, owner: str) -> Iterable:
        return self.gh.get_user(owner).get_repos()

    def list_issues(self, owner: str, repo: str, state: Optional[str] = None) -> Iterable:
        if state:
            return self._repo(owner, repo).get_issues(state=state)
        return self._repo(owner, repo).get_issues()

    def search_issues(self, query: str) -> Iterable:
        return self.gh.search_issues(query, sort='created', order='asc')

    def add_label(self, owner: str, repo: str, number: int, label: str) -> None:
        self._repo(owner, repo).get_issue(number).add_to_labels(label)

    def set_state(self, owner: str, repo: str, number: int, state: str) -> None:
        self._repo(owner, repo).get_issue(number).edit(state=state)

    def create_comment(self, owner: str, repo: str, number: int, body: str) -> None:
        self._repo(owner, repo).get_issue(number).create_comment(body)

    def lock(self, owner: str, repo: str, number: int) -> None:
        self._repo(owner, repo).get_issue(number).lock(DEFAULT_LOCK_REASON)


def create_github_store(token: str, api_url: Optional[str] = None) -> GitHubIssueStore:
    """
    Create and authenticate a GitHub client wrapped in a GitHubIssueStore.

    Args:
        token: GitHub personal access token
        api_url: Optional API base URL for GitHub Enterprise

    Returns:
        Authenticated GitHubIssueStore

    Raises:
        ConfigurationError: If no token is given or authentication fails
    """
    if not token:
        raise ConfigurationError(
            "A GitHub token is required. Pass --token, set GITHUB_TOKEN "
            "or add 'token' to the 'github' config section."
        )
    # retry=None: reads must fail fast and writes go through execute_with_retry only.
    # lazy=True: get_repo/get_issue build objects without fetching them first.
    try:
        if api_url:
            gh = Github(
                login_or_token=token, base_url=api_url, per_page=PAGE_SIZE,
                retry=None, lazy=True
            )
        else:
            gh = Github(login_or_token=token, per_page=PAGE_SIZE, retry=None, lazy=True)
        # Verify authentication by fetching the authenticated user
        gh.get_user().login
    except GithubException as e:
        raise ConfigurationError(
            f"Failed to authenticate with GitHub: {e.data.get('message', str(e)) if isinstance(e.data, dict) else str(e)}"
        ) from e
    return GitHubIssueStore(gh)


def _iterate_remote(items: Callable[[], Iterable], description: str) -> Iterator:
    """
    Yield from a lazily paginated listing, turning fetch failures into TransportError.

    Args:
        items: Callable returning the iterable to consume
        description: What is being listed, used in error messages
    """
    try:
        for item in items():
            yield item
    except RETRYABLE_EXCEPTIONS as e:
        logger.error(f"Listing {description} failed: {e}")
        raise TransportError(f"Listing {description} failed: {e}") from e


# =============================================================================
# Issue Selection
# =============================================================================


def build_search_query(owner: str, repo: str, query: str) -> str:
    """Scope a search query fragment to a single repository."""
    return f"{query} repo:{owner}/{repo}"


def select_issues(store, owner: str, repo: str, directive: Directive) -> List[Issue]:
    """
    Fetch the candidate issues a directive is evaluated against.

    When the directive has a query, the issue search is used (oldest first);
    otherwise the repository's issues are listed, filtered by the directive's
    state when one is set.

    Args:
        store: GitHubIssueStore (or compatible) to read from
        owner: Repository owner
        repo: Repository name
        directive: Directive being processed

    Returns:
        List of issue snapshots in the order GitHub returned them

    Raises:
        TransportError: If any page cannot be fetched
    """
    if directive.query:
        search_query = build_search_query(owner, repo, directive.query)
        logger.debug(f"Searching issues: {search_query}")
        listing = functools.partial(store.search_issues, search_query)
        description = f"issues matching '{search_query}'"
    else:
        listing = functools.partial(store.list_issues, owner, repo, directive.state)
        description = f"{directive.state or 'default state'} issues of {owner}/{repo}"

    return [issue_from_github(i) for i in _iterate_remote(listing, description)]


# =============================================================================
# Directive Evaluation
# =============================================================================


def days_since(moment: Optional[datetime], now: datetime) -> Optional[int]:
    """
    Count the whole 24-hour periods between moment and now.

    Naive datetimes are taken to be UTC. Returns None when moment is unknown.
    """
    if moment is None:
        return None
    elapsed = _as_utc(now) - _as_utc(moment)
    return int(elapsed.total_seconds() // SECONDS_PER_DAY)


def _younger_than(moment: Optional[datetime], days: int, now: datetime) -> bool:
    # An unknown timestamp never satisfies an age cutoff.
    age = days_since(moment, now)
    return age is None or age < days


def render_comment(directive: Directive, issue: Issue) -> str:
    """
    Render a directive's close comment for one issue.

    Raises:
        ConfigurationError: If the template fails while rendering
    """
    try:
        template = Template(directive.close_comment)
        return template.render(
            issue=issue,
            days_closed=directive.days_closed,
            days_not_updated=directive.days_not_updated,
        )
    except (TemplateError, ArithmeticError, TypeError, ValueError) as e:
        raise ConfigurationError(
            f"Could not render 'closeComment' for issue #{issue.number}: {e}"
        ) from e


def evaluate_directive(issue: Issue, directive: Directive, now: datetime) -> list:
    """
    Decide which actions a directive calls for on one issue.

    Has no side effects: the same issue, directive and time always give the
    same actions.

    An issue with no closed_at (never closed) or no updated_at does not meet
    a daysClosed or daysNotUpdated cutoff. A missing date is not read as
    "infinitely old", so a daysClosed directive never acts on open issues.

    Args:
        issue: Issue snapshot
        directive: Directive to evaluate
        now: Current time

    Returns:
        Ordered list of LabelAction, CommentAction, CloseAction and LockAction
    """
    # Never touch locked issues
    if issue.locked:
        return []
    if directive.days_closed > 0 and _younger_than(issue.closed_at, directive.days_closed, now):
        return []
    if directive.days_not_updated > 0 and _younger_than(
        issue.updated_at, directive.days_not_updated, now
    ):
        return []

    actions = []
    if directive.label and directive.label not in issue.labels:
        actions.append(LabelAction(directive.label))

    if directive.close and issue.state != 'closed':
        # The comment goes first so it is posted on the open issue
        if directive.close_comment:
            actions.append(CommentAction(render_comment(directive, issue)))
        actions.append(CloseAction())

    if directive.lock:
        actions.append(LockAction())

    return actions


# =============================================================================
# Retrying Mutations
# =============================================================================


def linear_backoff(attempt: int) -> float:
    """Seconds to wait after the given (0-based) failed attempt."""
    return attempt


def execute_with_retry(
    mutation: Callable[[], object],
    description: str,
    max_attempts: int = MAX_ATTEMPTS,
    backoff: Callable[[int], float] = linear_backoff,
    sleep: Callable[[float], None] = time.sleep
):
    """
    Call a mutation, retrying it on GitHub or network failures.

    After each failed attempt the executor sleeps backoff(attempt) seconds,
    which for the default linear backoff is 0, 1, 2, 3 and 4 seconds.

    Args:
        mutation: Zero-argument callable performing the change
        description: Human readable description, used in log lines
        max_attempts: Number of attempts before giving up
        backoff: Maps the failed attempt index to a delay in seconds
        sleep: Function used to wait between attempts

    Returns:
        Whatever the mutation returns

    Raises:
        MutationError: If every attempt failed
    """
    last_error = None
    for attempt in range(max_attempts):
        try:
            return mutation()
        except RETRYABLE_EXCEPTIONS as e:
            last_error = e
            logger.warning(f"{description}: {e} (retrying)")
            sleep(backoff(attempt))

    logger.error(f"{description}: {last_error}")
    raise MutationError(
        f"{description} failed after {max_attempts} attempts: {last_error}"
    ) from last_error


def describe_action(action, owner: str, repo: str, number: int) -> str:
    """Describe an action for log lines."""
    if isinstance(action, LabelAction):
        return f"Labeling issue {owner}/{repo}#{number} {action.label!r}"
    if isinstance(action, CommentAction):
        return f"Commenting on issue {owner}/{repo}#{number}"
    if isinstance(action, CloseAction):
        return f"Closing issue {owner}/{repo}#{number}"
    if isinstance(action, LockAction):
        return f"Locking issue {owner}/{repo}#{number}"
    raise TypeError(f"Unknown action: {action!r}")


def apply_action(
    store,
    owner: str,
    repo: str,
    number: int,
    action,
    dry_run: bool = False,
    sleep: Callable[[float], None] = time.sleep
) -> None:
    """
    Send one action to GitHub through the retry executor.

    Args:
        store: GitHubIssueStore (or compatible) to write to
        owner: Repository owner
        repo: Repository name
        number: Issue number
        action: Action returned by evaluate_directive
        dry_run: If True, only log what would be done
        sleep: Function used to wait between retries

    Raises:
        MutationError: If the change failed after all retries
    """
    description = describe_action(action, owner, repo, number)

    if dry_run:
        logger.info(f"[DRY RUN] Would perform: {description}")
        return

    if isinstance(action, LabelAction):
        mutation = functools.partial(store.add_label, owner, repo, number, action.label)
    elif isinstance(action, CommentAction):
        mutation = functools.partial(store.create_comment, owner, repo, number, action.body)
    elif isinstance(action, CloseAction):
        mutation = functools.partial(store.set_state, owner, repo, number, 'closed')
    else:
        mutation = functools.partial(store.lock, owner, repo, number)

    logger.info(description)
    execute_with_retry(mutation, description, sleep=sleep)


# =============================================================================
# Run Orchestration
# =============================================================================


def new_summary() -> dict:
    return {
        'repositories_scanned': 0,
        'issues_evaluated': 0,
        'labels_added': 0,
        'comments_posted': 0,
        'issues_closed': 0,
        'issues_locked': 0,
    }


def process_repository(
    store,
    owner: str,
    repo: str,
    directives: Iterable[Directive],
    summary: dict,
    now: datetime,
    dry_run: bool = False,
    sleep: Callable[[float], None] = time.sleep
) -> None:
    """
    Apply every directive, in order, to the issues of one repository.

    Args:
        store: GitHubIssueStore (or compatible)
        owner: Repository owner
        repo: Repository name
        directives: Directives of the config entry
        summary: Run summary, updated in place
        now: Time used for every age check of the run
        dry_run: If True, don't change anything on GitHub
        sleep: Function used to wait between retries
    """
    summary['repositories_scanned'] += 1

    for directive in directives:
        issues = select_issues(store, owner, repo, directive)
        logger.debug(f"{len(issues)} candidate issue(s) in {owner}/{repo}")

        for issue in issues:
            summary['issues_evaluated'] += 1
            for action in evaluate_directive(issue, directive, now):
                apply_action(store, owner, repo, issue.number, action, dry_run=dry_run, sleep=sleep)
                summary[ACTION_SUMMARY_KEYS[action.kind]] += 1


def run_maintenance(
    store,
    entries: Iterable[ConfigEntry],
    dry_run: bool = False,
    now: Optional[datetime] = None,
    sleep: Callable[[float], None] = time.sleep
) -> dict:
    """
    Run every config entry against GitHub.

    Entries, repositories, directives, issues and actions are processed
    strictly one after another. The first transport or mutation failure
    aborts the run; changes already made are kept.

    Args:
        store: GitHubIssueStore (or compatible)
        entries: Parsed configuration entries
        dry_run: If True, don't change anything on GitHub
        now: Time used for age checks (defaults to the current time)
        sleep: Function used to wait between retries

    Returns:
        Summary of the repositories scanned and actions applied

    Raises:
        ConfigurationError: If an entry has no owner
        TransportError: If listing repositories or issues fails
        MutationError: If an action failed after all retries
    """
    if now is None:
        now = datetime.now(timezone.utc)

    summary = new_summary()

    for entry in entries:
        if not entry.owner:
            raise ConfigurationError("Every config entry must set `owner`")

        if entry.repos:
            for repo in entry.repos:
                logger.info(f"Processing {entry.owner}/{repo}")
                process_repository(
                    store, entry.owner, repo, entry.directives, summary, now,
                    dry_run=dry_run, sleep=sleep
                )
            continue

        listing = functools.partial(store.list_repositories, entry.owner)
        for gh_repo in _iterate_remote(listing, f"repositories of {entry.owner}"):
            logger.info(f"Processing {gh_repo.full_name}")
            process_repository(
                store, entry.owner, gh_repo.name, entry.directives, summary, now,
                dry_run=dry_run, sleep=sleep
            )

    return summary


def main() -> Optional[int]:
    """Main entry point for the script."""
    parser = argparse.ArgumentParser(
        description='Label, comment on, close and lock GitHub issues '
                    'according to the directives in a configuration file.'
    )
    parser.add_argument(
        '-c', '--config',
        default=DEFAULT_CONFIG_PATH,
        help=f'Path to configuration file (default: {DEFAULT_CONFIG_PATH})'
    )
    parser.add_argument(
        '--token',
        default=os.environ.get('GITHUB_TOKEN'),
        help='GitHub token (default: $GITHUB_TOKEN, then github.token from the config file)'
    )
    parser.add_argument(
        '--api-url',
        default=None,
        help='GitHub API base URL, for GitHub Enterprise'
    )
    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Log the actions that would be taken without changing any issue'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = load_config(args.config)
    except FileNotFoundError:
        logger.error(f"Configuration file not found: {args.config}")
        return EXIT_FAILURE
    except OSError as e:
        logger.error(f"Could not read configuration file {args.config}: {e}")
        return EXIT_FAILURE
    except yaml.YAMLError as e:
        logger.error(f"Invalid YAML in configuration file: {e}")
        return EXIT_FAILURE
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIGURATION_ERROR

    github_config = config.get('github') or {}
    token = args.token or github_config.get('token')
    api_url = args.api_url or github_config.get('api_url')

    try:
        store = create_github_store(token, api_url)
        summary = run_maintenance(store, parse_entries(config), dry_run=args.dry_run)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIGURATION_ERROR
    except (TransportError, MutationError) as e:
        logger.error(f"Aborting run: {e}")
        return EXIT_FAILURE

    logger.info("=" * 50)
    logger.info("Issue Maintenance Summary" + (" (dry run)" if args.dry_run else ""))
    logger.info("=" * 50)
    logger.info(f"Repositories scanned: {summary['repositories_scanned']}")
    logger.info(f"Issues evaluated: {summary['issues_evaluated']}")
    logger.info(f"Labels added: {summary['labels_added']}")
    logger.info(f"Comments posted: {summary['comments_posted']}")
    logger.info(f"Issues closed: {summary['issues_closed']}")
    logger.info(f"Issues locked: {summary['issues_locked']}")

    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
