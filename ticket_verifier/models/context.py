"""
Model for the pull request a run was triggered for.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel

from ..exceptions import ConfigurationError

logger = logging.getLogger("ticket_verifier")


class PullRequestContext(BaseModel):
    """Read-only view of the repository, issue number and PR body for this run."""
    owner: Optional[str] = None
    repo: Optional[str] = None
    number: Optional[int] = None
    body: str = ""

    model_config = {
        "frozen": True
    }

    @classmethod
    def from_payload(
        cls,
        payload: Dict[str, Any],
        repository: Optional[str] = None
    ) -> "PullRequestContext":
        """
        Build the context from a GitHub webhook event payload.

        Args:
            payload: Decoded event payload
            repository: Repository in owner/repo form, as in GITHUB_REPOSITORY

        Returns:
            PullRequestContext for the event
        """
        owner = repo = None
        if repository and "/" in repository:
            owner, repo = repository.split("/", 1)
        elif isinstance(payload.get("repository"), dict):
            # Fall back to the repository embedded in the event
            repo_data = payload["repository"]
            owner = (repo_data.get("owner") or {}).get("login")
            repo = repo_data.get("name")

        pull_request = payload.get("pull_request") or {}
        issue = payload.get("issue") or {}
        number = issue.get("number") or pull_request.get("number") or payload.get("number")

        return cls(
            owner=owner,
            repo=repo,
            number=number,
            body=pull_request.get("body") or "",
        )

    @classmethod
    def from_event(
        cls,
        event_path: Optional[Union[str, Path]],
        repository: Optional[str] = None
    ) -> "PullRequestContext":
        """
        Load the context from the event file GitHub Actions writes for each run.

        A missing event file yields an empty payload. A file that is not valid
        JSON raises ConfigurationError.
        """
        payload: Dict[str, Any] = {}
        if event_path:
            path = Path(event_path)
            if path.exists():
                try:
                    with open(path, encoding="utf-8") as f:
                        payload = json.load(f)
                except (OSError, json.JSONDecodeError) as e:
                    raise ConfigurationError(f"Could not read event payload {path}: {e}") from e
            else:
                logger.warning(f"GITHUB_EVENT_PATH {path} does not exist")

        if not isinstance(payload, dict):
            raise ConfigurationError(f"Event payload at {event_path} is not a JSON object")

        return cls.from_payload(payload, repository)
