import logging
import re
from dataclasses import dataclass
from typing import Optional

from flask import current_app, has_app_context

from app.modules.resource.repositories import ResourceRepository
from core.services.BaseService import BaseService

logger = logging.getLogger(__name__)

DOI_FORMAT = re.compile(r"^10\.\d+/.+$", re.ASCII)
RESOLVER_PREFIX = re.compile(r"^https?://(?:dx\.)?doi\.org/(.+)$", re.IGNORECASE)
TRAILING_NUMBER = re.compile(r"^(.*?)([0-9]+)$")

DEFAULT_MAX_ATTEMPTS = 10000
INVALID_FORMAT_MESSAGE = "Invalid DOI format. Expected 10.<prefix>/<suffix>."


def increment_digits(digits: str) -> str:
    """Add one to a decimal digit string, keeping its zero padding (``009`` -> ``010``, ``99`` -> ``100``)."""
    head = digits.rstrip("9")
    carried = len(digits) - len(head)
    if head:
        head = head[:-1] + str(int(head[-1]) + 1)
    else:
        head = "1"
    return head + "0" * carried


@dataclass
class DoiValidationResult:
    is_valid_format: bool
    exists: bool
    existing_resource: Optional[dict] = None
    last_assigned_doi: Optional[str] = None
    suggested_doi: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"is_valid_format": self.is_valid_format, "exists": self.exists}
        if self.error:
            data["error"] = self.error
        if self.exists:
            data["existing_resource"] = self.existing_resource
            data["last_assigned_doi"] = self.last_assigned_doi
            data["suggested_doi"] = self.suggested_doi
        return data


class DoiSuggestionService(BaseService):
    """
    Validates candidate DOIs against the resource store and proposes the next
    free DOI of a numbered series.

    Suggestions are advisory: nothing is reserved, so the unique constraint on
    ``resources.doi`` remains the final arbiter when a resource is saved.
    """

    def __init__(self, repository: Optional[ResourceRepository] = None, max_attempts: Optional[int] = None):
        super().__init__(repository or ResourceRepository())
        self._max_attempts = max_attempts

    @property
    def max_attempts(self) -> int:
        if self._max_attempts is not None:
            return self._max_attempts
        if has_app_context():
            return current_app.config.get("DOI_SUGGESTION_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS)
        return DEFAULT_MAX_ATTEMPTS

    @staticmethod
    def normalize_doi(doi: str) -> str:
        """Trim whitespace and strip a doi.org resolver prefix."""
        doi = doi.strip()
        match = RESOLVER_PREFIX.match(doi)
        if match:
            doi = match.group(1)
        return doi

    @staticmethod
    def is_valid_doi_format(doi) -> bool:
        if not isinstance(doi, str):
            return False
        return DOI_FORMAT.fullmatch(doi) is not None

    def check_doi_exists(self, doi: str, exclude_resource_id: Optional[int] = None) -> bool:
        return self.repository.exists_by_doi(doi, exclude_id=exclude_resource_id)

    def get_resource_by_doi(self, doi: str, exclude_resource_id: Optional[int] = None) -> Optional[dict]:
        """
        Look up the resource that owns ``doi``.

        Args:
            doi (str): DOI compared verbatim (no case folding).
            exclude_resource_id (int, optional): Resource never reported as the owner,
                typically the one being edited.

        Returns:
            dict: ``{"id": ..., "title": ...}`` with the main title, or None when the DOI is free.
        """
        resource = self.repository.find_by_doi(doi, exclude_id=exclude_resource_id)
        if resource is None:
            return None
        return {"id": resource.id, "title": resource.main_title()}

    def get_last_assigned_doi(self) -> Optional[str]:
        return self.repository.find_max_doi()

    def suggest_next_doi(self, doi: str) -> Optional[str]:
        """
        Suggest the first free DOI after ``doi`` in its numbering series.

        The trailing digit run of the suffix is incremented, keeping its zero
        padding (``001`` -> ``002``) and growing past it when needed
        (``999`` -> ``1000``).

        Returns:
            str: The suggested DOI, or None when the DOI is malformed, its suffix
            has no trailing number, or no free DOI was found within ``max_attempts``.
        """
        if not self.is_valid_doi_format(doi):
            return None

        prefix, _, suffix = doi.rpartition("/")
        match = TRAILING_NUMBER.match(suffix)
        if match is None:
            return None

        base, digits = match.groups()
        number = digits

        for _ in range(self.max_attempts):
            number = increment_digits(number)
            candidate = f"{prefix}/{base}{number}"
            if not self.check_doi_exists(candidate):
                return candidate

        logger.warning(
            f"Could not find an available DOI after {self.max_attempts} attempts (series {prefix}/{base}, "
            f"start {digits})"
        )
        return None

    def validate(self, doi: str, exclude_resource_id: Optional[int] = None) -> DoiValidationResult:
        if not self.is_valid_doi_format(doi):
            return DoiValidationResult(is_valid_format=False, exists=False, error=INVALID_FORMAT_MESSAGE)

        existing = self.get_resource_by_doi(doi, exclude_resource_id)
        if existing is None:
            return DoiValidationResult(is_valid_format=True, exists=False)

        logger.info(f"DOI {doi} is already assigned to resource {existing['id']}")
        return DoiValidationResult(
            is_valid_format=True,
            exists=True,
            existing_resource=existing,
            last_assigned_doi=self.get_last_assigned_doi(),
            suggested_doi=self.suggest_next_doi(doi),
        )
