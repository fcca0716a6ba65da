"""Bulk email list validation: syntax, disposable domains, role mailboxes, duplicates."""

from typing import AbstractSet, Callable, Dict, List, Optional

from emailtools.core.logger import get_logger
from emailtools.core.results import ValidationResult
from emailtools.utils.exceptions import InputRequiredError
from emailtools.utils.patterns import TOKEN_SEPARATOR, is_blank, is_valid_syntax
from emailtools.utils.reference_data import is_disposable_domain, is_role_based_local_part

logger = get_logger(__name__)


def tokenize(text: str) -> List[str]:
    """Split a pasted list on commas, whitespace and newlines, dropping empty tokens."""
    return [token for token in TOKEN_SEPARATOR.split(text) if token]


class EmailListValidator:
    """Classifies each unique entry of a list as valid, invalid or risky."""
    
    def __init__(
        self,
        disposable_domains: Optional[AbstractSet[str]] = None,
        role_local_parts: Optional[AbstractSet[str]] = None,
    ):
        """
        Initialize list validator.
        
        Args:
            disposable_domains: Lowercase disposable domains (defaults to the built-in list)
            role_local_parts: Lowercase role mailbox names (defaults to the built-in list)
        """
        self.is_disposable: Callable[[str], bool] = (
            is_disposable_domain if disposable_domains is None else disposable_domains.__contains__
        )
        self.is_role_based: Callable[[str], bool] = (
            is_role_based_local_part if role_local_parts is None else role_local_parts.__contains__
        )
    
    def validate_emails(self, text: str) -> ValidationResult:
        """
        Validate a bulk list of email addresses.
        
        Args:
            text: Newline, comma or space separated list
            
        Returns:
            Validation result with the three buckets and duplicate accounting
            
        Raises:
            InputRequiredError: If text is empty or whitespace-only
        """
        if is_blank(text):
            raise InputRequiredError()
        
        tokens = tokenize(text)
        
        # dict keeps first-occurrence order
        unique: Dict[str, None] = dict.fromkeys(token.lower() for token in tokens)
        
        result = ValidationResult(
            total=len(tokens),
            duplicates=len(tokens) - len(unique),
        )
        
        for email in unique:
            result.category(self.classify(email)).append(email)
        
        logger.info(
            "Emails validated",
            total=result.total,
            duplicates=result.duplicates,
            valid=len(result.valid),
            invalid=len(result.invalid),
            risky=len(result.risky),
        )
        return result
    
    def classify(self, email: str) -> str:
        """Return 'invalid', 'risky' or 'valid' for a single lowercase token."""
        if not is_valid_syntax(email):
            return "invalid"
        
        local_part, _, domain = email.rpartition('@')
        if self.is_disposable(domain) or self.is_role_based(local_part):
            return "risky"
        
        return "valid"


_validator = EmailListValidator()


def validate_emails(text: str) -> ValidationResult:
    """Validate emails using the shared validator instance."""
    return _validator.validate_emails(text)
