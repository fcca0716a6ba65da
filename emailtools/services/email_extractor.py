"""Email extraction service for free-form text."""

from typing import Set

from emailtools.core.logger import get_logger
from emailtools.core.results import ExtractionResult
from emailtools.utils.patterns import EXTRACTION_PATTERN, is_blank

logger = get_logger(__name__)


class EmailExtractor:
    """Finds every email-shaped substring in a block of text."""
    
    def __init__(self):
        """Initialize email extractor."""
        self.pattern = EXTRACTION_PATTERN
    
    def extract_emails(self, text: str) -> ExtractionResult:
        """
        Extract all email addresses from text.
        
        Matches are lowercased, deduplicated and sorted. Nothing beyond the
        loose pattern is checked, so undeliverable strings like 'a@b.c' are kept.
        
        Args:
            text: Arbitrary text, possibly empty
            
        Returns:
            Extraction result with sorted unique addresses
        """
        if is_blank(text):
            return ExtractionResult(emails=[])
        
        found: Set[str] = {match.lower() for match in self.pattern.findall(text)}
        emails = sorted(found)
        
        logger.info("Emails extracted", count=len(emails), input_chars=len(text))
        return ExtractionResult(emails=emails)


_extractor = EmailExtractor()


def extract_emails(text: str) -> ExtractionResult:
    """Extract emails using the shared extractor instance."""
    return _extractor.extract_emails(text)
