"""Result models returned by the extraction and validation services."""

from pydantic import BaseModel, computed_field
from typing import List


class ExtractionResult(BaseModel):
    """Unique lowercase addresses found in a block of text, sorted ascending."""
    emails: List[str] = []


class ValidationResult(BaseModel):
    """Classification of a bulk email list."""
    valid: List[str] = []
    invalid: List[str] = []
    risky: List[str] = []
    duplicates: int = 0
    total: int = 0
    
    @computed_field
    @property
    def unique(self) -> int:
        """Number of tokens left after duplicate removal."""
        return self.total - self.duplicates
    
    def category(self, name: str) -> List[str]:
        """Return the 'valid', 'invalid' or 'risky' list by name."""
        if name not in ("valid", "invalid", "risky"):
            raise KeyError(name)
        return getattr(self, name)
