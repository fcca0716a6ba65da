"""Tests for bulk email list validator."""

import pytest

from emailtools.services.list_validator import EmailListValidator, tokenize, validate_emails
from emailtools.utils.exceptions import InputRequiredError
from emailtools.utils.reference_data import is_disposable_domain, is_role_based_local_part


def test_tokenize():
    """Test splitting on commas, spaces and newlines."""
    assert tokenize("a@x.com, b@x.com\n\nc@x.com   d@x.com,") == [
        "a@x.com", "b@x.com", "c@x.com", "d@x.com"
    ]
    assert tokenize(" ,\n") == []


def test_case_insensitive_duplicates():
    """Test mixed-case repeats count as duplicates."""
    result = validate_emails("A@B.com, a@b.com")
    
    assert result.total == 2
    assert result.duplicates == 1
    assert result.valid == ["a@b.com"]
    assert result.unique == 1


def test_disposable_domain_is_risky():
    """Test addresses on disposable domains are flagged."""
    validator = EmailListValidator(disposable_domains={"mailinator.com"}, role_local_parts=set())
    result = validator.validate_emails("x@mailinator.com")
    
    assert result.risky == ["x@mailinator.com"]
    assert result.valid == []


def test_disposable_match_is_exact():
    """Test subdomains of disposable domains are not flagged."""
    validator = EmailListValidator(disposable_domains={"mailinator.com"}, role_local_parts=set())
    result = validator.validate_emails("x@sub.mailinator.com")
    
    assert result.valid == ["x@sub.mailinator.com"]


def test_role_based_is_risky():
    """Test role mailboxes are flagged."""
    validator = EmailListValidator(disposable_domains=set(), role_local_parts={"admin"})
    result = validator.validate_emails("admin@company.com\njane@company.com")
    
    assert result.risky == ["admin@company.com"]
    assert result.valid == ["jane@company.com"]


def test_syntax_classification():
    """Test syntax failures land in invalid and clean addresses in valid."""
    result = validate_emails("not-an-email good@example.com a@b@c.com user@host.c user@[192.168.0.1]")
    
    assert result.invalid == ["not-an-email", "a@b@c.com", "user@host.c"]
    assert result.valid == ["good@example.com", "user@[192.168.0.1]"]


def test_quoted_local_part():
    """Test quoted local parts are accepted and split on the last '@'."""
    validator = EmailListValidator(disposable_domains={"mailinator.com"}, role_local_parts=set())
    
    assert validator.classify('"odd@name"@mailinator.com') == "risky"
    assert validator.classify('"odd"@example.com') == "valid"


def test_built_in_reference_data():
    """Test the default lists are used when none are supplied."""
    result = validate_emails("someone@mailinator.com support@acme.com someone@acme.com")
    
    assert result.risky == ["someone@mailinator.com", "support@acme.com"]
    assert result.valid == ["someone@acme.com"]


def test_partition_invariants():
    """Test bucket sizes plus duplicates add up to total with no overlap."""
    text = "\n".join([
        "Good@Example.com", "good@example.com", "bad..dots@example.com",
        "info@example.com", "x@yopmail.com", "plain", "x@YOPMAIL.com",
        "person@domain.org", "person@domain.org",
    ])
    result = validate_emails(text)
    buckets = result.valid + result.invalid + result.risky
    
    assert len(buckets) + result.duplicates == result.total
    assert len(set(buckets)) == len(buckets)
    assert all(email == email.lower() for email in buckets)
    assert result.total == 9
    assert result.duplicates == 3


def test_first_occurrence_order():
    """Test buckets preserve first-seen order."""
    result = validate_emails("c@example.com, a@example.com, b@example.com, a@example.com")
    
    assert result.valid == ["c@example.com", "a@example.com", "b@example.com"]


@pytest.mark.parametrize("text", ["", "   \n ", "\t\r\n"])
def test_blank_input_requires_emails(text):
    """Test blank input raises instead of returning an empty result."""
    with pytest.raises(InputRequiredError):
        validate_emails(text)


def test_tokenize_browser_whitespace():
    """Test separators follow browser whitespace rather than Python's str.isspace."""
    assert tokenize("a@x.com\u00a0b@x.com\ufeffc@x.com\u3000d@x.com") == [
        "a@x.com", "b@x.com", "c@x.com", "d@x.com"
    ]
    assert tokenize("a@x.com\x1cb@x.com") == ["a@x.com\x1cb@x.com"]


def test_control_separator_only_is_not_blank():
    """Test information separator characters count as content."""
    result = validate_emails("\x1c")
    
    assert result.total == 1
    assert result.invalid == ["\x1c"]


def test_default_lookups_use_reference_data():
    """Test the default validator goes through the reference data helpers."""
    validator = EmailListValidator()
    
    assert validator.is_disposable is is_disposable_domain
    assert validator.is_role_based is is_role_based_local_part
    assert validator.classify("x@mailinator.com") == "risky"
