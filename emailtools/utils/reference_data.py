"""Reference lists of disposable email domains and role-based mailboxes."""

from typing import FrozenSet

# Known throwaway mailbox providers. Matched exactly, subdomains are not covered.
_DISPOSABLE_DOMAINS = {
    '10minutemail.com',
    '10minutemail.net',
    '20minutemail.com',
    '33mail.com',
    'bccto.me',
    'burnermail.io',
    'chitthi.in',
    'discard.email',
    'disposable.email',
    'dispostable.com',
    'emailias.com',
    'emaildrop.io',
    'emailondeck.com',
    'fakeinbox.com',
    'fakemailgenerator.com',
    'getairmail.com',
    'getnada.com',
    'grr.la',
    'guerrillamail.biz',
    'guerrillamail.com',
    'guerrillamail.de',
    'guerrillamail.info',
    'guerrillamail.net',
    'guerrillamail.org',
    'guerrillamailblock.com',
    'inboxbear.com',
    'inboxkitten.com',
    'jetable.org',
    'mail-temp.com',
    'mail7.io',
    'mailcatch.com',
    'maildrop.cc',
    'mailinator.com',
    'mailinator.net',
    'mailnesia.com',
    'meltmail.com',
    'mintemail.com',
    'mohmal.com',
    'mox.do',
    'mytrashmail.com',
    'pokemail.net',
    'sharklasers.com',
    'spam4.me',
    'spamevader.com',
    'spamfree24.org',
    'spamgourmet.com',
    'spamhole.com',
    'temp-mail.io',
    'temp-mail.org',
    'tempail.com',
    'tempinbox.co.uk',
    'tempmail.com',
    'tempmailaddress.com',
    'tempmailo.com',
    'tempr.email',
    'throwaway.email',
    'throwawaymail.com',
    'tmpmail.net',
    'tmpmail.org',
    'trashmail.com',
    'trashmail.me',
    'trashmail.net',
    'yopmail.com',
    'yopmail.fr',
    'yopmail.net',
}

# Mailbox names that denote a function or team rather than a person
_ROLE_BASED_LOCAL_PARTS = {
    'abuse',
    'admin',
    'administrator',
    'billing',
    'careers',
    'contact',
    'enquiries',
    'feedback',
    'hello',
    'help',
    'hostmaster',
    'hr',
    'info',
    'jobs',
    'mail',
    'marketing',
    'media',
    'no-reply',
    'noreply',
    'office',
    'postmaster',
    'press',
    'root',
    'sales',
    'security',
    'service',
    'support',
    'team',
    'webmaster',
}

# Normalize to lowercase once; nothing mutates these after import
DISPOSABLE_DOMAINS: FrozenSet[str] = frozenset(d.lower() for d in _DISPOSABLE_DOMAINS)
ROLE_BASED_LOCAL_PARTS: FrozenSet[str] = frozenset(r.lower() for r in _ROLE_BASED_LOCAL_PARTS)


def is_disposable_domain(domain: str) -> bool:
    """
    Check if a domain is a known disposable email provider.
    
    Args:
        domain: Lowercase email domain
        
    Returns:
        True if the domain is listed verbatim
    """
    return domain in DISPOSABLE_DOMAINS


def is_role_based_local_part(local_part: str) -> bool:
    """
    Check if a local part names a role mailbox (e.g. 'support').
    
    Args:
        local_part: Lowercase part before the '@'
        
    Returns:
        True if the local part is listed verbatim
    """
    return local_part in ROLE_BASED_LOCAL_PARTS
