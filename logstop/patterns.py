"""
Pattern Catalog - Ordered redaction rules for log scrubbing.

Each rule pairs a category with a compiled regex and its replacement.
Rules are applied in the order they appear in DEFAULT_RULES; a category
with two sub-patterns (credit_card, phone) contributes two consecutive rules.

Patterns covered:
    - Credentials embedded in URLs (only the password is replaced)
    - Email addresses
    - Credit card numbers (plain and delimiter-grouped)
    - Phone numbers (E.164 and NANP-style)
    - US Social Security Numbers
    - IPv4 addresses (opt-in)
    - MAC addresses (opt-in)

Percent-encoded delimiters (%40, %2B, %3A, %2F%2F) are accepted wherever
the literal character is, so pre-URL-encoded messages are scrubbed too.
"""

import re
from dataclasses import dataclass
from typing import Pattern

FILTERED = "[FILTERED]"
MAX_DEPTH_EXCEEDED = "[MAX DEPTH EXCEEDED]"

# Category identifiers, in application order
URL_PASSWORD = "url_password"
EMAIL = "email"
CREDIT_CARD = "credit_card"
PHONE = "phone"
SSN = "ssn"
IP = "ip"
MAC = "mac"

CATEGORIES = (URL_PASSWORD, EMAIL, CREDIT_CARD, PHONE, SSN, IP, MAC)


@dataclass(frozen=True)
class PatternRule:
    """A single redaction rule."""
    category: str  # one of CATEGORIES
    pattern: Pattern[str]
    replacement: str  # may reference capture groups
    enabled: bool = True

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


DEFAULT_RULES: tuple[PatternRule, ...] = (
    # user:password@ in a URL; groups 1 and 2 keep the delimiters
    PatternRule(
        category=URL_PASSWORD,
        pattern=re.compile(r'((?://|%2F%2F)\S+(?::|%3A))\S+(@|%40)', re.ASCII),
        replacement=r'\g<1>' + FILTERED + r'\g<2>',
    ),

    PatternRule(
        category=EMAIL,
        pattern=re.compile(
            r'\b\w(?:[\w+.-]|%2B)+(?:@|%40)'
            r'[a-z\d-]+(?:\.[a-z\d-]+)*\.[a-z]+\b',
            re.ASCII | re.IGNORECASE
        ),
        replacement=FILTERED,
    ),

    # 16 contiguous digits, Amex/Visa/Mastercard/Discover leading digit
    PatternRule(
        category=CREDIT_CARD,
        pattern=re.compile(r'\b[3456]\d{15}\b', re.ASCII),
        replacement=FILTERED,
    ),

    # Same, as four groups of four
    PatternRule(
        category=CREDIT_CARD,
        pattern=re.compile(
            r'\b[3456]\d{3}[\s+-]\d{4}[\s+-]\d{4}[\s+-]\d{4}\b',
            re.ASCII
        ),
        replacement=FILTERED,
    ),

    # E.164: 7 to 15 digits, the leading + is required
    PatternRule(
        category=PHONE,
        pattern=re.compile(r'(?:\+|%2B)[1-9]\d{6,14}\b', re.ASCII),
        replacement=FILTERED,
    ),

    # NANP: (555) 555-5555, 555.555.5555, +1 555 555 5555
    PatternRule(
        category=PHONE,
        pattern=re.compile(
            r'\b(?:\+\d{1,2}\s)?\(?\d{3}\)?[\s+.-]\d{3}[\s+.-]\d{4}\b',
            re.ASCII
        ),
        replacement=FILTERED,
    ),

    PatternRule(
        category=SSN,
        pattern=re.compile(r'\b\d{3}[\s+-]\d{2}[\s+-]\d{4}\b', re.ASCII),
        replacement=FILTERED,
    ),

    # No 0-255 range check
    PatternRule(
        category=IP,
        pattern=re.compile(r'\b\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}\b', re.ASCII),
        replacement=FILTERED,
    ),

    PatternRule(
        category=MAC,
        pattern=re.compile(
            r'\b[0-9a-f]{2}(?:(?::|%3A)[0-9a-f]{2}){5}\b',
            re.ASCII | re.IGNORECASE
        ),
        replacement=FILTERED,
    ),
)
