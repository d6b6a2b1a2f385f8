"""Copyleft and attribution-bearing license markers."""

import re

from codeaudit.models import FindingType, Rule, Severity
from codeaudit.scanners.base import RuleSetScanner, build_catalog

LICENSE_PATTERNS = build_catalog([
    Rule.compile(
        "gpl-header",
        r"GNU\s+General\s+Public\s+License|GPL[- ]?[23]\.?0?|General\s+Public\s+License",
        Severity.HIGH,
        "GPL license reference detected - code may be copyleft licensed",
        "Verify the license is compatible with your project. "
        "GPL code cannot be used in proprietary software.",
        flags=re.IGNORECASE,
    ),
    Rule.compile(
        "lgpl-header",
        r"GNU\s+Lesser\s+General\s+Public|LGPL[- ]?[23]\.?0?|Lesser\s+General\s+Public",
        Severity.MEDIUM,
        "LGPL license reference detected",
        "LGPL allows linking but modifications must be open-sourced. Review usage carefully.",
        flags=re.IGNORECASE,
    ),
    Rule.compile(
        "agpl-header",
        r"GNU\s+Affero\s+General\s+Public|AGPL[- ]?3\.?0?|Affero\s+General\s+Public",
        Severity.CRITICAL,
        "AGPL license reference detected - most restrictive copyleft license",
        "AGPL requires source disclosure even for network use. "
        "This is likely incompatible with proprietary software.",
        flags=re.IGNORECASE,
    ),
    Rule.compile(
        "cc-noncommercial",
        r"Creative\s+Commons.*Non[- ]?Commercial|CC[- ]?BY[- ]?NC",
        Severity.HIGH,
        "Non-commercial license detected",
        "This code cannot be used for commercial purposes.",
        flags=re.IGNORECASE,
    ),
    Rule.compile(
        "spdx-copyleft",
        r"SPDX[- ]License[- ]Identifier:\s*(GPL|LGPL|AGPL|MPL|EPL|CDDL)",
        Severity.HIGH,
        "SPDX identifier for copyleft license detected",
        "Review license compatibility with your project.",
        flags=re.IGNORECASE,
    ),
    Rule.compile(
        "copyright-gpl",
        r"Copyright.*(?:Free\s+Software\s+Foundation|GNU\s+Project)",
        Severity.HIGH,
        "FSF/GNU Project copyright notice - likely GPL licensed",
        "This code is likely GPL licensed. Do not use in proprietary software.",
        flags=re.IGNORECASE,
    ),
    # CC BY-SA attribution rather than copyleft contamination.
    Rule.compile(
        "stackoverflow-code",
        r"stackoverflow\.com/(?:questions|a)/\d+|from\s+stack\s*overflow",
        Severity.LOW,
        "Stack Overflow reference detected - code may require CC BY-SA attribution",
        "Stack Overflow code is CC BY-SA licensed. Ensure proper attribution.",
        flags=re.IGNORECASE,
    ),
    Rule.compile(
        "known-gpl-marker",
        r"(?:linux|kernel|glibc|gcc|emacs|bash|readline).*(?:source|code|from|copied)",
        Severity.MEDIUM,
        "Reference to known GPL project detected",
        "Verify this code is not directly copied from a GPL project.",
        flags=re.IGNORECASE,
    ),
])


class LicenseScanner(RuleSetScanner):
    category = FindingType.LICENSE
    rules = LICENSE_PATTERNS
