"""
Static reference tables for the field scorers.

Central registry of lookup data: weak password substrings, email provider
allow/deny lists, Cambodian phone prefixes and carriers, and strength-label
tables. Everything is immutable and loaded once per process.
"""

from __future__ import annotations

from types import MappingProxyType

# === PASSWORD ===

# Matched case-insensitively as substrings, not whole words
COMMON_PASSWORDS: tuple[str, ...] = (
    "password", "password1", "123456", "123456789", "qwerty", "abc123",
    "password123", "admin", "letmein", "welcome", "monkey", "1234567890",
    "iloveyou", "princess", "rockyou", "1234567", "12345678", "password12",
    "qwerty123", "1q2w3e4r", "baseball", "football", "soccer", "hockey",
    "basketball", "tennis", "golf", "swimming", "volleyball", "rugby",
)

# Any 3-char window of these counts as a sequential run
SEQUENCES: tuple[str, ...] = (
    "abcdefghijklmnopqrstuvwxyz",
    "zyxwvutsrqponmlkjihgfedcba",
    "0123456789",
    "9876543210",
)

# Password tier (0-10) -> (text, color)
PASSWORD_STRENGTH = MappingProxyType({
    0: ("None", "#666666"),
    1: ("Very Weak", "#ff4757"),
    2: ("Weak", "#ff4757"),
    3: ("Poor", "#ff6348"),
    4: ("Fair", "#ffa726"),
    5: ("Moderate", "#ffa726"),
    6: ("Good", "#2ed573"),
    7: ("Strong", "#2ed573"),
    8: ("Very Strong", "#3742fa"),
    9: ("Excellent", "#3742fa"),
    10: ("Fortress", "#9c88ff"),
})

# === EMAIL ===

# Entries without a dot ("edu") match as a domain suffix only
LEGITIMATE_EMAIL_PROVIDERS: tuple[str, ...] = (
    # Major global providers
    "gmail.com", "googlemail.com", "yahoo.com", "yahoo.co.uk", "yahoo.fr", "yahoo.de",
    "outlook.com", "hotmail.com", "live.com", "msn.com", "hotmail.co.uk",
    "icloud.com", "me.com", "mac.com",
    "protonmail.com", "proton.me", "pm.me",
    "aol.com", "mail.com", "zoho.com", "yandex.com", "yandex.ru",
    "gmx.com", "gmx.net", "gmx.de",
    # Business/Professional
    "fastmail.com", "tutanota.com", "hey.com",
    # Regional providers
    "qq.com", "163.com", "126.com", "sina.com", "naver.com", "daum.net",
    # Educational
    "edu", "ac.uk", "edu.au", "edu.kh",
)

DISPOSABLE_EMAIL_PROVIDERS: tuple[str, ...] = (
    "tempmail.com", "throwaway.com", "guerrillamail.com", "mailinator.com",
    "10minutemail.com", "temp-mail.org", "fakeinbox.com", "trashmail.com",
    "yopmail.com", "getnada.com", "maildrop.cc", "dispostable.com",
)

EDUCATIONAL_SUFFIXES: tuple[str, ...] = (".edu", ".ac.uk", ".edu.au", ".edu.kh")

# === PHONE (Cambodia, +855) ===

CAMBODIA_COUNTRY_CODE = "855"

CAMBODIAN_MOBILE_PREFIXES = frozenset({
    "10", "11", "12", "13", "14", "15", "16", "17", "18", "19",
    "31", "60", "66", "67", "68", "69", "70", "71", "76", "77", "78", "79",
    "80", "81", "82", "83", "84", "85", "86", "87", "88", "89",
    "90", "91", "92", "93", "94", "95", "96", "97", "98", "99",
})

CAMBODIAN_LANDLINE_PREFIXES = frozenset({
    "23", "24", "25", "26", "32", "33", "34", "35", "36",
    "42", "43", "44", "52", "53", "54", "62", "63", "72", "73", "74", "75",
})

CAMBODIAN_CARRIERS = MappingProxyType({
    "10": "Cootel", "11": "Cootel",
    "12": "Cellcard", "14": "Cellcard", "17": "Cellcard", "77": "Cellcard", "78": "Cellcard",
    "79": "Cellcard", "89": "Cellcard", "92": "Cellcard", "95": "Cellcard",
    "15": "Metfone", "16": "Metfone", "31": "Metfone", "60": "Metfone", "66": "Metfone",
    "67": "Metfone", "68": "Metfone", "71": "Metfone", "88": "Metfone", "90": "Metfone",
    "97": "Metfone",
    "18": "Smart", "13": "Smart", "69": "Smart", "70": "Smart", "80": "Smart", "81": "Smart",
    "82": "Smart", "83": "Smart", "84": "Smart", "85": "Smart", "86": "Smart", "87": "Smart",
    "93": "Smart", "96": "Smart", "98": "Smart",
    "19": "Seatel", "76": "Seatel",
    "38": "qb", "39": "qb",
})

# === BIO ===

BIO_MIN_CHARS = 20
BIO_LONG_CHARS = 500
BIO_SPAM_PHRASES: tuple[str, ...] = (
    "click here", "buy now", "free money", "winner", "congratulations",
)

# === 20-POINT FIELDS / 100-POINT SUMMARY ===

FIELD_MAX_SCORE = 20
FIELD_VALID_THRESHOLD = 8
SUMMARY_MAX_SCORE = 100

COLOR_RED = "#ff4757"
COLOR_AMBER = "#ffa726"
COLOR_GREEN = "#2ed573"

# (upper bound exclusive, text, color); score 0 and score == max are handled separately
OVERALL_STRENGTH_BANDS: tuple[tuple[int, str, str], ...] = (
    (40, "Poor", "#ff4757"),
    (60, "Fair", "#ff6348"),
    (80, "Good", "#ffa726"),
    (100, "Very Good", "#2ed573"),
)
OVERALL_STRENGTH_NONE = ("None", "#666666")
OVERALL_STRENGTH_PERFECT = ("Perfect", "#9c88ff")
