"""
Application-wide constants.

Sentinel strings from the disclosure data, display defaults, and collection names.
"""

# Legislator profile status meaning "currently serving"
STATUS_CURRENT_MEMBER = "현직의원"

# Line item reason that means nothing changed (not displayed)
REASON_NO_CHANGE = "변동없음"

# Relationship label for the disclosing person themselves
RELATIONSHIP_SELF = "본인"

# Display defaults when a profile or affiliation is missing
DEFAULT_PARTY = "무소속"
DEFAULT_DISTRICT = "정보없음"
DEFAULT_GOVERNMENT_AFFILIATION = "정부"
GOVERNMENT_SECONDARY_LABEL = "공직자"

# Slash-delimited profile fields keep only their last segment
PROFILE_FIELD_SEPARATOR = "/"

# Key wrapping the officials array in the wrapped document shape
OFFICIALS_WRAPPER_KEY = "officials"

# Money is stored in thousands of won
MONEY_UNIT_MULTIPLIER = 1000
EOK = 100_000_000  # 10^8
MAN = 10_000       # 10^4
CURRENCY_MARKER = "원"

# MongoDB Collection Names
COLLECTION_COMMENTS = "comments"

# Comment field limits
NICKNAME_MAX_LENGTH = 20
PASSWORD_MIN_LENGTH = 4
PASSWORD_MAX_LENGTH = 64
CONTENT_MAX_LENGTH = 500

# Party colors for ranking cards (substring match on party label)
PARTY_COLORS = {
    "국민의힘": "🔴",
    "민주당": "🔵",
    "조국": "🟦",
    "개혁": "🟠",
}
DEFAULT_PARTY_COLOR = "⚪"
