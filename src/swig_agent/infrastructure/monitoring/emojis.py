"""
Reply and log emoji definitions.
"""


class ReplyEmoji:
    """Markers used in user-facing replies."""

    # ============================================================
    # Outcomes
    # ============================================================
    SUCCESS = "✅"  # Write confirmed on-chain
    FAILURE = "❌"  # Operation refused or failed

    # ============================================================
    # Reports
    # ============================================================
    BALANCE = "💰"  # Wallet balance report
    TOKEN_BALANCE = "🏦"  # Token balance report
    AUTHORITIES = "👥"  # Role listing

    # ============================================================
    # Inline markers
    # ============================================================
    YOUR_WALLET = "← Your wallet"  # Caller's own role in a listing


class LogEmoji:
    """Prefixes for pipeline log lines."""

    START = "🚀"
    STAGE = "🔧"
    SUBMIT = "📤"
    CONFIRMED = "✅"
    REFUSED = "⛔"
    ERROR = "❌"
