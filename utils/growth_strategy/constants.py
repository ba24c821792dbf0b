# utils/growth_strategy/constants.py
"""
Constants for the Growth Strategy (narrative advisory) Module
"""

# =====================================================================
# PERFORMANCE STATUS
# =====================================================================

ALERT_BELOW_PERCENT = 80
OPPORTUNITY_FROM_PERCENT = 100

STATUS_ALERT = "ALERT"
STATUS_STABILITY = "STABILITY"
STATUS_OPPORTUNITY = "OPPORTUNITY"

STATUS_THEMES = {
    STATUS_ALERT: {
        "icon": "🚨",
        "color": "#f43f5e",
        "headline": "Recovery mode",
        "description": "The month is below 80% of target. Prioritise pipeline acceleration and reactivation of inactive accounts.",
    },
    STATUS_STABILITY: {
        "icon": "⚖️",
        "color": "#eab308",
        "headline": "Close the gap",
        "description": "The month is between 80% and 100% of target. Focus conversion effort on open opportunities to cross the line.",
    },
    STATUS_OPPORTUNITY: {
        "icon": "🚀",
        "color": "#10b981",
        "headline": "Scale what works",
        "description": "The target is met. Reinvest in the channels and accounts that are converting and expand share of wallet.",
    },
}

# =====================================================================
# ADVISORY SERVICE
# =====================================================================

INACTIVE_CLIENT_LIMIT = 3

MISSING_KEY_MESSAGE = "Configuration pending: API key not found."

FALLBACK_MESSAGE = (
    "There was an error connecting to the strategy engine. "
    "Check the API key or try again."
)

SYSTEM_PROMPT = (
    "You are a Chief Growth Officer advising an industrial automation distributor. "
    "You apply a funnel methodology (traffic, engagement, conversion, retention). "
    "Be professional, direct and focused on execution."
)
