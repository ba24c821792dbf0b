# utils/seller_performance/constants.py
"""
Constants for Seller Performance Module

Centralized configuration for:
- Month and quarter definitions
- Seller roster
- Monthly target table and annual goal
- Color schemes and goal bands
- Chart and export settings
"""

# =====================================================================
# MONTH ORDER
# =====================================================================

MONTHS = [
    "Jan", "Fev", "Mar", "Abr", "Mai", "Jun",
    "Jul", "Ago", "Set", "Out", "Nov", "Dez"
]

# =====================================================================
# QUARTER DEFINITIONS
# =====================================================================

QUARTERS = {
    "Q1": ["Jan", "Fev", "Mar"],
    "Q2": ["Abr", "Mai", "Jun"],
    "Q3": ["Jul", "Ago", "Set"],
    "Q4": ["Out", "Nov", "Dez"],
}

# =====================================================================
# SELLERS (canonical order decides ties)
# =====================================================================

SELLERS = ("syllas", "vendedora1", "vendedora2", "vendedora3")

SELLER_LABELS = {
    "syllas": "Syllas",
    "vendedora1": "Vend 01",
    "vendedora2": "Vend 02",
    "vendedora3": "Vend 03",
}

SELLER_INPUT_LABELS = {
    "syllas": "Syllas (Dir.)",
    "vendedora1": "Vendedora 01",
    "vendedora2": "Vendedora 02",
    "vendedora3": "Vendedora 03",
}

NO_PERFORMER_LABEL = "Pending"

# =====================================================================
# TARGETS
# =====================================================================

# Per-seller monthly goals (BRL)
MONTHLY_TARGETS = {
    "Jan": {"syllas": 118500, "vendedora1": 24000, "vendedora2": 0, "vendedora3": 0},
    "Fev": {"syllas": 138000, "vendedora1": 28000, "vendedora2": 26000, "vendedora3": 0},
    "Mar": {"syllas": 100000, "vendedora1": 42000, "vendedora2": 26000, "vendedora3": 0},
    "Abr": {"syllas": 98000, "vendedora1": 43000, "vendedora2": 27000, "vendedora3": 0},
    "Mai": {"syllas": 94000, "vendedora1": 44000, "vendedora2": 27000, "vendedora3": 0},
    "Jun": {"syllas": 89000, "vendedora1": 44000, "vendedora2": 27000, "vendedora3": 0},
    "Jul": {"syllas": 103000, "vendedora1": 42000, "vendedora2": 42000, "vendedora3": 0},
    "Ago": {"syllas": 116000, "vendedora1": 40000, "vendedora2": 40000, "vendedora3": 0},
    "Set": {"syllas": 128000, "vendedora1": 39000, "vendedora2": 39000, "vendedora3": 0},
    "Out": {"syllas": 136000, "vendedora1": 38000, "vendedora2": 38000, "vendedora3": 0},
    "Nov": {"syllas": 144000, "vendedora1": 37000, "vendedora2": 37000, "vendedora3": 0},
    "Dez": {"syllas": 125000, "vendedora1": 40000, "vendedora2": 40000, "vendedora3": 0},
}

# Company goal for the year. Set independently of MONTHLY_TARGETS
# (whose sum is 2,219,500); override with the ANNUAL_GOAL setting.
ANNUAL_GOAL = 2_180_000

TARGET_YEAR = 2026

DEFAULT_MONTH = "Jan"

# =====================================================================
# GOAL BANDS (seller goal indicators)
# =====================================================================

GOAL_ACHIEVED_PERCENT = 100
GOAL_WARNING_PERCENT = 80

GOAL_BANDS = {
    "achieved": {"label": "Achieved", "color": "#10b981"},
    "on_track": {"label": "On track", "color": "#eab308"},
    "behind": {"label": "Behind", "color": "#f43f5e"},
}

# =====================================================================
# COLOR SCHEME
# =====================================================================

COLORS = {
    "target": "#3b82f6",               # Blue
    "actual": "#10b981",               # Green
    "quarter_actual": "#8b5cf6",       # Purple
    "quarter_target": "#f43f5e",       # Rose
    "attainment": "#f59e0b",           # Amber

    "syllas": "#3b82f6",
    "vendedora1": "#ec4899",
    "vendedora2": "#10b981",
    "vendedora3": "#8b5cf6",

    "text_dark": "#333333",
    "text_light": "#666666",
}

# =====================================================================
# CHART DIMENSIONS
# =====================================================================

CHART_HEIGHT = 420
QUARTER_CHART_HEIGHT = 380

# =====================================================================
# STORAGE
# =====================================================================

SALES_LEDGER_KEY = "sales_ledger_v1"

# =====================================================================
# EXPORT SETTINGS
# =====================================================================

EXCEL_STYLES = {
    "header_fill_color": "1E3A8A",
    "header_font_color": "FFFFFF",
    "currency_format": '"R$" #,##0',
    "percent_format": '0.0%',
}
