# utils/client_portfolio/constants.py
"""
Constants for the Client Portfolio Module

Centralized configuration for:
- Historical / projection year windows
- Key client registry (20 accounts)
- Health classification thresholds
- Cell color bands and chart colors
"""

# =====================================================================
# YEAR WINDOWS
# =====================================================================

HISTORY_YEARS = [2021, 2022, 2023, 2024, 2025]
PROJECTION_YEARS = [2026, 2027, 2028, 2029, 2030]
ALL_YEARS = HISTORY_YEARS + PROJECTION_YEARS

# Latest recorded year; anything after it is a projection
CURRENT_YEAR = 2025

# Years checked for "recent revenue" in churn detection
CHURN_LOOKBACK_YEARS = [2023, 2024]

# =====================================================================
# HEALTH CLASSIFICATION
# =====================================================================

# Active clients below this share of their peak year are at risk
AT_RISK_PEAK_RATIO = 0.4

# Growth factor reported when a client has no historical baseline
GROWTH_FACTOR_DEFAULT = 50.0

HEALTH_LABELS = {
    "healthy": "Healthy",
    "at_risk": "At Risk",
    "churned": "Churned",
}

HEALTH_COLORS = {
    "healthy": "#10b981",
    "at_risk": "#f59e0b",
    "churned": "#f43f5e",
}

# =====================================================================
# CELL COLOR BANDS (revenue matrix)
# =====================================================================

CELL_BANDS = [
    # (upper bound exclusive, background, text)
    (50_000, "rgba(244,63,94,0.12)", "#fda4af"),
    (150_000, "rgba(245,158,11,0.12)", "#fcd34d"),
]
CELL_BAND_HIGH = ("rgba(16,185,129,0.12)", "#6ee7b7")
CELL_BAND_ZERO = ("rgba(15,23,42,0.3)", "#64748b")

COLORS = {
    "historical": "#3b82f6",
    "planned": "#10b981",
    "text_light": "#666666",
}

CHART_HEIGHT = 380

# =====================================================================
# STORAGE
# =====================================================================

PROJECTIONS_KEY = "client_projections_v1"
NOTES_KEY = "client_notes_v1"

# =====================================================================
# CLIENT REGISTRY
# =====================================================================

CLIENT_REGISTRY_DATA = [
    {"id": "1", "name": "MACCAFERRI DO BRASIL LTDA", "sector": "Infraestrutura",
     "history": {2021: 284869.48, 2022: 50161.64, 2023: 104303.31, 2024: 135998.77, 2025: 57016.57}},
    {"id": "2", "name": "FERTIPAR BANDEIRANTES LTDA", "sector": "Agronegócio",
     "history": {2021: 62158.43, 2022: 99953.25, 2023: 529550.73, 2024: 669462.42, 2025: 825707.65}},
    {"id": "3", "name": "PLASTEK DO BRASIL IND E COM LTDA", "sector": "Indústria Plástica",
     "history": {2021: 143580.96, 2022: 126538.62, 2023: 52269.78, 2024: 16275.25, 2025: 18309.26}},
    {"id": "4", "name": "TEX EQUIPAMENTOS ELETRONICOS", "sector": "Eletrônicos",
     "history": {2021: 82418.85, 2022: 77266.88, 2023: 105537.46, 2024: 121464.41, 2025: 123748.48}},
    {"id": "5", "name": "CONFIBRA INDUSTRIA E COMERCIO", "sector": "Construção Civil",
     "history": {2021: 75438.37, 2022: 120144.89, 2023: 64626.48, 2024: 45824.28, 2025: 46212.30}},
    {"id": "6", "name": "AJINOMOTO DO BRASIL LTDA", "sector": "Alimentício",
     "history": {2021: 75186.64, 2022: 19467.50, 2023: 53603.91, 2024: 55354.56, 2025: 44257.40}},
    {"id": "7", "name": "AQUAGEL REFRIGERACAO LTDA", "sector": "Refrigeração",
     "history": {2021: 0, 2022: 68222.40, 2023: 108894.90, 2024: 83043.66, 2025: 74082.82}},
    {"id": "8", "name": "IGARATIBA IND E COM LTDA", "sector": "Indústria Geral",
     "history": {2021: 47469.35, 2022: 38007.22, 2023: 51410.31, 2024: 55703.10, 2025: 27566.24}},
    {"id": "9", "name": "CJ DO BRASIL LTDA", "sector": "Alimentício",
     "history": {2021: 64585.35, 2022: 98068.89, 2023: 0, 2024: 200000.00, 2025: 13353.50}},
    {"id": "10", "name": "CLARIOS ENERGY SOLUTIONS", "sector": "Energia",
     "history": {2021: 28570.46, 2022: 48064.32, 2023: 49474.53, 2024: 0, 2025: 13258.17}},
    {"id": "11", "name": "ELEKEIROZ S/A", "sector": "Químico",
     "history": {2021: 15957.88, 2022: 45817.58, 2023: 30596.01, 2024: 25631.10, 2025: 30809.09}},
    {"id": "12", "name": "GLOBAL FLEX INDUSTRIA LTDA", "sector": "Logística",
     "history": {2021: 0, 2022: 0, 2023: 0, 2024: 29022.50, 2025: 71597.55}},
    {"id": "13", "name": "USINA ACUCAREIRA ESTER SA", "sector": "Usinas/Açúcar",
     "history": {2021: 0, 2022: 0, 2023: 0, 2024: 36961.79, 2025: 43178.71}},
    {"id": "14", "name": "PAIS E FILHOS USINAGEM LTDA", "sector": "Metalurgia",
     "history": {2021: 0, 2022: 69586.26, 2023: 51720.59, 2024: 12736.42, 2025: 0}},
    {"id": "15", "name": "ITURRI COIMPAR INDUSTRIA", "sector": "EPIs/Segurança",
     "history": {2021: 22199.07, 2022: 71398.24, 2023: 76310.96, 2024: 0, 2025: 0}},
    {"id": "16", "name": "SIKA S.A.", "sector": "Construção Civil",
     "history": {2021: 0, 2022: 0, 2023: 0, 2024: 0, 2025: 44211.86}},
    {"id": "17", "name": "SANTHER FABRICA DE PAPEL", "sector": "Papel e Celulose",
     "history": {2021: 0, 2022: 19057.02, 2023: 0, 2024: 0, 2025: 18952.36}},
    {"id": "18", "name": "PLIMAX IND DE EMBALAGENS", "sector": "Indústria Plástica",
     "history": {2021: 17913.31, 2022: 19704.67, 2023: 0, 2024: 21743.81, 2025: 0}},
    {"id": "19", "name": "EMS S/A", "sector": "Farmacêutico",
     "history": {2021: 0, 2022: 0, 2023: 0, 2024: 0, 2025: 16600.00}},
    {"id": "20", "name": "SUDESTE AUTOMACAO EIRELI", "sector": "Automação",
     "history": {2021: 0, 2022: 0, 2023: 0, 2024: 0, 2025: 15682.18}},
]
