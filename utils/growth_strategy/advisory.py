# utils/growth_strategy/advisory.py
"""
Narrative Advisory Service

The advisory text is generated by an external LLM from a snapshot of the
dashboard's derived values. The dashboard depends only on the AdvisoryService
interface; OpenAIAdvisoryService is the production implementation.

Failure policy: services raise AdvisoryError, request_advisory() turns every
AdvisoryError into a fixed display-safe message. Ledger state is never touched.

Usage:
    snapshot = build_snapshot(seller_metrics, portfolio, month='Jan')
    result = request_advisory(get_advisory_service(), snapshot)
    st.markdown(result.text)
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import openai

from ..client_portfolio.metrics import ClientPortfolio
from ..common import format_brl
from ..config import config, AdvisoryConfig
from ..seller_performance.metrics import SellerMetrics
from .constants import (
    ALERT_BELOW_PERCENT, OPPORTUNITY_FROM_PERCENT,
    STATUS_ALERT, STATUS_STABILITY, STATUS_OPPORTUNITY,
    INACTIVE_CLIENT_LIMIT, MISSING_KEY_MESSAGE, FALLBACK_MESSAGE, SYSTEM_PROMPT,
)

logger = logging.getLogger(__name__)


class AdvisoryError(Exception):
    """The advisory text could not be produced."""


class AdvisoryConfigurationError(AdvisoryError):
    """The advisory service is missing required configuration (API key)."""


# =============================================================================
# SNAPSHOT
# =============================================================================

def performance_status(attainment: float) -> str:
    """ALERT below 80%, OPPORTUNITY from 100%, STABILITY in between."""
    if attainment < ALERT_BELOW_PERCENT:
        return STATUS_ALERT
    if attainment >= OPPORTUNITY_FROM_PERCENT:
        return STATUS_OPPORTUNITY
    return STATUS_STABILITY


@dataclass(frozen=True)
class AdvisorySnapshot:
    """Point-in-time copy of the values the advisory prompt is built from."""
    month: str
    actual_revenue: float
    attainment: float
    status: str
    quarter: str
    quarter_trend: float
    inactive_clients: Tuple[str, ...] = ()
    company_name: str = ""

    @property
    def refresh_key(self) -> Tuple[str, str]:
        """A new advisory is due when either of these changes."""
        return (self.month, self.status)


def build_snapshot(
    metrics: SellerMetrics,
    portfolio: ClientPortfolio,
    month: str,
    company_name: str = ""
) -> AdvisorySnapshot:
    stats = metrics.month_stats(month)
    quarter = metrics.quarter_rollup(metrics.quarter_of(month))

    return AdvisorySnapshot(
        month=month,
        actual_revenue=stats.actual,
        attainment=stats.attainment,
        status=performance_status(stats.attainment),
        quarter=quarter.name,
        quarter_trend=quarter.attainment,
        inactive_clients=tuple(portfolio.inactive_clients(INACTIVE_CLIENT_LIMIT)),
        company_name=company_name,
    )


def build_prompt(snapshot: AdvisorySnapshot, language: str = "Portuguese (Brazil)") -> str:
    inactive = ", ".join(snapshot.inactive_clients) or "none"
    company = snapshot.company_name or "the company"

    return f"""
Act as Chief Growth Officer in an exclusive consulting engagement for {company}.
Use a funnel methodology (Traffic, Engagement, Conversion and Retention).

CURRENT CONTEXT ({snapshot.month}):
- Actual Revenue: {format_brl(snapshot.actual_revenue)}
- Attainment: {snapshot.attainment:.1f}% (Status: {snapshot.status})
- Quarter Trend ({snapshot.quarter}): {snapshot.quarter_trend:.1f}%
- Inactive Clients (Retention Opportunity): {inactive}

MANDATORY SECTIONS IN THE ANSWER (rich Markdown):

1. MACROECONOMIC INTELLIGENCE: How the current interest rate and inflation outlook affect industrial automation purchase decisions today.
2. WEEKLY EDITORIAL CALENDAR (LINKEDIN): Post themes for 4 weeks.
3. E-MAIL MARKETING ENGINE: A draft for reactivating inactive clients.
4. ADS ORCHESTRATOR: Where to allocate extra budget this week.

Keep the tone professional, direct and focused on execution. Answer in {language}.
""".strip()


# =============================================================================
# SERVICES
# =============================================================================

class AdvisoryService:
    """Port: turn a snapshot into advisory text or raise AdvisoryError."""

    def generate(self, snapshot: AdvisorySnapshot) -> str:
        raise NotImplementedError


class OpenAIAdvisoryService(AdvisoryService):
    """Advisory text from the OpenAI chat completions API."""

    def __init__(self, settings: AdvisoryConfig, client=None):
        self.settings = settings
        self._client = client

    @property
    def client(self):
        if self._client is None:
            if not self.settings.is_configured():
                raise AdvisoryConfigurationError("OPENAI_API_KEY is not set")
            self._client = openai.OpenAI(api_key=self.settings.api_key)
        return self._client

    def generate(self, snapshot: AdvisorySnapshot) -> str:
        client = self.client
        prompt = build_prompt(snapshot, self.settings.language)

        try:
            response = client.chat.completions.create(
                model=self.settings.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt}
                ],
                temperature=self.settings.temperature,
                max_tokens=self.settings.max_tokens
            )
        except openai.OpenAIError as e:
            raise AdvisoryError(f"OpenAI request failed: {e}") from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise AdvisoryError("OpenAI returned an empty answer")
        return content


def get_advisory_service() -> OpenAIAdvisoryService:
    return OpenAIAdvisoryService(config.get_advisory_config())


# =============================================================================
# CALL SITE
# =============================================================================

@dataclass(frozen=True)
class AdvisoryResult:
    text: str
    ok: bool
    error: Optional[str] = None


def request_advisory(service: AdvisoryService, snapshot: AdvisorySnapshot) -> AdvisoryResult:
    """Call the service; any failure becomes a fixed fallback message."""
    try:
        text = service.generate(snapshot)
    except AdvisoryConfigurationError as e:
        logger.warning(f"Advisory not configured: {e}")
        return AdvisoryResult(text=MISSING_KEY_MESSAGE, ok=False, error=str(e))
    except AdvisoryError as e:
        logger.warning(f"Advisory generation failed for {snapshot.month}: {e}")
        return AdvisoryResult(text=FALLBACK_MESSAGE, ok=False, error=str(e))
    except Exception as e:
        logger.exception(f"Unexpected advisory error for {snapshot.month}: {e}")
        return AdvisoryResult(text=FALLBACK_MESSAGE, ok=False, error=str(e))

    logger.info(f"Advisory generated for {snapshot.month} ({snapshot.status})")
    return AdvisoryResult(text=text, ok=True)
