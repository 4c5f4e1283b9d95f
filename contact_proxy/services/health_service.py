from contact_proxy.clients.freshdesk import normalize_domain
from contact_proxy.core.config import Settings
from contact_proxy.models.schemas.health import FreshdeskHealth, HealthResponse


class HealthService:
    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def get_health(self) -> HealthResponse:
        configured = self.settings.freshdesk_configured
        domain = normalize_domain(self.settings.freshdesk_domain) or None
        return HealthResponse(
            status="ok" if configured else "degraded",
            environment=self.settings.app_env,
            freshdesk=FreshdeskHealth(configured=configured, domain=domain),
        )
