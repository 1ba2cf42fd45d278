"""Place notification topic configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from .env import optional_env_var
from .errors import InvalidConfigurationError
from .http_resilience import RateLimit, ResilienceConfig

TOPIC_DISABLED: Final[str] = "disabled"
DEFAULT_AUTH_TOKEN_HEADER: Final[str] = "X-Auth-Token"
NOTIFICATION_TIMEOUT_SECONDS: Final[float] = 5.0


def _default_resilience() -> ResilienceConfig:
    return ResilienceConfig(
        name="place-topic",
        timeout_seconds=NOTIFICATION_TIMEOUT_SECONDS,
        ratelimit=RateLimit(max_calls=20, per_seconds=1.0),
    )


@dataclass(frozen=True, slots=True)
class NotificationConfig:
    """Where place notifications go.

    ``topic_url=None`` disables transport; events are only logged.
    """

    topic_url: str | None = None
    auth_token_header: str = DEFAULT_AUTH_TOKEN_HEADER
    resilience: ResilienceConfig = field(default_factory=_default_resilience)

    @property
    def enabled(self) -> bool:
        return self.topic_url is not None


def get_notification_config(*, resilience: ResilienceConfig | None = None) -> NotificationConfig:
    topic = optional_env_var("MUDWORLD_PLACE_TOPIC_URL")
    if topic is not None and topic.lower() == TOPIC_DISABLED:
        topic = None
    if topic is not None and not topic.startswith(("http://", "https://")):
        raise InvalidConfigurationError(f"Place topic must be an HTTP(S) URL: {topic}")
    return NotificationConfig(
        topic_url=topic,
        auth_token_header=optional_env_var("MUDWORLD_AUTH_TOKEN_HEADER")
        or DEFAULT_AUTH_TOKEN_HEADER,
        resilience=resilience or _default_resilience(),
    )
