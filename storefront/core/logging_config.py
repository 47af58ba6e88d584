"""로깅 설정."""

import logging

from storefront.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    """
    settings.log_level 기준으로 루트 로거를 설정합니다.

    애플리케이션 시작 시 한 번 호출합니다.
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("storefront").setLevel(level)
