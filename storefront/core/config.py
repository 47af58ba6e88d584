"""
애플리케이션 설정 관리

Pydantic Settings를 사용하여 환경 변수를 로드합니다.
.env 파일 또는 시스템 환경 변수에서 설정을 읽어옵니다.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정 클래스"""

    # MongoDB 설정 (영구 저장소)
    mongodb_uri: str | None = None
    mongodb_db_name: str = "ecommerce"
    mongodb_timeout_ms: int = 5000

    # 로컬 대체 저장소 (MongoDB 미설정 시 사용)
    database_url: str = "sqlite://"

    # 관리자 계정
    admin_username: str = "admin"
    admin_password: str = "password"
    admin_password_hash: str | None = None  # 설정 시 평문 비밀번호보다 우선

    # 인증 쿠키 / JWT 설정
    jwt_secret_key: str = "change-me-in-production"
    jwt_algorithm: str = "HS256"
    session_ttl_days: int = 7
    cookie_secure: bool = False

    # 애플리케이션 설정
    app_env: str = "development"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 정의되지 않은 환경 변수 무시
    )

    @property
    def has_persistent_store(self) -> bool:
        """
        영구 저장소(MongoDB) 사용 여부

        시작 시 한 번 결정되며, 저장소 구현과 인증 방식 선택에 사용됩니다.
        """
        return bool(self.mongodb_uri)

    @property
    def session_max_age_seconds(self) -> int:
        """세션 쿠키 만료 시간 (초)"""
        return self.session_ttl_days * 24 * 60 * 60


@lru_cache
def get_settings() -> Settings:
    """
    Settings 인스턴스를 반환하는 팩토리 함수

    프로세스 전체에서 같은 설정 객체를 공유합니다.
    """
    return Settings()
