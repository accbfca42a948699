# app/core/config.py

import os # 환경 변수를 읽기 위해 사용합니다.


class Config:
    """모든 환경 설정의 기반이 되는 공통 설정 클래스입니다."""
    # JWT 토큰을 서명하고 검증하는 데 사용되는 비밀 키입니다. 값이 없으면 앱이 시작되지 않습니다.
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY')
    # 토큰을 실어 보내는 커스텀 요청 헤더 이름 (Authorization 헤더가 아님)
    AUTH_HEADER_NAME = os.getenv('AUTH_HEADER_NAME', 'x-auth-token')
    # 발급되는 액세스 토큰의 유효 시간(초)
    JWT_ACCESS_TOKEN_EXPIRES = int(os.getenv('JWT_ACCESS_TOKEN_EXPIRES', 360000))

    FIREBASE_CREDENTIALS_PATH = os.getenv('FIREBASE_CREDENTIALS_PATH')


class DevelopmentConfig(Config):
    """개발 환경을 위한 설정 클래스입니다."""
    DEBUG = True
    FIREBASE_CREDENTIALS_PATH = os.getenv('DEV_FIREBASE_CREDENTIALS_PATH', Config.FIREBASE_CREDENTIALS_PATH)


class TestingConfig(Config):
    """테스트 환경을 위한 설정 클래스입니다."""
    TESTING = True
    DEBUG = False
    # 테스트에서는 Firestore 대신 메모리 더블을 주입하므로 고정 키를 사용합니다.
    JWT_SECRET_KEY = os.getenv('TEST_JWT_SECRET_KEY', 'testing-only-secret-key-not-for-production')
    FIREBASE_CREDENTIALS_PATH = os.getenv('TEST_FIREBASE_CREDENTIALS_PATH')


class ProductionConfig(Config):
    DEBUG = False


# FLASK_ENV 값에 따라 create_app에서 설정 클래스를 선택합니다.
config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig
)
