"""
벡터 커밋먼트 서비스 설정
환경 변수에서 DB 경로, 기본 용량, 시드, 로그 레벨, 주소를 읽는다
"""

import os

# 기본 설정
DEFAULT_DB_PATH = os.getenv('VC_DB_PATH', 'db.json')
DEFAULT_CAPACITY = int(os.getenv('VC_CAPACITY', 16))
# /vc/setup가 받아들이는 최대 용량. 생성 비용이 용량에 비례한다
MAX_CAPACITY = int(os.getenv('VC_MAX_CAPACITY', 256))
DEFAULT_SRS_SEED = os.getenv('VC_SRS_SEED')
DEFAULT_LOG_LEVEL = os.getenv('VC_LOG_LEVEL', 'INFO')

DEFAULT_HOST = os.getenv('VC_HOST', 'localhost')
DEFAULT_PORT = int(os.getenv('VC_PORT', 5000))

# 개발 모드: seed로 만든 파라미터를 허용 (테스트 전용!)
# 경고: seed를 아는 사람은 거짓 증명을 만들 수 있다
DEV_MODE = os.getenv('DEV_MODE', 'true').lower() == 'true'

# TinyDB MemoryStorage를 쓰는 DB 경로
MEMORY_DB = ':memory:'


class Config:
    """설정 클래스"""

    def __init__(self):
        self.db_path = DEFAULT_DB_PATH
        self.capacity = DEFAULT_CAPACITY
        self.max_capacity = MAX_CAPACITY
        self.srs_seed = DEFAULT_SRS_SEED
        self.log_level = DEFAULT_LOG_LEVEL
        self.host = DEFAULT_HOST
        self.port = DEFAULT_PORT
        self.dev_mode = DEV_MODE

    @property
    def in_memory(self):
        return self.db_path == MEMORY_DB

    @property
    def url(self):
        return f"http://{self.host}:{self.port}"


# 전역 설정 인스턴스
config = Config()
