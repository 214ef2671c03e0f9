import sys
import os
import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from vcommit.field import FR
from vcommit.srs import generate


# ── 테스트 상수 ──
CAPACITY = 4
SRS_SEED = 42

# N = 4 중 3칸만 채운 벡터
EXAMPLE_INPUTS = [FR(5), FR(7), FR(11)]

# 용량을 꽉 채운 벡터
FULL_INPUTS = [FR(3), FR(1234567), FR(-1), FR(9)]


@pytest.fixture(scope="session")
def params():
    """N=4 파라미터 (pp, vp). 페어링 비용 때문에 세션당 한 번만 만든다."""
    return generate(CAPACITY, seed=SRS_SEED)


@pytest.fixture(scope="session")
def prover_param(params):
    return params[0]


@pytest.fixture(scope="session")
def verifier_param(params):
    return params[1]


@pytest.fixture
def example_inputs():
    return list(EXAMPLE_INPUTS)


@pytest.fixture
def full_inputs():
    return list(FULL_INPUTS)
