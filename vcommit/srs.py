"""
개발용 파라미터 생성 (Structured Reference String)
====================================================

벡터 커밋먼트의 ProverParam / VerifierParam을 만든다.

**이것은 신뢰 설정이 아니다**:
  실제 배포에서는 MPC 세리머니 등 외부 절차가 파라미터를 만들고
  비밀 값 α ("toxic waste")를 폐기한다. 여기서는 테스트와 로컬 개발을 위해
  seed에서 결정론적으로 α를 만든다. seed를 아는 사람은 누구나 거짓 증명을
  만들 수 있다.

**만드는 값** (N = capacity):
  g = [α¹·G1, ..., α^N·G1, ∞, α^(N+2)·G1, ..., α^(2N)·G1]   (길이 2N)
  h = [α¹·G2, ..., α^N·G2]                                  (길이 N)
  t = e(α^(N+1)·G1, G2)

사용 예시:
    >>> pp, vp = generate(capacity=4, seed=42)
    >>> len(pp.g), len(vp.h)   # (8, 4)
"""

import hashlib
import logging
import secrets

from vcommit.errors import CapacityExceeded
from vcommit.field import FR, G1, G2, CURVE_ORDER, ec_mul, ec_pairing
from vcommit.params import ProverParam, VerifierParam

logger = logging.getLogger(__name__)


def _trapdoor(seed):
    if seed is not None:
        h = hashlib.sha256(str(seed).encode()).digest()
        alpha = int.from_bytes(h, "big") % CURVE_ORDER
        if alpha != 0:
            return FR(alpha)
    return FR(secrets.randbelow(CURVE_ORDER - 1) + 1)


def generate(capacity, seed=None):
    """용량 N의 Prover/Verifier 파라미터 쌍을 생성한다.

    Args:
        capacity: 커밋할 수 있는 최대 벡터 길이 N (≥ 1)
        seed: 결정론적 생성을 위한 시드 (테스트용). None이면 무작위 α.

    Returns:
        (ProverParam, VerifierParam)

    Raises:
        CapacityExceeded: capacity < 1
    """
    capacity = int(capacity)
    if capacity < 1:
        raise CapacityExceeded(f"용량은 1 이상이어야 합니다: {capacity}")

    alpha = _trapdoor(seed)

    # α^1, α^2, ..., α^(2N)
    powers = []
    power = FR(1)
    for _ in range(2 * capacity):
        power = power * alpha
        powers.append(power)

    g = [ec_mul(G1, p) for p in powers]
    # α^(N+1)·G1은 공개하지 않는다
    g[capacity] = None

    h = [ec_mul(G2, p) for p in powers[:capacity]]
    t = ec_pairing(G2, ec_mul(G1, powers[capacity]))

    logger.debug("generated parameters: capacity=%d seeded=%s", capacity, seed is not None)

    return ProverParam(capacity, g), VerifierParam(capacity, h, t)
