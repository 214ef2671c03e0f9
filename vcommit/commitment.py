"""
위치 벡터 커밋먼트 (Positional Vector Commitment)
==================================================

최대 N개의 메시지 유닛 벡터 m = (m₀, ..., m_{len-1})를 G1 점 하나로 커밋하고,
임의의 위치 pos의 값을 G1 점 하나(witness)로 열어 보인다. 검증은 페어링 두 번의
곱으로 끝나며 N과 무관하다.

**커밋먼트**:
  C = Σᵢ mᵢ · g[i] = (Σᵢ mᵢ α^(i+1)) · G1

**열기 증명 (witness)**:
  π = Σᵢ mᵢ · g[N-pos+i] = (Σ_{i≠pos} mᵢ α^(N+1-pos+i)) · G1
  i = pos 항은 g[N] (무한원점)에 떨어지므로 π에 들어가지 않는다.

**검증**:
  e(C, h[N-pos-1]) = e(G1,G2)^(Σᵢ mᵢ α^(N+1-pos+i))
  e(π, G2)         = e(G1,G2)^(Σ_{i≠pos} mᵢ α^(N+1-pos+i))
  두 값의 비는 e(G1,G2)^(m_pos α^(N+1)) = t^(m_pos) 이므로,
  양쪽을 m_pos⁻¹ 로 스케일하면

      e(C·m⁻¹, h[N-pos-1]) · e(π·(−m⁻¹), G2) == t

  이 등식은 pos 자리의 값에만 의존한다.

**바인딩만 제공한다**:
  커밋된 값을 숨기지 않으며(zero-knowledge 아님), 여러 위치를 한 번에
  여는 집계 증명도 없다.

**인코딩**:
  to_bytes는 G1 점을 비압축 64바이트 (x || y, 32바이트 빅엔디안씩)로 쓴다.
  무한원점은 64바이트의 0이다. witness도 같은 인코딩을 쓴다.

사용 예시:
    >>> from vcommit.srs import generate
    >>> from vcommit.commitment import commit, create_witness, verify
    >>> pp, vp = generate(capacity=4, seed=42)
    >>> m = [FR(5), FR(7), FR(11)]
    >>> C = commit(pp, m)
    >>> W = create_witness(pp, m, 1)
    >>> verify(C, vp, FR(7), 1, W)   # True
"""

import logging

from vcommit.errors import (
    CapacityExceeded,
    InvalidInput,
    InvalidScalar,
    SerializationError,
)
from vcommit.field import (
    FR,
    G2,
    to_fr,
    ec_mul,
    ec_msm,
    ec_pairing_product,
    is_g1_point,
    encode_g1,
    decode_g1,
)

logger = logging.getLogger(__name__)


def _message_units(inputs, capacity):
    try:
        inputs = [to_fr(m) for m in inputs]
    except TypeError as e:
        raise InvalidInput(str(e)) from e
    if len(inputs) > capacity:
        raise CapacityExceeded(
            f"입력 길이 {len(inputs)}가 용량 {capacity}를 초과합니다"
        )
    return inputs


def _check_position(pos, capacity):
    if isinstance(pos, bool) or not isinstance(pos, int):
        raise InvalidInput(f"위치는 정수여야 합니다: {pos!r}")
    if not 0 <= pos < capacity:
        raise CapacityExceeded(f"위치 {pos}가 [0, {capacity}) 범위를 벗어났습니다")


def commit(prover_param, inputs):
    """메시지 유닛 벡터를 커밋한다.

    C = MSM(g[0:len], inputs)

    Args:
        prover_param: ProverParam
        inputs: 메시지 유닛 리스트 (FR 또는 정수), 길이 ≤ N. 인덱스가 곧 위치이다.

    Returns:
        G1 점: 커밋먼트 C (빈 벡터나 모두 0인 벡터는 무한원점 None)

    Raises:
        CapacityExceeded: len(inputs) > N
    """
    pp = prover_param
    inputs = _message_units(inputs, pp.capacity)

    logger.debug("commit: len=%d capacity=%d", len(inputs), pp.capacity)
    return ec_msm(pp.g[:len(inputs)], inputs)


def create_witness(prover_param, inputs, pos):
    """위치 pos의 값에 대한 열기 증명(witness)을 만든다.

    π = MSM(g[N-pos : N-pos+len], inputs)

    g를 N-pos만큼 밀어 쓰면 pos 자리의 항이 g[N] (무한원점)에 떨어진다.
    커밋먼트와 같은 inputs 스냅샷, 같은 ProverParam으로 만들어야 의미가 있다.

    pos ≥ len(inputs)인 자리는 암묵적으로 0이다. 0인 값은 검증할 수 없으므로
    (verify가 역원을 요구한다) 그런 위치를 여는 것은 오류로 처리한다.

    Args:
        prover_param: ProverParam
        inputs: commit에 쓴 것과 같은 메시지 유닛 리스트
        pos: 열 위치 (0 ≤ pos < N)

    Returns:
        G1 점: witness π

    Raises:
        CapacityExceeded: len(inputs) > N, pos가 [0, N) 밖, 또는 밀린 창이 g를 벗어날 때
        InvalidScalar: pos 자리의 값이 0일 때
    """
    pp = prover_param
    n = pp.capacity
    inputs = _message_units(inputs, n)
    _check_position(pos, n)

    start = n - pos
    end = start + len(inputs)
    if end > len(pp.g):
        raise CapacityExceeded(
            f"위치 {pos}의 창 g[{start}:{end}]가 g의 길이 {len(pp.g)}를 벗어납니다"
        )
    if pos >= len(inputs) or inputs[pos] == FR(0):
        raise InvalidScalar(f"위치 {pos}의 값이 0이므로 열 수 없습니다")

    logger.debug("open: pos=%d len=%d capacity=%d", pos, len(inputs), n)
    return ec_msm(pp.g[start:end], inputs)


def verify(commitment, verifier_param, value, pos, witness):
    """(pos, value)가 커밋먼트에 들어 있는 값인지 검증한다.

    1. com'   = C · value⁻¹
    2. proof' = π · (−value⁻¹)
    3. e(com', h[N-pos-1]) · e(proof', G2) == t

    Args:
        commitment: G1 점 C
        verifier_param: VerifierParam
        value: 주장하는 pos 자리의 값 (0이 아니어야 함)
        pos: 위치 (0 ≤ pos < N)
        witness: create_witness가 만든 G1 점 π

    Returns:
        bool: 검증 성공 여부

    Raises:
        CapacityExceeded: pos가 [0, N) 밖일 때
        InvalidScalar: value == 0
        InvalidInput: commitment나 witness가 G1 점이 아닐 때
    """
    vp = verifier_param
    n = vp.capacity
    _check_position(pos, n)

    try:
        value = to_fr(value)
    except TypeError as e:
        raise InvalidInput(str(e)) from e
    if value == FR(0):
        raise InvalidScalar("값 0은 역원이 없어 검증할 수 없습니다")
    if not is_g1_point(commitment):
        raise InvalidInput("커밋먼트가 G1 점이 아닙니다")
    if not is_g1_point(witness):
        raise InvalidInput("witness가 G1 점이 아닙니다")

    value_inv = FR(1) / value
    com = ec_mul(commitment, value_inv)
    proof = ec_mul(witness, FR(0) - value_inv)

    result = ec_pairing_product([
        (com, vp.h[n - pos - 1]),
        (proof, G2),
    ]) == vp.t

    logger.debug("verify: pos=%d capacity=%d result=%s", pos, n, result)
    return result


def to_bytes(commitment):
    """커밋먼트(또는 witness)를 64바이트로 직렬화한다.

    Raises:
        SerializationError: G1 점이 아닐 때
    """
    return encode_g1(commitment)


def from_bytes(data):
    """to_bytes의 역변환. 곡선 위의 점인지 확인한다.

    Raises:
        SerializationError: 길이, 좌표 범위, 곡선 방정식 중 하나라도 맞지 않을 때
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise SerializationError(f"bytes가 필요합니다: {type(data).__name__}")
    return decode_g1(data)
