"""
벡터 커밋먼트 기반 모듈: 유한체(Finite Field) 및 타원곡선 연산
================================================================

커밋먼트 엔진 전체에서 사용되는 대수적 도구를 py_ecc의 bn128 곡선 위에
명시적인 이름의 함수로 감싸 제공한다. 연산자 오버로딩 대신 ec_add, ec_mul,
ec_msm, ec_pairing_product 같은 이름 있는 호출을 사용하여 어떤 그룹 연산이
일어나는지 코드에서 바로 읽을 수 있게 한다.

**유한체 FR**:
  bn128 곡선의 스칼라 필드. 메시지 유닛(message unit)은 FR 원소이다.
  - 위수(order) r ≈ 2^254, 소수체(prime field)

**타원곡선 연산**:
  G1, G2 소스 그룹의 덧셈/스칼라 곱/다중 스칼라 곱(MSM)과
  GT 타깃 그룹으로의 페어링.

**점 인코딩**:
  G1 점은 비압축 64바이트 (x || y, 각 32바이트 빅엔디안)로 인코딩한다.
  EVM 프리컴파일(EIP-196)과 같은 배치이며, 무한원점은 64바이트의 0이다.
  bn128의 G1은 cofactor가 1이므로 곡선 위의 점이면 곧 G1 원소이다.

사용 예시:
    >>> from vcommit.field import FR, G1, ec_mul, ec_msm
    >>> P = ec_mul(G1, 5)                       # 5·G1
    >>> Q = ec_msm([G1, P], [FR(2), FR(3)])     # 2·G1 + 3·(5·G1) = 17·G1
"""

import hashlib

from py_ecc.fields import bn128_FQ as FQ
from py_ecc import bn128

from vcommit.errors import SerializationError


# ─────────────────────────────────────────────────────────────────────
# 유한체(Finite Field) FR
# ─────────────────────────────────────────────────────────────────────

class FR(FQ):
    """bn128 스칼라 필드 위의 유한체 원소.

    py_ecc의 FQ 클래스를 상속하여 +, -, *, /, ** 등의 필드 연산을 제공한다.

    주의:
        py_ecc는 0의 역원을 0으로 돌려준다 (예외가 아님).
        역원이 필요한 곳에서는 호출자가 먼저 0인지 확인해야 한다.

    예시:
        >>> x = FR(3)
        >>> FR(1) / x       # 3의 모듈러 역원
    """
    field_modulus = bn128.curve_order


# 스칼라 필드 위수
CURVE_ORDER = bn128.curve_order

# 베이스 필드 위수 (점 좌표의 범위)
FIELD_MODULUS = bn128.field_modulus

# 인코딩된 G1 점의 바이트 길이
G1_ENCODED_SIZE = 64


# ─────────────────────────────────────────────────────────────────────
# 타원곡선 상수 및 연산
# ─────────────────────────────────────────────────────────────────────

# G1 그룹 생성자 (generator)
G1 = bn128.G1

# G2 그룹 생성자 (generator)
G2 = bn128.G2

# 영점 (point at infinity) - 항등원
Z1 = None  # bn128에서 G1의 항등원은 None으로 표현


def to_fr(value):
    """정수 또는 FR 원소를 FR로 변환한다. 정수는 위수로 축소된다.

    Raises:
        TypeError: value가 정수도 FR도 아닐 때 (bool 포함)
    """
    if isinstance(value, FR):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"메시지 유닛은 정수 또는 FR이어야 합니다: {value!r}")
    return FR(value)


def hash_to_fr(data):
    """임의의 바이트열을 메시지 유닛(FR 원소)으로 변환한다.

    SHA-256 다이제스트를 빅엔디안 정수로 읽어 스칼라 필드 위수로 축소한다.
    트랜잭션 해시처럼 필드보다 큰 값을 커밋할 때 사용한다.

    Args:
        data: bytes

    Returns:
        FR: H(data) mod r

    예시:
        >>> m = hash_to_fr(b"tx-0")
    """
    digest = hashlib.sha256(bytes(data)).digest()
    return FR(int.from_bytes(digest, "big") % CURVE_ORDER)


def ec_mul(point, scalar):
    """타원곡선 스칼라 곱셈: scalar · point.

    Args:
        point: G1 또는 G2 위의 점 (None이면 무한원점)
        scalar: 정수 또는 FR 원소

    Returns:
        scalar · point (같은 그룹의 점)
    """
    if point is None:
        return None
    if isinstance(scalar, FR):
        scalar = int(scalar)
    return bn128.multiply(point, scalar % CURVE_ORDER)


def ec_add(p1, p2):
    """타원곡선 점 덧셈: p1 + p2. 무한원점(None)은 항등원으로 처리된다."""
    return bn128.add(p1, p2)


def ec_double(point):
    """타원곡선 점 두 배: 2·point."""
    if point is None:
        return None
    return bn128.double(point)


def ec_neg(point):
    """타원곡선 점의 역원 (negation): -point."""
    if point is None:
        return None
    return bn128.neg(point)


def _msm_window_bits(n):
    # 버킷 수 2^c - 1 이 입력 개수와 비슷해지도록 c를 고른다
    return max(2, n.bit_length() - 1)


def ec_msm(points, scalars):
    """다중 스칼라 곱셈 (MSM): Σᵢ scalarsᵢ · pointsᵢ.

    Pippenger 버킷 방식으로 계산한다.
      1. 스칼라를 c비트 윈도우로 자른다.
      2. 각 윈도우에서 같은 c비트 값을 가진 점들을 버킷에 모은다.
      3. 버킷 합을 누적합(running sum)으로 Σ k·Bₖ 로 만든다.
      4. 상위 윈도우부터 c번 두 배 하며 결합한다.

    0 스칼라와 무한원점은 결과에 기여하지 않으므로 먼저 제외한다.
    입력이 두 개 이하이면 단순 스칼라 곱의 합이 더 빠르다.

    Args:
        points: 같은 그룹 (G1 또는 G2)의 점 리스트
        scalars: 정수 또는 FR 원소 리스트 (points와 같은 길이)

    Returns:
        점 (모두 0이면 None)

    Raises:
        ValueError: points와 scalars의 길이가 다를 때
    """
    if len(points) != len(scalars):
        raise ValueError(
            f"점 개수 {len(points)}와 스칼라 개수 {len(scalars)}가 다릅니다"
        )

    terms = []
    for point, scalar in zip(points, scalars):
        s = int(scalar) % CURVE_ORDER
        if point is None or s == 0:
            continue
        terms.append((point, s))

    if not terms:
        return None
    if len(terms) <= 2:
        result = None
        for point, s in terms:
            result = ec_add(result, bn128.multiply(point, s))
        return result

    c = _msm_window_bits(len(terms))
    mask = (1 << c) - 1
    num_bits = CURVE_ORDER.bit_length()

    result = None
    for shift in reversed(range(0, num_bits, c)):
        for _ in range(c):
            result = ec_double(result)

        buckets = [None] * mask
        for point, s in terms:
            idx = (s >> shift) & mask
            if idx:
                buckets[idx - 1] = ec_add(buckets[idx - 1], point)

        # Σ k·B_k = B_max + (B_max + B_max-1) + ...
        running = None
        window_sum = None
        for bucket in reversed(buckets):
            running = ec_add(running, bucket)
            window_sum = ec_add(window_sum, running)

        result = ec_add(result, window_sum)

    return result


def ec_pairing(g2_point, g1_point):
    """쌍선형 페어링 e(G1, G2) → GT.

    주의:
        py_ecc.bn128.pairing의 인자 순서는 (G2, G1)이다.
    """
    return bn128.pairing(g2_point, g1_point)


def ec_pairing_product(pairs):
    """페어링 곱 Πᵢ e(Pᵢ, Qᵢ)를 계산한다.

    ec_pairing과 달리 각 쌍은 수학 표기 순서 그대로 (G1 점, G2 점)이다.
    한쪽이 무한원점이면 해당 항은 GT의 항등원 1이 된다.

    Args:
        pairs: [(g1_point, g2_point), ...]

    Returns:
        GT 원소 (FQ12)

    예시:
        >>> ec_pairing_product([(G1, G2), (ec_neg(G1), G2)]) == gt_one()  # True
    """
    result = gt_one()
    for g1_point, g2_point in pairs:
        if g1_point is None or g2_point is None:
            continue
        result = result * ec_pairing(g2_point, g1_point)
    return result


def gt_one():
    """GT의 항등원."""
    return bn128.FQ12.one()


def is_g1_point(point):
    """point가 G1 원소(무한원점 포함)인지 확인한다."""
    if point is None:
        return True
    if not isinstance(point, tuple) or len(point) != 2:
        return False
    if not all(type(coord) is bn128.FQ for coord in point):
        return False
    return bn128.is_on_curve(point, bn128.b)


def is_g2_point(point):
    """point가 bn128 트위스트 곡선 위의 점(무한원점 포함)인지 확인한다."""
    if point is None:
        return True
    if not isinstance(point, tuple) or len(point) != 2:
        return False
    if not all(type(coord) is bn128.FQ2 for coord in point):
        return False
    return bn128.is_on_curve(point, bn128.b2)


# ─────────────────────────────────────────────────────────────────────
# G1 점 인코딩
# ─────────────────────────────────────────────────────────────────────

def encode_g1(point):
    """G1 점을 64바이트로 인코딩한다.

    배치: x (32바이트 빅엔디안) || y (32바이트 빅엔디안).
    무한원점은 64바이트의 0이다. (0, 0)은 곡선 위의 점이 아니므로 충돌하지 않는다.

    Raises:
        SerializationError: point가 G1 원소가 아닐 때
    """
    if point is None:
        return b"\x00" * G1_ENCODED_SIZE
    if not is_g1_point(point):
        raise SerializationError(f"G1 점이 아닙니다: {point!r}")
    x, y = point
    return int(x).to_bytes(32, "big") + int(y).to_bytes(32, "big")


def decode_g1(data):
    """encode_g1의 역변환.

    Raises:
        SerializationError: 길이가 64가 아니거나, 좌표가 베이스 필드 범위를
            벗어나거나, 곡선 위의 점이 아닐 때
    """
    data = bytes(data)
    if len(data) != G1_ENCODED_SIZE:
        raise SerializationError(
            f"G1 인코딩은 {G1_ENCODED_SIZE}바이트여야 합니다: {len(data)}바이트"
        )
    if data == b"\x00" * G1_ENCODED_SIZE:
        return None

    x = int.from_bytes(data[:32], "big")
    y = int.from_bytes(data[32:], "big")
    if x >= FIELD_MODULUS or y >= FIELD_MODULUS:
        raise SerializationError("좌표가 베이스 필드 범위를 벗어났습니다")

    point = (bn128.FQ(x), bn128.FQ(y))
    if not bn128.is_on_curve(point, bn128.b):
        raise SerializationError("곡선 위의 점이 아닙니다")
    return point
