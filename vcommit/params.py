"""
Prover / Verifier 파라미터
===========================

신뢰 설정(trusted setup)이 만들어 배포하는 두 개의 공개 파라미터 레코드.
한 번 만들어지면 변하지 않으며, 모든 prover와 verifier가 참조로 공유한다.

**ProverParam** = { capacity N, g[0..2N) ⊂ G1 }
    g[k] = α^(k+1) · G1   (k ≠ N)
    g[N] = 무한원점       (α^(N+1)·G1은 절대 공개되지 않는다)

**VerifierParam** = { capacity N, h[0..N) ⊂ G2, t ∈ GT }
    h[k] = α^(k+1) · G2
    t    = e(G1, G2)^(α^(N+1))

g의 빈 칸 g[N]이 이 스킴의 핵심이다. 위치 pos를 여는 증명은 g를 N-pos만큼
밀어 쓴 창(window)으로 계산되는데, pos 자리의 항은 정확히 g[N]에 떨어져
사라진다. 검증자는 사라진 항을 t로 되돌려 놓고 비교한다.

**신뢰 경계**:
  α (toxic waste)가 폐기되었는지는 파라미터만 보고 알 수 없다.
  이 모듈은 배열 길이와 용량만 검사하며, 파라미터 자체는 외부에서
  신뢰된 입력으로 취급한다.
"""

from vcommit.errors import ParameterMismatch


class ProverParam:
    """Prover 쪽 SRS (G1).

    속성:
        capacity: 커밋 가능한 최대 벡터 길이 N
        g: G1 점의 튜플 (길이 ≥ 2N - 1, setup이 만든 경우 2N)
    """

    __slots__ = ("capacity", "g")

    def __init__(self, capacity, g):
        capacity = int(capacity)
        if capacity < 1:
            raise ParameterMismatch(f"용량은 1 이상이어야 합니다: {capacity}")
        g = tuple(g)
        if len(g) < 2 * capacity - 1:
            raise ParameterMismatch(
                f"g의 길이 {len(g)}가 2N-1 = {2 * capacity - 1}보다 작습니다"
            )
        self.capacity = capacity
        self.g = g

    def __eq__(self, other):
        if not isinstance(other, ProverParam):
            return NotImplemented
        return self.capacity == other.capacity and self.g == other.g

    def __repr__(self):
        return f"ProverParam(capacity={self.capacity}, len(g)={len(self.g)})"


class VerifierParam:
    """Verifier 쪽 SRS (G2)와 검증 기준값 t (GT).

    속성:
        capacity: N
        h: G2 점의 튜플 (길이 ≥ N)
        t: e(G1, G2)^(α^(N+1))
    """

    __slots__ = ("capacity", "h", "t")

    def __init__(self, capacity, h, t):
        capacity = int(capacity)
        if capacity < 1:
            raise ParameterMismatch(f"용량은 1 이상이어야 합니다: {capacity}")
        h = tuple(h)
        if len(h) < capacity:
            raise ParameterMismatch(
                f"h의 길이 {len(h)}가 N = {capacity}보다 작습니다"
            )
        if t is None:
            raise ParameterMismatch("검증 기준값 t가 없습니다")
        self.capacity = capacity
        self.h = h
        self.t = t

    def __eq__(self, other):
        if not isinstance(other, VerifierParam):
            return NotImplemented
        return (
            self.capacity == other.capacity
            and self.h == other.h
            and self.t == other.t
        )

    def __repr__(self):
        return f"VerifierParam(capacity={self.capacity}, len(h)={len(self.h)})"


def check_compatible(prover_param, verifier_param):
    """두 파라미터가 같은 용량을 가지는지 확인한다.

    같은 setup에서 나왔는지까지는 확인할 수 없다. 용량이 다르면 인덱스
    산술(N - pos, N - pos - 1)이 서로 다른 α 거듭제곱을 가리키게 되어
    올바른 증명도 검증에 실패한다.

    Raises:
        ParameterMismatch: 용량이 다를 때
    """
    if prover_param.capacity != verifier_param.capacity:
        raise ParameterMismatch(
            f"Prover 용량 {prover_param.capacity}와 "
            f"Verifier 용량 {verifier_param.capacity}가 다릅니다"
        )
