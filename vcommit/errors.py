"""
벡터 커밋먼트 예외 계층
========================

모든 예외는 ValueError를 상속한다. 잘못된 입력에 대해 ValueError를 던지는
기존 관례를 유지하면서, 호출자가 실패 원인을 타입으로 구분할 수 있게 한다.

    VectorCommitmentError
    ├── InvalidInput
    │   ├── CapacityExceeded   (벡터 길이 > N, 위치가 [0, N) 밖)
    │   └── InvalidScalar      (0의 역원이 필요한 경우)
    ├── ParameterMismatch      (Prover/Verifier 파라미터 불일치)
    └── SerializationError     (점 인코딩/디코딩 실패)

이 모듈의 에러는 재시도 대상이 아니다. 입력 자체가 잘못된 것이므로
호출자는 해당 연산을 중단해야 한다.
"""


class VectorCommitmentError(ValueError):
    """벡터 커밋먼트 연산의 모든 실패의 기반 클래스."""

    kind = "VectorCommitmentError"


class InvalidInput(VectorCommitmentError):
    """호출자가 전달한 입력이 연산의 전제 조건을 만족하지 않는다."""

    kind = "InvalidInput"


class CapacityExceeded(InvalidInput):
    """입력 벡터가 용량 N보다 길거나, 위치가 [0, N) 범위를 벗어났다."""

    kind = "CapacityExceeded"


class InvalidScalar(InvalidInput):
    """0인 메시지 유닛의 역원을 요구하는 연산이 시도되었다."""

    kind = "InvalidScalar"


class ParameterMismatch(VectorCommitmentError):
    """파라미터의 용량이 서로 다르거나 배열 길이가 용량과 맞지 않는다."""

    kind = "ParameterMismatch"


class SerializationError(VectorCommitmentError):
    """그룹 원소의 바이트 인코딩/디코딩에 실패했다."""

    kind = "SerializationError"
