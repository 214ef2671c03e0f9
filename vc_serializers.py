"""
벡터 커밋먼트 데이터 직렬화/역직렬화 헬퍼
==========================================

TinyDB와 JSON 응답에 담을 수 있는 형태로 객체를 변환한다.
FR, G1, G2, GT, ProverParam, VerifierParam, 커밋먼트/witness 등.

커밋먼트와 witness는 저장소에는 좌표 문자열로, HTTP로는 to_bytes의 hex로 오간다.
"""

import re

from py_ecc import bn128

from vcommit.errors import SerializationError
from vcommit.field import FR, FIELD_MODULUS, is_g1_point, is_g2_point
from vcommit.params import ProverParam, VerifierParam
from vcommit.commitment import to_bytes, from_bytes

_DECIMAL = re.compile(r"-?[0-9]+")


# ─── 정수 ───

def _parse_int(s, what):
    """JSON 정수 또는 10진수 문자열 → int. float는 잘라내지 않고 거부한다."""
    if isinstance(s, bool):
        raise SerializationError(f"{what} 값이 아닙니다: {s!r}")
    if isinstance(s, int):
        return s
    if isinstance(s, str) and _DECIMAL.fullmatch(s):
        return int(s)
    raise SerializationError(f"{what} 값이 아닙니다: {s!r}")


def _parse_coord(s):
    v = _parse_int(s, "좌표")
    if not 0 <= v < FIELD_MODULUS:
        raise SerializationError("좌표가 베이스 필드 범위를 벗어났습니다")
    return v


def _pair(data, what):
    if not isinstance(data, list) or len(data) != 2:
        raise SerializationError(f"{what}는 원소 2개짜리 리스트여야 합니다: {data!r}")
    return data


# ─── FR ───

def serialize_fr(val):
    """FR → str(int)"""
    return str(int(val))


def deserialize_fr(s):
    """str(int) 또는 int → FR

    Raises:
        SerializationError: bool, float 등 정수가 아닌 값이거나 10진수 문자열이 아닐 때
    """
    return FR(_parse_int(s, "FR"))


def serialize_fr_list(lst):
    """list[FR] → list[str]"""
    return [serialize_fr(v) for v in lst]


def deserialize_fr_list(data):
    """list[str] → list[FR]"""
    if not isinstance(data, list):
        raise SerializationError("FR 리스트가 필요합니다")
    return [deserialize_fr(s) for s in data]


# ─── G1 point ───

def serialize_g1(point):
    """G1 point → [x, y] 10진수 문자열, 무한원점은 None"""
    if point is None:
        return None
    x, y = point
    return [str(int(x)), str(int(y))]


def deserialize_g1(data):
    """[x, y] 또는 None → G1 점. 곡선 위의 점인지 확인한다.

    Raises:
        SerializationError: 형식이 틀리거나 곡선 위의 점이 아닐 때
    """
    if data is None:
        return None
    x, y = _pair(data, "G1 점")
    point = (bn128.FQ(_parse_coord(x)), bn128.FQ(_parse_coord(y)))
    if not is_g1_point(point):
        raise SerializationError("G1 곡선 위의 점이 아닙니다")
    return point


# ─── G2 point ───

def serialize_g2(point):
    """G2 point → [[x0, x1], [y0, y1]] 또는 None"""
    if point is None:
        return None
    return [[str(int(c)) for c in coord.coeffs] for coord in point]


def deserialize_g2(data):
    """[[x0, x1], [y0, y1]] 또는 None → G2 점

    Raises:
        SerializationError: 형식이 틀리거나 트위스트 곡선 위의 점이 아닐 때
    """
    if data is None:
        return None
    coords = [
        bn128.FQ2([_parse_coord(c) for c in _pair(coord, "FQ2 좌표")])
        for coord in _pair(data, "G2 점")
    ]
    point = tuple(coords)
    if not is_g2_point(point):
        raise SerializationError("G2 트위스트 곡선 위의 점이 아닙니다")
    return point


# ─── GT (FQ12) ───

def serialize_gt(val):
    """FQ12 → list of 12 str"""
    return [str(int(c)) for c in val.coeffs]


def deserialize_gt(data):
    """list of 12 str → FQ12"""
    if not isinstance(data, list) or len(data) != 12:
        size = len(data) if isinstance(data, list) else type(data).__name__
        raise SerializationError(f"GT 원소는 계수 12개여야 합니다: {size}")
    return bn128.FQ12([_parse_coord(c) for c in data])


# ─── 커밋먼트 / witness (wire) ───

def point_to_hex(point):
    """G1 점 → to_bytes의 hex 문자열"""
    return to_bytes(point).hex()


def point_from_hex(hex_str):
    """hex 문자열 → G1 점

    Raises:
        SerializationError: hex가 아니거나 G1 인코딩이 아닐 때
    """
    if not isinstance(hex_str, str):
        raise SerializationError("hex 문자열이 필요합니다")
    try:
        data = bytes.fromhex(hex_str)
    except ValueError as e:
        raise SerializationError(f"hex 문자열이 아닙니다: {hex_str!r}") from e
    return from_bytes(data)


# ─── ProverParam / VerifierParam ───

def serialize_prover_param(pp):
    """ProverParam → dict"""
    return {
        "capacity": pp.capacity,
        "g": [serialize_g1(p) for p in pp.g],
    }


def deserialize_prover_param(data):
    """dict → ProverParam"""
    g = [deserialize_g1(p) for p in data["g"]]
    return ProverParam(data["capacity"], g)


def serialize_verifier_param(vp):
    """VerifierParam → dict"""
    return {
        "capacity": vp.capacity,
        "h": [serialize_g2(p) for p in vp.h],
        "t": serialize_gt(vp.t),
    }


def deserialize_verifier_param(data):
    """dict → VerifierParam"""
    h = [deserialize_g2(p) for p in data["h"]]
    return VerifierParam(data["capacity"], h, deserialize_gt(data["t"]))


# ─── 표시용 축약 ───

def g1_short(point):
    """G1 점을 짧은 문자열로 (표시용)"""
    if point is None:
        return "O (infinity)"
    x = str(int(point[0]))
    return f"({x[:8]}...{x[-4:]}, ...)"
