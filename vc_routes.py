"""
벡터 커밋먼트 Flask Blueprint: JSON 엔드포인트
=================================================

파라미터 생성, 커밋, 열기, 검증을 HTTP로 노출한다.
파라미터와 커밋된 벡터 스냅샷은 TinyDB에 저장한다.

  GET  /vc/health
  POST /vc/setup
  GET  /vc/params
  POST /vc/commit
  GET  /vc/commitments/<key>
  POST /vc/open
  POST /vc/verify
  POST /vc/clear

커밋먼트/witness는 to_bytes의 hex로 주고받고, 메시지 유닛은 10진수 문자열
(또는 JSON 정수)로 주고받는다.
"""

from flask import Blueprint, jsonify, request, current_app
from tinydb import Query

from config import config
from vcommit.errors import VectorCommitmentError, InvalidInput, CapacityExceeded
from vcommit.params import check_compatible
from vcommit.srs import generate
from vcommit.commitment import commit, create_witness, verify

from vc_serializers import (
    serialize_fr, deserialize_fr,
    serialize_g1, deserialize_g1,
    serialize_fr_list, deserialize_fr_list,
    serialize_prover_param, deserialize_prover_param,
    serialize_verifier_param, deserialize_verifier_param,
    point_to_hex, point_from_hex,
    g1_short,
)

vc_bp = Blueprint('vc', __name__, url_prefix='/vc')

DATA = Query()

PROVER_PARAM_KEY = "vc.params.prover"
VERIFIER_PARAM_KEY = "vc.params.verifier"
COMMITMENT_PREFIX = "vc.commitment."


def init_vc_bp(app, db):
    """app.py에서 앱별 TinyDB 테이블을 주입받는다."""
    app.extensions["vc_db"] = db


# ─── DB 헬퍼 ───

def _db():
    return current_app.extensions["vc_db"]


def db_get(key):
    """DB에서 키로 데이터를 조회한다."""
    result = _db().search(DATA.type == key)
    if not result:
        return None
    return result[0].get("data")


def db_set(key, data):
    """DB에 키로 데이터를 저장한다."""
    _db().upsert({"type": key, "data": data}, DATA.type == key)


def db_remove_prefix(prefix):
    """prefix로 시작하는 모든 키를 삭제한다."""
    _db().remove(DATA.type.test(lambda t: t.startswith(prefix)))


# ─── 요청/응답 헬퍼 ───

def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidInput("JSON 객체 본문이 필요합니다")
    return data


def _require(data, field):
    if field not in data:
        raise InvalidInput(f"필드 '{field}'가 없습니다")
    return data[field]


def _not_found(message):
    return jsonify({"success": False, "error": "NotFound", "message": message}), 404


def _load_prover_param():
    data = db_get(PROVER_PARAM_KEY)
    return deserialize_prover_param(data) if data else None


def _load_verifier_param():
    data = db_get(VERIFIER_PARAM_KEY)
    return deserialize_verifier_param(data) if data else None


@vc_bp.errorhandler(VectorCommitmentError)
def handle_vc_error(e):
    """라이브러리 에러 → 400. 재시도할 일이 아니므로 그대로 돌려준다."""
    current_app.logger.info("request rejected: %s: %s", e.kind, e)
    return jsonify({"success": False, "error": e.kind, "message": str(e)}), 400


# ──────────────────────────────────────────────────────────────
# Setup
# ──────────────────────────────────────────────────────────────

@vc_bp.route("/health", methods=["GET"])
def health():
    """상태 확인"""
    initialized = db_get(PROVER_PARAM_KEY) is not None
    return jsonify({"status": "ok", "initialized": initialized})


@vc_bp.route("/setup", methods=["POST"])
def setup():
    """개발용 파라미터를 생성해 저장한다. 기존 커밋먼트는 모두 삭제된다."""
    # 본문이 없으면 설정의 기본값을 쓴다
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidInput("JSON 객체 본문이 필요합니다")
    capacity = data.get("capacity", config.capacity)
    seed = data.get("seed", config.srs_seed)

    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise InvalidInput(f"용량은 정수여야 합니다: {capacity!r}")
    if capacity > config.max_capacity:
        raise CapacityExceeded(
            f"용량 {capacity}가 허용 최대값 {config.max_capacity}를 넘습니다"
        )

    if config.dev_mode:
        current_app.logger.warning(
            "DEV_MODE: parameters are derived from a seed and are NOT a trusted setup"
        )

    pp, vp = generate(capacity, seed=seed)

    db_set(PROVER_PARAM_KEY, serialize_prover_param(pp))
    db_set(VERIFIER_PARAM_KEY, serialize_verifier_param(vp))
    # 파라미터가 바뀌면 이전 커밋먼트는 의미가 없다
    db_remove_prefix(COMMITMENT_PREFIX)

    current_app.logger.info("parameters generated: capacity=%d", capacity)
    return jsonify({"success": True, "capacity": capacity})


@vc_bp.route("/params", methods=["GET"])
def params():
    """저장된 파라미터를 반환한다."""
    prover = db_get(PROVER_PARAM_KEY)
    verifier = db_get(VERIFIER_PARAM_KEY)
    if prover is None or verifier is None:
        return _not_found("파라미터가 없습니다. /vc/setup을 먼저 호출하세요")
    check_compatible(
        deserialize_prover_param(prover), deserialize_verifier_param(verifier)
    )
    return jsonify({"prover": prover, "verifier": verifier})


# ──────────────────────────────────────────────────────────────
# Commit / Open
# ──────────────────────────────────────────────────────────────

@vc_bp.route("/commit", methods=["POST"])
def commit_vector():
    """벡터를 커밋하고 스냅샷을 key 아래 저장한다."""
    data = _json_body()
    key = str(_require(data, "key"))
    inputs = deserialize_fr_list(_require(data, "inputs"))

    pp = _load_prover_param()
    if pp is None:
        return _not_found("파라미터가 없습니다. /vc/setup을 먼저 호출하세요")

    commitment = commit(pp, inputs)

    db_set(COMMITMENT_PREFIX + key, {
        "inputs": serialize_fr_list(inputs),
        "commitment": serialize_g1(commitment),
    })

    return jsonify({
        "success": True,
        "key": key,
        "length": len(inputs),
        "commitment": point_to_hex(commitment),
    })


@vc_bp.route("/commitments/<key>", methods=["GET"])
def get_commitment(key):
    """저장된 커밋먼트를 조회한다."""
    stored = db_get(COMMITMENT_PREFIX + key)
    if stored is None:
        return _not_found(f"커밋먼트 '{key}'가 없습니다")

    commitment = deserialize_g1(stored["commitment"])
    return jsonify({
        "key": key,
        "length": len(stored["inputs"]),
        "commitment": point_to_hex(commitment),
        "display": g1_short(commitment),
    })


@vc_bp.route("/open", methods=["POST"])
def open_position():
    """저장된 스냅샷에서 position 자리의 witness를 만든다."""
    data = _json_body()
    key = str(_require(data, "key"))
    position = _require(data, "position")

    stored = db_get(COMMITMENT_PREFIX + key)
    if stored is None:
        return _not_found(f"커밋먼트 '{key}'가 없습니다")
    pp = _load_prover_param()
    if pp is None:
        return _not_found("파라미터가 없습니다. /vc/setup을 먼저 호출하세요")

    inputs = deserialize_fr_list(stored["inputs"])
    witness = create_witness(pp, inputs, position)

    return jsonify({
        "success": True,
        "key": key,
        "position": position,
        "value": serialize_fr(inputs[position]),
        "commitment": point_to_hex(deserialize_g1(stored["commitment"])),
        "witness": point_to_hex(witness),
    })


# ──────────────────────────────────────────────────────────────
# Verify
# ──────────────────────────────────────────────────────────────

@vc_bp.route("/verify", methods=["POST"])
def verify_opening():
    """(position, value, witness)를 커밋먼트에 대해 검증한다."""
    data = _json_body()
    commitment = point_from_hex(_require(data, "commitment"))
    witness = point_from_hex(_require(data, "witness"))
    value = deserialize_fr(_require(data, "value"))
    position = _require(data, "position")

    vp = _load_verifier_param()
    if vp is None:
        return _not_found("파라미터가 없습니다. /vc/setup을 먼저 호출하세요")

    result = verify(commitment, vp, value, position, witness)
    return jsonify({"success": True, "result": result})


@vc_bp.route("/clear", methods=["POST"])
def clear():
    """모든 벡터 커밋먼트 데이터를 삭제한다."""
    db_remove_prefix("vc.")
    return jsonify({"success": True})
